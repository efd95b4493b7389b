"""
Common tests for normalizers.

Every normalizer test class inherits from BaseTestNormalizer and
unittest.TestCase, sets `normalizerclass` and implements `make_sources()`.
"""

__test__ = False

from spikeread.normalizers import normalize
from spikeread.test.tools import assert_dataset_is_compliant, assert_same_dataset


class BaseTestNormalizer:
    """
    This class makes common tests for all normalizers: compliance of the
    output shape, determinism, dispatch by format identifier and copy
    semantics.

    """

    # all normalizer tests need to modify this:
    normalizerclass = None  # the normalizer class to be tested

    def make_sources(self):
        """Return a list of (format_id, raw_source) to test"""
        raise NotImplementedError

    def test_compliance(self):
        for format_id, raw_source in self.make_sources():
            dataset = self.normalizerclass(format_id=format_id).normalize(raw_source)
            assert_dataset_is_compliant(dataset)
            self.assertEqual(dataset.format_id, format_id)

    def test_normalize_twice_is_identical(self):
        for format_id, raw_source in self.make_sources():
            normalizer = self.normalizerclass(format_id=format_id)
            assert_same_dataset(normalizer.normalize(raw_source), normalizer.normalize(raw_source))

    def test_dispatch_by_format_id(self):
        for format_id, raw_source in self.make_sources():
            dataset1 = normalize(format_id, raw_source)
            dataset2 = self.normalizerclass(format_id=format_id).normalize(raw_source)
            assert_same_dataset(dataset1, dataset2)

    def test_output_is_read_only(self):
        for format_id, raw_source in self.make_sources():
            dataset = normalize(format_id, raw_source)
            for chan in dataset:
                for arr in (chan.timestamps, chan.units, chan.waveform):
                    self.assertFalse(arr.flags.writeable)

    def test_wrong_source_type(self):
        class NotASource:
            pass

        normalizer = self.normalizerclass()
        with self.assertRaises(TypeError):
            normalizer.normalize(NotASource())
