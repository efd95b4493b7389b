"""
Tests of spikeread.normalizers.utils
"""

import unittest

import numpy as np
from numpy.testing import assert_array_equal
import quantities as pq

from spikeread.core.errors import MissingField
from spikeread.normalizers.utils import (
    decode_name,
    reconstruct_split_timestamps,
    record_to_dict,
    resolve_field,
    round_half_away_from_zero,
    seconds_to_samples,
)


class TestResolveField(unittest.TestCase):
    def test_first_candidate_wins(self):
        header = {"NLX_Base_Class_Name": "TT1", "AcqEntName": "TT1_acq"}
        value = resolve_field(header, ("NLX_Base_Class_Name", "AcqEntName"))
        self.assertEqual(value, "TT1")

    def test_fallback_to_legacy_key(self):
        header = {"AcqEntName": "TT1_acq"}
        value = resolve_field(header, ("NLX_Base_Class_Name", "AcqEntName"))
        self.assertEqual(value, "TT1_acq")

    def test_empty_value_is_still_present(self):
        header = {"NLX_Base_Class_Name": "", "AcqEntName": "TT1"}
        self.assertEqual(resolve_field(header, ("NLX_Base_Class_Name", "AcqEntName")), "")

    def test_missing_raises(self):
        with self.assertRaises(MissingField) as cm:
            resolve_field({"Other": 1}, ("NLX_Base_Class_Name", "AcqEntName"), what="label")
        self.assertEqual(cm.exception.candidate_keys, ("NLX_Base_Class_Name", "AcqEntName"))
        self.assertIn("label", str(cm.exception))
        self.assertIn("AcqEntName", str(cm.exception))

    def test_missing_is_a_key_error(self):
        self.assertRaises(KeyError, resolve_field, {}, ("Name",))

    def test_single_key_as_string(self):
        self.assertEqual(resolve_field({"Name": "a"}, "Name"), "a")

    def test_structured_record(self):
        rec = np.zeros(1, dtype=[("Name", "S8"), ("Channel", "int32")])[0]
        rec["Channel"] = 4
        self.assertEqual(resolve_field(rec, ("Channel",)), 4)
        self.assertRaises(MissingField, resolve_field, rec, ("Unit",))


class TestDecodeName(unittest.TestCase):
    def test_decode(self):
        self.assertEqual(decode_name(b"sig001\x00\x00"), "sig001")
        self.assertEqual(decode_name(b"sig002   "), "sig002")
        self.assertEqual(decode_name(np.bytes_(b"elec\x03")), "elec")
        self.assertEqual(decode_name("  leading kept"), "  leading kept")

    def test_record_to_dict(self):
        rec = np.zeros(1, dtype=[("Name", "S8"), ("Channel", "int32")])[0]
        rec["Name"] = b"sig1"
        rec["Channel"] = 2
        info = record_to_dict(rec)
        self.assertEqual(info, {"Name": "sig1", "Channel": 2})
        self.assertIsInstance(info["Channel"], int)


class TestSplitTimestamps(unittest.TestCase):
    def test_carry(self):
        self.assertEqual(reconstruct_split_timestamps(4294967295, 1), 8589934591)

    def test_arrays(self):
        low = np.array([0, 5, 4294967295], dtype="uint32")
        high = np.array([0, 1, 255], dtype="uint16")
        ts = reconstruct_split_timestamps(low, high)
        self.assertEqual(ts.dtype, np.dtype("uint64"))
        assert_array_equal(ts, np.array([0, 2**32 + 5, 255 * 2**32 + 4294967295], dtype="uint64"))

    def test_no_precision_loss(self):
        ts = reconstruct_split_timestamps(1, 2**31)
        self.assertEqual(int(ts), 2**63 + 1)

    def test_empty(self):
        ts = reconstruct_split_timestamps(np.array([], dtype="uint32"), np.array([], dtype="uint16"))
        self.assertEqual(ts.shape, (0,))
        self.assertEqual(ts.dtype, np.dtype("uint64"))

    def test_bad_inputs(self):
        self.assertRaises(ValueError, reconstruct_split_timestamps, -1, 0)
        self.assertRaises(ValueError, reconstruct_split_timestamps, 2**32, 0)
        self.assertRaises(ValueError, reconstruct_split_timestamps, 0, 2**32)
        self.assertRaises(ValueError, reconstruct_split_timestamps, [1, 2], [1])
        self.assertRaises(ValueError, reconstruct_split_timestamps, 1.5, 0)


class TestSecondsToSamples(unittest.TestCase):
    def test_exact(self):
        self.assertEqual(seconds_to_samples(1.5, 1000), 1500)

    def test_half_rounds_up(self):
        self.assertEqual(seconds_to_samples(0.0005, 1000), 1)
        self.assertEqual(seconds_to_samples(0.0025, 1000), 3)

    def test_round_half_away_from_zero(self):
        assert_array_equal(
            round_half_away_from_zero([0.5, 1.5, 2.5, -0.5, -2.5, 0.49999999999999994, 2.4]),
            [1.0, 2.0, 3.0, -1.0, -3.0, 0.0, 2.0],
        )

    def test_dtype(self):
        samples = seconds_to_samples(np.array([0.001, 0.002]), 40000)
        self.assertEqual(samples.dtype, np.dtype("uint64"))
        assert_array_equal(samples, [40, 80])

    def test_quantities(self):
        samples = seconds_to_samples(np.array([1.0, 2.5]) * pq.ms, 1 * pq.kHz)
        assert_array_equal(samples, [1, 3])

    def test_no_wrap(self):
        self.assertRaises(ValueError, seconds_to_samples, -1.0, 1000)
        self.assertRaises(ValueError, seconds_to_samples, np.nan, 1000)
        self.assertRaises(ValueError, seconds_to_samples, 1e30, 1000)
        self.assertRaises(ValueError, seconds_to_samples, 1.0, 0)

    def test_empty(self):
        samples = seconds_to_samples(np.array([]), 1000)
        self.assertEqual(samples.shape, (0,))
        self.assertEqual(samples.dtype, np.dtype("uint64"))


if __name__ == "__main__":
    unittest.main()
