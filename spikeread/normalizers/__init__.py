"""
:mod:`spikeread.normalizers` turns raw sources into :class:`SpikeDataset`.

:attr:`spikeread.normalizers.normalizerlist` provides the list of
normalizer classes; the format table is built from their `formats`.

Functions:

.. autofunction:: spikeread.normalizers.normalize

.. autofunction:: spikeread.normalizers.get_normalizer


Classes:

* :attr:`MatlabNormalizer`
* :attr:`MClustNormalizer`
* :attr:`NeuralynxNormalizer`
* :attr:`NeuroExplorerNormalizer`
* :attr:`NeuroshareNormalizer`
* :attr:`NeurosimNormalizer`
* :attr:`PlexonNormalizer`
* :attr:`Plexon2Normalizer`

Usage:

    >>> from spikeread.normalizers import normalize
    >>> dataset = normalize('plexon_plx', raw_source)
    >>> dataset.labels

"""

from spikeread.core.errors import IncompatibleFormat, UnsupportedFormat

from spikeread.normalizers.matlabnormalizer import MatlabNormalizer
from spikeread.normalizers.mclustnormalizer import MClustNormalizer
from spikeread.normalizers.neuralynxnormalizer import NeuralynxNormalizer
from spikeread.normalizers.neuroexplorernormalizer import NeuroExplorerNormalizer
from spikeread.normalizers.neurosharenormalizer import NeuroshareNormalizer
from spikeread.normalizers.neurosimnormalizer import NeurosimNormalizer
from spikeread.normalizers.plexonnormalizer import PlexonNormalizer, Plexon2Normalizer

normalizerlist = [
    MatlabNormalizer,
    MClustNormalizer,
    NeuralynxNormalizer,
    NeuroExplorerNormalizer,
    NeuroshareNormalizer,
    NeurosimNormalizer,
    PlexonNormalizer,
    Plexon2Normalizer,
]

# these files only contain continuous data
continuous_formats = [
    "neuralynx_ncs",
    "plexon_ddt",
]


def _build_format_table(normalizers):
    table = {}
    for normalizer_class in normalizers:
        for format_id in normalizer_class.formats:
            if format_id in table:
                raise ValueError(
                    f"format {format_id} is handled by both {table[format_id].__name__} "
                    f"and {normalizer_class.__name__}"
                )
            table[format_id] = normalizer_class
    return table


format_table = _build_format_table(normalizerlist)


def get_normalizer(format_id):
    """
    Return the normalizer class of a format identifier.

    Parameters
    ----------
    format_id: str
        e.g. 'plexon_plx', 'neuralynx_nse'

    Returns
    -------
    normalizer_class: type[BaseNormalizer]

    Raises
    ------
    IncompatibleFormat
        For formats that only hold continuous data
    UnsupportedFormat
        For formats without a normalizer
    """
    if format_id in continuous_formats:
        raise IncompatibleFormat(format_id)
    if format_id not in format_table:
        raise UnsupportedFormat(format_id)
    return format_table[format_id]


def normalize(format_id, raw_source, **kargs):
    """
    Normalize a raw source into a SpikeDataset.

    Parameters
    ----------
    format_id: str
        The format of the raw source. It is never guessed here.
    raw_source: BaseRawSource
        Decoded content of the file
    **kargs:
        Passed to the normalizer constructor, e.g. `missing_label='placeholder'`

    Returns
    -------
    dataset: SpikeDataset
    """
    normalizer_class = get_normalizer(format_id)
    normalizer = normalizer_class(format_id=format_id, **kargs)
    return normalizer.normalize(raw_source)


# name of the historical entry point
read_spike = normalize
