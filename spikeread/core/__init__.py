"""
:mod:`spikeread.core` provides the canonical objects produced by every
normalizer.

Classes:

.. autoclass:: Channel
.. autoclass:: SpikeDataset

Exceptions:

.. autoclass:: SpikeReadError
.. autoclass:: UnsupportedFormat
.. autoclass:: IncompatibleFormat
.. autoclass:: MissingField
.. autoclass:: ShapeInvariantViolation
.. autoclass:: ExternalDependencyUnavailable
"""

from spikeread.core.errors import (
    SpikeReadError,
    UnsupportedFormat,
    IncompatibleFormat,
    MissingField,
    ShapeInvariantViolation,
    ExternalDependencyUnavailable,
)
from spikeread.core.channel import Channel, UNKNOWN_UNIT
from spikeread.core.spikedataset import SpikeDataset, WAVEFORM_DIMORD

objectlist = [Channel, SpikeDataset]

__all__ = [
    "Channel",
    "SpikeDataset",
    "UNKNOWN_UNIT",
    "WAVEFORM_DIMORD",
    "SpikeReadError",
    "UnsupportedFormat",
    "IncompatibleFormat",
    "MissingField",
    "ShapeInvariantViolation",
    "ExternalDependencyUnavailable",
    "objectlist",
]
