"""
This module defines :class:`SpikeDataset`, the container returned by every
normalizer: an ordered, read-only collection of :class:`Channel`.

:class:`SpikeDataset` derives from :class:`object`.
"""

from spikeread.core.channel import Channel
from spikeread.core.errors import ShapeInvariantViolation

# axis order of every channel waveform
WAVEFORM_DIMORD = "{chan}_lead_time_spike"


class SpikeDataset:
    """
    Ordered collection of spike channels read from one file.

    Parameters
    ----------
    channels: list[Channel]
        Channels in the order they were discovered in the source
    hdr: object | None, default: None
        Format specific header, carried through without interpretation
    format_id: str | None, default: None
        The format identifier the dataset was normalized from

    Channels can be accessed by position or by label:

    >>> ds = SpikeDataset([Channel("a", [1, 2]), Channel("b", [])])
    >>> ds.labels
    ['a', 'b']
    >>> len(ds["b"])
    0

    """

    dimord = WAVEFORM_DIMORD

    def __init__(self, channels, hdr=None, format_id=None):
        channels = tuple(channels)
        for chan in channels:
            if not isinstance(chan, Channel):
                raise TypeError(f"SpikeDataset can only contain Channel, not {type(chan)}")
        self._channels = channels
        self.hdr = hdr
        self.format_id = format_id

    @property
    def channels(self):
        return self._channels

    @property
    def labels(self):
        return [chan.label for chan in self._channels]

    def __len__(self):
        return len(self._channels)

    def __iter__(self):
        return iter(self._channels)

    def __getitem__(self, key):
        if isinstance(key, str):
            for chan in self._channels:
                if chan.label == key:
                    return chan
            raise KeyError(key)
        return self._channels[key]

    def __repr__(self):
        txt = f"SpikeDataset: {self.format_id}\n"
        txt += f"nb_channel: {len(self)}\n"
        for i, chan in enumerate(self._channels):
            txt += f"  {i}: {chan.label} ({len(chan)} spikes)\n"
        return txt

    def spike_count(self):
        """Total number of spikes over all channels"""
        return sum(len(chan) for chan in self._channels)

    def check_invariants(self):
        """
        Raise ShapeInvariantViolation on the first channel that breaks
        the shape contract.
        """
        for chan_index, chan in enumerate(self._channels):
            errors = chan.shape_errors()
            if errors:
                raise ShapeInvariantViolation("; ".join(errors), channel_index=chan_index, label=chan.label)

    def to_dict(self):
        """
        Return the dataset as a FieldTrip-like spike structure: a dict with
        one list entry per channel for `label`, `timestamp`, `waveform` and
        `unit`, plus `dimord` and `hdr`.
        """
        return {
            "label": [chan.label for chan in self._channels],
            "timestamp": [chan.timestamps for chan in self._channels],
            "waveform": [chan.waveform for chan in self._channels],
            "unit": [chan.units for chan in self._channels],
            "dimord": self.dimord,
            "hdr": self.hdr,
        }
