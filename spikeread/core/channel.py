"""
This module defines :class:`Channel`, one logical source of spike events
(an electrode, a tetrode or a sorted unit) in a :class:`SpikeDataset`.

:class:`Channel` derives from :class:`object`.
"""

import numpy as np
import quantities as pq

# unit id given to spikes when the file does not carry spike sorting
UNKNOWN_UNIT = -1


def _frozen_copy(arr, dtype=None):
    arr = np.array(arr, dtype=dtype, copy=True)
    arr.setflags(write=False)
    return arr


class Channel:
    """
    Spike events of one channel.

    Parameters
    ----------
    label: str
        Human readable name of the channel
    timestamps: array-like (n_spikes,)
        Time of each spike, in sample ticks or in the native unit of the format
    units: array-like (n_spikes,) | None, default: None
        Sorted-cluster id of each spike. None means that all units are unknown
        and gives `UNKNOWN_UNIT` for every spike.
    waveform: array-like (n_leads, n_samples, n_spikes) | None, default: None
        Waveform snippet of each spike. None means that the format has no
        waveforms and gives a (0, 0, n_spikes) array.
    header: dict | None, default: None
        Raw per-channel header fields, passed through untouched.

    The arrays are copied and made read-only: a channel never shares memory
    with the raw source it was built from.

    Examples
    --------
    >>> chan = Channel("sig001a", [10, 20, 30], units=[1, 1, 2])
    >>> len(chan)
    3
    >>> chan.waveform.shape
    (0, 0, 3)

    """

    def __init__(self, label, timestamps, units=None, waveform=None, header=None):
        self.label = str(label)
        self.timestamps = _frozen_copy(timestamps)
        if self.timestamps.ndim == 0:
            self.timestamps = _frozen_copy(self.timestamps.reshape(1))
        n = self.timestamps.shape[0]

        if units is None:
            units = np.full(n, UNKNOWN_UNIT, dtype="int64")
        self.units = _frozen_copy(units, dtype="int64")

        if waveform is None:
            waveform = np.zeros((0, 0, n), dtype="float64")
        self.waveform = _frozen_copy(waveform)

        self.header = header

    def __len__(self):
        return self.timestamps.shape[0]

    def __repr__(self):
        return (
            f"<Channel {self.label!r}: {len(self)} spikes, "
            f"waveform {self.waveform.shape}, timestamps {self.timestamps.dtype}>"
        )

    @property
    def nb_leads(self):
        return self.waveform.shape[0] if self.waveform.ndim == 3 else 0

    @property
    def nb_samples(self):
        return self.waveform.shape[1] if self.waveform.ndim == 3 else 0

    @property
    def is_empty(self):
        return len(self) == 0

    @property
    def has_waveforms(self):
        return self.nb_leads > 0 and self.nb_samples > 0

    @property
    def has_units(self):
        return bool(np.any(self.units != UNKNOWN_UNIT))

    def times(self, sampling_rate):
        """
        Return the timestamps as a time quantity in seconds.

        Parameters
        ----------
        sampling_rate: float | quantities.Quantity
            Number of timestamp ticks per second. A plain number is taken in Hz.

        Returns
        -------
        times: quantities.Quantity
            spike times in s
        """
        if isinstance(sampling_rate, pq.Quantity):
            sampling_rate = sampling_rate.rescale("Hz")
        else:
            sampling_rate = sampling_rate * pq.Hz
        times = self.timestamps.astype("float64") / sampling_rate
        return times.rescale("s")

    def shape_errors(self):
        """
        List the shape invariants broken by this channel (empty when compliant).
        """
        errors = []
        if self.timestamps.ndim != 1:
            errors.append(f"timestamps must be 1D, got {self.timestamps.ndim}D")
        if self.units.ndim != 1:
            errors.append(f"units must be 1D, got {self.units.ndim}D")
        if self.waveform.ndim != 3:
            errors.append(f"waveform must be 3D (lead, time, spike), got {self.waveform.ndim}D")
        if errors:
            return errors

        n = self.timestamps.shape[0]
        if self.units.shape[0] != n:
            errors.append(f"{n} timestamps but {self.units.shape[0]} units")
        if self.waveform.shape[2] != n:
            errors.append(f"{n} timestamps but {self.waveform.shape[2]} waveforms")
        if n > 1 and np.any(self.timestamps[1:] < self.timestamps[:-1]):
            errors.append("timestamps are not sorted")
        return errors
