"""
Merge of several read passes of one channel.

Some formats can only be read one sorted unit at a time: the spikes of a
channel then come in several passes that overlap in time. They are
concatenated and sorted by timestamp with one single permutation, applied
to the timestamps, the units and the spike axis of the waveforms alike.
"""

import numpy as np

from spikeread.core.errors import ShapeInvariantViolation


def _default_dtype(dtype):
    return "float64" if dtype is None else dtype


def merge_passes(passes, waveform_shape=(0, 0), timestamp_dtype=None, waveform_dtype=None):
    """
    Concatenate read passes and sort them by time.

    Parameters
    ----------
    passes: list[tuple]
        `(timestamps, units, waveform)` for each pass, with timestamps and
        units of shape (n,) and waveform of shape (nb_leads, nb_samples, n)
    waveform_shape: tuple, default: (0, 0)
        (nb_leads, nb_samples) to use when there is no pass at all
    timestamp_dtype: np.dtype | None, default: None
        dtype the timestamps are cast to; float64 when there is no pass and None is given
    waveform_dtype: np.dtype | None, default: None
        dtype the waveforms are cast to; float64 when there is no pass and None is given

    Returns
    -------
    timestamps: np.ndarray (n_total,)
    units: np.ndarray[int64] (n_total,)
    waveform: np.ndarray (nb_leads, nb_samples, n_total)

    The sort is stable: spikes with equal timestamps keep the order of their
    passes, so merging the same passes always gives the same result.

    >>> ts, units, wf = merge_passes([([5, 1], [9, 9], None), ([3], [7], None)])
    >>> ts.tolist(), units.tolist()
    ([1, 3, 5], [9, 7, 9])
    """
    all_timestamps = []
    all_units = []
    all_waveforms = []
    for i, (timestamps, units, waveform) in enumerate(passes):
        timestamps = np.asarray(timestamps, dtype=timestamp_dtype).reshape(-1)
        units = np.asarray(units, dtype="int64").reshape(-1)
        n = timestamps.shape[0]
        if waveform is None:
            waveform = np.zeros((0, 0, n), dtype=_default_dtype(waveform_dtype))
        waveform = np.asarray(waveform, dtype=waveform_dtype)
        if units.shape[0] != n or waveform.ndim != 3 or waveform.shape[2] != n:
            raise ShapeInvariantViolation(
                f"pass {i} has {n} timestamps, {units.shape[0]} units and waveform shape {waveform.shape}"
            )
        if all_waveforms and waveform.shape[:2] != all_waveforms[0].shape[:2]:
            raise ShapeInvariantViolation(
                f"pass {i} has waveforms of shape {waveform.shape[:2]}, "
                f"previous passes {all_waveforms[0].shape[:2]}"
            )
        all_timestamps.append(timestamps)
        all_units.append(units)
        all_waveforms.append(waveform)

    if len(all_timestamps) == 0:
        timestamps = np.array([], dtype=_default_dtype(timestamp_dtype))
        units = np.array([], dtype="int64")
        waveform = np.zeros(tuple(waveform_shape) + (0,), dtype=_default_dtype(waveform_dtype))
        return timestamps, units, waveform

    timestamps = np.concatenate(all_timestamps)
    units = np.concatenate(all_units)
    waveform = np.concatenate(all_waveforms, axis=2)

    order = np.argsort(timestamps, kind="stable")
    return timestamps[order], units[order], waveform[:, :, order]
