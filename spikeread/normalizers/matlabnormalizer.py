"""
Normalizer for a spike structure stored in a MATLAB file.

The structure already has one entry per channel; it is checked and brought
to the canonical shape: missing units become unknown, missing waveforms
become (0, 0, n), NaN unit ids become unknown, a waveform stored without its
lead axis gets one, and every channel is sorted by time.
"""

import numpy as np

from spikeread.core.channel import UNKNOWN_UNIT
from spikeread.core.errors import MissingField, ShapeInvariantViolation
from spikeread.rawio.matlabrawsource import MatlabRawSource

from .basenormalizer import BaseNormalizer, ChannelDescriptor
from .utils import resolve_field


def _per_channel(values, nb_chan):
    if nb_chan == 1 and isinstance(values, np.ndarray) and values.dtype != object:
        # a single channel saved without its cell array
        return [values]
    return list(values)


def _optional_list(spike, key, nb_chan):
    try:
        values = resolve_field(spike, (key,))
    except MissingField:
        return [None] * nb_chan
    values = _per_channel(values, nb_chan)
    return values + [None] * (nb_chan - len(values))


def _as_units(unit, nb_spike):
    if unit is None or np.size(unit) == 0:
        return np.full(nb_spike, UNKNOWN_UNIT, dtype="int64")
    unit = np.array(unit, dtype="float64").reshape(-1)
    unit[np.isnan(unit)] = UNKNOWN_UNIT
    return unit.astype("int64")


def _as_waveform(waveform):
    if waveform is None:
        return None
    waveform = np.asarray(waveform)
    if waveform.ndim == 3:
        return waveform
    if waveform.ndim == 2 and waveform.size > 0:
        # lead axis squeezed when saved: (sample, spike) -> (1, sample, spike)
        return waveform[np.newaxis, :, :]
    # unknown
    return None


class MatlabNormalizer(BaseNormalizer):
    name = "MATLAB"
    description = "MATLAB spike structure"
    formats = ["matlab"]
    source_class = MatlabRawSource
    label_keys = ("label",)

    def _resolve_channels(self, raw_source):
        spike = raw_source.spike
        labels = resolve_field(spike, self.label_keys, what="channel labels")
        if isinstance(labels, str):
            labels = [labels]
        labels = list(labels)
        timestamps = resolve_field(spike, ("timestamp",), what="spike timestamps")
        timestamps = _per_channel(timestamps, len(labels))
        if len(timestamps) != len(labels):
            raise ShapeInvariantViolation(f"{len(labels)} labels but {len(timestamps)} timestamp arrays")

        nb_chan = len(labels)
        units = _optional_list(spike, "unit", nb_chan)
        waveforms = _optional_list(spike, "waveform", nb_chan)
        descriptors = []
        for chan_index, label in enumerate(labels):
            info = {
                "timestamps": timestamps[chan_index],
                "units": units[chan_index],
                "waveform": waveforms[chan_index],
            }
            descriptors.append(ChannelDescriptor(chan_index, str(label), chan_index, None, info))
        return descriptors

    def _emit_channels(self, raw_source, descriptors):
        for desc in descriptors:
            timestamps = np.asarray(desc.info["timestamps"]).reshape(-1)
            units = _as_units(desc.info["units"], timestamps.size)
            waveform = _as_waveform(desc.info["waveform"])
            yield self._build_channel(desc, [(timestamps, units, waveform)])
