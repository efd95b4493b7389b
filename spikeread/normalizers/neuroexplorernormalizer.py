"""
Normalizer for NeuroExplorer files (.nex)

A .nex file holds variables of several kinds. Neuron variables (type 0,
timestamps only) and waveform variables (type 3, timestamps and
waveforms) become channels, in file order; the other kinds are skipped.
The file has no spike sorting: units are unknown.

"""

import numpy as np

from spikeread.core.channel import UNKNOWN_UNIT
from spikeread.core.errors import ShapeInvariantViolation
from spikeread.rawio.neuroexplorerrawsource import NexRawSource, NEURON_VARIABLE, WAVEFORM_VARIABLE

from .basenormalizer import BaseNormalizer, ChannelDescriptor
from .selection import spike_bearing_indexes
from .utils import record_to_dict


class NeuroExplorerNormalizer(BaseNormalizer):
    name = "NeuroExplorer"
    description = "NeuroExplorer .nex"
    formats = ["plexon_nex"]
    source_class = NexRawSource
    label_keys = ("Name",)
    spike_record_types = [NEURON_VARIABLE, WAVEFORM_VARIABLE]

    def _resolve_channels(self, raw_source):
        var_headers = raw_source.var_headers
        descriptors = []
        indexes = spike_bearing_indexes(var_headers["Type"], self.spike_record_types)
        for chan_index, var_index in enumerate(indexes):
            var_header = var_headers[var_index]
            label = self.resolve_label(var_header, chan_index)
            header = record_to_dict(var_header)
            if header["Type"] == WAVEFORM_VARIABLE:
                waveform_shape = (1, int(header["NPointsWave"]))
            else:
                waveform_shape = (0, 0)
            info = {"type": header["Type"], "waveform_shape": waveform_shape}
            descriptors.append(ChannelDescriptor(chan_index, label, var_index, header, info))
        return descriptors

    def _emit_channels(self, raw_source, descriptors):
        for desc in descriptors:
            timestamps, waveforms = raw_source.read_variable(desc.source_id)
            timestamps = timestamps.reshape(-1)
            units = np.full(timestamps.size, UNKNOWN_UNIT, dtype="int64")
            waveform_shape = desc.info["waveform_shape"]
            if desc.info["type"] != WAVEFORM_VARIABLE:
                waveform = None
            elif waveforms is None:
                # declared with waveforms but none stored
                if timestamps.size > 0:
                    raise ShapeInvariantViolation(
                        f"waveform variable has {timestamps.size} spikes but no waveform",
                        channel_index=desc.index,
                        label=desc.label,
                    )
                waveform = np.zeros(waveform_shape + (0,), dtype="int16")
            else:
                # (spike, sample) -> (lead, sample, spike)
                waveform = waveforms.T[np.newaxis, :, :]
            passes = [(timestamps, units, waveform)]
            yield self._build_channel(desc, passes, waveform_shape=waveform_shape)
