"""
Normalizer for the spikes of the NeuroSim simulator.

All spikes of the simulation are in one stream of (time, neuron) records.
There is no channel table: one channel is made per neuron, in the order
the neurons first fire, labelled with the neuron number. Times stay in ms.
"""

import numpy as np

from spikeread.core.channel import UNKNOWN_UNIT
from spikeread.rawio.neurosimrawsource import NeurosimRawSource

from .basenormalizer import BaseNormalizer, ChannelDescriptor
from .selection import group_records


class NeurosimNormalizer(BaseNormalizer):
    name = "NeuroSim"
    description = "NeuroSim spikes"
    formats = ["neurosim_spikes", "neurosim_ds"]
    source_class = NeurosimRawSource

    def _resolve_channels(self, raw_source):
        neurons = raw_source.records["neuron"]
        ids, first_index = np.unique(neurons, return_index=True)
        ids = ids[np.argsort(first_index, kind="stable")]
        return [ChannelDescriptor(i, str(neuron), neuron, None, {}) for i, neuron in enumerate(ids)]

    def _emit_channels(self, raw_source, descriptors):
        groups = group_records(raw_source.records, [desc.source_id for desc in descriptors], channel_field="neuron")
        for desc, records in zip(descriptors, groups):
            timestamps = records["time"]
            units = np.full(timestamps.size, UNKNOWN_UNIT, dtype="int64")
            yield self._build_channel(desc, [(timestamps, units, None)], timestamp_dtype="float64")
