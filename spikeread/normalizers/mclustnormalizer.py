"""
Normalizer for MClust cluster files (.t)

A .t file holds the spike times of one cluster and nothing else. The
channel is named after the file.

"""

from pathlib import Path

import numpy as np

from spikeread.core.channel import UNKNOWN_UNIT
from spikeread.rawio.mclustrawsource import MClustRawSource

from .basenormalizer import BaseNormalizer, ChannelDescriptor


class MClustNormalizer(BaseNormalizer):
    name = "MClust"
    description = "MClust .t cluster file"
    formats = ["mclust_t"]
    source_class = MClustRawSource
    label_keys = ("filename",)

    def _resolve_channels(self, raw_source):
        # use the filename as label for the spike channel
        stem = Path(raw_source.filename).stem if raw_source.filename else ""
        label = self.resolve_label({"filename": stem} if stem else {}, 0)
        return [ChannelDescriptor(0, label, None, None, {})]

    def _emit_channels(self, raw_source, descriptors):
        (desc,) = descriptors
        timestamps = raw_source.timestamps.reshape(-1)
        # waveforms and units are unknown
        units = np.full(timestamps.size, UNKNOWN_UNIT, dtype="int64")
        yield self._build_channel(desc, [(timestamps, units, None)])
