"""
Normalizer for files read with the neuroshare library.

Every segment entity becomes one channel, labelled with its
`EntityLabel`. Timestamps are in seconds, as given by the library.
"""

import numpy as np

from spikeread.rawio.neurosharerawsource import NeuroshareRawSource

from .basenormalizer import BaseNormalizer, ChannelDescriptor


class NeuroshareNormalizer(BaseNormalizer):
    name = "Neuroshare"
    description = "file read with the neuroshare library"
    formats = ["neuroshare"]
    source_class = NeuroshareRawSource
    label_keys = ("EntityLabel",)

    def _resolve_channels(self, raw_source):
        entityinfo = raw_source.header.get("entityinfo", [])
        descriptors = []
        for chan_index, entity_index in enumerate(raw_source.segment_entities()):
            label = self.resolve_label(entityinfo[entity_index], chan_index)
            descriptors.append(ChannelDescriptor(chan_index, label, entity_index, None, {}))
        return descriptors

    def _emit_channels(self, raw_source, descriptors):
        for desc in descriptors:
            timestamps, waveforms, unit_ids = raw_source.read_segment(desc.source_id)
            timestamps = timestamps.astype("float64").reshape(-1)
            if waveforms.ndim == 2:
                # (spike, sample) -> (spike, sample, 1)
                waveforms = waveforms[:, :, np.newaxis]
            if waveforms.ndim == 3:
                # (spike, sample, lead) -> (lead, sample, spike)
                waveform = np.transpose(waveforms, (2, 1, 0))
                waveform_shape = waveform.shape[:2]
            else:
                waveform = None
                waveform_shape = (0, 0)
            passes = [(timestamps, unit_ids.reshape(-1), waveform)]
            yield self._build_channel(desc, passes, waveform_shape=waveform_shape, timestamp_dtype="float64")
