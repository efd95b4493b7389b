"""
Normalizer for the single channel spike files of Neuralynx Cheetah
(.nse, .nst, .ntt and .nts).

Each file is one channel, so there is no selection to do. The channel name
moved between header keys across Cheetah versions: `NLX_Base_Class_Name`
is tried first, then `AcqEntName`. Timestamps are in microseconds.
Timestamp files (.nts) have neither waveforms nor units.

"""

import numpy as np

from spikeread.core.channel import UNKNOWN_UNIT
from spikeread.core.errors import ShapeInvariantViolation
from spikeread.rawio.neuralynxrawsource import NeuralynxSpikeRawSource, NEURALYNX_LEADS

from .basenormalizer import BaseNormalizer, ChannelDescriptor


class NeuralynxNormalizer(BaseNormalizer):
    name = "Neuralynx"
    description = "Neuralynx Cheetah spike files"
    formats = ["neuralynx_nse", "neuralynx_nst", "neuralynx_ntt", "neuralynx_nts"]
    source_class = NeuralynxSpikeRawSource
    label_keys = ("NLX_Base_Class_Name", "AcqEntName")

    @property
    def nb_leads(self):
        ext = self.format_id.split("_")[-1]
        return NEURALYNX_LEADS[ext]

    def _resolve_channels(self, raw_source):
        label = self.resolve_label(raw_source.header, 0)
        return [ChannelDescriptor(0, label, None, None, {})]

    def _emit_channels(self, raw_source, descriptors):
        (desc,) = descriptors
        records = raw_source.records
        timestamps = records["timestamp"].astype("uint64")

        if self.nb_leads == 0:
            units = np.full(timestamps.size, UNKNOWN_UNIT, dtype="int64")
            passes = [(timestamps, units, None)]
            yield self._build_channel(desc, passes, timestamp_dtype="uint64")
            return

        samples = records["samples"]
        if samples.ndim == 2:
            # single electrode: (spike, sample) -> (spike, sample, 1)
            samples = samples[:, :, np.newaxis]
        if samples.shape[2] != self.nb_leads:
            raise ShapeInvariantViolation(
                f"{self.format_id} records must have {self.nb_leads} leads, got {samples.shape[2]}",
                channel_index=desc.index,
                label=desc.label,
            )
        # (spike, sample, lead) -> (lead, sample, spike)
        waveform = np.transpose(samples, (2, 1, 0))
        passes = [(timestamps, records["unit_id"], waveform)]
        yield self._build_channel(
            desc, passes, waveform_shape=waveform.shape[:2], timestamp_dtype="uint64", waveform_dtype="int16"
        )
