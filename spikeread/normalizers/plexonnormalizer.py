"""
Normalizers for the old Plexon data format (.plx)

PlexonNormalizer works on the data blocks of the whole file. The spike
blocks of all channels are multiplexed with event and continuous blocks;
they are grouped by the `Channel` field against the DSP channel table, so
every declared spike channel is present in the output, with or without
spikes. Each block has a 5 byte timestamp split in a 32 bit `TimeStamp`
and an `UpperByteOf5ByteTimestamp`.

Plexon2Normalizer reads through the Plexon SDK one pass per sorted unit,
with timestamps in seconds converted back to ticks of `ADFrequency`, and
merges the passes of a channel into one time ordered channel.

"""

import numpy as np

from spikeread.core.errors import MissingField
from spikeread.rawio.plexonrawsource import PlexonRawSource, Plexon2RawSource, SPIKE_BLOCK

from .basenormalizer import BaseNormalizer, ChannelDescriptor
from .selection import group_records
from .utils import reconstruct_split_timestamps, record_to_dict, resolve_field, seconds_to_samples


class PlexonNormalizer(BaseNormalizer):
    name = "Plexon"
    description = "Plexon .plx, multiplexed data blocks"
    formats = ["plexon_plx"]
    source_class = PlexonRawSource
    label_keys = ("Name",)
    spike_record_types = [SPIKE_BLOCK]

    def _resolve_channels(self, raw_source):
        descriptors = []
        for chan_index, chan_header in enumerate(raw_source.channel_headers):
            label = self.resolve_label(chan_header, chan_index)
            chan_id = int(resolve_field(chan_header, ("Channel",), what=f"id of channel {chan_index}"))
            header = record_to_dict(chan_header)
            descriptors.append(ChannelDescriptor(chan_index, label, chan_id, header, {}))
        return descriptors

    def _emit_channels(self, raw_source, descriptors):
        groups = group_records(
            raw_source.data_blocks,
            [desc.source_id for desc in descriptors],
            record_types=self.spike_record_types,
        )
        waveform_shape = raw_source.waveform_shape
        for desc, blocks in zip(descriptors, groups):
            timestamps = reconstruct_split_timestamps(blocks["TimeStamp"], blocks["UpperByteOf5ByteTimestamp"])
            # (spike, lead, sample) -> (lead, sample, spike)
            waveform = np.transpose(blocks["waveform"], (1, 2, 0))
            passes = [(timestamps, blocks["Unit"], waveform)]
            yield self._build_channel(
                desc, passes, waveform_shape=waveform_shape, timestamp_dtype="uint64", waveform_dtype="int16"
            )


class Plexon2Normalizer(BaseNormalizer):
    name = "Plexon SDK"
    description = "Plexon .plx read unit by unit with the Plexon SDK"
    formats = ["plexon_plx_v2"]
    source_class = Plexon2RawSource
    label_keys = ("Name",)

    def _resolve_channels(self, raw_source):
        hdr = raw_source.header
        sampling_rate = float(resolve_field(hdr, ("ADFrequency",), what="sampling rate"))
        wf_counts = np.atleast_2d(np.asarray(resolve_field(hdr, ("WFCounts",), what="waveform counts")))
        channel_headers = resolve_field(hdr, ("ChannelHeader",), what="channel headers")

        # column 0 of WFCounts does not belong to a channel
        nb_chan = wf_counts.shape[1] - 1
        descriptors = []
        for chan_index in range(nb_chan):
            if chan_index < len(channel_headers):
                chan_header = channel_headers[chan_index]
            else:
                chan_header = {}
            label = self.resolve_label(chan_header, chan_index)
            info = {
                "sampling_rate": sampling_rate,
                "unit_counts": wf_counts[:, chan_index + 1],
            }
            # channels are numbered from 1 in the SDK
            descriptors.append(ChannelDescriptor(chan_index, label, chan_index + 1, None, info))
        return descriptors

    def _emit_channels(self, raw_source, descriptors):
        try:
            nb_samples = int(resolve_field(raw_source.header, ("NumPointsWave",)))
            waveform_shape = (1, nb_samples)
        except MissingField:
            # unknown until a waveform is read
            waveform_shape = (0, 0)

        for desc in descriptors:
            passes = []
            for unit, count in enumerate(desc.info["unit_counts"]):
                if count == 0:
                    continue
                ts, wave = raw_source.read_unit_waves(desc.source_id, unit)
                timestamps = seconds_to_samples(ts, desc.info["sampling_rate"])
                units = np.full(timestamps.size, unit, dtype="int64")
                # (spike, sample) -> (lead, sample, spike)
                waveform = wave.T[np.newaxis, :, :]
                passes.append((timestamps, units, waveform))
            yield self._build_channel(
                desc, passes, waveform_shape=waveform_shape, timestamp_dtype="uint64", waveform_dtype="int16"
            )
