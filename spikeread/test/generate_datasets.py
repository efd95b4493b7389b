"""
Generate small synthetic raw sources for every supported format, as an
external decoder would hand them over.
"""

import numpy as np

from spikeread.rawio.matlabrawsource import MatlabRawSource
from spikeread.rawio.mclustrawsource import MClustRawSource
from spikeread.rawio.neuralynxrawsource import NeuralynxSpikeRawSource, get_spike_record_dtype
from spikeread.rawio.neuroexplorerrawsource import NexRawSource, VarHeader
from spikeread.rawio.neurosharerawsource import NeuroshareRawSource
from spikeread.rawio.neurosimrawsource import NeurosimRawSource, SpikeRecord
from spikeread.rawio.plexonrawsource import (
    PlexonRawSource,
    Plexon2RawSource,
    DspChannelHeader,
    make_data_block_dtype,
    SPIKE_BLOCK,
    EVENT_BLOCK,
    CONTINUOUS_BLOCK,
)


def fake_waveforms(nb_spike, nb_lead, nb_sample, seed=0):
    rng = np.random.RandomState(seed)
    return rng.randint(-2000, 2000, size=(nb_spike, nb_lead, nb_sample)).astype("int16")


def generate_plexon_source(nb_sample=32):
    """
    Three DSP channels (ids 1, 2, 3). Channel 2 has no spike at all.
    Spike blocks are interleaved with event and continuous blocks on the
    same channel ids, and channel 3 crosses the 32 bit timestamp boundary.
    """
    channel_headers = np.zeros(3, dtype=DspChannelHeader)
    channel_headers["Name"] = [b"sig001\x00\x00", b"sig002  ", b"sig003"]
    channel_headers["Channel"] = [1, 2, 3]
    channel_headers["NUnits"] = [2, 0, 1]

    # (Type, Upper, TimeStamp, Channel, Unit)
    rows = [
        (SPIKE_BLOCK, 0, 100, 1, 1),
        (CONTINUOUS_BLOCK, 0, 100, 1, 0),
        (SPIKE_BLOCK, 0, 4294967295, 3, 1),
        (EVENT_BLOCK, 0, 150, 2, 0),
        (SPIKE_BLOCK, 0, 250, 1, 2),
        (CONTINUOUS_BLOCK, 0, 300, 2, 0),
        (SPIKE_BLOCK, 1, 5, 3, 1),
        (SPIKE_BLOCK, 0, 900, 1, 0),
    ]
    data_blocks = np.zeros(len(rows), dtype=make_data_block_dtype(1, nb_sample))
    for i, (bl_type, upper, ts, chan, unit) in enumerate(rows):
        data_blocks["Type"][i] = bl_type
        data_blocks["UpperByteOf5ByteTimestamp"][i] = upper
        data_blocks["TimeStamp"][i] = ts
        data_blocks["Channel"][i] = chan
        data_blocks["Unit"][i] = unit
        if bl_type == SPIKE_BLOCK:
            data_blocks["NumberOfWaveforms"][i] = 1
            data_blocks["NumberOfWordsInWaveform"][i] = nb_sample
    is_spike = data_blocks["Type"] == SPIKE_BLOCK
    data_blocks["waveform"][is_spike] = fake_waveforms(int(is_spike.sum()), 1, nb_sample)

    header = {"Version": 106, "ADFrequency": 40000, "NumPointsWave": nb_sample, "Trodalness": 1}
    return PlexonRawSource(
        filename="fake.plx", header=header, channel_headers=channel_headers, data_blocks=data_blocks
    )


class FakePlexonSDK:
    """
    Stand-in for the Plexon SDK: serves the spikes of (channel, unit) pairs
    and records the calls it gets.
    """

    def __init__(self, units, nb_sample=8):
        # units: {(channel, unit): timestamps in s}
        self.units = units
        self.nb_sample = nb_sample
        self.calls = []

    def plx_waves_v(self, filename, channel, unit):
        self.calls.append((channel, unit))
        ts = np.asarray(self.units.get((channel, unit), []), dtype="float64")
        n = ts.size
        # waveform value encodes unit and spike order so permutations can be checked
        wave = np.zeros((n, self.nb_sample), dtype="int16")
        wave[:] = (unit * 100 + np.arange(n))[:, np.newaxis]
        return n, self.nb_sample, ts, wave


def generate_plexon2_source(backend=None, nb_sample=8):
    """
    Two channels: channel 1 has units 0 and 2 whose spikes interleave in
    time, channel 2 is empty.
    """
    units = {
        (1, 0): [0.005, 0.001],
        (1, 2): [0.003],
    }
    if backend is None:
        backend = FakePlexonSDK(units, nb_sample=nb_sample)
    wf_counts = np.zeros((5, 3), dtype="int32")
    wf_counts[0, 1] = 2
    wf_counts[2, 1] = 1
    header = {
        "ADFrequency": 1000,
        "NumPointsWave": nb_sample,
        "WFCounts": wf_counts,
        "ChannelHeader": [{"Name": "sig001"}, {"Name": "sig002"}],
    }
    return Plexon2RawSource(filename="fake.plx", header=header, backend=backend)


def generate_nex_source(variable_types=(0, 3, 1), nb_sample=16):
    """
    One variable per entry of `variable_types`, all with 3 timestamps,
    unsorted for the waveform variables.
    """
    var_headers = np.zeros(len(variable_types), dtype=VarHeader)
    variables = []
    for i, var_type in enumerate(variable_types):
        var_headers["Type"][i] = var_type
        var_headers["Name"][i] = f"var{i}".encode()
        var_headers["Count"][i] = 3
        var_headers["WFrequency"][i] = 40000.0
        timestamps = np.array([30, 10, 20], dtype="int32")
        if var_type == 3:
            var_headers["NPointsWave"][i] = nb_sample
            waveforms = fake_waveforms(3, 1, nb_sample, seed=i)[:, 0, :]
        else:
            waveforms = None
        variables.append((timestamps, waveforms))
    header = {"version": 104, "comment": "", "freq": 40000.0, "tbeg": 0, "tend": 100}
    return NexRawSource(filename="fake.nex", header=header, var_headers=var_headers, variables=variables)


def generate_neuralynx_source(ext="ntt", nb_spike=5, header=None):
    dtype = get_spike_record_dtype(ext)
    records = np.zeros(nb_spike, dtype=dtype)
    records["timestamp"] = np.arange(nb_spike, dtype="uint64") * 1000 + 2**33
    if ext != "nts":
        records["unit_id"] = np.arange(nb_spike) % 3
        shape = records["samples"].shape
        rng = np.random.RandomState(1)
        records["samples"] = rng.randint(-500, 500, size=shape).astype("int16")
    if header is None:
        header = {"AcqEntName": "TT1", "SamplingFrequency": 32000.0}
    return NeuralynxSpikeRawSource(filename=f"TT1.{ext}", header=header, records=records)


def generate_mclust_source(filename="/data/session/TT2_03.t"):
    header = ["%%BEGINHEADER", "% Program: MClust", "%%ENDHEADER"]
    timestamps = np.array([12, 30, 31, 500], dtype="uint32")
    return MClustRawSource(filename=filename, header=header, timestamps=timestamps)


class FakeNeuroshare:
    def __init__(self, segments):
        # segments: {entity_index: (timestamps, waveforms, unit_ids)}
        self.segments = segments

    def read_segment(self, filename, entity_index):
        return self.segments[entity_index]


def generate_neuroshare_source(backend=None):
    entityinfo = [
        {"EntityLabel": "analog 1", "EntityType": 2},
        {"EntityLabel": "elec 1", "EntityType": 3},
        {"EntityLabel": "event", "EntityType": 1},
        {"EntityLabel": "elec 2", "EntityType": 3},
    ]
    if backend is None:
        wf = fake_waveforms(3, 1, 10)[:, 0, :]
        segments = {
            1: (np.array([0.3, 0.1, 0.2]), wf, np.array([1, 2, 1])),
            3: (np.array([]), np.zeros((0, 10), dtype="int16"), np.array([], dtype="int64")),
        }
        backend = FakeNeuroshare(segments)
    return NeuroshareRawSource(filename="fake.mcd", header={"entityinfo": entityinfo}, backend=backend)


def generate_neurosim_source():
    records = np.array(
        [(1.5, 7), (2.0, 3), (2.5, 7), (0.5, 3), (3.0, 12)],
        dtype=SpikeRecord,
    )
    return NeurosimRawSource(filename="spikes", header={"version": "1"}, records=records)


def generate_matlab_source():
    spike = {
        "label": ["unit1", "unit2"],
        "timestamp": [np.array([30, 10, 20], dtype="uint64"), np.array([], dtype="uint64")],
        "waveform": [np.arange(2 * 4 * 3).reshape(2, 4, 3), np.zeros((2, 4, 0))],
        "unit": [np.array([1.0, np.nan, 2.0]), np.array([])],
        "hdr": {"orig": "fieldtrip"},
    }
    return MatlabRawSource(filename="spike.mat", spike=spike)
