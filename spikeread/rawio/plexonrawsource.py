"""
Raw sources for the old Plexon data format (.plx).

Two flavours exist:
  * PlexonRawSource: the data block headers of the whole file are parsed
    at once. Spikes of all channels are multiplexed in a single stream of
    data blocks, tagged by `Type` (1 = spike and waveform, 4 = event,
    5 = continuous) and by `Channel`.
  * Plexon2RawSource: spikes are read one channel and one sorted unit at a
    time through the Plexon SDK (`plx_waves_v`), which gives timestamps in
    seconds. The SDK is an optional backend given to the constructor.

The dtypes below follow the C structs of the Plexon header file, limited to
the fields needed downstream.

"""

import numpy as np

from .baserawsource import BaseRawSource

# data block types
SPIKE_BLOCK = 1
EVENT_BLOCK = 4
CONTINUOUS_BLOCK = 5

DspChannelHeader = [
    ("Name", "S32"),
    ("SIGName", "S32"),
    ("Channel", "int32"),
    ("WFRate", "int32"),
    ("SIG", "int32"),
    ("Ref", "int32"),
    ("Gain", "int32"),
    ("Filter", "int32"),
    ("Threshold", "int32"),
    ("Method", "int32"),
    ("NUnits", "int32"),
]

DataBlockHeader = [
    ("Type", "uint16"),
    ("UpperByteOf5ByteTimestamp", "uint16"),
    ("TimeStamp", "uint32"),
    ("Channel", "uint16"),
    ("Unit", "uint16"),
    ("NumberOfWaveforms", "uint16"),
    ("NumberOfWordsInWaveform", "uint16"),
]


def make_data_block_dtype(nb_leads, nb_samples):
    """
    Return the dtype of decoded data blocks: the block header followed by
    the waveform words, shape (nb_leads, nb_samples).
    Blocks that do not carry a waveform keep zeros there.
    """
    return np.dtype(DataBlockHeader + [("waveform", "int16", (nb_leads, nb_samples))])


class PlexonRawSource(BaseRawSource):
    """
    Decoded content of a .plx file.

    Parameters
    ----------
    filename: str
        The .plx file the content was decoded from
    header: dict
        Global header (`ADFrequency`, `NumPointsWave`, `Trodalness`, ...)
    channel_headers: np.ndarray
        DSP (spike) channel headers, dtype `DspChannelHeader`. This is the
        channel table: one spike channel per entry, data or not.
    data_blocks: np.ndarray
        All data blocks of the file, dtype from `make_data_block_dtype()`

    """

    name = "Plexon"
    description = "Plexon .plx file, data blocks decoded in one pass"

    def __init__(self, filename="", header=None, channel_headers=None, data_blocks=None):
        BaseRawSource.__init__(self, header=header)
        self.filename = filename
        if channel_headers is None:
            channel_headers = np.array([], dtype=DspChannelHeader)
        if data_blocks is None:
            data_blocks = np.array([], dtype=make_data_block_dtype(1, 0))
        self.channel_headers = channel_headers
        self.data_blocks = data_blocks

    def _source_name(self):
        return self.filename

    @property
    def waveform_shape(self):
        """(nb_leads, nb_samples) of the spike waveforms of this file"""
        return self.data_blocks.dtype["waveform"].shape


class Plexon2RawSource(BaseRawSource):
    """
    .plx file read channel by channel and unit by unit with the Plexon SDK.

    Parameters
    ----------
    filename: str
        The .plx file
    header: dict
        Header as given by the SDK, with `ADFrequency`, `WFCounts`
        (array of shape (nb_unit, nb_channel + 1), column 0 unused)
        and `ChannelHeader` (list of dict with a `Name`)
    backend: object
        Plexon SDK wrapper with a `plx_waves_v(filename, channel, unit)`
        method returning `(n, npw, ts, wave)`: number of waveforms, number
        of points per waveform, timestamps in seconds and waveforms with
        shape (n, npw).

    """

    name = "Plexon SDK"
    description = "Plexon .plx file read with the Plexon SDK"
    required_backend = "plexon"

    def __init__(self, filename="", header=None, backend=None):
        BaseRawSource.__init__(self, header=header, backend=backend)
        self.filename = filename

    def _source_name(self):
        return self.filename

    def read_unit_waves(self, channel, unit):
        """
        Read all spikes of one sorted unit of one channel.

        Parameters
        ----------
        channel: int
            1-based channel number
        unit: int
            0 is the unsorted unit, 1 to 4 are sorted units

        Returns
        -------
        ts: np.ndarray (n,)
            timestamps in seconds
        wave: np.ndarray (n, npw)
            waveforms
        """
        self.check_backend()
        n, npw, ts, wave = self.backend.plx_waves_v(self.filename, channel, unit)
        ts = np.asarray(ts, dtype="float64").reshape(-1)
        wave = np.asarray(wave).reshape(int(n), int(npw))
        self.logger.debug(f"read {n} waveforms of {npw} points for channel {channel} unit {unit}")
        return ts, wave
