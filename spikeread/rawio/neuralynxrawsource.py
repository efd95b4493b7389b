"""
Raw source for the single channel spike files of Neuralynx Cheetah:
  * .nse single electrode
  * .nst stereotrode
  * .ntt tetrode
  * .nts timestamps only

One file holds one channel. The text header is decoded into a dict; its
keys changed across Cheetah versions: the channel name is in
`NLX_Base_Class_Name` in old files and in `AcqEntName` in recent ones.

"""

import numpy as np

from .baserawsource import BaseRawSource

# number of electrodes and of samples per electrode in each record
NEURALYNX_LEADS = {"nse": 1, "nst": 2, "ntt": 4, "nts": 0}
NEURALYNX_WAVEFORM_LENGTH = 32


def get_spike_record_dtype(ext, nb_feature=8, nb_sample=NEURALYNX_WAVEFORM_LENGTH):
    """
    Return the dtype of the records of a spike file, depending on its
    extension.
    """
    ext = ext.lower().lstrip(".")
    if ext not in NEURALYNX_LEADS:
        raise ValueError(f"{ext} is not a Neuralynx spike file extension")
    if ext == "nts":
        return np.dtype([("timestamp", "uint64")])

    dtype = [("timestamp", "uint64"), ("channel_id", "uint32"), ("unit_id", "uint32")]
    dtype += [("features", "int32", (nb_feature,))]
    nb_lead = NEURALYNX_LEADS[ext]
    if nb_lead == 1:
        dtype += [("samples", "int16", (nb_sample,))]
    else:
        dtype += [("samples", "int16", (nb_sample, nb_lead))]
    return np.dtype(dtype)


class NeuralynxSpikeRawSource(BaseRawSource):
    """
    Decoded content of a Neuralynx spike file.

    Parameters
    ----------
    filename: str
        The spike file
    header: dict
        Properties of the text header
    records: np.ndarray
        All records, dtype from `get_spike_record_dtype()`

    """

    name = "Neuralynx"
    description = "Neuralynx Cheetah single channel spike file"

    def __init__(self, filename="", header=None, records=None):
        BaseRawSource.__init__(self, header=header)
        self.filename = filename
        if records is None:
            records = np.array([], dtype=get_spike_record_dtype("nse"))
        self.records = records

    def _source_name(self):
        return self.filename
