"""
Raw source for the spike output of the NeuroSim simulator.

The simulator writes a `spikes` text file (or a directory holding it) with
one line per spike: the spike time in ms and the number of the neuron that
fired. The header lines starting with `#` are kept as a dict.

"""

import numpy as np

from .baserawsource import BaseRawSource

SpikeRecord = [
    ("time", "float64"),
    ("neuron", "int64"),
]


class NeurosimRawSource(BaseRawSource):
    """
    Parameters
    ----------
    filename: str
        The spikes file or the simulation directory
    header: dict
        Parsed `#` header lines
    records: np.ndarray
        One record per spike, dtype `SpikeRecord`, in file order

    """

    name = "NeuroSim"
    description = "NeuroSim spikes file"

    def __init__(self, filename="", header=None, records=None):
        BaseRawSource.__init__(self, header=header)
        self.filename = filename
        if records is None:
            records = np.array([], dtype=SpikeRecord)
        self.records = records

    def _source_name(self):
        return self.filename
