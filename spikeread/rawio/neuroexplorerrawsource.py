"""
Raw source for NeuroExplorer files (.nex)

A .nex file is a list of variables of different types:
  * 0: neuron, timestamps only
  * 1: event
  * 2: interval
  * 3: waveform, timestamps and waveforms
  * 4: population vector
  * 5: continuous signal
  * 6: markers

Only the variable headers are decoded up front; the data of one variable is
given by `read_variable()`.

"""

import numpy as np

from .baserawsource import BaseRawSource

NEURON_VARIABLE = 0
EVENT_VARIABLE = 1
INTERVAL_VARIABLE = 2
WAVEFORM_VARIABLE = 3
POPVECTOR_VARIABLE = 4
CONTINUOUS_VARIABLE = 5
MARKER_VARIABLE = 6

VarHeader = [
    ("Type", "int32"),
    ("Version", "int32"),
    ("Name", "S64"),
    ("Count", "int32"),
    ("WFrequency", "float64"),
    ("ADtoMV", "float64"),
    ("NPointsWave", "int32"),
]


class NexRawSource(BaseRawSource):
    """
    Decoded content of a .nex file.

    Parameters
    ----------
    filename: str
        The .nex file
    header: dict
        Global header (`version`, `comment`, `freq`, `tbeg`, `tend`)
    var_headers: np.ndarray
        One entry per variable, dtype `VarHeader`
    variables: list[tuple]
        One `(timestamps, waveforms)` tuple per variable, timestamps in
        ticks of `header['freq']`, waveforms with shape (n, NPointsWave)
        or None for variables without waveforms

    """

    name = "NeuroExplorer"
    description = "NeuroExplorer .nex file"

    def __init__(self, filename="", header=None, var_headers=None, variables=None):
        BaseRawSource.__init__(self, header=header)
        self.filename = filename
        if var_headers is None:
            var_headers = np.array([], dtype=VarHeader)
        if variables is None:
            variables = []
        if len(variables) != var_headers.size:
            raise ValueError(f"{var_headers.size} variable headers but {len(variables)} variables")
        self.var_headers = var_headers
        self._variables = variables

    def _source_name(self):
        return self.filename

    def read_variable(self, index):
        """Return `(timestamps, waveforms)` of the variable at `index`"""
        timestamps, waveforms = self._variables[index]
        timestamps = np.asarray(timestamps)
        if waveforms is not None:
            waveforms = np.asarray(waveforms)
        return timestamps, waveforms
