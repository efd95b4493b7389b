"""
Raw source for MClust timestamp files (.t)

A .t file holds the spike times of one cluster: a text header between
`%%BEGINHEADER` and `%%ENDHEADER` followed by big-endian uint32 timestamps
in units of 0.1 ms.

"""

import numpy as np

from .baserawsource import BaseRawSource


class MClustRawSource(BaseRawSource):
    """
    Decoded content of a .t file.

    Parameters
    ----------
    filename: str
        The .t file, its stem is used as channel label
    header: list[str]
        Lines of the text header
    timestamps: np.ndarray
        Spike timestamps as stored in the file

    """

    name = "MClust"
    description = "MClust .t cluster file"

    def __init__(self, filename="", header=None, timestamps=None):
        BaseRawSource.__init__(self, header=None)
        # the header of a .t file is a list of lines, not a dict
        self.header = [] if header is None else list(header)
        self.filename = filename
        if timestamps is None:
            timestamps = np.array([], dtype="uint32")
        self.timestamps = np.asarray(timestamps)

    def _source_name(self):
        return self.filename
