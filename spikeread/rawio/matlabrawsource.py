"""
Raw source for a MATLAB file holding a ready-made `spike` structure, as
loaded for instance with `scipy.io.loadmat(filename, simplify_cells=True)`.

"""

from .baserawsource import BaseRawSource


class MatlabRawSource(BaseRawSource):
    """
    Parameters
    ----------
    filename: str
        The .mat file
    spike: dict
        The structure: `label`, `timestamp` and optionally `waveform`
        (per channel (leads, samples, spikes)), `unit` and `hdr`

    """

    name = "MATLAB"
    description = "MATLAB file with a spike structure"

    def __init__(self, filename="", spike=None):
        spike = {} if spike is None else dict(spike)
        BaseRawSource.__init__(self, header=spike.get("hdr"))
        self.filename = filename
        self.spike = spike

    def _source_name(self):
        return self.filename
