"""
Raw source for files read through the neuroshare library.

The library gives a list of entities; the segment entities hold spike
waveforms. Reading needs the neuroshare backend, given to the constructor.

"""

import numpy as np

from .baserawsource import BaseRawSource

SEGMENT_ENTITY = 3


class NeuroshareRawSource(BaseRawSource):
    """
    Parameters
    ----------
    filename: str
        The data file
    header: dict
        File information, with `entityinfo`: a list of dict with
        `EntityLabel` and `EntityType` for every entity of the file
    backend: object
        neuroshare wrapper with a `read_segment(filename, entity_index)`
        method returning `(timestamps, waveforms, unit_ids)`: timestamps
        in seconds, waveforms with shape (n, nb_samples) or
        (n, nb_samples, nb_leads), unit ids with shape (n,)

    """

    name = "Neuroshare"
    description = "file read with the neuroshare library"
    required_backend = "neuroshare"

    def __init__(self, filename="", header=None, backend=None):
        BaseRawSource.__init__(self, header=header, backend=backend)
        self.filename = filename

    def _source_name(self):
        return self.filename

    def segment_entities(self):
        """Return the indexes of the segment (spike) entities"""
        entityinfo = self.header.get("entityinfo", [])
        return [i for i, info in enumerate(entityinfo) if int(info["EntityType"]) == SEGMENT_ENTITY]

    def read_segment(self, entity_index):
        self.check_backend()
        timestamps, waveforms, unit_ids = self.backend.read_segment(self.filename, entity_index)
        return np.asarray(timestamps), np.asarray(waveforms), np.asarray(unit_ids)
