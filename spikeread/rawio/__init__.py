"""
:mod:`spikeread.rawio` defines the raw sources: the content of vendor files
once an external decoder has parsed their bytes, as consumed by
:mod:`spikeread.normalizers`.

Classes:

* :attr:`MatlabRawSource`
* :attr:`MClustRawSource`
* :attr:`NeuralynxSpikeRawSource`
* :attr:`NeuroshareRawSource`
* :attr:`NeurosimRawSource`
* :attr:`NexRawSource`
* :attr:`PlexonRawSource`
* :attr:`Plexon2RawSource`

"""

from spikeread.rawio.baserawsource import BaseRawSource
from spikeread.rawio.matlabrawsource import MatlabRawSource
from spikeread.rawio.mclustrawsource import MClustRawSource
from spikeread.rawio.neuralynxrawsource import NeuralynxSpikeRawSource
from spikeread.rawio.neuroexplorerrawsource import NexRawSource
from spikeread.rawio.neurosharerawsource import NeuroshareRawSource
from spikeread.rawio.neurosimrawsource import NeurosimRawSource
from spikeread.rawio.plexonrawsource import PlexonRawSource, Plexon2RawSource

rawsourcelist = [
    MatlabRawSource,
    MClustRawSource,
    NeuralynxSpikeRawSource,
    NeuroshareRawSource,
    NeurosimRawSource,
    NexRawSource,
    PlexonRawSource,
    Plexon2RawSource,
]
