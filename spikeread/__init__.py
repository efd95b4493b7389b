'''
spikeread is a package for normalizing spike timestamps, waveforms and unit
ids decoded from several acquisition systems into one canonical dataset
'''
import importlib.metadata
# this need to be at the begining because some sub module will need the version
__version__ = importlib.metadata.version("spikeread")

import logging

logging_handler = logging.StreamHandler()

from spikeread.core import *
from spikeread.normalizers import normalize, read_spike, get_normalizer, normalizerlist
