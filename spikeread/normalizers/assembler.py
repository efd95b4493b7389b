"""
Final assembly of a SpikeDataset from the channels built by a normalizer.
"""

import logging

from spikeread.core.spikedataset import SpikeDataset

logger = logging.getLogger(__name__)


def assemble_dataset(channels, hdr=None, format_id=None):
    """
    Build the SpikeDataset and check the shape of every channel.

    Parameters
    ----------
    channels: list[Channel]
        Channels in discovery order
    hdr: object | None, default: None
        Format header, passed through
    format_id: str | None, default: None

    Returns
    -------
    dataset: SpikeDataset

    Raises
    ------
    ShapeInvariantViolation
        When a channel is not consistent. This is a bug of the raw source or
        of the normalizer, the dataset is not returned.
    """
    dataset = SpikeDataset(channels, hdr=hdr, format_id=format_id)
    dataset.check_invariants()
    logger.debug(f"assembled {len(dataset)} channels, {dataset.spike_count()} spikes")
    return dataset
