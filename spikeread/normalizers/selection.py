"""
Selection of records in multiplexed files.

Some formats store the records of several channels, and of several kinds
of records (spikes, events, continuous chunks), in one single stream. Each
record is tagged with a channel id and a record type field. These helpers
split such a stream into one group per declared channel.
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)


def select_records(records, channel_id=None, record_types=None, channel_field="Channel", type_field="Type"):
    """
    Return the records matching a channel id and a set of record types.

    Parameters
    ----------
    records: np.ndarray
        Structured array of records
    channel_id: int | str | None, default: None
        Keep records whose `channel_field` is exactly this id. None keeps all channels.
    record_types: list | None, default: None
        Keep records whose `type_field` is one of these types. None keeps all types.
    channel_field: str, default: 'Channel'
    type_field: str, default: 'Type'

    Returns
    -------
    selected: np.ndarray
        A copy of the matching records, in stream order
    """
    return records[_selection_mask(records, channel_id, record_types, channel_field, type_field)]


def _selection_mask(records, channel_id, record_types, channel_field, type_field):
    keep = np.ones(records.shape[0], dtype=bool)
    if record_types is not None:
        keep &= np.isin(records[type_field], np.asarray(record_types))
    if channel_id is not None:
        keep &= records[channel_field] == channel_id
    return keep


def group_records(records, channel_ids, record_types=None, channel_field="Channel", type_field="Type"):
    """
    Split a multiplexed stream of records into one group per declared channel.

    Parameters
    ----------
    records: np.ndarray
        Structured array of records
    channel_ids: list
        Channel ids from the channel table of the file, in declaration order
    record_types: list | None, default: None
        Record types that carry spikes; records of other types are ignored
    channel_field: str, default: 'Channel'
    type_field: str, default: 'Type'

    Returns
    -------
    groups: list[np.ndarray]
        One array per entry of `channel_ids`, in the same order. A channel
        without any matching record gets an empty array, it is never dropped.
    """
    if record_types is not None:
        is_kept_type = np.isin(records[type_field], np.asarray(record_types))
        nb_ignored = int(np.sum(~is_kept_type))
        if nb_ignored > 0:
            logger.debug(f"{nb_ignored} records of other types than {list(record_types)} ignored")
        records = records[is_kept_type]

    groups = []
    for channel_id in channel_ids:
        groups.append(records[records[channel_field] == channel_id])
    return groups


def spike_bearing_indexes(record_types, spike_types):
    """
    Return the positions of the entries whose type carries spikes.

    Used for files with a table of variables of different kinds, where only
    some kinds become channels. Other kinds are skipped, they are not errors.

    Parameters
    ----------
    record_types: array-like
        Type of each entry, in file order
    spike_types: list
        Types that carry spikes

    Returns
    -------
    indexes: list[int]
        Positions, in file order
    """
    record_types = np.asarray(record_types)
    keep = np.isin(record_types, np.asarray(spike_types))
    for i in np.flatnonzero(~keep):
        logger.debug(f"entry {i} of type {record_types[i]} does not carry spikes, ignored")
    return [int(i) for i in np.flatnonzero(keep)]
