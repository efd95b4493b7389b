"""
basenormalizer
==============

Classes
-------

BaseNormalizer
abstract class which should be overridden to write a normalizer.

A normalizer turns the raw source of one vendor format into a
:class:`SpikeDataset`. All normalizers follow the same two steps:

  1. `_resolve_channels(raw_source)` reads the channel table and resolves
     everything needed to name the channels (labels, required header
     fields). Any missing metadata fails here, before a channel is built.
  2. `_emit_channels(raw_source, descriptors)` yields one :class:`Channel`
     per descriptor, in the same order. Per-channel data always goes
     through `merge_passes()` so timestamps come out sorted.

`normalize()` chains both and assembles the dataset.

To add a format: write a subclass with `formats`, `source_class` and the two
methods above, then add it to `normalizerlist` in
:mod:`spikeread.normalizers`.

"""

from __future__ import annotations

import logging
from collections import namedtuple

from spikeread import logging_handler
from spikeread.core.channel import Channel
from spikeread.core.errors import MissingField, ShapeInvariantViolation

from .assembler import assemble_dataset
from .merge import merge_passes
from .utils import decode_name, resolve_field

possible_missing_label_policies = [
    "raise",
    "placeholder",
]

# index: position of the channel in the dataset
# label: resolved channel label
# source_id: identifier of the channel in the raw source
# header: per-channel header passthrough
# info: normalizer specific values resolved up front
ChannelDescriptor = namedtuple("ChannelDescriptor", ["index", "label", "source_id", "header", "info"])


class BaseNormalizer:
    """
    Generic class to handle.

    """

    name = "BaseNormalizer"
    description = ""

    # format identifiers handled by the class
    formats = []
    # class of the raw source the normalizer consumes
    source_class = None
    # ordered candidate keys of the channel name in the channel header
    label_keys = ()

    def __init__(self, format_id: str | None = None, missing_label: str = "raise"):
        """
        Parameters
        ----------
        format_id: str | None, default: None
            The format identifier, one of `formats`. The first one if None.
        missing_label: 'raise' | 'placeholder', default: 'raise'
            What to do when a channel has none of the `label_keys`: raise
            MissingField or name it 'chan<N>' (1-based) with a warning.

        """
        # create a logger for the normalizer class
        fullname = self.__class__.__module__ + "." + self.__class__.__name__
        self.logger = logging.getLogger(fullname)
        # Create a logger for 'spikeread' and add a handler to it if it doesn't have one already.
        # (it will also not add one if the root logger has a handler)
        corename = self.__class__.__module__.split(".")[0]
        corelogger = logging.getLogger(corename)
        rootlogger = logging.getLogger()
        if not corelogger.handlers and not rootlogger.handlers:
            corelogger.addHandler(logging_handler)

        if format_id is None and len(self.formats) > 0:
            format_id = self.formats[0]
        if format_id not in self.formats:
            raise ValueError(f"{self.__class__.__name__} does not handle the format {format_id}")
        if missing_label not in possible_missing_label_policies:
            raise ValueError(f"missing_label must be one of {possible_missing_label_policies}, not {missing_label!r}")

        self.format_id = format_id
        self.missing_label = missing_label

    def __repr__(self):
        return f"{self.__class__.__name__}: {self.format_id}"

    def normalize(self, raw_source):
        """
        Build the SpikeDataset of a raw source.

        Parameters
        ----------
        raw_source: BaseRawSource
            An instance of `source_class`

        Returns
        -------
        dataset: SpikeDataset

        """
        if self.source_class is not None and not isinstance(raw_source, self.source_class):
            raise TypeError(
                f"{self.__class__.__name__} needs a {self.source_class.__name__}, "
                f"not a {type(raw_source).__name__}"
            )
        raw_source.check_backend()

        descriptors = self._resolve_channels(raw_source)
        channels = list(self._emit_channels(raw_source, descriptors))
        dataset = assemble_dataset(channels, hdr=self._get_hdr(raw_source), format_id=self.format_id)
        self.logger.info(
            f"{raw_source.source_name()}: {len(dataset)} spike channels, {dataset.spike_count()} spikes"
        )
        return dataset

    def resolve_label(self, header, chan_index, label_keys=None):
        """
        Return the label of a channel from its header, following the
        `missing_label` policy when no candidate key is present.
        """
        if label_keys is None:
            label_keys = self.label_keys
        try:
            value = resolve_field(header, label_keys, what=f"label of channel {chan_index}")
        except MissingField:
            if self.missing_label == "raise":
                raise
            label = f"chan{chan_index + 1}"
            self.logger.warning(f"channel {chan_index} has none of the fields {list(label_keys)}, named {label}")
            return label
        return decode_name(value)

    def _build_channel(
        self,
        descriptor,
        passes,
        waveform_shape=(0, 0),
        timestamp_dtype=None,
        waveform_dtype=None,
    ):
        try:
            timestamps, units, waveform = merge_passes(
                passes,
                waveform_shape=waveform_shape,
                timestamp_dtype=timestamp_dtype,
                waveform_dtype=waveform_dtype,
            )
        except ShapeInvariantViolation as e:
            raise ShapeInvariantViolation(str(e), channel_index=descriptor.index, label=descriptor.label) from e
        self.logger.debug(f"channel {descriptor.index} {descriptor.label}: {timestamps.size} spikes")
        return Channel(descriptor.label, timestamps, units=units, waveform=waveform, header=descriptor.header)

    def _get_hdr(self, raw_source):
        return raw_source.header

    ###
    # All method below must be implemented in the subclass.

    def _resolve_channels(self, raw_source):
        raise NotImplementedError

    def _emit_channels(self, raw_source, descriptors):
        raise NotImplementedError
