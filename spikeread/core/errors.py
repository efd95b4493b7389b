"""
Exceptions raised while normalizing spike data.

All of them derive from :class:`SpikeReadError` so a caller can catch
every normalization failure at once.
"""


class SpikeReadError(Exception):
    """Base class of all spikeread errors."""


class UnsupportedFormat(SpikeReadError):
    """
    No normalizer is registered for the requested format identifier.
    """

    def __init__(self, format_id):
        self.format_id = format_id
        super().__init__(f"unsupported data format ({format_id})")


class IncompatibleFormat(SpikeReadError):
    """
    The format is known but its files only contain continuous data,
    so there is nothing to read as spikes.
    """

    def __init__(self, format_id):
        self.format_id = format_id
        super().__init__(f"file format {format_id} does not contain spike timestamps or waveforms")


class MissingField(SpikeReadError, KeyError):
    """
    None of the candidate keys of a metadata field is present in a header.
    """

    def __init__(self, candidate_keys, what=None):
        self.candidate_keys = tuple(candidate_keys)
        self.what = what
        keys = ", ".join(repr(k) for k in self.candidate_keys)
        if what is None:
            msg = f"none of the fields [{keys}] is present"
        else:
            msg = f"{what}: none of the fields [{keys}] is present"
        super().__init__(msg)

    def __str__(self):
        # KeyError.__str__ would repr() the message
        return self.args[0]


class ShapeInvariantViolation(SpikeReadError):
    """
    A channel does not respect the shape contract of the dataset.

    This always points to a bug in a raw source or a normalizer and is
    never repaired silently.
    """

    def __init__(self, message, channel_index=None, label=None):
        self.channel_index = channel_index
        self.label = label
        if channel_index is not None:
            message = f"channel {channel_index} ({label!r}): {message}"
        super().__init__(message)


class ExternalDependencyUnavailable(SpikeReadError, ImportError):
    """
    An optional decoding backend needed by a format was not provided.
    """

    def __init__(self, backend, format_name=None):
        self.backend = backend
        if format_name is None:
            msg = f"the {backend} backend is required but was not provided"
        else:
            msg = f"{format_name} requires the {backend} backend but it was not provided"
        super().__init__(msg)
