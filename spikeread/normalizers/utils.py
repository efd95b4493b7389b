"""
Helpers shared by the normalizers:
  * resolution of a metadata field through an ordered list of candidate keys
  * reconstruction of full width timestamps from split integer fields
  * conversion of times in seconds to sample indexes
"""

import numpy as np
import quantities as pq

from spikeread.core.errors import MissingField

# width of the low order field of split timestamps
LOW_WORD_BITS = 32
_max_uint64_as_float = 2.0**64


def _has_key(header, key):
    dtype = getattr(header, "dtype", None)
    if dtype is not None and dtype.names is not None:
        return key in dtype.names
    try:
        return key in header
    except TypeError:
        return False


def resolve_field(header, candidate_keys, what=None):
    """
    Return the value of the first key of `candidate_keys` present in `header`.

    Different firmware or software versions store the same attribute under
    different names, so callers give the preferred key first and the legacy
    ones after.

    Parameters
    ----------
    header: dict | np.void | np.ndarray
        A mapping or a structured numpy record
    candidate_keys: list[str] | tuple[str]
        Keys to try, in order
    what: str | None, default: None
        Name of the attribute, used in the error message

    Returns
    -------
    value: object
        The value stored under the first present key

    Raises
    ------
    MissingField
        When none of the keys is present. An empty value is never substituted.
    """
    if isinstance(candidate_keys, str):
        candidate_keys = (candidate_keys,)
    for key in candidate_keys:
        if _has_key(header, key):
            return header[key]
    raise MissingField(candidate_keys, what=what)


def decode_name(value):
    """
    Decode a name read from a binary header: bytes are decoded, trailing
    blanks and NUL padding are removed.
    """
    if isinstance(value, np.ndarray) and value.ndim == 0:
        value = value.item()
    if isinstance(value, (bytes, np.bytes_)):
        try:
            value = bytes(value).decode("utf8")
        except UnicodeDecodeError:
            value = bytes(value).decode("latin-1")
    value = str(value)
    value = value.replace("\x03", "")
    return value.rstrip(" \t\r\n\x00")


def _as_unsigned(values, name):
    values = np.asarray(values)
    if values.size == 0:
        return values.astype("uint64")
    if values.dtype.kind not in "iub":
        raise ValueError(f"{name} must be integers, got dtype {values.dtype}")
    if values.dtype.kind == "i" and np.any(values < 0):
        raise ValueError(f"{name} can not be negative")
    return values.astype("uint64")


def reconstruct_split_timestamps(low, high):
    """
    Rebuild timestamps stored as a 32 bit low word plus an upper word,
    as in the 5 byte timestamps of Plexon data blocks.

    timestamp = low + high * 2**32, computed in uint64 so no precision is lost.

    Parameters
    ----------
    low: int | array-like
        The low order 32 bits
    high: int | array-like
        The upper word(s)

    Returns
    -------
    timestamps: np.uint64 | np.ndarray[uint64]

    >>> reconstruct_split_timestamps(4294967295, 1)
    np.uint64(8589934591)
    """
    low = _as_unsigned(low, "low timestamp words")
    high = _as_unsigned(high, "high timestamp words")
    if low.shape != high.shape:
        raise ValueError(f"low and high timestamp words differ in shape: {low.shape} vs {high.shape}")
    if np.any(low >> np.uint64(LOW_WORD_BITS)):
        raise ValueError(f"low timestamp words must fit in {LOW_WORD_BITS} bits")
    if np.any(high >> np.uint64(64 - LOW_WORD_BITS)):
        raise ValueError("high timestamp words do not fit in a 64 bit timestamp")

    timestamps = low + (high << np.uint64(LOW_WORD_BITS))
    if timestamps.ndim == 0:
        return timestamps[()]
    return timestamps


def round_half_away_from_zero(values):
    """
    Round to the nearest integer, halves going away from zero
    (0.5 -> 1, -0.5 -> -1, 2.5 -> 3) like MATLAB round().
    """
    values = np.asarray(values, dtype="float64")
    whole = np.trunc(values)
    # values - whole is exact for floats
    frac = values - whole
    return whole + np.sign(values) * (np.abs(frac) >= 0.5)


def seconds_to_samples(seconds, sampling_frequency):
    """
    Convert times in seconds into sample indexes.

    sample = round(seconds * sampling_frequency), rounding half away from zero.

    Parameters
    ----------
    seconds: float | array-like | quantities.Quantity
        Times, in s unless given as a time quantity
    sampling_frequency: float | quantities.Quantity
        Sampling rate, in Hz unless given as a quantity

    Returns
    -------
    samples: np.uint64 | np.ndarray[uint64]

    Raises
    ------
    ValueError
        For a non positive sampling frequency, and for times giving a NaN,
        a negative or a too large sample index, instead of wrapping around.

    >>> seconds_to_samples(1.5, 1000)
    np.uint64(1500)
    """
    if isinstance(seconds, pq.Quantity):
        seconds = seconds.rescale("s").magnitude
    if isinstance(sampling_frequency, pq.Quantity):
        sampling_frequency = sampling_frequency.rescale("Hz").magnitude
    sampling_frequency = float(sampling_frequency)
    if not np.isfinite(sampling_frequency) or sampling_frequency <= 0:
        raise ValueError(f"sampling frequency must be positive, got {sampling_frequency}")

    samples = round_half_away_from_zero(np.asarray(seconds, dtype="float64") * sampling_frequency)
    if samples.size > 0:
        if not np.all(np.isfinite(samples)):
            raise ValueError("times can not be converted to samples: NaN or infinite value")
        if np.any(samples < 0):
            raise ValueError("negative times can not be converted to unsigned sample indexes")
        if np.any(samples >= _max_uint64_as_float):
            raise ValueError("times too large for uint64 sample indexes")

    samples = samples.astype("uint64")
    if samples.ndim == 0:
        return samples[()]
    return samples


def record_to_dict(record):
    """
    Convert one record of a structured array into a dict of python scalars,
    names decoded.
    """
    info = {}
    for k in record.dtype.names:
        v = record[k]
        if record.dtype[k].kind == "S":
            v = decode_name(v)
        info[k] = v.item() if isinstance(v, np.generic) else v
    return info
