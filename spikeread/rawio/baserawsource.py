"""
baserawsource
=============

Classes
-------

BaseRawSource
abstract class for the raw sources consumed by the normalizers.

A raw source is what an external decoder hands over once the bytes of a
vendor file have been parsed: a `header` mapping, descriptors of the
declared channels and structured numpy arrays of records. Decoding the
bytes themselves is not done here; a raw source only defines the contract
that the normalizers rely on.

Some formats can only be decoded through an optional library (the Plexon
SDK, the neuroshare library). Such raw sources declare `required_backend`
and receive the backend object in their constructor. When it is missing,
:class:`ExternalDependencyUnavailable` is raised right away, before anything
is decoded.

"""

from __future__ import annotations

import logging

from spikeread import logging_handler
from spikeread.core.errors import ExternalDependencyUnavailable


class BaseRawSource:
    """
    Generic raw source.

    """

    name = "BaseRawSource"
    description = ""

    # name of the optional decoding backend, None when the format needs none
    required_backend = None

    def __init__(self, header: dict | None = None, backend=None):
        # create a logger for the raw source class
        fullname = self.__class__.__module__ + "." + self.__class__.__name__
        self.logger = logging.getLogger(fullname)
        corename = self.__class__.__module__.split(".")[0]
        corelogger = logging.getLogger(corename)
        rootlogger = logging.getLogger()
        if not corelogger.handlers and not rootlogger.handlers:
            corelogger.addHandler(logging_handler)

        self.header = {} if header is None else header
        self.backend = backend
        self.check_backend()

    def check_backend(self):
        """
        Raise ExternalDependencyUnavailable when the format needs a decoding
        backend that was not given.
        """
        if self.required_backend is not None and self.backend is None:
            raise ExternalDependencyUnavailable(self.required_backend, self.name)

    def source_name(self):
        """Return fancy name of the source"""
        return self._source_name()

    def _source_name(self):
        return self.name

    def __repr__(self):
        return f"{self.__class__.__name__}: {self.source_name()}"
