"""Fatal per-dataset failures raised by the ingest and export layers."""

from __future__ import annotations


class DatasetError(RuntimeError):
    """Base class for failures that abort processing of one dataset."""


class DatasetReadError(DatasetError):
    """Raised when the input file cannot be read."""


class DatasetStructureError(DatasetError):
    """Raised when the document is not valid JSON or its root is not an array."""


class OutputWriteError(DatasetError):
    """Raised when an output artifact cannot be written."""
