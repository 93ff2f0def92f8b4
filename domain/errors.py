"""Exception types shared across readers and the batch pipeline."""

from __future__ import annotations


class BomMergeError(RuntimeError):
    """Base class for failures reported back to the user."""
    pass


class IngestionError(BomMergeError, ValueError):
    """Raised when an input file cannot be read (corrupt, unsupported or too large)."""
    pass


class NoValidFilesError(BomMergeError):
    """Raised when none of the submitted files has a supported extension."""
    pass


class NoDataError(BomMergeError):
    """Raised when a batch yields nothing to export."""
    pass
