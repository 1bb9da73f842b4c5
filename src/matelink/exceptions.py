"""Custom exceptions for matelink."""


class MateLinkError(Exception):
    """Base exception for all matelink errors."""

    pass


class ConfigurationError(MateLinkError):
    """Raised when configuration is invalid or missing."""

    pass


class ResourceOpenError(MateLinkError):
    """Raised when an input resource (BAM, index, name list) cannot be opened."""

    def __init__(self, message="", path=None):
        """Initialize ResourceOpenError.

        Args:
            message: Error message
            path: Path of the resource that failed to open
        """
        super().__init__(message)
        self.path = path


class ContigLookupError(MateLinkError, LookupError):
    """Raised when a listed contig name is absent from the alignment header."""

    def __init__(self, message="", contig=None):
        super().__init__(message)
        self.contig = contig


class SeekError(MateLinkError):
    """Raised when the interval index cannot be used to jump to a window."""

    pass


class RecordReadError(MateLinkError):
    """Raised when an alignment record cannot be decoded mid-scan."""

    pass
