"""
Error types raised by the bankclusters package.

All errors are fatal at the point of detection: the failing operation is
aborted and nothing partial is returned.
"""


class ClusteringError(Exception):
    """Base class for all bankclusters errors."""


class MalformedInputError(ClusteringError, ValueError):
    """Input file is structurally invalid (bad token types or counts)."""


class InvalidParameterError(ClusteringError, ValueError):
    """Run parameter outside its accepted domain."""


class NotConfiguredError(ClusteringError, RuntimeError):
    """Engine was run before ``configure`` was called."""


class NotFittedError(ClusteringError, RuntimeError):
    """Result-dependent method called before any run has completed."""


class EmptyDatasetError(ClusteringError, ValueError):
    """Dataset holds zero records."""


class IOUnavailableError(ClusteringError, OSError):
    """Input or output file could not be opened."""
