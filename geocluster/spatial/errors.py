"""Exceptions raised by the clustering engine."""


class ClusteringError(Exception):
    """Base class for clustering failures."""


class InvalidInputError(ClusteringError, ValueError):
    """Input points or engine parameters cannot be clustered."""


class IndexUnavailableError(ClusteringError):
    """The spatial index could not be built."""
