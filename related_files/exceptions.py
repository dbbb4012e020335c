"""Custom exception definitions for the related file finder."""


class RelatedFilesError(Exception):
    """Base exception for the package."""


class ConfigurationError(RelatedFilesError):
    """Raised when configuration loading fails or a group is malformed."""


class ValidationError(RelatedFilesError):
    """Raised when configuration contents have the wrong shape."""
