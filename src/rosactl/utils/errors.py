"""Custom exception classes for rosactl."""


class RosaError(Exception):
    """Base exception for rosactl errors."""

    pass


class ConfigurationError(RosaError):
    """Raised when configuration is invalid or missing."""

    pass


class ConfigFileNotFoundError(ConfigurationError):
    """Raised when a versions file cannot be found."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when a versions file is invalid or malformed."""

    pass


class VersionError(RosaError):
    """Base exception for OpenShift version validation errors."""

    pass


class VersionNotFoundError(VersionError):
    """Raised when a requested version is not among the available versions."""

    pass


class UnsupportedVersionError(VersionError):
    """Raised when a version exists but is not allowed for the cluster topology."""

    pass


class InvalidChannelGroupError(RosaError, ValueError):
    """Raised when a channel group name is not recognized."""

    pass


class DiskSizeError(RosaError):
    """Base exception for disk size errors."""

    pass


class InvalidDiskSizeError(DiskSizeError):
    """Raised when a disk size string cannot be parsed."""

    pass


class InvalidDiskSizeUnitError(InvalidDiskSizeError):
    """Raised when a disk size carries an unrecognized unit suffix."""

    pass


class DiskSizeOutOfRangeError(DiskSizeError):
    """Raised when a disk size falls outside the allowed bounds."""

    pass


class InvalidFlagTypeError(RosaError, TypeError):
    """Raised when a flag value has the wrong type."""

    pass


class InvalidClusterNameError(RosaError, ValueError):
    """Raised when a cluster name does not follow the naming rules."""

    pass
