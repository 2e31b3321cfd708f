"""Validation utilities for rosactl."""

import re

from rosactl.cluster.disk_size import machine_pool_root_disk_size_validator
from rosactl.utils.errors import InvalidClusterNameError, InvalidFlagTypeError

MAX_CLUSTER_NAME_LENGTH = 54


def validate_cluster_name(name: str) -> bool:
    """Validate cluster name follows OpenShift naming conventions.

    Cluster names must:
    - Be lowercase
    - Start with a letter and end with an alphanumeric character
    - Contain only alphanumeric characters and hyphens
    - Be between 1 and 54 characters

    Args:
        name: Cluster name to validate

    Returns:
        True if valid

    Raises:
        InvalidClusterNameError: If name is invalid
    """
    if not name:
        raise InvalidClusterNameError("Cluster name cannot be empty")

    if len(name) > MAX_CLUSTER_NAME_LENGTH:
        raise InvalidClusterNameError(
            f"Cluster name must be {MAX_CLUSTER_NAME_LENGTH} characters or less"
        )

    if not re.match(r"^[a-z]([a-z0-9-]*[a-z0-9])?$", name):
        raise InvalidClusterNameError(
            "Cluster name must be lowercase alphanumeric with hyphens, "
            "starting with a letter and ending with an alphanumeric character"
        )

    return True


def require_string(value: object, flag: str) -> str:
    """Ensure a flag value is a string.

    Args:
        value: Raw flag value
        flag: Flag name used in the error message

    Returns:
        The value, unchanged

    Raises:
        InvalidFlagTypeError: If value is not a string
    """
    if not isinstance(value, str):
        raise InvalidFlagTypeError(
            f"Invalid value for --{flag}: expected a string, got {type(value).__name__}"
        )
    return value


def validate_root_disk_size_flag(value: object) -> None:
    """Validate a raw --worker-disk-size value.

    Raises:
        InvalidFlagTypeError: If value is not a string
        DiskSizeError: If the size is malformed or out of range
    """
    machine_pool_root_disk_size_validator(require_string(value, "worker-disk-size"))
