"""OpenShift version validation.

Resolves a user-supplied OpenShift version against the versions available in a
channel group and builds the version identifier expected by the cluster
service, e.g. ``openshift-v4.12.5`` or
``openshift-v4.12.0-0.nightly-2023-04-10-222146-nightly``.
"""

import logging
from collections.abc import Sequence
from enum import Enum

import semver

from rosactl.utils.errors import (
    InvalidChannelGroupError,
    UnsupportedVersionError,
    VersionNotFoundError,
)

logger = logging.getLogger(__name__)

VERSION_PREFIX = "openshift-v"

# Lowest version accepted for hosted control plane clusters. The "-0.a"
# pre-release sorts below every 4.12.0 nightly, rc and ec build.
HOSTED_CP_MIN_VERSION = "4.12.0-0.a"


class ChannelGroup(str, Enum):
    """Release stream a version is published in."""

    STABLE = "stable"
    FAST = "fast"
    CANDIDATE = "candidate"
    NIGHTLY = "nightly"

    @property
    def suffix(self) -> str:
        """Suffix appended to version identifiers of this channel group."""
        return _VERSION_ID_SUFFIXES[self]

    @classmethod
    def parse(cls, value: "ChannelGroup | str") -> "ChannelGroup":
        """Convert a channel group name to a ChannelGroup.

        Args:
            value: ChannelGroup or its name (case-insensitive)

        Returns:
            Matching ChannelGroup

        Raises:
            InvalidChannelGroupError: If the name is not a known channel group
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(group.value for group in cls)
            raise InvalidChannelGroupError(
                f"Invalid channel group '{value}'. Must be one of: {names}"
            ) from None


_VERSION_ID_SUFFIXES: dict[ChannelGroup, str] = {
    ChannelGroup.STABLE: "",
    ChannelGroup.FAST: "",
    ChannelGroup.CANDIDATE: "-candidate",
    ChannelGroup.NIGHTLY: "-nightly",
}


def create_version_id(version: str, channel_group: ChannelGroup | str) -> str:
    """Build the version identifier for a raw version.

    Args:
        version: Raw OpenShift version (e.g. 4.13.0-rc.2)
        channel_group: Channel group the version belongs to

    Returns:
        Version identifier such as openshift-v4.13.0-rc.2-candidate
    """
    group = ChannelGroup.parse(channel_group)
    return f"{VERSION_PREFIX}{version}{group.suffix}"


def has_hosted_cp_support(version: str) -> bool:
    """Check whether a version can be used for hosted control plane clusters.

    Raises:
        ValueError: If the version is not a valid semantic version
    """
    parsed = semver.Version.parse(version)
    return parsed >= semver.Version.parse(HOSTED_CP_MIN_VERSION)


def default_version(available: Sequence[str]) -> str:
    """Return the default (first listed) version.

    Raises:
        VersionNotFoundError: If no versions are available
    """
    if not available:
        raise VersionNotFoundError("no versions are available")
    return available[0]


def validate_version(
    requested: str,
    available: Sequence[str],
    channel_group: ChannelGroup | str,
    is_classic: bool,
    is_hosted_cp: bool,
) -> str:
    """Validate a requested OpenShift version and return its version identifier.

    The requested version must match an available version exactly, so nightly
    and candidate builds keep their full pre-release tag. Hosted control plane
    clusters additionally require at least HOSTED_CP_MIN_VERSION.

    Args:
        requested: Version requested by the user
        available: Versions available in the channel group
        channel_group: Channel group of the requested version
        is_classic: True when creating a classic cluster
        is_hosted_cp: True when creating a hosted control plane cluster

    Returns:
        Version identifier, e.g. openshift-v4.12.5

    Raises:
        ValueError: If not exactly one of is_classic and is_hosted_cp is set
        InvalidChannelGroupError: If the channel group is unknown
        VersionNotFoundError: If the version is unavailable or malformed
        UnsupportedVersionError: If the version is not allowed for hosted clusters
    """
    if is_classic == is_hosted_cp:
        raise ValueError("exactly one of is_classic and is_hosted_cp must be set")

    group = ChannelGroup.parse(channel_group)

    if requested not in available:
        logger.debug(f"Version {requested} not in {len(available)} available versions")
        raise VersionNotFoundError(f"version '{requested}' was not found")

    if not semver.Version.is_valid(requested):
        logger.debug(f"Version {requested} is not a semantic version")
        raise VersionNotFoundError(f"version '{requested}' was not found")

    if is_hosted_cp and not has_hosted_cp_support(requested):
        raise UnsupportedVersionError(
            f"version '{requested}' is not supported for hosted clusters"
        )

    version_id = create_version_id(requested, group)
    logger.debug(f"Resolved version {requested} ({group.value}) to {version_id}")
    return version_id
