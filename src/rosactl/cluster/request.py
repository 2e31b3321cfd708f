"""Cluster creation request assembly.

Collects user input for a new cluster, runs it through the version and disk
size validators and produces the request that would be submitted to the
cluster service.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

import yaml
from pydantic import BaseModel

from rosactl.cluster.disk_size import parse_disk_size_to_gib
from rosactl.ocm.versions import ChannelGroup, default_version, validate_version
from rosactl.utils.errors import ConfigFileNotFoundError, InvalidConfigError
from rosactl.utils.validation import validate_cluster_name, validate_root_disk_size_flag

logger = logging.getLogger(__name__)


class ClusterRequest(BaseModel):
    """Validated cluster creation request."""

    name: str
    version: str
    version_id: str
    channel_group: ChannelGroup
    hosted_cp: bool = False
    worker_disk_size_gib: int | None = None
    region: str | None = None


def load_available_versions(path: Path, channel_group: ChannelGroup | str) -> list[str]:
    """Load available versions for a channel group from a YAML file.

    The file is either a plain list of versions or a mapping from channel
    group name to a list of versions:

        stable:
          - 4.14.2
          - 4.13.10
        nightly:
          - 4.15.0-0.nightly-2023-11-08-062604

    Versions are read as YAML strings, so two part versions need quoting
    ('4.10').

    Args:
        path: Path to the versions file
        channel_group: Channel group to read versions for

    Returns:
        Versions in file order, without duplicates

    Raises:
        ConfigFileNotFoundError: If the file doesn't exist
        InvalidConfigError: If the file cannot be read, is not valid YAML or has the wrong shape
    """
    group = ChannelGroup.parse(channel_group)

    if not path.exists():
        raise ConfigFileNotFoundError(f"Versions file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidConfigError(f"Invalid YAML in versions file {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidConfigError(f"Error reading versions file {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get(group.value) or []

    if not isinstance(data, list):
        raise InvalidConfigError(
            f"Versions file {path} must contain a list of versions "
            "or a mapping of channel group to versions"
        )

    versions: list[str] = []
    for entry in data:
        if not isinstance(entry, str):
            # Unquoted 4.10 loads as the float 4.1
            raise InvalidConfigError(
                f"Invalid version entry in {path}: {entry!r}. "
                "Versions must be strings; quote values such as '4.10'"
            )
        if entry not in versions:
            versions.append(entry)

    logger.debug(f"Loaded {len(versions)} {group.value} versions from {path}")
    return versions


def build_cluster_request(
    name: str,
    version: str | None,
    available_versions: Sequence[str],
    channel_group: ChannelGroup | str = ChannelGroup.STABLE,
    hosted_cp: bool = False,
    worker_disk_size: str | None = None,
    region: str | None = None,
) -> ClusterRequest:
    """Validate cluster input and build the creation request.

    Args:
        name: Cluster name
        version: Requested OpenShift version, or None for the default version
        available_versions: Versions available in the channel group
        channel_group: Channel group of the version
        hosted_cp: Create a hosted control plane cluster instead of a classic one
        worker_disk_size: Worker root disk size, e.g. "300 GiB"
        region: Cloud region

    Returns:
        Validated ClusterRequest

    Raises:
        RosaError: If any input fails validation
    """
    validate_cluster_name(name)
    group = ChannelGroup.parse(channel_group)

    if not version:
        version = default_version(available_versions)
        logger.info(f"Using default version {version}")

    version_id = validate_version(
        version,
        available_versions,
        group,
        is_classic=not hosted_cp,
        is_hosted_cp=hosted_cp,
    )

    disk_size_gib = None
    if worker_disk_size:
        validate_root_disk_size_flag(worker_disk_size)
        disk_size_gib = parse_disk_size_to_gib(worker_disk_size)

    return ClusterRequest(
        name=name,
        version=version,
        version_id=version_id,
        channel_group=group,
        hosted_cp=hosted_cp,
        worker_disk_size_gib=disk_size_gib,
        region=region,
    )
