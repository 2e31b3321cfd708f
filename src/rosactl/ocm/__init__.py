"""OpenShift Cluster Manager helpers."""

from rosactl.ocm.versions import ChannelGroup, create_version_id, validate_version

__all__ = [
    "ChannelGroup",
    "create_version_id",
    "validate_version",
]
