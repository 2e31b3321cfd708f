"""Output formatting utilities for rosactl.

This module provides functions to format a cluster request into
Rich-formatted output for the console, or JSON/YAML for scripting.
"""

import json

import yaml
from rich.table import Table

from rosactl.cluster.request import ClusterRequest

OUTPUT_FORMATS = ("table", "json", "yaml")


def format_cluster_request(request: ClusterRequest) -> Table:
    """Format a cluster request as a Rich table.

    Args:
        request: Validated cluster request

    Returns:
        Rich Table with the request properties
    """
    table = Table(title=f"Cluster: {request.name}")

    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Topology", "Hosted control plane" if request.hosted_cp else "Classic")
    table.add_row("Version", request.version)
    table.add_row("Version ID", request.version_id)
    table.add_row("Channel Group", request.channel_group.value)

    if request.worker_disk_size_gib is not None:
        table.add_row("Worker Disk Size", f"{request.worker_disk_size_gib} GiB")
    if request.region:
        table.add_row("Region", request.region)

    return table


def render_request(request: ClusterRequest, output: str) -> str:
    """Render a cluster request as JSON or YAML text.

    Args:
        request: Validated cluster request
        output: "json" or "yaml"

    Returns:
        Serialized request

    Raises:
        ValueError: If output format is not supported
    """
    data = request.model_dump(mode="json", exclude_none=True)

    if output == "json":
        return json.dumps(data, indent=2)
    if output == "yaml":
        return yaml.safe_dump(data, sort_keys=False)

    raise ValueError(f"Unsupported output format: {output}. Must be one of: json, yaml")
