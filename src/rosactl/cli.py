"""CLI interface for rosactl.

This module provides the command-line interface for preparing managed
OpenShift cluster creation requests. Input is validated locally and the
resulting request is printed; nothing is submitted to the cluster service.
"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from rosactl import __version__
from rosactl.cluster.request import build_cluster_request, load_available_versions
from rosactl.config import RosaConfig
from rosactl.display.formatters import OUTPUT_FORMATS, format_cluster_request, render_request
from rosactl.interactive import ask_cluster_name, ask_version, ask_worker_disk_size
from rosactl.ocm.versions import ChannelGroup
from rosactl.utils.errors import ConfigurationError, RosaError

console = Console()
logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "info") -> None:
    """Setup logging with Rich handler.

    Args:
        log_level: Logging level (debug, info, warning, error)
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=console,
                show_time=False,
                show_path=False,
                rich_tracebacks=True,
            )
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="rosactl",
        description="rosactl - create managed OpenShift clusters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"rosactl {__version__}",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    create = commands.add_parser("create", help="Create a resource")
    resources = create.add_subparsers(dest="resource", required=True)
    cluster = resources.add_parser("cluster", help="Create a cluster")

    cluster.add_argument(
        "-c",
        "--cluster-name",
        type=str,
        help="Name of the cluster",
    )

    cluster.add_argument(
        "--version",
        dest="openshift_version",
        type=str,
        help="OpenShift version, defaults to the latest available version",
    )

    cluster.add_argument(
        "--channel-group",
        type=str,
        choices=[group.value for group in ChannelGroup],
        help="Channel group to get the OpenShift version from",
    )

    cluster.add_argument(
        "--hosted-cp",
        action="store_true",
        help="Create a cluster with a hosted control plane",
    )

    cluster.add_argument(
        "--worker-disk-size",
        type=str,
        help="Root disk size of worker nodes, e.g. '300 GiB' or '1 TiB'",
    )

    cluster.add_argument(
        "--region",
        type=str,
        help="Cloud region to create the cluster in",
    )

    versions = cluster.add_mutually_exclusive_group()
    versions.add_argument(
        "--versions-file",
        type=str,
        help="YAML file listing the available OpenShift versions",
    )
    versions.add_argument(
        "--available-version",
        dest="available_versions",
        action="append",
        metavar="VERSION",
        help="Available OpenShift version (repeatable)",
    )

    cluster.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Prompt for values not given on the command line",
    )

    cluster.add_argument(
        "-o",
        "--output",
        choices=OUTPUT_FORMATS,
        default="table",
        help="Output format",
    )

    cluster.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output with detailed validation information",
    )

    return parser


def _resolve_available_versions(
    args: argparse.Namespace, config: RosaConfig, channel_group: ChannelGroup
) -> list[str]:
    """Get available versions from flags, the versions file or configuration."""
    if args.available_versions:
        return list(args.available_versions)

    if args.versions_file:
        return load_available_versions(Path(args.versions_file).expanduser(), channel_group)

    path = config.get_versions_path()
    if path is None:
        raise ConfigurationError(
            "No available versions. Use --versions-file, --available-version "
            "or set ROSA_VERSIONS_FILE."
        )
    return load_available_versions(path, channel_group)


def run_create_cluster(args: argparse.Namespace) -> int:
    """Validate create cluster input and print the resulting request.

    Args:
        args: Parsed command line arguments

    Returns:
        Process exit status
    """
    try:
        # Load configuration
        config = RosaConfig()
        config.validate()

        # Setup logging
        log_level = "debug" if args.verbose else config.log_level
        setup_logging(log_level)

        channel_group = ChannelGroup.parse(args.channel_group or config.channel_group)
        available = _resolve_available_versions(args, config, channel_group)
        logger.debug(f"{len(available)} {channel_group.value} versions available")

        name = args.cluster_name
        version = args.openshift_version
        disk_size = args.worker_disk_size

        if args.interactive:
            if not name:
                name = ask_cluster_name()
            if not version:
                version = ask_version(available, channel_group, args.hosted_cp)
            if not disk_size:
                disk_size = ask_worker_disk_size(config.worker_disk_size)
        elif not name:
            raise ConfigurationError("Cluster name is required. Use --cluster-name.")

        request = build_cluster_request(
            name=name,
            version=version,
            available_versions=available,
            channel_group=channel_group,
            hosted_cp=args.hosted_cp,
            worker_disk_size=disk_size or config.worker_disk_size,
            region=args.region or config.region,
        )

    except ConfigurationError as e:
        console.print(f"[red]Configuration Error: {e}[/red]")
        return 1

    except RosaError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    except (KeyboardInterrupt, EOFError):
        console.print("\n[dim]Interrupted[/dim]")
        return 1

    if args.output == "table":
        console.print(format_cluster_request(request))
        console.print(
            f"[green]✓ Cluster '{request.name}' is valid.[/green] "
            "[dim]Dry run: no request was submitted.[/dim]"
        )
    else:
        console.print(
            render_request(request, args.output), markup=False, highlight=False, soft_wrap=True
        )

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "create" and args.resource == "cluster":
        return run_create_cluster(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
