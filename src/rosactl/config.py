"""Configuration management for rosactl.

This module handles configuration loading from environment variables and .env files.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from rosactl.ocm.versions import ChannelGroup
from rosactl.utils.errors import ConfigurationError, InvalidChannelGroupError

LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass
class RosaConfig:
    """rosactl configuration.

    Loads defaults for the create cluster command from environment variables.
    """

    log_level: str = "info"
    channel_group: str = ChannelGroup.STABLE.value
    versions_file: str | None = None
    worker_disk_size: str = "300 GiB"
    region: str | None = None

    def __post_init__(self):
        """Load configuration from environment variables after initialization."""
        # Load .env file if present
        load_dotenv()

        self.log_level = os.getenv("LOG_LEVEL", self.log_level).lower()
        self.channel_group = os.getenv("ROSA_CHANNEL_GROUP", self.channel_group).lower()
        self.versions_file = os.getenv("ROSA_VERSIONS_FILE", self.versions_file)
        self.worker_disk_size = os.getenv("ROSA_WORKER_DISK_SIZE", self.worker_disk_size)
        self.region = os.getenv("ROSA_REGION", self.region)

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ConfigurationError: If a value is not supported
        """
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {self.log_level}. Must be one of: {', '.join(LOG_LEVELS)}"
            )

        try:
            ChannelGroup.parse(self.channel_group)
        except InvalidChannelGroupError as e:
            raise ConfigurationError(f"{e}. Check ROSA_CHANNEL_GROUP.") from e

    def get_versions_path(self) -> Path | None:
        """Get the versions file path, if one is configured."""
        if not self.versions_file:
            return None
        return Path(self.versions_file).expanduser()
