"""Unit tests for configuration management."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from rosactl.config import RosaConfig
from rosactl.utils.errors import ConfigurationError


class TestRosaConfig:
    """Test RosaConfig class."""

    def test_default_configuration(self):
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            config = RosaConfig()

            assert config.log_level == "info"
            assert config.channel_group == "stable"
            assert config.versions_file is None
            assert config.worker_disk_size == "300 GiB"
            assert config.region is None

    def test_environment_variable_loading(self):
        """Test loading configuration from environment."""
        env = {
            "LOG_LEVEL": "DEBUG",
            "ROSA_CHANNEL_GROUP": "Nightly",
            "ROSA_VERSIONS_FILE": "/tmp/versions.yaml",
            "ROSA_WORKER_DISK_SIZE": "1 TiB",
            "ROSA_REGION": "us-east-2",
        }

        with patch.dict(os.environ, env, clear=True):
            config = RosaConfig()

            assert config.log_level == "debug"
            assert config.channel_group == "nightly"
            assert config.versions_file == "/tmp/versions.yaml"
            assert config.worker_disk_size == "1 TiB"
            assert config.region == "us-east-2"

    def test_validation_success(self):
        """Test validation passes with default configuration."""
        with patch.dict(os.environ, {}, clear=True):
            config = RosaConfig()
            config.validate()  # Should not raise

    def test_validation_failure_channel_group(self):
        """Test validation fails for an unknown channel group."""
        with patch.dict(os.environ, {"ROSA_CHANNEL_GROUP": "beta"}, clear=True):
            config = RosaConfig()

            with pytest.raises(ConfigurationError, match="ROSA_CHANNEL_GROUP"):
                config.validate()

    def test_validation_failure_log_level(self):
        """Test validation fails for an unknown log level."""
        with patch.dict(os.environ, {"LOG_LEVEL": "verbose"}, clear=True):
            config = RosaConfig()

            with pytest.raises(ConfigurationError, match="Invalid log level: verbose"):
                config.validate()

    def test_get_versions_path(self):
        """Test versions path resolution."""
        with patch.dict(os.environ, {}, clear=True):
            assert RosaConfig().get_versions_path() is None

        with patch.dict(os.environ, {"ROSA_VERSIONS_FILE": "/etc/rosa/versions.yaml"}, clear=True):
            assert RosaConfig().get_versions_path() == Path("/etc/rosa/versions.yaml")
