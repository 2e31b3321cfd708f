"""Pytest fixtures for testing rosactl."""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def no_dotenv() -> Iterator[None]:
    """Keep a developer's .env file out of the tests."""
    with patch("rosactl.config.load_dotenv"):
        yield


@pytest.fixture
def versions_file(tmp_path: Path) -> Path:
    """Create a versions file with stable and nightly versions.

    Returns:
        Path to the versions file
    """
    path = tmp_path / "versions.yaml"
    path.write_text(
        """stable:
  - 4.14.2
  - 4.14.1
  - 4.12.5
  - 4.11.5
candidate:
  - 4.15.0-rc.2
nightly:
  - 4.15.0-0.nightly-2023-11-08-062604
"""
    )
    return path
