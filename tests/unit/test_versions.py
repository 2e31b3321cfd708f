"""Unit tests for OpenShift version validation."""

import pytest

from rosactl.ocm.versions import (
    HOSTED_CP_MIN_VERSION,
    ChannelGroup,
    create_version_id,
    default_version,
    has_hosted_cp_support,
    validate_version,
)
from rosactl.utils.errors import (
    InvalidChannelGroupError,
    UnsupportedVersionError,
    VersionNotFoundError,
)

NIGHTLY_412 = "4.12.0-0.nightly-2023-04-10-222146"
NIGHTLY_411 = "4.11.0-0.nightly-2022-10-17-040259"


class TestValidateVersionHostedCluster:
    """Test version validation when creating a hosted cluster."""

    def test_supported_version(self):
        """Test a supported stable version for hosted clusters."""
        version_id = validate_version("4.12.5", ["4.12.5"], "stable", False, True)

        assert version_id == "openshift-v4.12.5"

    def test_supported_nightly_version(self):
        """Test a supported nightly version keeps its build tag and suffix."""
        version_id = validate_version(NIGHTLY_412, [NIGHTLY_412], "nightly", False, True)

        assert version_id == f"openshift-v{NIGHTLY_412}-nightly"

    def test_unsupported_nightly_version(self):
        """Test a nightly version below the hosted minimum is rejected."""
        with pytest.raises(UnsupportedVersionError) as exc_info:
            validate_version(NIGHTLY_411, [NIGHTLY_411], "nightly", False, True)

        assert str(exc_info.value) == (
            f"version '{NIGHTLY_411}' is not supported for hosted clusters"
        )

    def test_next_release_candidate(self):
        """Test a release candidate of the next release."""
        version_id = validate_version("4.13.0-rc.2", ["4.13.0-rc.2"], "candidate", False, True)

        assert version_id == "openshift-v4.13.0-rc.2-candidate"

    def test_unsupported_version(self):
        """Test a stable version below the hosted minimum is rejected."""
        with pytest.raises(UnsupportedVersionError) as exc_info:
            validate_version("4.11.5", ["4.11.5"], "stable", False, True)

        assert str(exc_info.value) == "version '4.11.5' is not supported for hosted clusters"

    def test_malformed_version(self):
        """Test a malformed version is reported as not found."""
        with pytest.raises(VersionNotFoundError) as exc_info:
            validate_version("foo.bar", ["foo.bar"], "stable", False, True)

        assert str(exc_info.value) == "version 'foo.bar' was not found"


class TestValidateVersionClassicCluster:
    """Test version validation when creating a classic cluster."""

    def test_supported_version(self):
        """Test a classic cluster accepts versions below the hosted minimum."""
        version_id = validate_version("4.11.0", ["4.11.0"], "stable", True, False)

        assert version_id == "openshift-v4.11.0"

    def test_fast_channel_has_no_suffix(self):
        """Test fast channel versions get no suffix."""
        version_id = validate_version("4.14.1", ["4.14.2", "4.14.1"], ChannelGroup.FAST, True, False)

        assert version_id == "openshift-v4.14.1"

    def test_version_not_available(self):
        """Test a version missing from the available list."""
        available = ["4.14.2", "4.14.1", "4.13.10"]

        for version in ["4.14.3", "4.14", "v4.14.2", ""]:
            with pytest.raises(VersionNotFoundError, match="was not found"):
                validate_version(version, available, "stable", True, False)

    def test_empty_available_list(self):
        """Test nothing validates against an empty list."""
        with pytest.raises(VersionNotFoundError):
            validate_version("4.14.2", [], "stable", True, False)

    def test_nightly_build_tag_must_match_exactly(self):
        """Test a nightly version with a different build tag is not found."""
        with pytest.raises(VersionNotFoundError):
            validate_version(
                "4.12.0-0.nightly-2023-04-10-000000", [NIGHTLY_412], "nightly", True, False
            )


class TestValidateVersionArguments:
    """Test argument handling of validate_version."""

    def test_requires_exactly_one_topology(self):
        """Test classic and hosted flags are mutually exclusive."""
        with pytest.raises(ValueError, match="exactly one"):
            validate_version("4.12.5", ["4.12.5"], "stable", True, True)

        with pytest.raises(ValueError, match="exactly one"):
            validate_version("4.12.5", ["4.12.5"], "stable", False, False)

    def test_invalid_channel_group(self):
        """Test an unknown channel group."""
        with pytest.raises(InvalidChannelGroupError, match="Invalid channel group 'beta'"):
            validate_version("4.12.5", ["4.12.5"], "beta", True, False)


class TestChannelGroup:
    """Test ChannelGroup enum."""

    def test_suffixes(self):
        """Test suffix table."""
        assert ChannelGroup.STABLE.suffix == ""
        assert ChannelGroup.FAST.suffix == ""
        assert ChannelGroup.CANDIDATE.suffix == "-candidate"
        assert ChannelGroup.NIGHTLY.suffix == "-nightly"

    def test_parse(self):
        """Test parsing channel group names."""
        assert ChannelGroup.parse("stable") is ChannelGroup.STABLE
        assert ChannelGroup.parse(" Nightly ") is ChannelGroup.NIGHTLY
        assert ChannelGroup.parse(ChannelGroup.FAST) is ChannelGroup.FAST

    def test_parse_invalid(self):
        """Test parsing an unknown channel group."""
        with pytest.raises(InvalidChannelGroupError, match="stable, fast, candidate, nightly"):
            ChannelGroup.parse("eus")


class TestCreateVersionId:
    """Test version id construction."""

    def test_create_version_id(self):
        """Test version ids for each channel group."""
        assert create_version_id("4.14.2", "stable") == "openshift-v4.14.2"
        assert create_version_id("4.14.2", "fast") == "openshift-v4.14.2"
        assert create_version_id("4.15.0-rc.1", "candidate") == "openshift-v4.15.0-rc.1-candidate"
        assert create_version_id(NIGHTLY_412, "nightly") == f"openshift-v{NIGHTLY_412}-nightly"


class TestHostedCPSupport:
    """Test hosted control plane minimum version."""

    def test_minimum_version(self):
        """Test versions around the hosted minimum."""
        assert has_hosted_cp_support(HOSTED_CP_MIN_VERSION) is True
        assert has_hosted_cp_support("4.12.0-ec.1") is True
        assert has_hosted_cp_support("4.12.0") is True
        assert has_hosted_cp_support("4.15.3") is True
        assert has_hosted_cp_support("4.11.59") is False
        assert has_hosted_cp_support("3.11.0") is False

    def test_invalid_version(self):
        """Test an unparseable version."""
        with pytest.raises(ValueError):
            has_hosted_cp_support("4.12")


class TestDefaultVersion:
    """Test default version selection."""

    def test_first_version_is_default(self):
        """Test the first listed version is the default."""
        assert default_version(["4.14.2", "4.14.1"]) == "4.14.2"

    def test_no_versions(self):
        """Test no versions available."""
        with pytest.raises(VersionNotFoundError, match="no versions are available"):
            default_version([])
