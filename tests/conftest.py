"""
Pytest configuration and shared fixtures for clangkit tests.
"""

import pytest
from pathlib import Path
from typing import Callable

from clangkit.config import ResolverConfig
from clangkit.core.platform import PlatformInfo
from tests.mocks import FakeRunner


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that need a real clang installation",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def platform_linux() -> PlatformInfo:
    """Linux platform info."""
    return PlatformInfo("linux")


@pytest.fixture
def platform_macos() -> PlatformInfo:
    """macOS platform info."""
    return PlatformInfo("macos")


@pytest.fixture
def platform_windows() -> PlatformInfo:
    """Windows platform info."""
    return PlatformInfo("windows")


@pytest.fixture
def fake_runner() -> FakeRunner:
    """ProcessRunner with no registered programs."""
    return FakeRunner()


@pytest.fixture
def make_executable() -> Callable[[Path], Path]:
    """Factory creating an executable stub file (parents included)."""

    def _make(path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("#!/bin/sh\n")
        path.chmod(0o755)
        return path

    return _make


@pytest.fixture
def linux_config(platform_linux) -> ResolverConfig:
    """Configuration with no overrides and an empty search path."""
    return ResolverConfig(platform=platform_linux)
