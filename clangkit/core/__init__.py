"""
Core functionality for clangkit.

This package contains the foundational modules that other components depend on.
"""

from .exceptions import (
    ClangKitError,
    ProcessLaunchError,
    ToolchainError,
    SearchPathError,
    ConfigError,
)

from .interfaces import (
    ProcessOutput,
    ProcessRunner,
)

from .platform import (
    PlatformInfo,
    detect_platform,
    clear_platform_cache,
)

from .process import SubprocessRunner

__all__ = [
    "ClangKitError",
    "ProcessLaunchError",
    "ToolchainError",
    "SearchPathError",
    "ConfigError",
    "ProcessOutput",
    "ProcessRunner",
    "PlatformInfo",
    "detect_platform",
    "clear_platform_cache",
    "SubprocessRunner",
]
