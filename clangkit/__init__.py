"""
clangkit - locate clang and discover its version and include search paths.

Usage:
    from clangkit import find_clang

    clang = find_clang()
    if clang is not None:
        print(clang.executable_path, clang.version)
        print(clang.cpp_search_paths)
"""

from clangkit.config import ResolverConfig, load_config
from clangkit.core.exceptions import (
    ClangKitError,
    ConfigError,
    ProcessLaunchError,
    SearchPathError,
    ToolchainError,
)
from clangkit.core.interfaces import ProcessOutput, ProcessRunner
from clangkit.core.process import SubprocessRunner
from clangkit.toolchain import (
    ClangVersion,
    ToolchainDescriptor,
    ToolchainResolver,
    find_clang,
    parse_search_paths,
    parse_version,
)

__version__ = "0.1.0"

__all__ = [
    "ClangKitError",
    "ConfigError",
    "ProcessLaunchError",
    "SearchPathError",
    "ToolchainError",
    "ProcessOutput",
    "ProcessRunner",
    "SubprocessRunner",
    "ResolverConfig",
    "load_config",
    "ClangVersion",
    "ToolchainDescriptor",
    "ToolchainResolver",
    "find_clang",
    "parse_search_paths",
    "parse_version",
]
