"""
Toolchain discovery module for clangkit.

This module provides functionality for:
- Locating a clang executable
- Parsing its version banner
- Extracting its default include search paths
"""

from clangkit.toolchain.descriptor import (
    LANGUAGE_C,
    LANGUAGE_CPP,
    LANGUAGE_OBJC,
    LANGUAGE_QUERIES,
    ToolchainDescriptor,
)
from clangkit.toolchain.patterns import (
    NamePattern,
    clang_patterns,
    find_executable,
    is_executable_file,
)
from clangkit.toolchain.resolver import ToolchainResolver, find_clang
from clangkit.toolchain.search_paths import parse_search_paths
from clangkit.toolchain.version import (
    ClangVersion,
    parse_version,
    parse_version_number,
)

__all__ = [
    # Descriptor
    "ToolchainDescriptor",
    "LANGUAGE_C",
    "LANGUAGE_CPP",
    "LANGUAGE_OBJC",
    "LANGUAGE_QUERIES",
    # Version
    "ClangVersion",
    "parse_version",
    "parse_version_number",
    # Search paths
    "parse_search_paths",
    # Patterns
    "NamePattern",
    "clang_patterns",
    "find_executable",
    "is_executable_file",
    # Resolver
    "ToolchainResolver",
    "find_clang",
]
