"""Configuration module for clangkit.

This module builds resolver configuration from the environment or from a
clangkit.yaml file.
"""

from clangkit.config.parser import (
    CLANG_PATH_VAR,
    LLVM_CONFIG_PATH_VAR,
    PATH_VAR,
    DEFAULT_LLVM_CONFIG,
    ResolverConfig,
    load_config,
    split_search_path,
)
from clangkit.core.exceptions import ConfigError

__all__ = [
    "CLANG_PATH_VAR",
    "LLVM_CONFIG_PATH_VAR",
    "PATH_VAR",
    "DEFAULT_LLVM_CONFIG",
    "ResolverConfig",
    "ConfigError",
    "load_config",
    "split_search_path",
]
