"""Discovery configuration for clangkit.

The resolver never reads the process environment itself. Callers build a
:class:`ResolverConfig` from the environment, from a ``clangkit.yaml`` file,
or by hand, and pass it in.

Example clangkit.yaml:

    clang_path: /opt/llvm/bin/clang
    llvm_config_path: /opt/llvm/bin/llvm-config
    search_path:
      - /opt/llvm/bin
      - /usr/bin
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

import yaml

from ..core.exceptions import ConfigError
from ..core.platform import PlatformInfo, detect_platform

CLANG_PATH_VAR = "CLANG_PATH"
LLVM_CONFIG_PATH_VAR = "LLVM_CONFIG_PATH"
PATH_VAR = "PATH"

DEFAULT_LLVM_CONFIG = "llvm-config"

_KNOWN_KEYS = ("clang_path", "llvm_config_path", "search_path")


@dataclass
class ResolverConfig:
    """Inputs that steer compiler discovery."""

    clang_path: Optional[str] = None  # short-circuits every other search step
    llvm_config_path: str = DEFAULT_LLVM_CONFIG
    search_path: List[Path] = field(default_factory=list)
    platform: PlatformInfo = field(default_factory=detect_platform)

    @classmethod
    def from_environment(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        platform: Optional[PlatformInfo] = None,
    ) -> "ResolverConfig":
        """
        Build configuration from environment variables.

        Reads CLANG_PATH, LLVM_CONFIG_PATH and PATH.

        Args:
            environ: Environment mapping (defaults to ``os.environ``)
            platform: Platform to resolve for (defaults to the host)

        Returns:
            ResolverConfig snapshot of the environment
        """
        if environ is None:
            environ = os.environ

        return cls(
            clang_path=environ.get(CLANG_PATH_VAR) or None,
            llvm_config_path=environ.get(LLVM_CONFIG_PATH_VAR) or DEFAULT_LLVM_CONFIG,
            search_path=split_search_path(environ.get(PATH_VAR, "")),
            platform=platform or detect_platform(),
        )


def split_search_path(value: str) -> List[Path]:
    """Split a PATH-style string into directories, dropping empty entries."""
    return [Path(entry) for entry in value.split(os.pathsep) if entry]


def load_config(
    config_path: Path,
    environ: Optional[Mapping[str, str]] = None,
    platform: Optional[PlatformInfo] = None,
) -> ResolverConfig:
    """
    Load configuration from a YAML file, letting the environment override it.

    Args:
        config_path: Path to clangkit.yaml
        environ: Environment mapping (defaults to ``os.environ``)
        platform: Platform to resolve for (defaults to the host)

    Returns:
        Merged configuration

    Raises:
        ConfigError: If the file is missing or invalid
    """
    if environ is None:
        environ = os.environ

    data = _read_yaml(config_path)
    file_config = _parse_and_validate(data)

    if environ.get(CLANG_PATH_VAR):
        file_config.clang_path = environ[CLANG_PATH_VAR]
    if environ.get(LLVM_CONFIG_PATH_VAR):
        file_config.llvm_config_path = environ[LLVM_CONFIG_PATH_VAR]
    if "search_path" not in data:
        file_config.search_path = split_search_path(environ.get(PATH_VAR, ""))

    file_config.platform = platform or detect_platform()
    return file_config


def _read_yaml(config_path: Path) -> dict:
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Configuration file must contain a mapping")
    return data


def _parse_and_validate(data: dict) -> ResolverConfig:
    """Parse and validate configuration data."""
    unknown = sorted(set(data) - set(_KNOWN_KEYS))
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    clang_path = data.get("clang_path")
    if clang_path is not None and not isinstance(clang_path, str):
        raise ConfigError("clang_path must be a string")

    llvm_config_path = data.get("llvm_config_path", DEFAULT_LLVM_CONFIG)
    if not isinstance(llvm_config_path, str) or not llvm_config_path:
        raise ConfigError("llvm_config_path must be a non-empty string")

    search_path = data.get("search_path", [])
    if not isinstance(search_path, list) or not all(
        isinstance(entry, str) for entry in search_path
    ):
        raise ConfigError("search_path must be a list of strings")

    return ResolverConfig(
        clang_path=clang_path or None,
        llvm_config_path=llvm_config_path,
        search_path=[Path(entry) for entry in search_path if entry],
    )
