"""
Platform detection for clangkit.

Compiler discovery depends on the operating system only: it decides the
executable suffix and whether the macOS-only Xcode lookup runs.

Usage:
    from clangkit.core.platform import detect_platform

    platform_info = detect_platform()
    print(f"Looking for clang{platform_info.executable_suffix()}")
"""

import functools
import platform
from dataclasses import dataclass


@dataclass(frozen=True)
class PlatformInfo:
    """
    Host platform information.

    Attributes:
        os: Operating system ('windows', 'linux', 'macos', or the lowercase
            ``platform.system()`` value for anything else)
    """

    os: str

    def executable_suffix(self) -> str:
        """
        Get the filename suffix executables carry on this platform.

        Example:
            >>> PlatformInfo('windows').executable_suffix()
            '.exe'
        """
        return ".exe" if self.os == "windows" else ""

    def is_macos(self) -> bool:
        """Whether Xcode's developer tools can be queried."""
        return self.os == "macos"

    def __str__(self) -> str:
        return self.os


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformInfo:
    """
    Detect current platform information.

    This function is cached - it only runs detection once per process.
    """
    return PlatformInfo(os=_detect_os())


def clear_platform_cache() -> None:
    """Clear the cached result of :func:`detect_platform`."""
    detect_platform.cache_clear()


def _detect_os() -> str:
    """
    Detect operating system.

    Returns:
        Normalized OS name: 'windows', 'linux', 'macos', or the raw
        lowercase system name for other hosts
    """
    system = platform.system().lower()

    if system == "windows" or system.startswith(("cygwin", "msys", "mingw")):
        return "windows"
    elif system == "darwin":
        return "macos"
    return system
