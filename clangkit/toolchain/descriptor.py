"""
The result of a successful compiler discovery.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .version import ClangVersion

LANGUAGE_C = "c"
LANGUAGE_CPP = "c++"
LANGUAGE_OBJC = "objective-c"

# Language tag -> language passed to ``clang -x`` for the search path query.
# Objective-C is queried as C++.
LANGUAGE_QUERIES: Dict[str, str] = {
    LANGUAGE_C: "c",
    LANGUAGE_CPP: "c++",
    LANGUAGE_OBJC: "c++",
}


@dataclass(frozen=True)
class ToolchainDescriptor:
    """
    A clang executable found on the system.

    This is a snapshot taken at discovery time and is never re-validated.

    Attributes:
        executable_path: Path to the clang executable
        version: Parsed version, or None if the banner could not be parsed
        search_paths: Language tag to ``#include <...>`` directories in
            search order, exactly as the compiler reported them
    """

    executable_path: Path
    version: Optional[ClangVersion] = None
    search_paths: Mapping[str, Tuple[str, ...]] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        frozen = {language: tuple(paths) for language, paths in self.search_paths.items()}
        object.__setattr__(self, "search_paths", MappingProxyType(frozen))

    @property
    def c_search_paths(self) -> Tuple[str, ...]:
        """Directories searched for C headers."""
        return tuple(self.search_paths.get(LANGUAGE_C, ()))

    @property
    def cpp_search_paths(self) -> Tuple[str, ...]:
        """Directories searched for C++ headers."""
        return tuple(self.search_paths.get(LANGUAGE_CPP, ()))

    @property
    def objc_search_paths(self) -> Tuple[str, ...]:
        """Directories searched for Objective-C headers."""
        return tuple(self.search_paths.get(LANGUAGE_OBJC, ()))

    def __str__(self) -> str:
        version = str(self.version) if self.version else "unknown version"
        return f"clang {version} at {self.executable_path}"

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for serialization.

        Returns:
            Dictionary with string/list values only
        """
        return {
            "executable_path": str(self.executable_path),
            "version": str(self.version) if self.version else None,
            "search_paths": {
                language: list(paths) for language, paths in self.search_paths.items()
            },
        }
