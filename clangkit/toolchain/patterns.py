"""
Executable filename matching for compiler discovery.

Directories are listed explicitly and entries matched against two kinds of
pattern: an exact name (``clang``) and a prefix followed by a run of decimal
digits (``clang-18``). Both carry the platform executable suffix.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamePattern:
    """
    Executable filename pattern.

    Attributes:
        prefix: Leading part of the name (the whole name when not versioned)
        suffix: Platform executable suffix ('' or '.exe')
        versioned: Whether a non-empty run of digits must follow the prefix
    """

    prefix: str
    suffix: str = ""
    versioned: bool = False

    def matches(self, name: str) -> bool:
        """Check whether a bare filename matches this pattern."""
        if not self.versioned:
            return name == f"{self.prefix}{self.suffix}"

        if not (name.startswith(self.prefix) and name.endswith(self.suffix)):
            return False
        middle = name[len(self.prefix):len(name) - len(self.suffix)]
        return middle.isascii() and middle.isdigit()

    def __str__(self) -> str:
        return f"{self.prefix}{'[0-9]*' if self.versioned else ''}{self.suffix}"


def clang_patterns(executable_suffix: str = "") -> List[NamePattern]:
    """
    Get the clang filename patterns in priority order.

    Args:
        executable_suffix: Platform executable suffix

    Returns:
        Unversioned ``clang`` first, then ``clang-<digits>``
    """
    return [
        NamePattern("clang", executable_suffix),
        NamePattern("clang-", executable_suffix, versioned=True),
    ]


def is_executable_file(path: Path) -> bool:
    """Check that a path is an existing regular file the user may execute."""
    try:
        return path.is_file() and os.access(path, os.X_OK)
    except OSError:
        return False


def find_executable(directory: Path, patterns: Sequence[NamePattern]) -> Optional[Path]:
    """
    Find the first executable in a directory matching the given patterns.

    Patterns are tried in order; within a pattern entries are considered in
    sorted name order so the result does not depend on listing order.

    Args:
        directory: Directory to search
        patterns: Patterns in priority order

    Returns:
        Path to the matching executable, or None
    """
    try:
        names = sorted(entry.name for entry in directory.iterdir())
    except OSError as e:
        logger.debug(f"Cannot list {directory}: {e}")
        return None

    for pattern in patterns:
        for name in names:
            if not pattern.matches(name):
                continue
            candidate = directory / name
            if is_executable_file(candidate):
                return candidate
            logger.debug(f"Ignoring non-executable match {candidate}")

    return None
