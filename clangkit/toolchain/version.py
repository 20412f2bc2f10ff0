"""
Version banner parsing for clang executables.

Parses the three-component version out of ``clang --version`` output such as
``clang version 18.1.8 (https://github.com/llvm/llvm-project ...)``.
"""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

VERSION_MARKER = "version "


@dataclass(frozen=True, order=True)
class ClangVersion:
    """
    Version reported by a clang executable.

    Example:
        >>> ClangVersion(3, 8) < ClangVersion(10, 0, 1)
        True
    """

    major: int
    minor: int
    subminor: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.subminor}"


def parse_version_number(number: str) -> Optional[int]:
    """
    Parse the leading run of decimal digits in a version component.

    Trailing non-digit characters are ignored, so ``"8rc1"`` gives ``8``.

    Returns:
        The integer value, or None if the component does not start with a digit
    """
    digits = ""
    for char in number:
        if not ("0" <= char <= "9"):
            break
        digits += char
    return int(digits) if digits else None


def parse_version(banner: str) -> Optional[ClangVersion]:
    """
    Parse the version from clang's version banner.

    The first whitespace-delimited token after ``"version "`` is split on
    ``.``. Major and minor components are required; a missing or unparsable
    subminor component defaults to 0. Further components are ignored.

    Args:
        banner: Standard output of ``clang --version``

    Returns:
        ClangVersion, or None if the banner could not be parsed
    """
    start = banner.find(VERSION_MARKER)
    if start == -1:
        logger.debug("No version marker in banner")
        return None

    tokens = banner[start + len(VERSION_MARKER):].split()
    if not tokens:
        return None

    numbers = tokens[0].split(".")
    major = parse_version_number(numbers[0])
    minor = parse_version_number(numbers[1]) if len(numbers) > 1 else None
    if major is None or minor is None:
        logger.debug(f"Could not parse version from token: {tokens[0]!r}")
        return None

    subminor = parse_version_number(numbers[2]) if len(numbers) > 2 else None
    return ClangVersion(major, minor, subminor if subminor is not None else 0)
