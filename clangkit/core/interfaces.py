"""
Core interfaces for clangkit.

The resolver only talks to external programs through these interfaces so
that tests (and callers with unusual environments) can supply their own
implementation instead of spawning real processes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class ProcessOutput:
    """
    Text captured from a finished process.

    Attributes:
        stdout: Decoded standard output
        stderr: Decoded standard error
        returncode: Exit status; informational only, callers parse the text
            regardless of its value
    """

    stdout: str
    stderr: str
    returncode: int = 0


class ProcessRunner(ABC):
    """
    Abstract interface for running an external program to completion.
    """

    @abstractmethod
    def run(self, executable: str, arguments: Sequence[str]) -> ProcessOutput:
        """
        Run an executable and capture its output.

        Args:
            executable: Program name or path
            arguments: Command line arguments, excluding the program itself

        Returns:
            ProcessOutput with both streams, whatever the exit status

        Raises:
            ProcessLaunchError: If the program could not be started
        """
        pass


__all__ = [
    "ProcessOutput",
    "ProcessRunner",
]
