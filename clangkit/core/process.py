"""
Subprocess-backed implementation of the ProcessRunner interface.
"""

import logging
import subprocess
from typing import Sequence

from .exceptions import ProcessLaunchError
from .interfaces import ProcessOutput, ProcessRunner

logger = logging.getLogger(__name__)


class SubprocessRunner(ProcessRunner):
    """
    Run programs with :func:`subprocess.run`.

    Standard input is connected to the null device, so commands that read
    source from ``-`` see an empty file. Output is decoded as UTF-8 with
    invalid bytes replaced. No timeout is applied.
    """

    def run(self, executable: str, arguments: Sequence[str]) -> ProcessOutput:
        command = [str(executable), *arguments]
        logger.debug(f"Running: {' '.join(command)}")

        try:
            result = subprocess.run(
                command,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            # FileNotFoundError, PermissionError and exec format errors
            raise ProcessLaunchError(str(executable), str(e)) from e

        if result.returncode != 0:
            logger.debug(f"{executable} exited with status {result.returncode}")

        return ProcessOutput(
            stdout=result.stdout or "",
            stderr=result.stderr or "",
            returncode=result.returncode,
        )


__all__ = ["SubprocessRunner"]
