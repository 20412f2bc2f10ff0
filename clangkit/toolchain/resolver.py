"""
clang discovery - finds a clang executable and describes it.

Search order (first match wins):

1. ``CLANG_PATH``, used verbatim with no further search
2. A directory hint supplied by the caller
3. The directory printed by ``llvm-config --bindir``
4. On macOS, the directory of ``xcodebuild -find clang``
5. Every directory on ``PATH``, in order

In each directory ``clang`` is preferred over ``clang-<digits>``.
"""

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence, Union

from ..config.parser import ResolverConfig
from ..core.exceptions import ProcessLaunchError
from ..core.interfaces import ProcessRunner
from ..core.process import SubprocessRunner
from .descriptor import LANGUAGE_QUERIES, ToolchainDescriptor
from .patterns import clang_patterns, find_executable
from .search_paths import parse_search_paths
from .version import parse_version

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ToolchainResolver:
    """
    Locates clang and builds a :class:`ToolchainDescriptor` for it.

    Each :meth:`resolve` call is independent; nothing is cached between calls.
    """

    def __init__(self, config: ResolverConfig, runner: ProcessRunner):
        """
        Initialize resolver.

        Args:
            config: Override paths, helper path and directory search list
            runner: Used for every external program invocation
        """
        self.config = config
        self.runner = runner

    def resolve(self, hint_path: Optional[PathLike] = None) -> Optional[ToolchainDescriptor]:
        """
        Find a clang executable.

        Args:
            hint_path: Directory to search before any other directory

        Returns:
            ToolchainDescriptor, or None if no candidate was found

        Raises:
            ProcessLaunchError: If the CLANG_PATH override cannot be run
            SearchPathError: If the matched compiler's diagnostics are malformed
        """
        if self.config.clang_path:
            path = Path(self.config.clang_path)
            logger.info(f"Using clang from override: {path}")
            return self.describe(path)

        patterns = clang_patterns(self.config.platform.executable_suffix())

        for directory in self.candidate_directories(hint_path):
            logger.debug(f"Searching for clang in {directory}")
            executable = find_executable(directory, patterns)
            if executable is None:
                continue

            try:
                descriptor = self.describe(executable)
            except ProcessLaunchError as e:
                logger.warning(f"Skipping {executable}: {e}")
                continue

            logger.info(f"Found {descriptor}")
            return descriptor

        logger.info("No clang executable found")
        return None

    def candidate_directories(self, hint_path: Optional[PathLike] = None) -> Iterator[Path]:
        """
        Yield directories to search, in priority order.

        Helper programs are only run once the preceding directories have
        been exhausted.
        """
        if hint_path is not None:
            yield Path(hint_path)

        bindir = self._query(self.config.llvm_config_path, ["--bindir"])
        if bindir:
            yield Path(bindir)

        if self.config.platform.is_macos():
            located = self._query("xcodebuild", ["-find", "clang"])
            if located:
                path = Path(located)
                yield path.parent if path.is_file() else path

        yield from self.config.search_path

    def describe(self, executable: Path) -> ToolchainDescriptor:
        """
        Build a descriptor by querying the compiler.

        Each distinct query language is run once.

        Raises:
            ProcessLaunchError: If the executable cannot be run
            SearchPathError: If search path diagnostics are malformed
        """
        banner = self.runner.run(str(executable), ["--version"]).stdout
        version = parse_version(banner)
        if version is None:
            logger.debug(f"Could not parse version of {executable}")

        queried: Dict[str, List[str]] = {}
        search_paths = {}
        for language, query in LANGUAGE_QUERIES.items():
            if query not in queried:
                output = self.runner.run(str(executable), ["-E", "-x", query, "-", "-v"])
                queried[query] = parse_search_paths(output.stderr)
            search_paths[language] = tuple(queried[query])

        return ToolchainDescriptor(
            executable_path=executable,
            version=version,
            search_paths=search_paths,
        )

    def _query(self, executable: str, arguments: Sequence[str]) -> Optional[str]:
        """Run a helper program, returning its trimmed output if it succeeded."""
        try:
            output = self.runner.run(executable, arguments)
        except ProcessLaunchError as e:
            logger.debug(f"Helper unavailable: {e}")
            return None

        if output.returncode != 0:
            logger.debug(f"{executable} {' '.join(arguments)} returned {output.returncode}")
            return None

        return output.stdout.strip() or None


def find_clang(
    hint_path: Optional[PathLike] = None,
    config: Optional[ResolverConfig] = None,
    runner: Optional[ProcessRunner] = None,
) -> Optional[ToolchainDescriptor]:
    """
    Find clang using the process environment.

    Args:
        hint_path: Directory to search first
        config: Configuration (defaults to one read from the environment)
        runner: Process runner (defaults to SubprocessRunner)

    Returns:
        ToolchainDescriptor, or None if no clang executable was found

    Example:
        >>> clang = find_clang()
        >>> if clang:
        ...     print(clang.version, clang.c_search_paths)
    """
    resolver = ToolchainResolver(
        config or ResolverConfig.from_environment(),
        runner or SubprocessRunner(),
    )
    return resolver.resolve(hint_path)
