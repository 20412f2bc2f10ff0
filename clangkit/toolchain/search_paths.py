"""
Include search path extraction from clang's preprocessor diagnostics.

``clang -E -x c - -v`` prints, on standard error, a block like:

    #include <...> search starts here:
     /usr/lib/llvm-18/lib/clang/18/include
     /usr/include
     /System/Library/Frameworks (framework directory)
    End of search list.
"""

from typing import List

from ..core.exceptions import SearchPathError

SEARCH_START_MARKER = "#include <...> search starts here:"
SEARCH_END_MARKER = "End of search list."
FRAMEWORK_ANNOTATION = "(framework directory)"


def parse_search_paths(diagnostics: str) -> List[str]:
    """
    Extract the ``#include <...>`` search directories, in search order.

    Entries are trimmed and the macOS framework annotation removed. Duplicates
    and case are kept exactly as reported.

    Args:
        diagnostics: Standard error of ``clang -E -x <language> - -v``

    Returns:
        Ordered list of directories (possibly empty)

    Raises:
        SearchPathError: If either marker line is missing
    """
    start = diagnostics.find(SEARCH_START_MARKER)
    if start == -1:
        raise SearchPathError(SEARCH_START_MARKER)
    start += len(SEARCH_START_MARKER)

    end = diagnostics.find(SEARCH_END_MARKER, start)
    if end == -1:
        raise SearchPathError(SEARCH_END_MARKER)

    block = diagnostics[start:end].replace(FRAMEWORK_ANNOTATION, "")
    return [line.strip() for line in block.split("\n") if line.strip()]
