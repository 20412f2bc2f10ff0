"""
Centralized exception hierarchy for clangkit.

Resolution failure (no compiler found) and version-parse failure are not
exceptions; they surface as ``None`` values. Everything else that callers
must be able to tell apart lives here.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class ClangKitError(Exception):
    """Base exception for all clangkit errors."""

    pass


# ============================================================================
# Process Exceptions
# ============================================================================


class ProcessLaunchError(ClangKitError):
    """Raised when an external program cannot be started at all."""

    def __init__(self, executable: str, reason: str = ""):
        self.executable = executable
        self.reason = reason
        msg = f"could not run executable: `{executable}`"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


# ============================================================================
# Toolchain-related Exceptions
# ============================================================================


class ToolchainError(ClangKitError):
    """Base exception for toolchain-related errors."""

    pass


class SearchPathError(ToolchainError):
    """Raised when compiler diagnostics lack an include search list marker."""

    def __init__(self, marker: str):
        self.marker = marker
        super().__init__(f"Marker not found in compiler diagnostics: {marker!r}")


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(ClangKitError):
    """Configuration parsing or validation error."""

    pass
