"""litpage exception hierarchy.

Keep this module small and dependency-free: it is imported by every layer
and by tests.
"""


class LitpageError(Exception):
    """Base exception for all litpage errors."""


class LitpageUsageError(LitpageError):
    """Raised when the command line does not match the single supported form."""


class LitpageResolutionError(LitpageError):
    """Raised when a collaborator executable cannot be found on PATH."""


class LitpageSourceError(LitpageError):
    """Raised when the source file cannot be read or decoded."""


class LitpageRenderError(LitpageError):
    """Raised when a collaborator fails to start or exits non-zero."""
