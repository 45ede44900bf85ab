"""Error formatting and actionable hints for litpage CLI output.

Keep this module small and dependency-light: it is imported by the CLI layer
and only depends on the error hierarchy.
"""

from __future__ import annotations

from litpage.errors import (
    LitpageResolutionError,
    LitpageSourceError,
)


def format_hint(exc: BaseException) -> str | None:
    """Return an actionable hint for a known error, or None."""
    msg = str(exc)

    if isinstance(exc, LitpageResolutionError):
        if "pygmentize" in msg:
            return "install Pygments (`pip install Pygments`) to get `pygmentize`"
        if "markdown" in msg:
            return "install a `markdown` executable, e.g. `pip install Markdown` or discount"
        return "check that the program is installed and on PATH"

    if isinstance(exc, LitpageSourceError):
        if "not valid UTF-8" in msg:
            return "convert the source file to UTF-8"
        return "check the source path and its permissions"

    return None


def format_error_with_hint(exc: BaseException) -> str:
    """Format error message + optional hint for stderr output."""
    msg = (str(exc) or repr(exc)).strip()
    result = f"error: {msg}"
    hint = format_hint(exc)
    if hint:
        result += f"\nhint: {hint}"
    return result
