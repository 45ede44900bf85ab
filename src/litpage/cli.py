from __future__ import annotations

import sys
from pathlib import Path

from litpage.diagnostics import format_error_with_hint
from litpage.errors import (
    LitpageRenderError,
    LitpageResolutionError,
    LitpageSourceError,
    LitpageUsageError,
)

USAGE = "usage: litpage input.go title > output.html"

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_RESOLUTION = 2
EXIT_SOURCE = 3
EXIT_RENDER = 4


def parse_args(argv: list[str]) -> tuple[Path, str]:
    """Accept exactly `<source-path> <title>`; every argument is positional."""

    if len(argv) != 2:
        raise LitpageUsageError(USAGE)
    source, title = argv
    return Path(source), title


def _eprint(msg: str) -> None:
    print(msg, file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    try:
        source_path, title = parse_args(list(sys.argv[1:] if argv is None else argv))
    except LitpageUsageError:
        _eprint(USAGE)
        return EXIT_USAGE

    # Lazy import keeps usage errors independent of the rendering layers.
    from litpage.pipeline import build_document

    try:
        html = build_document(source_path, title)
    except LitpageResolutionError as e:
        _eprint(format_error_with_hint(e))
        return EXIT_RESOLUTION
    except LitpageSourceError as e:
        _eprint(format_error_with_hint(e))
        return EXIT_SOURCE
    except LitpageRenderError as e:
        _eprint(format_error_with_hint(e))
        return EXIT_RENDER

    sys.stdout.write(html)
    sys.stdout.flush()
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
