"""Source file to HTML page, start to finish.

Everything is built in memory; callers only see a finished document or an
exception, never a partial page.
"""

from __future__ import annotations

import logging
from pathlib import Path

from litpage.assemble import assemble
from litpage.config import ToolConfig, default_config
from litpage.errors import LitpageSourceError
from litpage.lines import split_lines
from litpage.render import CodeRenderer, DocRenderer, render_segments, resolve_renderers
from litpage.segmenter import Segment, segment_lines

logger = logging.getLogger("litpage.pipeline")


def read_source(path: Path) -> str:
    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        raise LitpageSourceError(f"No such source file: {path}") from e
    except OSError as e:
        raise LitpageSourceError(f"Failed reading source file {path}: {e}") from e

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise LitpageSourceError(f"Source is not valid UTF-8: {path}") from e


def segment_source(text: str) -> list[Segment]:
    return segment_lines(split_lines(text))


def build_document(
    source_path: Path,
    title: str,
    *,
    config: ToolConfig | None = None,
    render_docs: DocRenderer | None = None,
    render_code: CodeRenderer | None = None,
) -> str:
    """Read, segment, render and assemble one source file.

    Collaborators not supplied by the caller are resolved on PATH first, so a
    missing program is reported before the source is even opened.

    `config.jobs` bounds concurrent collaborator calls. It is a library-only
    option: the command line always renders with the default of one.
    """

    cfg = config or default_config()

    if render_docs is None or render_code is None:
        pipe_docs, pipe_code = resolve_renderers(cfg.renderers)
        render_docs = render_docs or pipe_docs
        render_code = render_code or pipe_code

    text = read_source(source_path)
    segments = segment_source(text)
    logger.debug("%s: %d segments", source_path, len(segments))

    render_segments(
        segments,
        render_docs=render_docs,
        render_code=render_code,
        jobs=cfg.jobs,
    )
    return assemble(title, segments, stylesheet=cfg.page.stylesheet)
