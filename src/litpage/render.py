"""Render segment text through external markdown and highlighter programs.

Both collaborators are plain text filters: text goes in on stdin, an HTML
fragment comes out on stdout. The pipeline only depends on the two callable
protocols below, so tests can swap in deterministic fakes.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from litpage.config import RendererConfig
from litpage.errors import LitpageRenderError, LitpageResolutionError
from litpage.segmenter import Segment

logger = logging.getLogger("litpage.render")

# pygmentize mishandles empty or near-empty input; two spaces render as
# insignificant whitespace.
HIGHLIGHT_PADDING = "  "


class DocRenderer(Protocol):
    def __call__(self, text: str) -> str: ...


class CodeRenderer(Protocol):
    def __call__(self, text: str) -> str: ...


def resolve_executable(name: str) -> str:
    path = shutil.which(name)
    if path is None:
        raise LitpageResolutionError(f"Could not find `{name}` on PATH.")
    logger.debug("Resolved %s -> %s", name, path)
    return path


@dataclass(frozen=True, slots=True)
class PipeRenderer:
    """Pipe text through `executable args...` and return its stdout."""

    executable: str
    args: tuple[str, ...] = ()

    def __call__(self, text: str) -> str:
        cmd = [self.executable, *self.args]
        logger.debug("Running %s on %d chars", cmd, len(text))
        try:
            proc = subprocess.run(
                cmd,
                input=text.encode("utf-8"),
                capture_output=True,
                check=False,
            )
        except OSError as e:
            raise LitpageRenderError(f"Failed to start {self.executable}: {e}") from e

        if proc.returncode != 0:
            detail = proc.stderr.decode("utf-8", errors="replace").strip()
            msg = f"{self.executable} exited with status {proc.returncode}"
            if detail:
                msg += f": {detail}"
            raise LitpageRenderError(msg)
        # Bytes mode: line endings in the fragment reach the page untouched.
        try:
            return proc.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise LitpageRenderError(f"{self.executable} produced non-UTF-8 output") from e


def resolve_renderers(cfg: RendererConfig) -> tuple[PipeRenderer, PipeRenderer]:
    """Locate both collaborators; raises before any rendering can start."""

    markdown = resolve_executable(cfg.markdown_executable)
    highlighter = resolve_executable(cfg.highlighter_executable)
    return (
        PipeRenderer(markdown, cfg.markdown_args),
        PipeRenderer(highlighter, cfg.highlighter_args),
    )


def render_segment(seg: Segment, *, render_docs: DocRenderer, render_code: CodeRenderer) -> None:
    seg.docs_rendered = render_docs(seg.docs_raw)
    seg.code_rendered = render_code(seg.code_raw + HIGHLIGHT_PADDING)


async def _render_concurrently(
    segments: Sequence[Segment],
    *,
    render_docs: DocRenderer,
    render_code: CodeRenderer,
    jobs: int,
) -> None:
    sem = asyncio.Semaphore(jobs)

    async def render_one(seg: Segment) -> None:
        async with sem:
            await asyncio.to_thread(
                render_segment, seg, render_docs=render_docs, render_code=render_code
            )

    # Each task writes only to its own segment, so stream order is untouched.
    await asyncio.gather(*(render_one(seg) for seg in segments))


def render_segments(
    segments: Sequence[Segment],
    *,
    render_docs: DocRenderer,
    render_code: CodeRenderer,
    jobs: int = 1,
) -> None:
    """Fill in `docs_rendered`/`code_rendered` for every segment, in place.

    The first collaborator failure propagates; nothing is retried.
    """

    if jobs < 1:
        raise ValueError("jobs must be >= 1")

    if jobs == 1:
        for seg in segments:
            render_segment(seg, render_docs=render_docs, render_code=render_code)
    else:
        asyncio.run(
            _render_concurrently(
                segments,
                render_docs=render_docs,
                render_code=render_code,
                jobs=jobs,
            )
        )
