"""Group classified lines into docs/code segments.

The walk is a single forward pass with two pieces of state: the kind of the
last line that was routed to docs or code, and the currently open segment.
Header lines never update that state, so a run of headers cannot merge and
each header opens its own segment.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from litpage.lines import LineKind, classify, strip_marker


@dataclass
class Segment:
    """One output row: documentation beside the code it describes."""

    docs_lines: list[str] = field(default_factory=list)
    code_lines: list[str] = field(default_factory=list)
    docs_rendered: str = ""
    code_rendered: str = ""

    @property
    def docs_raw(self) -> str:
        return "\n".join(self.docs_lines)

    @property
    def code_raw(self) -> str:
        return "\n".join(self.code_lines)

    @property
    def has_docs(self) -> bool:
        return bool(self.docs_lines)

    @property
    def has_code(self) -> bool:
        return bool(self.code_lines)


class Segmenter:
    def __init__(self) -> None:
        # The sentinel row exists before any line is seen and is always kept.
        self._segments: list[Segment] = [Segment()]
        self._last_seen: LineKind | None = None

    @property
    def segments(self) -> list[Segment]:
        return self._segments

    @property
    def last_seen(self) -> LineKind | None:
        return self._last_seen

    def _open(self, seg: Segment) -> None:
        self._segments.append(seg)

    def feed(self, line: str) -> None:
        cls = classify(line)
        current = self._segments[-1]
        last_seen = self._last_seen

        if cls.is_header or (cls.is_blank and last_seen is LineKind.HEADER):
            stripped = strip_marker(line)
            # `last_seen` is never HEADER, so the else branch does not run.
            if last_seen is not LineKind.HEADER:
                self._open(Segment(docs_lines=[stripped]))
            else:
                current.docs_lines.append(stripped)
            return

        if cls.is_doc or (cls.is_blank and last_seen is LineKind.DOC):
            stripped = strip_marker(line)
            if last_seen is not LineKind.DOC and current.has_docs:
                self._open(Segment(docs_lines=[stripped]))
            else:
                current.docs_lines.append(stripped)
            self._last_seen = LineKind.DOC
            return

        if last_seen is not LineKind.CODE and current.has_code:
            self._open(Segment(code_lines=[line]))
        else:
            current.code_lines.append(line)
        self._last_seen = LineKind.CODE


def segment_lines(lines: Iterable[str]) -> list[Segment]:
    """Run the segmenter over `lines` and return the segment stream."""

    segmenter = Segmenter()
    for line in lines:
        segmenter.feed(line)
    return segmenter.segments
