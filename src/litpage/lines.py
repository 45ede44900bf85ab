"""Line splitting and classification.

A line is classified from its own text only. Whether a blank line continues
a documentation block is decided by the segmenter, which knows what came
before it.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

# Comment marker, optionally indented, followed by one whitespace character.
DOC_PATTERN = re.compile(r"^\s*//\s")

# Markdown heading inside a comment: marker at column 0, then `#`s.
HEADER_PATTERN = re.compile(r"^//\s#+\s")


class LineKind(enum.Enum):
    HEADER = "header"
    DOC = "doc"
    BLANK = "blank"
    CODE = "code"


@dataclass(frozen=True, slots=True)
class LineClass:
    is_header: bool
    is_doc: bool
    is_blank: bool

    @property
    def kind(self) -> LineKind:
        if self.is_header:
            return LineKind.HEADER
        if self.is_doc:
            return LineKind.DOC
        if self.is_blank:
            return LineKind.BLANK
        return LineKind.CODE


def split_lines(text: str) -> list[str]:
    """Split source text on newlines, without a phantom line after the last one."""

    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def classify(line: str) -> LineClass:
    is_header = HEADER_PATTERN.match(line) is not None
    return LineClass(
        is_header=is_header,
        # Header lines are a strict subset of doc lines; header wins.
        is_doc=(not is_header) and DOC_PATTERN.match(line) is not None,
        is_blank=line.strip() == "",
    )


def strip_marker(line: str) -> str:
    """Remove the leading comment marker (and the whitespace after it)."""

    return DOC_PATTERN.sub("", line, count=1)
