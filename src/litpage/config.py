"""Fixed tool settings for litpage.

There is no configuration file and no environment lookup: the values here
are the whole configuration surface, grouped the way the pipeline consumes
them.
"""

from __future__ import annotations

from dataclasses import dataclass

DOCCO_STYLESHEET = "http://jashkenas.github.com/docco/resources/docco.css"


@dataclass(frozen=True)
class RendererConfig:
    markdown_executable: str
    markdown_args: tuple[str, ...]
    highlighter_executable: str
    highlighter_args: tuple[str, ...]


@dataclass(frozen=True)
class PageConfig:
    stylesheet: str


@dataclass(frozen=True)
class ToolConfig:
    language: str
    renderers: RendererConfig
    page: PageConfig
    jobs: int = 1


def highlighter_args(language: str) -> tuple[str, ...]:
    """Arguments selecting the lexer and HTML output for `pygmentize`."""

    return ("-l", language, "-f", "html")


def default_config() -> ToolConfig:
    language = "go"
    return ToolConfig(
        language=language,
        renderers=RendererConfig(
            markdown_executable="markdown",
            markdown_args=(),
            highlighter_executable="pygmentize",
            highlighter_args=highlighter_args(language),
        ),
        page=PageConfig(stylesheet=DOCCO_STYLESHEET),
    )
