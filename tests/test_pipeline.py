from __future__ import annotations

from pathlib import Path

import pytest

from litpage.config import default_config
from litpage.errors import LitpageResolutionError, LitpageSourceError
from litpage.pipeline import build_document, read_source, segment_source


def _docs(text: str) -> str:
    return f"[{text}]"


def _code(text: str) -> str:
    return f"{{{text}}}"


def test_segment_source_splits_and_segments() -> None:
    segs = segment_source("// a\nx\n")
    assert [(s.docs_raw, s.code_raw) for s in segs] == [("a", "x")]


def test_read_source_missing(tmp_path: Path) -> None:
    with pytest.raises(LitpageSourceError, match="No such source file"):
        read_source(tmp_path / "missing.go")


def test_read_source_directory(tmp_path: Path) -> None:
    with pytest.raises(LitpageSourceError):
        read_source(tmp_path)


def test_build_document_with_injected_renderers(tmp_path: Path) -> None:
    src = tmp_path / "main.go"
    src.write_text("// # Head\n// prose\nfunc f() {}\n", encoding="utf-8")

    html = build_document(src, "T", render_docs=_docs, render_code=_code)
    assert "<td class=docs>[]</td>" in html
    assert "<td class=docs>[# Head]</td>" in html
    assert "<td class=docs>[prose]</td>" in html
    assert "<td class=code>{func f() {}  }</td>" in html
    assert html.index("[# Head]") < html.index("[prose]")


def test_build_document_resolves_before_reading(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("PATH", str(tmp_path))
    # The source does not exist either; resolution must fail first.
    with pytest.raises(LitpageResolutionError):
        build_document(tmp_path / "missing.go", "T")


def test_build_document_parallel_matches_serial(tmp_path: Path) -> None:
    src = tmp_path / "main.go"
    src.write_text("// a\nx\n// b\ny\n// # H\nz\n", encoding="utf-8")

    serial = build_document(src, "T", render_docs=_docs, render_code=_code)
    cfg = default_config()
    parallel_cfg = type(cfg)(
        language=cfg.language, renderers=cfg.renderers, page=cfg.page, jobs=3
    )
    parallel = build_document(
        src, "T", config=parallel_cfg, render_docs=_docs, render_code=_code
    )
    assert parallel == serial
