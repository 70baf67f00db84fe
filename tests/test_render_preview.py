from __future__ import annotations

import tempfile
from pathlib import Path

from gridpaper.pipeline.render_preview import preview_zoom, render_preview


class DummyRect:
    width = 612.0
    height = 792.0


class DummyPixmap:
    def save(self, path: str) -> None:
        Path(path).write_text("preview", encoding="utf-8")


class DummyPage:
    rect = DummyRect()

    def __init__(self) -> None:
        self.matrix = None

    def get_pixmap(self, matrix=None, alpha=True) -> DummyPixmap:  # noqa: ARG002 - signature matches fitz
        self.matrix = matrix
        return DummyPixmap()


class DummyDoc:
    def __init__(self) -> None:
        self.page_count = 1
        self.closed = False
        self.page = DummyPage()

    def __enter__(self) -> "DummyDoc":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001 - test helper
        self.closed = True

    def load_page(self, index: int) -> DummyPage:  # noqa: ARG002 - test helper
        return self.page


def test_render_preview_closes_document(monkeypatch) -> None:
    doc = DummyDoc()

    def fake_open(path: str) -> DummyDoc:  # noqa: ARG001 - test helper
        return doc

    with tempfile.TemporaryDirectory() as temp_dir:
        monkeypatch.setattr("gridpaper.pipeline.render_preview.fitz.open", fake_open)
        out = render_preview(Path("sample.pdf"), Path(temp_dir) / "previews" / "sample.png")
        assert doc.closed is True
        assert out.exists()
        assert doc.page.matrix is not None


def test_render_preview_from_real_pdf(tmp_path) -> None:
    from gridpaper.models import PageKind
    from gridpaper.pipeline.layout import build_page
    from gridpaper.pipeline.render_pdf import render_pdf

    pdf_path = render_pdf(build_page(PageKind.GRID, "blue"), tmp_path / "grid_paper_blue.pdf")
    png = render_preview(pdf_path, tmp_path / "grid_paper_blue.png", min_px=400)
    assert png.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_preview_zoom_reaches_short_side() -> None:
    # letter page in points
    assert preview_zoom(612.0, 792.0, 2200) == 2200 / 612.0
    assert preview_zoom(792.0, 612.0, 2200) == 2200 / 612.0
    assert preview_zoom(612.0, 792.0, 400) == 2.0


def test_dummy_render_uses_short_side_zoom(monkeypatch, tmp_path) -> None:
    doc = DummyDoc()
    monkeypatch.setattr("gridpaper.pipeline.render_preview.fitz.open", lambda path: doc)
    render_preview(Path("sample.pdf"), tmp_path / "nested" / "sample.png")
    assert doc.page.matrix.a == doc.page.matrix.d == 2200 / 612.0
    assert (tmp_path / "nested" / "sample.png").exists()
