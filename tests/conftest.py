"""Shared fixtures for the mdpaper test suite.

Rendering goes through ``FakeRenderer`` (writes a stub PDF) or a fake
Playwright driver, so no Chromium install is needed.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from mdpaper.console import ConsoleLogger
from mdpaper.errors import RenderError

# Smallest byte string that still looks like a PNG
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR-fake-image"


class FakeRenderer:
    """Stands in for PdfRenderer: records every call and writes a stub PDF."""

    def __init__(self, logger=None, fail_on=()):
        self.logger = logger
        self.fail_on = set(fail_on)
        self.calls = []

    async def render(self, html, output_pdf, paper_format):
        output_pdf = Path(output_pdf)
        self.calls.append((html, output_pdf, paper_format))
        if output_pdf.name in self.fail_on:
            raise RenderError(f"Failed to render {output_pdf.name}: browser crashed")
        output_pdf.write_bytes(b"%PDF-1.4 fake")
        return output_pdf


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("MDPAPER_SOURCE_DIR", "MDPAPER_OUTPUT_DIR", "MDPAPER_FORMAT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def logger() -> ConsoleLogger:
    return ConsoleLogger(debug=True)


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    path = tmp_path / "markdown"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "output"


@pytest.fixture
def image_dir(source_dir: Path) -> Path:
    path = source_dir / "images"
    path.mkdir()
    (path / "diagram.png").write_bytes(PNG_BYTES)
    return path


def pdf_names(directory: Path) -> list[str]:
    return sorted(p.name for p in directory.glob("*.pdf"))
