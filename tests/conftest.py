from __future__ import annotations

from pathlib import Path
from typing import Callable
import sys

import pytest
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tests.pdf_helpers import write_pdf  # noqa: E402


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(filename: str, texts, title: str | None = None, password: str | None = None) -> Path:
        return write_pdf(tmp_path / filename, texts, title=title, password=password)

    return _create


@pytest.fixture()
def sample_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory("sample.pdf", [f"Page {i + 1}" for i in range(10)], title="Sample")


@pytest.fixture()
def scanned_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory(
        "scanned.pdf",
        ["Cover", None, "Chapter one", "", "xy", "Chapter two"],
        title="Scan",
    )


@pytest.fixture()
def empty_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "empty.pdf"
    writer = PdfWriter()
    with pdf_path.open("wb") as stream:
        writer.write(stream)
    return pdf_path
