"""Utility functions for PDF operations."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Optional, Tuple

from .document import PDFDocumentAdapter
from .exceptions import PageOrganizerException
from .types import PDFInfo


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure package-wide logging."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def get_pdf_info(pdf_path: str, password: Optional[str] = None) -> PDFInfo:
    """Return information about a PDF document using :class:`PDFInfo`."""

    adapter = PDFDocumentAdapter(pdf_path, password=password)
    return adapter.to_pdf_info()


def check_pdf_path(pdf_path: str) -> Tuple[bool, str]:
    """Check that ``pdf_path`` names an existing ``.pdf`` file without parsing it."""

    if not os.path.exists(pdf_path):
        return False, f"File not found: {pdf_path}"

    if not os.path.isfile(pdf_path):
        return False, f"Path is not a file: {pdf_path}"

    if not pdf_path.lower().endswith(".pdf"):
        return False, f"File does not have .pdf extension: {pdf_path}"

    return True, ""


def validate_pdf(pdf_path: str, password: Optional[str] = None) -> Tuple[bool, str]:
    """Perform lightweight validation of a PDF file."""

    is_valid, error_msg = check_pdf_path(pdf_path)
    if not is_valid:
        return is_valid, error_msg

    try:
        PDFDocumentAdapter(pdf_path, password=password)
    except PageOrganizerException as exc:
        return False, str(exc)
    return True, ""


def format_page_order(page_order: Iterable[int], limit: int = 20) -> str:
    """
    Format zero-based indices as one-based page numbers for display.

    Args:
        page_order: Zero-based page indices
        limit: Maximum number of pages shown before eliding the rest

    Returns:
        Formatted string (e.g., "1, 3, 5", "1, 2, ... (+8 more)")
    """
    pages = [str(index + 1) for index in page_order]
    if not pages:
        return "(none)"
    if len(pages) > limit:
        return f"{', '.join(pages[:limit])}, ... (+{len(pages) - limit} more)"
    return ", ".join(pages)


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500 KB")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"
