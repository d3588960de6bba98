"""Blank page detection used by :meth:`PageOrganizer.remove_blank_pages`."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Protocol

from .config import get_config
from .types import PageOrder

LOGGER = logging.getLogger("page_organizer.blank_pages")


class BlankPageDetector(Protocol):
    """Return zero-based indices of the blank pages of a document."""

    def detect(self, document: Any, threshold: Optional[float] = None) -> PageOrder:
        ...


class TextLayerBlankPageDetector:
    """Treat pages without images and with too little text as blank.

    A page is blank when it holds no image XObjects and fewer than
    ``threshold`` non-whitespace characters of extractable text. The
    default threshold of 1 means "no text at all".
    """

    def __init__(self, char_threshold: Optional[int] = None) -> None:
        self.char_threshold = char_threshold

    def _resolve_threshold(self, threshold: Optional[float]) -> int:
        if threshold is not None:
            return int(threshold)
        if self.char_threshold is not None:
            return self.char_threshold
        return get_config().blank_pages.char_threshold

    def detect(self, document: Any, threshold: Optional[float] = None) -> PageOrder:
        limit = self._resolve_threshold(threshold)
        blank: List[int] = []
        for index, page in enumerate(document.iter_pages()):
            if _image_count(page):
                continue
            text = page.extract_text() or ""
            char_count = len("".join(text.split()))
            LOGGER.debug("Page %s has %s text characters", index + 1, char_count)
            if char_count < limit:
                blank.append(index)
        return blank


def _image_count(page: Any) -> int:
    images = getattr(page, "images", None)
    if images is None:
        return 0
    return len(images)


__all__ = ["BlankPageDetector", "TextLayerBlankPageDetector"]
