"""Page selection and reordering built around :class:`PDFDocumentAdapter`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from .backends.base import PDFBackend
from .blank_pages import BlankPageDetector, TextLayerBlankPageDetector
from .config import get_config
from .document import PDFDocumentAdapter
from .exceptions import InvalidSelectorSyntaxError, PageOrganizerException
from .selector import invert_selection, parse_selector, validate_page_indices
from .sorters import SortPreset, get_sorter, resolve_preset
from .types import OrganizeResult

LOGGER = logging.getLogger("page_organizer")

CUSTOM_PAGE_ORDER = "CUSTOM_PAGE_ORDER"


class PageOrganizer:
    """Select, reorder and remove pages of a single PDF."""

    def __init__(
        self,
        input_path: str,
        *,
        password: Optional[str] = None,
        backend: Optional[PDFBackend] = None,
    ) -> None:
        self.input_path = str(input_path)
        self._adapter = PDFDocumentAdapter(self.input_path, password=password, backend=backend)
        self.num_pages = self._adapter.num_pages

    def _write_pdf(self, writer: object, destination: Path) -> None:
        try:
            self._adapter.write(writer, destination)
        except OSError as exc:
            raise PageOrganizerException(
                f"Unexpected error writing file: {destination}. Error: {exc}"
            ) from exc

    def select_pages(
        self,
        indices: Iterable[int],
        output_path: Union[str, Path],
        *,
        operation: str = "select",
    ) -> OrganizeResult:
        """Write the pages at zero-based ``indices`` to ``output_path``.

        Order and repetitions of ``indices`` are kept.

        Raises:
            PageOutOfRangeError: If an index is outside the document.
        """

        page_order = validate_page_indices(indices, self.num_pages)
        destination = Path(output_path)

        writer = self._adapter.new_writer()
        self._adapter.copy_pages(writer, page_order)
        self._adapter.copy_metadata(writer, producer=get_config().output.producer)
        self._write_pdf(writer, destination)

        LOGGER.info(
            "Wrote %s of %s pages to %s (%s)",
            len(page_order),
            self.num_pages,
            destination,
            operation,
        )
        LOGGER.debug("Page order: %s", page_order)

        return OrganizeResult(
            source_file=self.input_path,
            output_file=str(destination),
            operation=operation,
            total_pages=self.num_pages,
            page_order=page_order,
        )

    def rearrange_pages(self, selector: str, output_path: Union[str, Path]) -> OrganizeResult:
        """Write the pages named by ``selector`` in selector order."""

        page_order = parse_selector(selector, self.num_pages)
        return self.select_pages(page_order, output_path, operation="rearrange")

    def sort_pages(
        self,
        preset: Union[str, SortPreset],
        output_path: Union[str, Path],
        selector: Optional[str] = None,
    ) -> OrganizeResult:
        """Reorder pages with a named preset.

        ``CUSTOM_PAGE_ORDER`` takes the order from ``selector`` instead.
        """

        if isinstance(preset, str) and preset.strip().upper() == CUSTOM_PAGE_ORDER:
            if not selector:
                raise InvalidSelectorSyntaxError(
                    selector,
                    "A page selector is required for the CUSTOM_PAGE_ORDER preset.",
                )
            return self.rearrange_pages(selector, output_path)

        sort_preset = resolve_preset(preset)
        page_order = get_sorter(sort_preset)(self.num_pages)
        return self.select_pages(
            page_order,
            output_path,
            operation=f"sort:{sort_preset.value}",
        )

    def remove_pages(
        self,
        pages_to_remove: Iterable[int],
        output_path: Union[str, Path],
    ) -> OrganizeResult:
        """Write every page except the zero-based ``pages_to_remove``."""

        page_order = invert_selection(pages_to_remove, self.num_pages)
        return self.select_pages(page_order, output_path, operation="remove")

    def remove_blank_pages(
        self,
        output_path: Union[str, Path],
        threshold: Optional[float] = None,
        detector: Optional[BlankPageDetector] = None,
    ) -> OrganizeResult:
        """Drop the pages ``detector`` reports as blank."""

        detector = detector or TextLayerBlankPageDetector()
        blank_pages = detector.detect(self._adapter, threshold)
        LOGGER.info("Blank pages in %s: %s", self.input_path, [i + 1 for i in blank_pages])

        page_order = invert_selection(blank_pages, self.num_pages)
        return self.select_pages(page_order, output_path, operation="remove-blank")


__all__ = ["PageOrganizer", "CUSTOM_PAGE_ORDER"]
