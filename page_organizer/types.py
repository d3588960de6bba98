"""
Type definitions and dataclasses for Page Organizer.

This module defines the selector token variants produced by the tokenizer
in :mod:`page_organizer.selector` along with the result structures returned
by document operations.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

PageOrder = List[int]
Sorter = Callable[[int], PageOrder]


@dataclass(frozen=True)
class AllPages:
    """The ``all`` keyword: every page in ascending order."""

    def indices(self, total_pages: int) -> PageOrder:
        return list(range(total_pages))


@dataclass(frozen=True)
class LinearTerm:
    """
    An ``an+b`` style term selecting an arithmetic progression of pages.

    Attributes:
        coefficient: Multiplier written before ``n``; ``None`` when absent
        constant: Signed offset written after ``n`` or after a bare ``+``
    """
    coefficient: Optional[int] = None
    constant: Optional[int] = None

    def indices(self, total_pages: int) -> PageOrder:
        order: PageOrder = []
        for i in range(1, total_pages + 1):
            page = self.coefficient * i if self.coefficient is not None else i
            page += self.constant if self.constant is not None else 0
            if 1 <= page <= total_pages:
                order.append(page - 1)
        return order


@dataclass(frozen=True)
class PageSpan:
    """An inclusive one-based ``start-end`` range; ``end`` is clamped."""

    start: int
    end: int

    def indices(self, total_pages: int) -> PageOrder:
        end = min(self.end, total_pages)
        return list(range(self.start - 1, end))


@dataclass(frozen=True)
class SinglePage:
    """A single one-based page number, not bounds checked."""

    number: int

    def indices(self, total_pages: int) -> PageOrder:
        return [self.number - 1]


@dataclass
class PDFInfo:
    """
    PDF document information and metadata.

    Attributes:
        num_pages: Number of pages in the PDF
        file_size: File size in bytes
        title: PDF title metadata
        author: PDF author metadata
        subject: PDF subject metadata
        creator: PDF creator application
        producer: PDF producer application
        is_encrypted: Whether the PDF is encrypted
    """
    num_pages: int
    file_size: int
    title: Optional[str] = None
    author: Optional[str] = None
    subject: Optional[str] = None
    creator: Optional[str] = None
    producer: Optional[str] = None
    is_encrypted: bool = False


@dataclass
class OrganizeResult:
    """
    Result of a page organizing operation.

    Attributes:
        source_file: Path to source PDF file
        output_file: Path to the written PDF file
        operation: Name of the operation performed
        total_pages: Page count of the source document
        page_order: Zero-based source indices in output order
    """
    source_file: str
    output_file: str
    operation: str
    total_pages: int
    page_order: PageOrder = field(default_factory=list)

    @property
    def pages_written(self) -> int:
        return len(self.page_order)

    def __str__(self) -> str:
        """String representation of the result."""
        return (
            f"OrganizeResult(operation='{self.operation}', "
            f"pages={self.pages_written}/{self.total_pages})"
        )
