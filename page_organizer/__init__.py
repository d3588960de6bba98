"""
Page Organizer - Page selection and reordering for PDF files.

This library compiles page selector strings and named sort presets into
ordered lists of zero-based page indices, and applies those orders to PDF
files through a pluggable backend.

Quick Start:
    >>> from page_organizer import parse_selector, get_sorter
    >>> parse_selector("1-3,2n", 6)
    [0, 1, 2, 1, 3, 5]
    >>> get_sorter("DUPLEX_SORT")(5)
    [0, 4, 1, 3, 2]

Main Classes:
    - PageOrganizer: Select, reorder and remove pages of a PDF
    - SortPreset: Registered sort presets

Data Classes:
    - PDFInfo: PDF metadata and information
    - OrganizeResult: Result of a page organizing operation

Exceptions:
    - PageOrganizerException: Base exception
    - InvalidSelectorSyntaxError: Selector token cannot be interpreted
    - UnknownSorterError: Sort preset is not registered
    - PageOutOfRangeError: Page index outside the document
    - InvalidPDFError: Invalid or corrupted PDF
    - EncryptedPDFError: Encrypted PDF
    - ConfigurationError: Unreadable environment setting

For CLI usage, use the 'page-organizer' command after installation.
"""

__version__ = "1.0.0"
__author__ = "Page Organizer Contributors"
__license__ = "MIT"

# Page selection and sorting
from page_organizer.selector import (
    invert_selection,
    parse_selector,
    tokenize_selector,
    validate_page_indices,
)
from page_organizer.sorters import SortPreset, available_presets, get_sorter

# Core classes
from page_organizer.organizer import CUSTOM_PAGE_ORDER, PageOrganizer
from page_organizer.blank_pages import BlankPageDetector, TextLayerBlankPageDetector

# Data types
from page_organizer.types import OrganizeResult, PDFInfo

# Exceptions
from page_organizer.exceptions import (
    PageOrganizerException,
    InvalidPDFError,
    EncryptedPDFError,
    ConfigurationError,
    InvalidSelectorSyntaxError,
    UnknownSorterError,
    PageOutOfRangeError,
)

# Utility functions
from page_organizer.utils import get_pdf_info, check_pdf_path, validate_pdf, format_file_size

__all__ = [
    # Page selection and sorting
    "parse_selector",
    "tokenize_selector",
    "validate_page_indices",
    "invert_selection",
    "get_sorter",
    "available_presets",
    "SortPreset",
    # Main classes
    "PageOrganizer",
    "CUSTOM_PAGE_ORDER",
    "BlankPageDetector",
    "TextLayerBlankPageDetector",
    # Data types
    "PDFInfo",
    "OrganizeResult",
    # Exceptions
    "PageOrganizerException",
    "InvalidPDFError",
    "EncryptedPDFError",
    "ConfigurationError",
    "InvalidSelectorSyntaxError",
    "UnknownSorterError",
    "PageOutOfRangeError",
    # Utility functions
    "get_pdf_info",
    "check_pdf_path",
    "validate_pdf",
    "format_file_size",
    # Version info
    "__version__",
]
