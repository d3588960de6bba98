"""
Custom exceptions for Page Organizer.

This module defines all custom exceptions used throughout the library.
"""

from typing import Optional


class PageOrganizerException(Exception):
    """Base exception for all Page Organizer errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown page organizer error occurred."


class InvalidPDFError(PageOrganizerException):
    """Raised when PDF file is invalid or corrupted."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class EncryptedPDFError(PageOrganizerException):
    """Raised when PDF is encrypted and cannot be processed."""

    @property
    def default_message(self) -> str:
        return "PDF is encrypted and cannot be processed without a password."


class ConfigurationError(PageOrganizerException):
    """Raised when an environment setting cannot be interpreted."""

    @property
    def default_message(self) -> str:
        return "Invalid Page Organizer configuration."


class InvalidSelectorSyntaxError(PageOrganizerException):
    """Raised when a page selector token cannot be interpreted."""

    def __init__(self, token: Optional[str] = None, message: str = "") -> None:
        self.token = token
        if not message and token is not None:
            message = f"Invalid page selector: '{token}'."
        super().__init__(message)

    @property
    def default_message(self) -> str:
        return "Invalid page selector."


class UnknownSorterError(PageOrganizerException):
    """Raised when a sort preset name is not registered."""

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name
        message = f"Unknown sort preset: '{name}'." if name is not None else ""
        super().__init__(message)

    @property
    def default_message(self) -> str:
        return "Unknown sort preset."


class PageOutOfRangeError(PageOrganizerException):
    """Raised when a page index falls outside the document.

    ``index`` is the offending zero-based index and ``total_pages`` the
    page count of the document it was checked against.
    """

    def __init__(self, index: Optional[int] = None, total_pages: Optional[int] = None) -> None:
        self.index = index
        self.total_pages = total_pages
        message = ""
        if index is not None and total_pages is not None:
            message = (
                f"The PDF document only has {total_pages} pages and you tried "
                f"to extract page {index + 1}."
            )
        super().__init__(message)

    @property
    def default_message(self) -> str:
        return "Requested page is out of range."
