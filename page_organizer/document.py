"""Adapter utilities for interacting with PDF files via pluggable backends."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional, Sequence, Union

from .backends import BackendDocument, PypdfBackend
from .backends.base import PDFBackend
from .types import PDFInfo


class PDFDocumentAdapter:
    """High level helper around a backend-specific PDF document."""

    def __init__(
        self,
        pdf_path: str,
        password: Optional[str] = None,
        *,
        backend: Optional[PDFBackend] = None,
    ) -> None:
        self.path = Path(pdf_path)
        self.backend: PDFBackend = backend or PypdfBackend()
        self._document: BackendDocument = self.backend.load(pdf_path, password=password)

    # ------------------------------------------------------------------
    # Basic document information helpers
    # ------------------------------------------------------------------
    @property
    def document(self) -> BackendDocument:
        return self._document

    @property
    def num_pages(self) -> int:
        return self._document.num_pages

    @property
    def file_size(self) -> int:
        return self._document.file_size

    @property
    def metadata(self) -> Any:
        metadata = getattr(self._document, "metadata", None)
        if metadata is not None:
            return metadata
        reader = getattr(self._document, "reader", None)
        return getattr(reader, "metadata", None)

    @property
    def is_encrypted(self) -> bool:
        encrypted = getattr(self._document, "is_encrypted", None)
        if encrypted is not None:
            return bool(encrypted)
        reader = getattr(self._document, "reader", None)
        return bool(getattr(reader, "is_encrypted", False))

    # ------------------------------------------------------------------
    # Interaction helpers
    # ------------------------------------------------------------------
    def iter_pages(self) -> Iterable[Any]:
        return self._document.iter_pages()

    def new_writer(self) -> Any:
        return self.backend.new_writer()

    def copy_pages(self, writer: Any, indices: Sequence[int]) -> None:
        """Append the pages at ``indices`` to ``writer`` in the given order."""

        self._document.copy_pages(writer, indices)

    def copy_metadata(self, writer: Any, *, producer: Optional[str] = None) -> None:
        self._document.copy_metadata(writer, producer=producer)

    def write(self, writer: Any, destination: Union[str, Path]) -> None:
        self.backend.write(writer, str(destination))

    # ------------------------------------------------------------------
    # Reporting helpers
    # ------------------------------------------------------------------
    def to_pdf_info(self) -> PDFInfo:
        return PDFInfo(
            num_pages=self.num_pages,
            file_size=self.file_size,
            title=getattr(self.metadata, "title", None),
            author=getattr(self.metadata, "author", None),
            subject=getattr(self.metadata, "subject", None),
            creator=getattr(self.metadata, "creator", None),
            producer=getattr(self.metadata, "producer", None),
            is_encrypted=self.is_encrypted,
        )


__all__ = ["PDFDocumentAdapter"]
