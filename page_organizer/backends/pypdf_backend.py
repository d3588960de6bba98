"""pypdf backend implementation for Page Organizer."""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PdfReadError

from ..exceptions import EncryptedPDFError, InvalidPDFError
from .base import BackendDocument, PDFBackend


@dataclass
class PypdfDocument(BackendDocument):
    reader: PdfReader

    def iter_pages(self) -> Iterable[object]:
        return iter(self.reader.pages)

    def copy_pages(self, writer: PdfWriter, indices: Sequence[int]) -> None:
        for index in indices:
            writer.add_page(self.reader.pages[index])

    def copy_metadata(self, writer: PdfWriter, *, producer: str | None = None) -> None:
        metadata_dict = {}
        metadata = self.reader.metadata

        if metadata and metadata.title:
            metadata_dict['/Title'] = metadata.title
        if metadata and metadata.author:
            metadata_dict['/Author'] = metadata.author
        if metadata and metadata.subject:
            metadata_dict['/Subject'] = metadata.subject
        if metadata and metadata.creator:
            metadata_dict['/Creator'] = metadata.creator

        if producer:
            metadata_dict['/Producer'] = producer

        if metadata_dict:
            writer.add_metadata(metadata_dict)


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def load(self, pdf_path: str, password: str | None = None) -> PypdfDocument:
        path = Path(pdf_path)
        if not path.exists() or not path.is_file():
            raise InvalidPDFError(f"PDF file not found: {pdf_path}")

        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise InvalidPDFError(f"Unable to read PDF file: {pdf_path}. Error: {exc}") from exc

        try:
            reader = PdfReader(io.BytesIO(raw_bytes))
        except PdfReadError as exc:
            raise InvalidPDFError(f"Corrupted or invalid PDF file: {pdf_path}. Error: {exc}") from exc
        except Exception as exc:
            raise InvalidPDFError(f"Unexpected error reading PDF: {pdf_path}. Error: {exc}") from exc

        if reader.is_encrypted:
            if password:
                if reader.decrypt(password) == 0:
                    raise EncryptedPDFError("Failed to decrypt PDF with supplied password.")
            else:
                raise EncryptedPDFError("PDF is encrypted. Supply a password to process this file.")

        return PypdfDocument(
            num_pages=len(reader.pages),
            file_size=len(raw_bytes),
            reader=reader,
        )

    def new_writer(self) -> PdfWriter:
        return PdfWriter()

    def write(self, writer: PdfWriter, destination: str) -> None:
        path = Path(destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open('wb') as handle:
            writer.write(handle)
