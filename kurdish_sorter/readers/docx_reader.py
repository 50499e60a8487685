"""
Reader for Microsoft Word .docx files.
"""

import zipfile
from pathlib import Path
from typing import List

from docx import Document as DocxDocument
from docx.opc.exceptions import PackageNotFoundError

from kurdish_sorter.core.errors import AcquisitionError
from kurdish_sorter.readers.base import InputReader, ReaderRegistry


@ReaderRegistry.register
class DocxReader(InputReader):
    """Reader for Microsoft Word .docx files (Open XML format)."""

    @classmethod
    def get_extensions(cls) -> List[str]:
        return [".docx"]

    @classmethod
    def supports_file(cls, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".docx"

    @classmethod
    def get_priority(cls) -> int:
        return 100

    def read(self, file_path: Path) -> str:
        """Return the main document part (word/document.xml) as text."""
        file_path = Path(file_path)
        if not file_path.is_file():
            raise AcquisitionError(f"File not found: {file_path}")

        try:
            source = DocxDocument(str(file_path))
        except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as e:
            raise AcquisitionError(f"Could not open {file_path.name} as .docx: {e}") from e

        # The part's blob re-serializes its element, declaration included
        return source.part.blob.decode("utf-8")
