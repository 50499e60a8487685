"""
Reader for bare WordprocessingML XML.

Handles an extracted word/document.xml as well as Word's single-file
"Word XML Document" (Flat OPC) format.
"""

from pathlib import Path
from typing import List

from kurdish_sorter.core.errors import AcquisitionError
from kurdish_sorter.readers.base import InputReader, ReaderRegistry


@ReaderRegistry.register
class XmlReader(InputReader):
    """Reader for WordprocessingML .xml files."""

    @classmethod
    def get_extensions(cls) -> List[str]:
        return [".xml"]

    @classmethod
    def supports_file(cls, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".xml"

    @classmethod
    def get_priority(cls) -> int:
        return 50

    def read(self, file_path: Path) -> str:
        file_path = Path(file_path)
        try:
            # utf-8-sig drops a leading byte order mark
            return file_path.read_text(encoding="utf-8-sig")
        except FileNotFoundError as e:
            raise AcquisitionError(f"File not found: {file_path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise AcquisitionError(f"Could not read {file_path.name}: {e}") from e
