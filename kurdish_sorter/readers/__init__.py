"""
Input readers package.

To add a new input format, subclass InputReader and register it:

    from kurdish_sorter.readers.base import InputReader, ReaderRegistry

    @ReaderRegistry.register
    class MyFormatReader(InputReader):
        @classmethod
        def get_extensions(cls) -> list:
            return ['.myformat']

        @classmethod
        def supports_file(cls, file_path: Path) -> bool:
            return file_path.suffix.lower() == '.myformat'

        def read(self, file_path: Path) -> str:
            # Return document XML text
            ...
"""

from kurdish_sorter.readers.base import InputReader, ReaderRegistry
from kurdish_sorter.readers.docx_reader import DocxReader
from kurdish_sorter.readers.xml_reader import XmlReader

__all__ = [
    "InputReader",
    "ReaderRegistry",
    "DocxReader",
    "XmlReader",
]
