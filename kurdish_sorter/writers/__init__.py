"""
Output writers package.

To add a new output format, subclass OutputWriter and register it:

    from kurdish_sorter.writers.base import OutputWriter, WriterRegistry

    @WriterRegistry.register
    class MyFormatWriter(OutputWriter):
        @classmethod
        def get_format_name(cls) -> str:
            return 'myformat'

        @classmethod
        def get_extension(cls) -> str:
            return '.myformat'

        def write(self, text: str, output_path: Path, **options) -> Path:
            ...
"""

from kurdish_sorter.writers.base import OutputWriter, WriterRegistry
from kurdish_sorter.writers.docx_writer import DocxWriter
from kurdish_sorter.writers.xml_writer import XmlWriter

__all__ = [
    "OutputWriter",
    "WriterRegistry",
    "DocxWriter",
    "XmlWriter",
]
