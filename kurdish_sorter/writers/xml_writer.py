"""
Writer for bare WordprocessingML XML.
"""

from pathlib import Path

from kurdish_sorter.writers.base import OutputWriter, WriterRegistry


@WriterRegistry.register
class XmlWriter(OutputWriter):
    """Writes the sorted document XML as UTF-8 text."""

    @classmethod
    def get_format_name(cls) -> str:
        return "xml"

    @classmethod
    def get_extension(cls) -> str:
        return ".xml"

    def write(self, text: str, output_path: Path, **options) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
        return output_path
