"""
Writer for Microsoft Word .docx files.

The sorted text only replaces the main document part. Styles, numbering,
footnotes, media and every other package part are copied from the source
package as they are.
"""

from pathlib import Path

from docx import Document as DocxDocument
from docx.oxml import parse_xml

from kurdish_sorter.writers.base import OutputWriter, WriterRegistry


@WriterRegistry.register
class DocxWriter(OutputWriter):
    """Writes a .docx package whose document part holds the sorted XML."""

    @classmethod
    def get_format_name(cls) -> str:
        return "docx"

    @classmethod
    def get_extension(cls) -> str:
        return ".docx"

    def write(self, text: str, output_path: Path, **options) -> Path:
        """
        Args:
            text: Sorted word/document.xml content
            output_path: Destination .docx
            source_path: The .docx the text was read from (required)
        """
        source_path = options.get("source_path")
        if not source_path:
            raise ValueError("DocxWriter requires the source_path option")

        docx_doc = DocxDocument(str(source_path))
        # python-docx serializes a part from its element when saving
        docx_doc.part._element = parse_xml(text.encode("utf-8"))

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        docx_doc.save(str(output_path))
        return output_path
