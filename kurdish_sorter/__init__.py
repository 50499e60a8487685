"""
Kurdish Sorter - sort Word document paragraphs in Kurdish (Sorani) alphabet order.

The alphabet has its own letter order and a two-character letter ("وو"),
so plain code-point sorting gives the wrong result. This package extracts each
paragraph's text, compares it with a Kurdish collator, and moves whole
paragraph elements into the new order without touching their contents.

Example:
    from kurdish_sorter import PipelineDriver, ReaderRegistry, WriterRegistry

    # Sort raw word/document.xml text
    driver = PipelineDriver()
    sorted_xml = driver.process(xml_text)

    # Or whole files
    reader = ReaderRegistry.get_reader_for_file(input_path)
    writer = WriterRegistry.get_writer_for_extension(input_path.suffix)
    driver.run(
        lambda: reader.read(input_path),
        lambda text: writer.write(text, output_path, source_path=input_path),
    )
"""

from kurdish_sorter.core.alphabet import AlphabetTable, KURDISH_ALPHABET
from kurdish_sorter.core.collation import Collator, Ordering, SortOrder, compare
from kurdish_sorter.core.errors import (
    SorterError,
    StructureError,
    SerializationError,
    AcquisitionError,
)
from kurdish_sorter.core.reorder import DocumentReorderer, ParagraphDescriptor, SorterOptions
from kurdish_sorter.core.pipeline import Phase, PipelineDriver, PipelineState, StepOutcome, StepStatus
from kurdish_sorter.readers import ReaderRegistry
from kurdish_sorter.writers import WriterRegistry

__version__ = "1.0.0"
__all__ = [
    "AlphabetTable",
    "KURDISH_ALPHABET",
    "Collator",
    "Ordering",
    "SortOrder",
    "compare",
    "SorterError",
    "StructureError",
    "SerializationError",
    "AcquisitionError",
    "DocumentReorderer",
    "ParagraphDescriptor",
    "SorterOptions",
    "Phase",
    "PipelineDriver",
    "PipelineState",
    "StepOutcome",
    "StepStatus",
    "ReaderRegistry",
    "WriterRegistry",
]
