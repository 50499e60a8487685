"""
Core sorting engine: alphabet, text extraction, collation and reordering.
"""

from kurdish_sorter.core.alphabet import AlphabetTable, KURDISH_ALPHABET, KURDISH_LETTERS
from kurdish_sorter.core.collation import (
    Collator,
    Ordering,
    SortOrder,
    Token,
    compare,
)
from kurdish_sorter.core.errors import (
    SorterError,
    StructureError,
    SerializationError,
    AcquisitionError,
)
from kurdish_sorter.core.text import (
    TATWEEL,
    paragraph_text,
    normalize_text,
    comparison_text,
)
from kurdish_sorter.core.reorder import (
    DocumentReorderer,
    ParagraphDescriptor,
    SorterOptions,
)
from kurdish_sorter.core.pipeline import (
    Phase,
    PipelineDriver,
    PipelineState,
    StepOutcome,
    StepStatus,
)

__all__ = [
    # Alphabet
    "AlphabetTable",
    "KURDISH_ALPHABET",
    "KURDISH_LETTERS",
    # Collation
    "Collator",
    "Ordering",
    "SortOrder",
    "Token",
    "compare",
    # Errors
    "SorterError",
    "StructureError",
    "SerializationError",
    "AcquisitionError",
    # Text extraction
    "TATWEEL",
    "paragraph_text",
    "normalize_text",
    "comparison_text",
    # Reordering
    "DocumentReorderer",
    "ParagraphDescriptor",
    "SorterOptions",
    # Pipeline
    "Phase",
    "PipelineDriver",
    "PipelineState",
    "StepOutcome",
    "StepStatus",
]
