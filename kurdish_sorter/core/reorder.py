"""
Paragraph reordering for WordprocessingML documents.

The reorderer only moves w:p elements that are direct children of w:body.
Everything inside a paragraph (runs, properties, bookmarks, ...) travels with
it untouched. Non-paragraph body children such as tables and the final
w:sectPr stay where they are; sorted paragraphs fill the slots paragraphs
originally occupied.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from lxml import etree

from kurdish_sorter.core.alphabet import AlphabetTable, KURDISH_ALPHABET
from kurdish_sorter.core.collation import Collator, SortOrder
from kurdish_sorter.core.errors import SerializationError, StructureError
from kurdish_sorter.core.text import TATWEEL, W_BODY, W_P, comparison_text

logger = logging.getLogger(__name__)

# Leading XML declaration, kept verbatim on output
_DECLARATION_RE = re.compile(r"^\ufeff?\s*<\?xml\s.*?\?>\s*", re.DOTALL)


def split_declaration(raw_text: str) -> Tuple[str, str]:
    """Split raw_text into its leading XML declaration (or "") and the rest."""
    match = _DECLARATION_RE.match(raw_text)
    if not match:
        return "", raw_text
    return match.group(0), raw_text[match.end():]


@dataclass(frozen=True)
class ParagraphDescriptor:
    """A paragraph's original position and the text it sorts by."""
    original_index: int
    comparison_text: str


@dataclass
class SorterOptions:
    """Options controlling how paragraphs are ordered."""
    order: SortOrder = SortOrder.DESCENDING
    strip_chars: Tuple[str, ...] = (TATWEEL,)


class DocumentReorderer:
    """
    Sorts the body paragraphs of a WordprocessingML document.

    Works on lxml trees (reorder) or on raw XML text (reorder_text).
    """

    def __init__(
        self,
        options: Optional[SorterOptions] = None,
        alphabet: AlphabetTable = KURDISH_ALPHABET,
    ):
        self.options = options or SorterOptions()
        self.collator = Collator(alphabet, self.options.order)

    # -------------------------------
    # Tree operations
    # -------------------------------
    def find_body(self, root):
        """Return the first w:body element, searching at any depth."""
        if root.tag == W_BODY:
            return root
        body = root.find(f".//{W_BODY}")
        if body is None:
            raise StructureError("Document has no w:body element")
        return body

    def get_paragraphs(self, body) -> list:
        """Direct w:p children of the body, in document order."""
        return [child for child in body if child.tag == W_P]

    def describe(self, paragraphs) -> List[ParagraphDescriptor]:
        return [
            ParagraphDescriptor(
                original_index=index,
                comparison_text=comparison_text(paragraph, self.options.strip_chars),
            )
            for index, paragraph in enumerate(paragraphs)
        ]

    def sort_descriptors(self, descriptors: List[ParagraphDescriptor]) -> List[ParagraphDescriptor]:
        key = self.collator.sort_key()
        return sorted(descriptors, key=lambda d: key(d.comparison_text))

    def sorted_indices(self, root) -> List[int]:
        """Original paragraph indices in their sorted order."""
        paragraphs = self.get_paragraphs(self.find_body(root))
        return [d.original_index for d in self.sort_descriptors(self.describe(paragraphs))]

    def reorder(self, root):
        """
        Reorder the body paragraphs of root in place and return root.

        Raises:
            StructureError: If the document has no body
        """
        body = self.find_body(root)
        paragraphs = self.get_paragraphs(body)
        if not paragraphs:
            logger.debug("No paragraphs found; document left unchanged")
            return root

        descriptors = self.sort_descriptors(self.describe(paragraphs))
        ordered = [paragraphs[d.original_index] for d in descriptors]
        logger.debug("Sorted %d paragraph(s)", len(ordered))

        # Slot positions and the whitespace that followed each slot
        slots = [i for i, child in enumerate(body) if child.tag == W_P]
        tails = [body[i].tail for i in slots]

        for paragraph in paragraphs:
            body.remove(paragraph)
        for slot, tail, paragraph in zip(slots, tails, ordered):
            paragraph.tail = tail
            body.insert(slot, paragraph)

        return root

    # -------------------------------
    # Text round trip
    # -------------------------------
    def parse(self, raw_text: str):
        """
        Parse document XML text into an lxml element.

        The text is already decoded, so any XML declaration (and the encoding
        it names) is skipped rather than handed to lxml.
        """
        _, markup = split_declaration(raw_text)
        parser = etree.XMLParser(resolve_entities=False, huge_tree=True)
        try:
            return etree.fromstring(markup.encode("utf-8"), parser)
        except (etree.XMLSyntaxError, ValueError) as e:
            raise StructureError(f"Document is not well-formed XML: {e}") from e

    def serialize(self, root, declaration: str = "") -> str:
        """Render the tree (with top-level siblings) back to text."""
        try:
            text = etree.tostring(root.getroottree(), encoding="unicode")
        except (etree.LxmlError, ValueError, TypeError) as e:
            raise SerializationError(f"Could not serialize document: {e}") from e
        return declaration + text

    def reorder_text(self, raw_text: str) -> str:
        """Parse, reorder and serialize a document given as text."""
        declaration, _ = split_declaration(raw_text)

        root = self.parse(raw_text)
        self.reorder(root)
        return self.serialize(root, declaration)
