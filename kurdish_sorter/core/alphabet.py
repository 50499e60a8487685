"""
Kurdish (Sorani) alphabet ordering.

The alphabet is an ordered list of graphemes. Most graphemes are a single
code point, but some (the double waw "وو") are written with two characters
and still sort as one letter. Lookups are greedy: at any position the
longest grapheme that matches wins.
"""

from typing import Dict, Iterable, List, Optional, Tuple


# -------------------------------
# Kurdish letters in alphabet order
# -------------------------------
KURDISH_LETTERS = [
    "ئ", "ا", "ب", "پ", "ت", "ج", "چ", "ح", "خ", "د",
    "ر", "ڕ", "ز", "ژ", "س", "ش", "ع", "غ", "ف", "ڤ",
    "ق", "ک", "گ", "ل", "ڵ", "م", "ن", "و", "ۆ", "وو",
    "ه", "ە", "ی", "ێ",
]


class AlphabetTable:
    """
    Immutable grapheme -> rank mapping.

    Ranks are assigned densely from 0 in the order the graphemes are given.
    """

    __slots__ = ("_ranks", "_lengths")

    def __init__(self, graphemes: Iterable[str]):
        ranks: Dict[str, int] = {}
        for grapheme in graphemes:
            if not grapheme:
                raise ValueError("Alphabet graphemes must not be empty")
            if grapheme in ranks:
                raise ValueError(f"Duplicate grapheme in alphabet: {grapheme!r}")
            ranks[grapheme] = len(ranks)

        self._ranks = ranks
        # Longest graphemes are tried first
        self._lengths = tuple(sorted({len(g) for g in ranks}, reverse=True))

    def __len__(self) -> int:
        return len(self._ranks)

    def __contains__(self, grapheme: str) -> bool:
        return grapheme in self._ranks

    def __iter__(self):
        return iter(self._ranks)

    def rank(self, grapheme: str) -> int:
        """Return the rank of a grapheme. Raises KeyError if unknown."""
        return self._ranks[grapheme]

    def get(self, grapheme: str) -> Optional[int]:
        return self._ranks.get(grapheme)

    @property
    def max_grapheme_length(self) -> int:
        return self._lengths[0] if self._lengths else 0

    def multi_char_graphemes(self) -> List[str]:
        """Graphemes written with more than one character."""
        return [g for g in self._ranks if len(g) > 1]

    def match(self, text: str, pos: int) -> Optional[Tuple[str, int]]:
        """
        Find the longest grapheme starting at text[pos].

        Returns (grapheme, rank) or None if the character at pos is not
        part of the alphabet.
        """
        for length in self._lengths:
            candidate = text[pos:pos + length]
            if len(candidate) != length:
                continue
            rank = self._ranks.get(candidate)
            if rank is not None:
                return candidate, rank
        return None


KURDISH_ALPHABET = AlphabetTable(KURDISH_LETTERS)
