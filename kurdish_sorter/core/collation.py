"""
Kurdish collation.

Strings are tokenized into alphabet ranks with greedy longest-match, so the
two-character "وو" counts as one letter. Strings made only of alphabet
letters are ordered by their rank sequences. Once either string contains a
character outside the alphabet (digits, Latin, punctuation, spaces, the zero
width non-joiner, ...) the pair is ordered by plain code points instead.

Default ordering is DESCENDING: at the first differing letter the higher rank
comes first, and a string sorts after any longer string it is a prefix of.
This is exactly the reverse of ordinary lexicographic order on rank lists.
"""

from enum import Enum, IntEnum
from functools import cmp_to_key
from typing import Iterable, List, NamedTuple, Optional

from kurdish_sorter.core.alphabet import AlphabetTable, KURDISH_ALPHABET


class Ordering(IntEnum):
    """Result of a comparison; usable as a cmp-style integer."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


class SortOrder(Enum):
    """Direction applied to alphabet ranks."""
    DESCENDING = "descending"
    ASCENDING = "ascending"


class Token(NamedTuple):
    """One grapheme of a tokenized string. rank is None when unmapped."""
    grapheme: str
    rank: Optional[int]

    @property
    def mapped(self) -> bool:
        return self.rank is not None

    @property
    def code_point(self) -> int:
        return ord(self.grapheme[0])


def _cmp(a, b) -> Ordering:
    return Ordering((a > b) - (a < b))


class Collator:
    """Compares strings by Kurdish alphabet order."""

    def __init__(
        self,
        alphabet: AlphabetTable = KURDISH_ALPHABET,
        order: SortOrder = SortOrder.DESCENDING,
    ):
        self.alphabet = alphabet
        self.order = order

    def tokenize(self, text: str) -> List[Token]:
        tokens = []
        pos = 0
        while pos < len(text):
            found = self.alphabet.match(text, pos)
            if found is None:
                tokens.append(Token(text[pos], None))
                pos += 1
            else:
                grapheme, rank = found
                tokens.append(Token(grapheme, rank))
                pos += len(grapheme)
        return tokens

    def ranks(self, text: str) -> Optional[List[int]]:
        """Rank sequence for text, or None if it has an unmapped character."""
        result = []
        for token in self.tokenize(text):
            if token.rank is None:
                return None
            result.append(token.rank)
        return result

    def compare(self, a: str, b: str) -> Ordering:
        ranks_a = self.ranks(a)
        ranks_b = self.ranks(b)
        if ranks_a is None or ranks_b is None:
            return _cmp(a, b)

        # List comparison is ascending with prefixes first
        result = _cmp(ranks_a, ranks_b)
        if self.order is SortOrder.DESCENDING:
            return Ordering(-result)
        return result

    def sort_key(self):
        """Key function for sorted() and list.sort()."""
        return cmp_to_key(self.compare)

    def sorted(self, texts: Iterable[str]) -> List[str]:
        return sorted(texts, key=self.sort_key())


DEFAULT_COLLATOR = Collator()


def compare(a: str, b: str) -> Ordering:
    """Compare two strings with the default Kurdish collator."""
    return DEFAULT_COLLATOR.compare(a, b)
