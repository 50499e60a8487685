"""
Text extraction from WordprocessingML paragraphs.

A paragraph's comparison text is the concatenated text of its runs, trimmed
and with tatweel (kashida) removed. Tatweel only stretches letters visually,
so "بـــاران" and "باران" must compare the same.
"""

from typing import Iterable

# WordprocessingML namespace, in Clark notation for lxml lookups
WORDML_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
NS_W = "{" + WORDML_NAMESPACE + "}"

W_BODY = f"{NS_W}body"
W_P = f"{NS_W}p"
W_R = f"{NS_W}r"
W_T = f"{NS_W}t"

TATWEEL = "ـ"


def paragraph_text(paragraph) -> str:
    """
    Concatenate the text of every w:t element inside a paragraph.

    Text elements are visited in document order, so runs nested in
    hyperlinks, insertions or smart tags are included. Empty text elements
    contribute nothing.
    """
    return "".join(t.text or "" for t in paragraph.iter(W_T))


def normalize_text(text: str, strip_chars: Iterable[str] = (TATWEEL,)) -> str:
    """Trim surrounding whitespace, then drop every strip character."""
    text = text.strip()
    for char in strip_chars:
        text = text.replace(char, "")
    return text


def comparison_text(paragraph, strip_chars: Iterable[str] = (TATWEEL,)) -> str:
    """Text used to order a paragraph."""
    return normalize_text(paragraph_text(paragraph), strip_chars)
