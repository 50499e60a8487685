"""
Shared fixtures: small WordprocessingML documents built inline.
"""

from xml.sax.saxutils import escape

import pytest

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'


def paragraph_xml(text: str) -> str:
    """A right-aligned RTL paragraph holding text in a single run."""
    return (
        '<w:p><w:pPr><w:bidi/><w:jc w:val="right"/></w:pPr>'
        f'<w:r><w:rPr><w:rtl/></w:rPr><w:t xml:space="preserve">{escape(text)}</w:t></w:r></w:p>'
    )


def document_xml(body: str) -> str:
    return f'{DECLARATION}<w:document xmlns:w="{W_NS}"><w:body>{body}</w:body></w:document>'


@pytest.fixture
def make_document():
    """Build document XML whose body holds one paragraph per text, then a w:sectPr."""
    def build(texts, trailer="<w:sectPr/>"):
        return document_xml("".join(paragraph_xml(t) for t in texts) + trailer)
    return build
