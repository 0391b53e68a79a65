"""Count the non-whitespace characters of an HTML/XHTML document."""

import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, XMLParsedAsHTMLWarning
from bs4.element import CData, NavigableString, RubyParenthesisString, RubyTextString, TemplateString

from epubcount.config import DEFAULT_PARSER

# XHTML is deliberately parsed by a lenient HTML parser
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

# Ruby annotations and template bodies are text too; script/style bodies are not
TEXT_TYPES = (NavigableString, CData, RubyTextString, RubyParenthesisString, TemplateString)


def strip_whitespace(text: str) -> str:
    """Remove every Unicode whitespace run, joining what remains."""
    return "".join(text.split())


def count_characters(text: str) -> int:
    """Return the number of code points left once whitespace is removed."""
    return len(strip_whitespace(text))


class HtmlTextCounter:
    """Counts text characters in markup.

    Text nodes are concatenated in document order, including ruby readings
    (``<rt>``/``<rp>``); tags, attributes, comments, doctypes, processing
    instructions and script/style bodies are ignored. Whitespace is removed
    before counting, so space-delimited scripts are not inflated by inter-word
    spacing while CJK text is counted per character.
    """

    def __init__(self, parser: str = DEFAULT_PARSER):
        """Initialize the counter.

        Args:
            parser: BeautifulSoup tree builder, e.g. "html.parser" or "lxml"
        """
        self.parser = parser

    def extract_text(self, markup: str) -> str:
        """Return the concatenated text nodes of ``markup``.

        Malformed markup is parsed best-effort and never raises.
        """
        soup = BeautifulSoup(markup, self.parser)
        return soup.get_text(types=TEXT_TYPES)

    def count(self, markup: str) -> int:
        return count_characters(self.extract_text(markup))
