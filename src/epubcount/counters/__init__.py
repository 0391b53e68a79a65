"""Character counting strategies."""

from epubcount.counters.html_counter import HtmlTextCounter, count_characters, strip_whitespace

__all__ = ["HtmlTextCounter", "count_characters", "strip_whitespace"]
