"""Archive content extractors for epubcount."""

from epubcount.ingesters.epub_ingester import EpubIngester, is_content_entry

__all__ = ["EpubIngester", "is_content_entry"]
