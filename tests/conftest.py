"""Shared pytest fixtures for epubcount tests.

Builds small EPUB archives on disk with zipfile so every test works on real
containers rather than mocks.
"""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Callable

import pytest

CONTAINER_XML = """<?xml version="1.0"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="OEBPS/content.opf" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""

OPF = """<?xml version="1.0" encoding="utf-8"?>
<package xmlns="http://www.idpf.org/2007/opf" version="3.0">
  <metadata><dc:title xmlns:dc="http://purl.org/dc/elements/1.1/">A long title for a book</dc:title></metadata>
</package>
"""


def xhtml(body: str) -> str:
    """Wrap body markup in a minimal XHTML document with an empty head."""
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        "<!DOCTYPE html>\n"
        '<html xmlns="http://www.w3.org/1999/xhtml">\n'
        "<head></head>\n"
        f"<body>{body}</body>\n"
        "</html>\n"
    )


def write_epub(path: Path, entries: dict[str, str | bytes]) -> Path:
    """Write an EPUB-shaped ZIP with the given content entries."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("mimetype", "application/epub+zip", compress_type=zipfile.ZIP_STORED)
        zf.writestr("META-INF/container.xml", CONTAINER_XML)
        zf.writestr("OEBPS/content.opf", OPF)
        for name, content in entries.items():
            zf.writestr(name, content)
    return path


@pytest.fixture
def make_epub(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture: make_epub("name.epub", {"OEBPS/ch1.xhtml": "..."})."""

    def _make(name: str, entries: dict[str, str | bytes]) -> Path:
        return write_epub(tmp_path / name, entries)

    return _make


@pytest.fixture
def library(tmp_path: Path) -> Path:
    """Create a directory tree of books with known counts.

    Structure:
        books/
          a.epub             10  (chapter1 + toc that must be ignored)
          nested/
            b.EPUB           11  (CJK chapter + .html chapter)
            deeper/
              c.epub         16  (heading + paragraph)
          notes.txt          (not an epub, ignored by --walk)
    """
    root = tmp_path / "books"
    write_epub(
        root / "a.epub",
        {
            "OEBPS/Text/chapter1.xhtml": xhtml("<p>  hello   world  </p>"),
            "OEBPS/Text/toc.xhtml": xhtml("<p>Contents Chapter One</p>"),
        },
    )
    write_epub(
        root / "nested" / "b.EPUB",
        {
            "EPUB/ch1.xhtml": xhtml("<p>你好，世界</p>"),
            "EPUB/ch2.html": "<html><body><p>abc def</p></body></html>",
        },
    )
    write_epub(
        root / "nested" / "deeper" / "c.epub",
        {"Text/part.xhtml": xhtml("<h1>Title</h1>\n<p>one two three</p>")},
    )
    (root / "notes.txt").write_text("not a book")
    return root


@pytest.fixture
def corrupt_epub(tmp_path: Path) -> Path:
    """A file with an .epub suffix that is not a ZIP archive."""
    path = tmp_path / "books" / "broken.epub"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"this is definitely not a zip archive" * 10)
    return path
