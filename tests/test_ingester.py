"""Archive content extraction tests: filtering, decoding, corrupt archives."""

from __future__ import annotations

import struct
import warnings
import zipfile
from pathlib import Path
from typing import Callable

import pytest

from conftest import xhtml
from epubcount.errors import ArchiveFormatError
from epubcount.ingesters import EpubIngester, is_content_entry
from epubcount.sources import open_byte_source


@pytest.mark.parametrize(
    "name",
    [
        "OEBPS/Text/chapter1.xhtml",
        "EPUB/xhtml/part2.html",
        "chapter.xhtml",
        "OEBPS/Text/toc_notes.xhtml",
        "OEBPS/mytoc.xhtml",
    ],
)
def test_content_entries_match(name: str) -> None:
    assert is_content_entry(name)


@pytest.mark.parametrize(
    "name",
    [
        "OEBPS/Text/toc.xhtml",
        "toc.html",
        "OEBPS/content.opf",
        "OEBPS/toc.ncx",
        "OEBPS/Styles/style.css",
        "OEBPS/Images/cover.jpg",
        "OEBPS/Text/chapter1.XHTML",
        "OEBPS/Text/chapter1.htm",
    ],
)
def test_non_content_entries_are_rejected(name: str) -> None:
    assert not is_content_entry(name)


def test_reserved_names_are_case_sensitive() -> None:
    """Only the exact base names are reserved."""
    assert is_content_entry("OEBPS/TOC.xhtml")
    assert is_content_entry("OEBPS/Toc.html")


def test_custom_reserved_names() -> None:
    assert not is_content_entry("EPUB/nav.xhtml", reserved_names={"nav.xhtml"})
    assert is_content_entry("EPUB/toc.xhtml", reserved_names={"nav.xhtml"})


def test_extract_skips_toc_and_auxiliary_entries(make_epub: Callable[..., Path]) -> None:
    path = make_epub(
        "book.epub",
        {
            "OEBPS/Text/chapter1.xhtml": xhtml("<p>one</p>"),
            "OEBPS/Text/toc.xhtml": xhtml("<p>contents</p>"),
            "OEBPS/Styles/style.css": "p { margin: 0 }",
            "OEBPS/Text/chapter2.html": xhtml("<p>two</p>"),
        },
    )

    with open_byte_source(path) as source:
        extraction = EpubIngester().extract(source, path)

    assert [doc.name for doc in extraction.documents] == [
        "OEBPS/Text/chapter1.xhtml",
        "OEBPS/Text/chapter2.html",
    ]
    assert extraction.skipped == []
    assert "<p>one</p>" in extraction.documents[0].text


def test_extract_is_layout_agnostic(make_epub: Callable[..., Path]) -> None:
    """Content outside OEBPS/Text or EPUB/Text is still found."""
    path = make_epub(
        "book.epub",
        {
            "item/xhtml/p-001.xhtml": xhtml("<p>a</p>"),
            "root.html": xhtml("<p>b</p>"),
        },
    )

    with open_byte_source(path) as source:
        extraction = EpubIngester().extract(source, path)

    assert [doc.name for doc in extraction.documents] == ["item/xhtml/p-001.xhtml", "root.html"]


def test_undecodable_entry_is_skipped(make_epub: Callable[..., Path]) -> None:
    """A bad entry is recorded and the rest of the archive is still read."""
    path = make_epub(
        "book.epub",
        {
            "OEBPS/ch1.xhtml": xhtml("<p>good</p>"),
            "OEBPS/ch2.xhtml": b"<p>\xff\xfe\xfa broken</p>",
            "OEBPS/ch3.xhtml": xhtml("<p>also good</p>"),
        },
    )

    with open_byte_source(path) as source:
        extraction = EpubIngester().extract(source, path)

    assert [doc.name for doc in extraction.documents] == ["OEBPS/ch1.xhtml", "OEBPS/ch3.xhtml"]
    assert len(extraction.skipped) == 1
    assert extraction.skipped[0].name == "OEBPS/ch2.xhtml"
    assert "invalid UTF-8" in extraction.skipped[0].reason


def test_utf8_bom_is_dropped(make_epub: Callable[..., Path]) -> None:
    path = make_epub("book.epub", {"ch.xhtml": "\ufeff<p>x</p>".encode("utf-8")})

    with open_byte_source(path) as source:
        extraction = EpubIngester().extract(source, path)

    assert extraction.documents[0].text == "<p>x</p>"


def test_entries_in_directory_order(make_epub: Callable[..., Path]) -> None:
    path = make_epub("book.epub", {"b.xhtml": "b", "a.xhtml": "a"})
    ingester = EpubIngester()

    with open_byte_source(path) as source, zipfile.ZipFile(source) as archive:
        names = [entry.name for entry in ingester.entries(archive)]

    assert names == ["mimetype", "META-INF/container.xml", "OEBPS/content.opf", "b.xhtml", "a.xhtml"]


def test_not_an_archive_raises(corrupt_epub: Path) -> None:
    with open_byte_source(corrupt_epub) as source:
        with pytest.raises(ArchiveFormatError, match="not a valid archive"):
            EpubIngester().extract(source, corrupt_epub)


def test_empty_file_is_not_an_archive(tmp_path: Path) -> None:
    path = tmp_path / "empty.epub"
    path.write_bytes(b"")

    with open_byte_source(path) as source:
        with pytest.raises(ArchiveFormatError):
            EpubIngester().extract(source, path)


def _damage_entry(path: Path, name: str) -> None:
    """Flip bytes at the start of an entry's compressed payload."""
    with zipfile.ZipFile(path) as zf:
        info = zf.getinfo(name)
    data = bytearray(path.read_bytes())
    name_len, extra_len = struct.unpack("<HH", data[info.header_offset + 26 : info.header_offset + 30])
    start = info.header_offset + 30 + name_len + extra_len
    for i in range(start, start + 16):
        data[i] ^= 0xFF
    path.write_bytes(bytes(data))


def test_corrupt_entry_payload_is_skipped(tmp_path: Path) -> None:
    """A damaged member is skipped; its siblings are still extracted."""
    path = tmp_path / "damaged.epub"
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("ch1.xhtml", "<p>good</p>")
        zf.writestr("ch2.xhtml", "<p>" + " ".join(f"word{i}" for i in range(3000)) + "</p>")
        zf.writestr("ch3.xhtml", "<p>fine</p>")
    _damage_entry(path, "ch2.xhtml")

    with open_byte_source(path) as source:
        extraction = EpubIngester().extract(source, path)

    assert [doc.name for doc in extraction.documents] == ["ch1.xhtml", "ch3.xhtml"]
    assert [entry.name for entry in extraction.skipped] == ["ch2.xhtml"]
    assert "corrupt entry" in extraction.skipped[0].reason


def test_duplicate_entry_names_read_separately(tmp_path: Path) -> None:
    """Two directory records with the same name each contribute their own payload."""
    path = tmp_path / "dupes.epub"
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        with zipfile.ZipFile(path, "w") as zf:
            zf.writestr("ch.xhtml", "aaaa")
            zf.writestr("ch.xhtml", "b")

    with open_byte_source(path) as source:
        extraction = EpubIngester().extract(source, path)

    assert [doc.text for doc in extraction.documents] == ["aaaa", "b"]
