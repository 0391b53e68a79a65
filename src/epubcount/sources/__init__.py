"""Byte sources for reading archive files."""

from epubcount.sources.buffered import BufferedSource
from epubcount.sources.mapped import MappedSource
from epubcount.sources.provider import open_byte_source

__all__ = ["open_byte_source", "MappedSource", "BufferedSource"]
