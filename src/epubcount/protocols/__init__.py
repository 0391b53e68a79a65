"""Protocol definitions for extensible components."""

from epubcount.protocols.byte_source import ByteSource
from epubcount.protocols.counter import CountingStrategy
from epubcount.protocols.ingester import Ingester

__all__ = ["ByteSource", "Ingester", "CountingStrategy"]
