"""Adapters - I/O implementations around the core."""

from .ics_file import IcsFileReader, IcsFileWriter

__all__ = [
    "IcsFileReader",
    "IcsFileWriter",
]
