"""Interchange file I/O layer for decktransfer.

This module handles reading and writing the section interchange JSON
format. It provides a clean abstraction layer between the wire schema
(pydantic DTOs) and the domain models.

Key responsibilities:
- Parse and validate interchange files
- Convert wire DTOs to domain models and back
- Write sections with a fresh export header

Key classes:
- SectionReader: Load files and iterate sections
- SectionWriter: Save sections
"""

from decktransfer.io.reader import SectionReader, parse_document
from decktransfer.io.writer import SectionWriter, render_document

__all__ = [
    "SectionReader",
    "SectionWriter",
    "parse_document",
    "render_document",
]
