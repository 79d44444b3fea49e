"""
englishnorm/text/merger.py
===========================
Chunk Merger — EnglishNorm

Joins translated (or fallback) chunk texts into a single document,
one paragraph per chunk. The word overlap introduced by the chunker is
left in place: adjacent parts may repeat a short span of text.
"""

from typing import Iterable

CHUNK_SEPARATOR: str = "\n\n"


def merge_chunks(parts: Iterable[str], separator: str = CHUNK_SEPARATOR) -> str:
    """Join ``parts`` in order with ``separator`` (blank line by default)."""
    return separator.join(parts)
