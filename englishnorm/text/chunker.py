"""
englishnorm/text/chunker.py
============================
Word Chunker — EnglishNorm

Responsibility:
    - Split large text into word-bounded chunks for a token-limited backend
    - Overlap consecutive chunks so the translator sees boundary context
    - Never emit empty chunks

Window arithmetic:
    A window covers words [start, end) with end = min(start + max_words, n).
    The next window starts at max(0, end - overlap_words). Chunking stops
    once end reaches n, or when the next start would not move forward
    (overlap_words >= max_words).

Chunks are re-joined with single spaces: original whitespace (line
breaks, indentation) inside a chunk is not preserved.

This module does NOT:
    - Count model tokens
    - Merge or de-duplicate translated chunks (see text/merger.py)
"""

import logging
from dataclasses import dataclass

from englishnorm.config import DEFAULT_CHUNK_OVERLAP_WORDS, DEFAULT_MAX_CHUNK_WORDS

logger = logging.getLogger("englishnorm.text.chunker")


@dataclass(frozen=True)
class Chunk:
    """A contiguous, word-bounded slice of the source text."""

    index: int        # zero-based position, defines reassembly order
    text: str         # words [start_word, end_word) joined by single spaces
    start_word: int
    end_word: int

    @property
    def word_count(self) -> int:
        return self.end_word - self.start_word


def chunk_by_words(
    text: str | None,
    max_words: int = DEFAULT_MAX_CHUNK_WORDS,
    overlap_words: int = DEFAULT_CHUNK_OVERLAP_WORDS,
) -> list[Chunk]:
    """
    Split ``text`` into overlapping windows of at most ``max_words`` words.

    Args:
        text:          Source text (None is treated as empty).
        max_words:     Maximum words per chunk (must be >= 1).
        overlap_words: Words shared between consecutive chunks.

    Returns:
        Ordered list of Chunk. Empty or whitespace-only text yields [].

    Raises:
        ValueError: If max_words < 1 or overlap_words < 0.
    """
    if max_words < 1:
        raise ValueError(f"max_words must be >= 1, got {max_words}")
    if overlap_words < 0:
        raise ValueError(f"overlap_words must be >= 0, got {overlap_words}")

    words = (text or "").split()
    total = len(words)
    chunks: list[Chunk] = []

    start = 0
    while start < total:
        end = min(start + max_words, total)
        chunks.append(
            Chunk(
                index=len(chunks),
                text=" ".join(words[start:end]),
                start_word=start,
                end_word=end,
            )
        )
        if end >= total:
            break

        next_start = max(0, end - overlap_words)
        if next_start <= start:
            logger.warning(
                "Chunking stopped early at word %d/%d: overlap (%d) must be "
                "smaller than chunk size (%d).",
                end, total, overlap_words, max_words,
            )
            break
        start = next_start

    return chunks


def overlap_between(previous: Chunk, following: Chunk) -> int:
    """Number of words shared by two consecutive chunks."""
    return max(0, previous.end_word - following.start_word)


def total_overlap(chunks: list[Chunk]) -> int:
    """Sum of word overlaps across all consecutive chunk pairs."""
    return sum(
        overlap_between(prev, nxt) for prev, nxt in zip(chunks, chunks[1:])
    )
