# englishnorm/text/__init__.py
# =============================
# Text Layer — EnglishNorm
#
#   - chunk_by_words: split text into overlapping word windows
#   - merge_chunks:   join translated parts with blank lines

from englishnorm.text.chunker import Chunk, chunk_by_words  # noqa: F401
from englishnorm.text.merger import CHUNK_SEPARATOR, merge_chunks  # noqa: F401

__all__ = [
    "Chunk",
    "chunk_by_words",
    "CHUNK_SEPARATOR",
    "merge_chunks",
]
