"""
Knowledge feature: sentence-aligned text chunking.
"""

import re

# Rough approximation: 1 token ~= 4 characters of English text
CHARS_PER_TOKEN = 4

# Break after . ! ? when followed by whitespace; the punctuation stays with its sentence.
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def split_sentences(text: str) -> list[str]:
    return _SENTENCE_BOUNDARY.split(text)


def split_text_into_chunks(text: str, max_tokens: int = 500) -> list[str]:
    """Split text into chunks of roughly `max_tokens` tokens.

    Sentences are packed greedily into a buffer of at most
    `max_tokens * CHARS_PER_TOKEN` characters. A single sentence longer
    than that is kept whole as its own chunk.

    Args:
        text: Raw document text.
        max_tokens: Approximate token budget per chunk.

    Returns:
        Chunks in document order. Empty or whitespace-only input yields [].
    """
    max_chars = max_tokens * CHARS_PER_TOKEN

    chunks: list[str] = []
    current = ""

    for sentence in split_sentences(text):
        if len(current) + len(sentence) > max_chars and len(current) > 0:
            chunks.append(current.strip())
            current = ""

        current += sentence + " "

    if current.strip():
        chunks.append(current.strip())

    return chunks
