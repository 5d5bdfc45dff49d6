from __future__ import annotations

import re
from itertools import islice
from typing import List

# Capacities; anything beyond them is dropped, never an error.
MAX_SENTENCES = 2048
MAX_TOKENS_PER_SENTENCE = 2048
MAX_TOKEN_LENGTH = 63  # characters, not UTF-8 bytes

# A sentence runs up to and including the first terminator. Whitespace-only
# pieces between sentences are stripped to "" and discarded by the caller.
_SENTENCE_RE = re.compile(r"[^.?!\n]*[.?!\n]|[^.?!\n]+")

# Alphanumeric runs (word characters minus the underscore)
_TOKEN_RE = re.compile(r"[^\W_]+")


def split_sentences(text: str, max_sentences: int = MAX_SENTENCES) -> List[str]:
    """
    Naive sentence splitter:
    - a sentence ends at '.', '?', '!' or a newline (terminator kept)
    - each piece is stripped, empty pieces are dropped
    - a trailing fragment without terminator is still a sentence
    - at most `max_sentences` are returned
    """
    pieces = (m.group(0).strip() for m in _SENTENCE_RE.finditer(text or ""))
    return list(islice((p for p in pieces if p), max_sentences))


def tokenize(
    sentence: str,
    max_tokens: int = MAX_TOKENS_PER_SENTENCE,
    max_token_length: int = MAX_TOKEN_LENGTH,
) -> List[str]:
    """Lowercase alphanumeric tokens; long tokens are cut, excess tokens dropped."""
    # lower() can expand a character (e.g. U+0130 gains a combining dot), so
    # filter again after folding.
    folded = (
        "".join(c for c in m.group(0).lower() if c.isalnum())[:max_token_length]
        for m in _TOKEN_RE.finditer(sentence)
    )
    return list(islice((t for t in folded if t), max_tokens))
