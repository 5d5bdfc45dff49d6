from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from summarizer.text import MAX_TOKENS_PER_SENTENCE, tokenize

_LOG = logging.getLogger(__name__)

MAX_VOCABULARY = 65536

# (vocabulary index, count in sentence), one pair per distinct word
TermVector = List[Tuple[int, int]]


@dataclass
class VocabularyEntry:
    word: str
    document_frequency: int = 0  # sentences containing the word
    term_frequency_total: int = 0  # occurrences across the document


class Vocabulary:
    """
    Word -> statistics table for one document.

    Words are compared exactly; case folding is the tokenizer's job.
    Indices are assigned in first-seen order and never change.
    """

    def __init__(self, capacity: int = MAX_VOCABULARY) -> None:
        self.capacity = capacity
        self.entries: List[VocabularyEntry] = []
        self._index: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, word: str) -> bool:
        return word in self._index

    def __getitem__(self, word: str) -> VocabularyEntry:
        return self.entries[self._index[word]]

    @property
    def is_full(self) -> bool:
        return len(self.entries) >= self.capacity

    def lookup(self, word: str) -> Optional[int]:
        return self._index.get(word)

    def insert_or_get(self, word: str) -> Optional[int]:
        """Return the word's index, adding it if needed; None once the table is full."""
        idx = self._index.get(word)
        if idx is not None:
            return idx
        if self.is_full:
            return None
        idx = len(self.entries)
        self.entries.append(VocabularyEntry(word=word))
        self._index[word] = idx
        return idx

    def document_frequencies(self) -> np.ndarray:
        return np.array([e.document_frequency for e in self.entries], dtype=np.float64)


def build_term_vectors(
    sentences: Iterable[str],
    vocab: Vocabulary,
    max_tokens: int = MAX_TOKENS_PER_SENTENCE,
) -> List[TermVector]:
    """
    Single pass over the sentences:
    - every token bumps its entry's term_frequency_total
    - every distinct word of a sentence bumps document_frequency once
    - returns one TermVector per sentence, in sentence order
    """
    vectors: List[TermVector] = []
    skipped = 0

    for sentence in sentences:
        counts: Dict[int, int] = {}
        for token in tokenize(sentence, max_tokens=max_tokens):
            idx = vocab.insert_or_get(token)
            if idx is None:
                skipped += 1
                continue
            vocab.entries[idx].term_frequency_total += 1
            counts[idx] = counts.get(idx, 0) + 1

        for idx in counts:
            vocab.entries[idx].document_frequency += 1
        vectors.append(list(counts.items()))

    if skipped:
        _LOG.debug(
            "Vocabulary full at %d words; skipped %d new-word tokens",
            vocab.capacity,
            skipped,
        )
    return vectors
