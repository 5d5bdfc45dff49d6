"""
Extractive TF-IDF summarizer.

Each sentence is treated as a document:
    idf[v]   = ln(N / (1 + df[v]))
    score[i] = sum(count * idf[v]) over the words of sentence i
The K best sentences (K from `depth`) are returned in document order.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from summarizer.errors import SummaryMemoryError
from summarizer.loader import decode_document, html_to_text, load_source
from summarizer.scoring import compute_idf, depth_to_k, score_sentences, select_top_k
from summarizer.text import MAX_SENTENCES, split_sentences
from summarizer.vocab import Vocabulary, build_term_vectors

_LOG = logging.getLogger(__name__)


@dataclass
class Summary:
    sentences: List[str]
    depth: int
    sentence_count: int = 0  # N
    elapsed: Optional[float] = None  # seconds, only when timing was requested

    @property
    def k(self) -> int:
        return len(self.sentences)

    @property
    def is_empty(self) -> bool:
        return not self.sentences


def summarize_sentences(sentences: Sequence[str], depth: int) -> List[str]:
    """Score already-segmented sentences and keep the best ones, in order."""
    if not sentences:
        return []

    vocab = Vocabulary()
    term_vectors = build_term_vectors(sentences, vocab)
    _LOG.debug("Scanned %d sentences, %d distinct words", len(sentences), len(vocab))

    # IDF needs the final document frequencies, so it runs after the full scan.
    idf = compute_idf(vocab.document_frequencies(), len(sentences))
    scores = score_sentences(term_vectors, idf)

    chosen = select_top_k(scores, depth_to_k(depth, len(sentences)))
    return [sentences[i] for i in chosen]


def summarize_text(text: str, depth: int) -> List[str]:
    """Return the top sentences of `text` in their original order."""
    return summarize_sentences(split_sentences(text), depth)


def summarize(
    file_path: Union[str, Path],
    depth: int,
    time_flag: bool = False,
    strip_html: bool = False,
) -> Summary:
    """
    Summarize a file (or http(s) URL).

    depth: 1 -> 1 sentence, 2 -> 3, 3 -> 5, >=4 -> 10, never more than N.
    time_flag: record processing time (excluding the load) on the result.
    strip_html: extract text from HTML before splitting into sentences.

    Raises DocumentReadError when the source can't be read and
    SummaryMemoryError when memory runs out; nothing partial is returned.
    """
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise TypeError(f"depth must be an int, got {type(depth).__name__}")

    t0 = None
    try:
        raw = load_source(file_path)
        t0 = time.perf_counter() if time_flag else None
        text = decode_document(raw)
        if strip_html:
            text = html_to_text(text)
        sentences = split_sentences(text)
        if len(sentences) == MAX_SENTENCES:
            _LOG.debug("Sentence cap (%d) reached; the rest is ignored", MAX_SENTENCES)
        picked = summarize_sentences(sentences, depth)
    except MemoryError as e:
        raise SummaryMemoryError(f"out of memory while summarizing '{file_path}'") from e
    elapsed = time.perf_counter() - t0 if t0 is not None else None

    if not picked:
        _LOG.info("No sentences found in %s", file_path)

    return Summary(
        sentences=picked,
        depth=depth,
        sentence_count=len(sentences),
        elapsed=elapsed,
    )
