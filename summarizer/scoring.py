from __future__ import annotations

from typing import List, Sequence

import numpy as np

from summarizer.vocab import TermVector

# depth -> number of sentences to keep (before capping at N)
_DEPTH_TO_K = {2: 3, 3: 5}


def depth_to_k(depth: int, n_sentences: int) -> int:
    if depth <= 1:
        k = 1
    elif depth >= 4:
        k = 10
    else:
        k = _DEPTH_TO_K[depth]
    return min(k, n_sentences)


def compute_idf(document_frequencies: np.ndarray, n_sentences: int) -> np.ndarray:
    """
    Smoothed IDF per vocabulary index: ln(N / (1 + DF)).

    Must run after every sentence has been scanned, since it needs final DF.
    A word present in all N sentences gets ln(N / (N + 1)), a small negative weight.
    """
    df = np.asarray(document_frequencies, dtype=np.float64)
    return np.log(float(n_sentences) / (1.0 + df))


def score_sentences(term_vectors: Sequence[TermVector], idf: np.ndarray) -> np.ndarray:
    """score[i] = sum(count * idf[v]) over the sentence's term vector."""
    scores = np.zeros(len(term_vectors), dtype=np.float64)
    for i, vector in enumerate(term_vectors):
        if not vector:
            continue
        indices, counts = zip(*vector)
        weights = idf[list(indices)]
        scores[i] = float(np.dot(np.asarray(counts, dtype=np.float64), weights))
    return scores


def select_top_k(scores: np.ndarray, k: int) -> List[int]:
    """
    Pick k highest-scoring sentence indices and return them in document order.

    Picks one at a time; np.argmax returns the first maximal index, so on
    equal scores the earlier sentence wins.
    """
    remaining = np.array(scores, dtype=np.float64)
    selected = np.zeros(len(remaining), dtype=bool)
    for _ in range(min(k, len(remaining))):
        best = int(np.argmax(remaining))
        selected[best] = True
        remaining[best] = -np.inf
    return [int(i) for i in np.flatnonzero(selected)]
