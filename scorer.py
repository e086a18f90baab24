"""TF-IDF scoring functions over a term statistics model."""

from __future__ import annotations

import math
from typing import Iterable, Mapping, Sequence

from model import Model


def term_frequency(term: str, counts: Mapping[str, int], total: int | None = None) -> float:
    """Share of ``term`` among all tokens of a document; 0.0 for an empty document.

    ``total`` may be passed when the caller already knows the document length.
    """
    if total is None:
        total = sum(counts.values())
    if total == 0:
        return 0.0
    return counts.get(term, 0) / total


def inverse_document_frequency(df: int, total_docs: int) -> float:
    # df is floored at 1, so a term absent from the corpus still gets ln(N)
    if total_docs <= 0:
        return 0.0
    return math.log(total_docs / max(df, 1))


def tf_idf(term: str, counts: Mapping[str, int], model: Model) -> float:
    return term_frequency(term, counts) * inverse_document_frequency(
        model.doc_freq.get(term, 0), model.document_count
    )


def query_idf(tokens: Iterable[str], model: Model) -> dict[str, float]:
    total_docs = model.document_count
    return {
        token: inverse_document_frequency(model.doc_freq.get(token, 0), total_docs)
        for token in set(tokens)
    }


def query_score(
    tokens: Sequence[str],
    counts: Mapping[str, int],
    model: Model,
    idf: Mapping[str, float] | None = None,
) -> float:
    """Sum of TF-IDF over query tokens; repeated tokens count every time.

    ``idf`` may carry the per-token IDF from ``query_idf`` so that it is not
    recomputed for every document of a search.
    """
    if idf is None:
        idf = query_idf(tokens, model)
    total = sum(counts.values())
    score = 0.0
    for token in tokens:
        score += term_frequency(token, counts, total) * idf[token]
    return score
