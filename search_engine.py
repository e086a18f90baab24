"""Thread-safe TF-IDF search engine."""

from __future__ import annotations

import threading
from dataclasses import dataclass

from model import Model
from scorer import query_idf, query_score
from tokenizer import tokenize


@dataclass(frozen=True)
class SearchResult:
    """Relevance of one indexed document for a query."""

    path: str
    score: float


class SearchEngine:
    """Ranks every document of a model by summed TF-IDF of the query tokens."""

    def __init__(self, model: Model) -> None:
        self._model = model
        self._lock = threading.RLock()

    def search(self, query: str, limit: int | None = None) -> list[SearchResult]:
        """Score all documents against ``query``, best first.

        Documents without any matching token are kept with a score of 0.
        Equal scores are ordered by document path.
        """
        tokens = tokenize(query)

        with self._lock:
            idf = query_idf(tokens, self._model)
            results = [
                SearchResult(path=path, score=query_score(tokens, counts, self._model, idf))
                for path, counts in self._model.term_freq.items()
            ]

        results.sort(key=lambda result: (-result.score, result.path))
        if limit is not None:
            return results[:limit]
        return results
