"""Term statistics model: per-document term counts and corpus document frequency."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from tokenizer import iter_tokens

TermCounts = dict[str, int]


class ModelFormatError(ValueError):
    """Raised when a serialized model cannot be restored."""


def count_tokens(text: str) -> TermCounts:
    counts: TermCounts = {}
    for token in iter_tokens(text):
        counts[token] = counts.get(token, 0) + 1
    return counts


@dataclass
class Model:
    """In-memory TF-IDF statistics.

    ``term_freq`` maps a document id to its token counts, ``doc_freq`` maps a
    token to the number of documents containing it. The two are kept
    consistent by ``add_counts`` and ``remove_document``; mutate the
    dictionaries directly only when rebuilding both.
    """

    term_freq: dict[str, TermCounts] = field(default_factory=dict)
    doc_freq: dict[str, int] = field(default_factory=dict)

    @property
    def document_count(self) -> int:
        return len(self.term_freq)

    def documents(self) -> list[str]:
        return list(self.term_freq)

    def index_document(self, doc_id: str, text: str) -> TermCounts:
        """Tokenize ``text`` and store it as the current version of ``doc_id``."""
        counts = count_tokens(text)
        self.add_counts(doc_id, counts)
        return counts

    def add_counts(self, doc_id: str, counts: Mapping[str, int]) -> None:
        """Store precomputed counts for ``doc_id``, replacing any earlier version."""
        self.remove_document(doc_id)

        stored = {token: count for token, count in counts.items() if count > 0}
        self.term_freq[doc_id] = stored
        for token in stored:
            self.doc_freq[token] = self.doc_freq.get(token, 0) + 1

    def remove_document(self, doc_id: str) -> bool:
        """Retract a document's contribution. Returns False if it was not indexed."""
        previous = self.term_freq.pop(doc_id, None)
        if previous is None:
            return False

        for token in previous:
            remaining = self.doc_freq.get(token, 0) - 1
            if remaining > 0:
                self.doc_freq[token] = remaining
            else:
                self.doc_freq.pop(token, None)
        return True

    def to_dict(self) -> dict[str, Any]:
        return {
            "tf": {doc_id: dict(counts) for doc_id, counts in self.term_freq.items()},
            "df": dict(self.doc_freq),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Model:
        """Restore a model produced by ``to_dict``; rejects anything inconsistent."""
        if not isinstance(data, dict):
            raise ModelFormatError("Model must be a JSON object")

        tf_raw = data.get("tf")
        df_raw = data.get("df")
        if not isinstance(tf_raw, dict):
            raise ModelFormatError("'tf' must be an object of documents")
        if not isinstance(df_raw, dict):
            raise ModelFormatError("'df' must be an object of token counts")

        term_freq: dict[str, TermCounts] = {}
        for doc_id, counts in tf_raw.items():
            if not isinstance(counts, dict):
                raise ModelFormatError(f"Term counts for {doc_id!r} must be an object")
            # zero entries are dropped, add_counts never stores them
            term_freq[doc_id] = {
                token: count
                for token, count in counts.items()
                if _as_count(count, f"tf[{doc_id!r}][{token!r}]")
            }

        doc_freq = {
            token: count
            for token, count in df_raw.items()
            if _as_count(count, f"df[{token!r}]")
        }

        expected: dict[str, int] = {}
        for counts in term_freq.values():
            for token in counts:
                expected[token] = expected.get(token, 0) + 1
        if doc_freq != expected:
            raise ModelFormatError("'df' does not match the document term counts")

        return cls(term_freq=term_freq, doc_freq=doc_freq)


def _as_count(value: Any, where: str) -> int:
    # bool is an int subclass; JSON true/false is not a count
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ModelFormatError(f"{where} must be a non-negative integer, got {value!r}")
    return value
