import math

import pytest

from model import Model
from search_engine import SearchEngine, SearchResult


def _build_engine() -> SearchEngine:
    model = Model()
    model.index_document("doc1", "cat cat dog")
    model.index_document("doc2", "dog dog fish")
    model.index_document("doc3", "cat fish fish")
    return SearchEngine(model)


def test_search_ranks_documents_by_tf_idf() -> None:
    engine = _build_engine()

    results = engine.search("cat")

    assert [result.path for result in results] == ["doc1", "doc3", "doc2"]
    assert results[0].score == pytest.approx(2 / 3 * math.log(3 / 2))
    assert results[1].score == pytest.approx(1 / 3 * math.log(3 / 2))
    assert results[2].score == 0.0


def test_search_normalizes_query_like_documents() -> None:
    engine = _build_engine()

    assert engine.search("CaT") == engine.search("cat")


def test_search_keeps_zero_score_documents() -> None:
    engine = _build_engine()

    results = engine.search("unicorn")

    assert len(results) == 3
    assert all(result.score == 0.0 for result in results)


def test_search_breaks_ties_by_path() -> None:
    model = Model()
    model.index_document("b", "same words")
    model.index_document("a", "same words")
    model.index_document("c", "other")
    engine = SearchEngine(model)

    results = engine.search("same")

    assert [result.path for result in results] == ["a", "b", "c"]


def test_search_sums_multiple_and_repeated_tokens() -> None:
    engine = _build_engine()
    idf_cat = math.log(3 / 2)
    idf_fish = math.log(3 / 2)

    results = {result.path: result.score for result in engine.search("cat fish cat")}

    assert results["doc3"] == pytest.approx(2 * (1 / 3) * idf_cat + (2 / 3) * idf_fish)
    assert results["doc1"] == pytest.approx(2 * (2 / 3) * idf_cat)
    assert results["doc2"] == pytest.approx((1 / 3) * idf_fish)


def test_search_ignores_markup_in_query() -> None:
    engine = _build_engine()

    assert engine.search("<em>cat</em>") == engine.search("cat")


def test_search_limit_truncates_results() -> None:
    engine = _build_engine()

    results = engine.search("cat", limit=1)

    assert results == [SearchResult(path="doc1", score=pytest.approx(2 / 3 * math.log(3 / 2)))]


def test_search_empty_query_returns_every_document() -> None:
    engine = _build_engine()

    results = engine.search("   ")

    assert [result.path for result in results] == ["doc1", "doc2", "doc3"]
    assert all(result.score == 0.0 for result in results)


def test_search_empty_document_scores_zero() -> None:
    model = Model()
    model.index_document("empty", "")
    model.index_document("full", "cat")
    engine = SearchEngine(model)

    results = engine.search("cat")

    assert [(result.path, result.score) for result in results] == [
        ("full", pytest.approx(math.log(2))),
        ("empty", 0.0),
    ]


def test_search_on_empty_model() -> None:
    assert SearchEngine(Model()).search("anything") == []
