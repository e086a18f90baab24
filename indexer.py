"""Builds the TF-IDF model from documents found in configured directories."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Iterator

from document_reader import read_document
from model import Model, count_tokens
from model_store import load_model, save_model, temp_path_for

LOGGER = logging.getLogger("tfidf_search")


def build_model(
    documents: Iterable[tuple[str, str]],
    workers: int = 1,
    logger: logging.Logger = LOGGER,
) -> Model:
    """Index ``(doc_id, text)`` pairs into a fresh model.

    Errors raised while producing documents propagate; no model is returned
    for an interrupted build. With ``workers > 1`` token counting runs in a
    thread pool while document frequencies are only updated on this thread.
    """
    model = Model()

    if workers <= 1:
        for doc_id, text in documents:
            counts = model.index_document(doc_id, text)
            logger.debug("Indexed %s (%d terms)", doc_id, sum(counts.values()))
    else:
        items = list(documents)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            all_counts = executor.map(count_tokens, (text for _, text in items))
            for (doc_id, _), counts in zip(items, all_counts):
                model.add_counts(doc_id, counts)
                logger.debug("Indexed %s (%d terms)", doc_id, sum(counts.values()))

    logger.info(
        "Prepared TF-IDF model for %d documents, %d distinct terms",
        model.document_count,
        len(model.doc_freq),
    )
    return model


class Indexer:
    """Builds, saves and loads the model for a set of document directories."""

    def __init__(
        self,
        directories: list[Path],
        index_file: Path,
        logger: logging.Logger,
        recursive: bool = False,
        workers: int = 1,
    ) -> None:
        self._directories = directories
        self._index_file = index_file
        self._logger = logger
        self._recursive = recursive
        self._workers = workers

    def load_or_build_index(self) -> Model:
        """Load the saved model, or build and save one if none exists yet."""
        if not self._index_file.exists():
            self._logger.info("No existing index found, building index from scratch")
            return self.build_index()

        model = load_model(self._index_file)
        self._logger.info("Loaded existing index with %d documents", model.document_count)
        return model

    def build_index(self) -> Model:
        files = self._discover_files()
        model = build_model(self._read_documents(files), self._workers, self._logger)
        save_model(model, self._index_file)
        self._logger.info("Index saved to %s", self._index_file)
        return model

    def _read_documents(self, files: list[Path]) -> Iterator[tuple[str, str]]:
        for file_path in files:
            self._logger.info("Indexing: %s", file_path)
            yield str(file_path), read_document(file_path)

    def _discover_files(self) -> list[Path]:
        own_files = {self._index_file.resolve(), temp_path_for(self._index_file).resolve()}
        files: set[Path] = set()
        for directory in self._directories:
            if not directory.exists():
                raise FileNotFoundError(f"Document directory not found: {directory}")
            if not directory.is_dir():
                raise NotADirectoryError(f"Not a directory: {directory}")

            candidates = directory.rglob("*") if self._recursive else directory.iterdir()
            for file_path in candidates:
                # the saved index may live inside a document directory
                if file_path.is_file() and file_path.resolve() not in own_files:
                    files.add(file_path.resolve())

        discovered = sorted(files)
        self._logger.info("Discovered %d documents", len(discovered))
        return discovered
