"""Command-line entry point: build the index or query it."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from config_loader import load_config
from indexer import Indexer
from search_engine import SearchEngine

LOGGER = logging.getLogger("tfidf_search.cli")

DEFAULT_CONFIG = Path(__file__).resolve().parent / "config.yml"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TF-IDF document search")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG, help="path to config.yml")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("index", help="index the configured directories and save the model")

    search = commands.add_parser("search", help="rank indexed documents for a query")
    search.add_argument("query")
    search.add_argument("--limit", type=int, default=None, help="number of results to print")
    return parser


def run(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        indexer = Indexer(
            directories=config.directories,
            index_file=config.index_file,
            logger=LOGGER,
            recursive=config.recursive,
            workers=config.workers,
        )

        if args.command == "index":
            model = indexer.build_index()
            print(f"Indexed {model.document_count} documents into {config.index_file}")
            return 0

        engine = SearchEngine(indexer.load_or_build_index())
        limit = args.limit if args.limit is not None else config.top_k
        for result in engine.search(args.query, limit=max(limit, 0)):
            print(f"{result.path} => {result.score:f}")
        return 0
    except (OSError, ValueError) as exc:
        # DocumentReadError and ModelFormatError land here too
        LOGGER.error("%s", exc)
        return 1


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run())


if __name__ == "__main__":
    main()
