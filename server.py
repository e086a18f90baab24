"""Entry point for the TF-IDF search HTTP service."""

from __future__ import annotations

import json
import logging
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import parse_qs, urlparse

from config_loader import load_config
from indexer import Indexer
from search_engine import SearchEngine

LOGGER = logging.getLogger("tfidf_search")

MAX_LIMIT = 50


class SearchRequestHandler(BaseHTTPRequestHandler):
    """HTTP handler exposing health and search endpoints."""

    engine: SearchEngine
    logger: logging.Logger
    default_limit: int = 10

    def do_GET(self) -> None:
        parsed = urlparse(self.path)
        path = parsed.path

        if path == "/health":
            self._send_json(HTTPStatus.OK, {"status": "ok"})
            return

        if path != "/search":
            self._send_json(
                HTTPStatus.NOT_FOUND,
                {"error": "Not found", "message": "Use GET /search?q=<text>"},
            )
            return

        query_params = parse_qs(parsed.query)
        query = (query_params.get("q") or [""])[0].strip()
        if not query:
            self._send_json(HTTPStatus.BAD_REQUEST, {"error": "Missing query parameter 'q'"})
            return

        limit_raw = (query_params.get("limit") or [str(self.default_limit)])[0].strip()
        try:
            limit = max(1, min(int(limit_raw), MAX_LIMIT))
        except ValueError:
            self._send_json(HTTPStatus.BAD_REQUEST, {"error": "Invalid query parameter 'limit'"})
            return

        try:
            results = self.engine.search(query, limit=limit)
        except Exception as exc:
            self.logger.exception("Search failed for query: %s", query)
            self._send_json(
                HTTPStatus.INTERNAL_SERVER_ERROR,
                {"error": "internal server error", "details": str(exc)},
            )
            return

        items = [
            {"file": Path(item.path).name, "path": item.path, "score": item.score}
            for item in results
        ]
        self._send_json(HTTPStatus.OK, {"query": query, "total": len(items), "items": items})

    def _send_json(self, status: HTTPStatus, payload: dict[str, object]) -> None:
        body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        self.send_response(status.value)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:
        self.logger.info("%s - %s", self.client_address[0], format % args)


def main() -> None:
    """Load configuration, load or build the index, and start the HTTP server."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    base_dir = Path(__file__).resolve().parent
    config = load_config(base_dir / "config.yml")

    indexer = Indexer(
        directories=config.directories,
        index_file=config.index_file,
        logger=LOGGER,
        recursive=config.recursive,
        workers=config.workers,
    )
    model = indexer.load_or_build_index()

    SearchRequestHandler.engine = SearchEngine(model)
    SearchRequestHandler.logger = LOGGER
    SearchRequestHandler.default_limit = config.top_k

    httpd = ThreadingHTTPServer((config.host, config.port), SearchRequestHandler)
    LOGGER.info("Search service started on http://%s:%d", config.host, config.port)
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        LOGGER.info("Shutdown signal received")
    finally:
        httpd.server_close()
        LOGGER.info("Server stopped")


if __name__ == "__main__":
    main()
