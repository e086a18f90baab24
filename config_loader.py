"""Configuration loading utilities for the TF-IDF search service."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


@dataclass(frozen=True)
class AppConfig:
    """Application configuration loaded from YAML."""

    directories: list[Path]
    host: str = "127.0.0.1"
    port: int = 8000
    index_file: Path = Path("index.json")
    recursive: bool = False
    workers: int = 1
    top_k: int = 10


def load_config(config_path: Path) -> AppConfig:
    """Load and validate configuration from a YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as file:
        raw: dict[str, Any] = yaml.safe_load(file) or {}

    if not isinstance(raw, dict):
        raise ValueError("Configuration must be a YAML mapping")

    directories_raw = raw.get("directories")
    if not isinstance(directories_raw, list) or not directories_raw:
        raise ValueError("'directories' must be a non-empty list in config.yml")

    directories: list[Path] = []
    for value in directories_raw:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Each directory in 'directories' must be a non-empty string")
        directories.append(_resolve(config_path, value))

    host = raw.get("host", "127.0.0.1")
    port = raw.get("port", 8000)
    index_file_raw = raw.get("index_file", "index.json")
    recursive = raw.get("recursive", False)
    workers = raw.get("workers", 1)
    top_k = raw.get("top_k", 10)

    if not isinstance(host, str) or not host:
        raise ValueError("'host' must be a non-empty string")
    if not _is_int(port) or not (1 <= port <= 65535):
        raise ValueError("'port' must be an integer between 1 and 65535")
    if not isinstance(index_file_raw, str) or not index_file_raw:
        raise ValueError("'index_file' must be a non-empty string")
    if not isinstance(recursive, bool):
        raise ValueError("'recursive' must be a boolean")
    if not _is_int(workers) or workers < 1:
        raise ValueError("'workers' must be a positive integer")
    if not _is_int(top_k) or top_k < 1:
        raise ValueError("'top_k' must be a positive integer")

    return AppConfig(
        directories=directories,
        host=host,
        port=port,
        index_file=_resolve(config_path, index_file_raw),
        recursive=recursive,
        workers=workers,
        top_k=top_k,
    )


def _resolve(config_path: Path, value: str) -> Path:
    candidate = Path(value)
    if not candidate.is_absolute():
        candidate = (config_path.parent / candidate).resolve()
    return candidate


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
