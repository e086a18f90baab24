"""JSON persistence for the term statistics model."""

from __future__ import annotations

import json
from pathlib import Path

from model import Model, ModelFormatError


def temp_path_for(index_file: Path) -> Path:
    return index_file.with_suffix(index_file.suffix + ".tmp")


def save_model(model: Model, index_file: Path) -> None:
    """Write ``model`` as JSON, replacing ``index_file`` atomically."""
    index_file.parent.mkdir(parents=True, exist_ok=True)
    temp_path = temp_path_for(index_file)
    try:
        with temp_path.open("w", encoding="utf-8") as file:
            # ASCII escapes keep undecodable file names (lone surrogates) intact
            json.dump(model.to_dict(), file, ensure_ascii=True, indent=2)
        temp_path.replace(index_file)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise


def load_model(index_file: Path) -> Model:
    if not index_file.exists():
        raise FileNotFoundError(f"Index file not found: {index_file}")

    try:
        with index_file.open("r", encoding="utf-8") as file:
            raw = json.load(file)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ModelFormatError(f"Index file {index_file} is not valid JSON: {exc}") from exc

    return Model.from_dict(raw)
