from pathlib import Path

import pytest

from main import run


def _write_config(tmp_path: Path) -> Path:
    docs_dir = tmp_path / "docs"
    docs_dir.mkdir()
    (docs_dir / "doc1.txt").write_text("cat cat dog", encoding="utf-8")
    (docs_dir / "doc2.txt").write_text("dog dog fish", encoding="utf-8")
    (docs_dir / "doc3.txt").write_text("cat fish fish", encoding="utf-8")

    config_file = tmp_path / "config.yml"
    config_file.write_text("directories:\n  - ./docs\nindex_file: ./index.json\ntop_k: 2", encoding="utf-8")
    return config_file


def test_index_command_writes_model(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_file = _write_config(tmp_path)

    assert run(["--config", str(config_file), "index"]) == 0

    assert (tmp_path / "index.json").exists()
    assert "Indexed 3 documents" in capsys.readouterr().out


def test_search_command_prints_top_results(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_file = _write_config(tmp_path)
    run(["--config", str(config_file), "index"])
    capsys.readouterr()

    assert run(["--config", str(config_file), "search", "cat"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith(str((tmp_path / "docs" / "doc1.txt").resolve()) + " => ")
    assert lines[1].startswith(str((tmp_path / "docs" / "doc3.txt").resolve()) + " => ")


def test_search_command_limit_overrides_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_file = _write_config(tmp_path)

    assert run(["--config", str(config_file), "search", "fish", "--limit", "3"]) == 0

    assert len(capsys.readouterr().out.splitlines()) == 3


def test_search_command_fails_on_corrupt_index(tmp_path: Path) -> None:
    config_file = _write_config(tmp_path)
    (tmp_path / "index.json").write_text("[]", encoding="utf-8")

    assert run(["--config", str(config_file), "search", "cat"]) == 1


def test_missing_config_returns_error(tmp_path: Path) -> None:
    assert run(["--config", str(tmp_path / "missing.yml"), "index"]) == 1
