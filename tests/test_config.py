from pathlib import Path

import pytest

from pagetree.config import ExportConfig, load_config
from pagetree.rebuild import FormatError


def test_defaults_without_path() -> None:
    config = load_config()

    assert config == ExportConfig()
    assert config.index_file == "index.html"
    assert config.css_dir == "css"
    assert config.css_file == "home.css"
    assert config.doctype == "<!doctype html>"
    assert config.strict_child_counts is False


def test_yaml_overrides(tmp_path: Path) -> None:
    path = tmp_path / "export.yaml"
    path.write_text("index_file: home.html\nstrictChildCounts: true\n", encoding="utf-8")

    config = load_config(path)

    assert config.index_file == "home.html"
    assert config.strict_child_counts is True
    assert config.css_file == "home.css"


def test_empty_yaml_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "export.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == ExportConfig()


def test_unknown_key_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "export.yaml"
    path.write_text("theme: dark\n", encoding="utf-8")

    with pytest.raises(FormatError, match="Invalid config"):
        load_config(path)


def test_non_mapping_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "export.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(FormatError, match="mapping"):
        load_config(path)
