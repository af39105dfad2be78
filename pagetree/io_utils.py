"""File helpers shared by the save file and page export."""

from __future__ import annotations

import json
from pathlib import Path


def stable_json_dumps(obj: object) -> str:
    """Pretty JSON with sorted keys, so equal pages give byte-equal save files."""
    text = json.dumps(obj, ensure_ascii=False, sort_keys=True, indent=2)
    return f"{text}\n"


def ensure_dir(path: Path) -> Path:
    """Create ``path`` and any missing parents; return it as a Path."""

    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def write_text(path: Path, content: str) -> Path:
    """Write UTF-8 ``content`` to ``path``, making its directory first."""

    target = Path(path)
    ensure_dir(target.parent)
    target.write_text(content, encoding="utf-8")
    return target


def clear_file(path: Path) -> None:
    """Truncate a file, creating it if it does not exist yet."""

    write_text(path, "")
