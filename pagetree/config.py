"""Export configuration loaded from YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .rebuild import FormatError
from .render import DOCTYPE_DECLARATION


class ExportConfig(BaseModel):
    """Layout of an exported page and load options."""

    index_file: str = Field("index.html", description="Name of the exported page.")
    css_dir: str = Field("css", description="Directory for the stylesheet.")
    css_file: str = Field("home.css", description="Stylesheet file name.")
    images_dir: str = Field("images", description="Directory created for page images.")
    doctype: str = Field(
        DOCTYPE_DECLARATION, description="Document type line written before the page."
    )
    strict_child_counts: bool = Field(
        False,
        alias="strictChildCounts",
        description="Fail loads whose stored child counts disagree with the tree.",
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


def load_config(path: Optional[Path] = None) -> ExportConfig:
    """Load the export config, or defaults when ``path`` is None."""

    if path is None:
        return ExportConfig()
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise FormatError(f"{path}: config must be a mapping")
    try:
        return ExportConfig.model_validate(data)
    except ValidationError as exc:
        raise FormatError(f"Invalid config in {path}: {exc}") from exc
