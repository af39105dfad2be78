"""Export page work as a static web page."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .config import ExportConfig
from .dom_model import Node
from .io_utils import ensure_dir, write_text
from .render import render_page

logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    """Paths produced by a page export."""

    out_dir: Path
    index_path: Path
    css_path: Path
    images_dir: Path
    written: List[Path] = field(default_factory=list)


def export_css(css_content: str, path: Path) -> Path:
    """Write the stylesheet text unchanged."""

    return write_text(path, css_content)


def export_page(
    root: Node,
    css_content: str,
    out_dir: Path,
    config: Optional[ExportConfig] = None,
) -> ExportResult:
    """Write the page, its stylesheet and an images directory under ``out_dir``."""

    config = config or ExportConfig()
    out_dir = ensure_dir(Path(out_dir))

    index_path = write_text(out_dir / config.index_file, render_page(root, doctype=config.doctype))
    css_path = export_css(css_content, out_dir / config.css_dir / config.css_file)
    images_dir = ensure_dir(out_dir / config.images_dir)

    logger.debug("Exported page to %s", index_path)
    return ExportResult(
        out_dir=out_dir,
        index_path=index_path,
        css_path=css_path,
        images_dir=images_dir,
        written=[index_path, css_path],
    )
