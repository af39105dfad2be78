"""Command-line interface for pagetree."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, Tuple

from . import __version__
from .catalog import TagCatalog, load_catalog
from .config import ExportConfig, load_config
from .dom_model import Node
from .export import export_page
from .rebuild import FormatError
from .render import render_page
from .save_file import load_document, save_document


def _load_config_or_exit(path: Optional[str]) -> ExportConfig:
    try:
        return load_config(Path(path) if path else None)
    except FileNotFoundError as exc:
        raise SystemExit(f"Config file not found: {exc.filename}") from exc
    except FormatError as exc:
        raise SystemExit(str(exc)) from exc


def _load_or_exit(path: Path, *, strict: bool) -> Tuple[Node, str]:
    try:
        return load_document(path, strict_child_counts=strict)
    except FileNotFoundError as exc:
        raise SystemExit(f"Save file not found: {path}") from exc
    except FormatError as exc:
        raise SystemExit(f"{path}: {exc}") from exc


def _handle_render(args: argparse.Namespace) -> None:
    config = _load_config_or_exit(args.config)
    root, _ = _load_or_exit(Path(args.input), strict=args.strict or config.strict_child_counts)
    sys.stdout.write(render_page(root, doctype=config.doctype))


def _handle_export(args: argparse.Namespace) -> None:
    config = _load_config_or_exit(args.config)
    root, css_content = _load_or_exit(
        Path(args.input), strict=args.strict or config.strict_child_counts
    )
    result = export_page(root, css_content, Path(args.output), config)
    print(f"Exported {len(result.written)} file(s) into {result.out_dir}")


def _handle_check(args: argparse.Namespace) -> None:
    root, css_content = _load_or_exit(Path(args.input), strict=args.strict)
    print(
        f"{args.input}: {root.count()} node(s), root <{root.tag.name}>, "
        f"{len(css_content)} character(s) of CSS"
    )


def _handle_normalize(args: argparse.Namespace) -> None:
    root, css_content = _load_or_exit(Path(args.input), strict=args.strict)
    written = save_document(Path(args.output), root, css_content)
    print(f"Wrote {written}")


def _describe_catalog(catalog: TagCatalog) -> Iterable[str]:
    for name in catalog.names():
        tag = catalog.prototype(name)
        closing = "closing" if tag.closable else "no closing"
        parents = ", ".join(tag.legal_parents) or "-"
        attrs = ", ".join(tag.attributes) or "-"
        yield f"{name}\t{closing}\tparents: {parents}\tattributes: {attrs}"


def _handle_tags(args: argparse.Namespace) -> None:
    path = Path(args.catalog)
    try:
        catalog = load_catalog(path)
    except FileNotFoundError as exc:
        raise SystemExit(f"Tag catalog not found: {path}") from exc
    except FormatError as exc:
        raise SystemExit(str(exc)) from exc
    for line in _describe_catalog(catalog):
        print(line)


def _add_input_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the JSON save file.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when stored child counts disagree with the rebuilt tree.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagetree",
        description="Save file and export utilities for page trees",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"pagetree {__version__}",
        help="Show the pagetree version and exit.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Print the page markup for a save file.",
        description="Load a save file and write its markup to stdout.",
    )
    _add_input_args(render_parser)
    render_parser.add_argument("--config", default=None, help="Path to an export config YAML.")
    render_parser.set_defaults(func=_handle_render)

    export_parser = subparsers.add_parser(
        "export",
        help="Export a save file as a web page.",
        description="Write index page, stylesheet and images directory.",
    )
    _add_input_args(export_parser)
    export_parser.add_argument(
        "--out",
        dest="output",
        required=True,
        help="Directory to write the exported page into.",
    )
    export_parser.add_argument("--config", default=None, help="Path to an export config YAML.")
    export_parser.set_defaults(func=_handle_export)

    check_parser = subparsers.add_parser(
        "check",
        help="Validate a save file.",
        description="Load a save file and report its node count.",
    )
    _add_input_args(check_parser)
    check_parser.set_defaults(func=_handle_check)

    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Rewrite a save file in stable form.",
        description="Load a save file and save it again with fresh indices.",
    )
    _add_input_args(normalize_parser)
    normalize_parser.add_argument(
        "--out",
        dest="output",
        required=True,
        help="Path to write the normalized save file.",
    )
    normalize_parser.set_defaults(func=_handle_normalize)

    tags_parser = subparsers.add_parser(
        "tags",
        help="List the tags in a tag catalog.",
        description="Print each catalog tag with its closing flag and legal parents.",
    )
    tags_parser.add_argument("--catalog", required=True, help="Path to the tag catalog JSON.")
    tags_parser.set_defaults(func=_handle_tags)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
