from pathlib import Path

from bs4 import BeautifulSoup

from pagetree.config import ExportConfig
from pagetree.dom_model import Node, Tag, text_node
from pagetree.export import export_page
from pagetree.io_utils import clear_file
from pagetree.save_file import load_document, save_document


def _page() -> Node:
    html = Node(Tag("html"))
    head = html.add_child(Node(Tag("head")))
    head.add_child(Node(Tag("link", closable=False, attributes={"rel": "stylesheet", "href": "css/home.css"})))
    body = html.add_child(Node(Tag("body", attributes={"class": "", "id": "main"})))
    heading = body.add_child(Node(Tag("h1")))
    heading.add_child(text_node("Welcome"))
    body.add_child(Node(Tag("img", closable=False, attributes={"src": "images/logo.png", "alt": ""})))
    return html


def test_export_writes_page_css_and_images_dir(tmp_path: Path) -> None:
    result = export_page(_page(), "h1 { color: navy; }", tmp_path / "site")

    assert result.index_path == tmp_path / "site" / "index.html"
    assert result.css_path.read_text(encoding="utf-8") == "h1 { color: navy; }"
    assert result.images_dir.is_dir()
    assert result.written == [result.index_path, result.css_path]

    page = result.index_path.read_text(encoding="utf-8")
    assert page.startswith("<!doctype html>\n<html>\n<head>\n")
    assert '<body id = "main">' in page
    assert 'alt' not in page


def test_exported_page_parses_as_html(tmp_path: Path) -> None:
    result = export_page(_page(), "", tmp_path)

    soup = BeautifulSoup(result.index_path.read_text(encoding="utf-8"), "html.parser")
    assert soup.find("h1").get_text(strip=True) == "Welcome"
    assert soup.find("body")["id"] == "main"
    assert soup.find("img")["src"] == "images/logo.png"
    assert soup.find("link")["href"] == "css/home.css"


def test_export_honours_config_layout(tmp_path: Path) -> None:
    config = ExportConfig(index_file="page.html", css_dir="styles", css_file="site.css", images_dir="img")

    result = export_page(_page(), "", tmp_path, config)

    assert result.index_path == tmp_path / "page.html"
    assert result.css_path == tmp_path / "styles" / "site.css"
    assert (tmp_path / "img").is_dir()


def test_save_load_export_drops_empty_attributes(tmp_path: Path) -> None:
    path = save_document(tmp_path / "work.json", _page())
    root, css = load_document(path)

    result = export_page(root, css, tmp_path / "out")

    page = result.index_path.read_text(encoding="utf-8")
    assert "class" not in page
    assert root.children[1].tag.attributes["class"] == ""


def test_clear_file_truncates(tmp_path: Path) -> None:
    path = tmp_path / "index.html"
    path.write_text("<html>", encoding="utf-8")

    clear_file(path)

    assert path.read_text(encoding="utf-8") == ""
