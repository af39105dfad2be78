from pagetree.dom_model import Node, Tag, text_node
from pagetree.flatten import flatten


def _sample_tree() -> Node:
    html = Node(Tag("html", legal_parents=[]))
    head = html.add_child(Node(Tag("head", legal_parents=["html"])))
    head.add_child(Node(Tag("title", legal_parents=["head"])))
    body = html.add_child(Node(Tag("body", legal_parents=["html"])))
    p = body.add_child(Node(Tag("p", attributes={"class": "lead", "id": ""})))
    p.add_child(text_node("Hello"))
    body.add_child(Node(Tag("br", closable=False)))
    return html


def test_indices_are_contiguous_and_preorder() -> None:
    records = flatten(_sample_tree())

    assert [r.node_index for r in records] == list(range(7))
    assert [r.tag for r in records] == ["html", "head", "title", "body", "p", "Text", "br"]
    assert [r.parent_index for r in records] == [-1, 0, 1, 0, 3, 4, 3]


def test_parent_index_precedes_child() -> None:
    records = flatten(_sample_tree())

    roots = [r for r in records if r.parent_index == -1]
    assert len(roots) == 1 and roots[0].node_index == 0
    for record in records[1:]:
        assert 0 <= record.parent_index < record.node_index


def test_records_carry_child_counts_and_tag_fields() -> None:
    records = flatten(_sample_tree())
    by_name = {r.tag: r for r in records}

    assert by_name["html"].number_of_children == 2
    assert by_name["body"].number_of_children == 2
    assert by_name["Text"].number_of_children == 0
    assert by_name["br"].has_closing_tag is False
    assert by_name["head"].legal_parents == ["html"]
    assert {(a.attribute_name, a.attribute_value) for a in by_name["p"].attributes} == {
        ("class", "lead"),
        ("id", ""),
    }


def test_root_only_tree() -> None:
    records = flatten(Node(Tag("html")))

    assert len(records) == 1
    assert records[0].number_of_children == 0
    assert records[0].node_index == 0
    assert records[0].parent_index == -1


def test_flatten_does_not_modify_tree() -> None:
    tree = _sample_tree()
    before = _sample_tree()

    flatten(tree)

    assert tree == before


def test_deep_tree_does_not_hit_recursion_limit() -> None:
    root = Node(Tag("div"))
    current = root
    for _ in range(5000):
        current = current.add_child(Node(Tag("div")))

    records = flatten(root)

    assert len(records) == 5001
    assert records[-1].parent_index == 4999
