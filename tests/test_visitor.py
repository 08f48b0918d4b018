"""Tests for BaseVisitor dispatch and the transform function."""

import dataclasses

from ramita import BaseVisitor, Comment, Element, Node, Text, parse, transform


class TagCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.tags: list[str] = []

    def visit_element(self, node: Element) -> None:
        self.tags.append(node.tag)


class KindCounter(BaseVisitor[str]):
    def __init__(self) -> None:
        self.seen: list[str] = []

    def visit_default(self, node: Node) -> str:
        kind = type(node).__name__
        self.seen.append(kind)
        return kind


class TestBaseVisitor:
    def test_walks_in_document_order(self) -> None:
        collector = TagCollector()
        collector.visit(parse("<div><p><b>x</b></p><i></i></div>"))
        assert collector.tags == ["div", "p", "b", "i"]

    def test_visit_all_handles_lists(self) -> None:
        collector = TagCollector()
        collector.visit_all(parse("<p></p><span></span>"))
        assert collector.tags == ["p", "span"]

    def test_default_receives_every_kind(self) -> None:
        counter = KindCounter()
        result = counter.visit(parse("<p>t<!-- c --></p>"))
        assert result == "Element"
        assert counter.seen == ["Element", "Text", "Comment"]


class TestTransform:
    def test_rename_tags(self) -> None:
        def rename(node: Node) -> Node:
            if isinstance(node, Element) and node.tag == "b":
                return dataclasses.replace(node, tag="strong")
            return node

        tree = transform(parse("<p><b>x</b></p>"), rename)
        assert tree == Element("p", {}, (Element("strong", {}, (Text("x"),)),))

    def test_remove_comments(self) -> None:
        tree = transform(
            parse("<p>a<!-- c -->b</p>"),
            lambda node: None if isinstance(node, Comment) else node,
        )
        assert tree == Element("p", {}, (Text("a"), Text("b")))

    def test_list_input(self) -> None:
        tree = transform(
            parse("<!-- c --><p></p>"),
            lambda node: None if isinstance(node, Comment) else node,
        )
        assert tree == [Element("p")]

    def test_removing_single_root(self) -> None:
        assert transform(parse("<p></p>"), lambda node: None) == []

    def test_original_untouched(self) -> None:
        original = parse("<p><b>x</b></p>")
        transform(original, lambda node: None if isinstance(node, Text) else node)
        assert original == Element("p", {}, (Element("b", {}, (Text("x"),)),))

    def test_bottom_up_order(self) -> None:
        order: list[str] = []

        def record(node: Node) -> Node:
            order.append(node.tag if isinstance(node, Element) else "text")
            return node

        transform(parse("<a><b>x</b></a>"), record)
        assert order == ["text", "b", "a"]
