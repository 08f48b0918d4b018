"""Tree visitor and transformer for Ramita.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen trees.

Example — collect all links:

    class LinkCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.hrefs: list[str] = []

        def visit_element(self, node: Element) -> None:
            if node.tag == "a" and isinstance(node.attrs.get("href"), str):
                self.hrefs.append(node.attrs["href"])

Example — drop comments:

    new_tree = transform(tree, lambda n: None if isinstance(n, Comment) else n)

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. The
    transform function is pure — safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable

from ramita.nodes import Comment, Element, Node, Text, Tree


class BaseVisitor[T]:
    """Base tree visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        if isinstance(node, Element):
            for child in node.children:
                self.visit(child)
        return result

    def visit_all(self, tree: Tree) -> None:
        """Visit a node or every root of a list."""
        for node in tree if isinstance(tree, list) else [tree]:
            self.visit(node)

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    def visit_element(self, node: Element) -> T:
        return self.visit_default(node)

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_comment(self, node: Comment) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: Node) -> T:
        match node:
            case Element():
                return self.visit_element(node)
            case Text():
                return self.visit_text(node)
            case Comment():
                return self.visit_comment(node)
            case _:
                return self.visit_default(node)


def transform(tree: Tree, fn: Callable[[Node], Node | None]) -> Tree:
    """Apply a function to every node, returning a new tree.

    ``fn`` is called bottom-up: children are transformed first, then the
    parent with its new children. Return ``None`` from ``fn`` to remove a
    node. Removing a single root yields an empty list.

    Args:
        tree: A node or a list of roots.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove it.

    Returns:
        A node when given a node that survives, otherwise a list.

    """
    if isinstance(tree, list):
        return [result for node in tree if (result := _transform_node(node, fn)) is not None]
    result = _transform_node(tree, fn)
    return [] if result is None else result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Transform a single node bottom-up: children first, then self."""
    if isinstance(node, Element):
        children = tuple(
            result for child in node.children
            if (result := _transform_node(child, fn)) is not None
        )
        if children != node.children:
            node = dataclasses.replace(node, children=children)
    return fn(node)
