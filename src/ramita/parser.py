"""HTML parser: scanner followed by tree builder.

Thread Safety:
- Parser instances are single-use
- Configuration is read from ContextVar (thread-local)
- The resulting tree is immutable apart from attribute dicts

"""

from __future__ import annotations

from ramita.nodes import Element, Node, Tree
from ramita.profiling import get_parse_accumulator
from ramita.scanner import Scanner
from ramita.treebuilder import TreeBuilder


class Parser:
    """Parse one HTML source into a node tree.

    Usage:
        >>> Parser('<div id="1">hello</div>').parse()
        Element(tag='div', attrs={'id': '1'}, children=(Text(content='hello'),), ...)

    Raises from parse():
        UnmatchedCloseTagError, MismatchedTagError: strict mode only.

    """

    __slots__ = ("_source", "_source_file")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        self._source = source
        self._source_file = source_file

    def parse(self) -> Tree:
        """Scan and build the tree.

        Returns:
            The root node, or a list of roots unless there is exactly one.
        """
        events = Scanner(self._source, source_file=self._source_file).events()
        tree = TreeBuilder(source_file=self._source_file).build(events)

        acc = get_parse_accumulator()
        if acc is not None:
            acc.record_parse(
                source_length=len(self._source),
                event_count=len(events),
                node_count=count_nodes(tree),
            )
        return tree


def count_nodes(tree: Tree) -> int:
    """Count every node in a tree or list of roots."""
    pending: list[Node] = list(tree) if isinstance(tree, list) else [tree]
    count = 0
    while pending:
        node = pending.pop()
        count += 1
        if isinstance(node, Element):
            pending.extend(node.children)
    return count
