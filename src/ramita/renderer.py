"""HTML renderer for Ramita node trees.

Serializes a tree back to markup. Trees produced by ``parse()`` re-parse
into an equal tree. Text is written verbatim, matching the parser, which
decodes no entities, so hand-built trees holding ``<`` in text, ``-->`` in
a comment, or both quote kinds in one attribute value do not round-trip.

Attribute quoting:
    Values are double-quoted unless they contain a double quote and no
    single quote, in which case single quotes are used. A value holding
    both kinds has its double quotes written as ``&quot;``, which the parser
    keeps as literal text.

Thread Safety:
    HtmlRenderer keeps no per-render state on the instance. Share freely.
"""

import logging

from ramita.errors import RenderError
from ramita.events import AttrValue
from ramita.nodes import Comment, Element, Node, Text, Tree

logger = logging.getLogger(__name__)


def format_attr(key: str, value: AttrValue) -> str:
    """Format one attribute, choosing a quote that survives a re-parse.

    Examples:
        >>> format_attr("disabled", True)
        'disabled'
        >>> format_attr("title", 'it"s')
        'title=\\'it"s\\''
    """
    if value is True:
        return key
    text = str(value)
    if '"' not in text:
        return f'{key}="{text}"'
    if "'" not in text:
        return f"{key}='{text}'"
    logger.debug("Attribute %r holds both quote kinds; escaping double quotes", key)
    escaped = text.replace('"', "&quot;")
    return f'{key}="{escaped}"'


class HtmlRenderer:
    """Render a node tree to HTML.

    Usage:
        >>> from ramita import parse
        >>> HtmlRenderer().render(parse('<p class="x">hi<br/></p>'))
        '<p class="x">hi<br/></p>'

    """

    __slots__ = ()

    def render(self, tree: Tree) -> str:
        """Render a node or list of roots.

        Raises:
            RenderError: A value in the tree is not a Ramita node.
        """
        parts: list[str] = []
        roots = tree if isinstance(tree, list) else [tree]
        for node in roots:
            self._render_node(node, parts)
        return "".join(parts)

    def _render_node(self, node: Node, parts: list[str]) -> None:
        match node:
            case Element():
                self._render_element(node, parts)
            case Text(content=content):
                parts.append(content)
            case Comment(content=content):
                parts.append(f"<!-- {content} -->")
            case _:
                msg = f"Cannot render {type(node).__name__!r}; expected a Ramita node"
                raise RenderError(msg)

    def _render_element(self, node: Element, parts: list[str]) -> None:
        parts.append("<")
        parts.append(node.tag)
        for key, value in node.attrs.items():
            parts.append(" ")
            parts.append(format_attr(key, value))

        if node.self_closing and not node.children:
            parts.append("/>")
            return

        parts.append(">")
        for child in node.children:
            self._render_node(child, parts)
        parts.append(f"</{node.tag}>")
