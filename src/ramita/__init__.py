"""
Ramita — small, lenient HTML-to-tree parser

Turns an HTML string into a tree of typed, frozen nodes: elements with a
tag, attributes and children, plus text and comment leaves. A single-pass
state-machine scanner feeds a stack-based tree builder. No entity
decoding, no raw-text elements, no HTML5 recovery algorithm.

Quick Start:
    >>> from ramita import parse, render
    >>> tree = parse('<div id="1">hello</div>')
    >>> tree.tag, tree.attrs, tree.children
    ('div', {'id': '1'}, (Text(content='hello'),))
    >>> render(tree)
    '<div id="1">hello</div>'

    >>> # Several top-level nodes come back as a list
    >>> parse("<p>a</p><p>b</p>")
    [Element(tag='p', ...), Element(tag='p', ...)]

Strict mode:
    >>> from ramita import ParseConfig
    >>> parse("<p>a</div>", config=ParseConfig(strict_close_tags=True))
    Traceback (most recent call last):
    ...
    ramita.errors.UnmatchedCloseTagError: 1: closing tag </div> has no matching open tag (offset 10)

Installation:
    pip install ramita
"""

from collections.abc import Iterable

from ramita.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from ramita.errors import (
    MismatchedTagError,
    ParseError,
    RamitaError,
    RenderError,
    UnmatchedCloseTagError,
)
from ramita.events import CloseTag, CommentEvent, Event, OpenTag, TextEvent
from ramita.nodes import Comment, Element, Node, Text, Tree
from ramita.parser import Parser
from ramita.profiling import ParseAccumulator, get_parse_accumulator, profiled_parse
from ramita.renderer import HtmlRenderer
from ramita.scanner import Scanner, ScanMode
from ramita.serialization import from_dict, from_json, to_dict, to_json
from ramita.state import AttrQuote, ParseState
from ramita.treebuilder import TreeBuilder
from ramita.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Tree:
    """Parse HTML source into a node tree.

    Args:
        source: HTML source text
        source_file: Optional source file path for error messages
        config: Parse configuration for this call (uses the current
            context's config if None)

    Returns:
        The root node, or a list of roots when the source has zero or
        several top-level nodes.

    Raises:
        UnmatchedCloseTagError: Strict mode, a close tag with no open tag.
        MismatchedTagError: Strict mode, a misnested close tag.

    Example:
        >>> parse("<input disabled>").attrs
        {'disabled': True}
    """
    if config is None:
        return Parser(source, source_file=source_file).parse()

    with parse_config_context(config):
        return Parser(source, source_file=source_file).parse()


def parse_many(
    sources: Iterable[str],
    *,
    config: ParseConfig | None = None,
) -> list[Tree]:
    """Parse several HTML sources with one config.

    Sets config once, parses all, restores once.

    Example:
        >>> docs = parse_many(["<p>1</p>", "<p>2</p>"])
        >>> len(docs)
        2
    """
    with parse_config_context(config or get_parse_config()):
        return [Parser(source).parse() for source in sources]


def render(tree: Tree) -> str:
    """Render a node tree back to HTML.

    Example:
        >>> render(parse("<a title='it\\"s'>x</a>"))
        '<a title=\\'it"s\\'>x</a>'
    """
    return HtmlRenderer().render(tree)


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "parse_many",
    "render",
    # Nodes
    "Comment",
    "Element",
    "Node",
    "Text",
    "Tree",
    # Events
    "CloseTag",
    "CommentEvent",
    "Event",
    "OpenTag",
    "TextEvent",
    # Parser components
    "AttrQuote",
    "ParseState",
    "Parser",
    "ScanMode",
    "Scanner",
    "TreeBuilder",
    # Renderer
    "HtmlRenderer",
    # Visitor + Transform
    "BaseVisitor",
    "transform",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Profiling
    "ParseAccumulator",
    "get_parse_accumulator",
    "profiled_parse",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "RamitaError",
    "ParseError",
    "UnmatchedCloseTagError",
    "MismatchedTagError",
    "RenderError",
]
