"""Typed node tree for Ramita.

All nodes are frozen dataclasses with slots:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Pattern matching: ``match`` statements work naturally

Node Hierarchy:
Node (base)
├── Element   tag, attrs, children
├── Text      character data
└── Comment   comment content

Thread Safety:
All nodes are frozen and safe to share across threads. The attribute
dict is the one mutable piece; treat it as read-only. Because of it,
Element is not hashable; Text and Comment are.

"""

from dataclasses import dataclass, field

from ramita.events import AttrValue


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes."""


@dataclass(frozen=True, slots=True)
class Element(Node):
    """An HTML element.

    HTML: <tag key="value" flag>children</tag>

    Attributes:
        tag: Tag name as written in the source
        attrs: Attribute map; flag attributes map to ``True``
        children: Child nodes in document order
        self_closing: Written as ``<tag/>``

    """

    tag: str
    attrs: dict[str, AttrValue] = field(default_factory=dict)
    children: tuple[Node, ...] = ()
    self_closing: bool = False

    # attrs is a dict, so elements compare by value but cannot be hashed
    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content, exactly as it appears in the source."""

    content: str


@dataclass(frozen=True, slots=True)
class Comment(Node):
    """HTML comment, delimiters and surrounding whitespace removed."""

    content: str


type Tree = Node | list[Node]

__all__ = ["Comment", "Element", "Node", "Text", "Tree"]
