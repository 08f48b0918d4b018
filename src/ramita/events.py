"""Scanner events consumed by the tree builder.

The scanner produces a flat, chronologically ordered sequence of events.
Each event kind is its own frozen dataclass, so consumers dispatch with
``match`` on the class rather than on tuple shape.

Event kinds:
- OpenTag: ``<name attrs...>`` with its depth count
- CloseTag: ``</name>`` carrying the depth of the open it resolves
- TextEvent: a run of character data
- CommentEvent: the content of ``<!-- ... -->``

Depth counts:
    The depth of an open tag is one plus the number of still-unmatched
    opens of the same name before it. ``<div><div></div></div>`` yields
    opens with depth 1 and 2, and closes with depth 2 then 1.

Thread Safety:
    Events are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass, field

type AttrValue = str | bool


@dataclass(frozen=True, slots=True)
class OpenTag:
    """An opening tag.

    Attributes:
        name: Tag name, verbatim (no case folding)
        attrs: Attribute map; flag attributes map to ``True``
        depth: Depth count among same-named unmatched opens (1-based)
        char_count: Characters consumed before the tag's ``<``
        newline_count: Newlines consumed before the tag's ``<``
        self_closing: Tag was written as ``<name/>``

    """

    name: str
    attrs: dict[str, AttrValue] = field(default_factory=dict)
    depth: int = 1
    char_count: int = 0
    newline_count: int = 0
    self_closing: bool = False

    # attrs is a dict, so open tags cannot be hashed
    __hash__ = None  # type: ignore[assignment]

    @property
    def lineno(self) -> int:
        """Line number of the tag (1-indexed)."""
        return self.newline_count + 1


@dataclass(frozen=True, slots=True)
class CloseTag:
    """A closing tag, paired with the open tag of the same depth."""

    name: str
    depth: int = 1
    char_count: int = 0
    newline_count: int = 0

    @property
    def lineno(self) -> int:
        """Line number of the tag (1-indexed)."""
        return self.newline_count + 1


@dataclass(frozen=True, slots=True)
class TextEvent:
    """A run of text between tags."""

    text: str


@dataclass(frozen=True, slots=True)
class CommentEvent:
    """An HTML comment, delimiters stripped."""

    comment: str


type Event = OpenTag | CloseTag | TextEvent | CommentEvent

__all__ = [
    "AttrValue",
    "CloseTag",
    "CommentEvent",
    "Event",
    "OpenTag",
    "TextEvent",
]
