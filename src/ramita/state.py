"""Mutable parse state threaded through a single scan.

ParseState is the scanner's working memory: in-progress character buffers,
the attribute map under construction, running position counters, and the
growing event list. Every operation is a pure state transition on this
object; no I/O happens here.

Buffers accumulate into lists and are joined on read, so building a long
text run stays O(n).

Thread Safety:
    ParseState instances are single-use and owned by one Scanner.
    Parsing two documents concurrently needs no coordination.

"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum

from ramita.errors import UnmatchedCloseTagError
from ramita.events import AttrValue, CloseTag, CommentEvent, Event, OpenTag, TextEvent


class AttrQuote(Enum):
    """Quote character that opened the attribute value being scanned."""

    SINGLE = "'"
    DOUBLE = '"'


@dataclass(frozen=True, slots=True)
class Meta:
    """Position snapshot taken at a tag boundary.

    Attributes:
        attrs: Pending attributes at snapshot time
        char_count: Characters consumed so far
        newline_count: Newlines consumed so far

    """

    attrs: dict[str, AttrValue] = field(default_factory=dict)
    char_count: int = 0
    newline_count: int = 0


class ParseState:
    """Accumulator for one scan of an HTML document.

    Usage:
        >>> state = ParseState()
        >>> for char in "div":
        ...     state.build_open_tag(char)
        >>> state.add_open_tag()
        >>> state.get_tags()
        (OpenTag(name='div', attrs={}, depth=1, ...),)

    """

    __slots__ = (
        "_open_tag",
        "_close_tag",
        "_text",
        "_comment",
        "_attr_key",
        "_attr_value",
        "attrs",
        "attr_quote",
        "tags",
        "char_count",
        "newline_count",
        "meta",
        "_unmatched",  # tag name -> number of opens still waiting for a close
    )

    def __init__(self) -> None:
        self._open_tag: list[str] = []
        self._close_tag: list[str] = []
        self._text: list[str] = []
        self._comment: list[str] = []
        self._attr_key: list[str] = []
        self._attr_value: list[str] = []

        self.attrs: dict[str, AttrValue] = {}
        self.attr_quote: AttrQuote = AttrQuote.DOUBLE
        self.tags: list[Event] = []
        self.char_count: int = 0
        self.newline_count: int = 0
        self.meta: Meta = Meta()

        self._unmatched: dict[str, int] = {}

    # =========================================================================
    # Buffers
    # =========================================================================

    @property
    def open_tag(self) -> str:
        return "".join(self._open_tag)

    @property
    def close_tag(self) -> str:
        return "".join(self._close_tag)

    @property
    def text(self) -> str:
        return "".join(self._text)

    @property
    def comment(self) -> str:
        return "".join(self._comment)

    @property
    def attr_key(self) -> str:
        return "".join(self._attr_key)

    @property
    def attr_value(self) -> str:
        return "".join(self._attr_value)

    def build_open_tag(self, char: str) -> None:
        self._open_tag.append(char)

    def build_close_tag(self, char: str) -> None:
        self._close_tag.append(char)

    def build_text(self, char: str) -> None:
        self._text.append(char)

    def build_comment(self, char: str) -> None:
        self._comment.append(char)

    def build_attr_key(self, char: str) -> None:
        self._attr_key.append(char)

    def build_attr_value(self, char: str) -> None:
        self._attr_value.append(char)

    # =========================================================================
    # Attributes
    # =========================================================================

    def put_attr(self) -> None:
        """Store the pending attribute and reset key, value and quote.

        An empty value makes a flag attribute (``disabled`` -> ``True``).
        A pending attribute with an empty key is discarded.
        """
        key = self.attr_key
        if key:
            value = self.attr_value
            self.attrs[key] = value if value else True
        self._attr_key.clear()
        self._attr_value.clear()
        self.attr_quote = AttrQuote.DOUBLE

    def put_attr_quote(self, kind: AttrQuote) -> None:
        self.attr_quote = kind

    def get_attr_quote(self) -> AttrQuote:
        return self.attr_quote

    def add_attrs(self) -> None:
        """Flush pending attributes into the most recent open tag.

        The open tag also takes its position from the last meta snapshot.
        """
        for index in range(len(self.tags) - 1, -1, -1):
            event = self.tags[index]
            if isinstance(event, OpenTag):
                self.tags[index] = dataclasses.replace(
                    event,
                    attrs={**event.attrs, **self.attrs},
                    char_count=self.meta.char_count,
                    newline_count=self.meta.newline_count,
                )
                break
        self.attrs = {}

    # =========================================================================
    # Events
    # =========================================================================

    def add_text(self) -> None:
        """Commit the text buffer as a leaf event. No-op when empty."""
        if not self._text:
            return
        self.tags.append(TextEvent(self.text))
        self._text.clear()

    def add_comment(self) -> None:
        """Commit the comment buffer, trimmed. No-op when blank."""
        comment = self.comment.strip()
        self._comment.clear()
        if comment:
            self.tags.append(CommentEvent(comment))

    def add_open_tag(self, self_closing: bool = False) -> None:
        """Commit the open tag buffer with its depth count."""
        name = self.open_tag
        depth = self._unmatched.get(name, 0) + 1
        self._unmatched[name] = depth
        self.tags.append(OpenTag(name, {}, depth, self_closing=self_closing))
        self._open_tag.clear()

    def add_close_tag(self, name: str | None = None) -> None:
        """Commit the close tag buffer, pairing it with the innermost open.

        Args:
            name: Close this tag name instead of the buffer contents
                (used for self-closing tags).

        Raises:
            UnmatchedCloseTagError: No unmatched open tag has this name.
                The close tag buffer is cleared either way.
        """
        if name is None:
            name = self.close_tag
            self._close_tag.clear()

        depth = self._unmatched.get(name, 0)
        if depth == 0:
            raise UnmatchedCloseTagError(
                name, lineno=self.newline_count + 1, offset=self.char_count
            )

        if depth == 1:
            del self._unmatched[name]
        else:
            self._unmatched[name] = depth - 1
        self.tags.append(CloseTag(name, depth, self.char_count, self.newline_count))

    def unmatched_count(self, name: str) -> int:
        """Number of opens of ``name`` still waiting for a close."""
        return self._unmatched.get(name, 0)

    # =========================================================================
    # Position tracking
    # =========================================================================

    def set_char_count(self, n: int = 1) -> None:
        self.char_count += n

    def set_newline_count(self, n: int = 1) -> None:
        self.newline_count += n

    def add_meta(self) -> None:
        """Snapshot pending attrs and counters. Counters keep running."""
        self.meta = Meta(dict(self.attrs), self.char_count, self.newline_count)

    def get_tags(self) -> tuple[Event, ...]:
        """Events in document order. Does not mutate the state."""
        return tuple(self.tags)

    def discard_pending(self) -> list[str]:
        """Drop every in-progress buffer except text.

        Returns:
            Names of the buffers that held a truncated fragment.
        """
        dropped = []
        for name in ("open_tag", "close_tag", "comment", "attr_key", "attr_value"):
            buffer: list[str] = getattr(self, f"_{name}")
            if buffer:
                dropped.append(name)
                buffer.clear()
        if self.attrs:
            dropped.append("attrs")
            self.attrs = {}
        return dropped
