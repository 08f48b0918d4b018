"""Tree builder: nests the scanner's flat event list into a node tree.

Keeps a stack of in-progress element frames. Open events push a frame,
leaf events attach to the top frame, and close events pop the frame with
the same name and depth count.

Recovery rules (lenient mode):
- A close whose frame sits below the top of the stack implicitly closes
  the frames above it first (``<b><i></b>`` closes ``i`` inside ``b``).
- A close whose paired frame was already closed implicitly closes the
  innermost frame with the same name instead.
- A close with no matching frame is dropped.
- Frames still open at end of input are closed innermost-first, each into
  its enclosing frame; the outermost becomes a root.

In strict mode (``ParseConfig.strict_close_tags``) a misnested close or a
close with no matching frame raises MismatchedTagError. Unclosed frames
at end of input are never an error.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from ramita.config import get_parse_config
from ramita.errors import MismatchedTagError
from ramita.events import AttrValue, CloseTag, CommentEvent, Event, OpenTag, TextEvent
from ramita.nodes import Comment, Element, Node, Text, Tree
from ramita.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class _Frame:
    """An element whose children are still being collected."""

    name: str
    depth: int
    attrs: dict[str, AttrValue]
    self_closing: bool = False
    children: list[Node] = field(default_factory=list)

    def to_element(self) -> Element:
        return Element(
            tag=self.name,
            attrs=self.attrs,
            children=tuple(self.children),
            self_closing=self.self_closing,
        )


class TreeBuilder:
    """Build a node tree from chronologically ordered events.

    Usage:
        >>> from ramita.scanner import Scanner
        >>> TreeBuilder().build(Scanner("<p>hi</p>").events())
        Element(tag='p', attrs={}, children=(Text(content='hi'),), self_closing=False)

    Thread Safety:
        TreeBuilder instances are single-use. Configuration is read from
        ContextVar (thread-local).

    """

    __slots__ = ("_config", "_roots", "_source_file", "_stack")

    def __init__(self, source_file: str | None = None) -> None:
        self._source_file = source_file
        self._config = get_parse_config()
        self._stack: list[_Frame] = []
        self._roots: list[Node] = []

    def build(self, events: Iterable[Event]) -> Tree:
        """Nest ``events`` into a tree.

        Returns:
            The root node, or a list of roots unless there is exactly one.

        Raises:
            MismatchedTagError: In strict mode, for a misnested or
                unmatched close event.
        """
        config = self._config
        for event in events:
            match event:
                case OpenTag():
                    self._stack.append(
                        _Frame(event.name, event.depth, dict(event.attrs), event.self_closing)
                    )
                case CloseTag():
                    self._close(event)
                case TextEvent(text=text):
                    if config.skip_blank_text and not text.strip():
                        continue
                    self._append(Text(text))
                case CommentEvent(comment=comment):
                    if config.keep_comments:
                        self._append(Comment(comment))

        self._close_remaining()

        if len(self._roots) == 1:
            return self._roots[0]
        return list(self._roots)

    def _append(self, node: Node) -> None:
        if self._stack:
            self._stack[-1].children.append(node)
        else:
            self._roots.append(node)

    def _close(self, event: CloseTag) -> None:
        stack = self._stack
        index = self._find_frame(event.name, event.depth)
        if index < 0:
            # An implicit close already took the paired frame; the close
            # then belongs to the innermost frame still open with its name.
            index = self._find_frame(event.name)

        if index < 0:
            if self._config.strict_close_tags:
                raise MismatchedTagError(
                    event.name,
                    stack[-1].name if stack else None,
                    lineno=event.lineno,
                    offset=event.char_count,
                    source_file=self._source_file,
                )
            logger.debug("Dropping closing tag </%s> with no open element", event.name)
            return

        if index != len(stack) - 1:
            if self._config.strict_close_tags:
                raise MismatchedTagError(
                    event.name,
                    stack[-1].name,
                    lineno=event.lineno,
                    offset=event.char_count,
                    source_file=self._source_file,
                )
            logger.debug(
                "Closing </%s> implicitly closes %s",
                event.name,
                ", ".join(f"<{frame.name}>" for frame in stack[index + 1 :]),
            )

        while len(stack) > index:
            self._append_popped()

    def _find_frame(self, name: str, depth: int | None = None) -> int:
        """Index of the innermost frame named ``name`` (and ``depth``), or -1."""
        for index in range(len(self._stack) - 1, -1, -1):
            frame = self._stack[index]
            if frame.name == name and (depth is None or frame.depth == depth):
                return index
        return -1

    def _append_popped(self) -> None:
        frame = self._stack.pop()
        self._append(frame.to_element())

    def _close_remaining(self) -> None:
        if not self._stack:
            return
        logger.debug(
            "Force-closing %d unclosed element(s) at end of input: %s",
            len(self._stack),
            ", ".join(f"<{frame.name}>" for frame in self._stack),
        )
        while self._stack:
            self._append_popped()


def build(events: Iterable[Event], source_file: str | None = None) -> Tree:
    """Build a node tree from events. Convenience wrapper for TreeBuilder."""
    return TreeBuilder(source_file=source_file).build(events)
