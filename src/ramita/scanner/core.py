"""State-machine scanner with O(n) guaranteed performance.

Walks the source with an explicit cursor loop. Every dispatch either
consumes at least one character or switches to a mode that will, so the
scan always terminates and never revisits a character.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from ramita.config import get_parse_config
from ramita.events import Event
from ramita.scanner.content import ContentScannerMixin
from ramita.scanner.modes import ScanMode
from ramita.scanner.tags import TagScannerMixin
from ramita.state import ParseState
from ramita.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    ContentScannerMixin,
    TagScannerMixin,
):
    """Single-pass tokenizer for HTML.

    Usage:
        >>> state = Scanner('<a href="/">home</a>').scan()
        >>> [type(event).__name__ for event in state.get_tags()]
        ['OpenTag', 'TextEvent', 'CloseTag']

    Thread Safety:
        Scanner instances are single-use. Create one per source string.
        Configuration is read from ContextVar (thread-local).

    """

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize scanner with source text.

        Args:
            source: HTML source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._mode = ScanMode.INIT
        self._source_file = source_file
        self._state = ParseState()
        self._self_closing = False
        self._config = get_parse_config()

    @property
    def mode(self) -> ScanMode:
        return self._mode

    def scan(self) -> ParseState:
        """Consume the whole source.

        Returns:
            The finished ParseState

        Raises:
            UnmatchedCloseTagError: In strict mode, for a stray close tag.

        Complexity: O(n) where n = len(source)
        """
        source_len = self._source_len
        while self._pos < source_len:
            self._dispatch_mode()

        self._finish()
        return self._state

    def events(self) -> tuple[Event, ...]:
        """Scan and return the events in document order."""
        return self.scan().get_tags()

    def _dispatch_mode(self) -> None:
        """Dispatch to the scanner for the current mode."""
        mode = self._mode
        if mode == ScanMode.PARSE_TEXT:
            self._scan_text()
        elif mode == ScanMode.CONTINUE:
            self._scan_continue()
        elif mode == ScanMode.PARSE_OPEN_TAG:
            self._scan_open_tag()
        elif mode == ScanMode.PARSE_ATTRS:
            self._scan_attrs()
        elif mode == ScanMode.BUILD_ATTR_KEY:
            self._scan_attr_key()
        elif mode == ScanMode.BUILD_ATTR_VALUE:
            self._scan_attr_value()
        elif mode == ScanMode.PARSE_CLOSE_TAG:
            self._scan_close_tag()
        elif mode == ScanMode.PARSE_COMMENT:
            self._scan_comment()
        else:
            self._scan_init()

    def _finish(self) -> None:
        """Flush trailing text and drop any truncated fragment."""
        state = self._state
        if self._mode == ScanMode.PARSE_TEXT:
            state.add_text()

        dropped = state.discard_pending()
        if dropped:
            logger.debug(
                "Discarding truncated %s at end of input (mode %s, offset %d)",
                ", ".join(dropped),
                self._mode.name,
                self._pos,
            )
        self._self_closing = False

    # =========================================================================
    # Cursor helpers
    # =========================================================================

    def _peek(self) -> str:
        """Current character, or empty string at end of input."""
        if self._pos >= self._source_len:
            return ""
        return self._source[self._pos]

    def _at(self, token: str) -> bool:
        """True if the source continues with ``token`` at the cursor."""
        return self._source.startswith(token, self._pos)

    def _consume(self, n: int = 1) -> str:
        """Advance the cursor by ``n`` characters, updating the counters.

        Returns:
            The consumed characters.
        """
        start = self._pos
        end = min(start + n, self._source_len)
        consumed = self._source[start:end]
        self._pos = end

        self._state.set_char_count(end - start)
        newlines = consumed.count("\n")
        if newlines:
            self._state.set_newline_count(newlines)
        return consumed
