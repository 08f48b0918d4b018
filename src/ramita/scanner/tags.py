"""Tag mode scanner mixin.

Handles opening tags with their attributes, and closing tags.

Attribute values are always quoted. Only the quote kind that opened a
value ends it, so ``title='it"s'`` keeps the double quote literally.
An unquoted ``href=x`` reads as a single flag key, ``{"href=x": True}``.
"""

from __future__ import annotations

from ramita.config import ParseConfig
from ramita.errors import UnmatchedCloseTagError
from ramita.scanner.modes import CLOSE_TAG_START, SELF_CLOSING_END, WHITESPACE, ScanMode
from ramita.state import AttrQuote, ParseState
from ramita.utils.logger import get_logger

logger = get_logger(__name__)


class TagScannerMixin:
    """Mixin providing open tag, attribute and close tag scanning."""

    # These will be set by the Scanner class
    _source: str
    _pos: int
    _mode: ScanMode
    _state: ParseState
    _source_file: str | None
    _self_closing: bool
    _config: ParseConfig

    def _peek(self) -> str:
        """Current character. Implemented by Scanner."""
        raise NotImplementedError

    def _at(self, token: str) -> bool:
        """Lookahead test. Implemented by Scanner."""
        raise NotImplementedError

    def _consume(self, n: int = 1) -> str:
        """Advance the cursor. Implemented by Scanner."""
        raise NotImplementedError

    # =========================================================================
    # Opening tags
    # =========================================================================

    def _scan_open_tag(self) -> None:
        """Read the tag name up to ``>``, ``/>`` or whitespace."""
        state = self._state
        char = self._peek()

        if char == ">":
            self._consume()
            self._commit_open_tag()
        elif self._at(SELF_CLOSING_END) and state.open_tag:
            # Leave the ">" for the next step; it commits like a plain ">"
            self._consume()
            self._self_closing = True
        elif self._at(CLOSE_TAG_START):
            self._abandon_open_tag()
            state.add_meta()
            self._consume(len(CLOSE_TAG_START))
            self._mode = ScanMode.PARSE_CLOSE_TAG
        elif char == "/" and not state.open_tag:
            self._consume()
            self._mode = ScanMode.PARSE_CLOSE_TAG
        elif char in WHITESPACE:
            self._consume()
            self._mode = ScanMode.PARSE_ATTRS
        else:
            state.build_open_tag(self._consume())

    def _commit_open_tag(self) -> None:
        state = self._state
        name = state.open_tag
        self_closing = self._self_closing
        self._self_closing = False

        state.add_open_tag(self_closing=self_closing)
        state.add_attrs()
        if self_closing:
            state.add_close_tag(name)
        self._mode = ScanMode.CONTINUE

    def _abandon_open_tag(self) -> None:
        dropped = self._state.discard_pending()
        if dropped:
            logger.debug("Abandoning unfinished open tag at offset %d", self._pos)
        self._self_closing = False

    # =========================================================================
    # Attributes
    # =========================================================================

    def _scan_attrs(self) -> None:
        """Skip whitespace between attributes, or hand off to the tag end."""
        if self._at(SELF_CLOSING_END):
            self._consume()
            self._self_closing = True
            self._mode = ScanMode.PARSE_OPEN_TAG
        elif self._peek() == ">":
            self._mode = ScanMode.PARSE_OPEN_TAG
        elif self._peek() in WHITESPACE:
            self._consume()
        else:
            self._mode = ScanMode.BUILD_ATTR_KEY

    def _scan_attr_key(self) -> None:
        """Read an attribute name up to ``="``, ``='``, whitespace or tag end."""
        state = self._state
        char = self._peek()

        if self._at('="'):
            self._consume(2)
            state.put_attr_quote(AttrQuote.DOUBLE)
            self._mode = ScanMode.BUILD_ATTR_VALUE
        elif self._at("='"):
            self._consume(2)
            state.put_attr_quote(AttrQuote.SINGLE)
            self._mode = ScanMode.BUILD_ATTR_VALUE
        elif char in WHITESPACE:
            # Flag attribute
            self._consume()
            state.put_attr()
            self._mode = ScanMode.PARSE_ATTRS
        elif char == ">" or self._at(SELF_CLOSING_END):
            state.put_attr()
            self._mode = ScanMode.PARSE_ATTRS
        else:
            state.build_attr_key(self._consume())

    def _scan_attr_value(self) -> None:
        """Read a quoted value; only the opening quote kind closes it."""
        state = self._state
        char = self._peek()

        if char == state.get_attr_quote().value:
            self._consume()
            state.put_attr()
            self._mode = ScanMode.PARSE_ATTRS
        else:
            state.build_attr_value(self._consume())

    # =========================================================================
    # Closing tags
    # =========================================================================

    def _scan_close_tag(self) -> None:
        """Read the closing tag name up to ``>``."""
        char = self._peek()
        if char == ">":
            self._consume()
            self._commit_close_tag()
            self._mode = ScanMode.CONTINUE
        elif char in WHITESPACE:
            self._consume()
        else:
            self._state.build_close_tag(self._consume())

    def _commit_close_tag(self) -> None:
        try:
            self._state.add_close_tag()
        except UnmatchedCloseTagError as err:
            if self._config.strict_close_tags:
                raise UnmatchedCloseTagError(
                    err.tag,
                    lineno=err.lineno,
                    offset=err.offset,
                    source_file=self._source_file,
                ) from None
            logger.debug("Dropping stray closing tag </%s> at line %s", err.tag, err.lineno)
