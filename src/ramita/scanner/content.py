"""Content mode scanner mixin.

Handles everything outside of tags: the prelude before the first tag,
the gap after a tag, text runs and comments.
"""

from __future__ import annotations

from ramita.scanner.modes import CLOSE_TAG_START, COMMENT_END, COMMENT_START, ScanMode
from ramita.state import ParseState


class ContentScannerMixin:
    """Mixin providing INIT, CONTINUE, PARSE_TEXT and PARSE_COMMENT scanning."""

    # These will be set by the Scanner class
    _source: str
    _pos: int
    _mode: ScanMode
    _state: ParseState

    def _peek(self) -> str:
        """Current character. Implemented by Scanner."""
        raise NotImplementedError

    def _at(self, token: str) -> bool:
        """Lookahead test. Implemented by Scanner."""
        raise NotImplementedError

    def _consume(self, n: int = 1) -> str:
        """Advance the cursor. Implemented by Scanner."""
        raise NotImplementedError

    def _start_comment(self) -> None:
        self._consume(len(COMMENT_START))
        self._mode = ScanMode.PARSE_COMMENT

    def _start_close_tag(self) -> None:
        self._state.add_meta()
        self._consume(len(CLOSE_TAG_START))
        self._mode = ScanMode.PARSE_CLOSE_TAG

    def _start_open_tag(self) -> None:
        self._state.add_meta()
        self._consume()
        self._mode = ScanMode.PARSE_OPEN_TAG

    def _scan_init(self) -> None:
        """Skip anything before the first tag or comment."""
        if self._at(COMMENT_START):
            self._start_comment()
        elif self._peek() == "<":
            self._start_open_tag()
        else:
            self._consume()

    def _scan_continue(self) -> None:
        """Decide what follows a tag: another tag, a comment or text.

        Newlines directly after a tag are skipped.
        """
        if self._at(COMMENT_START):
            self._start_comment()
        elif self._at(CLOSE_TAG_START):
            self._start_close_tag()
        elif self._peek() == "<":
            self._start_open_tag()
        elif self._peek() == "\n":
            self._consume()
        else:
            self._state.build_text(self._consume())
            self._mode = ScanMode.PARSE_TEXT

    def _scan_text(self) -> None:
        """Accumulate text until the next tag or comment."""
        if self._at(COMMENT_START):
            self._state.add_text()
            self._start_comment()
        elif self._at(CLOSE_TAG_START):
            self._state.add_text()
            self._start_close_tag()
        elif self._peek() == "<":
            self._state.add_text()
            self._start_open_tag()
        else:
            self._state.build_text(self._consume())

    def _scan_comment(self) -> None:
        """Accumulate comment content until ``-->``."""
        if self._at(COMMENT_END):
            self._consume(len(COMMENT_END))
            self._state.add_comment()
            self._mode = ScanMode.CONTINUE
        else:
            self._state.build_comment(self._consume())
