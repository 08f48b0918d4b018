"""Scanner operating modes and character constants.

This module defines the finite state machine modes for the scanner.
"""

from __future__ import annotations

from enum import Enum, auto


class ScanMode(Enum):
    """Scanner operating modes.

    The scanner switches between modes based on the next character(s):
    - INIT: Before the first tag; stray text is ignored
    - PARSE_OPEN_TAG: Reading an opening tag name
    - PARSE_ATTRS: Between attributes inside an opening tag
    - BUILD_ATTR_KEY: Reading an attribute name
    - BUILD_ATTR_VALUE: Reading a quoted attribute value
    - PARSE_TEXT: Reading character data
    - PARSE_CLOSE_TAG: Reading a closing tag name
    - PARSE_COMMENT: Inside ``<!-- ... -->``
    - CONTINUE: Just after a tag or comment

    """

    INIT = auto()
    PARSE_OPEN_TAG = auto()
    PARSE_ATTRS = auto()
    BUILD_ATTR_KEY = auto()
    BUILD_ATTR_VALUE = auto()
    PARSE_TEXT = auto()
    PARSE_CLOSE_TAG = auto()
    PARSE_COMMENT = auto()
    CONTINUE = auto()


COMMENT_START = "<!--"
COMMENT_END = "-->"
CLOSE_TAG_START = "</"
SELF_CLOSING_END = "/>"

# Separators inside tags
WHITESPACE = frozenset(" \t\n\r\f")
