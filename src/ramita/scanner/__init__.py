"""Single-pass state-machine scanner for the Ramita HTML parser.

The scanner walks the source one character at a time, dispatching on the
current mode and feeding a ParseState. The finished state holds the flat,
chronological event list for the tree builder.

Architecture:
scanner/
├── __init__.py          # Re-exports Scanner, ScanMode
├── core.py              # Scanner class (mixin composition + cursor)
├── modes.py             # ScanMode enum, delimiter constants
├── content.py           # INIT, CONTINUE, PARSE_TEXT, PARSE_COMMENT
└── tags.py              # Open tags, attributes, close tags

Usage:
    >>> from ramita.scanner import Scanner
    >>> for event in Scanner("<p>hi</p>").events():
    ...     print(event)
OpenTag(name='p', attrs={}, depth=1, char_count=0, newline_count=0, self_closing=False)
TextEvent(text='hi')
CloseTag(name='p', depth=1, char_count=9, newline_count=0)

"""

from ramita.scanner.core import Scanner
from ramita.scanner.modes import ScanMode

__all__ = ["Scanner", "ScanMode"]
