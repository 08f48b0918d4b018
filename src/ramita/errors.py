"""Exception classes for Ramita.

Provides standardized exceptions for error handling throughout Ramita.
"""

from __future__ import annotations


class RamitaError(Exception):
    """Base exception for all Ramita errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(RamitaError):
    """Error during HTML parsing.

    Raised when the scanner or tree builder rejects the input. Only raised
    in strict mode; the default configuration reads malformed markup
    leniently instead.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            offset: Absolute character offset where error occurred (0-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.offset = offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + ": "

        suffix = f" (offset {offset})" if offset is not None else ""
        super().__init__(f"{location}{message}{suffix}")


class UnmatchedCloseTagError(ParseError):
    """A closing tag has no unmatched opening tag of the same name."""

    def __init__(
        self,
        tag: str,
        lineno: int | None = None,
        offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.tag = tag
        super().__init__(
            f"closing tag </{tag}> has no matching open tag",
            lineno=lineno,
            offset=offset,
            source_file=source_file,
        )


class MismatchedTagError(ParseError):
    """A closing tag does not close the innermost open element.

    Example: ``<b><i></b>`` closes ``b`` while ``i`` is still open.
    """

    def __init__(
        self,
        tag: str,
        expected: str | None,
        lineno: int | None = None,
        offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.tag = tag
        self.expected = expected
        if expected is None:
            message = f"closing tag </{tag}> found outside any open element"
        else:
            message = f"closing tag </{tag}> found while <{expected}> is still open"
        super().__init__(message, lineno=lineno, offset=offset, source_file=source_file)


class RenderError(RamitaError):
    """Error during HTML rendering.

    Raised when the renderer encounters a value that is not a node.
    """

    pass
