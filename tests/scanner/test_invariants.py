"""Property-based tests for scanner invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from ramita.events import CloseTag, CommentEvent, OpenTag, TextEvent
from ramita.scanner import Scanner

# Alphabet rich in markup delimiters
MARKUP = st.text(alphabet="<>/!-=\"' \nabdiv", max_size=200)

TAG_NAMES = st.sampled_from(["div", "p", "span", "b"])


@st.composite
def well_formed(draw: st.DrawFn, depth: int = 0) -> str:
    """Generate well-formed markup from a small grammar."""
    parts = []
    for _ in range(draw(st.integers(min_value=0, max_value=3))):
        kind = draw(st.sampled_from(["text", "element", "comment"] if depth < 4 else ["text"]))
        if kind == "text":
            parts.append(draw(st.text(alphabet="xyz ", min_size=1, max_size=5)))
        elif kind == "comment":
            parts.append("<!--c-->")
        else:
            name = draw(TAG_NAMES)
            parts.append(f"<{name}>{draw(well_formed(depth + 1))}</{name}>")
    return "".join(parts)


class TestTermination:
    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_consumes_any_text(self, source: str) -> None:
        """Scanning never hangs and always consumes the whole input."""
        state = Scanner(source).scan()
        assert state.char_count == len(source)
        assert state.newline_count == source.count("\n")

    @given(MARKUP)
    @settings(max_examples=300)
    def test_no_exceptions_on_markup_soup(self, source: str) -> None:
        Scanner(source).scan()


class TestEventShape:
    @given(MARKUP)
    @settings(max_examples=200)
    def test_no_empty_leaves(self, source: str) -> None:
        for event in Scanner(source).events():
            if isinstance(event, TextEvent):
                assert event.text
            elif isinstance(event, CommentEvent):
                assert event.comment
                assert event.comment == event.comment.strip()

    @given(MARKUP)
    @settings(max_examples=200)
    def test_every_close_resolves_an_open(self, source: str) -> None:
        """Closes pair LIFO by name with an earlier open of the same depth."""
        open_depths: dict[str, list[int]] = {}
        for event in Scanner(source).events():
            if isinstance(event, OpenTag):
                depths = open_depths.setdefault(event.name, [])
                assert event.depth == len(depths) + 1
                depths.append(event.depth)
            elif isinstance(event, CloseTag):
                depths = open_depths.get(event.name)
                assert depths, f"close </{event.name}> without open"
                assert depths.pop() == event.depth


class TestWellFormed:
    @given(well_formed())
    @settings(max_examples=200)
    def test_balanced(self, source: str) -> None:
        events = Scanner(source).events()
        opens = sum(isinstance(event, OpenTag) for event in events)
        closes = sum(isinstance(event, CloseTag) for event in events)
        assert opens == closes == source.count("</")


class TestDeterminism:
    @given(st.text(max_size=200))
    @settings(max_examples=50)
    def test_repeated_scan_identical(self, source: str) -> None:
        assert Scanner(source).events() == Scanner(source).events()

    @given(MARKUP)
    @settings(max_examples=50)
    def test_get_tags_idempotent(self, source: str) -> None:
        state = Scanner(source).scan()
        assert state.get_tags() == state.get_tags()
