"""Tests for ParseState buffer, attribute and event operations."""

import pytest

from ramita.errors import UnmatchedCloseTagError
from ramita.events import CloseTag, CommentEvent, OpenTag, TextEvent
from ramita.state import AttrQuote, Meta, ParseState


def _build(state: ParseState, method: str, chars: str) -> None:
    for char in chars:
        getattr(state, method)(char)


def _open(state: ParseState, name: str) -> None:
    _build(state, "build_open_tag", name)
    state.add_open_tag()


def _close(state: ParseState, name: str) -> None:
    _build(state, "build_close_tag", name)
    state.add_close_tag()


class TestNew:
    def test_starts_empty(self) -> None:
        state = ParseState()
        assert state.open_tag == ""
        assert state.close_tag == ""
        assert state.text == ""
        assert state.comment == ""
        assert state.attr_key == ""
        assert state.attr_value == ""
        assert state.attrs == {}
        assert state.tags == []
        assert state.char_count == 0
        assert state.newline_count == 0
        assert state.meta == Meta()

    def test_default_quote_is_double(self) -> None:
        assert ParseState().attr_quote is AttrQuote.DOUBLE


class TestBuildBuffers:
    @pytest.mark.parametrize(
        ("method", "prop"),
        [
            ("build_open_tag", "open_tag"),
            ("build_close_tag", "close_tag"),
            ("build_text", "text"),
            ("build_comment", "comment"),
            ("build_attr_key", "attr_key"),
            ("build_attr_value", "attr_value"),
        ],
    )
    def test_appends_characters(self, method: str, prop: str) -> None:
        state = ParseState()
        _build(state, method, "Hi ")
        assert getattr(state, prop) == "Hi "

    def test_no_normalization(self) -> None:
        state = ParseState()
        _build(state, "build_open_tag", "DiV")
        assert state.open_tag == "DiV"


class TestPutAttr:
    def test_stores_value_and_clears_buffers(self) -> None:
        state = ParseState()
        _build(state, "build_attr_key", "class")
        _build(state, "build_attr_value", "red")
        state.put_attr()
        assert state.attr_key == ""
        assert state.attr_value == ""
        assert state.attrs == {"class": "red"}

    def test_empty_value_is_flag(self) -> None:
        state = ParseState()
        _build(state, "build_attr_key", "disabled")
        state.put_attr()
        assert state.attrs == {"disabled": True}

    def test_resets_quote(self) -> None:
        state = ParseState()
        state.put_attr_quote(AttrQuote.SINGLE)
        _build(state, "build_attr_key", "a")
        state.put_attr()
        assert state.get_attr_quote() is AttrQuote.DOUBLE

    def test_empty_key_is_discarded(self) -> None:
        state = ParseState()
        _build(state, "build_attr_value", "orphan")
        state.put_attr()
        assert state.attrs == {}
        assert state.attr_value == ""


class TestPutAttrQuote:
    def test_sets_quote(self) -> None:
        state = ParseState()
        state.put_attr_quote(AttrQuote.SINGLE)
        assert state.get_attr_quote() is AttrQuote.SINGLE


class TestLeafEvents:
    def test_add_text(self) -> None:
        state = ParseState()
        _build(state, "build_text", "yo")
        state.add_text()
        assert state.text == ""
        assert state.tags == [TextEvent("yo")]

    def test_add_text_empty_is_noop(self) -> None:
        state = ParseState()
        state.add_text()
        assert state.tags == []

    def test_add_comment_trims(self) -> None:
        state = ParseState()
        _build(state, "build_comment", " note ")
        state.add_comment()
        assert state.comment == ""
        assert state.tags == [CommentEvent("note")]

    def test_add_comment_blank_is_noop(self) -> None:
        state = ParseState()
        _build(state, "build_comment", "   ")
        state.add_comment()
        assert state.comment == ""
        assert state.tags == []


class TestOpenTag:
    def test_stores_open_tag_and_clears_buffer(self) -> None:
        state = ParseState()
        _open(state, "div")
        assert state.open_tag == ""
        assert state.tags == [OpenTag("div", {}, 1)]

    def test_depth_counts_unmatched_same_name(self) -> None:
        state = ParseState()
        _open(state, "div")
        _open(state, "span")
        _open(state, "div")
        assert [tag.depth for tag in state.tags] == [1, 1, 2]
        assert state.unmatched_count("div") == 2

    def test_depth_reused_after_close(self) -> None:
        state = ParseState()
        _open(state, "p")
        _close(state, "p")
        _open(state, "p")
        assert state.tags[-1] == OpenTag("p", {}, 1)

    def test_self_closing_flag(self) -> None:
        state = ParseState()
        _build(state, "build_open_tag", "br")
        state.add_open_tag(self_closing=True)
        assert state.tags[-1].self_closing is True


class TestAddAttrs:
    def test_merges_into_last_open_tag(self) -> None:
        state = ParseState()
        _open(state, "div")
        state.attrs = {"id": "1"}
        state.add_attrs()
        assert state.attrs == {}
        assert state.tags == [OpenTag("div", {"id": "1"}, 1)]

    def test_skips_leaf_events(self) -> None:
        state = ParseState()
        _open(state, "div")
        _build(state, "build_text", "x")
        state.add_text()
        state.attrs = {"a": True}
        state.add_attrs()
        assert state.tags[0].attrs == {"a": True}

    def test_takes_position_from_meta(self) -> None:
        state = ParseState()
        state.set_char_count(7)
        state.set_newline_count(2)
        state.add_meta()
        state.set_char_count(5)
        _open(state, "p")
        state.add_attrs()
        tag = state.tags[0]
        assert tag.char_count == 7
        assert tag.newline_count == 2
        assert tag.lineno == 3


class TestCloseTag:
    def test_stores_close_tag_and_clears_buffer(self) -> None:
        state = ParseState()
        _open(state, "div")
        _close(state, "div")
        assert state.close_tag == ""
        assert state.tags == [OpenTag("div", {}, 1), CloseTag("div", 1)]

    def test_matches_innermost_first(self) -> None:
        state = ParseState()
        _open(state, "div")
        _open(state, "div")
        _close(state, "div")
        _close(state, "div")
        closes = [tag for tag in state.tags if isinstance(tag, CloseTag)]
        assert [tag.depth for tag in closes] == [2, 1]
        assert state.unmatched_count("div") == 0

    def test_siblings_reuse_depth(self) -> None:
        state = ParseState()
        for _ in range(2):
            _open(state, "div")
            _close(state, "div")
        assert [tag.depth for tag in state.tags] == [1, 1, 1, 1]

    def test_unmatched_raises_and_clears(self) -> None:
        state = ParseState()
        _build(state, "build_close_tag", "div")
        with pytest.raises(UnmatchedCloseTagError) as excinfo:
            state.add_close_tag()
        assert excinfo.value.tag == "div"
        assert state.close_tag == ""
        assert state.tags == []

    def test_explicit_name(self) -> None:
        state = ParseState()
        _open(state, "img")
        state.add_close_tag("img")
        assert state.tags[-1] == CloseTag("img", 1)

    def test_records_position(self) -> None:
        state = ParseState()
        _open(state, "p")
        state.set_char_count(4)
        state.set_newline_count()
        _close(state, "p")
        assert state.tags[-1].char_count == 4
        assert state.tags[-1].lineno == 2


class TestCounters:
    def test_set_char_count(self) -> None:
        state = ParseState()
        state.set_char_count(2)
        state.set_char_count()
        assert state.char_count == 3

    def test_set_newline_count(self) -> None:
        state = ParseState()
        state.set_newline_count(2)
        assert state.newline_count == 2

    def test_add_meta_snapshots_without_reset(self) -> None:
        state = ParseState()
        state.attrs = {"a": "b"}
        state.set_char_count(3)
        state.set_newline_count(1)
        state.add_meta()
        assert state.meta == Meta({"a": "b"}, 3, 1)
        assert state.char_count == 3
        assert state.newline_count == 1


class TestGetTags:
    def test_document_order(self) -> None:
        state = ParseState()
        _open(state, "div")
        _close(state, "div")
        assert state.get_tags() == (OpenTag("div", {}, 1), CloseTag("div", 1))

    def test_idempotent(self) -> None:
        state = ParseState()
        _open(state, "div")
        _build(state, "build_text", "x")
        state.add_text()
        first = state.get_tags()
        second = state.get_tags()
        assert first == second
        assert len(state.tags) == 2


class TestDiscardPending:
    def test_keeps_text(self) -> None:
        state = ParseState()
        _build(state, "build_text", "t")
        _build(state, "build_comment", "c")
        _build(state, "build_attr_key", "k")
        state.attrs = {"x": True}
        dropped = state.discard_pending()
        assert dropped == ["comment", "attr_key", "attrs"]
        assert state.text == "t"
        assert state.comment == ""
        assert state.attrs == {}
