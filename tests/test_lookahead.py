import io

import hypothesis.strategies as st
import pytest
from hypothesis import given

from _pulltok.errors import StaleLookaheadError
from _pulltok.token_types import Character, Line
from _pulltok.tokenizer import Tokenizer

from .generators.text_contents import keycap_four


def test_peek_line_advances():
    lookahead = Tokenizer.from_string("a\n\nb").lookahead()
    assert lookahead.peek_line() == "a\n"
    assert lookahead.offset == 2
    assert lookahead.peek_line() == "\n"
    assert lookahead.peek_line() == "b"
    assert lookahead.peek_line() == ""
    assert lookahead.offset == 4


def test_peek_char_advances_by_utf8_width():
    lookahead = Tokenizer.from_string(keycap_four).lookahead()
    assert lookahead.peek_char() == "4"
    assert lookahead.offset == 1
    assert lookahead.peek_char() == "\ufe0f"
    assert lookahead.offset == 4
    assert lookahead.peek_char() == "\u20e3"
    assert lookahead.offset == 7
    assert lookahead.peek_char() is None
    assert lookahead.offset == 7


def test_peek_char_four_byte_character():
    lookahead = Tokenizer.from_string("\U0001f600x").lookahead()
    assert lookahead.peek_char() == "\U0001f600"
    assert lookahead.offset == 4
    assert lookahead.peek_char() == "x"


def test_peek_char_invalid_utf8():
    tokenizer = Tokenizer.from_stream(io.BytesIO(b"\xffa"))
    lookahead = tokenizer.lookahead()
    with pytest.warns(UserWarning, match="invalid utf-8"):
        assert lookahead.peek_char() == "\ufffd"
    assert lookahead.offset == 1
    assert lookahead.peek_char() == "a"


def test_peek_until_unicode():
    tokenizer = Tokenizer.from_string(f"a\nb{keycap_four}c4d")
    lookahead = tokenizer.lookahead()
    assert lookahead.peek_until(keycap_four) == "a\nb"
    assert lookahead.peek_until("4") == ""
    assert lookahead.peek_until("c") == keycap_four
    assert lookahead.peek_until("x") == ""
    assert lookahead.peek_line() == ""


def test_peek_until_spans_lines():
    lookahead = Tokenizer.from_string("1\n2\n\n3\n").lookahead()
    assert lookahead.peek_until("\n\n") == "1\n2"
    assert lookahead.offset == 3


def test_peek_until_delimiter_split_over_fetches(recording_source):
    tokenizer = Tokenizer(recording_source(["ab", "-", "-cd\n"]))
    assert tokenizer.lookahead().peek_until("--") == "ab"


def test_peek_until_empty_delimiter():
    with pytest.raises(ValueError):
        Tokenizer.from_string("abc").lookahead().peek_until("")


def test_find_does_not_move():
    lookahead = Tokenizer.from_string("ab\ncd").lookahead()
    assert lookahead.find("c") == 3
    assert lookahead.find("x") is None
    assert lookahead.offset == 0


@given(
    st.text(alphabet="ab\n", max_size=30),
    st.text(alphabet="ab\n", min_size=1, max_size=3),
)
def test_peek_until_matches_str_find(text, delimiter):
    lookahead = Tokenizer.from_string(text).lookahead()
    index = text.find(delimiter)
    if index == -1:
        assert lookahead.peek_until(delimiter) == ""
    else:
        assert lookahead.peek_until(delimiter) == text[:index]
        assert lookahead.offset == len(text[:index].encode("utf-8"))


def test_skip():
    lookahead = Tokenizer.from_string("ab\n").lookahead()
    lookahead.peek_until("b")
    lookahead.skip(1)
    assert lookahead.peek_line() == "\n"
    with pytest.raises(ValueError):
        lookahead.skip(1)
    with pytest.raises(ValueError):
        lookahead.skip(-1)


def test_extract_shares_offset():
    lookahead = Tokenizer.from_string("ab\ncd").lookahead()
    assert lookahead.extract(Character).value == Character("a")
    assert lookahead.extract(Line).value == Line("b\n")
    assert lookahead.extract(Character).consumed == 1
    assert lookahead.offset == 4


def test_extract_rejects_non_token_types():
    lookahead = Tokenizer.from_string("ab").lookahead()
    with pytest.raises(TypeError):
        lookahead.extract(str)


def test_stale_lookahead():
    tokenizer = Tokenizer.from_string("ab\ncd")
    lookahead = tokenizer.lookahead()
    lookahead.peek_line()
    tokenizer.read(Character)
    with pytest.raises(StaleLookaheadError):
        lookahead.peek_line()


def test_peeking_does_not_make_lookahead_stale():
    tokenizer = Tokenizer.from_string("ab\ncd")
    lookahead = tokenizer.lookahead()
    tokenizer.peek(Line)
    tokenizer.read_until("a")
    assert lookahead.peek_line() == "ab\n"
