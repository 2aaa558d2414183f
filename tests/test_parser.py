import pytest

from canned_responder import MalformedInput, parse_default_responses, parse_keyed_responses
from canned_responder.parser import iter_blocks, normalize_key, parse_key_line


def test_aliases_share_multiline_text():
    entries = list(parse_keyed_responses("a, b\nline1\nline2\n\n"))
    assert len(entries) == 1
    assert entries[0].keywords == ("a", "b")
    assert entries[0].text == "line1\nline2"


def test_quotes_and_whitespace_are_stripped_from_keys():
    assert parse_key_line('"hello", "hi"') == ("hello", "hi")
    assert normalize_key('  per"formance"  ') == "performance"


def test_single_quotes_are_kept():
    (entry,) = parse_keyed_responses("'hi'\nHello!")
    assert entry.keywords == ("'hi'",)


def test_empty_keys_are_skipped():
    (entry,) = parse_keyed_responses('"", x,  ,\nSome text')
    assert entry.keywords == ("x",)


def test_final_block_without_trailing_blank_line_is_committed():
    entries = list(parse_keyed_responses('"stress"\nTell me more.\n\n"worry"\nWhy?'))
    assert [entry.keywords for entry in entries] == [("stress",), ("worry",)]
    assert entries[-1].text == "Why?"


def test_response_lines_keep_their_indentation():
    (entry,) = parse_keyed_responses("k\n  indented\nplain")
    assert entry.text == "  indented\nplain"


def test_key_only_block_is_dropped():
    entries = list(parse_keyed_responses("orphan\n\nreal\nanswer"))
    assert len(entries) == 1
    assert entries[0].keywords == ("real",)
    assert entries[0].text == "answer"


def test_whitespace_only_line_separates_blocks():
    entries = list(parse_keyed_responses("a\nx\n   \t\nb\ny"))
    assert [entry.text for entry in entries] == ["x", "y"]


def test_consecutive_blank_lines_raise_after_earlier_entries():
    entries = parse_keyed_responses("a\nx\n\n\nb\ny", "responses.txt")
    first = next(entries)
    assert first.keywords == ("a",)
    with pytest.raises(MalformedInput) as excinfo:
        next(entries)
    assert excinfo.value.resource == "responses.txt"
    assert excinfo.value.line == 4
    assert isinstance(excinfo.value, ValueError)


def test_leading_blank_lines_are_malformed():
    with pytest.raises(MalformedInput):
        list(iter_blocks("\n\nk\nt", "r"))


def test_single_leading_blank_line_is_allowed():
    assert list(iter_blocks("\nk\nt\n", "r")) == [(2, ["k", "t"])]


def test_default_blocks_become_entries_in_order():
    text = "First reply.\n\nSecond reply\nspans two lines.\n\nThird."
    assert list(parse_default_responses(text)) == [
        "First reply.",
        "Second reply\nspans two lines.",
        "Third.",
    ]


def test_default_resource_rejects_double_blank_lines():
    with pytest.raises(MalformedInput):
        list(parse_default_responses("one\n\n\ntwo", "default.txt"))


def test_empty_text_has_no_blocks():
    assert list(parse_default_responses("")) == []
    assert list(parse_keyed_responses("")) == []
