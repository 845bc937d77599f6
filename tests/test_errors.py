import pytest

from crhtml.errors import ParseError


def _fail_on_empty(text):
    if not text:
        raise ParseError(text, "The rulebook is empty")
    return text


def test_fields_are_kept():
    err = ParseError("some text", "went wrong")
    assert err.culprit == "some text"
    assert err.message == "went wrong"


def test_str_format():
    err = ParseError("some text", "went wrong")
    assert str(err) == (
        "There was an error parsing the following:\nsome text\n\nError: went wrong"
    )


def test_raised_error_renders_its_fields():
    with pytest.raises(ParseError) as info:
        _fail_on_empty("")
    assert info.value.culprit == ""
    assert info.value.message == "The rulebook is empty"
    assert str(info.value) == (
        "There was an error parsing the following:\n\n\nError: The rulebook is empty"
    )


def test_is_an_exception():
    err = ParseError("culprit", "message")
    assert isinstance(err, Exception)
    assert err.culprit == "culprit"


def test_args_hold_both_fields():
    err = ParseError("culprit", "message")
    assert err.args == ("culprit", "message")