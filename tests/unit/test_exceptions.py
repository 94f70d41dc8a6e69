"""tests/unit/test_exceptions.py"""

import pytest

from sturl.exceptions import (
    ColonInFirstSegment,
    InvalidAuthorityChar,
    InvalidCharacter,
    InvalidPercentEncoding,
    InvalidPort,
    MissingClosingBracket,
    MissingScheme,
    UrlError,
    UrlParseError,
)


def test_exception_hierarchy():
    """Verify the inheritance structure of sturl exceptions."""
    assert issubclass(UrlError, ValueError)
    assert issubclass(InvalidPercentEncoding, UrlError)
    assert issubclass(UrlParseError, UrlError)
    for exception_class in (
        MissingScheme,
        InvalidCharacter,
        ColonInFirstSegment,
        InvalidAuthorityChar,
        MissingClosingBracket,
        InvalidPort,
    ):
        assert issubclass(exception_class, UrlParseError)
    assert not issubclass(InvalidPercentEncoding, UrlParseError)


@pytest.mark.parametrize(
    "exception_class, message",
    [
        (MissingScheme, "Missing protocol scheme in URL"),
        (InvalidCharacter, "Invalid control character in URL"),
        (ColonInFirstSegment, "First path segment in URL cannot contain colon"),
        (MissingClosingBracket, "Missing ']' in URL host"),
    ],
)
def test_default_messages(exception_class, message):
    """Verify that parse errors carry a default message."""
    with pytest.raises(exception_class) as exc_info:
        raise exception_class()
    assert message in str(exc_info.value)


@pytest.mark.parametrize("exception_class", [UrlError, InvalidPercentEncoding, InvalidAuthorityChar, InvalidPort])
def test_exceptions_accept_message(exception_class):
    """Verify that exceptions can be raised with a message."""
    message = f"Testing {exception_class.__name__}"
    with pytest.raises(exception_class) as exc_info:
        raise exception_class(message)
    assert str(exc_info.value) == message
