"""sturl.exceptions
Every way a URL can be rejected.
"""


class UrlError(ValueError):
    """Base exception for all sturl errors."""


class InvalidPercentEncoding(UrlError):
    """A '%' was not followed by two hex digits."""


class UrlParseError(UrlError):
    """
    Base exception for structural parse failures.
    Raised by parse_url; no partial Url is ever returned alongside it.
    """


class MissingScheme(UrlParseError):
    """The URL starts with ':'."""

    def __init__(self, message: str = "Missing protocol scheme in URL"):
        super().__init__(message)


class InvalidCharacter(UrlParseError):
    """The URL contains an ASCII control byte."""

    def __init__(self, message: str = "Invalid control character in URL"):
        super().__init__(message)


class ColonInFirstSegment(UrlParseError):
    """A relative path's first segment contains ':' and would read as a scheme."""

    def __init__(self, message: str = "First path segment in URL cannot contain colon"):
        super().__init__(message)


class InvalidAuthorityChar(UrlParseError):
    """The userinfo holds a character outside the allowed set."""


class MissingClosingBracket(UrlParseError):
    """An IP literal host opened with '[' but never closed."""

    def __init__(self, message: str = "Missing ']' in URL host"):
        super().__init__(message)


class InvalidPort(UrlParseError):
    """The port is not made of decimal digits."""
