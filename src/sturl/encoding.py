"""sturl.encoding
Percent-encoding and percent-decoding.

encode_uri_component, decode_uri_component and encode_uri behave like their
browser namesakes. escape() covers the per-component rules of Go's net/url.

All encoders work on bytes: a str is first encoded with DEFAULT_ENCODING and
DEFAULT_ERRORS. Decoders build bytes and decode them the same way, so that
decode_uri_component(encode_uri_component(s)) == s for any s, even one that
started life as undecodable bytes.
"""

import enum
import re

from typing import Iterable

from .exceptions import InvalidPercentEncoding

DEFAULT_ENCODING: str = "utf-8"
DEFAULT_ERRORS: str = "surrogateescape"


def _byteset(chars: str | Iterable[str]) -> frozenset[int]:
    return frozenset(ord(c) for c in chars)


# ALPHA / DIGIT
_ALNUM: frozenset[int] = _byteset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789")

# The unreserved punctuation of RFC 3986 section 2.3
_MARK: frozenset[int] = _byteset("-._~")

# reserved, as far as net/url is concerned
_RESERVED: frozenset[int] = _byteset("$&+,/:;=?@")

# encodeURIComponent leaves these alone
_COMPONENT_SAFE: frozenset[int] = _ALNUM | _MARK | _byteset("!*'()")

# encodeURI additionally leaves the URI's own delimiters alone
_URI_SAFE: frozenset[int] = _COMPONENT_SAFE | _byteset(";/?:@&=+$,#")

# sub-delims, ":", the brackets of IP-literal, and a few more Go lets through
_HOST_SAFE: frozenset[int] = _ALNUM | _MARK | _byteset("!$&'()*+,;=:[]<>\"")

_BYTE_TO_HEX: tuple[str, ...] = tuple(f"%{b:02X}" for b in range(256))

_CONTROL_BYTE_PAT: re.Pattern[str] = re.compile(r"[\x00-\x1f\x7f]")


class Encoding(enum.Enum):
    """The component a string is being escaped for."""

    USERNAME_PASSWORD = "username_password"
    HOST = "host"
    ZONE = "zone"
    PATH = "path"
    FRAGMENT = "fragment"
    QUERY_COMPONENT = "query_component"


_SAFE_BYTES: dict[Encoding, frozenset[int]] = {
    Encoding.USERNAME_PASSWORD: _ALNUM | _MARK | (_RESERVED - _byteset("@/?:")),
    Encoding.HOST: _HOST_SAFE,
    Encoding.ZONE: _HOST_SAFE,
    Encoding.PATH: _ALNUM | _MARK | (_RESERVED - _byteset("?")),
    Encoding.FRAGMENT: _ALNUM | _MARK | _RESERVED | _byteset("!()*"),
    Encoding.QUERY_COMPONENT: _ALNUM | _MARK,
}


def _to_bytes(s: str | bytes, encoding: str, errors: str) -> bytes:
    if isinstance(s, bytes):
        return s
    try:
        return s.encode(encoding, errors)
    except UnicodeEncodeError:
        # Lone surrogates outside the surrogateescape range still have to go out as something.
        return s.encode("utf-8", "surrogatepass")


def _quote(data: bytes, safe: frozenset[int], space_as_plus: bool = False) -> str:
    if space_as_plus:
        return "".join(
            chr(b) if b in safe else "+" if b == 0x20 else _BYTE_TO_HEX[b] for b in data
        )
    return "".join(chr(b) if b in safe else _BYTE_TO_HEX[b] for b in data)


def parse_hex_digit(c: str) -> int | None:
    """Returns the value of a single hex digit, or None if c is not one."""
    if len(c) == 1 and c in "0123456789abcdefABCDEF":
        return int(c, 16)
    return None


def contains_control_byte(s: str | bytes) -> bool:
    """True if s holds any of 0x00-0x1F or 0x7F."""
    if isinstance(s, bytes):
        s = s.decode("latin-1")
    return _CONTROL_BYTE_PAT.search(s) is not None


def unquote_to_bytes(s: str | bytes, encoding: str = DEFAULT_ENCODING, errors: str = DEFAULT_ERRORS) -> bytes:
    """Strict percent-decoding.
    Unlike urllib.parse.unquote_to_bytes, a '%' that does not start a valid
    escape is an error rather than being passed through.
    """
    if isinstance(s, bytes):
        s, encoding, errors = s.decode("latin-1"), "latin-1", "strict"
    head, *escapes = s.split("%")
    result: bytearray = bytearray(head.encode(encoding, errors))
    for part in escapes:
        if len(part) < 2:
            raise InvalidPercentEncoding(f"Truncated escape '%{part}' in URI component")
        hi: int | None = parse_hex_digit(part[0])
        lo: int | None = parse_hex_digit(part[1])
        if hi is None or lo is None:
            raise InvalidPercentEncoding(f"Invalid hex '%{part[:2]}' in URI component")
        result.append(hi * 16 + lo)
        result += part[2:].encode(encoding, errors)
    return bytes(result)


def encode_uri_component(s: str | bytes, encoding: str = DEFAULT_ENCODING, errors: str = DEFAULT_ERRORS) -> str:
    """Encodes s the same way encodeURIComponent does in the browser.
    e.g. encode_uri_component("a b/c") == "a%20b%2Fc"
    """
    return _quote(_to_bytes(s, encoding, errors), _COMPONENT_SAFE)


def decode_uri_component(s: str | bytes, encoding: str = DEFAULT_ENCODING, errors: str = DEFAULT_ERRORS) -> str:
    """Decodes s the same way decodeURIComponent does in the browser.
    Raises InvalidPercentEncoding on a truncated or non-hex escape, or when
    the result cannot be represented in encoding.
    """
    if isinstance(s, str) and "%" not in s:
        return s
    try:
        return unquote_to_bytes(s, encoding, errors).decode(encoding, errors)
    except UnicodeError as e:
        raise InvalidPercentEncoding(f"Cannot decode URI component: {e}") from e


def encode_uri(s: str | bytes, encoding: str = DEFAULT_ENCODING, errors: str = DEFAULT_ERRORS) -> str:
    """Like encode_uri_component, but keeps the delimiters ;/?:@&=+$,# intact."""
    return _quote(_to_bytes(s, encoding, errors), _URI_SAFE)


def escape(s: str | bytes, mode: Encoding, encoding: str = DEFAULT_ENCODING, errors: str = DEFAULT_ERRORS) -> str:
    if mode is Encoding.HOST:
        return _escape_host(s if isinstance(s, str) else s.decode(encoding, errors), encoding, errors)
    return _quote(
        _to_bytes(s, encoding, errors),
        _SAFE_BYTES[mode],
        space_as_plus=mode is Encoding.QUERY_COMPONENT,
    )


def _escape_host(host: str, encoding: str, errors: str) -> str:
    """IP literals go out verbatim, except for the zone, which follows the %25 marker.
    e.g. _escape_host("[fe80::1%en0]") == "[fe80::1%25en0]"
    """
    if not host.startswith("["):
        return _quote(_to_bytes(host, encoding, errors), _SAFE_BYTES[Encoding.HOST])
    zone_idx: int = host.find("%")
    if zone_idx < 0:
        return host
    zone: str = _quote(_to_bytes(host[zone_idx + 1 :], encoding, errors), _SAFE_BYTES[Encoding.ZONE])
    return f"{host[:zone_idx]}%25{zone}"


def encode_query_component(s: str | bytes, encoding: str = DEFAULT_ENCODING, errors: str = DEFAULT_ERRORS) -> str:
    """Query keys and values: everything but ALPHA / DIGIT / "-._~" is escaped, and ' ' becomes '+'."""
    return escape(s, Encoding.QUERY_COMPONENT, encoding, errors)


def decode_query_component(s: str | bytes, encoding: str = DEFAULT_ENCODING, errors: str = DEFAULT_ERRORS) -> str:
    if isinstance(s, bytes):
        return decode_uri_component(s.replace(b"+", b" "), encoding, errors)
    return decode_uri_component(s.replace("+", " "), encoding, errors)
