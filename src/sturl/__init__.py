__version__ = "0.1"

import logging

from .encoding import Encoding, decode_query_component, decode_uri_component, encode_query_component, encode_uri, encode_uri_component, escape
from .exceptions import ColonInFirstSegment, InvalidAuthorityChar, InvalidCharacter, InvalidPercentEncoding, InvalidPort, MissingClosingBracket, MissingScheme, UrlError, UrlParseError
from .parse import Url, parse_url, paths, serialize
from .query import QueryParams, parse_search

logging.getLogger(__name__).addHandler(logging.NullHandler())
