"""Top-level entry points: run one parse and turn its outcome into something a caller can use."""

import logging
from typing import Any, Optional, TextIO, Tuple

from .Config import ParserConfig
from .Cursor import Cursor
from .Parser import parse_value
from .Result import ErrorKind, ParseError, ParseResult
from .Serializer import serialize
from .Value import Value

log = logging.getLogger(__name__)

class ArgoError(ValueError):
    """Raised by loads()/load() when the input does not parse."""
    def __init__(self, error: ParseError):
        self.error = error
        detail = str(error)
        if error.in_key:
            detail += " (while reading a map key)"
        super().__init__(detail)

def _skip_spaces(cursor: Cursor) -> None:
    while cursor.peek().isspace():
        cursor.next()

def parse_cursor(cursor: Cursor, config: Optional[ParserConfig] = None) -> ParseResult:
    config = config or ParserConfig()
    try:
        result = parse_value(cursor, config)
    except RecursionError:
        # max_depth fits the recursion limit, but not the frames the caller already holds
        result = ParseResult.fail(cursor.unexpected(ErrorKind.DEPTH_EXCEEDED))
    if not result:
        log.debug("parse failed: %s (in_key=%s)", result.error, result.error.in_key)
        return result

    if not config.allow_trailing:
        _skip_spaces(cursor)
        if not cursor.at_eof():
            error = cursor.unexpected()
            log.debug("trailing data after value: %s", error)
            return ParseResult.fail(error)
    return result

def argo(stream: TextIO, config: Optional[ParserConfig] = None, name: str = "") -> ParseResult:
    """Parse exactly one value from `stream`."""
    return parse_cursor(Cursor(stream, name), config)

def describe(error: ParseError) -> Optional[str]:
    """
    The diagnostic line for a failed parse, or None when nothing should be
    printed. Key failures are reported silently: by the time they reach the
    top, the position they describe is no longer meaningful to the reader.
    """
    if error.in_key:
        return None
    return error.message

def run_parser(text: str,
               config: Optional[ParserConfig] = None,
               source_name: str = "") -> Tuple[Optional[Value], Optional[ParseError]]:
    result = parse_cursor(Cursor.from_string(text, source_name), config)
    return result.value, result.error

def _unwrap(result: ParseResult) -> Value:
    if not result:
        raise ArgoError(result.error)
    return result.value

def loads(text: str, **options: Any) -> Value:
    return _unwrap(parse_cursor(Cursor.from_string(text), ParserConfig.from_kwargs(**options)))

def load(fp: TextIO, **options: Any) -> Value:
    name = getattr(fp, 'name', '')
    return _unwrap(argo(fp, ParserConfig.from_kwargs(**options), name if isinstance(name, str) else ''))

def dumps(value: Value) -> str:
    return serialize(value)
