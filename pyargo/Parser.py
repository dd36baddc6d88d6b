"""
Recursive-descent productions, one per grammar rule:

    value   = string | map | integer
    string  = '"' { char | '\\"' | '\\\\' } '"'
    map     = '{' [ string ':' value { ',' string ':' value } ] '}'
    integer = [ '-' ] digit { digit }

Every production returns a ParseResult. A failing production hands back
only the error; whatever it had accumulated is dropped with it.
"""
from typing import Any, List

from .Config import ParserConfig
from .Cursor import EOF, Cursor
from .Result import ErrorKind, ParseResult
from .Value import JInteger, JMap, JString, Pair

_DIGITS = frozenset('0123456789')

STRING_INITIAL_CAPACITY = 16
MAP_INITIAL_CAPACITY = 4

class _Buffer:
    """Append-only buffer that doubles its capacity when full."""
    def __init__(self, capacity: int):
        self._data: List[Any] = [None] * capacity
        self._length = 0

    def __len__(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return len(self._data)

    def append(self, item: Any) -> None:
        if self._length >= len(self._data):
            self.grow()
        self._data[self._length] = item
        self._length += 1

    def grow(self) -> None:
        # May raise MemoryError; callers turn that into an ALLOCATION error
        self._data.extend([None] * max(len(self._data), 1))

    def items(self) -> List[Any]:
        return self._data[:self._length]

    def text(self) -> str:
        return ''.join(self._data[:self._length])

def parse_value(cursor: Cursor, config: ParserConfig, depth: int = 0) -> ParseResult:
    """Dispatch on the next character without consuming it."""
    c = cursor.peek()
    if c == '"':
        return parse_string(cursor, config)
    if c == '{':
        return parse_map(cursor, config, depth + 1)
    if c == '-' or c in _DIGITS:
        return parse_integer(cursor, config)
    return ParseResult.fail(cursor.unexpected())

def parse_string(cursor: Cursor, config: ParserConfig) -> ParseResult:
    if not cursor.accept('"'):
        return ParseResult.fail(cursor.unexpected())

    buf = _Buffer(STRING_INITIAL_CAPACITY)
    while cursor.peek() not in ('"', EOF):
        c = cursor.next()
        if c == '\\':
            if cursor.peek() not in ('"', '\\'):
                return ParseResult.fail(cursor.unexpected())
            c = cursor.next()
        try:
            buf.append(c)
        except MemoryError:
            return ParseResult.fail(cursor.unexpected(ErrorKind.ALLOCATION))

    err = cursor.expect('"')
    if err:
        return ParseResult.fail(err)
    return ParseResult.ok(JString(buf.text()))

def parse_map(cursor: Cursor, config: ParserConfig, depth: int = 1) -> ParseResult:
    """
    Parse a map at nesting level `depth` (the top-level map is level 1).

    A key that fails to parse yields an error flagged in_key. Errors from the
    value side are passed up untouched, so a key failure in a nested map keeps
    its flag all the way out.
    """
    if depth > config.max_depth:
        return ParseResult.fail(cursor.unexpected(ErrorKind.DEPTH_EXCEEDED))
    if not cursor.accept('{'):
        return ParseResult.fail(cursor.unexpected())
    if cursor.accept('}'):
        return ParseResult.ok(JMap())

    pairs = _Buffer(MAP_INITIAL_CAPACITY)
    while True:
        key = parse_string(cursor, config)
        if not key:
            return ParseResult.fail(key.error.as_key_error())

        err = cursor.expect(':')
        if err:
            return ParseResult.fail(err)

        value = parse_value(cursor, config, depth)
        if not value:
            return value

        try:
            pairs.append(Pair(key.value.value, value.value))
        except MemoryError:
            return ParseResult.fail(cursor.unexpected(ErrorKind.ALLOCATION))

        if not cursor.accept(','):
            break

    err = cursor.expect('}')
    if err:
        return ParseResult.fail(err)
    return ParseResult.ok(JMap(pairs.items()))

def parse_integer(cursor: Cursor, config: ParserConfig) -> ParseResult:
    sign = -1 if cursor.accept('-') else 1
    number = 0
    has_digits = False
    while cursor.peek() in _DIGITS:
        number = number * 10 + int(cursor.next())
        has_digits = True

    if not has_digits:
        return ParseResult.fail(cursor.unexpected())
    return ParseResult.ok(JInteger(sign * number))
