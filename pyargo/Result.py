from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Any, Generic, Optional, TypeVar, Union

T = TypeVar('T')  # Generic type for production results

@dataclass
class SourcePos:
    """Represents the current position in the input stream."""
    line: int = 1
    column: int = 1
    name: str = ""

    def update(self, char: str) -> 'SourcePos':
        """Position after consuming `char`."""
        if char == '\n':
            return SourcePos(self.line + 1, 1, self.name)
        return SourcePos(self.line, self.column + 1, self.name)

    def __str__(self) -> str:
        return f"{self.name} line {self.line}, column {self.column}"

class ErrorKind(Enum):
    UNEXPECTED_TOKEN = auto()
    UNEXPECTED_EOF = auto()
    ALLOCATION = auto()      # a buffer could not grow
    DEPTH_EXCEEDED = auto()  # maps nested deeper than ParserConfig.max_depth

@dataclass(frozen=True)
class ParseError:
    """
    Why and where a production failed.

    `found` is the lookahead character at the point of failure ('' at end of
    input). `in_key` is set when the failure happened while reading a map key;
    it survives propagation through enclosing maps so the driver can tell a
    key failure apart from any other syntax error.
    """
    pos: SourcePos
    kind: ErrorKind
    found: str = ''
    in_key: bool = False

    def as_key_error(self) -> 'ParseError':
        return replace(self, in_key=True)

    @property
    def message(self) -> str:
        if self.kind is ErrorKind.UNEXPECTED_TOKEN:
            return f"unexpected token '{self.found}'"
        if self.kind is ErrorKind.UNEXPECTED_EOF:
            return "unexpected end of input"
        if self.kind is ErrorKind.ALLOCATION:
            return "out of memory"
        return "maximum nesting depth exceeded"

    def __str__(self) -> str:
        return f"Parse error at {self.pos}: {self.message}"

@dataclass
class Ok(Generic[T]):
    value: T

@dataclass
class Error:
    error: ParseError

@dataclass
class ParseResult(Generic[T]):
    """What every production returns: an Ok carrying a value or an Error."""
    reply: Union[Ok[T], Error]

    @staticmethod
    def ok(value: T) -> 'ParseResult[T]':
        return ParseResult(Ok(value))

    @staticmethod
    def fail(error: ParseError) -> 'ParseResult[Any]':
        return ParseResult(Error(error))

    @property
    def value(self) -> Optional[T]:
        return self.reply.value if isinstance(self.reply, Ok) else None

    @property
    def error(self) -> Optional[ParseError]:
        return self.reply.error if isinstance(self.reply, Error) else None

    def __bool__(self) -> bool:
        return isinstance(self.reply, Ok)
