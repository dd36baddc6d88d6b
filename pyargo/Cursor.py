import io
from typing import Optional, TextIO

from .Result import ErrorKind, ParseError, SourcePos

EOF = ''  # What peek() returns once the stream is exhausted

class Cursor:
    """
    Single character lookahead over a text stream.

    The stream is read one character at a time; the character returned by
    peek() is held in a pushback slot until it is consumed.
    """
    def __init__(self, stream: TextIO, name: str = ""):
        self._stream = stream
        self._pushback: Optional[str] = None
        self.pos = SourcePos(name=name)

    @classmethod
    def from_string(cls, text: str, name: str = "") -> 'Cursor':
        return cls(io.StringIO(text), name)

    def peek(self) -> str:
        """Next unconsumed character, or EOF. Does not advance."""
        if self._pushback is None:
            self._pushback = self._stream.read(1)
        return self._pushback

    def next(self) -> str:
        """Consume and return one character (EOF stays EOF)."""
        c = self.peek()
        if c != EOF:
            self._pushback = None
            self.pos = self.pos.update(c)
        return c

    def accept(self, c: str) -> bool:
        if self.peek() == c:
            self.next()
            return True
        return False

    def expect(self, c: str) -> Optional[ParseError]:
        """accept(c), or the unexpected token error for whatever is there instead."""
        if self.accept(c):
            return None
        return self.unexpected()

    def at_eof(self) -> bool:
        return self.peek() == EOF

    def unexpected(self, kind: Optional[ErrorKind] = None) -> ParseError:
        """Build an error describing the current lookahead."""
        found = self.peek()
        if kind is None:
            kind = ErrorKind.UNEXPECTED_EOF if found == EOF else ErrorKind.UNEXPECTED_TOKEN
        return ParseError(self.pos, kind, found)
