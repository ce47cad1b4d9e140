"""
  Lisp Reader: character stream, tokenizer and tree assembly

- Pulls one character at a time from a text stream, with one character of
  pushback so a closing paren can end an atom and still be seen as a token.
- Tokens are "(", ")" or a run of characters delimited by whitespace or a
  paren. There are no comments, strings, numbers or quote shorthand:
  'x is simply an atom whose name starts with a quote.
- Emits the object model directly:

    - atoms  -> Atom
    - lists  -> right-nested chain of Pair ending in None
    - ()     -> None (the empty reference)
    - end of input -> EOF (distinct from any value)
"""

from __future__ import annotations

import io
import weakref
from typing import Iterator, Optional, TextIO

from mclisp import SExpression
from mclisp.config import get_max_token_length
from mclisp.errors import McLispSyntaxError
from mclisp.log import get_logger
from mclisp.types.atom import Atom
from mclisp.types.eof import EOF, EndOfInput
from mclisp.types.pair import make_list

logger = get_logger("reader")

LPAREN = "("
RPAREN = ")"

_stream_readers: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()


class CharStream:
    """getc/ungetc over a text stream, tracking the current line."""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.pushback: list[str] = []
        self.line = 1
        self.broken = False

    def getc(self) -> str:
        """Next character, or "" at end of input."""
        if self.pushback:
            ch = self.pushback.pop()
        elif self.broken:
            ch = ""
        else:
            try:
                ch = self.stream.read(1)
            except UnicodeDecodeError as ex:
                # The decoder has dropped its chunk; the rest is unreadable.
                self.broken = True
                raise McLispSyntaxError(
                    f"Invalid character encoding at line {self.line}"
                ) from ex
        if ch == "\n":
            self.line += 1
        return ch

    def ungetc(self, ch: str) -> None:
        if ch == "\n":
            self.line -= 1
        self.pushback.append(ch)


class Reader:
    """Reads one complete expression per call from a character stream."""

    def __init__(self, stream: TextIO | CharStream, max_token_length: Optional[int] = None):
        self.chars = stream if isinstance(stream, CharStream) else CharStream(stream)
        self.max_token_length = (
            get_max_token_length() if max_token_length is None else max_token_length
        )

    @property
    def line(self) -> int:
        return self.chars.line

    def next_token(self) -> Optional[str]:
        """Return the next token, or None when the stream is exhausted."""
        chars = self.chars
        ch = chars.getc()
        while ch and ch.isspace():
            ch = chars.getc()
        if not ch:
            return None

        if ch == LPAREN or ch == RPAREN:
            logger.debug("token %s", ch)
            return ch

        # The buffer grows as needed; an optional limit turns overlong tokens into errors.
        buffer: list[str] = []
        while ch and not ch.isspace() and ch not in (LPAREN, RPAREN):
            buffer.append(ch)
            if self.max_token_length and len(buffer) > self.max_token_length:
                raise McLispSyntaxError(
                    f"Token too long (limit {self.max_token_length}) at line {self.line}"
                )
            ch = chars.getc()

        if ch in (LPAREN, RPAREN):
            chars.ungetc(ch)

        token = "".join(buffer)
        logger.debug("token %s", token)
        return token

    def read(self) -> SExpression | EndOfInput:
        """Read the next complete expression, or EOF."""
        token = self.next_token()
        if token is None:
            return EOF
        if token == LPAREN:
            return self._read_tail()
        if token == RPAREN:
            raise McLispSyntaxError(f"Unexpected ')' at line {self.line}")
        return Atom(token)

    def _read_tail(self) -> SExpression:
        # Elements are gathered iteratively; only nesting recurses.
        items: list[SExpression] = []
        start = self.line
        while True:
            token = self.next_token()
            if token is None:
                raise McLispSyntaxError(
                    f"Unexpected end of input inside list opened at line {start}"
                )
            if token == RPAREN:
                return make_list(items)
            if token == LPAREN:
                items.append(self._read_tail())
            else:
                items.append(Atom(token))

    def __iter__(self) -> Iterator[SExpression]:
        while (expr := self.read()) is not EOF:
            yield expr


def read(source: Reader | TextIO) -> SExpression | EndOfInput:
    """Read one expression from a Reader or a text stream.

    Streams keep one Reader each, so pushback survives between calls.
    """
    if isinstance(source, Reader):
        return source.read()
    reader = _stream_readers.get(source)
    if reader is None:
        reader = _stream_readers[source] = Reader(source)
    return reader.read()


def reader_for(source: str | TextIO) -> Reader:
    if isinstance(source, str):
        source = io.StringIO(source)
    return Reader(source)


def read_all(source: str | TextIO) -> list[SExpression]:
    """Read every expression from a string or stream."""
    return list(reader_for(source))
