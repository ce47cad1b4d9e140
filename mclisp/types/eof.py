from __future__ import annotations


class EndOfInput:
    """Marker returned by the reader once the stream is exhausted."""

    __slots__ = ()

    def __repr__(self): return "EOF"
    def __bool__(self): return False


EOF = EndOfInput()
