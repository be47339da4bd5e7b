"""Tokenizer for the plain-text data files of the game library."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

END_OF_FILE = 0x03
TABULATION = 0x09
NEW_LINE = 0x0A
CARRIAGE_RETURN = 0x0D
SPACE = 0x20
HASHTAG = 0x23
BRACKET_OPEN = 0x5B
BRACKET_CLOSED = 0x5D
COMMA = 0x2C


class ParseError(ValueError):
    """The data does not follow the expected syntax."""


class TokenKind(Enum):
    LITTERAL = auto()
    COMMA = auto()
    SECTION = auto()


@dataclass(frozen=True)
class ParserToken:
    """A token: a literal (a-zA-Z run), a comma, or a section name in brackets."""

    token_kind: TokenKind
    text: str = ""

    def kind(self) -> TokenKind:
        return self.token_kind


def is_newline(byte: int) -> bool:
    return byte in (NEW_LINE, CARRIAGE_RETURN)


def is_space(byte: int) -> bool:
    return byte in (TABULATION, NEW_LINE, CARRIAGE_RETURN, SPACE)


def is_comment_start(byte: int) -> bool:
    return byte == HASHTAG


def is_litteral(byte: int) -> bool:
    return ord("A") <= byte <= ord("Z") or ord("a") <= byte <= ord("z")


class Parser:
    """Iterator over the tokens of a byte string, tracking line and column."""

    def __init__(self, data: bytes | str) -> None:
        self._data = data.encode() if isinstance(data, str) else bytes(data)
        self._current = 0
        self.line = 1
        self.column = 1

    @classmethod
    def from_file(cls, path: str | Path) -> Parser:
        """Read a whole file; OSError propagates if it cannot be read."""
        return cls(Path(path).read_bytes())

    def _at_end(self) -> bool:
        return self._current >= len(self._data)

    def _peek(self) -> int:
        return self._data[self._current]

    def _tick(self) -> None:
        if not self._at_end():
            byte = self._peek()
            if byte == NEW_LINE:
                self.line += 1
                self.column = 1
            elif byte == CARRIAGE_RETURN:
                self.column = 1
            else:
                self.column += 1
        self._current += 1

    def _skip_blank(self) -> None:
        while not self._at_end() and (
            is_space(self._peek()) or is_comment_start(self._peek())
        ):
            if is_comment_start(self._peek()):
                while not self._at_end() and not is_newline(self._peek()):
                    self._tick()
            else:
                self._tick()

    def _read_litteral(self) -> str:
        start = self._current
        while not self._at_end() and is_litteral(self._peek()):
            self._tick()
        return self._data[start : self._current].decode("ascii")

    def _state(self) -> tuple[int, int, int]:
        return self._current, self.line, self.column

    def _restore(self, state: tuple[int, int, int]) -> None:
        self._current, self.line, self.column = state

    def __iter__(self) -> Parser:
        return self

    def __next__(self) -> ParserToken:
        self._skip_blank()
        if self._at_end():
            raise StopIteration
        byte = self._peek()
        if byte == COMMA:
            self._tick()
            return ParserToken(TokenKind.COMMA)
        if byte == BRACKET_OPEN:
            self._tick()
            name = self._read_litteral()
            if self._at_end() or self._peek() != BRACKET_CLOSED:
                found = chr(END_OF_FILE) if self._at_end() else chr(self._peek())
                raise ParseError(
                    f"At line {self.line}, col {self.column}, "
                    f"expected {chr(BRACKET_CLOSED)}, found {found}."
                )
            self._tick()
            return ParserToken(TokenKind.SECTION, name)
        if is_litteral(byte):
            return ParserToken(TokenKind.LITTERAL, self._read_litteral())
        raise ParseError(
            f"At line {self.line}, col {self.column}, unexpected token '{chr(byte)}'"
        )

    def expect_section(self, expected: str) -> None:
        """Consume a section token named ``expected`` or raise ParseError."""
        try:
            token = next(self)
        except StopIteration:
            raise ParseError(
                f"At line {self.line}, col {self.column}, "
                f"Expected section (for '{expected}'), found end of file."
            ) from None
        except ParseError as err:
            raise ParseError(
                f"At line {self.line}, col {self.column}, "
                f"Expected section (for '{expected}'), found error: {err}"
            ) from err
        if token.kind() is not TokenKind.SECTION:
            raise ParseError(
                f"At line {self.line}, col {self.column}, "
                f"Expected section (for '{expected}'), found token {token!r}"
            )
        if token.text != expected:
            raise ParseError(
                f"At line {self.line}, col {self.column}, "
                f"Expected section '{expected}', found '{token.text}'."
            )

    def iter_seq(
        self, seq: Iterable[TokenKind | None]
    ) -> Iterator[tuple[ParserToken | None, ...]]:
        """Yield runs of tokens matching the kinds in ``seq``.

        A ``None`` kind accepts and drops any token. Iteration stops, with the
        parser rewound to the start of the run, at the first run that does not
        match or is cut short by the end of the data. ParseError propagates.
        """
        kinds = tuple(seq)
        while True:
            saved = self._state()
            run: list[ParserToken | None] = []
            for expected in kinds:
                try:
                    token = next(self)
                except StopIteration:
                    self._restore(saved)
                    return
                if expected is None:
                    run.append(None)
                elif token.kind() is expected:
                    run.append(token)
                else:
                    self._restore(saved)
                    return
            yield tuple(run)