"""The game library: the items and liquids listed in the data directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from bolognaise.parser import Parser, TokenKind

_ITEMS_FILE = "items.txt"


@dataclass
class LibraryItem:
    """An item or liquid known to the library."""

    name: str
    id: int = 0


@dataclass
class Library:
    """Items and liquids loaded from a data directory."""

    data_path: str
    items: list[LibraryItem] = field(default_factory=list)
    liquids: list[LibraryItem] = field(default_factory=list)

    @classmethod
    def load(cls, data_path: str | Path) -> Library:
        """Load ``items.txt`` from ``data_path``.

        Raises OSError if the file cannot be read and ParseError if it is malformed.
        """
        parser = Parser.from_file(Path(data_path) / _ITEMS_FILE)
        parser.expect_section("Items")
        items = _read_names(parser)
        parser.expect_section("Liquids")
        liquids = _read_names(parser)
        return cls(str(data_path), items, liquids)

    def info(self) -> str:
        """A short summary of what was loaded."""
        return (
            f"Library loaded from {self.data_path}"
            f"\nItems: {len(self.items)}"
            f"\nLiquids: {len(self.liquids)}"
        )


def _read_names(parser: Parser) -> list[LibraryItem]:
    return [
        LibraryItem(name.text)
        for name, _ in parser.iter_seq([TokenKind.LITTERAL, TokenKind.COMMA])
    ]