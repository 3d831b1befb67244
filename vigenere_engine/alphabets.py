"""
Alphabet Registry
=================
The character universes a cipher can shift over.

Every built-in kind maps to a fixed, ordered table of symbols. Shifting is
positional, so the ORDER of a table is part of the cipher: reordering a
table changes every ciphertext produced with it.

    numbers       0-9
    lowercase     a-z
    uppercase     A-Z
    symbols       !@#$%^&*()_+-=[]{}|;':",./<>?
    base64        A-Z a-z 0-9 + / =          (default)
    alphanumeric  a-z A-Z 0-9
    ascii         alphanumeric + symbols + space
    custom        caller-supplied string
"""

from enum import Enum
from typing import Dict, List, Optional, Union

from .errors import InvalidCharacterType, InvalidType, MissingCharacters


class AlphabetKind(str, Enum):
    """Named alphabet kinds, in the order error messages list them."""

    NUMBERS      = "numbers"
    CUSTOM       = "custom"
    LOWERCASE    = "lowercase"
    UPPERCASE    = "uppercase"
    SYMBOLS      = "symbols"
    BASE64       = "base64"
    ALPHANUMERIC = "alphanumeric"
    ASCII        = "ascii"


DEFAULT_KIND = AlphabetKind.BASE64

NUMBERS   = "0123456789"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
SYMBOLS   = "!@#$%^&*()_+-=[]{}|;':\",./<>?"

BUILTIN_TABLES: Dict[AlphabetKind, str] = {
    AlphabetKind.NUMBERS:      NUMBERS,
    AlphabetKind.LOWERCASE:    LOWERCASE,
    AlphabetKind.UPPERCASE:    UPPERCASE,
    AlphabetKind.SYMBOLS:      SYMBOLS,
    AlphabetKind.BASE64:       UPPERCASE + LOWERCASE + NUMBERS + "+/=",
    AlphabetKind.ALPHANUMERIC: LOWERCASE + UPPERCASE + NUMBERS,
    AlphabetKind.ASCII:        LOWERCASE + UPPERCASE + NUMBERS + SYMBOLS + " ",
}


def available_kinds() -> List[str]:
    return [kind.value for kind in AlphabetKind]


class CharacterUniverse:
    """
    Ordered symbol table with O(1) position lookup.

    Duplicate symbols are legal (custom alphabets are not checked for
    uniqueness); the first occurrence of a symbol defines its position.
    """

    __slots__ = ("_symbols", "_positions")

    def __init__(self, symbols: str):
        self._symbols = symbols
        positions: Dict[str, int] = {}
        for i, ch in enumerate(symbols):
            positions.setdefault(ch, i)
        self._positions = positions

    @property
    def symbols(self) -> str:
        return self._symbols

    def index_of(self, symbol: str) -> int:
        """Position of `symbol`, or -1 when it is not in the universe."""
        return self._positions.get(symbol, -1)

    def symbol_at(self, index: int) -> str:
        return self._symbols[index]

    def __contains__(self, symbol) -> bool:
        return symbol in self._positions

    def __len__(self) -> int:
        return len(self._symbols)

    def __str__(self) -> str:
        return self._symbols

    def __eq__(self, other) -> bool:
        if isinstance(other, CharacterUniverse):
            return self._symbols == other._symbols
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self):
        return f"CharacterUniverse({self._symbols!r})"


def parse_kind(kind: Union[str, AlphabetKind, None]) -> AlphabetKind:
    """Map a kind name (or member) to AlphabetKind. Falsy means the default."""
    if not kind:
        return DEFAULT_KIND
    if isinstance(kind, AlphabetKind):
        return kind
    try:
        return AlphabetKind(kind)
    except ValueError:
        raise InvalidType(available_kinds()) from None


def resolve_universe(kind: AlphabetKind,
                     characters: Optional[object] = None) -> CharacterUniverse:
    """
    Resolve the symbol table for `kind`.

    `characters` is only read for the custom kind, where it must be a
    non-empty str. Any other container, even a non-empty one, is rejected.
    """
    if kind is not AlphabetKind.CUSTOM:
        return CharacterUniverse(BUILTIN_TABLES[kind])

    if not characters:
        raise MissingCharacters()
    if not isinstance(characters, str):
        raise InvalidCharacterType()
    return CharacterUniverse(characters)
