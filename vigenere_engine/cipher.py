"""
Cipher Engine — Vigenère over an arbitrary alphabet
====================================================
Classical additive polyalphabetic substitution, generalised from the
26-letter Latin alphabet to any ordered symbol table.

For message position i, with secret symbol k = secret[i % len(secret)]:

    encode:  c = U[(idx(k) + idx(m)) % L]
    decode:  m = U[(idx(c) - idx(k) + L) % L]

where U is the character universe and L = len(U). The keystream is keyed
by ABSOLUTE message position: a symbol outside the universe is copied
through unchanged but still advances the keystream phase.

Not encryption in any modern sense. Obfuscation and puzzle grade only.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .alphabets import (
    BUILTIN_TABLES,
    AlphabetKind,
    CharacterUniverse,
    available_kinds,
    parse_kind,
    resolve_universe,
)
from .errors import (
    InvalidCharacterType,
    InvalidType,
    MissingCharacters,
    UniverseMismatch,
)
from .validation import validate_message, validate_secret

logger = logging.getLogger(__name__)

ENCODE = "encode"
DECODE = "decode"


@dataclass(frozen=True)
class CipherConfig:
    """Resolved, validated engine settings. Never mutated after creation."""

    kind:     AlphabetKind
    universe: CharacterUniverse
    strict:   bool = False
    secret:   Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.kind, AlphabetKind):
            raise InvalidType(available_kinds())
        if not isinstance(self.universe, CharacterUniverse):
            raise InvalidCharacterType()
        if not len(self.universe):
            raise MissingCharacters()
        if (self.kind is not AlphabetKind.CUSTOM
                and self.universe.symbols != BUILTIN_TABLES[self.kind]):
            raise UniverseMismatch(self.kind.value, self.universe.symbols)

    @classmethod
    def from_options(cls, type: Union[str, AlphabetKind, None] = None,
                     strict: bool = False, characters: object = None,
                     secret: Optional[str] = None) -> "CipherConfig":
        """
        Build a config from the loose options record.

        type       : kind name or AlphabetKind; falsy selects base64
        strict     : reject out-of-universe message symbols
        characters : symbol string, required for the custom kind only
        secret     : default secret for calls that omit their own
        """
        kind = parse_kind(type)
        universe = resolve_universe(kind, characters)
        return cls(kind=kind, universe=universe,
                   strict=bool(strict), secret=secret or None)


def transform(message: str, secret: str, universe: CharacterUniverse,
              direction: str) -> str:
    """
    Shift every in-universe symbol of `message` by the repeating `secret`.
    The secret is always validated; the message only for its type.
    """
    if direction not in (ENCODE, DECODE):
        raise ValueError(f"direction must be '{ENCODE}' or '{DECODE}'.")
    validate_secret(secret, universe)
    validate_message(message, universe)

    size = len(universe)
    period = len(secret)
    sign = 1 if direction == ENCODE else -1
    out = []
    passed = 0
    for i, ch in enumerate(message):
        y = universe.index_of(ch)
        if y < 0:
            out.append(ch)
            passed += 1
            continue
        x = universe.index_of(secret[i % period])
        out.append(universe.symbol_at((y + sign * x) % size))

    logger.debug(f"{direction}: {len(message)} symbols, {passed} passed through")
    return "".join(out)


class VigenereCipher:
    """
    Keyed Vigenère engine over a selectable character universe.

        v = VigenereCipher(type="lowercase", secret="key")
        v.decode(v.encode("hello")) == "hello"

    Construction raises ConfigError subclasses; encode/decode raise
    ValidationError subclasses. Either way nothing partial is returned.
    """

    def __init__(self, type: Union[str, AlphabetKind, None] = None,
                 strict: bool = False, characters: object = None,
                 secret: Optional[str] = None):
        self._config = CipherConfig.from_options(
            type=type, strict=strict, characters=characters, secret=secret)
        logger.info(
            f"VigenereCipher kind={self._config.kind.value} "
            f"universe={len(self._config.universe)} strict={self._config.strict}"
        )

    @classmethod
    def from_config(cls, config: CipherConfig) -> "VigenereCipher":
        obj = cls.__new__(cls)
        obj._config = config
        return obj

    @property
    def config(self) -> CipherConfig:
        return self._config

    @property
    def kind(self) -> AlphabetKind:
        return self._config.kind

    @property
    def universe(self) -> str:
        return self._config.universe.symbols

    @property
    def strict(self) -> bool:
        return self._config.strict

    def _run(self, message: str, secret: Optional[str], direction: str) -> str:
        if secret is None:
            secret = self._config.secret
        universe = self._config.universe
        validate_secret(secret, universe)
        validate_message(message, universe, self._config.strict)
        return transform(message, secret, universe, direction)

    def encode(self, message: str, secret: Optional[str] = None) -> str:
        """Encode `message`. Falls back to the configured secret."""
        return self._run(message, secret, ENCODE)

    def decode(self, message: str, secret: Optional[str] = None) -> str:
        """Decode `message`. Must use the secret it was encoded with."""
        return self._run(message, secret, DECODE)

    def __repr__(self):
        return f"VigenereCipher({self._config.kind.value}, strict={self._config.strict})"
