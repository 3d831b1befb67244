"""
Validator
=========
Checks run on every encode/decode call, secret first, then message.

The secret is always checked against the universe: each of its symbols is
used as a shift amount, and a symbol with no position has no shift. The
message is only checked symbol-by-symbol in strict mode; otherwise unknown
symbols are left for the transform to pass through.

Both checks fail fast on the first offending symbol, scanning left to right.
"""

from .alphabets import CharacterUniverse
from .errors import (
    EmptyMessage,
    EmptySecret,
    IllegalMessageCharacter,
    IllegalSecretCharacter,
    MessageTypeError,
    SecretTypeError,
)


def validate_secret(secret, universe: CharacterUniverse) -> None:
    if secret is None or (isinstance(secret, str) and not secret):
        raise EmptySecret()
    if not isinstance(secret, str):
        raise SecretTypeError()
    for ch in secret:
        if ch not in universe:
            raise IllegalSecretCharacter(ch, universe.symbols)


def validate_message(message, universe: CharacterUniverse,
                     strict: bool = False) -> None:
    if message is None or (isinstance(message, str) and not message):
        raise EmptyMessage()
    if not isinstance(message, str):
        raise MessageTypeError()
    if not strict:
        return
    for ch in message:
        if ch not in universe:
            raise IllegalMessageCharacter(ch, universe.symbols)
