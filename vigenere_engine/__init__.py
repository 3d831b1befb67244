"""
vigenere_engine
===============
Configurable Vigenère polyalphabetic substitution over a selectable
character universe.

    numbers · lowercase · uppercase · symbols · base64 (default)
    alphanumeric · ascii · custom

A keyed, reversible transform for obfuscation and puzzles. It offers no
confidentiality against anyone who tries.

License: Apache 2.0
"""

__version__  = "1.0.0"

from .alphabets  import AlphabetKind, CharacterUniverse, available_kinds
from .cipher     import CipherConfig, VigenereCipher, transform
from .validation import validate_message, validate_secret
from .errors     import (
    VigenereError,
    ConfigError,
    ValidationError,
    InvalidType,
    MissingCharacters,
    InvalidCharacterType,
    UniverseMismatch,
    EmptySecret,
    SecretTypeError,
    IllegalSecretCharacter,
    EmptyMessage,
    MessageTypeError,
    IllegalMessageCharacter,
)

__all__ = [
    "AlphabetKind",
    "CharacterUniverse",
    "available_kinds",
    "CipherConfig",
    "VigenereCipher",
    "transform",
    "validate_secret",
    "validate_message",
    "VigenereError",
    "ConfigError",
    "ValidationError",
    "InvalidType",
    "MissingCharacters",
    "InvalidCharacterType",
    "UniverseMismatch",
    "EmptySecret",
    "SecretTypeError",
    "IllegalSecretCharacter",
    "EmptyMessage",
    "MessageTypeError",
    "IllegalMessageCharacter",
]
