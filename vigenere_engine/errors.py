"""
Error taxonomy.

Two families: ConfigError (raised while building a cipher) and
ValidationError (raised by encode/decode before any output is produced).
Leaf classes also subclass TypeError, which is what callers of the
options-object interface have always caught.
"""

from typing import Iterable


class VigenereError(Exception):
    """Base class for every error this package raises."""


class ConfigError(VigenereError):
    pass


class ValidationError(VigenereError):
    pass


# ── construction ─────────────────────────────────────────────────────────────

class InvalidType(ConfigError, TypeError):
    def __init__(self, kinds: Iterable[str]):
        self.kinds = list(kinds)
        super().__init__(
            "Invalid type provided. Available options are: "
            + ", ".join(self.kinds) + ";"
        )


class MissingCharacters(ConfigError, TypeError):
    def __init__(self):
        super().__init__(
            "Characters must be specified when using custom character type."
        )


class InvalidCharacterType(ConfigError, TypeError):
    def __init__(self):
        super().__init__("Custom characters must be a non-empty string.")


class UniverseMismatch(ConfigError, TypeError):
    def __init__(self, kind: str, universe: str):
        self.kind     = kind
        self.universe = universe
        super().__init__(
            f"Universe '{universe}' does not match the '{kind}' character type."
        )


# ── per call ─────────────────────────────────────────────────────────────────

class EmptySecret(ValidationError, TypeError):
    def __init__(self):
        super().__init__("Secret must be specified.")


class SecretTypeError(ValidationError, TypeError):
    def __init__(self):
        super().__init__("Secret key characters must be string type.")


class IllegalSecretCharacter(ValidationError, TypeError):
    def __init__(self, character: str, universe: str):
        self.character = character
        self.universe  = universe
        super().__init__(
            f"Secret characters must contains only values from "
            f"'{universe}'. ['{character}'] not allowed!"
        )


class EmptyMessage(ValidationError, TypeError):
    def __init__(self):
        super().__init__("Message must be specified.")


class MessageTypeError(ValidationError, TypeError):
    def __init__(self):
        super().__init__("Message must be a string.")


class IllegalMessageCharacter(ValidationError, TypeError):
    def __init__(self, character: str, universe: str):
        self.character = character
        self.universe  = universe
        super().__init__(
            f"Message characters must contains only values from "
            f"'{universe}'. ['{character}'] not allowed in strict mode!"
        )
