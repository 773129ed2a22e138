"""
Datastar attribute exceptions.

All errors raised by the attribute builders are caller contract violations:
they surface immediately and are never retried.
"""


class DatastarError(Exception):
    """Base exception for all attribute building errors."""

    pass


class OddPairsError(DatastarError, ValueError):
    """A key/value sequence with a key that has no value."""

    def __init__(self, message: str, dangling_key: str | None = None):
        super().__init__(message)
        self.dangling_key = dangling_key


class ModifierValueError(DatastarError, ValueError):
    """Numeric modifier input outside its valid range."""

    pass


class SignalsEncodingError(DatastarError, TypeError):
    """A signal value that cannot be encoded as JSON."""

    pass
