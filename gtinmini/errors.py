# gtinmini/errors.py


class GtinError(ValueError):
    """Base class for every GTIN parsing/validation failure."""


class InvalidLength(GtinError):
    def __init__(self, length: int) -> None:
        super().__init__(f"invalid length: {length} (expected 8, 12, 13 or 14)")
        self.length = length


class InvalidDigit(GtinError):
    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"invalid digit {char!r} at position {position}")
        self.char = char
        self.position = position


class CheckDigitMismatch(GtinError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"invalid check digit: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class RestrictedPrefix(GtinError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"GS1 {reason}")
        self.reason = reason
