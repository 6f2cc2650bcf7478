from __future__ import annotations


class SemverError(Exception):
    """Base semcheck error."""


class InvalidVersionError(SemverError):
    def __init__(self, operand: str, value: str):
        super().__init__(f"{operand} `{value}` is invalid")
        self.operand = operand
        self.value = value


class MalformedCoreError(SemverError):
    def __init__(self, message: str, *, expected: str, got: int):
        super().__init__(message)
        self.expected = expected
        self.got = got


class NumericParseError(SemverError):
    def __init__(self, part: str, value: str, cause: Exception | None = None):
        super().__init__(f"{part} component `{value}` is not a number")
        self.part = part
        self.value = value
        self.cause = cause


class PatternCompileError(SemverError):
    """Version grammar failed to compile."""
