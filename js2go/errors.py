"""Compile failures and their structured diagnostic form."""

from __future__ import annotations

from pydantic import BaseModel

from .source import NO_SOURCE_LOCATION, SourceLocation


class Diagnostic(BaseModel):
    """A compile failure as data, for callers that keep going."""

    kind: str
    message: str
    location: SourceLocation = NO_SOURCE_LOCATION

    def __str__(self) -> str:
        if self.location.is_unknown():
            return f"error: {self.message}"
        return (
            f"{self.location.start_line}:{self.location.start_col + 1}: "
            f"error: {self.message}"
        )


class CompileError(Exception):
    """Base class for every failure raised while compiling a program."""

    def __init__(self, message: str, location: SourceLocation = NO_SOURCE_LOCATION):
        super().__init__(message)
        self.message = message
        self.location = location

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(
            kind=type(self).__name__,
            message=self.message,
            location=self.location,
        )


class UnsupportedConstructError(CompileError):
    """Raised for any node kind or form the compiler does not translate."""

    def __init__(
        self,
        construct: str,
        kind: str,
        location: SourceLocation = NO_SOURCE_LOCATION,
    ):
        super().__init__(f"unsupported {construct} type {kind}", location)
        self.construct = construct
        self.kind = kind


class ParseError(CompileError):
    """Raised when tree-sitter reports syntax errors in the source."""

    pass
