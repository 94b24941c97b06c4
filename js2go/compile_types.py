"""Compile pipeline data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass, field

from .code import Code
from .errors import Diagnostic
from .runtime import BuiltinManifest


@dataclass(frozen=True)
class CompilerConfig:
    """Groups compiler configuration."""

    line_markers: bool = True
    manifest: BuiltinManifest = field(default_factory=BuiltinManifest.default)


@dataclass
class CompileResult:
    """Outcome of compiling one program: the Go code or a diagnostic."""

    code: Code | None = None
    diagnostic: Diagnostic | None = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None
