"""Compile-time model of the Go runtime's dynamic object system.

The generated Go code runs against a runtime whose values are objects with
named properties.  The compiler only needs a small slice of that model: a
global object pre-seeded with the built-ins, so member accesses such as
``console.log`` can be resolved to the Go symbol implementing them.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pydantic import BaseModel

from . import constants

logger = logging.getLogger(__name__)


class ValueKind(str, Enum):
    OBJECT = "object"
    FUNCTION = "function"
    STRING = "string"
    NUMBER = "number"


class JSValue:
    kind: ValueKind


@dataclass
class JSObject(JSValue):
    properties: dict[str, JSValue] = field(default_factory=dict)

    kind = ValueKind.OBJECT

    def get_property(self, name: str) -> JSValue | None:
        return self.properties.get(name)

    def define_property(self, name: str, value: JSValue):
        self.properties[name] = value


@dataclass
class JSFunction(JSValue):
    """A runtime function; ``func_name`` is the Go symbol that implements it."""

    func_name: str

    kind = ValueKind.FUNCTION


@dataclass
class JSString(JSValue):
    value: str = ""

    kind = ValueKind.STRING


@dataclass
class JSNumber(JSValue):
    value: float = 0.0

    kind = ValueKind.NUMBER


class BuiltinManifest(BaseModel):
    """Object name → property name → Go symbol of the built-in function."""

    objects: dict[str, dict[str, str]] = {}

    @classmethod
    def default(cls) -> BuiltinManifest:
        return cls(objects=constants.DEFAULT_BUILTINS)


def load_manifest(path: str | Path) -> BuiltinManifest:
    """Read a builtin manifest from a JSON file.

    The file holds either ``{"objects": {...}}`` or the bare mapping.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if "objects" not in data:
        data = {"objects": data}
    manifest = BuiltinManifest.model_validate(data)
    logger.info(
        "Loaded builtin manifest %s (%d objects)", path, len(manifest.objects)
    )
    return manifest


@dataclass
class Context:
    global_object: JSObject = field(default_factory=JSObject)

    @classmethod
    def from_manifest(cls, manifest: BuiltinManifest) -> Context:
        ctx = cls()
        for obj_name, funcs in manifest.objects.items():
            obj = JSObject()
            for prop_name, func_name in funcs.items():
                obj.define_property(prop_name, JSFunction(func_name=func_name))
            ctx.global_object.define_property(obj_name, obj)
        return ctx


def new_default_context() -> Context:
    return Context.from_manifest(BuiltinManifest.default())
