"""Binding resolution — direct references vs dynamic global lookups."""

from __future__ import annotations

import logging

from .runtime import Context, ValueKind

logger = logging.getLogger(__name__)


class BindingResolver:
    """Tracks the names declared so far and resolves built-in functions.

    Two separate namespaces are consulted:

    * the binding table, holding every name the program has declared up to
      the current point; the whole program shares one flat namespace and a
      name is never removed once added;
    * the runtime context's global object, pre-seeded with built-ins and used
      only to decide whether ``obj.prop`` names a known Go function.
    """

    def __init__(self, ctx: Context):
        self._ctx = ctx
        self._declared: set[str] = set()

    @property
    def declared(self) -> frozenset[str]:
        return frozenset(self._declared)

    def define(self, name: str):
        if name not in self._declared:
            logger.debug("Binding %s", name)
        self._declared.add(name)

    def is_defined(self, name: str) -> bool:
        return name in self._declared

    def builtin_func(self, obj_name: str, prop_name: str) -> str:
        """Return the Go symbol for ``obj_name.prop_name``, or ``""``."""
        if self.is_defined(obj_name):
            return ""
        obj = self._ctx.global_object.get_property(obj_name)
        if obj is None or obj.kind != ValueKind.OBJECT:
            return ""
        prop = obj.get_property(prop_name)
        if prop is None or prop.kind != ValueKind.FUNCTION:
            return ""
        return prop.func_name
