"""Tests for the compile-time runtime object model and builtin manifests."""

import json

import pytest
from pydantic import ValidationError

from js2go.runtime import (
    BuiltinManifest,
    Context,
    JSFunction,
    JSNumber,
    JSObject,
    JSString,
    ValueKind,
    load_manifest,
    new_default_context,
)


class TestValues:
    def test_kinds(self):
        assert JSObject().kind == ValueKind.OBJECT
        assert JSFunction(func_name="F").kind == ValueKind.FUNCTION
        assert JSString("s").kind == ValueKind.STRING
        assert JSNumber(1.0).kind == ValueKind.NUMBER

    def test_define_and_get_property(self):
        obj = JSObject()
        obj.define_property("n", JSNumber(2.0))
        assert obj.get_property("n") == JSNumber(2.0)

    def test_missing_property(self):
        assert JSObject().get_property("nope") is None

    def test_define_overwrites(self):
        obj = JSObject()
        obj.define_property("n", JSNumber(1.0))
        obj.define_property("n", JSString("s"))
        assert obj.get_property("n").kind == ValueKind.STRING


class TestContext:
    def test_default_context_has_console_log(self):
        ctx = new_default_context()
        console = ctx.global_object.get_property("console")
        assert console.kind == ValueKind.OBJECT
        log = console.get_property("log")
        assert log.kind == ValueKind.FUNCTION
        assert log.func_name == "ConsoleLog"

    def test_from_manifest(self):
        manifest = BuiltinManifest(objects={"Math": {"max": "MathMax", "min": "MathMin"}})
        ctx = Context.from_manifest(manifest)
        math_obj = ctx.global_object.get_property("Math")
        assert math_obj.get_property("min").func_name == "MathMin"
        assert ctx.global_object.get_property("console") is None

    def test_contexts_are_independent(self):
        a = new_default_context()
        b = new_default_context()
        a.global_object.define_property("x", JSNumber(1.0))
        assert b.global_object.get_property("x") is None


class TestLoadManifest:
    def test_wrapped_form(self, tmp_path):
        path = tmp_path / "builtins.json"
        path.write_text(json.dumps({"objects": {"console": {"error": "ConsoleError"}}}))
        manifest = load_manifest(path)
        assert manifest.objects == {"console": {"error": "ConsoleError"}}

    def test_bare_mapping(self, tmp_path):
        path = tmp_path / "builtins.json"
        path.write_text(json.dumps({"Math": {"abs": "MathAbs"}}))
        assert load_manifest(path).objects == {"Math": {"abs": "MathAbs"}}

    def test_invalid_manifest(self, tmp_path):
        path = tmp_path / "builtins.json"
        path.write_text(json.dumps({"objects": {"Math": ["abs"]}}))
        with pytest.raises(ValidationError):
            load_manifest(path)
