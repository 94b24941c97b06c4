"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

SOURCE_LANGUAGE = "javascript"

# ── emitted Go names ─────────────────────────────────────────────

OBJECT_TYPE = "Object"
GLOBAL_OBJECT = "global"
STRING_CONSTRUCTOR = "JSString"
NUMBER_CONSTRUCTOR = "JSNumber"

# ── emitted Go templates ─────────────────────────────────────────

LINE_MARKER_TEMPLATE = "// line {line}: {text}"
VAR_DECL_TEMPLATE = "var {name} " + OBJECT_TYPE
UNUSED_SUPPRESS_TEMPLATE = "_ = {name}"
GET_PROPERTY_TEMPLATE = GLOBAL_OBJECT + '.GetProperty("{name}")'
DEFINE_PROPERTY_TEMPLATE = GLOBAL_OBJECT + '.DefineProperty("{name}", {value})'
ARGS_OPEN = "([]" + OBJECT_TYPE + "{"
ARGS_CLOSE = "})"
ARGS_SEPARATOR = ", "

NUMBER_FORMAT = "{:f}"

NUMBERED_LINE_TEMPLATE = "{number:4d}  {text}"

# ── default builtins: object name → property name → Go symbol ───

DEFAULT_BUILTINS: dict[str, dict[str, str]] = {
    "console": {
        "log": "ConsoleLog",
    },
}

DEMO_SOURCE = """\
var greeting = "hello";
var answer = 40 + 2;
console.log(greeting, answer);
"""

# ── Go lexical rules ─────────────────────────────────────────────

GO_KEYWORDS: frozenset[str] = frozenset(
    {
        "break", "case", "chan", "const", "continue", "default", "defer",
        "else", "fallthrough", "for", "func", "go", "goto", "if", "import",
        "interface", "map", "package", "range", "return", "select", "struct",
        "switch", "type", "var",
    }
)

# names the generated code already refers to
RESERVED_NAMES: frozenset[str] = frozenset(
    {GLOBAL_OBJECT, OBJECT_TYPE, STRING_CONSTRUCTOR, NUMBER_CONSTRUCTOR}
)

# escape letters with the same meaning in JavaScript and Go strings
SHARED_ESCAPES = frozenset("bfnrtv\\\"")
