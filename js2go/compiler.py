"""Compiler — one-pass tree-sitter JavaScript AST → Go source translation."""

from __future__ import annotations

import logging
import math
from typing import Callable

from . import constants
from .bindings import BindingResolver
from .code import Code
from .compile_types import CompilerConfig
from .errors import UnsupportedConstructError
from .runtime import Context
from .source import node_text, one_line, source_loc

logger = logging.getLogger(__name__)


class Compiler:
    """Translates a JavaScript program tree into Go text in a single walk.

    Every node is visited once, depth-first and left to right, and its Go
    text is appended to the output buffer as soon as it is visited.  Node
    kinds missing from ``_STMT_DISPATCH`` / ``_EXPR_DISPATCH`` abort the
    compile with :class:`UnsupportedConstructError`.
    """

    COMMENT_TYPES: frozenset[str] = frozenset({"comment", "hash_bang_line"})

    DECLARATOR_TYPE: str = "variable_declarator"

    def __init__(self, config: CompilerConfig | None = None):
        self._config = config or CompilerConfig()
        self._code = Code()
        self._source: bytes = b""
        self._bindings = BindingResolver(Context.from_manifest(self._config.manifest))
        self._STMT_DISPATCH: dict[str, Callable] = {
            "expression_statement": self._compile_expression_statement,
            "variable_declaration": self._compile_variable_declaration,
            "lexical_declaration": self._compile_variable_declaration,
        }
        self._EXPR_DISPATCH: dict[str, Callable] = {
            "call_expression": self._compile_call,
            "assignment_expression": self._compile_assignment,
            "augmented_assignment_expression": self._compile_assignment,
            "binary_expression": self._compile_binary,
            "parenthesized_expression": self._compile_paren,
            "member_expression": self._compile_member,
            "identifier": self._compile_identifier,
            "string": self._compile_string,
            "number": self._compile_number,
        }

    @property
    def bindings(self) -> BindingResolver:
        return self._bindings

    # ── helpers ──────────────────────────────────────────────────

    def _node_text(self, node) -> str:
        return node_text(self._source, node)

    def _unsupported(self, construct: str, node) -> UnsupportedConstructError:
        return UnsupportedConstructError(construct, node.type, source_loc(node))

    def _operator(self, node) -> str:
        op_node = node.child_by_field_name("operator")
        if op_node is None:
            op_node = next(c for c in node.children if not c.is_named)
        return self._node_text(op_node)

    # ── entry point ──────────────────────────────────────────────

    def compile(self, tree, source: bytes) -> Code:
        return self.compile_program(tree.root_node, source)

    def compile_program(self, root, source: bytes) -> Code:
        """Walk the top-level statements of *root* and return the Go text."""
        self._code = Code()
        self._source = source
        self._bindings = BindingResolver(Context.from_manifest(self._config.manifest))
        count = 0
        for stmt in root.named_children:
            if stmt.type in self.COMMENT_TYPES:
                continue
            if self._config.line_markers:
                self._write_line_marker(stmt)
            self._compile_statement(stmt)
            self._code.write_line()
            count += 1
        logger.info(
            "Compiled %d statements (%d bindings)",
            count,
            len(self._bindings.declared),
        )
        return self._code

    def _write_line_marker(self, node):
        self._code.write_line(
            constants.LINE_MARKER_TEMPLATE.format(
                line=node.start_point[0] + 1,
                text=one_line(self._node_text(node)),
            )
        )

    # ── dispatchers ──────────────────────────────────────────────

    def _compile_statement(self, node):
        handler = self._STMT_DISPATCH.get(node.type)
        if handler is None:
            raise self._unsupported("statement", node)
        logger.debug("Statement %s at line %d", node.type, node.start_point[0] + 1)
        handler(node)

    def _compile_expression(self, node):
        handler = self._EXPR_DISPATCH.get(node.type)
        if handler is None:
            raise self._unsupported("expression", node)
        handler(node)

    # ── statements ───────────────────────────────────────────────

    def _compile_expression_statement(self, node):
        expr = next(c for c in node.named_children if c.type not in self.COMMENT_TYPES)
        self._compile_expression(expr)
        self._code.write_line()

    def _compile_variable_declaration(self, node):
        """Lower var / let / const; the declaration kind is not distinguished."""
        for child in node.named_children:
            if child.type == self.DECLARATOR_TYPE:
                self._compile_variable_declarator(child)
            elif child.type not in self.COMMENT_TYPES:
                raise self._unsupported("declaration", child)

    def _compile_variable_declarator(self, node):
        name_node = node.child_by_field_name("name")
        if name_node.type != "identifier":
            raise self._unsupported("declarator", name_node)
        name = self._node_text(name_node)
        if not is_go_identifier(name):
            raise UnsupportedConstructError(
                "declarator", f"identifier {name!r}", source_loc(name_node)
            )
        value_node = node.child_by_field_name("value")

        self._code.write_line(constants.VAR_DECL_TEMPLATE.format(name=name))
        self._code.write_line(constants.UNUSED_SUPPRESS_TEMPLATE.format(name=name))
        if value_node is not None:
            self._code.write(f"{name} = ")
            self._compile_expression(value_node)
            self._code.write_line()
        self._code.write_line(
            constants.DEFINE_PROPERTY_TEMPLATE.format(name=name, value=name)
        )
        self._bindings.define(name)

    # ── expressions ──────────────────────────────────────────────

    def _compile_call(self, node):
        func_node = node.child_by_field_name("function")
        args_node = node.child_by_field_name("arguments")
        if args_node is None or args_node.type != "arguments":
            raise self._unsupported("call", args_node or node)
        if any(c.type == "optional_chain" for c in node.children):
            raise self._unsupported("call", node)

        self._compile_expression(func_node)
        self._code.write(constants.ARGS_OPEN)
        args = [c for c in args_node.named_children if c.type not in self.COMMENT_TYPES]
        for i, arg in enumerate(args):
            if i:
                self._code.write(constants.ARGS_SEPARATOR)
            self._compile_expression(arg)
        self._code.write(constants.ARGS_CLOSE)

    def _compile_member(self, node):
        obj_node = node.child_by_field_name("object")
        prop_node = node.child_by_field_name("property")
        if prop_node.type != "property_identifier" or any(
            c.type == "optional_chain" for c in node.children
        ):
            raise self._unsupported("member expression", node)

        builtin = self._builtin_func(obj_node, prop_node)
        if builtin:
            self._code.write(builtin)
            return
        self._compile_expression(obj_node)
        self._code.write(".")
        self._code.write(self._node_text(prop_node))

    def _builtin_func(self, obj_node, prop_node) -> str:
        if obj_node.type != "identifier":
            return ""
        obj_name = self._node_text(obj_node)
        prop_name = self._node_text(prop_node)
        func_name = self._bindings.builtin_func(obj_name, prop_name)
        if func_name:
            logger.debug("Builtin %s.%s -> %s", obj_name, prop_name, func_name)
        return func_name

    def _compile_assignment(self, node):
        self._compile_expression(node.child_by_field_name("left"))
        self._code.write(f" {self._operator(node)} ")
        self._compile_expression(node.child_by_field_name("right"))

    def _compile_binary(self, node):
        self._compile_expression(node.child_by_field_name("left"))
        self._code.write(f" {self._operator(node)} ")
        self._compile_expression(node.child_by_field_name("right"))

    def _compile_paren(self, node):
        # operators pass through verbatim, so the grouping must survive
        inner = next(c for c in node.named_children if c.type not in self.COMMENT_TYPES)
        self._code.write("(")
        self._compile_expression(inner)
        self._code.write(")")

    def _compile_identifier(self, node):
        name = self._node_text(node)
        if self._bindings.is_defined(name):
            self._code.write(name)
        else:
            self._code.write(constants.GET_PROPERTY_TEMPLATE.format(name=name))

    def _compile_string(self, node):
        try:
            body = _requote(self._node_text(node)[1:-1])
        except ValueError as e:
            raise self._unsupported("string literal", node) from e
        self._code.write(f'{constants.STRING_CONSTRUCTOR}("{body}")')

    def _compile_number(self, node):
        text = self._node_text(node)
        value = parse_number(text)
        if value is None:
            raise self._unsupported("numeric literal", node)
        self._code.write(f"{constants.NUMBER_CONSTRUCTOR}({format_number(value)})")


def is_go_identifier(name: str) -> bool:
    """True if *name* can be declared as a Go local without clashing."""
    return (
        name.isidentifier()
        and name != "_"
        and name not in constants.GO_KEYWORDS
        and name not in constants.RESERVED_NAMES
    )


def _unicode_escape(code_point: int) -> str:
    if 0xD800 <= code_point <= 0xDFFF:
        raise ValueError(f"lone surrogate U+{code_point:04X}")
    if code_point <= 0xFFFF:
        return f"\\u{code_point:04x}"
    return f"\\U{code_point:08x}"


def _requote(body: str) -> str:
    """Rewrite a literal body so it is valid inside a double-quoted Go string.

    Escapes Go shares with JavaScript are kept as written.  The rest are
    translated: ``\\x``, ``\\u{...}``, ``\\0`` and legacy octal become
    ``\\u``/``\\U`` code points, line continuations are dropped, and identity
    escapes such as ``\\'`` or ``\\d`` become the bare character.  Raises
    ``ValueError`` for escapes Go cannot represent.
    """
    out: list[str] = []
    i = 0
    n = len(body)
    while i < n:
        ch = body[i]
        if ch == '"':
            out.append('\\"')
            i += 1
            continue
        if ch != "\\" or i + 1 >= n:
            out.append(ch)
            i += 1
            continue
        nxt = body[i + 1]
        if nxt in constants.SHARED_ESCAPES:
            out.append(ch + nxt)
            i += 2
        elif nxt == "x":
            out.append(_unicode_escape(int(body[i + 2 : i + 4], 16)))
            i += 4
        elif nxt == "u" and body[i + 2 : i + 3] == "{":
            end = body.index("}", i)
            out.append(_unicode_escape(int(body[i + 3 : end], 16)))
            i = end + 1
        elif nxt == "u":
            out.append(_unicode_escape(int(body[i + 2 : i + 6], 16)))
            i += 6
        elif nxt in "01234567":
            j = i + 1
            while j < n and j < i + 4 and body[j] in "01234567":
                j += 1
            # \400 is \40 followed by "0"
            if int(body[i + 1 : j], 8) > 0o377:
                j -= 1
            out.append(_unicode_escape(int(body[i + 1 : j], 8)))
            i = j
        elif nxt == "\r":
            i += 3 if body[i + 2 : i + 3] == "\n" else 2
        elif nxt in "\n\u2028\u2029":
            i += 2
        else:
            out.append(nxt)
            i += 2
    return "".join(out)


def parse_number(text: str) -> float | None:
    """Decode a JavaScript numeric literal; None for BigInt or non-finite values."""
    cleaned = text.replace("_", "")
    lowered = cleaned.lower()
    if lowered.endswith("n"):
        return None
    try:
        if lowered.startswith(("0x", "0o", "0b")):
            value = float(int(cleaned, 0))
        elif len(cleaned) > 1 and cleaned[0] == "0" and cleaned.isdigit():
            # legacy octal such as 017; 089 stays decimal
            octal = set(cleaned) <= set("01234567")
            value = float(int(cleaned, 8)) if octal else float(cleaned)
        else:
            value = float(cleaned)
    except OverflowError:
        return None
    return value if math.isfinite(value) else None


def format_number(value: float) -> str:
    """Six-decimal fixed rendering, or the shortest exact form if that loses digits."""
    fixed = constants.NUMBER_FORMAT.format(value)
    if float(fixed) == value:
        return fixed
    return repr(value)
