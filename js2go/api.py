"""Composable API functions for the js2go compile pipeline.

Each function corresponds to a CLI workflow but is callable
programmatically without argparse.
"""

from __future__ import annotations

import logging

from .code import Code
from .compile_types import CompileResult, CompilerConfig
from .compiler import Compiler
from .errors import CompileError
from .parser import Parser

logger = logging.getLogger(__name__)


def compile_tree(tree, source: bytes, config: CompilerConfig | None = None) -> Code:
    """Compile an already-parsed tree-sitter tree.

    Args:
        tree: A tree-sitter tree for the JavaScript program.
        source: The exact bytes the tree was parsed from.
        config: Compiler configuration; defaults to ``CompilerConfig()``.

    Returns:
        The populated Go output buffer.

    Raises:
        UnsupportedConstructError: If the program uses a construct outside
            the supported subset.
    """
    return Compiler(config).compile(tree, source)


def compile_source(source: str, config: CompilerConfig | None = None) -> Code:
    """Parse JavaScript source with tree-sitter and compile it to Go.

    Raises:
        ParseError: If the source has syntax errors.
        UnsupportedConstructError: If the program uses a construct outside
            the supported subset.
    """
    logger.info("Compiling source (%d bytes)", len(source.encode("utf-8")))
    tree = Parser().parse(source)
    return compile_tree(tree, source.encode("utf-8"), config)


def try_compile(source: str, config: CompilerConfig | None = None) -> CompileResult:
    """Like :func:`compile_source`, but report failures as a diagnostic."""
    try:
        return CompileResult(code=compile_source(source, config))
    except CompileError as e:
        logger.info("Compile failed: %s", e)
        return CompileResult(diagnostic=e.to_diagnostic())


def dump_go(
    source: str,
    config: CompilerConfig | None = None,
    numbered: bool = False,
) -> str:
    """Compile source and return the Go text, optionally line-numbered."""
    code = compile_source(source, config)
    return code.numbered() if numbered else str(code)
