"""js2go — one-pass JavaScript to Go source compiler."""

from .api import (  # noqa: F401
    compile_source,
    compile_tree,
    dump_go,
    try_compile,
)
from .compile_types import CompileResult, CompilerConfig  # noqa: F401
from .errors import (  # noqa: F401
    CompileError,
    ParseError,
    UnsupportedConstructError,
)
from .runtime import BuiltinManifest, load_manifest  # noqa: F401
