"""Command-line entry point: compile JavaScript files to Go."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import constants
from .api import try_compile
from .compile_types import CompilerConfig
from .runtime import BuiltinManifest, load_manifest

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="js2go", description="Compile a JavaScript subset to Go source"
    )
    parser.add_argument("files", nargs="*", help="JavaScript files to compile")
    parser.add_argument(
        "--output", "-o", default=None, help="Write Go output here (single input only)"
    )
    parser.add_argument(
        "--manifest", "-m", default=None, help="JSON builtin manifest"
    )
    parser.add_argument(
        "--no-line-markers",
        action="store_true",
        help="Omit the '// line N' comment before each statement",
    )
    parser.add_argument(
        "--numbered", "-n", action="store_true", help="Prefix output lines with numbers"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if args.output and len(args.files) > 1:
        parser.error("--output requires exactly one input file")

    manifest = load_manifest(args.manifest) if args.manifest else BuiltinManifest.default()
    config = CompilerConfig(line_markers=not args.no_line_markers, manifest=manifest)

    if args.files:
        paths = args.files
    else:
        logger.info("No file provided. Using built-in demo")
        paths = [None]

    failed = 0
    outputs: list[str] = []
    for path in paths:
        label = path or "<demo>"
        try:
            source = (
                Path(path).read_text(encoding="utf-8") if path else constants.DEMO_SOURCE
            )
        except (OSError, UnicodeDecodeError) as e:
            failed += 1
            print(f"{label}: error: {e}", file=sys.stderr)
            continue
        result = try_compile(source, config)
        if not result.ok:
            failed += 1
            print(f"{label}:{result.diagnostic}", file=sys.stderr)
            continue
        text = result.code.numbered() + "\n" if args.numbered else str(result.code)
        outputs.append(text)

    if args.output:
        if outputs:
            Path(args.output).write_text(outputs[0], encoding="utf-8")
    else:
        sys.stdout.write("".join(outputs))

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
