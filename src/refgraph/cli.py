"""
refgraph command-line interface.

Commands:
    encode  Convert a plain JSON document into a table file.
    decode  Convert a table file back into a plain JSON document.
    check   Validate every entry and index of a table file.

Usage:
    refgraph encode --in data.json --out table.json
    refgraph decode --in table.json
    refgraph check --in table.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections import Counter
from pathlib import Path

from refgraph.core.errors import CodecError
from refgraph.core.table import entry_kind, validate_table
from refgraph.io.codec import GraphCodec
from refgraph.io.config import CodecSettings
from refgraph.io.errors import IoError
from refgraph.io.read import read_table
from refgraph.io.write import write_table, write_text


def _parser(prog: str, description: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=prog, description=description)
    p.add_argument("--in", dest="src", type=str, required=True, help="Input file path.")
    p.add_argument("--config", type=str, default=None, help="Explicit TOML config path.")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return p


def _setup(args: argparse.Namespace) -> GraphCodec:
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(name)s: %(message)s")
    return GraphCodec(CodecSettings.load(args.config))


def _emit(text: str, out: str | None, settings: CodecSettings) -> None:
    if out:
        write_text(out, text + "\n", settings)
        print(f"[INFO] Wrote {out}")
    else:
        print(text)


def _cmd_encode(argv: list[str]) -> int:
    p = _parser("refgraph encode", "Encode a JSON document into a flat table.")
    p.add_argument("--out", type=str, default="", help="Table output path (stdout if omitted).")
    args = p.parse_args(argv)
    codec = _setup(args)

    try:
        document = json.loads(Path(args.src).read_text(encoding=codec.settings.encoding))
    except (OSError, ValueError) as exc:
        raise IoError(f"failed to read JSON document from {args.src!r}: {exc}") from exc
    table = codec.encode(document)
    if args.out:
        write_table(args.out, table, codec.settings)
        print(f"[INFO] Wrote {len(table)} entries to {args.out}")
    else:
        print(codec.settings.text_codec().encode(table))
    return 0


def _cmd_decode(argv: list[str]) -> int:
    p = _parser("refgraph decode", "Decode a table file into a JSON document.")
    p.add_argument("--out", type=str, default="", help="JSON output path (stdout if omitted).")
    args = p.parse_args(argv)
    codec = _setup(args)

    value = codec.load(args.src)
    try:
        text = json.dumps(
            value,
            indent=codec.settings.indent,
            ensure_ascii=codec.settings.ensure_ascii,
            allow_nan=codec.settings.allow_nan,
        )
    except ValueError as exc:
        # json refuses cyclic graphs; they only exist in table form.
        print(f"[ERROR] Decoded graph cannot be written as plain JSON: {exc}", file=sys.stderr)
        return 1
    _emit(text, args.out or None, codec.settings)
    return 0


def _cmd_check(argv: list[str]) -> int:
    p = _parser("refgraph check", "Validate a table file without decoding it.")
    args = p.parse_args(argv)
    codec = _setup(args)

    table = validate_table(read_table(args.src, codec.settings))
    kinds = Counter(entry_kind(i, e) for i, e in enumerate(table.entries))
    print(
        f"[INFO] OK: {len(table)} entries (root={table.root}, "
        f"sequences={kinds['sequence']}, records={kinds['record']}, scalars={kinds['scalar']})"
    )
    return 0


_COMMANDS = {
    "encode": _cmd_encode,
    "decode": _cmd_decode,
    "check": _cmd_check,
}


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="refgraph", description="Reference-preserving graph codec CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)
    for name in _COMMANDS:
        sub.add_parser(name)
    return p


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        build_argparser().print_help()
        return
    cmd, rest = argv[0], argv[1:]
    handler = _COMMANDS.get(cmd)
    if handler is None:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        raise SystemExit(2)
    try:
        code = handler(rest)
    except (CodecError, IoError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        code = 1
    raise SystemExit(code)


if __name__ == "__main__":
    main()
