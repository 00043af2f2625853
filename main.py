# main.py
from __future__ import annotations

import argparse
import sys
from contextlib import nullcontext
from typing import ContextManager, TextIO

from config_loader import process, read_config
from debug import COMPONENTS, Debug
from errors import EnigmaError, InputError

debug = Debug()


# ────────────────────────────────────────────────────────────────────────
#  1. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="enigma",
        description="Encrypt or decrypt messages with a configurable rotor machine",
    )
    p.add_argument("config", metavar="CONFIG", help="Machine configuration file.")
    p.add_argument("input", metavar="INPUT", nargs="?", help="Message file. Default: standard input.")
    p.add_argument("output", metavar="OUTPUT", nargs="?", help="Output file. Default: standard output.")
    p.add_argument(
        "--debug", dest="debug", metavar="COMPONENT", action="append", default=[],
        choices=COMPONENTS, help=f"Log one component at DEBUG level (repeatable): {', '.join(COMPONENTS)}",
    )
    p.add_argument("--log-file", dest="log_file", metavar="FILE", help="Also write debug log to FILE.")
    return p


def _open_input(path: str | None) -> ContextManager[TextIO]:
    if path is None:
        return nullcontext(sys.stdin)
    try:
        return open(path, "r", encoding="utf-8")
    except OSError:
        raise InputError(f"could not open {path}") from None


def _open_output(path: str | None) -> ContextManager[TextIO]:
    if path is None:
        return nullcontext(sys.stdout)
    try:
        return open(path, "w", encoding="utf-8")
    except OSError:
        raise InputError(f"could not open {path}") from None


# ────────────────────────────────────────────────────────────────────────
#  2. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Run the machine over INPUT; return the process exit code."""
    p = _parser()
    args = p.parse_args(argv)

    if args.log_file and not args.debug:
        p.error("--log-file needs at least one --debug COMPONENT")
    if args.debug:
        Debug.configure(log_to=args.log_file)
        debug.enable(*args.debug)

    try:
        machine = read_config(args.config)
        with _open_input(args.input) as src, _open_output(args.output) as dst:
            process(machine, src, dst)
    except EnigmaError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
