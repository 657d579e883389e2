"""Command-line driver: run a script, or start a read-eval-print loop."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Optional, Sequence, TextIO

from schemelet.config import Config, check_log_level
from schemelet.errors import IncompleteInputError, SchemeError
from schemelet.interpreter import Interpreter
from schemelet.printer import to_string
from schemelet.reader.parser import lex, read_all, TokenStream
from schemelet.types.nil import NilType

logger = logging.getLogger(__name__)

PROMPT = "> "
CONTINUATION_PROMPT = ". "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schemelet",
        description="Evaluate schemelet programs.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="program to run ('-' reads standard input); omit for a REPL",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        help="maximum number of active frames (default: SCHEMELET_MAX_CALL_DEPTH or 128)",
    )
    parser.add_argument(
        "--log-level",
        help="logging level (default: SCHEMELET_LOG_LEVEL or WARNING)",
    )
    return parser


def run_source(interp: Interpreter, source: str, stderr: TextIO) -> int:
    """Evaluate `source` top to bottom; the first error ends the run."""
    try:
        for expr in TokenStream(lex(source)).parse_all():
            interp.eval_expr(expr)
    except SchemeError as e:
        sys.stdout.flush()
        print(f"error: {e.diagnostic()}", file=stderr)
        return 1
    return 0


def repl(interp: Interpreter, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    """Read lines until EOF, printing each value that is not the empty value.

    Lines are buffered until they hold only complete expressions; an open
    list or string continues on the next line.
    """
    pending = ""
    incomplete: Optional[IncompleteInputError] = None
    while True:
        stdout.write(CONTINUATION_PROMPT if pending else PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            if pending:
                stderr.write(f"error: {incomplete.diagnostic()}\n")
            return 0
        pending += line
        try:
            exprs = read_all(pending)
        except IncompleteInputError as e:
            incomplete = e
            continue
        except SchemeError as e:
            pending = ""
            stderr.write(f"error: {e.diagnostic()}\n")
            continue
        pending = ""
        try:
            for expr in exprs:
                value = interp.eval_expr(expr)
                if not isinstance(value, NilType):
                    stdout.write(to_string(value) + "\n")
        except SchemeError as e:
            # The session survives; the failed expression's effects up to the
            # error remain.
            stderr.write(f"error: {e.diagnostic()}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = Config.from_env()
        if args.max_depth is not None:
            if args.max_depth <= 0:
                raise ValueError(f"--max-depth must be positive, got {args.max_depth}")
            config = replace(config, max_call_depth=args.max_depth)
        if args.log_level is not None:
            config = replace(config, log_level=check_log_level(args.log_level, "--log-level"))
        logging.basicConfig(
            level=config.log_level,
            format="%(levelname)s %(name)s: %(message)s",
        )
    except ValueError as e:
        print(f"schemelet: {e}", file=sys.stderr)
        return 2

    interp = Interpreter(config)
    logger.debug("starting with %s", config)

    if args.file is None:
        return repl(interp, sys.stdin, sys.stdout, sys.stderr)
    if args.file == "-":
        source = sys.stdin.read()
    else:
        try:
            with open(args.file, encoding="utf-8") as f:
                source = f.read()
        except OSError as e:
            print(f"schemelet: cannot read {args.file}: {e.strerror}", file=sys.stderr)
            return 2
    return run_source(interp, source, sys.stderr)
