"""Read-eval-print driver.

Reads expressions from a file or standard input, evaluates each against one
environment and prints the result. Errors raised while reading or evaluating
a single expression are reported and the loop moves on to the next one.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from mclisp import __version__
from mclisp.builtin.env_builtin import init_env
from mclisp.config import get_prompt
from mclisp.errors import McLispError
from mclisp.evaluation.evaluator import evaluate
from mclisp.log import configure_logging, get_logger
from mclisp.printer import lisp_print
from mclisp.reader.parser import Reader
from mclisp.types.environment import Environment
from mclisp.types.eof import EOF

logger = get_logger("repl")


def run(
    stream: TextIO,
    env: Optional[Environment] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
    prompt: Optional[str] = None,
) -> int:
    """Run the loop until the reader reports end of input; returns the error count."""
    env = env if env is not None else init_env()
    out = out or sys.stdout
    err = err or sys.stderr
    prompt = get_prompt() if prompt is None else prompt

    reader = Reader(stream)
    errors = 0
    while True:
        out.write(prompt)
        out.flush()
        try:
            expr = reader.read()
            if expr is EOF:
                break
            result = evaluate(expr, env)
        except McLispError as ex:
            errors += 1
            logger.info("line %d: %s", reader.line, ex)
            if prompt:
                out.write("\n")
            err.write(f"error: {ex}\n")
            err.flush()
            continue
        except RecursionError:
            errors += 1
            logger.info("line %d: recursion too deep", reader.line)
            if prompt:
                out.write("\n")
            err.write("error: recursion too deep\n")
            err.flush()
            continue
        lisp_print(result, out)
        out.write("\n")

    if prompt:
        out.write("\n")
    out.flush()
    return errors


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mclisp", description="A minimal McCarthy-style LISP interpreter."
    )
    parser.add_argument("file", nargs="?", help="source file to run (default: standard input)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    parser.add_argument("--no-prompt", action="store_true", help="do not print the prompt")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else None)
    prompt = "" if args.no_prompt else None

    if args.file is None:
        run(sys.stdin, prompt=prompt)
        return 0

    try:
        stream = open(args.file, "r", encoding="utf-8")
    except OSError as ex:
        logger.error("cannot open %s: %s", args.file, ex)
        sys.stderr.write(f"mclisp: cannot open {args.file}: {ex.strerror}\n")
        return 1
    with stream:
        run(stream, prompt=prompt)
    return 0
