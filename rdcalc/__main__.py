"""
Command-line front end.

    python -m rdcalc "3 + 5 * (2 - 8)"
    python -m rdcalc                     # prompts for an expression
    python -m rdcalc --batch exprs.txt   # one expression per line
"""

import argparse
import logging
import sys

import pandas as pd

from rdcalc.errors import CalcError
from rdcalc.executors import evaluate, evaluate_series

logger = logging.getLogger(__name__)

PROMPT = "Enter an expression: "


def format_result(value: float) -> str:
    """Render integral values without a trailing '.0'."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _run_batch(path: str) -> int:
    with open(path, encoding="utf-8") as f:
        lines = [line.rstrip("\n") for line in f if line.strip()]
    logger.debug("read %d expressions from %s", len(lines), path)

    table = evaluate_series(lines)
    with pd.option_context("display.max_rows", None, "display.width", None):
        print(table[["expression", "result", "error"]].to_string(index=False))

    return 1 if table["error"].notna().any() else 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="rdcalc", description="Evaluate an arithmetic expression.")
    ap.add_argument("expression", nargs="*", help="expression words, joined with spaces")
    ap.add_argument("--batch", metavar="FILE", help="evaluate one expression per line of FILE")
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    if args.batch:
        return _run_batch(args.batch)

    if args.expression:
        expression = " ".join(args.expression)
    else:
        try:
            expression = input(PROMPT)
        except EOFError:
            expression = ""

    try:
        result = evaluate(expression)
    except CalcError as e:
        print(e, file=sys.stderr)
        return 1

    print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
