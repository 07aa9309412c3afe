"""Command line entry: build a tree from prefix text and record the results."""

from __future__ import annotations

import argparse

from exprtree.result import Error, Result
from exprtree.serializer import DEFAULT_OUTPUT, Serializer
from exprtree.tree import Tree

DEFAULT_EXPRESSION = "+ a a+ a 1"


def divide(dividend: float, divisor: float) -> Result[float]:
    """Divide, failing with an error instead of dividing by zero."""
    if divisor == 0:
        return Result.fail(Error("cannot divide by zero"))
    return Result.ok(dividend / divisor)


def create_tree(text: str) -> Result[Tree]:
    """Build a tree from ``text``, or collect the errors met while building it."""
    tree = Tree()
    outcome = tree.checked_enter(text)
    if outcome.is_success():
        return Result.ok(tree)
    return Result.fail(outcome.errors())


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="exprtree",
        description="Build an expression tree and write the results to a file.",
    )
    parser.add_argument(
        "expression",
        nargs="?",
        default=DEFAULT_EXPRESSION,
        help="expression in prefix notation",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help="file the results are written to",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    first = divide(4, 0)
    second = divide(3, 1)
    first = second
    second = divide(4, 0)

    tree_result = create_tree(args.expression)

    serializer = Serializer(args.output)
    serializer.save(tree_result)
    serializer.save(first)
    serializer.save(second)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())