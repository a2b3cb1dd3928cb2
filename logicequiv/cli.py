"""Compare two logical expressions by truth table."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

from logicequiv.expression import evaluate_postfix, to_postfix, truth_rows


@dataclass(frozen=True)
class Comparison:
    """Truth table of two expressions over their shared variables.

    Each row is ``(assignment, first_result, second_result)``.
    """

    first: str
    second: str
    variables: tuple[str, ...]
    rows: tuple[tuple[dict[str, bool], bool, bool], ...]

    def equivalent(self) -> bool:
        """Whether both expressions agree on every row."""
        return all(left == right for _, left, right in self.rows)


def compare(first: str, second: str) -> Comparison:
    """Build the truth table of two infix expressions."""
    postfix_first, variables = to_postfix(first)
    postfix_second, variables = to_postfix(second, variables)
    rows = tuple(
        (row, evaluate_postfix(postfix_first, row), evaluate_postfix(postfix_second, row))
        for row in truth_rows(variables)
    )
    return Comparison(first, second, variables, rows)


def _line(cells: list[str], last: str) -> str:
    widths = [8] + [5] * (len(cells) - 1)
    return "".join(cell.rjust(width) for cell, width in zip(cells, widths)) + last.rjust(8)


def format_table(comparison: Comparison) -> str:
    """Render the truth table as fixed-width text, 1 for true and 0 for false."""
    variables = comparison.variables
    lines = [
        _line([*variables, "  Expr1"], "Expr2"),
        "-" * (8 + len(variables) * 5 + 15),
    ]
    for assignment, left, right in comparison.rows:
        cells = [str(int(assignment[name])) for name in variables]
        lines.append(_line([*cells, str(int(left))], str(int(right))))
    return "\n".join(lines) + "\n"


def _prompt(message: str) -> str:
    tokens = input(message).split()
    if not tokens:
        raise ValueError("no expression given")
    return tokens[0]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="logicequiv",
        description="Check whether two logical expressions are equivalent.",
    )
    parser.add_argument("first", nargs="?", help="first expression")
    parser.add_argument("second", nargs="?", help="second expression")
    args = parser.parse_args(argv)

    try:
        first = args.first if args.first is not None else _prompt(
            "Enter the first logical expression: "
        )
        second = args.second if args.second is not None else _prompt(
            "Enter the second logical expression: "
        )
        comparison = compare(first, second)
    except (ValueError, EOFError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(format_table(comparison))
    if comparison.equivalent():
        print("The two expressions are logically equivalent.")
    else:
        print("The two expressions are not logically equivalent.")
    return 0


if __name__ == "__main__":
    sys.exit(main())