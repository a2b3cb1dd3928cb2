"""Parsing and evaluation of propositional logic expressions.

Variables are single ASCII letters. Operators are ``!`` (not), ``&`` (and),
``|`` (or), ``>`` (implication) and ``=`` (equivalence); parentheses group.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from itertools import product

MAX_VARIABLES = 10

_PRECEDENCE = {"!": 3, "&": 2, "|": 2, ">": 1, "=": 1}


def precedence(op: str) -> int:
    """Return the binding strength of an operator; 0 for parentheses or unknown characters."""
    return _PRECEDENCE.get(op, 0)


def apply_operator(op: str, a: bool, b: bool) -> bool:
    """Apply a binary operator to two truth values; unknown operators yield False."""
    if op == "&":
        return a and b
    if op == "|":
        return a or b
    if op == ">":
        return (not a) or b
    if op == "=":
        return a == b
    return False


def _is_variable(char: str) -> bool:
    return char.isascii() and char.isalpha()


def to_postfix(expression: str, variables: Iterable[str] = ()) -> tuple[str, tuple[str, ...]]:
    """Convert an infix expression to postfix form.

    ``variables`` holds variables already known; the returned tuple extends it
    with new variables in order of first appearance. More than
    ``MAX_VARIABLES`` distinct variables raise ``ValueError``.
    """
    known = list(variables)
    output: list[str] = []
    operators: list[str] = []

    for char in expression:
        if _is_variable(char):
            output.append(char)
            if char not in known:
                if len(known) >= MAX_VARIABLES:
                    raise ValueError(
                        f"too many variables: at most {MAX_VARIABLES} are supported"
                    )
                known.append(char)
        elif char == "(":
            operators.append(char)
        elif char == ")":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if operators:
                operators.pop()
        else:
            while operators and precedence(operators[-1]) >= precedence(char):
                output.append(operators.pop())
            operators.append(char)

    output.extend(reversed(operators))
    return "".join(output), tuple(known)


def evaluate_postfix(postfix: str, assignment: Mapping[str, bool]) -> bool:
    """Evaluate a postfix expression under the given variable assignment.

    Raises ``KeyError`` for a variable missing from the assignment and
    ``ValueError`` when the expression is malformed.
    """
    stack: list[bool] = []
    for char in postfix:
        if _is_variable(char):
            stack.append(bool(assignment[char]))
        elif char == "!":
            if not stack:
                raise ValueError("'!' has no operand")
            stack.append(not stack.pop())
        else:
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} is missing an operand")
            right = stack.pop()
            left = stack.pop()
            stack.append(apply_operator(char, left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def truth_rows(variables: Iterable[str]) -> Iterator[dict[str, bool]]:
    """Yield every assignment of the variables, first variable most significant, all-false first."""
    names = tuple(variables)
    for values in product((False, True), repeat=len(names)):
        yield dict(zip(names, values))