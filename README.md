# logicequiv

Decide whether two propositional logic expressions are logically
equivalent. The tool builds a truth table over every variable that
appears in either expression, prints both results for each row, and
reports whether they agree everywhere.

## Expression syntax

Variables are single ASCII letters (`a`–`z`, `A`–`Z`). At most ten
distinct variables may appear across both expressions. Operators:

| Symbol | Meaning        | Precedence |
|--------|----------------|------------|
| `!`    | NOT            | highest    |
| `&`    | AND            | middle     |
| `\|`   | OR             | middle     |
| `>`    | implication    | lowest     |
| `=`    | equivalence    | lowest     |

Operators of equal precedence group from the left. Parentheses `(` and
`)` group sub-expressions. Expressions are written without spaces, for
example `!(p&q)` or `!p|!q`.

## Command line

```
logicequiv '!(p&q)' '!p|!q'
```

Both expressions may be given as arguments. Any that is missing is
asked for interactively; only the first whitespace-separated word of
the answer is used:

```
$ logicequiv
Enter the first logical expression: !(p&q)
Enter the second logical expression: !p|!q
```

The program prints a table with one column per variable (in order of
first appearance) followed by the columns `Expr1` and `Expr2`, using
`1` for true and `0` for false. Rows run from all-false to all-true,
with the first variable most significant. The last line states whether
the two expressions are logically equivalent.

If an expression is malformed, uses too many variables, or no
expression is given, an `error: ...` message goes to standard error and
the exit status is 1.

## Library use

```python
from logicequiv.cli import compare, format_table
from logicequiv.expression import to_postfix, evaluate_postfix, truth_rows

comparison = compare("p>q", "!p|q")
print(format_table(comparison))
print(comparison.equivalent())
```

- `logicequiv.expression.to_postfix(expression, variables=())` returns
  the postfix form together with a tuple of variables, extending the
  given ones with new variables in order of first appearance. More
  than `MAX_VARIABLES` (10) variables raise `ValueError`.
- `evaluate_postfix(postfix, assignment)` evaluates a postfix string
  for a mapping of variable values; a missing variable raises
  `KeyError`, a malformed expression `ValueError`.
- `truth_rows(variables)` yields every assignment as a dict, in binary
  counting order.
- `precedence(op)` and `apply_operator(op, a, b)` expose the operator
  table.
- `logicequiv.cli.compare(first, second)` returns a `Comparison` with
  `first`, `second`, `variables` and `rows`, where each row is
  `(assignment, first_result, second_result)`; its `equivalent()`
  method tells whether every row agrees. `format_table(comparison)`
  renders the table as text.

## Running the tests

```
pip install -e ".[test]"
pytest
```