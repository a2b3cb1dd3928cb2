import io

import pytest

from logicequiv.cli import compare, format_table, main

EQUIVALENT = "The two expressions are logically equivalent."
NOT_EQUIVALENT = "The two expressions are not logically equivalent."


@pytest.mark.parametrize(
    "first, second",
    [
        ("a>b", "!a|b"),
        ("!(a&b)", "!a|!b"),
        ("a=b", "(a>b)&(b>a)"),
        ("a", "a"),
    ],
)
def test_equivalent_pairs(first, second):
    assert compare(first, second).equivalent()


@pytest.mark.parametrize("first, second", [("a>b", "b>a"), ("a&b", "a|b"), ("a", "b")])
def test_non_equivalent_pairs(first, second):
    assert not compare(first, second).equivalent()


def test_compare_merges_variables():
    comparison = compare("a&b", "c|a")
    assert comparison.variables[:2] == ("a", "b")
    assert set(comparison.variables) == {"a", "b", "c"}
    assert len(comparison.rows) == 2 ** len(comparison.variables)
    assert comparison.first == "a&b"
    assert comparison.second == "c|a"


def test_format_table_layout():
    comparison = compare("a>b", "!a|b")
    lines = format_table(comparison).splitlines()
    assert lines[0].endswith("  Expr1   Expr2")
    assert lines[0].split() == ["a", "b", "Expr1", "Expr2"]
    assert set(lines[1]) == {"-"}
    assert len(lines[1]) == 8 + 2 * 5 + 15
    assert len(lines) == 2 + len(comparison.rows)


def test_format_table_rows_match_results():
    comparison = compare("a&b", "b&a")
    lines = format_table(comparison).splitlines()[2:]
    for line, (assignment, left, right) in zip(lines, comparison.rows):
        cells = [int(token) for token in line.split()]
        assert cells == [int(assignment["a"]), int(assignment["b"]), int(left), int(right)]
        assert line.startswith(str(int(assignment["a"])).rjust(8))


def test_main_with_arguments(capsys):
    assert main(["a>b", "!a|b"]) == 0
    out = capsys.readouterr().out
    assert out.strip().endswith(EQUIVALENT)
    assert "Expr1" in out


def test_main_reports_difference(capsys):
    assert main(["a>b", "b>a"]) == 0
    assert capsys.readouterr().out.strip().endswith(NOT_EQUIVALENT)


def test_main_prompts_for_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("!(a|b)\n!a&!b\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Enter the first logical expression: " in out
    assert "Enter the second logical expression: " in out
    assert out.strip().endswith(EQUIVALENT)


def test_main_rejects_malformed_expression(capsys):
    assert main(["a&", "a"]) == 1
    assert "error" in capsys.readouterr().err