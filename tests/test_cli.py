# tests/test_cli.py
from typer.testing import CliRunner

from cmdmenus.__main__ import app

runner = CliRunner()


def test_people_deletes_marcel():
    result = runner.invoke(app, ["people"], input="b\nd\nq\n")

    assert result.exit_code == 0
    assert "Marcel has been deleted." in result.output
    assert "Remaining: Ginette, Gisèle" in result.output


def test_people_accepts_names():
    result = runner.invoke(app, ["people", "Alice", "Bob"], input="a\ns\nq\n")

    assert result.exit_code == 0
    assert "You must give the man a name : Alice." in result.output
    assert "Remaining: Alice, Bob" in result.output


def test_browse_numbers_rows():
    result = runner.invoke(app, ["browse"], input="2\n0\n")

    assert result.exit_code == 0
    assert "1 : Ginette" in result.output
    assert "#2 Marcel" in result.output


def test_tree_quits_from_nested_list():
    result = runner.invoke(app, ["tree"], input="p\na\ns\nq\n")

    assert result.exit_code == 0
    assert "You must give the man a name : Ginette." in result.output
    assert "Goodbye!" in result.output


def test_end_of_input_exits_with_error():
    result = runner.invoke(app, ["people"], input="")

    assert result.exit_code == 1
    assert "Interrupted" in result.output
