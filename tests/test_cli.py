"Test the command line interface."

import json

import pytest
from click.testing import CliRunner

import sqliteddl
import sqliteddl.cli
import sqliteddl.manager


@pytest.fixture()
def runner():
    return CliRunner()


@pytest.fixture()
def specfile(tmp_path):
    "Write the given JSON data to a file, returning its path."

    def write(data, filename="spec.json"):
        path = tmp_path / filename
        path.write_text(json.dumps(data))
        return str(path)

    return write


def test_version(runner):
    result = runner.invoke(sqliteddl.cli.cli, ["--version"])
    assert result.exit_code == 0
    assert sqliteddl.__version__ in result.output


def test_check(runner, specfile):
    "Check column specifications."
    path = specfile({"a": {"tYpE": "TeXt"}, "b": {"unique": "TRUE"}})
    result = runner.invoke(sqliteddl.cli.cli, ["check", path])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["a"]["type"] == "TEXT"
    assert data["b"]["unique"] is True

    path = specfile({"a": {"type": "foo"}, "b": {"unique": True, "default": 1}})
    result = runner.invoke(sqliteddl.cli.cli, ["check", path])
    assert result.exit_code == 1
    assert "a: setting 'type' to 'FOO' is not supported" in result.output
    assert "b: requiring a unique column" in result.output


def test_check_invalid_file(runner, specfile, tmp_path):
    "Invalid JSON, or JSON not matching the schema."
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    result = runner.invoke(sqliteddl.cli.cli, ["check", str(path)])
    assert result.exit_code == 1
    assert "invalid JSON" in result.output

    path = specfile({"a": "TEXT"})
    result = runner.invoke(sqliteddl.cli.cli, ["check", path])
    assert result.exit_code == 1
    assert "invalid contents" in result.output


def test_create_table(runner, specfile, tmp_path):
    "Output the create table SQL, and execute it."
    path = specfile({"bar": {"type": "TEXT", "unique": True}})
    result = runner.invoke(sqliteddl.cli.cli, ["create-table", "foo", path])
    assert result.exit_code == 0
    assert result.output.strip() == (
        "CREATE TABLE IF NOT EXISTS foo "
        "(id INTEGER NOT NULL PRIMARY KEY AUTOINCREMENT,bar TEXT UNIQUE)"
    )

    dbfile = str(tmp_path / "test.db")
    result = runner.invoke(
        sqliteddl.cli.cli, ["create-table", "foo", path, "--dbfile", dbfile]
    )
    assert result.exit_code == 0
    cnx = sqliteddl.manager.connect_to(dbfile, must_exist=True)
    assert sqliteddl.manager.get_column_names(cnx, "foo") == ["id", "bar"]
    cnx.close()

    path = specfile({"id": {"type": "TEXT"}})
    result = runner.invoke(sqliteddl.cli.cli, ["create-table", "foo", path])
    assert result.exit_code == 1
    assert "reserved" in result.output


def test_add_column(runner, specfile, tmp_path):
    "Output the add column SQL, and execute it."
    path = specfile({"type": "REAL", "mandatory": True, "default": 1.5})
    result = runner.invoke(sqliteddl.cli.cli, ["add-column", "t", "c", path])
    assert result.exit_code == 0
    assert result.output.strip() == (
        "ALTER TABLE t ADD COLUMN c REAL NOT NULL DEFAULT '1.5'"
    )

    # The database file must exist.
    dbfile = str(tmp_path / "test.db")
    result = runner.invoke(sqliteddl.cli.cli, ["add-column", "t", "c", path, "-d", dbfile])
    assert result.exit_code == 1
    assert "does not exist" in result.output

    cnx = sqliteddl.manager.connect_to(dbfile)
    sqliteddl.manager.create_table(cnx, "t", {})
    cnx.close()
    result = runner.invoke(sqliteddl.cli.cli, ["add-column", "t", "c", path, "-d", dbfile])
    assert result.exit_code == 0
    cnx = sqliteddl.manager.connect_to(dbfile, must_exist=True)
    assert sqliteddl.manager.get_column_names(cnx, "t") == ["id", "c"]
    cnx.close()

    path = specfile({"type": "REAL", "unique": True})
    result = runner.invoke(sqliteddl.cli.cli, ["add-column", "t", "u", path])
    assert result.exit_code == 1
    assert "UNIQUE" in result.output


def test_invalid_table_name(runner, specfile, tmp_path):
    "An invalid table name is refused when executing in a database."
    path = specfile({"bar": {"type": "TEXT"}})
    dbfile = str(tmp_path / "test.db")
    result = runner.invoke(
        sqliteddl.cli.cli, ["create-table", "foo (x TEXT); --", path, "-d", dbfile]
    )
    assert result.exit_code == 1
    assert "invalid table name" in result.output
