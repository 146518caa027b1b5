"Command line interface to render and execute the table DDL."

import json
import logging
import sqlite3

import click

import sqliteddl
import sqliteddl.column
import sqliteddl.ddl
import sqliteddl.manager
import sqliteddl.schema.column
import sqliteddl.schema.table

from sqliteddl import constants
from sqliteddl import utils


@click.group()
@click.version_option(version=sqliteddl.__version__)
@click.option("--debug", is_flag=True, help="Output debug logging.")
def cli(debug):
    "Command line interface for SQLite3 table DDL from column specifications."
    if debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)


@cli.command()
@click.argument("specfile", type=click.Path(exists=True, dir_okay=False))
def check(specfile):
    """Normalize and check the column specifications in the JSON file.
    Output the normalized configuration for each column.
    """
    try:
        columns = utils.load_json(specfile, sqliteddl.schema.table.columns)
    except ValueError as error:
        raise click.ClickException(str(error))
    errors = []
    result = {}
    for columnname, raw in columns.items():
        configuration = sqliteddl.column.normalize(raw)
        result[columnname] = configuration.configuration
        errors.extend([f"{columnname}: {e}" for e in configuration.errors])
    click.echo(json.dumps(result, ensure_ascii=False, indent=2))
    if errors:
        raise click.ClickException("\n".join(errors))


@cli.command()
@click.argument("tablename")
@click.argument("specfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-d",
    "--dbfile",
    type=str,
    default=None,
    help="The path of the Sqlite3 database file in which to create the table.",
)
def create_table(tablename, specfile, dbfile):
    """Output the SQL to create the table with the columns in the JSON file.
    If a database file is given, create the table in it.
    """
    try:
        columns = utils.load_json(specfile, sqliteddl.schema.table.columns)
        if dbfile:
            cnx = sqliteddl.manager.connect_to(dbfile)
            try:
                sql = sqliteddl.manager.create_table(cnx, tablename, columns)
            finally:
                cnx.close()
        else:
            sql = sqliteddl.ddl.get_sql_create_table(tablename, columns)
    except (ValueError, sqlite3.Error) as error:
        raise click.ClickException(str(error))
    click.echo(sql)


@cli.command()
@click.argument("tablename")
@click.argument("columnname")
@click.argument("specfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-d",
    "--dbfile",
    type=str,
    default=None,
    help="The path of the existing Sqlite3 database file containing the table.",
)
def add_column(tablename, columnname, specfile, dbfile):
    """Output the SQL to add the column specified in the JSON file.
    If a database file is given, add the column to the table in it.
    """
    try:
        raw = utils.load_json(specfile, sqliteddl.schema.column.schema)
        if dbfile:
            cnx = sqliteddl.manager.connect_to(
                dbfile, must_exist=constants.DB_FILE_MUST_EXIST
            )
            try:
                sql = sqliteddl.manager.add_column(cnx, tablename, columnname, raw)
            finally:
                cnx.close()
        else:
            sql = sqliteddl.ddl.get_sql_add_column(tablename, columnname, raw)
    except (ValueError, OSError, sqlite3.Error) as error:
        raise click.ClickException(str(error))
    click.echo(sql)


if __name__ == "__main__":
    cli()
