"Connect to an SQLite3 database file and execute the table DDL in it."

import logging
import os.path
import sqlite3

import sqliteddl.ddl
from sqliteddl import constants
from sqliteddl import utils


def assert_dbpath(dbpath):
    """Does the specified file, an SQLite3 database, exist?
    The contents of an existing file are not checked.
    """
    return os.path.exists(dbpath)


def connect_to(dbpath, must_exist=False):
    """Return a new connection to the SQLite3 database in the given file.
    Raise FileNotFoundError if 'must_exist' is set and there is no such file.
    """
    if must_exist and not assert_dbpath(dbpath):
        raise FileNotFoundError(f"'{dbpath}' does not exist")
    cnx = sqlite3.connect(dbpath)
    cnx.row_factory = sqlite3.Row
    return cnx


def get_column_names(cnx, tablename):
    """Return the list of the names of the columns in the table.
    The list is empty if there is no such table.
    """
    sql = 'PRAGMA table_info("%s")' % tablename
    return [row[1] for row in cnx.execute(sql)]


def create_table(cnx, tablename, columns):
    """Create the table, unless it already exists, with the given columns.
    Return the SQL executed.
    Raise ValueError if there is a problem with the column specifications,
    or if any name is invalid or the column names are not unique.
    """
    sql = sqliteddl.ddl.get_sql_create_table(tablename, columns)
    check_name(tablename, "table")
    names = [constants.ID_COLUMN_NAME]
    for columnname in columns:
        check_name(columnname, "column")
        if utils.name_in_nocase(columnname, names):
            raise ValueError(f"non-unique column name '{columnname}'")
        names.append(columnname)
    execute(cnx, sql)
    return sql


def add_column(cnx, tablename, columnname, raw):
    """Add the column to the existing table.
    Return the SQL executed.
    Raise ValueError if there is a problem with the column specification,
    or if any name is invalid, or if the table already has a column
    by that name.
    """
    sql = sqliteddl.ddl.get_sql_add_column(tablename, columnname, raw)
    check_name(tablename, "table")
    check_name(columnname, "column")
    if utils.name_in_nocase(columnname, get_column_names(cnx, tablename)):
        raise ValueError(
            f"column '{columnname}' already exists in table '{tablename}'"
        )
    execute(cnx, sql)
    return sql


def check_name(name, kind):
    "Raise ValueError if the name is not a valid identifier."
    if not isinstance(name, str) or not constants.NAME_RX.match(name):
        raise ValueError(f"invalid {kind} name '{name}'")


def execute(cnx, sql):
    "Execute the DDL statement in a transaction."
    logging.debug("executing: %s", sql)
    with cnx:
        cnx.execute(sql)
