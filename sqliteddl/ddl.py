"""SQL for table creation and column addition in an SQLite3 database.

Every function here raises ValueError at the first problem found;
no SQL is returned for a specification with any error in it.
"""

import json

import sqliteddl.column
from sqliteddl import constants


def get_sql_create_table(tablename, columns):
    """Return SQL to create the table with the given columns.
    The 'columns' is a dictionary with the column name as key and the
    raw column specification as value. The surrogate key column 'id'
    is always added first, and may not be given among the columns.
    Raise ValueError if any problem.
    """
    for columnname in columns:
        check_reserved(columnname)
    clauses = [get_sql_id_column()]
    for columnname, raw in columns.items():
        configuration = get_configuration(columnname, raw)
        clauses.append(get_sql_column(columnname, configuration))
    return f"CREATE TABLE IF NOT EXISTS {tablename} ({','.join(clauses)})"


def get_sql_add_column(tablename, columnname, raw):
    """Return SQL to add a column to the table.
    SQLite3 does not allow adding a UNIQUE column to an existing table,
    and a NOT NULL column must have a default value for the existing rows.
    Raise ValueError if any problem.
    """
    check_reserved(columnname)
    configuration = get_configuration(columnname, raw)
    if configuration[constants.KEY_UNIQUE]:
        raise ValueError(
            f"cannot add column '{columnname}' with a UNIQUE constraint"
            " to an existing table"
        )
    if (
        configuration[constants.KEY_MANDATORY]
        and configuration[constants.KEY_DEFAULT] is None
    ):
        raise ValueError(
            f"cannot add mandatory column '{columnname}' without a default value"
            " to an existing table"
        )
    clause = get_sql_column(columnname, configuration)
    return f"ALTER TABLE {tablename} ADD COLUMN {clause}"


def get_sql_id_column():
    "Return the column definition of the surrogate key column."
    return f"{constants.ID_COLUMN_NAME} {constants.ID_COLUMN_TYPE}"


def get_sql_column(columnname, configuration):
    """Return the column definition, including column constraints,
    for the normalized column configuration.
    """
    coldef = [columnname, configuration[constants.KEY_TYPE]]
    if configuration[constants.KEY_MANDATORY]:
        coldef.append("NOT NULL")
    default = configuration[constants.KEY_DEFAULT]
    if default is not None:
        coldef.append(f"DEFAULT {get_sql_literal(default)}")
    if configuration[constants.KEY_UNIQUE]:
        coldef.append("UNIQUE")
    return " ".join(coldef)


def get_sql_literal(value):
    """Return the value as a quoted SQL string literal.
    A boolean is given as 1 or 0, which is how SQLite3 stores it.
    """
    if isinstance(value, bool):
        value = int(value)
    return "'%s'" % str(value).replace("'", "''")


def get_configuration(columnname, raw):
    """Return the normalized configuration for the column.
    Raise ValueError if the raw specification has any errors.
    """
    result = sqliteddl.column.normalize(raw)
    if result.has_errors():
        raise ValueError(
            f"invalid configuration for column '{columnname}': "
            + json.dumps(result.errors)
        )
    return result.configuration


def check_reserved(columnname):
    "Raise ValueError if the column name is reserved for internal usage."
    if columnname == constants.ID_COLUMN_NAME:
        raise ValueError(f"column name '{columnname}' is reserved for internal usage")
