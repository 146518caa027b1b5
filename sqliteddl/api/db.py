"Database API endpoints; execute the table DDL in a database."

import http.client
import os
import sqlite3

import flask

import sqliteddl.manager
import sqliteddl.schema.column
import sqliteddl.schema.table
from sqliteddl import constants
from sqliteddl import utils
from sqliteddl.api.sql import get_body


blueprint = flask.Blueprint("api_db", __name__)


@blueprint.route("/<name:dbname>/<name:tablename>", methods=["PUT"])
def table(dbname, tablename):
    """Create the table with the columns in the JSON body.
    The database file is created if it does not exist.
    """
    data = get_body(sqliteddl.schema.table.create)
    cnx = get_cnx(dbname)
    try:
        sql = sqliteddl.manager.create_table(cnx, tablename, data["columns"])
    except ValueError as error:
        utils.abort_json(http.client.BAD_REQUEST, error)
    except sqlite3.Error as error:
        utils.abort_json(http.client.CONFLICT, error)
    flask.current_app.logger.info("database '%s': %s", dbname, sql)
    return get_json(dbname, tablename, sql)


@blueprint.route("/<name:dbname>/<name:tablename>/<name:columnname>", methods=["PUT"])
def column(dbname, tablename, columnname):
    """Add the column specified in the JSON body to the table.
    The database must exist.
    """
    raw = get_body(sqliteddl.schema.column.schema)
    cnx = get_cnx(dbname, must_exist=constants.DB_FILE_MUST_EXIST)
    if not sqliteddl.manager.get_column_names(cnx, tablename):
        utils.abort_json(http.client.NOT_FOUND, f"no such table '{tablename}'")
    try:
        sql = sqliteddl.manager.add_column(cnx, tablename, columnname, raw)
    except ValueError as error:
        utils.abort_json(http.client.BAD_REQUEST, error)
    except sqlite3.Error as error:
        utils.abort_json(http.client.CONFLICT, error)
    flask.current_app.logger.info("database '%s': %s", dbname, sql)
    return get_json(dbname, tablename, sql)


def get_cnx(dbname, must_exist=False):
    """Get the connection for the database given by name.
    It is closed at the end of the request.
    Abort with status 404 Not Found if it must exist but does not.
    """
    if not must_exist:
        os.makedirs(flask.current_app.config["DATABASES_DIR"], exist_ok=True)
    try:
        flask.g.dbcnx = sqliteddl.manager.connect_to(
            utils.get_dbpath(dbname), must_exist=must_exist
        )
    except FileNotFoundError:
        utils.abort_json(http.client.NOT_FOUND, f"no such database '{dbname}'")
    return flask.g.dbcnx


def get_json(dbname, tablename, sql):
    "Return the JSON response for the DDL executed in the database."
    columns = sqliteddl.manager.get_column_names(flask.g.dbcnx, tablename)
    return flask.jsonify(utils.get_json(sql=sql, database=dbname, columns=columns))
