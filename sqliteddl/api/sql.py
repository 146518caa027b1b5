"SQL API endpoints; render the table DDL without executing it."

import http.client

import flask
import jsonschema

import sqliteddl.ddl
import sqliteddl.schema.column
import sqliteddl.schema.table
from sqliteddl import utils


blueprint = flask.Blueprint("api_sql", __name__)


@blueprint.route("/<name:tablename>", methods=["POST"])
def create(tablename):
    "Return the SQL to create the table with the columns in the JSON body."
    data = get_body(sqliteddl.schema.table.create)
    try:
        sql = sqliteddl.ddl.get_sql_create_table(tablename, data["columns"])
    except ValueError as error:
        utils.abort_json(http.client.BAD_REQUEST, error)
    return flask.jsonify(utils.get_json(sql=sql))


@blueprint.route("/<name:tablename>/<name:columnname>", methods=["POST"])
def add(tablename, columnname):
    "Return the SQL to add the column specified in the JSON body to the table."
    raw = get_body(sqliteddl.schema.column.schema)
    try:
        sql = sqliteddl.ddl.get_sql_add_column(tablename, columnname, raw)
    except ValueError as error:
        utils.abort_json(http.client.BAD_REQUEST, error)
    return flask.jsonify(utils.get_json(sql=sql))


def get_body(schema):
    """Return the JSON body of the request, validated by the schema.
    Abort with status 400 Bad Request if invalid.
    """
    data = flask.request.get_json(silent=True)
    try:
        utils.json_validate(data, schema)
    except jsonschema.ValidationError as error:
        utils.abort_json(http.client.BAD_REQUEST, error.message)
    return data
