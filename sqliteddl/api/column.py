"Column configuration API endpoint."

import http.client

import flask
import jsonschema

import sqliteddl.column
import sqliteddl.schema.column
from sqliteddl import utils


blueprint = flask.Blueprint("api_column", __name__)


@blueprint.route("", methods=["POST"])
def normalize():
    """Return the normalized configuration for the raw column specification
    in the JSON body, and the list of errors found in it, if any.
    """
    raw = flask.request.get_json(silent=True)
    try:
        utils.json_validate(raw, sqliteddl.schema.column.schema)
    except jsonschema.ValidationError as error:
        utils.abort_json(http.client.BAD_REQUEST, error.message)
    result = sqliteddl.column.normalize(raw)
    if result.has_errors():
        flask.current_app.logger.info(
            "column configuration errors: %s", "; ".join(result.errors)
        )
    return flask.jsonify(
        utils.get_json(configuration=result.configuration, errors=result.errors)
    )
