"Root API endpoint."

import flask
import flask_cors

import sqliteddl
from sqliteddl import constants
from sqliteddl import utils


blueprint = flask.Blueprint("api", __name__)

flask_cors.CORS(blueprint, methods=["GET"])


@blueprint.route("")
def root():
    "API root resource; links to the operations."
    base = flask.request.url_root.rstrip("/")
    result = {
        "title": f"{flask.current_app.config['SITE_NAME']} API",
        "version": sqliteddl.__version__,
        "reserved": [constants.ID_COLUMN_NAME],
        "column_types": list(constants.COLUMN_TYPES),
        "operations": {
            "column": {
                "normalize": {"href": f"{base}/api/column", "method": "POST"},
            },
            "sql": {
                "create": {
                    "href": f"{base}/api/sql/{{tablename}}",
                    "method": "POST",
                },
                "add": {
                    "href": f"{base}/api/sql/{{tablename}}/{{columnname}}",
                    "method": "POST",
                },
            },
            "table": {
                "create": {
                    "href": f"{base}/api/db/{{dbname}}/{{tablename}}",
                    "method": "PUT",
                },
                "add": {
                    "href": f"{base}/api/db/{{dbname}}/{{tablename}}/{{columnname}}",
                    "method": "PUT",
                },
            },
        },
    }
    return flask.jsonify(utils.get_json(**result))
