"SqliteDDL web app."

import http.client

import flask

import sqliteddl
import sqliteddl.config
import sqliteddl.api.column
import sqliteddl.api.db
import sqliteddl.api.root
import sqliteddl.api.sql

from sqliteddl import utils

app = flask.Flask(__name__)

# Add URL map converters.
app.url_map.converters["name"] = utils.NameConverter

# Get the configuration.
sqliteddl.config.init(app)
app.json.ensure_ascii = app.config["JSON_AS_ASCII"]
app.json.sort_keys = False


@app.teardown_request
def finalize(exception=None):
    "Close the database connection, if any was opened by the request."
    cnx = flask.g.pop("dbcnx", None)
    if cnx is not None:
        cnx.close()


@app.route("/")
def home():
    "Home page; redirect to the API root."
    return flask.redirect(flask.url_for("api.root"))


@app.route("/status")
def status():
    "Return JSON for the current status."
    return dict(status="ok", version=sqliteddl.__version__)


@app.errorhandler(http.client.NOT_FOUND)
def not_found(error):
    "Return JSON for a resource that does not exist."
    return dict(message=error.description), http.client.NOT_FOUND


# Set up the URL map.
app.register_blueprint(sqliteddl.api.root.blueprint, url_prefix="/api")
app.register_blueprint(sqliteddl.api.column.blueprint, url_prefix="/api/column")
app.register_blueprint(sqliteddl.api.sql.blueprint, url_prefix="/api/sql")
app.register_blueprint(sqliteddl.api.db.blueprint, url_prefix="/api/db")


# This code is used only during development.
if __name__ == "__main__":
    app.run()
