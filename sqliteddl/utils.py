"Various utility functions and classes."

import datetime
import json
import os.path

import flask
import jsonschema
import werkzeug.routing

from sqliteddl import constants


class NameConverter(werkzeug.routing.BaseConverter):
    "URL route converter for a name; simply check for valid identifier value."

    def to_python(self, value):
        if not constants.NAME_RX.match(value):
            raise werkzeug.routing.ValidationError
        return value


def get_dbpath(dbname):
    "Return the full file path of the database given by name."
    config = flask.current_app.config
    return os.path.join(
        config["DATABASES_DIR"], f"{dbname}{config['DB_FILE_EXTENSION']}"
    )


def get_time(offset=None):
    """Current date and time (UTC) in ISO format, with millisecond precision.
    Add the specified offset in seconds, if given.
    """
    instant = datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)
    if offset:
        instant += datetime.timedelta(seconds=offset)
    instant = instant.isoformat()
    return instant[:17] + "{:06.3f}".format(float(instant[17:])) + "Z"


def name_in_nocase(name, names):
    "Using a non-case sensitive comparison, is the 'name' among the 'names'?"
    return name.lower() in [n.lower() for n in names]


def get_json(**items):
    "Return the JSON structure adding standard entries."
    result = {"$id": flask.request.url, "timestamp": get_time()}
    result.update(items)
    return result


def json_validate(instance, schema):
    "Validate the JSON instance versus the given JSON schema."
    jsonschema.validate(
        instance=instance,
        schema=schema,
        format_checker=jsonschema.Draft7Validator.FORMAT_CHECKER,
    )


def load_json(filepath, schema):
    """Read the JSON file and validate its contents versus the JSON schema.
    Raise ValueError if the contents is not valid.
    """
    with open(filepath) as infile:
        try:
            data = json.load(infile)
        except json.JSONDecodeError as error:
            raise ValueError(f"invalid JSON in '{filepath}': {error}")
    try:
        json_validate(data, schema)
    except jsonschema.ValidationError as error:
        raise ValueError(f"invalid contents in '{filepath}': {error.message}")
    return data


def abort_json(status_code, error):
    "Raise abort with given status code and error message."
    response = flask.Response(status=status_code, mimetype=constants.JSON_MIMETYPE)
    response.set_data(json.dumps({"message": str(error)}))
    flask.abort(response)
