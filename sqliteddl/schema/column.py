"Column specification JSON schema."

from sqliteddl import constants


# Any scalar value; the settings are checked by the column configuration.
value = {"type": ["string", "number", "boolean", "null"]}

schema = {
    "$id": "/column",
    "$schema": constants.JSON_SCHEMA_URL,
    "title": "Raw column specification JSON schema.",
    "type": "object",
    "additionalProperties": value,
}

configuration = {
    "type": "object",
    "properties": {
        "type": value,
        "mandatory": value,
        "unique": value,
        "default": value,
    },
    "required": ["type", "mandatory", "unique", "default"],
    "additionalProperties": False,
}

output = {
    "$id": "/column/output",
    "$schema": constants.JSON_SCHEMA_URL,
    "title": "Normalized column configuration API JSON schema.",
    "type": "object",
    "properties": {
        "$id": {"type": "string", "format": "uri"},
        "timestamp": {"type": "string", "format": "date-time"},
        "configuration": configuration,
        "errors": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["$id", "timestamp", "configuration", "errors"],
    "additionalProperties": False,
}
