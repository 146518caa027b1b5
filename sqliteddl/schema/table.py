"Table API JSON schema."

from sqliteddl import constants
from sqliteddl.schema import column


columns = {
    "title": "The raw column specifications, keyed by column name.",
    "type": "object",
    "propertyNames": {"pattern": "^[a-zA-Z][a-zA-Z0-9_]*$"},
    "additionalProperties": {"type": "object", "additionalProperties": column.value},
}

create = {
    "$id": "/table/create",
    "$schema": constants.JSON_SCHEMA_URL,
    "title": "Table creation API JSON schema.",
    "type": "object",
    "properties": {"columns": columns},
    "required": ["columns"],
}

output = {
    "$id": "/table/output",
    "$schema": constants.JSON_SCHEMA_URL,
    "title": "Table DDL API JSON schema.",
    "type": "object",
    "properties": {
        "$id": {"type": "string", "format": "uri"},
        "timestamp": {"type": "string", "format": "date-time"},
        "sql": {"type": "string"},
        "database": {"type": "string"},
        "columns": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["$id", "timestamp", "sql"],
    "additionalProperties": False,
}
