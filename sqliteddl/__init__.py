"SqliteDDL: Normalize column specifications and render SQLite3 table DDL."

import os.path
import re

__version__ = "1.0.0"


class Constants:
    VERSION = __version__
    ROOT = os.path.dirname(os.path.abspath(__file__))

    NAME_RX = re.compile(r"^[a-z][a-z0-9_]*$", re.I)

    # Column configuration setting names.
    KEY_TYPE = "type"
    KEY_MANDATORY = "mandatory"
    KEY_UNIQUE = "unique"
    KEY_DEFAULT = "default"
    KEYS = (KEY_TYPE, KEY_MANDATORY, KEY_UNIQUE, KEY_DEFAULT)

    # SQLite3 column type affinities.
    INTEGER = "INTEGER"
    TEXT = "TEXT"
    BLOB = "BLOB"
    REAL = "REAL"
    NUMERIC = "NUMERIC"
    COLUMN_TYPES = (INTEGER, TEXT, BLOB, REAL, NUMERIC)

    # Column configuration default values.
    DEFAULT_TYPE = TEXT
    DEFAULT_MANDATORY = False
    DEFAULT_UNIQUE = False
    DEFAULT_DEFAULT = None

    # The surrogate key column implicitly added to every table.
    ID_COLUMN_NAME = "id"
    ID_COLUMN_TYPE = "INTEGER NOT NULL PRIMARY KEY AUTOINCREMENT"

    # Flag value for 'manager.connect_to'.
    DB_FILE_MUST_EXIST = True

    # MIME types.
    JSON_MIMETYPE = "application/json"

    # JSON schema.
    JSON_SCHEMA_URL = "http://json-schema.org/draft-07/schema#"

    def __setattr__(self, key, value):
        raise ValueError("cannot set constant")


constants = Constants()
