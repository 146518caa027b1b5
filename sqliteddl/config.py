"Configuration."

import json
import logging
import os
import os.path

import sqliteddl
from sqliteddl import constants


# Default configurable values; modified by reading JSON file in 'init'.
DEFAULT_SETTINGS = dict(
    SITE_NAME="SqliteDDL",
    DATABASES_DIR="data",
    DB_FILE_EXTENSION=".sqlite3",
    LOGGING_DEBUG=False,
    JSON_AS_ASCII=False,
)

# Prefix for environment variables overriding settings.
ENV_PREFIX = "SQLITEDDL_"


def init(app):
    """Configure the Flask app.
    Read a JSON config file to modify the defaults.
    Perform a sanity check on the settings.
    """
    # Set the defaults specified above.
    app.config.from_mapping(DEFAULT_SETTINGS)
    # Modify the configuration as specified in a JSON settings file.
    filepaths = []
    try:
        filepaths.append(os.environ[f"{ENV_PREFIX}SETTINGS_FILEPATH"])
    except KeyError:
        for filepath in ["settings.json", "../site/settings.json"]:
            filepaths.append(os.path.normpath(os.path.join(constants.ROOT, filepath)))

    # Use the first settings file that can be found.
    for filepath in filepaths:
        try:
            with open(filepath) as infile:
                config = json.load(infile)
        except OSError:
            pass
        else:
            for key in config.keys():
                if key not in DEFAULT_SETTINGS:
                    app.logger.warning(f"Obsolete item '{key}' in settings file.")
            app.config.from_mapping(config)
            app.config["SETTINGS_FILEPATH"] = filepath
            break

    # Environment variables override the settings file.
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        key = key[len(ENV_PREFIX) :]
        if key not in DEFAULT_SETTINGS:
            continue
        if isinstance(DEFAULT_SETTINGS[key], bool):
            value = value.lower() in ("true", "t", "yes", "y", "1")
        app.config[key] = value

    app.config["DATABASES_DIR"] = os.path.expandvars(
        os.path.expanduser(app.config["DATABASES_DIR"])
    )

    # Sanity checks. Exception means bad setup.
    if not app.config["DATABASES_DIR"]:
        raise ValueError("DATABASES_DIR not set.")
    if not app.config["DB_FILE_EXTENSION"].startswith("."):
        raise ValueError("DB_FILE_EXTENSION must start with a dot.")

    if app.config["LOGGING_DEBUG"]:
        kwargs = dict(level=logging.DEBUG)
    else:
        kwargs = dict(level=logging.INFO)
    logging.basicConfig(**kwargs)
    app.logger.info("SqliteDDL version %s", sqliteddl.__version__)
