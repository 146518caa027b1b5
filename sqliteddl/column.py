"Column configuration; normalize and check a raw column specification."

from sqliteddl import constants


# Textual representations accepted for the boolean settings.
BOOLEANS = {"true": True, "false": False}

# Textual representation accepted for an absent default value.
NULL = "null"

DEFAULTS = {
    constants.KEY_TYPE: constants.DEFAULT_TYPE,
    constants.KEY_MANDATORY: constants.DEFAULT_MANDATORY,
    constants.KEY_UNIQUE: constants.DEFAULT_UNIQUE,
    constants.KEY_DEFAULT: constants.DEFAULT_DEFAULT,
}


class ColumnConfiguration:
    """The normalized and checked configuration of a table column.

    The raw specification is a dictionary, or a sequence of (key, value)
    pairs, with any of the settings 'type', 'mandatory', 'unique' and
    'default'. The keys may be given in any letter case.

    The 'configuration' always contains exactly those four keys.
    All problems found are accumulated in the list 'errors'; if there are
    any, the configuration must not be used.
    """

    def __init__(self, raw=None):
        self.configuration = {}
        self.errors = []
        self.clean(get_items(raw))
        self.augment()
        self.check()

    def __repr__(self):
        return f"ColumnConfiguration({self.configuration!r}, errors={self.errors!r})"

    def clean(self, items):
        """Clean up the raw specification items:
        1) Map the spelling of the keys to the canonical setting names.
        2) Convert the setting values given as strings.
        Keys not matching any setting are dropped.
        """
        config = self.configuration
        for name in constants.KEYS:
            matching = [
                (key, value)
                for key, value in items
                if isinstance(key, str) and key.lower() == name
            ]
            # The canonical spelling has precedence over any other,
            # unless its value is null.
            for key, value in matching:
                if key == name and value is not None:
                    config[name] = value
            for key, value in matching:
                if key == name:
                    continue
                if config.get(name) is not None:
                    self.errors.append(
                        f"both '{key}' and '{name}' were specified, removing '{key}'"
                    )
                else:
                    config[name] = value

        value = config.get(constants.KEY_TYPE)
        if isinstance(value, str):
            config[constants.KEY_TYPE] = value.upper()
        for name in (constants.KEY_MANDATORY, constants.KEY_UNIQUE):
            value = config.get(name)
            if isinstance(value, str) and value.lower() in BOOLEANS:
                config[name] = BOOLEANS[value.lower()]
        value = config.get(constants.KEY_DEFAULT)
        if isinstance(value, str) and value.lower() == NULL:
            config[constants.KEY_DEFAULT] = None

    def augment(self):
        "Set the default value for each setting not given."
        for name in constants.KEYS:
            if self.configuration.get(name) is None:
                self.configuration[name] = DEFAULTS[name]

    def check(self):
        "Check the settings, accumulating all errors found."
        self.check_type()
        self.check_boolean(constants.KEY_UNIQUE)
        self.check_boolean(constants.KEY_MANDATORY)
        self.check_unique_default()

    def check_type(self):
        value = self.configuration[constants.KEY_TYPE]
        if value not in constants.COLUMN_TYPES:
            self.errors.append(
                f"setting '{constants.KEY_TYPE}' to '{value}' is not supported"
            )

    def check_boolean(self, name):
        "The setting must be either true or false after cleaning."
        if not isinstance(self.configuration[name], bool):
            self.errors.append(
                f"value for setting '{name}' is not correct"
                " (expected true or false)"
            )

    def check_unique_default(self):
        "A unique column with a default value (other than null) makes no sense."
        default = self.configuration[constants.KEY_DEFAULT]
        if self.configuration[constants.KEY_UNIQUE] is True and default is not None:
            self.errors.append(
                f"requiring a unique column with a default value '{default}'"
                " does not make sense"
            )

    def has_errors(self):
        "Did the raw specification have any errors?"
        return bool(self.errors)


def get_items(raw):
    "Return the raw specification as a list of (key, value) pairs."
    if raw is None:
        return []
    try:
        return list(raw.items())
    except AttributeError:
        return [tuple(item) for item in raw]


def normalize(raw):
    "Return the ColumnConfiguration for the raw column specification."
    return ColumnConfiguration(raw)
