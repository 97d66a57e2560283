class ConfigParseException(Exception):
    """Config file could not be parsed."""
