import yaml

from .api import MemoryApiConfig, RemoteApiConfig
from .config import ConfigSchema, Config
from .exceptions import ConfigParseException


def parse_config_file(path):
    with open(path, "r") as config_file:
        try:
            config_data = yaml.safe_load(config_file)
        except yaml.YAMLError as exc:
            raise ConfigParseException(str(exc))

    if config_data is None:
        raise ConfigParseException(f"empty config file: {path}")

    return ConfigSchema().load(config_data)


__all__ = [
    "Config",
    "ConfigParseException",
    "MemoryApiConfig",
    "parse_config_file",
    "RemoteApiConfig",
]
