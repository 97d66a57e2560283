from enum import Enum
from importlib import import_module

from .exceptions import ApiException, NotFoundException, UnauthorizedException


class ApiBackend(Enum):
    MEMORY = "memory"
    REMOTE = "remote"


_backend_module = {
    ApiBackend.MEMORY: "envctl.api.backend.memory",
    ApiBackend.REMOTE: "envctl.api.backend.remote",
}


def load_api_backend(config):
    api_backend_module = import_module(_backend_module[config.type])
    return api_backend_module.ApiBackend(config)


__all__ = [
    "ApiBackend",
    "ApiException",
    "load_api_backend",
    "NotFoundException",
    "UnauthorizedException",
]
