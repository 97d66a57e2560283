from .backend import (
    ApiBackend,
    ApiException,
    load_api_backend,
    NotFoundException,
    UnauthorizedException,
)

__all__ = [
    "ApiBackend",
    "ApiException",
    "load_api_backend",
    "NotFoundException",
    "UnauthorizedException",
]
