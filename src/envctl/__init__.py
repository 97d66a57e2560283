from .client import Client, NotLoggedIn, PermissionDenied, VariableNotFound
from .config import Config, MemoryApiConfig, RemoteApiConfig
from .log import setup_logging
from .variables import (
    BatchDeleter,
    BatchResult,
    DeletionFailure,
    get_var_resource_name,
    UserDeclined,
    VarResource,
)

__all__ = [
    "BatchDeleter",
    "BatchResult",
    "Client",
    "Config",
    "DeletionFailure",
    "get_var_resource_name",
    "MemoryApiConfig",
    "NotLoggedIn",
    "PermissionDenied",
    "RemoteApiConfig",
    "setup_logging",
    "UserDeclined",
    "VariableNotFound",
    "VarResource",
]
