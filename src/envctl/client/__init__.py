from .client import Client
from .exceptions import NotLoggedIn, PermissionDenied, VariableNotFound

__all__ = ["Client", "NotLoggedIn", "PermissionDenied", "VariableNotFound"]
