from .batch import BatchDeleter, BatchResult, DeletionResult
from .exceptions import DeletionFailure, UserDeclined
from .ids import parse_id_list, split_ids
from .resource import get_var_resource, get_var_resource_name, VarResource

__all__ = [
    "BatchDeleter",
    "BatchResult",
    "DeletionFailure",
    "DeletionResult",
    "get_var_resource",
    "get_var_resource_name",
    "parse_id_list",
    "split_ids",
    "UserDeclined",
    "VarResource",
]
