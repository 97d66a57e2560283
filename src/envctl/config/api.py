import os

from marshmallow import fields, post_load, Schema, validate
from marshmallow_oneofschema import OneOfSchema

from ..api.backend import ApiBackend


class RemoteApiConfigSchema(Schema):
    url = fields.Url(required=True, require_tld=False)
    token = fields.Str(allow_none=True)
    api_version = fields.Str(validate=[validate.Length(min=1)])
    timeout = fields.Int(validate=[validate.Range(min=1)])

    @post_load
    def make_remote_api_config(self, data, **kwargs):
        return RemoteApiConfig(**data)


class RemoteApiConfig:
    type = ApiBackend.REMOTE

    def __init__(self, url, token=None, api_version="v6", timeout=10):
        self.url = url.rstrip("/")
        self.token = os.environ.get("ENVCTL_API_TOKEN", token)
        self.api_version = api_version
        self.timeout = timeout


class MemoryApiConfigSchema(Schema):
    token = fields.Str(allow_none=True)
    variables = fields.Dict(
        keys=fields.Str(), values=fields.List(fields.Int())
    )

    @post_load
    def make_memory_api_config(self, data, **kwargs):
        return MemoryApiConfig(**data)


class MemoryApiConfig:
    type = ApiBackend.MEMORY

    def __init__(self, token=None, variables=None):
        self.token = os.environ.get("ENVCTL_API_TOKEN", token)
        self.variables = variables or {}


class ApiConfigSchema(OneOfSchema):
    type_schemas = {
        RemoteApiConfig.type.value: RemoteApiConfigSchema,
        MemoryApiConfig.type.value: MemoryApiConfigSchema,
    }

    def get_obj_type(self, obj):
        if isinstance(obj, RemoteApiConfig):
            return ApiBackend.REMOTE.value
        elif isinstance(obj, MemoryApiConfig):
            return ApiBackend.MEMORY.value
        else:
            raise RuntimeError(f"Unknown obj type: {obj.__class__.__name__}")
