from marshmallow import fields, post_load, Schema

from .api import ApiConfigSchema


class ConfigSchema(Schema):
    api = fields.Nested(ApiConfigSchema, required=True)

    @post_load
    def make_config(self, data, **kwargs):
        return Config(api_config=data["api"])


class Config:
    def __init__(self, api_config=None):
        self.api = api_config
