"""
Shared DTO base.

Store rows are snake_case; API payloads are camelCase. DTOs carry both:
attributes by field name, JSON by alias.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    message: str
