"""
Shared pydantic configuration for request and response DTOs.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    """
    Base for inbound DTOs.

    Accepts camelCase (external) or snake_case (internal) keys. Unknown keys,
    including server-assigned ones such as id or createdAt, are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
    )


class ResponseModel(BaseModel):
    """Base for outbound DTOs, serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
