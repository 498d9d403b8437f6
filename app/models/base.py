"""Base model for camelCase JSON exchange"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Domain model serialized to clients with camelCase keys.
    Accepts both camelCase and snake_case input, and ORM objects.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
