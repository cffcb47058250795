from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):  # type: ignore[misc]
    """
    Base schema for API payloads.

    Serializes with camelCase keys (``publishedYear``, ``authorId``) and
    accepts either camelCase or snake_case on input. ``from_attributes``
    lets schemas be built straight from SQLModel rows.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
