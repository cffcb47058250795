from typing import Generic, TypeVar

from pydantic import BaseModel, Field
from typing_extensions import Annotated

from catalog.schemas.base import CamelModel

ItemType = TypeVar("ItemType", bound=BaseModel)


class PaginationMeta(CamelModel):
    page: Annotated[int, Field(ge=1)]
    limit: Annotated[int, Field(ge=1)]
    total: Annotated[int, Field(ge=0)]
    total_pages: Annotated[int, Field(ge=0)]
    has_next: bool
    has_prev: bool


class PaginatedResponseModel(CamelModel, Generic[ItemType]):
    data: list[ItemType]
    pagination: PaginationMeta
