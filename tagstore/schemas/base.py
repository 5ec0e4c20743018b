"""Base DTOs for API endpoints"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    # needed for ORM
    model_config = ConfigDict(
        from_attributes=True,
        arbitrary_types_allowed=True,
    )


class BaseReadSchema(BaseSchema):
    id: int


class ErrorSchema(BaseSchema):
    error_code: int
    error: str
    details: list[dict[str, Any]] | None = None


M = TypeVar("M")


class ResponseSchema(BaseSchema, Generic[M]):
    """Envelope shared by every response, successful or not"""

    code: int
    status: str
    data: M | None = None
