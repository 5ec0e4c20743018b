"""DTO for Tag"""

from pydantic import Field

from tagstore.schemas.base import BaseReadSchema, BaseSchema

TAG_NAME_MIN_LENGTH = 4
TAG_NAME_MAX_LENGTH = 200


class TagSchema(BaseReadSchema):
    name: str


class TagRequestSchema(BaseSchema):
    name: str = Field(min_length=TAG_NAME_MIN_LENGTH, max_length=TAG_NAME_MAX_LENGTH)
