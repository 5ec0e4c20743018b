"""Repository for Tag model"""

from tagstore.models.tag import Tag
from tagstore.repository.base import BaseRepository


class TagRepository(BaseRepository[Tag]):
    model = Tag
    mutable_fields = ("name",)
