"""Tag service"""

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from tagstore.errors.base import field_errors
from tagstore.errors.tag import TagValidationError
from tagstore.models.tag import Tag
from tagstore.repository.tag import TagRepository
from tagstore.schemas.tag import TagRequestSchema, TagSchema

logger = logging.getLogger(__name__)


class TagService:
    """Validates tag input and maps between request/response shapes and the Tag model.

    Repository errors are never swallowed: NotFoundError and store errors reach
    the caller as raised by the repository.
    """

    tag_repository: TagRepository

    def __init__(self, tag_repository: TagRepository):
        self.tag_repository = tag_repository

    def _validate(self, payload: Mapping[str, Any]) -> TagRequestSchema:
        try:
            return TagRequestSchema.model_validate(payload)
        except ValidationError as e:
            raise TagValidationError(field_errors(e.errors())) from e

    def create(self, payload: Mapping[str, Any]) -> TagSchema:
        request = self._validate(payload)
        tag = self.tag_repository.save(Tag(name=request.name))
        logger.info("TagService: created tag id=%s", tag.id)
        return TagSchema.model_validate(tag)

    def find_all(self) -> list[TagSchema]:
        return [TagSchema.model_validate(tag) for tag in self.tag_repository.find_all()]

    def find_by_id(self, tag_id: int) -> TagSchema:
        return TagSchema.model_validate(self.tag_repository.find_by_id(tag_id))

    def update(self, tag_id: int, payload: Mapping[str, Any]) -> TagSchema:
        # validation goes first, so bad input on a missing id is still a validation error
        request = self._validate(payload)
        current = self.tag_repository.find_by_id(tag_id)
        # transient copy, the loaded row stays clean
        tag = Tag(id=current.id, name=request.name)
        self.tag_repository.update(tag)
        logger.info("TagService: updated tag id=%s", tag_id)
        return TagSchema.model_validate(tag)

    def delete(self, tag_id: int) -> None:
        self.tag_repository.delete(tag_id)
        logger.info("TagService: deleted tag id=%s", tag_id)
