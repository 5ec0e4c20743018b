"""Service dependency providers."""

from fastapi import Depends
from sqlalchemy.orm import Session

from tagstore.db import get_db
from tagstore.repository.tag import TagRepository
from tagstore.services.tag import TagService


class ServiceContainer:
    """Request-scoped container, builds repositories and services from one session."""

    def __init__(self, db: Session):
        self.db = db
        self._tag_repository: TagRepository | None = None
        self._tag_service: TagService | None = None

    @property
    def tag_repository(self) -> TagRepository:
        if self._tag_repository is None:
            self._tag_repository = TagRepository(db=self.db)
        return self._tag_repository

    @property
    def tag_service(self) -> TagService:
        if self._tag_service is None:
            self._tag_service = TagService(tag_repository=self.tag_repository)
        return self._tag_service


def get_container(db: Session = Depends(get_db)) -> ServiceContainer:
    return ServiceContainer(db)


def get_tag_service(container: ServiceContainer = Depends(get_container)) -> TagService:
    return container.tag_service
