"""Base repository with single-row CRUD methods, suitable for simple objects"""

import datetime
import logging
from typing import Generic, Sequence, Type, TypeVar

from sqlalchemy.orm import Session

from tagstore.errors.common import NotFoundError
from tagstore.models.base import BaseModel

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)  # model


class BaseRepository(Generic[M]):
    model: Type[M]
    # columns written by update(), everything else is immutable
    mutable_fields: Sequence[str] = ()
    db: Session

    def __init__(self, db: Session):
        self.db = db

    def save(self, obj: M) -> M:
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        logger.debug("Inserted %r", obj)
        return obj

    def find_all(self) -> list[M]:
        return self.db.query(self.model).all()

    def find_by_id(self, obj_id: int) -> M:
        db_obj = self.db.query(self.model).filter(self.model.id == obj_id).first()
        if not db_obj:
            raise NotFoundError(f"{self.model.__name__} id={obj_id}")
        return db_obj

    def update(self, obj: M) -> None:
        values = {key: getattr(obj, key) for key in self.mutable_fields}
        values["modified_at"] = datetime.datetime.now()
        affected = (
            self.db.query(self.model)
            .filter(self.model.id == obj.id)
            .update(values)
        )
        if not affected:
            # row vanished after the caller looked it up
            self.db.rollback()
            raise NotFoundError(f"{self.model.__name__} id={obj.id}")
        self.db.commit()

    def delete(self, obj_id: int) -> None:
        affected = self.db.query(self.model).filter(self.model.id == obj_id).delete()
        if not affected:
            self.db.rollback()
            raise NotFoundError(f"{self.model.__name__} id={obj_id}")
        self.db.commit()
        logger.debug("Deleted %s id=%s", self.model.__name__, obj_id)
