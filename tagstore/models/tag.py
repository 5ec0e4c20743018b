"""Tag model"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tagstore.models.base import BaseModel
from tagstore.schemas.tag import TAG_NAME_MAX_LENGTH


class Tag(BaseModel):
    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(String(TAG_NAME_MAX_LENGTH), nullable=False)
