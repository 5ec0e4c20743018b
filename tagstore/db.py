"""Database connection and initialization"""

import logging
import os
from functools import lru_cache
from typing import Any, Generator

from fastapi import Depends
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from tagstore.config import Config, get_config
from tagstore.models.base import BaseModel

# register models on the metadata before create_all
from tagstore.models.tag import Tag  # noqa: F401

logger = logging.getLogger(__name__)


class DatabaseConnection:
    engine: Engine
    session_local: sessionmaker[Session]

    def __init__(self, database_url: str, **engine_kwargs: Any) -> None:
        connect_args = {}
        if database_url.startswith("sqlite"):
            # sync endpoints run in a threadpool
            connect_args["check_same_thread"] = False
        self.engine = create_engine(
            database_url, connect_args=connect_args, **engine_kwargs
        )
        self.session_local = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
        )
        self.create_tables()

    def create_tables(self) -> None:
        """Create all database tables defined in models."""
        logger.info("Creating database tables...")
        BaseModel.metadata.create_all(bind=self.engine)
        logger.info("Database tables created.")

    def drop_tables(self) -> None:
        """Drop all database tables."""
        logger.info("Dropping database tables...")
        BaseModel.metadata.drop_all(bind=self.engine)
        logger.info("Database tables dropped.")

    def get_session(self) -> Session:
        """Return a new SQLAlchemy session."""
        return self.session_local()


@lru_cache
def get_db_connection(config: Config) -> DatabaseConnection:
    """One connection (engine and pool) per configuration for the whole process."""
    if not config.database_url_env:
        # Ensure the database folder exists.
        os.makedirs(config.database_path.parent, exist_ok=True)
    return DatabaseConnection(config.database_url)


def get_db(config: Config = Depends(get_config)) -> Generator[Session, Any, None]:
    """
    Dependency for providing a SQLAlchemy session to repositories.

    Yields:
        SQLAlchemy Session, closed once the request is done.
    """
    session = get_db_connection(config).get_session()
    try:
        yield session
    finally:
        session.close()
