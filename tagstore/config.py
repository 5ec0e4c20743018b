"""Application configuration"""

from dataclasses import dataclass, field
from os import getenv
from pathlib import Path


@dataclass(frozen=True)
class Config:
    app_name: str = "tagstore"
    app_version: str = "0.1.0"

    # Optional database URL for Postgres or other databases
    database_url_env: str | None = field(default=getenv("TAGSTORE_DATABASE_URL", None))

    # logging, either a YAML dictConfig file or level/format/file settings
    log_config_path: str | None = field(default=getenv("TAGSTORE_LOG_CONFIG", None))
    log_level: str = field(default=getenv("TAGSTORE_LOG_LEVEL", "INFO"))
    log_format: str = field(
        default=getenv(
            "TAGSTORE_LOG_FORMAT",
            "%(asctime)s   %(name)-25s %(levelname)-8s %(message)s",
        )
    )
    log_file: str | None = field(default=getenv("TAGSTORE_LOG_FILE", None))

    @property
    def database_path(self) -> Path:
        return Path("./data/") / Path(f"{self.app_name}.db")

    @property
    def database_url(self) -> str:
        # Use provided DATABASE_URL if available, else fall back to SQLite file
        if self.database_url_env:
            return self.database_url_env
        return f"sqlite:///{self.database_path}"


def get_config() -> Config:
    return Config()
