from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine

DEFAULT_DB_URL = "sqlite:///salary_sheet.db"


@dataclass
class DBConfig:
    url: str = DEFAULT_DB_URL
    echo: bool = False


class DatabaseConnection:
    """Lazily creates one SQLAlchemy engine per config.

    Note: Connections are short-lived, one per storage operation.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._engine: Optional[Engine] = None

    @classmethod
    def from_dict(cls, db_config: dict) -> "DatabaseConnection":
        return cls(
            DBConfig(
                url=str(db_config.get("url") or DEFAULT_DB_URL),
                echo=bool(db_config.get("echo", False)),
            )
        )

    @property
    def url(self) -> str:
        return self._config.url

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = create_engine(self._config.url, echo=self._config.echo, future=True)
        return self._engine

    def connect(self) -> Connection:
        return self.engine.connect()

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
