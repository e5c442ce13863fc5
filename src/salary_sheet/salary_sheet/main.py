from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .core.constants import STORAGE_VERSION
from .core.enums import StorageBackend
from .database.bootstrap import apply_schema, list_tables

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[salary-sheet] %(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_container() -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    debug = bool(getattr(settings, "DEBUG", False))
    configure_logging(debug)

    backend = str(getattr(settings, "STORAGE_BACKEND", StorageBackend.SQL.value))
    storage_key = getattr(settings, "STORAGE_KEY", STORAGE_VERSION)
    db_config = dict(getattr(settings, "DB_CONFIG", {}))

    container = build_container(db_config=db_config, backend=backend, storage_key=storage_key)
    logger.info("settings=%s backend=%s storage_key=%s", settings_module, backend, storage_key)

    if container.conn is not None and bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn, schema_path=SCHEMA_PATH)
        logger.debug("schema ready (tables=%d) at %s", len(list_tables(container.conn)), container.conn.url)

    return container
