"""
Runtime settings, read from the environment.

    NUGEN_LOG_LEVEL   logging level name (default WARNING)
    NUGEN_EVENT_DB    sqlite file for generated events (default nugen_events.db in the project root)
"""
import logging
import os
from pathlib import Path
from typing import Optional

ROOT = Path(__file__).resolve().parents[1]


def log_level() -> str:
    return os.getenv("NUGEN_LOG_LEVEL", "WARNING").upper()


def event_db_path() -> Path:
    return Path(os.getenv("NUGEN_EVENT_DB", ROOT / "nugen_events.db"))


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or log_level()).upper(),
        format="%(asctime)s %(levelname)-7s [%(name)s] %(message)s",
    )
