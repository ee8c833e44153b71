import os
import logging

import structlog
from dotenv import load_dotenv

load_dotenv()

DB_PATH = os.getenv("DB_PATH", "locations.db")
PORT = int(os.getenv("PORT", "5000"))
DEBUG = os.getenv("DEBUG", "0").strip().lower() in {"1", "true", "yes", "on"}
SEED_ON_CREATE = os.getenv("SEED_ON_CREATE", "1").strip().lower() in {"1", "true", "yes", "on"}
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging(level: str = LOG_LEVEL):
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level, logging.INFO)
        ),
    )
