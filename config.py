# ============================
# CONFIG.PY - Lakbay Batangas
# ============================

import logging
import os

from dotenv import load_dotenv

# Load environment variables from a .env file next to the game, if any
load_dotenv()


def _env_float(name: str, default: str) -> float:
    raw = os.environ.get(name, default)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}.") from None


# Log level name understood by the logging module (DEBUG, INFO, ...).
LOG_LEVEL = os.environ.get("LAKBAY_LOG_LEVEL", "INFO").strip().upper()

if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    raise ValueError(f"LAKBAY_LOG_LEVEL is not a valid log level: {LOG_LEVEL!r}.")

# The terminal is the game screen, so logs only go to a file.
# An empty value turns file logging off.
LOG_FILE = os.environ.get("LAKBAY_LOG_FILE", "lakbay.log").strip()

# Per-character delay used when typing out the banner. 0 prints instantly.
TEXT_DELAY = max(0.0, _env_float("LAKBAY_TEXT_DELAY", "0.02"))

DEFAULT_PLAYER_NAME = os.environ.get("LAKBAY_DEFAULT_NAME", "").strip() or "Wanderer"


class Config:
    LOG_LEVEL = LOG_LEVEL
    LOG_FILE = LOG_FILE
    TEXT_DELAY = TEXT_DELAY
    DEFAULT_PLAYER_NAME = DEFAULT_PLAYER_NAME
