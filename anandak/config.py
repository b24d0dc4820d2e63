from __future__ import annotations

import logging
import os
import sys
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from .models import DEFAULT_TABLES, ROW_FORMATS

load_dotenv()

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
DEV_SECRET_KEY = "replace-this-with-a-random-value"
DEFAULT_TRANSLITERATION_URL = "https://www.google.com/inputtools/request"

# Highest priority first.
SUPABASE_KEY_VARIABLES: Tuple[Tuple[str, str], ...] = (
    ("SUPABASE_SECRET_KEY", "secret"),
    ("SUPABASE_SERVICE_ROLE_KEY", "service_role"),
    ("SUPABASE_PUBLISHABLE_KEY", "publishable"),
    ("SUPABASE_ANON_KEY", "anon"),
    ("NEXT_PUBLIC_SUPABASE_ANON_KEY", "anon"),
)


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r", name, raw)
        return default


def normalize_row_format(value: Optional[str]) -> str:
    return str(value or "").strip().lower()


def default_table(row_format: Optional[str]) -> str:
    return DEFAULT_TABLES.get(normalize_row_format(row_format), DEFAULT_TABLES["detailed"])


def select_supabase_key() -> Tuple[Optional[str], Optional[str]]:
    """Return ``(key, key_type)`` for the best Supabase key found in the environment."""
    for variable, key_type in SUPABASE_KEY_VARIABLES:
        value = os.getenv(variable)
        if value:
            return value, key_type
    return None, None


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY") or DEV_SECRET_KEY

    SUPABASE_URL = os.getenv("SUPABASE_URL") or os.getenv("NEXT_PUBLIC_SUPABASE_URL")
    SUPABASE_KEY, SUPABASE_KEY_TYPE = select_supabase_key()
    SUPABASE_ROW_FORMAT = normalize_row_format(os.getenv("SUPABASE_ROW_FORMAT", "detailed"))
    SUPABASE_TABLE = os.getenv("SUPABASE_TABLE") or default_table(SUPABASE_ROW_FORMAT)
    SUBMISSION_TIMEOUT = _float_env("SUBMISSION_TIMEOUT", 5.0)

    TRANSLITERATION_URL = os.getenv("TRANSLITERATION_URL", DEFAULT_TRANSLITERATION_URL)
    TRANSLITERATION_TIMEOUT = _float_env("TRANSLITERATION_TIMEOUT", 3.0)

    WIZARD_MAX_AGE = _float_env("WIZARD_MAX_AGE", 2 * 60 * 60.0)
    MAX_WIZARDS = int(_float_env("MAX_WIZARDS", 1000))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def validate_config(config) -> List[str]:
    """Describe configuration problems; an empty list means the config is usable as-is."""
    problems: List[str] = []
    get = config.get if isinstance(config, dict) else lambda name: getattr(config, name, None)

    if get("SECRET_KEY") in (None, "", DEV_SECRET_KEY):
        problems.append("SECRET_KEY is not set; sessions are signed with the development key.")

    url = get("SUPABASE_URL")
    if not url:
        problems.append("SUPABASE_URL is not set; submissions are kept in memory only.")
    elif not str(url).startswith("https://"):
        problems.append(f"SUPABASE_URL should start with https:// (got {url!r}).")
    if url and not get("SUPABASE_KEY"):
        names = ", ".join(variable for variable, _ in SUPABASE_KEY_VARIABLES)
        problems.append(f"No Supabase key found; set one of: {names}.")

    if normalize_row_format(get("SUPABASE_ROW_FORMAT")) not in ROW_FORMATS:
        problems.append(
            f"SUPABASE_ROW_FORMAT must be one of {', '.join(ROW_FORMATS)} (got {get('SUPABASE_ROW_FORMAT')!r})."
        )

    for name in ("SUBMISSION_TIMEOUT", "TRANSLITERATION_TIMEOUT", "WIZARD_MAX_AGE"):
        value = get(name)
        if value is None or value <= 0:
            problems.append(f"{name} must be a positive number of seconds.")
    return problems


def configure_logging(level: str = "INFO") -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if any(getattr(handler, "_anandak", False) for handler in root_logger.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._anandak = True  # type: ignore[attr-defined]
    root_logger.addHandler(handler)
