"""
Runtime settings for the guide matching package.

Values come from the environment (optionally a local .env file).
The scoring functions themselves take no configuration; these settings
only shape the recommendation runner and logging.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} env var must be an integer, got {raw!r}")


DEFAULT_RECOMMENDATION_LIMIT = _int_env("GUIDE_MATCHING_DEFAULT_LIMIT", 10)
MAX_RECOMMENDATION_LIMIT = _int_env("GUIDE_MATCHING_MAX_LIMIT", 50)

# Guides considered per recommendation request
MAX_CANDIDATES_EVALUATED = _int_env("GUIDE_MATCHING_MAX_CANDIDATES", 100)

LOG_LEVEL = os.getenv("GUIDE_MATCHING_LOG_LEVEL", "INFO")

if not 1 <= DEFAULT_RECOMMENDATION_LIMIT <= MAX_RECOMMENDATION_LIMIT:
    raise RuntimeError(
        "GUIDE_MATCHING_DEFAULT_LIMIT must be between 1 and GUIDE_MATCHING_MAX_LIMIT"
    )


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging once for scripts and sanity checks."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
