"""Scorer configuration from environment."""
import os

from dotenv import load_dotenv

from .errors import InvalidConfiguration

# Load .env if one is found
load_dotenv()


def _number(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise InvalidConfiguration(f"{name} must be a number, got {raw!r}")


# Per-word edit distance bound for the phrase scorer
DISTANCE_THRESHOLD = _number("QUERYSCORER_DISTANCE_THRESHOLD", 1)

# Levenshtein operation costs
COST_INSERT = _number("QUERYSCORER_COST_INSERT", 1)
COST_REPLACE = _number("QUERYSCORER_COST_REPLACE", 1)
COST_DELETE = _number("QUERYSCORER_COST_DELETE", 1)

# Scores above this are not shown as matches by the CLI
CUTOFF_SCORE = _number("QUERYSCORER_CUTOFF_SCORE", 1)

LOG_LEVEL = os.environ.get("QUERYSCORER_LOG_LEVEL", "WARNING").upper()
