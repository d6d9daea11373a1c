"""Environment-driven settings. Call load_dotenv() in the entry point before load_settings()."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CATALOG = str(_ROOT / "data" / "output.json")


@dataclass(frozen=True)
class Settings:
    catalog_source: str  # Local path or http(s) URL of the catalog JSON
    log_level: str  # logging level name ("INFO", "DEBUG", ...)
    min_score: int | None  # Optional match threshold; None = always match


def load_settings() -> Settings:
    """Read PLANETFINDER_* variables from the environment.

    Raises:
        ValueError: PLANETFINDER_MIN_SCORE is set but not an integer.
    """
    raw_min = os.environ.get("PLANETFINDER_MIN_SCORE", "").strip()
    min_score: int | None = None
    if raw_min:
        try:
            min_score = int(raw_min)
        except ValueError:
            raise ValueError(
                f"PLANETFINDER_MIN_SCORE must be an integer, got {raw_min!r}"
            ) from None

    return Settings(
        catalog_source=os.environ.get("PLANETFINDER_CATALOG") or DEFAULT_CATALOG,
        log_level=os.environ.get("PLANETFINDER_LOG_LEVEL", "INFO").upper(),
        min_score=min_score,
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
