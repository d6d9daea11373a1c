"""Catalog loading: reads the reference planet catalog from a local file or URL."""

import json
import logging
from pathlib import Path
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class CatalogLoadError(Exception):
    """Catalog source could not be read or decoded."""


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _fetch_json(url: str, client: httpx.Client | None) -> Any:
    try:
        if client is None:
            resp = httpx.get(url, timeout=10)
        else:
            resp = client.get(url, timeout=10)
        resp.raise_for_status()
        return resp.json()
    except httpx.HTTPError as e:
        raise CatalogLoadError(f"Failed to fetch catalog from {url}: {e}") from e
    except ValueError as e:
        raise CatalogLoadError(f"Catalog at {url} is not valid JSON: {e}") from e


def _read_json(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise CatalogLoadError(f"Could not read catalog {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Catalog {path} is not valid JSON: {e}") from e


def load_catalog(
    source: str | Path, client: httpx.Client | None = None
) -> tuple[dict[str, Any], ...]:
    """Load catalog records in file order.

    A payload that is not a JSON array is treated as an empty catalog.
    Array items that are not objects are skipped.

    Args:
        source: Local path, or an http(s) URL fetched with httpx.
        client: Optional httpx client for URL sources (tests inject a mock transport).

    Returns:
        Tuple of catalog records. Callers must not mutate them.

    Raises:
        CatalogLoadError: File missing/unreadable, HTTP failure, or invalid JSON.
    """
    source_str = str(source)
    if _is_url(source_str):
        data = _fetch_json(source_str, client)
    else:
        data = _read_json(Path(source_str))

    if not isinstance(data, list):
        logger.warning(
            "Catalog %s is a JSON %s, not an array; using an empty catalog",
            source_str,
            type(data).__name__,
        )
        return ()

    records = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            logger.warning("Skipping catalog entry %d: not an object", i)
            continue
        records.append(item)

    logger.info("Loaded %d catalog records from %s", len(records), source_str)
    return tuple(records)
