"""Matching engine: attribute scoring, best-match selection, and bulk matching."""

import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any

from planetfinder.models import (
    BulkResult,
    CatalogRecord,
    MalformedBulkInput,
    MatchError,
    MatchResult,
    QueryRecord,
)
from planetfinder.schema import ATTRIBUTE_KEYS, project_row

logger = logging.getLogger(__name__)


def _as_text(value: Any) -> str:
    """Coerce a query or catalog value to comparable text. "" means absent."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        # 1.0 and "1" must compare equal, as they do in the JSON catalog export
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


def score(catalog_record: CatalogRecord, query: QueryRecord) -> int:
    """Count schema attributes where query and catalog record agree.

    A key scores 1 only if both values are non-empty and equal after
    trimming and case-folding. Keys outside ATTRIBUTE_KEYS never count.

    Args:
        catalog_record: One catalog entry. Extra or missing keys are fine.
        query: Query record. Empty values are not compared.

    Returns:
        Integer in [0, len(ATTRIBUTE_KEYS)].
    """
    total = 0
    for key in ATTRIBUTE_KEYS:
        wanted = _as_text(query.get(key))
        if not wanted:
            continue
        have = _as_text(catalog_record.get(key))
        if have and have.casefold() == wanted.casefold():
            total += 1
    return total


def select_best(
    catalog: Sequence[CatalogRecord],
    query: QueryRecord,
    min_score: int | None = None,
) -> MatchResult:
    """Return the highest-scoring catalog record for a single query.

    Scans the catalog once in order. Ties keep the earlier record, so with no
    threshold the first record always matches, even at score 0.

    Args:
        catalog: Catalog records in load order.
        query: Query record.
        min_score: Optional threshold. A best score below it yields
            NO_MATCH_FOUND. None (default) disables the threshold.

    Returns:
        MatchResult with the matched record and score, or an error.
    """
    if not catalog:
        return MatchResult(error=MatchError.NO_CATALOG_DATA)

    best: CatalogRecord | None = None
    best_score: int | None = None
    for record in catalog:
        s = score(record, query)
        if best_score is None or s > best_score:
            best, best_score = record, s

    if best is None or best_score is None:
        return MatchResult(error=MatchError.NO_MATCH_FOUND)
    if min_score is not None and best_score < min_score:
        logger.debug("Best score %d below threshold %d", best_score, min_score)
        return MatchResult(error=MatchError.NO_MATCH_FOUND)
    return MatchResult(matched_record=best, score=best_score)


def match_single(
    catalog: Sequence[CatalogRecord],
    values: Mapping[str, object],
    min_score: int | None = None,
) -> MatchResult:
    """Project form values onto the schema and select the best match."""
    return select_best(catalog, project_row(values), min_score=min_score)


def _check_rows(rows: Any) -> None:
    if isinstance(rows, (str, bytes, Mapping)) or not isinstance(rows, Sequence):
        raise MalformedBulkInput(
            f"Expected a sequence of rows, got {type(rows).__name__}"
        )
    for i, row in enumerate(rows):
        if not isinstance(row, Mapping):
            raise MalformedBulkInput(
                f"Row {i + 1} is {type(row).__name__}, expected a mapping"
            )


def match_bulk(
    catalog: Sequence[CatalogRecord],
    rows: Sequence[Mapping[str, object]],
    min_score: int | None = None,
) -> tuple[BulkResult, ...]:
    """Match every row against the catalog, preserving row order.

    Each row is projected onto ATTRIBUTE_KEYS before scoring, so extra columns
    are ignored and missing ones count as unspecified. No row is dropped.

    Args:
        catalog: Catalog records in load order.
        rows: Parsed upload rows, one mapping per line.
        min_score: Optional threshold, forwarded to select_best.

    Returns:
        One BulkResult per input row, row_index starting at 1.

    Raises:
        MalformedBulkInput: rows is not a sequence of mappings.
    """
    _check_rows(rows)
    if not catalog:
        logger.warning("Bulk match of %d rows against an empty catalog", len(rows))

    results: list[BulkResult] = []
    for i, row in enumerate(rows):
        query = project_row(row)
        if catalog:
            result = select_best(catalog, query, min_score=min_score)
        else:
            result = MatchResult(error=MatchError.NO_CATALOG_DATA)
        results.append(BulkResult(row_index=i + 1, input=query, result=result))

    logger.info("Matched %d rows against %d catalog records", len(results), len(catalog))
    return tuple(results)
