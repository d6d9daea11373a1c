"""Data model definitions: explicit boundaries between input, matching, and render layers."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

CatalogRecord = Mapping[str, Any]
QueryRecord = Mapping[str, str]


class MatchError(str, Enum):
    """Per-query failure shapes. Embedded in results, never raised."""

    NO_CATALOG_DATA = "no catalog data"
    NO_MATCH_FOUND = "no match found"


class MalformedBulkInput(Exception):
    """Bulk input is not an ordered collection of row mappings."""


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one query against the catalog."""

    matched_record: CatalogRecord | None = None
    score: int | None = None
    error: MatchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def display_name(self) -> str:
        """Short label for tables: planetName, then name, then "?"."""
        if self.matched_record is None:
            return ""
        for key in ("planetName", "name"):
            value = self.matched_record.get(key)
            if value not in (None, ""):
                return str(value)
        return "?"

    def as_dict(self) -> dict[str, Any]:
        """Plain-dict view for JSON display."""
        if self.error is not None:
            return {"error": self.error.value}
        return {"matchedRecord": dict(self.matched_record or {}), "score": self.score}


@dataclass(frozen=True)
class BulkResult:
    """One upload row paired with its match. row_index is 1-based."""

    row_index: int
    input: QueryRecord
    result: MatchResult
