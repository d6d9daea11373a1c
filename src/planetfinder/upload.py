"""Bulk upload I/O: CSV rows in, result tables out."""

import io
import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import IO

import pandas as pd

from planetfinder.models import BulkResult, MalformedBulkInput
from planetfinder.schema import ATTRIBUTE_KEYS

logger = logging.getLogger(__name__)

RESULT_COLUMNS: tuple[str, ...] = ("#", *ATTRIBUTE_KEYS, "bestMatch", "score", "error")


def _read_bytes(source: str | os.PathLike | bytes | IO) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, (str, os.PathLike)):
        return Path(source).read_bytes()
    data = source.read()
    return data.encode("utf-8") if isinstance(data, str) else data


def parse_rows(source: str | os.PathLike | bytes | IO) -> list[dict[str, str]]:
    """Parse header-driven CSV into row mappings.

    Every cell stays text; empty cells become "". Blank lines are skipped.
    Header names are taken verbatim apart from surrounding whitespace.
    Rows with more fields than the header (including a trailing delimiter)
    keep their header-aligned values; the extra fields are dropped.

    Args:
        source: Path, raw bytes, or a file-like object (e.g. a Streamlit upload).

    Returns:
        One dict per data line, in file order.

    Raises:
        MalformedBulkInput: The text has no header or cannot be parsed.
    """
    raw = _read_bytes(source)
    options = dict(
        engine="python",
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        skipinitialspace=True,
        index_col=False,
    )
    try:
        width = len(pd.read_csv(io.BytesIO(raw), nrows=0, **options).columns)

        def _trim(fields: list[str]) -> list[str]:
            logger.warning(
                "Upload row has %d fields, header has %d; extra fields dropped",
                len(fields),
                width,
            )
            return fields[:width]

        df = pd.read_csv(io.BytesIO(raw), on_bad_lines=_trim, **options)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise MalformedBulkInput(f"Error parsing CSV: {e}") from e

    # Short rows leave NaN in the missing trailing fields
    df = df.fillna("")
    df.columns = [str(c).strip() for c in df.columns]
    rows = df.to_dict(orient="records")
    logger.info("Parsed %d upload rows with columns %s", len(rows), list(df.columns))
    return rows


def results_frame(results: Sequence[BulkResult]) -> pd.DataFrame:
    """Tabulate bulk results: row number, inputs, best match, score, error."""
    records = []
    for r in results:
        row: dict[str, object] = {"#": r.row_index}
        row.update(r.input)
        row["bestMatch"] = r.result.display_name
        row["score"] = r.result.score
        row["error"] = r.result.error.value if r.result.error else ""
        records.append(row)
    df = pd.DataFrame(records, columns=list(RESULT_COLUMNS))
    return df.astype({"score": "Int64"})


def results_csv(results: Sequence[BulkResult]) -> bytes:
    return results_frame(results).to_csv(index=False).encode("utf-8")
