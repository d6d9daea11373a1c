"""CLI entry point for bulk matching a CSV of partial planet descriptions.

    uv run planetfinder-match queries.csv -o matches.csv
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

from planetfinder.catalog import CatalogLoadError, load_catalog
from planetfinder.config import configure_logging, load_settings
from planetfinder.matching import match_bulk
from planetfinder.models import MalformedBulkInput
from planetfinder.upload import parse_rows, results_csv

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="planetfinder-match",
        description="Match each CSV row against the planet catalog.",
    )
    parser.add_argument("input", help="CSV file with a header row of attribute keys")
    parser.add_argument(
        "-o", "--output", help="Write results CSV here (default: stdout)"
    )
    parser.add_argument(
        "--catalog", help="Catalog path or URL (default: PLANETFINDER_CATALOG)"
    )
    parser.add_argument(
        "--min-score",
        type=int,
        default=None,
        help="Report 'no match found' below this score (default: no threshold)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    settings = load_settings()
    configure_logging(settings.log_level)

    args = build_parser().parse_args(argv)
    min_score = args.min_score if args.min_score is not None else settings.min_score

    try:
        catalog = load_catalog(args.catalog or settings.catalog_source)
        rows = parse_rows(args.input)
        results = match_bulk(catalog, rows, min_score=min_score)
    except (CatalogLoadError, MalformedBulkInput) as e:
        logger.error("%s", e)
        return 2
    except FileNotFoundError as e:
        logger.error("Input file not found: %s", e.filename)
        return 2

    data = results_csv(results)
    if args.output:
        with open(args.output, "wb") as f:
            f.write(data)
        logger.info("Saved: %s", args.output)
    else:
        sys.stdout.write(data.decode("utf-8"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
