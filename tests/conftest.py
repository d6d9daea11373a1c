"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest


@pytest.fixture
def kepler_record() -> Dict[str, Any]:
    return {"planetName": "Kepler-22b", "radius": "2.4", "hostName": "Kepler-22"}


@pytest.fixture
def trappist_record() -> Dict[str, Any]:
    return {"planetName": "TRAPPIST-1e", "radius": "0.92", "hostName": "TRAPPIST-1"}


@pytest.fixture
def two_planet_catalog(kepler_record, trappist_record) -> List[Dict[str, Any]]:
    """Catalog from the Kepler-22b / TRAPPIST-1e scenario."""
    return [kepler_record, trappist_record]


@pytest.fixture
def numeric_catalog() -> List[Dict[str, Any]]:
    """Catalog with numeric values, as exported to output.json."""
    return [
        {"planetName": "Proxima Cen b", "planetMass": 1.07, "orbitalPeriod": 11.1868,
         "ra": 217.3934, "dec": -62.6761, "eccentricity": 0.02},
        {"planetName": "TRAPPIST-1 e", "radius": 0.92, "eqTemp": 250.0,
         "ra": 346.6264, "dec": -5.0435, "discoveryMethod": "Transit"},
        {"planetName": "No Coordinates", "radius": 1.0, "ra": None, "dec": "n/a"},
    ]


@pytest.fixture
def catalog_file(tmp_path, numeric_catalog) -> Path:
    path = tmp_path / "output.json"
    path.write_text(json.dumps(numeric_catalog), encoding="utf-8")
    return path


@pytest.fixture
def upload_csv() -> bytes:
    """Upload with an extra column, a missing column, and an all-empty row."""
    return (
        "planetName,radius,notes\n"
        "kepler-22b,,first\n"
        "\n"
        ",0.92,second\n"
        ",,\n"
    ).encode("utf-8")
