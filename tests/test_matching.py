"""
Tests for the matching engine: scoring, best-match selection, bulk matching.
"""

import pytest

from planetfinder.matching import match_bulk, match_single, score, select_best
from planetfinder.models import MalformedBulkInput, MatchError, MatchResult
from planetfinder.schema import ATTRIBUTE_KEYS, empty_query, project_row


def q(**values) -> dict:
    return dict(project_row(values))


class TestScore:
    """Test the per-record similarity score."""

    def test_case_insensitive_name_match(self, kepler_record):
        """Names differing only in case should score 1."""
        assert score(kepler_record, q(planetName="KEPLER-22B")) == 1

    def test_empty_query_scores_zero(self, kepler_record):
        """Unspecified attributes are never compared."""
        assert score(kepler_record, empty_query()) == 0

    def test_whitespace_only_query_is_unspecified(self, kepler_record):
        assert score(kepler_record, q(planetName="   ")) == 0

    def test_surrounding_whitespace_is_trimmed(self, kepler_record):
        assert score(kepler_record, q(planetName="  kepler-22b ")) == 1

    def test_no_numeric_tolerance(self, kepler_record):
        """2.4 vs 2.40 is a text mismatch, not a near match."""
        assert score(kepler_record, q(radius="2.40")) == 0
        assert score(kepler_record, q(radius="2.4")) == 1

    def test_no_partial_string_match(self, kepler_record):
        assert score(kepler_record, q(planetName="Kepler")) == 0

    def test_missing_catalog_value_does_not_count(self, kepler_record):
        assert score(kepler_record, q(stellarType="G5 V")) == 0

    def test_null_catalog_value_is_absent(self):
        """A JSON null is absent, not the text "None"."""
        assert score({"planetName": None}, q(planetName="None")) == 0

    def test_blank_catalog_value_is_absent(self):
        assert score({"planetName": "  "}, q(planetName="x")) == 0

    def test_multiple_attributes_add_up(self, kepler_record):
        query = q(planetName="kepler-22b", radius="2.4", hostName="kepler-22")
        assert score(kepler_record, query) == 3

    def test_numeric_catalog_values(self, numeric_catalog):
        """Numbers from JSON compare by their text form."""
        trappist = numeric_catalog[1]
        assert score(trappist, q(radius="0.92")) == 1
        assert score(trappist, q(eqTemp="250")) == 1
        assert score(trappist, q(eqTemp="250.0")) == 0

    def test_zero_is_a_present_value(self):
        assert score({"eccentricity": 0}, q(eccentricity="0")) == 1

    def test_nan_is_absent(self):
        assert score({"radius": float("nan")}, q(radius="nan")) == 0

    def test_extra_keys_are_ignored(self):
        """Keys outside the schema never contribute, even if the query has them."""
        record = {"name": "foo", "planetName": "bar"}
        assert score(record, {"name": "foo"}) == 0

    def test_full_match_hits_upper_bound(self):
        record = {key: f"v-{key}" for key in ATTRIBUTE_KEYS}
        query = {key: f"V-{key.upper()}" for key in ATTRIBUTE_KEYS}
        assert score(record, query) == len(ATTRIBUTE_KEYS) == 24

    def test_case_change_does_not_change_score(self, two_planet_catalog):
        query = q(planetName="TRAPPIST-1e", hostName="trappist-1")
        swapped = {k: v.swapcase() for k, v in query.items()}
        for record in two_planet_catalog:
            assert score(record, query) == score(record, swapped)


class TestSelectBest:
    """Test single-query best match selection."""

    def test_name_match_scenario(self, two_planet_catalog, kepler_record):
        result = select_best(two_planet_catalog, q(planetName="kepler-22b"))
        assert result == MatchResult(matched_record=kepler_record, score=1)
        assert result.ok

    def test_empty_catalog(self):
        result = select_best([], q(planetName="anything"))
        assert result.error is MatchError.NO_CATALOG_DATA
        assert result.as_dict() == {"error": "no catalog data"}

    def test_empty_query_returns_first_record(self):
        record = {"radius": "1"}
        result = select_best([record], empty_query())
        assert result.matched_record is record
        assert result.score == 0
        assert result.error is None

    def test_ties_keep_first_record(self):
        a = {"planetName": "A", "radius": "1"}
        b = {"planetName": "B", "radius": "1"}
        result = select_best([a, b], q(radius="1"))
        assert result.matched_record is a

    def test_strict_improvement_wins(self, two_planet_catalog, trappist_record):
        result = select_best(two_planet_catalog, q(radius="0.92"))
        assert result.matched_record is trappist_record
        assert result.score == 1

    def test_deterministic(self, two_planet_catalog):
        query = q(planetName="TRAPPIST-1e", radius="2.4")
        assert select_best(two_planet_catalog, query) == select_best(
            two_planet_catalog, query
        )

    def test_catalog_not_mutated(self, two_planet_catalog):
        before = [dict(r) for r in two_planet_catalog]
        select_best(two_planet_catalog, q(planetName="kepler-22b"))
        assert two_planet_catalog == before

    def test_min_score_threshold_yields_no_match(self, two_planet_catalog):
        result = select_best(two_planet_catalog, q(planetName="nope"), min_score=1)
        assert result.error is MatchError.NO_MATCH_FOUND
        assert result.matched_record is None

    def test_min_score_threshold_met(self, two_planet_catalog, kepler_record):
        result = select_best(two_planet_catalog, q(planetName="kepler-22b"), min_score=1)
        assert result.matched_record is kepler_record

    def test_match_single_projects_form_values(self, two_planet_catalog, kepler_record):
        """Unknown form keys are dropped before scoring."""
        result = match_single(two_planet_catalog, {"planetName": "Kepler-22B", "bogus": "x"})
        assert result.matched_record is kepler_record
        assert result.score == 1


class TestMatchBulk:
    """Test row-by-row matching."""

    def test_rows_scenario(self):
        a = {"planetName": "A"}
        c = {"planetName": "C"}
        results = match_bulk([a, c], [{"planetName": "A"}, {"planetName": "B"}])
        assert [r.row_index for r in results] == [1, 2]
        assert results[0].result.matched_record is a
        assert results[0].result.score == 1
        assert results[1].result.matched_record is a
        assert results[1].result.score == 0

    def test_row_count_and_indices_preserved(self, two_planet_catalog):
        rows = [{"planetName": "x"}] * 7
        results = match_bulk(two_planet_catalog, rows)
        assert len(results) == 7
        assert [r.row_index for r in results] == list(range(1, 8))

    def test_empty_catalog_every_row_errors(self):
        rows = [{"planetName": "A"}, {}, {"radius": "1"}]
        results = match_bulk([], rows)
        assert len(results) == 3
        assert all(r.result.error is MatchError.NO_CATALOG_DATA for r in results)
        assert [r.row_index for r in results] == [1, 2, 3]

    def test_input_is_projected_onto_schema(self, two_planet_catalog):
        results = match_bulk(two_planet_catalog, [{"planetName": "A", "notes": "x"}])
        projected = results[0].input
        assert tuple(projected) == ATTRIBUTE_KEYS
        assert projected["planetName"] == "A"
        assert projected["radius"] == ""
        assert "notes" not in projected

    def test_extra_columns_never_scored(self):
        record = {"notes": "same", "planetName": "Z"}
        results = match_bulk([record], [{"notes": "same"}])
        assert results[0].result.score == 0

    def test_all_empty_row_matches_first_record(self, two_planet_catalog, kepler_record):
        results = match_bulk(two_planet_catalog, [{}])
        assert results[0].result.matched_record is kepler_record
        assert results[0].result.score == 0

    def test_empty_rows_list(self, two_planet_catalog):
        assert match_bulk(two_planet_catalog, []) == ()

    def test_same_as_single_path(self, two_planet_catalog):
        row = {"planetName": "trappist-1E", "radius": "2.4"}
        bulk = match_bulk(two_planet_catalog, [row])[0].result
        assert bulk == match_single(two_planet_catalog, row)

    @pytest.mark.parametrize("rows", ["planetName\nA", b"raw", {"planetName": "A"}, None, 42])
    def test_non_sequence_input_is_malformed(self, two_planet_catalog, rows):
        with pytest.raises(MalformedBulkInput):
            match_bulk(two_planet_catalog, rows)

    def test_non_mapping_row_is_malformed(self, two_planet_catalog):
        with pytest.raises(MalformedBulkInput, match="Row 2"):
            match_bulk(two_planet_catalog, [{"planetName": "A"}, ["A"]])

    def test_min_score_forwarded(self, two_planet_catalog):
        results = match_bulk(
            two_planet_catalog, [{"planetName": "kepler-22b"}, {"planetName": "x"}], min_score=1
        )
        assert results[0].result.ok
        assert results[1].result.error is MatchError.NO_MATCH_FOUND
