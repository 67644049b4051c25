"""Tests for the duplicate priority scorer."""

from datetime import date

import pytest

from german_chancellors_presidents.graph.scoring import (
    FAMILY_PRIORITY,
    PARTY_MISMATCH_PENALTY,
    priority,
)

TODAY = date(2026, 6, 1)


class TestFamilyBase:
    """Base score by article family."""

    def test_known_families(self):
        assert priority("pedia", None, None, TODAY) == 1000
        assert priority("quote", None, None, TODAY) == 600
        assert priority("news", None, None, TODAY) == 500
        assert priority("voyage", None, None, TODAY) == 200

    def test_unknown_family_scores_zero(self):
        assert priority("media", None, None, TODAY) == 0

    def test_missing_family_scores_zero(self):
        assert priority(None, None, None, TODAY) == 0
        assert priority("", None, None, TODAY) == 0

    def test_pedia_beats_news_without_dates(self):
        assert priority("pedia", None, None, TODAY) > priority("news", None, None, TODAY)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            FAMILY_PRIORITY["pedia"] = 1  # type: ignore[index]


class TestPartyPenalty:
    """Penalty for party memberships starting after the term."""

    def test_party_started_after_term(self):
        score = priority("pedia", "1980-01-01T00:00:00Z", "1974-05-16T00:00:00Z", TODAY)
        assert score == 1000 - PARTY_MISMATCH_PENALTY - (2026 - 1980)

    def test_party_started_when_term_ended_is_penalized(self):
        end = "1974-05-16T00:00:00Z"
        score = priority("pedia", end, end, TODAY)
        assert score <= 1000 - PARTY_MISMATCH_PENALTY

    def test_penalized_record_below_unpenalized_same_family(self):
        penalized = priority("news", "1990-01-01T00:00:00Z", "1980-01-01T00:00:00Z", TODAY)
        plain = priority("news", "1900-01-01T00:00:00Z", "1980-01-01T00:00:00Z", TODAY)
        assert penalized < plain

    def test_no_penalty_without_end_date(self):
        score = priority("pedia", "1946-01-01T00:00:00Z", None, TODAY)
        assert score == 1000 - (2026 - 1946)


class TestRecency:
    """Older party memberships lose one point per year."""

    def test_recent_membership_preferred(self):
        old = priority("pedia", "1946-01-01T00:00:00Z", "1963-10-16T00:00:00Z", TODAY)
        recent = priority("pedia", "1950-01-01T00:00:00Z", "1963-10-16T00:00:00Z", TODAY)
        assert recent - old == 4

    def test_no_party_no_recency_term(self):
        assert priority("pedia", None, "1963-10-16T00:00:00Z", TODAY) == 1000

    def test_depends_on_reference_year(self):
        start = "2000-01-01T00:00:00Z"
        assert priority("pedia", start, None, date(2000, 1, 1)) == 1000
        assert priority("pedia", start, None, date(2010, 1, 1)) == 990
