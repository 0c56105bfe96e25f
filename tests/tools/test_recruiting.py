"""Tests for the recruiting tools."""

from typing import Any

import pytest

from cfbd_stats_mcp.core.models import FetchFailure, FetchSuccess, Recruit
from cfbd_stats_mcp.data.fetcher import StatisticFetcher
from cfbd_stats_mcp.tools.recruiting import (
    get_recruiting_rankings_impl,
    get_recruits_impl,
    reshape_recruiting_rankings,
    reshape_recruits,
    summarize_recruit,
)


class TestReshapeRecruitingRankings:
    """Tests for the reshape_recruiting_rankings function."""

    def test_unwraps_first_record(self) -> None:
        """Test that the class ranking record is returned verbatim."""
        record = {"year": 2025, "rank": 4, "team": "Texas", "points": 301.2}
        assert reshape_recruiting_rankings([record], "Texas") == {"ranking": record}


class TestSummarizeRecruit:
    """Tests for the summarize_recruit function."""

    def test_full_record(self, sample_recruits: list[dict[str, Any]]) -> None:
        """Test the field mapping for a complete record."""
        summary = summarize_recruit(Recruit.model_validate(sample_recruits[0]))
        assert summary == {
            "name": "Five Star",
            "position": "QB",
            "hometown": "Austin, TX",
            "high_school": "Westlake",
            "stars": 5,
            "rating": 0.9912,
            "rank_overall": 3,
            "rank_position": 1,
            "rank_state": 1,
            "height": 75,
            "weight": 210,
        }

    def test_sparse_record(self) -> None:
        """Test the defaults for missing fields."""
        summary = summarize_recruit(Recruit.model_validate({"name": "Walk On", "stateProvince": "OK"}))
        assert summary["hometown"] == "OK"
        assert summary["high_school"] == "Unknown"
        assert summary["stars"] == 0
        assert summary["rating"] == 0
        assert summary["rank_overall"] is None
        assert summary["height"] is None


class TestReshapeRecruits:
    """Tests for the reshape_recruits function."""

    def test_star_partition(self, sample_recruits: list[dict[str, Any]]) -> None:
        """Test that the star subsets match exact ratings only."""
        data = reshape_recruits(sample_recruits, "Texas")
        assert data["total_commits"] == 5
        assert len(data["five_stars"]) == 1
        assert len(data["four_stars"]) == 2
        assert len(data["three_stars"]) == 1
        assert len(data["all_recruits"]) == 5

    def test_star_subsets_hold_raw_records(
        self, sample_recruits: list[dict[str, Any]]
    ) -> None:
        """Test that subsets keep the upstream field names."""
        data = reshape_recruits(sample_recruits, "Texas")
        assert data["five_stars"][0] is sample_recruits[0]
        assert "stateProvince" in data["five_stars"][0]

    def test_unrated_recruits_only_in_full_list(self) -> None:
        """Test that recruits without stars are counted but not partitioned."""
        data = reshape_recruits([{"name": "Mystery"}], "Texas")
        assert data["total_commits"] == 1
        assert data["five_stars"] == data["four_stars"] == data["three_stars"] == []
        assert data["all_recruits"][0]["stars"] == 0


class TestRecruitingImpls:
    """Tests for the recruiting tool implementations."""

    @pytest.mark.asyncio
    async def test_rankings_query(self, fetcher: StatisticFetcher, upstream: Any) -> None:
        """Test the class ranking lookup."""
        upstream.response = [{"rank": 1, "team": "Alabama"}]
        result = await get_recruiting_rankings_impl(fetcher, "crimson tide", 2025)

        assert isinstance(result, FetchSuccess)
        assert result.data == {"ranking": {"rank": 1, "team": "Alabama"}}
        assert upstream.calls == [("/recruiting/teams", {"year": 2025, "team": "Alabama"})]

    @pytest.mark.asyncio
    async def test_recruits_position_filter(
        self,
        fetcher: StatisticFetcher,
        upstream: Any,
        sample_recruits: list[dict[str, Any]],
    ) -> None:
        """Test that the position filter is sent upstream."""
        upstream.response = sample_recruits[:1]
        result = await get_recruits_impl(fetcher, "Texas", 2025, position="QB")

        assert isinstance(result, FetchSuccess)
        assert upstream.calls[0][1] == {"year": 2025, "team": "Texas", "position": "QB"}

    @pytest.mark.asyncio
    async def test_no_recruits_at_position(
        self, fetcher: StatisticFetcher, upstream: Any
    ) -> None:
        """Test the message when no recruits match the position."""
        upstream.response = []
        result = await get_recruits_impl(fetcher, "Texas", 2025, position="LS")
        assert isinstance(result, FetchFailure)
        assert result.message == "No recruits found for Texas in 2025 at LS"
