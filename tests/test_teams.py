"""Tests for team name normalization."""

import pytest

from cfbd_stats_mcp.utils.teams import TEAM_ALIASES, normalize_team_name


class TestNormalizeTeamName:
    """Tests for the normalize_team_name function."""

    @pytest.mark.parametrize("alias", ["OU", "ou", "Sooners", "oklahoma", "OKLAHOMA"])
    def test_oklahoma_aliases(self, alias: str) -> None:
        """Test that every Oklahoma alias maps to the canonical name."""
        assert normalize_team_name(alias) == "Oklahoma"

    @pytest.mark.parametrize(
        "alias,expected",
        [
            ("Longhorns", "Texas"),
            ("crimson tide", "Alabama"),
            ("Bulldogs", "Georgia"),
            ("Buckeyes", "Ohio State"),
            ("ohio state", "Ohio State"),
            ("Wolverines", "Michigan"),
        ],
    )
    def test_mascot_aliases(self, alias: str, expected: str) -> None:
        """Test that mascots map to their schools."""
        assert normalize_team_name(alias) == expected

    def test_unknown_name_passes_through(self) -> None:
        """Test that an unknown team is returned unchanged."""
        assert normalize_team_name("Texas A&M") == "Texas A&M"

    def test_surrounding_whitespace_is_removed(self) -> None:
        """Test that whitespace is trimmed before lookup and on pass-through."""
        assert normalize_team_name("  sooners ") == "Oklahoma"
        assert normalize_team_name(" Baylor ") == "Baylor"

    @pytest.mark.parametrize("name", ["OU", "Longhorns", "Texas A&M", "Ohio State"])
    def test_idempotent(self, name: str) -> None:
        """Test that normalizing twice gives the same result as once."""
        once = normalize_team_name(name)
        assert normalize_team_name(once) == once

    def test_aliases_are_read_only(self) -> None:
        """Test that the alias table cannot be modified."""
        with pytest.raises(TypeError):
            TEAM_ALIASES["tigers"] = "LSU"  # type: ignore[index]
