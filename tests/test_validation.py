"""Tests for tool argument validation."""

import pytest

from cfbd_stats_mcp.core.errors import InvalidArgumentsError
from cfbd_stats_mcp.utils.validation import (
    validate_optional_string,
    validate_team,
    validate_tool_arguments,
    validate_year,
)


class TestValidateTeam:
    """Tests for the validate_team function."""

    def test_valid_team_is_stripped(self) -> None:
        """Test that a valid team is returned without surrounding spaces."""
        assert validate_team("  Oklahoma ") == "Oklahoma"

    def test_missing_team(self) -> None:
        """Test that a missing team is rejected."""
        with pytest.raises(InvalidArgumentsError, match="Missing required argument: team"):
            validate_team(None)

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_team(self, value: str) -> None:
        """Test that a blank team is rejected."""
        with pytest.raises(InvalidArgumentsError, match="must not be empty"):
            validate_team(value)

    def test_non_string_team(self) -> None:
        """Test that a non-string team is rejected."""
        with pytest.raises(InvalidArgumentsError, match="must be a string"):
            validate_team(42)


class TestValidateYear:
    """Tests for the validate_year function."""

    def test_none_is_allowed(self) -> None:
        """Test that an omitted year stays None."""
        assert validate_year(None) is None

    @pytest.mark.parametrize("value", [2024, 2024.0, "2024", " 2024 "])
    def test_whole_numbers_are_coerced(self, value: object) -> None:
        """Test that ints, integral floats and digit strings become ints."""
        assert validate_year(value) == 2024

    @pytest.mark.parametrize("value", [2024.5, "twenty", "", [2024], True])
    def test_invalid_years(self, value: object) -> None:
        """Test that non-integral values and booleans are rejected."""
        with pytest.raises(InvalidArgumentsError):
            validate_year(value)


class TestValidateOptionalString:
    """Tests for the validate_optional_string function."""

    def test_none_and_blank_become_none(self) -> None:
        """Test that omitted or blank filters are treated as absent."""
        assert validate_optional_string("position", None) is None
        assert validate_optional_string("position", "  ") is None

    def test_value_is_stripped(self) -> None:
        """Test that a filter value is stripped."""
        assert validate_optional_string("position", " QB ") == "QB"

    def test_non_string_rejected(self) -> None:
        """Test that a non-string filter names the argument in the error."""
        with pytest.raises(InvalidArgumentsError, match="'category'"):
            validate_optional_string("category", 5)


class TestValidateToolArguments:
    """Tests for the validate_tool_arguments function."""

    def test_team_and_year_only(self) -> None:
        """Test the result for a tool without a sub-filter."""
        result = validate_tool_arguments({"team": "OU", "year": 2023, "extra": 1})
        assert result == {"team": "OU", "year": 2023}

    def test_with_filter(self) -> None:
        """Test that the tool's filter argument is included."""
        result = validate_tool_arguments({"team": "OU", "position": "QB"}, "position")
        assert result == {"team": "OU", "year": None, "position": "QB"}

    def test_filter_defaults_to_none(self) -> None:
        """Test that a missing filter is reported as None."""
        result = validate_tool_arguments({"team": "OU"}, "category")
        assert result["category"] is None

    def test_none_arguments_missing_team(self) -> None:
        """Test that absent arguments fail on the required team."""
        with pytest.raises(InvalidArgumentsError, match="team"):
            validate_tool_arguments(None)

    def test_non_mapping_arguments(self) -> None:
        """Test that a non-object argument payload is rejected."""
        with pytest.raises(InvalidArgumentsError, match="must be an object"):
            validate_tool_arguments(["Oklahoma"])  # type: ignore[arg-type]
