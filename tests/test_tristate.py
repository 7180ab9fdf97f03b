"""Tests for the TriState three-valued result."""

import pytest

from mensura_shapes import TriState


class TestTriState:
    """Tests for conversions and truth testing."""

    def test_from_bool(self) -> None:
        """Booleans map to TRUE / FALSE."""
        assert TriState.from_bool(True) is TriState.TRUE
        assert TriState.from_bool(False) is TriState.FALSE

    def test_from_optional(self) -> None:
        """None maps to UNKNOWN."""
        assert TriState.from_optional(None) is TriState.UNKNOWN
        assert TriState.from_optional(True) is TriState.TRUE
        assert TriState.from_optional(False) is TriState.FALSE

    @pytest.mark.parametrize("state", list(TriState))
    def test_optional_round_trip(self, state: TriState) -> None:
        """to_optional and from_optional are inverses."""
        assert TriState.from_optional(state.to_optional()) is state

    def test_is_known(self) -> None:
        """Only UNKNOWN is not known."""
        assert TriState.TRUE.is_known
        assert TriState.FALSE.is_known
        assert not TriState.UNKNOWN.is_known

    def test_truth_value_of_known_states(self) -> None:
        """TRUE and FALSE behave like booleans."""
        assert bool(TriState.TRUE) is True
        assert bool(TriState.FALSE) is False

    def test_unknown_has_no_truth_value(self) -> None:
        """UNKNOWN refuses to be read as a boolean."""
        with pytest.raises(ValueError, match="no truth value"):
            bool(TriState.UNKNOWN)

    def test_values(self) -> None:
        """String values are stable."""
        assert [state.value for state in TriState] == ["true", "false", "unknown"]
