"""Tests for the status model and its transition function."""

from __future__ import annotations

import pytest

from bloomcodec import STATUS_EMOJI, Status, advance


class TestStatus:
    """Test the fixed numeric assignment."""

    def test_numeric_values_are_fixed(self) -> None:
        """Numeric values are part of the wire format."""
        assert Status.UNCOLLECTED == 0
        assert Status.SEEDLING == 1
        assert Status.GROWING == 2
        assert Status.COLLECTED == 3
        assert len(Status) == 4

    def test_emoji_legend_covers_every_status(self) -> None:
        """Every status has a legend entry."""
        assert set(STATUS_EMOJI) == set(Status)

    def test_emoji_legend_follows_cycle(self) -> None:
        """The legend reads cross, herb, egg, check along the cycle."""
        assert [STATUS_EMOJI[status] for status in Status] == [
            "\u274c",
            "\U0001f33f",
            "\U0001f95a",
            "\u2705",
        ]


class TestAdvance:
    """Test the collection cycle."""

    @pytest.mark.parametrize(
        ("current", "expected"),
        [
            (Status.UNCOLLECTED, Status.SEEDLING),
            (Status.SEEDLING, Status.GROWING),
            (Status.GROWING, Status.COLLECTED),
            (Status.COLLECTED, Status.UNCOLLECTED),
        ],
    )
    def test_next_status(self, current: Status, expected: Status) -> None:
        """Each status moves to the next one in the cycle."""
        assert advance(current) is expected

    @pytest.mark.parametrize("status", list(Status))
    def test_four_steps_return_to_start(self, status: Status) -> None:
        """Applying advance four times closes the cycle."""
        result = status
        for _ in range(4):
            result = advance(result)
        assert result is status

    @pytest.mark.parametrize("status", list(Status))
    def test_one_step_always_changes(self, status: Status) -> None:
        """A single advance never returns the same status."""
        assert advance(status) is not status

    def test_accepts_plain_int(self) -> None:
        """Raw numeric statuses are coerced."""
        assert advance(2) is Status.COLLECTED  # type: ignore[arg-type]
