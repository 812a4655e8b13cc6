"""
Tests for HudData validation and formatting.
"""
import pytest
from pydantic import ValidationError

from models.fruitfall import GameState, HudData


class TestHudLines:
    """Test the four display lines."""

    def test_default_lines(self):
        assert HudData().lines() == [
            "Score: 0",
            "Lives: 0",
            "State: ready",
            "Speed factor: 1.0x",
        ]

    @pytest.mark.parametrize("multiplier, text", [
        (0.5, "0.5x"),
        (1.2, "1.2x"),
        (1.25, "1.2x"),
        (2.96, "3.0x"),
        (3.0, "3.0x"),
    ])
    def test_speed_has_one_decimal(self, multiplier, text):
        hud = HudData(speed_multiplier=multiplier)
        assert hud.lines()[-1] == f"Speed factor: {text}"

    def test_state_names(self):
        assert HudData(state=GameState.GAME_OVER).lines()[2] == "State: game_over"
        assert HudData(state=GameState.PAUSED).lines()[2] == "State: paused"


class TestHudValidation:
    """Test field constraints."""

    def test_negative_score_rejected(self):
        with pytest.raises(ValidationError):
            HudData(score=-1)

    def test_negative_lives_rejected(self):
        with pytest.raises(ValidationError):
            HudData(lives=-1)

    @pytest.mark.parametrize("multiplier", [0.49, 3.01, -1.0])
    def test_multiplier_out_of_range_rejected(self, multiplier):
        with pytest.raises(ValidationError):
            HudData(speed_multiplier=multiplier)

    def test_frozen(self):
        hud = HudData(score=3)
        with pytest.raises(ValidationError):
            hud.score = 4
