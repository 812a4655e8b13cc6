"""
Tests for the GameSession state machine.
"""
import pytest

from arcade_core.games import GameState
from games.FruitFall.session import GameSession


@pytest.fixture
def session():
    return GameSession(starting_lives=5)


class TestTransitions:
    """Test which commands are valid in which phase."""

    def test_starts_ready(self, session):
        assert session.phase == GameState.READY
        assert session.lives == 5
        assert session.score == 0
        assert session.started_at is None

    def test_start_from_ready(self, session):
        assert session.start(3.0)
        assert session.phase == GameState.PLAYING
        assert session.started_at == 3.0

    def test_start_resets_score_and_lives(self, session):
        session.score = 12
        session.lives = 1
        session.start(0.0)
        assert session.score == 0
        assert session.lives == 5

    def test_start_ignored_while_playing(self, session):
        session.start(1.0)
        session.add_points()
        assert not session.start(2.0)
        assert session.score == 1
        assert session.started_at == 1.0

    def test_pause_only_from_playing(self, session):
        assert not session.pause()
        session.start(0.0)
        assert session.pause()
        assert session.phase == GameState.PAUSED

    def test_pause_is_dead_end(self, session):
        """Neither start nor pause leaves PAUSED; only reset does."""
        session.start(0.0)
        session.pause()
        assert not session.start(1.0)
        assert not session.pause()
        assert session.phase == GameState.PAUSED
        assert session.reset()
        assert session.phase == GameState.READY

    @pytest.mark.parametrize("setup", ["ready", "playing", "paused", "game_over"])
    def test_reset_from_any_phase(self, session, setup):
        if setup != "ready":
            session.start(0.0)
        if setup == "paused":
            session.pause()
        elif setup == "game_over":
            for _ in range(5):
                session.lose_life()
        session.reset()
        assert session.phase == GameState.READY
        assert session.started_at is None

    def test_reset_keeps_last_score_on_display(self, session):
        session.start(0.0)
        session.add_points(3)
        session.reset()
        assert session.score == 3


class TestLives:
    """Test life loss and game over."""

    def test_lose_life(self, session):
        session.start(0.0)
        assert not session.lose_life()
        assert session.lives == 4
        assert session.phase == GameState.PLAYING

    def test_last_life_ends_game(self):
        session = GameSession(starting_lives=1)
        session.start(0.0)
        assert session.lose_life()
        assert session.lives == 0
        assert session.phase == GameState.GAME_OVER

    def test_lives_never_negative(self):
        session = GameSession(starting_lives=1)
        session.start(0.0)
        session.lose_life()
        assert not session.lose_life()
        assert session.lives == 0

    @pytest.mark.parametrize("lives", [0, -1])
    def test_starting_lives_must_be_positive(self, lives):
        with pytest.raises(ValueError):
            GameSession(starting_lives=lives)

    def test_add_points(self, session):
        session.start(0.0)
        assert session.add_points() == 1
        assert session.add_points(4) == 5
        assert session.score == 5
