"""
Tests for the command-line entry points (argument parsing only).
"""
import pytest

import dev_game
from games.FruitFall import config
from games.FruitFall.main import build_parser


class TestFruitFallParser:
    """Test options built from FruitFallMode.get_arguments()."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.resolution == f"{config.PLAYFIELD_WIDTH}x{config.PLAYFIELD_HEIGHT}"
        assert args.fps == config.TICK_RATE
        assert args.lives == config.STARTING_LIVES
        assert args.seed is None
        assert args.log_level is None
        assert not args.fullscreen

    def test_game_options(self):
        args = build_parser().parse_args(
            ['--lives', '3', '--seed', '7', '--assets-dir', '/tmp/a', '--log-level', 'DEBUG'])
        assert args.lives == 3
        assert args.seed == 7
        assert args.assets_dir == '/tmp/a'
        assert args.log_level == 'DEBUG'

    def test_bad_log_level_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['--log-level', 'LOUD'])

    @pytest.mark.parametrize("lives", ['0', '-1', 'many'])
    def test_bad_lives_rejected(self, lives):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['--lives', lives])


class TestDevGame:
    """Test the development launcher."""

    def test_list(self, capsys):
        assert dev_game.main(['--list']) == 0
        out = capsys.readouterr().out
        assert "fruitfall" in out
        assert "--lives" in out

    def test_no_game_prints_help(self, capsys):
        assert dev_game.main([]) == 1

    def test_unknown_game_rejected(self):
        with pytest.raises(SystemExit):
            dev_game.main(['tetris'])
