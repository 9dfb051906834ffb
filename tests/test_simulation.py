"""Tests for the simulation driver: display, player and game loop."""

import io

import pytest

from lifegrid.core.conway import RuleEngine, default_engine
from lifegrid.core.grid import Grid
from lifegrid.simulation.display import format_grid
from lifegrid.simulation.game import SEPARATOR, Game
from lifegrid.simulation.player import Player

BLINKER = [(2, 1), (2, 2), (2, 3)]


class CountingStrategy:
    """Strategy stub recording how often it was applied."""

    def __init__(self):
        self.calls = 0

    def apply_to(self, grid):
        self.calls += 1
        return grid.count_alive()


class TestDisplay:
    """Test character-grid formatting."""

    def test_default_glyphs(self):
        grid = Grid.from_coordinates(2, 3, [(0, 1), (1, 2)])
        assert format_grid(grid) == "  " + " *" + "  " + "\n" + "  " + "  " + " *"

    def test_one_line_per_first_axis_value(self):
        """Non-square grids print width lines of height cells."""
        grid = Grid.from_coordinates(4, 2, [(3, 0)])
        lines = format_grid(grid, alive="#", dead=".").split("\n")
        assert lines == ["..", "..", "..", "#."]

    def test_custom_glyphs(self):
        grid = Grid.from_coordinates(3, 3, [(1, 1)])
        assert format_grid(grid, alive="X", dead=".") == "...\n.X.\n..."


class TestPlayer:
    """Test player strategy handling."""

    def test_default_strategy(self):
        assert Player().strategy is default_engine

    def test_play_applies_strategy_once(self):
        strategy = CountingStrategy()
        player = Player(strategy)
        player.play(Grid.empty(3, 3))
        assert strategy.calls == 1

    def test_set_strategy(self):
        player = Player()
        strategy = CountingStrategy()
        player.set_strategy(strategy)
        player.play(Grid.empty(3, 3))
        assert player.strategy is strategy
        assert strategy.calls == 1

    def test_play_returns_alive_count(self):
        grid = Grid.from_coordinates(5, 5, BLINKER)
        assert Player(RuleEngine()).play(grid) == 3


class TestGame:
    """Test the game driver."""

    def test_default_board(self):
        game = Game()
        assert (game.grid.width, game.grid.height) == (10, 10)
        assert game.generation == 0

    def test_board_dimensions(self):
        game = Game(width=7, height=4)
        assert (game.grid.width, game.grid.height) == (7, 4)

    def test_invalid_dimensions(self):
        with pytest.raises(ValueError):
            Game(width=0, height=4)

    def test_play_round(self):
        grid = Grid.from_coordinates(5, 5, BLINKER)
        game = Game(grid=grid)

        assert game.play_round() == 3
        assert game.generation == 1
        assert grid.alive_coordinates() == [(1, 2), (2, 2), (3, 2)]

    def test_render(self):
        game = Game(grid=Grid.from_coordinates(3, 3, [(1, 1)]))
        assert game.render() == format_grid(game.grid)

    def test_show_board(self):
        game = Game(grid=Grid.from_coordinates(3, 3, [(1, 1)]))
        out = io.StringIO()
        game.show_board(out)
        assert out.getvalue() == SEPARATOR + "\n" + game.render() + "\n"

    def test_loop_writes_frames(self):
        """Each frame prints a header and the board before the round."""
        game = Game(grid=Grid.from_coordinates(5, 5, BLINKER))
        out = io.StringIO()

        alive = game.loop(2, out=out)

        text = out.getvalue()
        assert alive == 3
        assert game.generation == 2
        assert "Frame 1:" in text and "Frame 2:" in text
        assert "Frame 3:" not in text
        assert text.count(SEPARATOR) == 2
        assert game.grid.alive_coordinates() == BLINKER

    def test_loop_zero_generations(self):
        game = Game(grid=Grid.from_coordinates(5, 5, BLINKER))
        out = io.StringIO()
        assert game.loop(0, out=out) == 3
        assert out.getvalue() == ""

    def test_loop_negative_generations(self):
        with pytest.raises(ValueError, match="generations"):
            Game().loop(-1, out=io.StringIO())

    def test_loop_delay(self, monkeypatch):
        """Delay is slept once per frame."""
        sleeps = []
        monkeypatch.setattr("lifegrid.simulation.game.time.sleep", sleeps.append)

        Game(grid=Grid.empty(3, 3)).loop(3, delay=0.25, out=io.StringIO())
        assert sleeps == [0.25, 0.25, 0.25]

    def test_loop_without_delay_does_not_sleep(self, monkeypatch):
        sleeps = []
        monkeypatch.setattr("lifegrid.simulation.game.time.sleep", sleeps.append)

        Game(grid=Grid.empty(3, 3)).loop(3, out=io.StringIO())
        assert sleeps == []
