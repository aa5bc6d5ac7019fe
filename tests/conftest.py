"""Shared fixtures and helpers for the test suite."""

from collections import deque

import pytest

from term_snake.config import GameConfig
from term_snake.engine import Game
from term_snake.grid import Cell
from term_snake.position import Position


def put_food(game: Game, row: int, col: int, food_time: int = 50) -> Position:
    """Place the single food item at a known cell."""
    if game.food.position is not None:
        game.grid.set(game.food.position, Cell.BLANK)
    pos = Position(row, col)
    game.grid.set(pos, Cell.FOOD)
    game.food.position = pos
    game.food.food_time = food_time
    return pos


def place_snake(game: Game, cells: list[tuple[int, int]]) -> None:
    """Replace the snake with one occupying *cells*, head first."""
    game.grid.cells[game.grid.cells == Cell.BODY] = Cell.BLANK
    game.snake.body = deque(Position(r, c) for r, c in cells)
    for pos in game.snake.body:
        game.grid.set(pos, Cell.BODY)
    game.length = len(cells)


@pytest.fixture
def small_game() -> Game:
    """A 5×5 game with food parked in the top-left corner."""
    game = Game(GameConfig(rows=5, cols=5, seed=0))
    put_food(game, 0, 0)
    return game
