import random

import pygame
import pytest

from src.renderer import FOOD_COLOR, SNAKE_COLOR, Renderer
from src.snake import GameState, Tile

TILE = 20


@pytest.fixture
def renderer():
    pygame.font.init()
    yield Renderer(tile_size=TILE)


@pytest.fixture
def state():
    s = GameState(20, 20, rng=random.Random(1))
    s.food = Tile(10, 10)
    s.body = [Tile(4, 5), Tile(3, 5)]
    return s


def center_color(surface, tile):
    return tuple(surface.get_at((tile.x * TILE + TILE // 2, tile.y * TILE + TILE // 2)))[:3]


def test_draws_food_head_and_body(renderer, state):
    surface = pygame.Surface((400, 400))
    renderer.draw(surface, state)
    assert center_color(surface, state.food) == FOOD_COLOR
    assert center_color(surface, state.head) == SNAKE_COLOR
    for part in state.body:
        assert center_color(surface, part) == SNAKE_COLOR
    assert center_color(surface, Tile(15, 15)) == (0, 0, 0)


def test_draw_does_not_touch_state(renderer, state):
    snapshot = (state.head, list(state.body), state.food, state.velocity, state.game_over)
    surface = pygame.Surface((400, 400))
    renderer.show_grid = True
    renderer.draw(surface, state, paused=True)
    assert (state.head, state.body, state.food, state.velocity, state.game_over) == snapshot


def test_label_shows_score_then_game_over(renderer, state):
    assert renderer.label_text(state) == "Score: 2"
    state.game_over = True
    assert renderer.label_text(state) == "Game Over: 2"


def test_head_outside_board_is_clipped(renderer, state):
    state.head = Tile(20, 5)
    state.game_over = True
    surface = pygame.Surface((400, 400))
    renderer.draw(surface, state)
    assert center_color(surface, state.food) == FOOD_COLOR
