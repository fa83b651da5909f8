import random

import pygame

from src.controls import direction_for_key, handle_key
from src.snake import DOWN, LEFT, RIGHT, UP, GameState


def make_state():
    return GameState(20, 20, rng=random.Random(3))


def test_arrow_and_wasd_keys_map_to_directions():
    assert direction_for_key(pygame.K_UP) == UP
    assert direction_for_key(pygame.K_w) == UP
    assert direction_for_key(pygame.K_DOWN) == DOWN
    assert direction_for_key(pygame.K_s) == DOWN
    assert direction_for_key(pygame.K_LEFT) == LEFT
    assert direction_for_key(pygame.K_a) == LEFT
    assert direction_for_key(pygame.K_RIGHT) == RIGHT
    assert direction_for_key(pygame.K_d) == RIGHT


def test_handle_key_turns_the_snake():
    state = make_state()
    assert handle_key(state, pygame.K_DOWN)
    assert state.velocity == DOWN


def test_handle_key_rejects_reversal():
    state = make_state()
    assert handle_key(state, pygame.K_LEFT)
    assert state.velocity == RIGHT


def test_other_keys_are_ignored():
    state = make_state()
    for key in (pygame.K_SPACE, pygame.K_RETURN, pygame.K_q, pygame.K_g):
        assert not handle_key(state, key)
    assert state.velocity == RIGHT
