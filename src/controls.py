# src/controls.py
# Mapeamento teclado -> direção da cobra (setas ou WASD).
# Teclas que não são de direção são ignoradas sem erro.

import pygame

from src.snake import UP, DOWN, LEFT, RIGHT

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}


def direction_for_key(key):
    return KEY_DIRECTIONS.get(key)


def handle_key(state, key):
    """
    Encaminha a tecla para state.set_direction().
    Retorna True se a tecla é de direção (mesmo que a troca seja recusada por ser reversão).
    """
    direction = direction_for_key(key)
    if direction is None:
        return False
    state.set_direction(direction)
    return True
