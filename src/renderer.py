# src/renderer.py
# Desenha o GameState numa Surface do pygame:
# - comida (vermelha), cabeça e corpo (verdes) como quadrados com efeito "3D"
# - texto "Score: N" ou "Game Over: N" no canto superior esquerdo
# - grid opcional e overlay de pausa
#
# Imagens opcionais em assets/images/ (food.png, snake_head.png, snake_body.png).
# Se faltarem, usamos tiles procedurais.
#
# draw() só lê o estado; nunca altera a cobra, a comida ou a flag de game over.

import os
import pygame

ASSETS_IMAGES = os.path.join(os.path.dirname(__file__), "..", "assets", "images")
FOOD_IMAGE_PATH = os.path.join(ASSETS_IMAGES, "food.png")
HEAD_IMAGE_PATH = os.path.join(ASSETS_IMAGES, "snake_head.png")
BODY_IMAGE_PATH = os.path.join(ASSETS_IMAGES, "snake_body.png")

TILE_SIZE = 20
FONT_NAME = "arial"
FONT_SIZE = 16

BACKGROUND_COLOR = (0, 0, 0)
FOOD_COLOR = (255, 0, 0)
SNAKE_COLOR = (0, 255, 0)
TEXT_COLOR = (255, 255, 255)
GRID_COLOR = (40, 40, 40)


def shade(color, factor):
    return tuple(max(0, min(255, int(c * factor))) for c in color)


def make_raised_tile(size, color):
    """Quadrado com borda clara em cima/esquerda e escura embaixo/direita."""
    surf = pygame.Surface((size, size))
    surf.fill(color)
    light = shade(color, 1.4) if max(color) < 200 else tuple(min(255, c + 90) for c in color)
    dark = shade(color, 0.55)
    last = size - 1
    pygame.draw.line(surf, light, (0, 0), (last, 0))
    pygame.draw.line(surf, light, (0, 0), (0, last))
    pygame.draw.line(surf, dark, (0, last), (last, last))
    pygame.draw.line(surf, dark, (last, 0), (last, last))
    return surf


def load_tile_image(path, size, fallback_color):
    if os.path.isfile(path):
        try:
            img = pygame.image.load(path).convert_alpha()
            return pygame.transform.smoothscale(img, (size, size))
        except Exception as e:
            print(f"Aviso: falha ao carregar {path}: {e}")
    return make_raised_tile(size, fallback_color)


class Renderer:
    def __init__(self, tile_size=TILE_SIZE, show_grid=False):
        self.tile_size = tile_size
        self.show_grid = show_grid

        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        self.font_big = pygame.font.SysFont(FONT_NAME, 32, bold=True)

        self.food_tile = load_tile_image(FOOD_IMAGE_PATH, tile_size, FOOD_COLOR)
        self.head_tile = load_tile_image(HEAD_IMAGE_PATH, tile_size, SNAKE_COLOR)
        self.body_tile = load_tile_image(BODY_IMAGE_PATH, tile_size, SNAKE_COLOR)

    def tile_rect(self, tile):
        return pygame.Rect(tile.x * self.tile_size, tile.y * self.tile_size,
                           self.tile_size, self.tile_size)

    def draw(self, surface, state, paused=False):
        surface.fill(BACKGROUND_COLOR)

        if self.show_grid:
            self._draw_grid(surface, state)

        if state.food is not None:
            surface.blit(self.food_tile, self.tile_rect(state.food))

        # a cabeça pode estar fora do tabuleiro no tick do game over; blit só recorta
        surface.blit(self.head_tile, self.tile_rect(state.head))
        for part in state.body:
            surface.blit(self.body_tile, self.tile_rect(part))

        self._draw_label(surface, state)

        if paused and not state.game_over:
            self._draw_pause_overlay(surface)

    def label_text(self, state):
        if state.game_over:
            return f"Game Over: {state.score}"
        return f"Score: {state.score}"

    def _draw_label(self, surface, state):
        text = self.font.render(self.label_text(state), True, TEXT_COLOR)
        surface.blit(text, (self.tile_size - 16, self.tile_size - text.get_height() + 4))

    def _draw_grid(self, surface, state):
        width = state.cols * self.tile_size
        height = state.rows * self.tile_size
        for i in range(state.cols + 1):
            x = i * self.tile_size
            pygame.draw.line(surface, GRID_COLOR, (x, 0), (x, height))
        for j in range(state.rows + 1):
            y = j * self.tile_size
            pygame.draw.line(surface, GRID_COLOR, (0, y), (width, y))

    def _draw_pause_overlay(self, surface):
        w, h = surface.get_size()
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))
        surface.blit(overlay, (0, 0))
        text = self.font_big.render("PAUSADO", True, TEXT_COLOR)
        surface.blit(text, text.get_rect(center=(w // 2, h // 2)))
