# src/game.py
# Jogo principal da cobrinha:
# - um evento de timer (pygame.time.set_timer) a cada TICK_MS dispara advance() + redesenho
# - handlers registrados explicitamente por tipo de evento (register), sem subclasses de listener
# - ao chegar em game over o timer é cancelado; a janela fica aberta até fechar/ESC
#
import random
import pygame

from src.snake import GameState
from src.renderer import Renderer, TILE_SIZE
from src.controls import handle_key

# ----------------- Configurações -----------------
BOARD_WIDTH = 600
BOARD_HEIGHT = 600
TICK_MS = 100
FPS = 60
CAPTION = "Snake"

TICK_EVENT = pygame.USEREVENT + 1


class Game:
    def __init__(self, board_width=BOARD_WIDTH, board_height=BOARD_HEIGHT,
                 tile_size=TILE_SIZE, tick_ms=TICK_MS, seed=None):
        pygame.init()

        # janela e clock
        self.board_width = board_width
        self.board_height = board_height
        self.screen = pygame.display.set_mode((board_width, board_height))
        pygame.display.set_caption(CAPTION)
        self.clock = pygame.time.Clock()
        self.running = True

        self.tick_ms = tick_ms
        self.ticking = False
        self.paused = False
        self.dirty = True  # precisa redesenhar

        # ----------------- game state -----------------
        cols = board_width // tile_size
        rows = board_height // tile_size
        self.state = GameState(cols, rows, rng=random.Random(seed))
        self.renderer = Renderer(tile_size=tile_size)

        # event type -> callback
        self.handlers = {}
        self.register(pygame.QUIT, self.on_quit)
        self.register(pygame.KEYDOWN, self.on_key)
        self.register(TICK_EVENT, self.on_tick)

        print(f"Novo jogo: {cols}x{rows} células, tick de {tick_ms}ms")
        self.start_timer()

    # ----------------- event dispatch -----------------
    def register(self, event_type, callback):
        self.handlers[event_type] = callback

    def dispatch(self, event):
        handler = self.handlers.get(event.type)
        if handler is not None:
            handler(event)

    # ----------------- timer -----------------
    def start_timer(self):
        if self.ticking or self.state.game_over:
            return
        pygame.time.set_timer(TICK_EVENT, self.tick_ms)
        self.ticking = True

    def stop_timer(self):
        pygame.time.set_timer(TICK_EVENT, 0)
        self.ticking = False

    # ----------------- main loop -----------------
    def run(self):
        while self.running:
            self.clock.tick(FPS)

            for event in pygame.event.get():
                self.dispatch(event)

            if self.dirty and self.running:
                self.draw()

        self.quit()

    # ----------------- handlers -----------------
    def on_quit(self, event=None):
        self.running = False

    def on_tick(self, event=None):
        # eventos de tick que já estavam na fila quando pausamos/acabou são descartados
        if not self.ticking or self.paused:
            return
        self.state.advance()
        self.dirty = True
        if self.state.game_over:
            self.stop_timer()
            print(f"Game over! Score final: {self.state.score}")

    def on_key(self, event):
        key = event.key
        if key in (pygame.K_p, pygame.K_ESCAPE):
            if self.state.game_over:
                if key == pygame.K_ESCAPE:
                    self.running = False
                return
            self.toggle_pause()
            return
        if key == pygame.K_g:
            self.renderer.show_grid = not self.renderer.show_grid
            self.dirty = True
            return
        if not self.paused and not self.state.game_over:
            handle_key(self.state, key)

    def toggle_pause(self):
        self.paused = not self.paused
        if self.paused:
            self.stop_timer()
        else:
            self.start_timer()
        self.dirty = True

    # ----------------- draw -----------------
    def draw(self):
        self.renderer.draw(self.screen, self.state, paused=self.paused)
        pygame.display.set_caption(f"{CAPTION} — Score: {self.state.score}")
        pygame.display.flip()
        self.dirty = False

    def quit(self):
        self.stop_timer()
        pygame.quit()
