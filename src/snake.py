# src/snake.py
# Estado do jogo da cobrinha, sem dependência de pygame:
# - Tile: coordenada inteira no grid (uma célula)
# - GameState: cabeça, corpo, comida, velocidade e flag de game over
#
# advance() é chamado uma vez por tick; set_direction() quando chega uma tecla.
# Nada aqui levanta exceção: estados inválidos apenas marcam game over.

import random
from collections import namedtuple

Tile = namedtuple("Tile", ["x", "y"])

UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

START_HEAD = (5, 5)
START_VELOCITY = RIGHT


def opposite(direction):
    return (-direction[0], -direction[1])


class GameState:
    def __init__(self, cols, rows, rng=None, head=START_HEAD, velocity=START_VELOCITY):
        """
        cols, rows: tamanho do tabuleiro em células
        rng: instância de random.Random (opcional, útil para testes com seed)
        head: posição inicial da cabeça
        velocity: vetor unitário inicial (vx, vy)
        """
        self.cols = int(cols)
        self.rows = int(rows)
        self.rng = rng if rng is not None else random.Random()

        self.head = Tile(*head)
        self.body = []  # body[0] é o segmento colado na cabeça
        self.velocity = tuple(velocity)
        # velocidade usada no último advance(); evita reverter com duas teclas no mesmo tick
        self._last_step = self.velocity
        self.game_over = False

        self.food = None
        self.place_food()

    @property
    def score(self):
        return len(self.body)

    def occupied(self):
        return {self.head, *self.body}

    def free_tiles(self, exclude=()):
        taken = self.occupied() | set(exclude)
        return [Tile(x, y) for y in range(self.rows) for x in range(self.cols)
                if (x, y) not in taken]

    def in_bounds(self, tile):
        return 0 <= tile.x < self.cols and 0 <= tile.y < self.rows

    def place_food(self, exclude=()):
        """
        Sorteia a comida numa célula livre (uniforme). Tabuleiro cheio -> food = None.
        exclude: células extras proibidas (ex.: para onde a cabeça vai neste tick)
        """
        free = self.free_tiles(exclude)
        self.food = self.rng.choice(free) if free else None
        return self.food

    def set_direction(self, direction):
        """Troca a velocidade, exceto para o sentido oposto. Valores desconhecidos são ignorados."""
        if direction not in DIRECTIONS:
            return False
        direction = tuple(direction)
        if direction == opposite(self.velocity) or direction == opposite(self._last_step):
            return False
        self.velocity = direction
        return True

    def advance(self):
        """Um tick: come, arrasta o corpo, move a cabeça e verifica colisões."""
        if self.game_over:
            return

        # comeu? novo segmento de cauda na posição antiga da comida
        if self.food is not None and self.head == self.food:
            self.body.append(Tile(self.food.x, self.food.y))
            vx, vy = self.velocity
            self.place_food(exclude=(Tile(self.head.x + vx, self.head.y + vy),))

        # cada segmento assume a posição do anterior (da cauda para a cabeça)
        for i in range(len(self.body) - 1, 0, -1):
            self.body[i] = self.body[i - 1]
        if self.body:
            self.body[0] = self.head

        vx, vy = self.velocity
        self.head = Tile(self.head.x + vx, self.head.y + vy)
        self._last_step = self.velocity

        if self.head in self.body or not self.in_bounds(self.head):
            self.game_over = True
