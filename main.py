
# Ponto de entrada do jogo
# Uso: python main.py [LARGURA ALTURA]   (em pixels; padrão 600x600)

import sys

from src.game import Game, BOARD_WIDTH, BOARD_HEIGHT
from src.renderer import TILE_SIZE
from src.snake import START_HEAD

# a cabeça começa em START_HEAD andando para a direita: precisa caber e ter um passo livre
MIN_WIDTH = (START_HEAD[0] + 2) * TILE_SIZE
MIN_HEIGHT = (START_HEAD[1] + 1) * TILE_SIZE


def parse_board_size(argv):
    if len(argv) < 2:
        return BOARD_WIDTH, BOARD_HEIGHT
    try:
        width, height = int(argv[0]), int(argv[1])
    except ValueError:
        print(f"Aviso: tamanho inválido {argv[:2]}, usando {BOARD_WIDTH}x{BOARD_HEIGHT}")
        return BOARD_WIDTH, BOARD_HEIGHT
    if width < MIN_WIDTH or height < MIN_HEIGHT:
        print(f"Aviso: tamanho {width}x{height} menor que o mínimo {MIN_WIDTH}x{MIN_HEIGHT}, "
              f"usando {BOARD_WIDTH}x{BOARD_HEIGHT}")
        return BOARD_WIDTH, BOARD_HEIGHT
    return width, height


if __name__ == "__main__":
    # Isso permite importar Game em outros testes sem disparar o loop automaticamente.
    width, height = parse_board_size(sys.argv[1:])
    game = Game(board_width=width, board_height=height)
    game.run()
