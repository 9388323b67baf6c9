from enum import Enum

from errors import RobotError

class Color(Enum):
    BLACK = 0
    WHITE = 1

class Turn(Enum):
    LEFT = 0
    RIGHT = 1

class Direction(Enum):
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

# Sentido horário, a partir de UP
CLOCKWISE = [Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT]

PIXELS = {Color.BLACK: ' ', Color.WHITE: '#'}

def _color_from_code(code):
    try:
        return Color(code)
    except ValueError:
        raise RobotError(f"Cor desconhecida: {code}")

def _turn_from_code(code):
    try:
        return Turn(code)
    except ValueError:
        raise RobotError(f"Direção de giro desconhecida: {code}")

class HullRobot:
    """
    Robô de pintura do casco, controlado por uma máquina IntCode.

    A cada passo o robô informa a cor do painel sob ele e recebe duas
    saídas: a nova cor do painel e o sentido do giro. Depois de pintar e
    girar, avança um painel.
    """
    def __init__(self, initial_panels=None):
        self.panels = {}
        self.painted = set()
        self.x = 0
        self.y = 0
        self.direction = Direction.UP
        for point, color in (initial_panels or {}).items():
            self.panels[point] = color

    def current_color(self):
        return self.panels.get((self.x, self.y), Color.BLACK)

    def turn(self, turn):
        index = CLOCKWISE.index(self.direction)
        step = 1 if turn == Turn.RIGHT else -1
        self.direction = CLOCKWISE[(index + step) % len(CLOCKWISE)]

    def paint_and_move(self, color, turn):
        self.panels[(self.x, self.y)] = color
        self.painted.add((self.x, self.y))
        self.turn(turn)
        dx, dy = self.direction.value
        self.x += dx
        self.y += dy

    def paint_ship(self, machine):
        """Executa o programa de pintura até o HALT e devolve quantos painéis foram pintados."""
        while True:
            batch = machine.resume_with_input(self.current_color().value)
            if batch is None:
                break
            color_code, turn_code = batch
            self.paint_and_move(_color_from_code(color_code), _turn_from_code(turn_code))
        return len(self.painted)

    def bounds(self):
        if not self.panels:
            raise RobotError("Nenhum painel conhecido")
        xs = [x for x, _ in self.panels]
        ys = [y for _, y in self.panels]
        return (min(xs), max(xs)), (min(ys), max(ys))

    def render(self):
        (x_min, x_max), (y_min, y_max) = self.bounds()
        lines = []
        for y in range(y_min, y_max + 1):
            row = [PIXELS[self.panels.get((x, y), Color.BLACK)] for x in range(x_min, x_max + 1)]
            lines.append(''.join(row))
        return '\n'.join(lines)
