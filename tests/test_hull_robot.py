import pytest

from errors import RobotError
from hull_robot import Color, Direction, HullRobot, Turn
from intcode import IntCode

# Respostas do exemplo clássico: (cor, giro) para cada passo
EXAMPLE_MOVES = [(1, 0), (0, 0), (1, 0), (1, 0), (0, 1), (1, 0), (1, 0)]

def scripted_program(moves):
    """Programa que guarda cada entrada em 100 + k e responde com os pares dados."""
    program = []
    for k, (color, turn) in enumerate(moves):
        program += [3, 100 + k, 104, color, 104, turn]
    return program + [99]

def test_example_paints_six_panels():
    robot = HullRobot()
    machine = IntCode(scripted_program(EXAMPLE_MOVES))
    assert robot.paint_ship(machine) == 6
    assert machine.is_halted()
    assert (robot.x, robot.y) == (0, -1)
    assert robot.direction == Direction.LEFT

def test_robot_feeds_the_color_under_it():
    machine = IntCode(scripted_program(EXAMPLE_MOVES))
    HullRobot().paint_ship(machine)
    # O quinto passo volta à origem, que já tinha sido pintada de branco
    assert machine.memory.snapshot()[100:107] == [0, 0, 0, 0, 1, 0, 0]

def test_initial_panels_are_reported():
    machine = IntCode(scripted_program([(0, 1)]))
    HullRobot({(0, 0): Color.WHITE}).paint_ship(machine)
    assert machine.memory.read(100) == 1

def test_render_painted_hull():
    robot = HullRobot()
    robot.paint_ship(IntCode(scripted_program(EXAMPLE_MOVES)))
    assert robot.render() == "  #\n  #\n## "

def test_turns_wrap_around():
    robot = HullRobot()
    robot.turn(Turn.LEFT)
    assert robot.direction == Direction.LEFT
    robot.turn(Turn.RIGHT)
    robot.turn(Turn.RIGHT)
    assert robot.direction == Direction.RIGHT

def test_invalid_color_is_rejected():
    with pytest.raises(RobotError):
        HullRobot().paint_ship(IntCode(scripted_program([(2, 0)])))

def test_invalid_turn_is_rejected():
    with pytest.raises(RobotError):
        HullRobot().paint_ship(IntCode(scripted_program([(1, 5)])))

def test_render_without_panels_fails():
    with pytest.raises(RobotError):
        HullRobot().render()
