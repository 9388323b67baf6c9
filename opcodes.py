from dataclasses import dataclass
from enum import Enum

from errors import DecodeError

class Mode(Enum):
    POSITION = 0
    IMMEDIATE = 1
    RELATIVE = 2

class OpCode(Enum):
    ADD = 1
    MULTIPLY = 2
    INPUT = 3
    OUTPUT = 4
    JUMP_IF_TRUE = 5
    JUMP_IF_FALSE = 6
    LESS_THAN = 7
    EQUALS = 8
    ADJUST_RELATIVE_BASE = 9
    HALT = 99

# Número de parâmetros de cada instrução
ARITY = {
    OpCode.ADD: 3,
    OpCode.MULTIPLY: 3,
    OpCode.INPUT: 1,
    OpCode.OUTPUT: 1,
    OpCode.JUMP_IF_TRUE: 2,
    OpCode.JUMP_IF_FALSE: 2,
    OpCode.LESS_THAN: 3,
    OpCode.EQUALS: 3,
    OpCode.ADJUST_RELATIVE_BASE: 1,
    OpCode.HALT: 0,
}

MNEMONICS = {
    OpCode.ADD: 'ADD',
    OpCode.MULTIPLY: 'MUL',
    OpCode.INPUT: 'IN',
    OpCode.OUTPUT: 'OUT',
    OpCode.JUMP_IF_TRUE: 'JT',
    OpCode.JUMP_IF_FALSE: 'JF',
    OpCode.LESS_THAN: 'LT',
    OpCode.EQUALS: 'EQ',
    OpCode.ADJUST_RELATIVE_BASE: 'ARB',
    OpCode.HALT: 'HALT',
}

@dataclass(frozen=True)
class Instruction:
    opcode: OpCode
    modes: tuple

    @property
    def arity(self):
        return ARITY[self.opcode]

    @property
    def stride(self):
        return self.arity + 1

def _mode_for_digit(digit, word):
    try:
        return Mode(digit)
    except ValueError:
        raise DecodeError(f"Modo de parâmetro desconhecido ({digit}) na instrução {word}")

def decode(word):
    """
    Decodifica uma palavra de instrução: os dois dígitos menos significativos
    formam o opcode e cada dígito seguinte é o modo de um parâmetro
    (do primeiro para o último). Dígitos ausentes valem modo POSITION.
    """
    if word < 0:
        raise DecodeError(f"Instrução negativa: {word}")

    try:
        opcode = OpCode(word % 100)
    except ValueError:
        raise DecodeError(f"Opcode desconhecido ({word % 100}) na instrução {word}")

    # Os três dígitos de modo são validados mesmo quando a instrução usa menos
    modes = []
    digits = word // 100
    for _ in range(3):
        modes.append(_mode_for_digit(digits % 10, word))
        digits //= 10

    return Instruction(opcode, tuple(modes[:ARITY[opcode]]))

def format_parameter(mode, raw):
    if mode == Mode.IMMEDIATE:
        return f"#{raw}"
    if mode == Mode.RELATIVE:
        return f"[rb{raw:+d}]"
    return f"[{raw}]"

def disassemble(program):
    """
    Percorre o programa linearmente e produz uma linha por instrução.
    Palavras que não decodificam (ou instruções truncadas no fim da
    memória) são listadas como DATA.
    """
    listing = []
    address = 0
    while address < len(program):
        word = program[address]
        try:
            instruction = decode(word)
        except DecodeError:
            instruction = None

        if instruction is None or address + instruction.arity >= len(program):
            listing.append(f"{address:04d}: DATA {word}")
            address += 1
            continue

        raw_params = program[address + 1:address + instruction.stride]
        params = [format_parameter(mode, raw) for mode, raw in zip(instruction.modes, raw_params)]
        listing.append(f"{address:04d}: {' '.join([MNEMONICS[instruction.opcode]] + params)}")
        address += instruction.stride

    return listing
