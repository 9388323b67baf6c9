from collections import deque

from errors import (
    AddressError,
    DiagnosticError,
    InputExhaustedError,
    InvalidDestinationError,
    MachineHaltedError,
    NoOutputError,
)
from loader import load_program
from memory import Memory
from opcodes import Mode, OpCode, decode

OUTPUTS_PER_RESUME = 2

class IntCode:
    """
    Simula uma máquina IntCode: memória crescente, ponteiro de instrução,
    base relativa, fila de entradas e registro de saídas.

    A entrada pode ser um valor fixo (`input_value`), reutilizado em toda
    instrução INPUT, ou uma fila de valores (`inputs`) consumida na ordem
    em que foi fornecida e alimentada a cada `resume_with_input`. As duas
    formas são exclusivas: com valor fixo, `resume_with_input` é recusado.
    """
    def __init__(self, program, input_value=None, inputs=(), strict_diagnostics=False):
        self.memory = Memory(program)
        self.ip = 0
        self.relative_base = 0

        self.input_value = input_value
        self.inputs = deque(inputs)
        self.outputs = []
        self.strict_diagnostics = strict_diagnostics
        self.halted = False

        self.steps = 0
        self.history = []
        self.rb_history = []

        self.op_map = {
            OpCode.ADD: self._add,
            OpCode.MULTIPLY: self._multiply,
            OpCode.INPUT: self._input,
            OpCode.OUTPUT: self._output,
            OpCode.JUMP_IF_TRUE: self._jump_if_true,
            OpCode.JUMP_IF_FALSE: self._jump_if_false,
            OpCode.LESS_THAN: self._less_than,
            OpCode.EQUALS: self._equals,
            OpCode.ADJUST_RELATIVE_BASE: self._adjust_relative_base,
        }

    @classmethod
    def load(cls, path, **kwargs):
        return cls(load_program(path), **kwargs)

    # --- Protocolos de execução ---

    def step(self):
        """
        Executa uma única instrução. Devolve o valor produzido por OUTPUT,
        ou None para as demais instruções.
        """
        if self.halted:
            raise MachineHaltedError("A máquina já terminou (HALT)")

        instruction = decode(self.memory.word(self.ip))

        if instruction.opcode == OpCode.HALT:
            self.halted = True
            return None

        output = self.op_map[instruction.opcode](instruction.modes)
        self.steps += 1
        self.history.append(instruction)
        return output

    def run_until_halt(self):
        """Executa até HALT e devolve o conteúdo final da memória."""
        if self.halted:
            raise MachineHaltedError("A máquina já terminou (HALT)")
        while not self.halted:
            self.step()
        return self.memory.snapshot()

    def run_to_completion(self):
        """
        Executa até HALT e devolve a última saída produzida.

        Com `strict_diagnostics`, toda saída anterior à última precisa ser
        zero (convenção dos programas de autoteste).
        """
        if self.halted:
            raise MachineHaltedError("A máquina só pode ser executada uma vez")

        while not self.halted:
            output = self.step()
            if output is None or not self.strict_diagnostics:
                continue
            if len(self.outputs) > 1 and self.outputs[-2] != 0:
                raise DiagnosticError(self.ip, self.outputs[-2])

        if not self.outputs:
            raise NoOutputError("Nenhuma saída foi produzida")
        return self.outputs[-1]

    def resume_with_input(self, value, count=OUTPUTS_PER_RESUME):
        """
        Acrescenta `value` à fila de entradas e executa até produzir `count`
        saídas. Devolve a tupla de saídas, ou None se a máquina terminar
        antes disso.
        """
        if self.halted:
            raise MachineHaltedError("resume_with_input chamado depois do HALT")
        if count < 1:
            raise ValueError(f"Quantidade de saídas por retomada deve ser positiva: {count}")
        if self.input_value is not None:
            raise ValueError("Máquina configurada com entrada fixa não aceita novas entradas")

        self.inputs.append(value)
        batch = []
        while len(batch) < count:
            output = self.step()
            if self.halted:
                return None
            if output is not None:
                batch.append(output)
        return tuple(batch)

    def all_outputs(self):
        return list(self.outputs)

    def is_halted(self):
        return self.halted

    # --- Resolução de parâmetros ---

    def _address(self, mode, offset):
        raw = self.memory.word(self.ip + offset)
        if mode == Mode.POSITION:
            address = raw
        elif mode == Mode.RELATIVE:
            address = self.relative_base + raw
        else:
            raise InvalidDestinationError(f"Parâmetro {offset} em modo imediato não tem endereço (ip {self.ip})")

        if address < 0:
            raise AddressError(f"Endereço efetivo negativo ({address}) no parâmetro {offset} (ip {self.ip})")
        return address

    def _value(self, mode, offset):
        if mode == Mode.IMMEDIATE:
            return self.memory.word(self.ip + offset)
        return self.memory.read(self._address(mode, offset))

    def _store(self, mode, offset, value):
        self.memory.write(self._address(mode, offset), value)

    # --- Instruções ---

    def _binary(self, modes, operation):
        result = operation(self._value(modes[0], 1), self._value(modes[1], 2))
        self._store(modes[2], 3, result)
        self.ip += 4

    def _add(self, modes):
        self._binary(modes, lambda a, b: a + b)

    def _multiply(self, modes):
        self._binary(modes, lambda a, b: a * b)

    def _less_than(self, modes):
        self._binary(modes, lambda a, b: 1 if a < b else 0)

    def _equals(self, modes):
        self._binary(modes, lambda a, b: 1 if a == b else 0)

    def _input(self, modes):
        if self.input_value is not None:
            value = self.input_value
        elif self.inputs:
            value = self.inputs.popleft()
        else:
            raise InputExhaustedError(f"Instrução INPUT sem valor disponível (ip {self.ip})")
        self._store(modes[0], 1, value)
        self.ip += 2

    def _output(self, modes):
        value = self._value(modes[0], 1)
        self.outputs.append(value)
        self.ip += 2
        return value

    def _jump(self, modes, condition):
        if condition(self._value(modes[0], 1)):
            target = self._value(modes[1], 2)
            if target < 0:
                raise AddressError(f"Destino de salto inválido: {target} (ip {self.ip})")
            self.ip = target
        else:
            self.ip += 3

    def _jump_if_true(self, modes):
        self._jump(modes, lambda v: v != 0)

    def _jump_if_false(self, modes):
        self._jump(modes, lambda v: v == 0)

    def _adjust_relative_base(self, modes):
        offset = self._value(modes[0], 1)
        self.rb_history.append(self.relative_base)
        self.relative_base += offset
        self.ip += 2
