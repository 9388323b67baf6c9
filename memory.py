from errors import AddressError

class Memory:
    """
    Memória da máquina IntCode: uma lista de inteiros que cresce sob demanda.

    Leituras além do fim devolvem 0 sem redimensionar; escritas além do fim
    estendem a memória com zeros até o endereço de destino (inclusive).
    A memória nunca encolhe.
    """
    def __init__(self, program):
        self.cells = list(program)

    def __len__(self):
        return len(self.cells)

    def _check_address(self, address):
        if address < 0:
            raise AddressError(f"Endereço negativo: {address}")

    def read(self, address):
        self._check_address(address)
        if address >= len(self.cells):
            return 0
        return self.cells[address]

    def word(self, address):
        """Lê uma posição que precisa existir (opcode ou parâmetro)."""
        self._check_address(address)
        if address >= len(self.cells):
            raise AddressError(f"Posição {address} fora da memória (tamanho {len(self.cells)})")
        return self.cells[address]

    def write(self, address, value):
        self._check_address(address)
        if address >= len(self.cells):
            self.cells.extend([0] * (address + 1 - len(self.cells)))
        self.cells[address] = value

    def snapshot(self):
        return list(self.cells)
