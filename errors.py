class IntCodeError(Exception):
    pass

class LoadError(IntCodeError):
    def __init__(self, message, token=None, index=None):
        super().__init__(message)
        self.token = token
        self.index = index

class DecodeError(IntCodeError):
    pass

class AddressError(IntCodeError):
    pass

class InvalidDestinationError(IntCodeError):
    pass

class InputExhaustedError(IntCodeError):
    pass

class NoOutputError(IntCodeError):
    pass

class DiagnosticError(IntCodeError):
    def __init__(self, ip, value):
        super().__init__(f"Saída de diagnóstico diferente de zero: ip {ip}, valor {value}")
        self.ip = ip
        self.value = value

class MachineHaltedError(IntCodeError):
    pass

class SearchError(IntCodeError):
    pass

class RobotError(IntCodeError):
    pass
