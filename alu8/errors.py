"""alu8 — exceptions raised at the call boundary."""


class AluError(Exception):
    """Base class for ALU input errors."""


class UnknownOperationError(AluError, ValueError):
    """Raised when an operation selector is outside the closed AluOp set."""
    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown ALU operation: {value!r}")


class OperandRangeError(AluError, ValueError):
    """Raised when an operand is not an integer in [0, 255]."""
    def __init__(self, name: str, value):
        self.name = name
        self.value = value
        super().__init__(f"Operand {name} must be an 8-bit value (0..255), got {value!r}")
