"""
alu8 — Operation Selector

The closed set of ALU operations. Callers outside the package may hold
a mnemonic string ("ADD", "shl", ...) or a long variant name
("ShiftLeftLogical"); AluOp.parse() converts those at the boundary so
the evaluator only ever sees an AluOp.
"""

from enum import Enum

from .errors import UnknownOperationError


class AluOp(Enum):
    ADD = 'ADD'
    SUB = 'SUB'
    AND = 'AND'
    OR = 'OR'
    XOR = 'XOR'
    SHL = 'SHL'   # Shift left logical
    SHR = 'SHR'   # Shift right logical

    @property
    def mnemonic(self) -> str:
        return self.value

    @property
    def is_shift(self) -> bool:
        """True for single-operand ops; operand b is accepted but ignored."""
        return self in (AluOp.SHL, AluOp.SHR)

    @classmethod
    def parse(cls, value) -> "AluOp":
        """Convert a mnemonic or variant name to an AluOp.

        Raises UnknownOperationError for anything outside the set.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            op = _ALIASES.get(key)
            if op is not None:
                return op
        raise UnknownOperationError(value)


# Long variant names, upper-cased, alongside the mnemonics
_ALIASES = {op.value: op for op in AluOp}
_ALIASES.update({
    'SUBTRACT': AluOp.SUB,
    'SHIFTLEFTLOGICAL': AluOp.SHL,
    'SHIFTRIGHTLOGICAL': AluOp.SHR,
})
