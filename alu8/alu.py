"""
alu8 — ALU Evaluator

8-bit ALU functions, each returning (result_byte, flag_bits), and the
evaluate() dispatcher that wraps them into an AluResult.

Overflow formulas (standard 2's complement):
  add: V = ~(A ^ B) & (A ^ R) & 0x80   (same-sign operands, result sign differs)
  sub: V =  (A ^ B) & (A ^ R) & 0x80   (signs differ, result sign differs from A)

Carry on SUB means a borrow occurred (A < B, unsigned). Some CPUs use the
inverted convention; this ALU does not.

Every helper starts from clear flags; Z and N are derived from the final
result byte by result_nz().
"""

from dataclasses import dataclass

from .errors import OperandRangeError
from .flags import AluFlags, FLAG_C, FLAG_V, SIGN_BIT, BYTE_MASK, result_nz
from .ops import AluOp


@dataclass(frozen=True)
class AluResult:
    """Outcome of one evaluation. Unpacks as (result, flags)."""
    a: int
    b: int
    op: AluOp
    result: int
    flags: AluFlags

    def __iter__(self):
        yield self.result
        yield self.flags


# ══════════════════════════════════════════════
# Overflow helpers
# ══════════════════════════════════════════════

def overflow_add(a: int, b: int, result: int) -> bool:
    return (~(a ^ b) & (a ^ result) & SIGN_BIT) != 0


def overflow_sub(a: int, b: int, result: int) -> bool:
    return ((a ^ b) & (a ^ result) & SIGN_BIT) != 0


# ══════════════════════════════════════════════
# 8-bit ALU functions — return (result, flags)
# ══════════════════════════════════════════════

def add8(a: int, b: int) -> tuple:
    """Add. C = carry out of bit 7, V = signed overflow."""
    wide = a + b
    result = wide & BYTE_MASK
    flags = result_nz(result)
    if wide > BYTE_MASK:
        flags |= FLAG_C
    if overflow_add(a, b, result):
        flags |= FLAG_V
    return (result, flags)


def sub8(a: int, b: int) -> tuple:
    """Subtract with wraparound. C = borrow (a < b), V = signed overflow."""
    result = (a - b) & BYTE_MASK
    flags = result_nz(result)
    if a < b:
        flags |= FLAG_C
    if overflow_sub(a, b, result):
        flags |= FLAG_V
    return (result, flags)


def and8(a: int, b: int) -> tuple:
    result = a & b
    return (result, result_nz(result))


def or8(a: int, b: int) -> tuple:
    result = (a | b) & BYTE_MASK
    return (result, result_nz(result))


def eor8(a: int, b: int) -> tuple:
    result = (a ^ b) & BYTE_MASK
    return (result, result_nz(result))


def lsl8(a: int, b: int = 0) -> tuple:
    """Logical shift left. C = bit 7 before the shift. b is ignored."""
    result = (a << 1) & BYTE_MASK
    flags = result_nz(result)
    if a & 0x80:
        flags |= FLAG_C
    return (result, flags)


def lsr8(a: int, b: int = 0) -> tuple:
    """Logical shift right. C = bit 0 before the shift. b is ignored."""
    result = (a & BYTE_MASK) >> 1
    flags = result_nz(result)
    if a & 0x01:
        flags |= FLAG_C
    return (result, flags)


_HANDLERS = {
    AluOp.ADD: add8,
    AluOp.SUB: sub8,
    AluOp.AND: and8,
    AluOp.OR: or8,
    AluOp.XOR: eor8,
    AluOp.SHL: lsl8,
    AluOp.SHR: lsr8,
}


def _check_operand(name: str, value) -> int:
    # bool is an int subclass but never a valid byte
    if isinstance(value, bool) or not isinstance(value, int):
        raise OperandRangeError(name, value)
    if not 0 <= value <= BYTE_MASK:
        raise OperandRangeError(name, value)
    return value


def evaluate(a: int, b: int, op) -> AluResult:
    """Run one ALU operation on two 8-bit operands.

    Args:
        a: First operand, 0..255.
        b: Second operand, 0..255. Ignored by SHL/SHR but still checked.
        op: AluOp, or a mnemonic / variant name converted via AluOp.parse().

    Returns:
        AluResult with the result byte and freshly computed flags.

    Raises:
        OperandRangeError: operand not an int in 0..255.
        UnknownOperationError: op outside the AluOp set.
    """
    a = _check_operand('a', a)
    b = _check_operand('b', b)
    op = AluOp.parse(op)
    result, bits = _HANDLERS[op](a, b)
    return AluResult(a=a, b=b, op=op, result=result,
                     flags=AluFlags.from_packed(bits))
