"""
alu8 — Status Flag Register

Four status bits produced by every ALU evaluation:
  Z — Zero     (result byte == 0)
  C — Carry    (carry-out on ADD, borrow on SUB, shifted-out bit on SHL/SHR)
  N — Negative (bit 7 of result)
  V — Overflow (signed 2's complement overflow, ADD/SUB only)

Packed layout, most significant first so it reads in display order:
        bit 3: Z
        bit 2: C
        bit 1: N
        bit 0: V
"""

from dataclasses import dataclass

# Flag bit masks
FLAG_Z = 0x08
FLAG_C = 0x04
FLAG_N = 0x02
FLAG_V = 0x01

FLAG_MASK = FLAG_Z | FLAG_C | FLAG_N | FLAG_V

SIGN_BIT = 0x80
BYTE_MASK = 0xFF


@dataclass(frozen=True)
class AluFlags:
    """Z, C, N, V status bits from a single evaluation.

    Built fresh per call; every bit defaults to clear.
    """

    zero: bool = False
    carry: bool = False
    negative: bool = False
    overflow: bool = False

    @classmethod
    def from_packed(cls, bits: int) -> "AluFlags":
        """Unpack a Z C N V bit-field (see FLAG_* masks)."""
        return cls(
            zero=bool(bits & FLAG_Z),
            carry=bool(bits & FLAG_C),
            negative=bool(bits & FLAG_N),
            overflow=bool(bits & FLAG_V),
        )

    @property
    def packed(self) -> int:
        bits = 0
        if self.zero:
            bits |= FLAG_Z
        if self.carry:
            bits |= FLAG_C
        if self.negative:
            bits |= FLAG_N
        if self.overflow:
            bits |= FLAG_V
        return bits

    def as_dict(self) -> dict:
        """Flags as 0/1 ints keyed by letter (JSON output)."""
        return {
            "Z": int(self.zero),
            "C": int(self.carry),
            "N": int(self.negative),
            "V": int(self.overflow),
        }

    def display(self) -> str:
        """Register-dump form: letter when set, '.' when clear (e.g. '.CN.')."""
        chars = []
        for i, c in enumerate('ZCNV'):
            if self.packed & (FLAG_Z >> i):
                chars.append(c)
            else:
                chars.append('.')
        return ''.join(chars)


def result_nz(result: int) -> int:
    """Z and N bits for a result byte. Applied after every operation."""
    flags = 0
    if result & SIGN_BIT:
        flags |= FLAG_N
    if not (result & BYTE_MASK):
        flags |= FLAG_Z
    return flags
