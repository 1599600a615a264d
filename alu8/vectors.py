"""
alu8 — Demonstration Vectors

A fixed set of (a, b, op) triples covering each operation once, and a
runner that evaluates a sequence of them in order.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List

from .alu import AluResult, evaluate
from .ops import AluOp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TestVector:
    a: int
    b: int
    op: AluOp

    # keep pytest from collecting this as a test class
    __test__ = False


DEMO_VECTORS = (
    TestVector(15, 27, AluOp.ADD),
    TestVector(10, 40, AluOp.SUB),
    TestVector(0xF0, 0x0F, AluOp.AND),
    TestVector(0xF0, 0x0F, AluOp.OR),
    TestVector(0x55, 0xFF, AluOp.XOR),
    TestVector(0x81, 0x00, AluOp.SHL),
    TestVector(0x03, 0x00, AluOp.SHR),
)


def run_vectors(vectors: Iterable[TestVector] = DEMO_VECTORS) -> List[AluResult]:
    """Evaluate each vector once and return the results in order."""
    results = []
    for vec in vectors:
        res = evaluate(vec.a, vec.b, vec.op)
        logger.debug("%s a=$%02X b=$%02X -> $%02X [%s]",
                     res.op.mnemonic, res.a, res.b, res.result, res.flags.display())
        results.append(res)
    logger.info("Evaluated %d vectors", len(results))
    return results
