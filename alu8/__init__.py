"""
alu8 — 8-bit ALU Simulator
==========================
Pure-software model of an 8-bit ALU with Z, C, N, V status flags.

    ┌───────────┐    ┌──────────────┐    ┌───────────┐
    │ a, b, op  │───>│  evaluate()  │───>│ AluResult │───> display / JSON
    └───────────┘    └──────────────┘    └───────────┘

    - ops.py:     closed AluOp enumeration + boundary parsing
    - flags.py:   AluFlags record and packed Z C N V bit-field
    - alu.py:     per-operation functions and the evaluate() dispatcher
    - vectors.py: demonstration vectors and runner
    - display.py: text / dict rendering
"""

__version__ = "0.1.0"

from .errors import AluError, UnknownOperationError, OperandRangeError
from .flags import AluFlags, FLAG_Z, FLAG_C, FLAG_N, FLAG_V
from .ops import AluOp
from .alu import AluResult, evaluate
from .vectors import TestVector, DEMO_VECTORS, run_vectors
from .display import format_flags, format_result, result_to_dict

__all__ = [
    "AluError", "UnknownOperationError", "OperandRangeError",
    "AluFlags", "FLAG_Z", "FLAG_C", "FLAG_N", "FLAG_V",
    "AluOp", "AluResult", "evaluate",
    "TestVector", "DEMO_VECTORS", "run_vectors",
    "format_flags", "format_result", "result_to_dict",
]
