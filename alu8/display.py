"""
alu8 — Result Presentation

Text and JSON-ready renderings of an AluResult. Shift operations do not
use operand b, so it is left out of both forms.
"""

from .alu import AluResult
from .flags import AluFlags


def format_flags(flags: AluFlags) -> str:
    """'Z=0 C=1 N=1 V=0'"""
    return " ".join(f"{k}={v}" for k, v in flags.as_dict().items())


def format_result(res: AluResult) -> str:
    """One compact line per evaluation.

    ADD  0x0F , 0x1B -> 0x2A  | Z=0 C=0 N=0 V=0
    SHL  0x81 -> 0x02  | Z=0 C=1 N=0 V=0
    """
    if res.op.is_shift:
        operands = f"0x{res.a:02X}"
    else:
        operands = f"0x{res.a:02X} , 0x{res.b:02X}"
    return (f"{res.op.mnemonic}  {operands} -> 0x{res.result:02X}  | "
            f"{format_flags(res.flags)}")


def result_to_dict(res: AluResult) -> dict:
    return {
        "op": res.op.mnemonic,
        "a": res.a,
        "b": None if res.op.is_shift else res.b,
        "result": res.result,
        "flags": res.flags.as_dict(),
    }
