"""
LC-3 Instruction Decoder
========================

Turns a raw 16-bit word into a typed instruction value. There is one
frozen dataclass per instruction format, each carrying only the fields
that format defines:

    Operate          ADD, AND (register or imm5 second operand)
    Not              NOT
    Branch           BR with n/z/p condition bits
    Jump             JMP / RET
    JumpSubroutine   JSR (PCoffset11) / JSRR (base register)
    PCRelative       LD, LDI, ST, STI, LEA
    BaseOffset       LDR, STR
    Trap             TRAP
    Bare             RTI, RES
    Extension        NOP, CLR, INC, DEC (vendor extension in the RES slot)

Decoded instructions never hold a target address. PC-relative targets
depend on where the word sits in memory, so the formatter computes them
from the instruction's address.

decode() is total: every 16-bit value decodes to some instruction.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from lc3_disasm.cpu import (
    WORD_MASK,
    LINK_REGISTER,
    BASE_OFFSET_OPCODES,
    OPERATE_OPCODES,
    PC_RELATIVE_OPCODES,
    ExtensionOp,
    Opcode,
    bits,
    opcode_of,
    sign_extend,
)


# =============================================================================
# Instruction Variants
# =============================================================================

@dataclass(frozen=True)
class Instruction:
    """
    Base class of all decoded instructions.

    Attributes:
        word: The raw 16-bit word the instruction was decoded from
    """
    word: int

    @property
    def opcode(self) -> Opcode:
        return opcode_of(self.word)


@dataclass(frozen=True)
class Operate(Instruction):
    """ADD/AND: DR = SR1 op (SR2 | imm5)."""
    dr: int
    sr1: int
    imm_mode: bool
    sr2: Optional[int] = None
    imm5: Optional[int] = None   # sign-extended 16-bit pattern


@dataclass(frozen=True)
class Not(Instruction):
    dr: int
    sr: int


@dataclass(frozen=True)
class Branch(Instruction):
    """BR with independent n, z, p condition bits."""
    n: bool
    z: bool
    p: bool
    offset9: int

    @property
    def conditions(self) -> str:
        """Condition suffix in n, z, p order (may be empty)."""
        return ("n" if self.n else "") + ("z" if self.z else "") + ("p" if self.p else "")


@dataclass(frozen=True)
class Jump(Instruction):
    base: int

    @property
    def is_return(self) -> bool:
        """JMP R7 is the RET alias."""
        return self.base == LINK_REGISTER


@dataclass(frozen=True)
class JumpSubroutine(Instruction):
    """JSR (long_mode, PC-relative) or JSRR (base register)."""
    long_mode: bool
    offset11: Optional[int] = None
    base: Optional[int] = None


@dataclass(frozen=True)
class PCRelative(Instruction):
    """LD, LDI, ST, STI, LEA: register and 9-bit PC offset."""
    reg: int
    offset9: int


@dataclass(frozen=True)
class BaseOffset(Instruction):
    """LDR, STR: register, base register and 6-bit offset."""
    reg: int
    base: int
    offset6: int


@dataclass(frozen=True)
class Trap(Instruction):
    vector: int


@dataclass(frozen=True)
class Bare(Instruction):
    """RTI and RES: no operand fields."""
    pass


@dataclass(frozen=True)
class Extension(Instruction):
    """Vendor extension operation encoded inside a RES word."""
    op: ExtensionOp
    reg: int


# =============================================================================
# Per-Format Decoders
# =============================================================================

def _decode_operate(word: int) -> Instruction:
    dr = bits(word, 11, 9)
    sr1 = bits(word, 8, 6)
    if bits(word, 5, 5):
        return Operate(word, dr, sr1, True, imm5=sign_extend(bits(word, 4, 0), 5))
    return Operate(word, dr, sr1, False, sr2=bits(word, 2, 0))


def _decode_not(word: int) -> Instruction:
    return Not(word, bits(word, 11, 9), bits(word, 8, 6))


def _decode_branch(word: int) -> Instruction:
    return Branch(
        word,
        n=bool(bits(word, 11, 11)),
        z=bool(bits(word, 10, 10)),
        p=bool(bits(word, 9, 9)),
        offset9=sign_extend(bits(word, 8, 0), 9),
    )


def _decode_jump(word: int) -> Instruction:
    return Jump(word, bits(word, 8, 6))


def _decode_jsr(word: int) -> Instruction:
    if bits(word, 11, 11):
        return JumpSubroutine(word, True, offset11=sign_extend(bits(word, 10, 0), 11))
    return JumpSubroutine(word, False, base=bits(word, 8, 6))


def _decode_pc_relative(word: int) -> Instruction:
    return PCRelative(word, bits(word, 11, 9), sign_extend(bits(word, 8, 0), 9))


def _decode_base_offset(word: int) -> Instruction:
    return BaseOffset(
        word, bits(word, 11, 9), bits(word, 8, 6), sign_extend(bits(word, 5, 0), 6)
    )


def _decode_trap(word: int) -> Instruction:
    return Trap(word, bits(word, 7, 0))


def _decode_bare(word: int) -> Instruction:
    return Bare(word)


_DECODERS: Dict[Opcode, Callable[[int], Instruction]] = {
    Opcode.BR: _decode_branch,
    Opcode.JSR: _decode_jsr,
    Opcode.RTI: _decode_bare,
    Opcode.NOT: _decode_not,
    Opcode.JMP: _decode_jump,
    Opcode.RES: _decode_bare,
    Opcode.TRAP: _decode_trap,
}
_DECODERS.update({opcode: _decode_operate for opcode in OPERATE_OPCODES})
_DECODERS.update({opcode: _decode_pc_relative for opcode in PC_RELATIVE_OPCODES})
_DECODERS.update({opcode: _decode_base_offset for opcode in BASE_OFFSET_OPCODES})

_EXTENSION_OPS = frozenset(op.value for op in ExtensionOp)


def decode_extension(word: int) -> Optional[Extension]:
    """
    Decode the vendor extension carried in a RES word.

    The layout is ``1101 RRR 0 xxxxxxxx`` where the low byte is one of
    the ExtensionOp values. Any other RES word is not an extension.

    Returns:
        Extension instruction, or None if the word is a plain RES
    """
    word &= WORD_MASK
    if opcode_of(word) != Opcode.RES or bits(word, 8, 8):
        return None
    op = bits(word, 7, 0)
    if op not in _EXTENSION_OPS:
        return None
    return Extension(word, ExtensionOp(op), bits(word, 11, 9))


def decode(word: int, extensions: bool = False) -> Instruction:
    """
    Decode a 16-bit word.

    Args:
        word: The instruction word (masked to 16 bits)
        extensions: Recognise the vendor extension inside RES words

    Returns:
        The decoded instruction variant
    """
    word &= WORD_MASK
    opcode = opcode_of(word)
    if extensions and opcode == Opcode.RES:
        extension = decode_extension(word)
        if extension is not None:
            return extension
    return _DECODERS[opcode](word)
