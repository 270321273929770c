"""
LC-3 CPU Package
================

Instruction set definitions shared by the loader, the decoder and the
formatter: opcodes, trap vectors, the vendor extension numbering and the
bit-field helpers.

Usage:
    from lc3_disasm.cpu import Opcode, sign_extend, pc_relative_target
"""

from lc3_disasm.cpu.lc3 import (
    # Machine constants
    WORD_BITS,
    WORD_MASK,
    ADDRESS_SPACE,
    MAX_ADDRESS,
    REGISTER_COUNT,
    LINK_REGISTER,
    # Core types
    Opcode,
    ExtensionOp,
    TrapVector,
    # Opcode groups
    PC_RELATIVE_OPCODES,
    BASE_OFFSET_OPCODES,
    OPERATE_OPCODES,
    TRAP_NAMES,
    # Bit-field helpers
    opcode_of,
    bits,
    sign_extend,
    to_signed,
    pc_relative_target,
    # Lookup functions
    register_name,
    get_trap_name,
)

__all__ = [
    "WORD_BITS",
    "WORD_MASK",
    "ADDRESS_SPACE",
    "MAX_ADDRESS",
    "REGISTER_COUNT",
    "LINK_REGISTER",
    "Opcode",
    "ExtensionOp",
    "TrapVector",
    "PC_RELATIVE_OPCODES",
    "BASE_OFFSET_OPCODES",
    "OPERATE_OPCODES",
    "TRAP_NAMES",
    "opcode_of",
    "bits",
    "sign_extend",
    "to_signed",
    "pc_relative_target",
    "register_name",
    "get_trap_name",
]
