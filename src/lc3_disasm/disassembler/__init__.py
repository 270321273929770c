"""
LC-3 Disassembler Module
========================

This module turns LC-3 machine words into assembly text:

- decoder: raw word -> typed instruction value (one dataclass per format)
- lc3: instruction value + address -> listing line

Usage:
    from lc3_disasm.disassembler import LC3Disassembler, disassemble

    # One word
    disassemble(0x3000, 0xF025)       # '0x3000: TRAP 0x25'

    # A loaded image
    disasm = LC3Disassembler()
    for instr in disasm.disassemble(image):
        print(instr)
"""

from .decoder import (
    Instruction,
    Operate,
    Not,
    Branch,
    Jump,
    JumpSubroutine,
    PCRelative,
    BaseOffset,
    Trap,
    Bare,
    Extension,
    decode,
    decode_extension,
)
from .lc3 import LC3Disassembler, DisassembledInstruction, disassemble

__all__ = [
    "LC3Disassembler",
    "DisassembledInstruction",
    "disassemble",
    "decode",
    "decode_extension",
    "Instruction",
    "Operate",
    "Not",
    "Branch",
    "Jump",
    "JumpSubroutine",
    "PCRelative",
    "BaseOffset",
    "Trap",
    "Bare",
    "Extension",
]
