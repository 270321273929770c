"""
lc3_disasm - Disassembler for LC-3 Object Files
===============================================

This package decodes binary object images for the LC-3, a 16-bit
word-addressed teaching architecture, and renders each word as
assembly text.

Main Components
---------------
- **objfile**: object file loader
    Parses the big-endian object format into a MemoryImage

- **disassembler**: instruction decoder and formatter
    Decodes words into typed instructions and renders listing lines

- **cpu**: instruction set definitions
    Opcodes, trap vectors, sign extension and PC-relative addressing

- **cli**: the lc3disasm command-line tool

Quick Start
-----------
Disassemble one word:
    >>> from lc3_disasm import disassemble
    >>> disassemble(0x3000, 0x1066)
    '0x3000: ADD R0, R1, #6'

Disassemble an object file:
    >>> from lc3_disasm import LC3Disassembler, load_file
    >>> image = load_file("hello.obj")
    >>> print(LC3Disassembler().disassemble_to_text(image))

Or use the command-line tool:
    $ lc3disasm hello.obj
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from lc3_disasm.errors import (
    LC3Error,
    ObjectFileError,
    FormatError,
    TruncatedInputError,
)
from lc3_disasm.cpu import Opcode, TrapVector, ExtensionOp, sign_extend
from lc3_disasm.objfile import MemoryImage, load, load_file, dump
from lc3_disasm.disassembler import (
    LC3Disassembler,
    DisassembledInstruction,
    decode,
    disassemble,
)
from lc3_disasm.config import DisassemblerConfig

__all__ = [
    # Version info
    "__version__",
    # Exception hierarchy
    "LC3Error",
    "ObjectFileError",
    "FormatError",
    "TruncatedInputError",
    # Instruction set
    "Opcode",
    "TrapVector",
    "ExtensionOp",
    "sign_extend",
    # Object files
    "MemoryImage",
    "load",
    "load_file",
    "dump",
    # Disassembler
    "LC3Disassembler",
    "DisassembledInstruction",
    "decode",
    "disassemble",
    # Configuration
    "DisassemblerConfig",
]
