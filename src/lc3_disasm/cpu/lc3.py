"""
LC-3 Instruction Set Definition
===============================

This module defines the LC-3 instruction set: opcodes, trap vectors,
the register file naming and the bit-field helpers used to pull operands
out of an instruction word.

The LC-3 is a 16-bit, word-addressed machine. Every instruction is a
single 16-bit word whose top four bits select one of sixteen opcodes.

Instruction Formats
-------------------
Bits are numbered from 0 (least significant) to 15.

1. **Operate** (ADD, AND): DR[11:9] SR1[8:6] mode[5]
   - mode 0: SR2[2:0]
   - mode 1: imm5[4:0] (signed)

2. **NOT**: DR[11:9] SR[8:6], remaining bits are padding

3. **Branch** (BR): n[11] z[10] p[9] PCoffset9[8:0]

4. **PC-relative** (LD, LDI, ST, STI, LEA): R[11:9] PCoffset9[8:0]

5. **Base+offset** (LDR, STR): R[11:9] BaseR[8:6] offset6[5:0]

6. **Jump** (JMP/RET): BaseR[8:6], RET is JMP R7

7. **Subroutine** (JSR/JSRR): bit 11 selects PCoffset11[10:0] or BaseR[8:6]

8. **TRAP**: trapvect8[7:0]

9. **Bare** (RTI, RES): no operands

PC-relative offsets are relative to the address of the word after the
instruction (the incremented PC), and all address arithmetic is done
modulo 2^16.

Vendor Extension
----------------
A vendor extension adds NOP, CLR, INC and DEC with the numbers $E8-$EB.
These values do not fit in a 4-bit opcode field, so the extension lives
inside the reserved RES opcode instead:

    1101 RRR 0 xxxxxxxx     xxxxxxxx = $E8 NOP, $E9 CLR, $EA INC, $EB DEC

Reference
---------
- Patt & Patel, Introduction to Computing Systems, Appendix A
"""

from enum import IntEnum
from typing import Dict, Optional


# =============================================================================
# Machine Constants
# =============================================================================

WORD_BITS = 16
WORD_MASK = 0xFFFF
ADDRESS_SPACE = 1 << WORD_BITS   # 65536 words
MAX_ADDRESS = ADDRESS_SPACE - 1

REGISTER_COUNT = 8
LINK_REGISTER = 7                 # JSR/JSRR save the return address here


# =============================================================================
# Opcodes
# =============================================================================

class Opcode(IntEnum):
    """The sixteen LC-3 opcodes, as encoded in bits [15:12]."""
    BR = 0x0     # conditional branch
    ADD = 0x1    # add
    LD = 0x2     # load PC-relative
    ST = 0x3     # store PC-relative
    JSR = 0x4    # jump to subroutine (JSR/JSRR)
    AND = 0x5    # bitwise and
    LDR = 0x6    # load base+offset
    STR = 0x7    # store base+offset
    RTI = 0x8    # return from interrupt
    NOT = 0x9    # bitwise complement
    LDI = 0xA    # load indirect
    STI = 0xB    # store indirect
    JMP = 0xC    # jump (RET when base is R7)
    RES = 0xD    # reserved
    LEA = 0xE    # load effective address
    TRAP = 0xF   # system call


class ExtensionOp(IntEnum):
    """Vendor extension operations, encoded in the low byte of a RES word."""
    NOP = 0xE8   # no operation
    CLR = 0xE9   # clear a register
    INC = 0xEA   # increment a register
    DEC = 0xEB   # decrement a register


class TrapVector(IntEnum):
    """Known trap service routines."""
    GETC = 0x20    # read a character, no echo
    OUT = 0x21     # write a character
    PUTS = 0x22    # write a word string
    IN = 0x23      # prompt and read a character, echoed
    PUTSP = 0x24   # write a byte-packed string
    HALT = 0x25    # stop the machine
    # Extension vectors
    PUTHEX = 0x26  # print a number in hex
    RND = 0x27     # random number
    GETSTR = 0x28  # read a whole line
    SLEEP = 0x29   # pause for a delay


# Opcodes whose operand is a 9-bit PC-relative offset
PC_RELATIVE_OPCODES: frozenset = frozenset({
    Opcode.LD, Opcode.LDI, Opcode.ST, Opcode.STI, Opcode.LEA,
})

# Opcodes whose operand is a base register plus 6-bit offset
BASE_OFFSET_OPCODES: frozenset = frozenset({Opcode.LDR, Opcode.STR})

# Operate instructions with register/immediate second operand
OPERATE_OPCODES: frozenset = frozenset({Opcode.ADD, Opcode.AND})

TRAP_NAMES: Dict[int, str] = {vector.value: vector.name for vector in TrapVector}


# =============================================================================
# Bit-Field Helpers
# =============================================================================

def opcode_of(word: int) -> Opcode:
    """Return the opcode held in bits [15:12] of a word."""
    return Opcode((word & WORD_MASK) >> 12)


def bits(word: int, high: int, low: int) -> int:
    """
    Extract the unsigned field word[high:low] (inclusive).

    Example:
        >>> bits(0x1066, 11, 9)
        0
        >>> bits(0x1066, 8, 6)
        1
    """
    width = high - low + 1
    return (word >> low) & ((1 << width) - 1)


def sign_extend(value: int, bit_count: int) -> int:
    """
    Sign-extend a bit_count-bit field to a 16-bit two's complement pattern.

    If the field's sign bit (bit ``bit_count - 1``) is set, the bits above
    the field are filled with ones; otherwise the value is returned as is.
    The result is always a 16-bit unsigned pattern.

    Example:
        >>> sign_extend(0b01111, 5)
        15
        >>> hex(sign_extend(0b10000, 5))
        '0xfff0'
    """
    if (value >> (bit_count - 1)) & 1:
        value |= (WORD_MASK << bit_count)
    return value & WORD_MASK


def to_signed(value: int) -> int:
    """Interpret a 16-bit pattern as a signed integer."""
    value &= WORD_MASK
    return value - ADDRESS_SPACE if value & 0x8000 else value


def pc_relative_target(address: int, offset: int) -> int:
    """
    Compute the target of a PC-relative operand.

    ``offset`` is a sign-extended 16-bit pattern. The PC has already been
    incremented when the offset is applied, so the base is address + 1.
    """
    return (address + 1 + offset) & WORD_MASK


# =============================================================================
# Lookup Functions
# =============================================================================

def register_name(index: int) -> str:
    """Return the assembler name of a general-purpose register."""
    return f"R{index % REGISTER_COUNT}"


def get_trap_name(vector: int) -> Optional[str]:
    """
    Look up the service routine alias for a trap vector.

    Args:
        vector: 8-bit trap vector

    Returns:
        The alias (e.g. "HALT") or None for an unknown vector
    """
    return TRAP_NAMES.get(vector)

