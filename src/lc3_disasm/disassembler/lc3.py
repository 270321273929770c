"""
LC-3 Disassembler
=================

Renders decoded LC-3 instructions as assembly text.

Each instruction class maps to exactly one textual template. Operand
order and punctuation are part of the output format:

    0x3000: ADD R0, R1, #6
    0x3001: BRnz 0x2fff
    0x3002: LD R2, 0x3010
    0x3003: LDR R0, R6, #-1
    0x3004: JSRR R4
    0x3005: RET
    0x3006: TRAP 0x25

Conventions:
    - Line addresses: ``0x`` + 4 uppercase hex digits
    - Registers: ``R0``-``R7``
    - Immediates and base offsets: signed decimal with ``#``
    - Computed PC-relative targets: ``0x`` + 4 lowercase hex digits
    - Trap vectors: ``0x`` + 2 uppercase hex digits

Formatting never fails. Reserved opcodes print ``RES`` so the listing
always has one line per word.

Usage:
    disasm = LC3Disassembler()

    # Single word
    instr = disasm.disassemble_one(0x3000, 0x1066)
    print(instr)                      # 0x3000: ADD R0, R1, #6

    # Whole image
    print(disasm.disassemble_to_text(image))
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from lc3_disasm.cpu import (
    WORD_MASK,
    ExtensionOp,
    Opcode,
    get_trap_name,
    pc_relative_target,
    register_name,
    to_signed,
)
from lc3_disasm.disassembler.decoder import (
    BaseOffset,
    Bare,
    Branch,
    Extension,
    Instruction,
    Jump,
    JumpSubroutine,
    Not,
    Operate,
    PCRelative,
    Trap,
    decode,
)
from lc3_disasm.objfile import MemoryImage


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class DisassembledInstruction:
    """
    A single disassembled LC-3 word.

    Attributes:
        address: Memory address of the word
        word: The raw 16-bit word
        mnemonic: The instruction mnemonic (e.g., "ADD", "BRnz", "RET")
        operand_str: Formatted operands (may be empty)
        instruction: The decoded instruction value
        target: Computed PC-relative target address, if any
        comment: Optional annotation (trap alias, signed offset)
    """
    address: int
    word: int
    mnemonic: str
    operand_str: str
    instruction: Instruction
    target: Optional[int] = None
    comment: str = ""

    @property
    def opcode(self) -> Opcode:
        return self.instruction.opcode

    @property
    def text(self) -> str:
        """Mnemonic and operands without the address prefix."""
        if self.operand_str:
            return f"{self.mnemonic} {self.operand_str}"
        return self.mnemonic

    def __str__(self) -> str:
        """Format as listing line: 0xADDR: MNEMONIC OPERANDS"""
        return f"0x{self.address:04X}: {self.text}"

    def format(self, show_word: bool = False, comments: bool = False) -> str:
        """
        Format as a listing line with optional extras.

        Args:
            show_word: Insert the raw word in hex after the address
            comments: Append the annotation, when there is one
        """
        line = f"0x{self.address:04X}: "
        if show_word:
            line += f"{self.word:04X}  "
        line += self.text
        if comments and self.comment:
            line = f"{line:<32} ; {self.comment}"
        return line

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "address": f"0x{self.address:04X}",
            "address_int": self.address,
            "word": f"0x{self.word:04X}",
            "opcode": self.opcode.name,
            "mnemonic": self.mnemonic,
            "operand": self.operand_str,
            "target": f"0x{self.target:04x}" if self.target is not None else None,
            "text": self.text,
            "comment": self.comment,
        }


def _address(value: int) -> str:
    return f"0x{value:04x}"


def _immediate(value: int) -> str:
    return f"#{to_signed(value)}"


def _offset_comment(offset: int) -> str:
    return f"{to_signed(offset):+d}"


# =============================================================================
# LC-3 Disassembler
# =============================================================================

class LC3Disassembler:
    """
    Disassembler for LC-3 machine code.

    The disassembler is stateless apart from its options: every call is a
    pure function of (address, word), so one instance can be shared freely.

    Attributes:
        extensions: Decode the vendor extension (NOP/CLR/INC/DEC) carried
                    in RES words. When off, every RES word prints as RES.
    """

    def __init__(self, extensions: bool = False):
        self.extensions = extensions

    def disassemble_one(self, address: int, word: int) -> DisassembledInstruction:
        """
        Disassemble a single word.

        Args:
            address: Memory address of the word (for PC-relative targets)
            word: The 16-bit instruction word

        Returns:
            DisassembledInstruction with decoded information
        """
        address &= WORD_MASK
        word &= WORD_MASK
        instruction = decode(word, extensions=self.extensions)
        mnemonic, operand_str, target, comment = self._format_operands(instruction, address)
        return DisassembledInstruction(
            address=address,
            word=word,
            mnemonic=mnemonic,
            operand_str=operand_str,
            instruction=instruction,
            target=target,
            comment=comment,
        )

    def _format_operands(
        self,
        instr: Instruction,
        address: int,
    ) -> Tuple[str, str, Optional[int], str]:
        """
        Render an instruction according to its format.

        Returns:
            Tuple of (mnemonic, operand_string, target_address, comment)
        """
        if isinstance(instr, Operate):
            name = instr.opcode.name
            head = f"{register_name(instr.dr)}, {register_name(instr.sr1)}"
            if instr.imm_mode:
                return name, f"{head}, {_immediate(instr.imm5)}", None, ""
            return name, f"{head}, {register_name(instr.sr2)}", None, ""

        elif isinstance(instr, Not):
            return "NOT", f"{register_name(instr.dr)}, {register_name(instr.sr)}", None, ""

        elif isinstance(instr, Branch):
            target = pc_relative_target(address, instr.offset9)
            return (
                f"BR{instr.conditions}",
                _address(target),
                target,
                _offset_comment(instr.offset9),
            )

        elif isinstance(instr, Jump):
            if instr.is_return:
                return "RET", "", None, ""
            return "JMP", register_name(instr.base), None, ""

        elif isinstance(instr, JumpSubroutine):
            if instr.long_mode:
                target = pc_relative_target(address, instr.offset11)
                return "JSR", _address(target), target, _offset_comment(instr.offset11)
            return "JSRR", register_name(instr.base), None, ""

        elif isinstance(instr, PCRelative):
            target = pc_relative_target(address, instr.offset9)
            return (
                instr.opcode.name,
                f"{register_name(instr.reg)}, {_address(target)}",
                target,
                _offset_comment(instr.offset9),
            )

        elif isinstance(instr, BaseOffset):
            operands = (
                f"{register_name(instr.reg)}, {register_name(instr.base)}, "
                f"{_immediate(instr.offset6)}"
            )
            return instr.opcode.name, operands, None, ""

        elif isinstance(instr, Trap):
            return "TRAP", f"0x{instr.vector:02X}", None, get_trap_name(instr.vector) or ""

        elif isinstance(instr, Extension):
            if instr.op == ExtensionOp.NOP:
                return "NOP", "", None, "extension"
            return instr.op.name, register_name(instr.reg), None, "extension"

        elif isinstance(instr, Bare):
            if instr.opcode == Opcode.RES:
                return "RES", "", None, "reserved opcode"
            return instr.opcode.name, "", None, ""

        else:
            # Unknown variant: emit the word as data so the line still exists
            return ".FILL", f"0x{instr.word:04X}", None, "unknown instruction"

    def disassemble(
        self,
        image: MemoryImage,
        count: Optional[int] = None,
    ) -> List[DisassembledInstruction]:
        """
        Disassemble every word of an image in ascending address order.

        Args:
            image: The loaded memory image
            count: Maximum number of words to disassemble (None = all)

        Returns:
            List of DisassembledInstruction objects, one per word
        """
        result = []
        for address, word in image.items():
            if count is not None and len(result) >= count:
                break
            result.append(self.disassemble_one(address, word))
        return result

    def disassemble_to_text(
        self,
        image: MemoryImage,
        count: Optional[int] = None,
        comments: bool = False,
        show_words: bool = False,
    ) -> str:
        """
        Disassemble and return a listing, one line per word.

        Args:
            image: The loaded memory image
            count: Maximum number of words
            comments: Append annotations
            show_words: Include the raw word after each address

        Returns:
            Multi-line string with the listing
        """
        instructions = self.disassemble(image, count)
        return "\n".join(
            instr.format(show_word=show_words, comments=comments)
            for instr in instructions
        )


_DEFAULT = LC3Disassembler()


def disassemble(address: int, word: int) -> str:
    """
    Render one word as a listing line.

    Total over all 16-bit inputs: every word produces exactly one line.

    Example:
        >>> disassemble(0x3000, 0x1066)
        '0x3000: ADD R0, R1, #6'
    """
    return str(_DEFAULT.disassemble_one(address, word))
