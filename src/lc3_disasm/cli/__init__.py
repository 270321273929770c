"""
LC-3 Disassembler Command-Line Interface
========================================

This package provides the command-line tool of the package:

- **lc3disasm**: object file disassembler

The tool is a Click-based CLI application with help text and
consistent exit codes (see cli.errors).
"""

__all__ = ["lc3disasm"]
