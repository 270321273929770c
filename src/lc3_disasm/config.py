"""
Disassembler Configuration
==========================

Listing options shared by the library and the command-line tool.
Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line flags (applied on top by the CLI)

Environment variables (all optional, boolean: 1/true/yes/on or 0/false/no/off):
    LC3_DISASM_EXTENSIONS: Decode NOP/CLR/INC/DEC inside RES words
    LC3_DISASM_COMMENTS: Append trap aliases and offsets as comments
    LC3_DISASM_WORDS: Show the raw word after each address
    LC3_DISASM_HEADER: Print the listing header
    LC3_DISASM_STRICT: Treat address space truncation as an error
"""

from dataclasses import dataclass, fields
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_flag(name: str) -> Optional[bool]:
    """Read a boolean environment variable, None when unset or invalid."""
    value = os.environ.get(name)
    if value is None:
        return None
    value = value.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    logger.warning(f"Ignoring {name}={value!r}: expected a boolean")
    return None


@dataclass
class DisassemblerConfig:
    """
    Options controlling how a listing is produced.

    Attributes:
        extensions: Decode the vendor extension inside RES words (default: False)
        comments: Annotate trap vectors and PC offsets (default: False)
        show_words: Include the raw word in hex (default: False)
        header: Emit the ``;`` comment header (default: True)
        strict: Fail when the object overflows the address space (default: False)
    """

    extensions: bool = False
    comments: bool = False
    show_words: bool = False
    header: bool = True
    strict: bool = False

    @classmethod
    def from_env(cls) -> "DisassemblerConfig":
        """
        Create a DisassemblerConfig from environment variables.

        Returns:
            DisassemblerConfig with defaults overridden by the environment
        """
        config = cls()

        env_names = {
            "extensions": "LC3_DISASM_EXTENSIONS",
            "comments": "LC3_DISASM_COMMENTS",
            "show_words": "LC3_DISASM_WORDS",
            "header": "LC3_DISASM_HEADER",
            "strict": "LC3_DISASM_STRICT",
        }
        for f in fields(cls):
            value = _env_flag(env_names[f.name])
            if value is not None:
                setattr(config, f.name, value)

        return config

    def merge(self, **overrides: Optional[bool]) -> "DisassemblerConfig":
        """
        Return a copy with the given options replaced.

        Overrides that are None are ignored, so unset command-line flags
        leave the configured value alone.
        """
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        for name, value in overrides.items():
            if name not in values:
                raise TypeError(f"unknown option: {name}")
            if value is not None:
                values[name] = value
        return DisassemblerConfig(**values)
