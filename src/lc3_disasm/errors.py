"""
LC-3 Disassembler Error Hierarchy
=================================

This module defines the exception hierarchy for the whole package.
All exceptions inherit from LC3Error, allowing callers to catch every
package-related error with a single except clause if desired.

Exception Hierarchy
-------------------
LC3Error (base)
└── ObjectFileError (object file loading)
    ├── FormatError - input too short to hold an origin word
    └── TruncatedInputError - image would overflow the address space

Decoding never raises: every 16-bit word has a textual rendering, so
there is no decoder branch in this hierarchy.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from lc3_disasm.objfile.image import MemoryImage


# =============================================================================
# Base Exception Class
# =============================================================================

class LC3Error(Exception):
    """
    Base exception for all LC-3 disassembler errors.

    Callers that do not care about the specific failure can write:

        try:
            image = load_file("program.obj")
        except LC3Error as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Object File Exceptions
# =============================================================================

class ObjectFileError(LC3Error):
    """Base exception for object file loading errors."""
    pass


class FormatError(ObjectFileError):
    """
    Object file is structurally invalid.

    Raised when the input does not even contain the two bytes of the
    origin word. No partial image is produced.

    Attributes:
        size: Number of bytes that were available
    """

    def __init__(self, message: str, size: Optional[int] = None):
        self.size = size
        super().__init__(message)


class TruncatedInputError(ObjectFileError):
    """
    Instruction stream runs past the end of the address space.

    This error is recoverable: the loader has already built the image up
    to address $FFFF, and it is available as ``image``. Only raised when
    the loader runs in strict mode; otherwise truncation is reported on
    the image itself via ``MemoryImage.dropped_words``.

    Attributes:
        image: The truncated image (words up to the address space boundary)
        loaded: Number of words actually loaded
        dropped: Number of words discarded past the boundary
    """

    def __init__(self, image: "MemoryImage", loaded: int, dropped: int):
        self.image = image
        self.loaded = loaded
        self.dropped = dropped
        super().__init__(
            f"object overflows address space at origin 0x{image.origin:04X}: "
            f"loaded {loaded} word(s), dropped {dropped}"
        )
