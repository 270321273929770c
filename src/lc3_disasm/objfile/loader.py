"""
Object File Loader
==================

Reads LC-3 object files into a MemoryImage.

Object File Format
------------------
An object file is a flat sequence of big-endian 16-bit words:

    word 0      origin - load address of word 1
    word 1..N   consecutive words placed at origin, origin+1, ...

The same byte-order conversion is applied to the origin and to every
following word. The loader never looks at word contents.

Address Space Boundary
----------------------
Memory ends at $FFFF. Words that would land past it are dropped: the
image keeps everything up to the boundary and records how many words
were discarded. In strict mode a TruncatedInputError is raised instead,
carrying the truncated image so callers can still use it.

Usage Examples
--------------
    >>> from lc3_disasm.objfile import load
    >>> image = load(bytes([0x30, 0x00, 0x10, 0x66]))
    >>> hex(image.origin), [hex(w) for w in image.words]
    ('0x3000', ['0x1066'])
"""

import logging
import struct
from pathlib import Path
from typing import Union

from lc3_disasm.cpu import ADDRESS_SPACE
from lc3_disasm.errors import FormatError, TruncatedInputError
from lc3_disasm.objfile.image import MemoryImage

# Logger for this module
logger = logging.getLogger(__name__)

WORD_SIZE = 2


# =============================================================================
# Loading
# =============================================================================

def load(data: bytes, strict: bool = False) -> MemoryImage:
    """
    Parse an object file held in memory.

    Args:
        data: The raw bytes of the object file
        strict: Raise TruncatedInputError when the program runs past the
                end of the address space, instead of truncating it and
                logging a warning

    Returns:
        MemoryImage with the origin and the loaded words

    Raises:
        FormatError: If the data is too short to contain the origin word
        TruncatedInputError: In strict mode, if words had to be dropped
    """
    if len(data) < WORD_SIZE:
        logger.debug(f"Object load failed: file too short ({len(data)} bytes)")
        raise FormatError(
            f"object file too short: need at least {WORD_SIZE} bytes for "
            f"the origin, got {len(data)}",
            size=len(data),
        )

    (origin,) = struct.unpack_from(">H", data, 0)

    body = len(data) - WORD_SIZE
    declared = body // WORD_SIZE
    trailing = body % WORD_SIZE
    if trailing:
        logger.warning(
            f"Ignoring {trailing} trailing byte(s): object length is not a whole number of words"
        )

    available = ADDRESS_SPACE - origin
    count = min(declared, available)
    dropped = declared - count

    words = struct.unpack_from(f">{count}H", data, WORD_SIZE)
    image = MemoryImage(
        origin=origin,
        words=tuple(words),
        dropped_words=dropped,
        trailing_bytes=trailing,
    )

    logger.debug(f"Loaded {count} word(s) at origin 0x{origin:04X}")

    if dropped:
        logger.warning(
            f"Object overflows address space: loaded {count} word(s) "
            f"from 0x{origin:04X}, dropped {dropped}"
        )
        if strict:
            raise TruncatedInputError(image, loaded=count, dropped=dropped)

    return image


def load_file(path: Union[str, Path], strict: bool = False) -> MemoryImage:
    """
    Read and parse an object file from disk.

    Args:
        path: Path to the .obj file
        strict: See load()

    Returns:
        MemoryImage with the file contents

    Raises:
        FileNotFoundError, PermissionError: If the file cannot be read
        FormatError, TruncatedInputError: See load()
    """
    path = Path(path)
    data = path.read_bytes()
    logger.debug(f"Read {len(data)} bytes from {path}")
    return load(data, strict=strict)


# =============================================================================
# Serialisation
# =============================================================================

def dump(image: MemoryImage) -> bytes:
    """
    Serialise an image back into the object file format.

    Dropped words and trailing bytes are not part of the image, so they
    are not written back.
    """
    return struct.pack(f">H{len(image.words)}H", image.origin, *image.words)
