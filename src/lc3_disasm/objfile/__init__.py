"""
LC-3 Object File Handling
=========================

This package reads LC-3 object files (.obj) into memory images.

- **MemoryImage**: an origin address plus the words loaded from there on
- **load / load_file**: parse the big-endian object format
- **dump**: write an image back out, mostly for building test fixtures

Quick Start
-----------
    >>> from lc3_disasm.objfile import load_file
    >>> image = load_file("hello.obj")
    >>> for address, word in image.items():
    ...     print(f"{address:04X}: {word:04X}")
"""

from lc3_disasm.objfile.image import MemoryImage
from lc3_disasm.objfile.loader import load, load_file, dump

__all__ = [
    "MemoryImage",
    "load",
    "load_file",
    "dump",
]
