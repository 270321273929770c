"""
Memory Image
============

The in-memory form of a loaded LC-3 object file: an origin address and
the words placed at consecutive addresses from there on.

A MemoryImage is a value. It is built once by the loader and never
mutated, so it can be handed to any number of disassembly passes.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from lc3_disasm.cpu import ADDRESS_SPACE, WORD_MASK


@dataclass(frozen=True)
class MemoryImage:
    """
    A contiguous block of LC-3 memory.

    Attributes:
        origin: Address of the first word (0x0000-0xFFFF)
        words: The 16-bit words, one per address starting at origin
        dropped_words: Words from the object file that did not fit below
                       the end of the address space
        trailing_bytes: Odd bytes at the end of the file that could not
                        form a whole word (0 or 1)
    """
    origin: int
    words: Tuple[int, ...]
    dropped_words: int = 0
    trailing_bytes: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.origin <= WORD_MASK:
            raise ValueError(f"origin out of range: {self.origin}")
        if self.origin + len(self.words) > ADDRESS_SPACE:
            raise ValueError(
                f"{len(self.words)} words at 0x{self.origin:04X} "
                f"overflow the address space"
            )
        for word in self.words:
            if not 0 <= word <= WORD_MASK:
                raise ValueError(f"word out of range: {word}")

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, address: object) -> bool:
        return (
            isinstance(address, int)
            and self.origin <= address < self.origin + len(self.words)
        )

    def __getitem__(self, address: int) -> int:
        """Return the word stored at an absolute address."""
        if address not in self:
            raise IndexError(f"address 0x{address:04X} not in image")
        return self.words[address - self.origin]

    @property
    def truncated(self) -> bool:
        """True when words were dropped at the address space boundary."""
        return self.dropped_words > 0

    @property
    def end_address(self) -> Optional[int]:
        """Address of the last word, or None for an empty image."""
        if not self.words:
            return None
        return self.origin + len(self.words) - 1

    def addresses(self) -> range:
        """Addresses covered by the image, in ascending order."""
        return range(self.origin, self.origin + len(self.words))

    def items(self) -> Iterator[Tuple[int, int]]:
        """Iterate (address, word) pairs in ascending address order."""
        return zip(self.addresses(), self.words)
