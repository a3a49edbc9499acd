"""A compact array of boolean flags stored in bytes."""

from __future__ import annotations


class BitBool:
    """Boolean flags packed eight to a byte; bit 0 is the lowest bit of byte 0."""

    def __init__(self, size: int = 1) -> None:
        self._flags = bytearray(max(1, size))

    def _locate(self, index: int) -> tuple[int, int]:
        if index < 0 or index >= self.size():
            raise IndexError(f"bit index {index} is out of range")
        return index // 8, 1 << (index % 8)

    def set_bit(self, index: int, flag: bool) -> None:
        byte, mask = self._locate(index)
        if flag:
            self._flags[byte] |= mask
        else:
            self._flags[byte] &= ~mask & 0xFF

    def set_true(self, index: int) -> None:
        self.set_bit(index, True)

    def set_false(self, index: int) -> None:
        self.set_bit(index, False)

    def set_value(self, value: int, byte_index: int = 0) -> None:
        """Store a whole byte at ``byte_index``."""
        if byte_index < 0 or byte_index >= len(self._flags):
            raise IndexError(f"byte index {byte_index} is out of range")
        self._flags[byte_index] = value & 0xFF

    def clear(self) -> None:
        """Set every flag to False."""
        self._flags = bytearray(len(self._flags))

    def resize(self, byte_count: int) -> None:
        """Change the storage to ``byte_count`` bytes (never fewer than one)."""
        byte_count = max(1, byte_count)
        current = len(self._flags)
        if byte_count < current:
            del self._flags[byte_count:]
        else:
            self._flags.extend(bytes(byte_count - current))

    def get_bit(self, index: int) -> bool:
        byte, mask = self._locate(index)
        return bool(self._flags[byte] & mask)

    def __getitem__(self, index: int) -> bool:
        return self.get_bit(index)

    def size(self) -> int:
        """Number of usable flags."""
        return len(self._flags) * 8

    def get_value(self, byte_index: int = 0) -> int:
        if byte_index < 0 or byte_index >= len(self._flags):
            raise IndexError(f"byte index {byte_index} is out of range")
        return self._flags[byte_index]

    def true_count(self, count: int | None = None) -> int:
        """Count the True flags among the first ``count`` (all by default)."""
        limit = self.size() if count is None else min(count, self.size())
        return sum(self.get_bit(i) for i in range(limit))