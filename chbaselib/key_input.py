"""Base class for keyboard state with held and edge-triggered checks."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .bit_bool import BitBool

KEY_BYTES = 256 // 8


class KeyInputBase(ABC):
    """Tracks 256 keys; subclasses fill in key state from ``update``."""

    def __init__(self) -> None:
        self._keys = BitBool(KEY_BYTES)
        self._seen = BitBool(KEY_BYTES)

    def set_all_released(self) -> None:
        """Mark every key as not pressed."""
        self._keys.clear()

    def set_key(self, key: int, pressed: bool) -> None:
        self._keys.set_bit(key, pressed)

    def is_pushed(self, key: int) -> bool:
        """True while ``key`` is held down."""
        if self._keys.get_bit(key):
            self._seen.set_true(key)
            return True
        self._seen.set_false(key)
        return False

    def is_pushed_once(self, key: int) -> bool:
        """True only on the first check after ``key`` goes down."""
        if self._keys.get_bit(key):
            if not self._seen.get_bit(key):
                self._seen.set_true(key)
                return True
            return False
        self._seen.set_false(key)
        return False

    @abstractmethod
    def update(self) -> None:
        """Refresh the key state."""