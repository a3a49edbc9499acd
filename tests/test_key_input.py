import pytest

from chbaselib.key_input import KeyInputBase


class ScriptedKeys(KeyInputBase):
    """Concrete key input that applies queued key states on update."""

    def __init__(self):
        super().__init__()
        self.pending = {}

    def update(self):
        for key, pressed in self.pending.items():
            KeyInputBase.set_key(self, key, pressed)
        self.pending.clear()


def test_cannot_instantiate_base():
    with pytest.raises(TypeError):
        KeyInputBase()


def test_is_pushed_while_held():
    keys = ScriptedKeys()
    assert KeyInputBase.is_pushed(keys, 65) is False
    keys.pending[65] = True
    keys.update()
    assert KeyInputBase.is_pushed(keys, 65) is True
    assert KeyInputBase.is_pushed(keys, 65) is True


def test_is_pushed_once_triggers_once():
    keys = ScriptedKeys()
    KeyInputBase.set_key(keys, 10, True)
    assert KeyInputBase.is_pushed_once(keys, 10) is True
    assert KeyInputBase.is_pushed_once(keys, 10) is False
    KeyInputBase.set_key(keys, 10, False)
    assert KeyInputBase.is_pushed_once(keys, 10) is False
    KeyInputBase.set_key(keys, 10, True)
    assert KeyInputBase.is_pushed_once(keys, 10) is True


def test_set_all_released():
    keys = ScriptedKeys()
    KeyInputBase.set_key(keys, 0, True)
    KeyInputBase.set_key(keys, 255, True)
    assert KeyInputBase.is_pushed(keys, 255) is True
    KeyInputBase.set_all_released(keys)
    assert KeyInputBase.is_pushed(keys, 0) is False
    assert KeyInputBase.is_pushed(keys, 255) is False


def test_key_out_of_range():
    keys = ScriptedKeys()
    with pytest.raises(IndexError):
        KeyInputBase.set_key(keys, 256, True)
    assert KeyInputBase.is_pushed(keys, 255) is False