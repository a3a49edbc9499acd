import pytest

from chbaselib.text_object import TextObject


def test_split_into_lines():
    obj = TextObject("a,b,c", ",")
    assert list(obj) == ["a", "b", "c"]
    assert len(obj) == 3


def test_text_round_trip():
    source = "first\r\nsecond\r\nthird"
    obj = TextObject(source)
    assert obj.text == source
    assert obj.char_length() == len(source)


def test_text_without_separator_is_one_line():
    obj = TextObject("single", ",")
    assert list(obj) == ["single"]


def test_empty_object_has_no_lines():
    obj = TextObject()
    assert len(obj) == 0
    assert obj.text == ""


def test_line_out_of_range_returns_empty():
    obj = TextObject("a,b", ",")
    assert obj.line(1) == "b"
    assert obj.line(5) == ""
    assert obj[0] == "a"
    assert obj[-1] == ""


def test_changing_cut_char_resplits():
    obj = TextObject("a,b;c", ",")
    obj.cut_char = ";"
    assert list(obj) == ["a,b", "c"]
    assert obj.text == "a,b;c"


def test_empty_cut_char_rejected():
    with pytest.raises(ValueError):
        TextObject("a", "")


def test_find_line():
    obj = TextObject("ab,cd,ef", ",")
    assert obj.find_line("ef") == 3
    assert obj.find_line("ab") == 1
    assert obj.find_line("zz") == 0


def test_find():
    obj = TextObject("ab,cd", ",")
    assert obj.find("cd") == obj.text.find("cd")
    assert obj.find("zz") == -1


def test_substring():
    obj = TextObject("hello world", ",")
    assert obj.substring(6) == "world"
    assert obj.substring(0, 5) == "hello"


def test_substring_past_end_raises():
    obj = TextObject("abc", ",")
    with pytest.raises(IndexError):
        obj.substring(10)


def test_sub_object_uses_default_separator():
    obj = TextObject("x\r\ny", ",")
    sub = obj.sub_object(0)
    assert list(sub) == ["x", "y"]


def test_insert_lines():
    obj = TextObject("a,d", ",")
    obj.insert_lines("b,c", 1)
    assert list(obj) == ["a", "b", "c", "d"]
    obj.insert_lines("e", len(obj))
    assert obj.line(len(obj) - 1) == "e"


def test_insert_lines_past_end_ignored():
    obj = TextObject("a,b", ",")
    obj.insert_lines("z", 5)
    assert list(obj) == ["a", "b"]