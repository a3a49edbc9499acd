import pytest

from chbaselib.json_base import JsonFormatError
from chbaselib.json_scalars import JsonBoolean, JsonNumber, JsonString


class TestJsonBoolean:
    def test_default_is_false(self):
        assert JsonBoolean().dump() == "false"

    def test_dump_true(self):
        assert JsonBoolean(True).dump() == "true"

    @pytest.mark.parametrize("text, expected", [("true", True), ("false", False)])
    def test_load(self, text, expected):
        value = JsonBoolean(not expected)
        value.load(text)
        assert bool(value) is expected
        assert value.dump() == text

    @pytest.mark.parametrize("text", ["", "tru", "True", "falsey", "1", "yes"])
    def test_load_rejects(self, text):
        with pytest.raises(JsonFormatError):
            JsonBoolean().load(text)

    def test_failed_load_keeps_value(self):
        value = JsonBoolean(True)
        with pytest.raises(JsonFormatError):
            value.load("nope")
        assert value == True  # noqa: E712

    def test_equality_and_copy(self):
        assert JsonBoolean(JsonBoolean(True)) == JsonBoolean(True)
        assert JsonBoolean(False) == False  # noqa: E712
        assert str(JsonBoolean(False)) == "false"


class TestJsonNumber:
    def test_whole_number_dump(self):
        assert JsonNumber(3).dump() == "3"

    def test_fraction_dump(self):
        assert JsonNumber(1.5).dump() == "1.5"

    @pytest.mark.parametrize("text", ["0", "12", "-7", "3.25", "100.5"])
    def test_load_round_trip(self, text):
        value = JsonNumber()
        value.load(text)
        assert value.dump() == text
        assert float(value) == float(text)

    @pytest.mark.parametrize("text", ["", "abc", "1.2.3", "--1", "1e5", "."])
    def test_load_rejects(self, text):
        with pytest.raises(JsonFormatError):
            JsonNumber().load(text)

    def test_arithmetic_matches_floats(self):
        a, b = JsonNumber(6.5), JsonNumber(2)
        assert a + b == 6.5 + 2
        assert a - b == 6.5 - 2
        assert a * b == 6.5 * 2
        assert a / b == 6.5 / 2

    def test_division_by_zero_divides_by_one(self):
        assert JsonNumber(5) / JsonNumber(0) == 5

    def test_modulo_sign_follows_dividend(self):
        result = JsonNumber(-7) % 3
        assert result < 0 if isinstance(result, float) else float(result) < 0
        assert float(result) == -7 - 3 * int(-7 / 3)

    def test_in_place_operators_mutate(self):
        value = JsonNumber(2)
        same = value
        value += 3
        value *= 2
        value -= 4
        value /= 0
        assert same is value
        assert float(value) == (2 + 3) * 2 - 4

    def test_binary_operator_returns_new_object(self):
        a = JsonNumber(1)
        b = a + 1
        assert b is not a
        assert float(a) == 1

    def test_int_truncates(self):
        assert int(JsonNumber(-2.9)) == -2

    def test_rejects_non_number(self):
        with pytest.raises(TypeError):
            JsonNumber("1")


class TestJsonString:
    def test_dump_quotes(self):
        assert JsonString("abc").dump() == '"abc"'

    def test_dump_escapes_newline(self):
        assert JsonString("a\nb").dump() == '"a\\nb"'

    @pytest.mark.parametrize(
        "text", ["", "plain", 'say "hi"', "it's", "back\\slash", "a\b\f\r\nz", "tab\there"]
    )
    def test_round_trip(self, text):
        value = JsonString()
        value.load(JsonString(text).dump())
        assert value.value == text

    def test_single_quoted_load(self):
        value = JsonString()
        value.load("'abc'")
        assert str(value) == "abc"

    @pytest.mark.parametrize(
        "text", ["", '"', "abc", "\"abc'", '"a\nb"', '"\\t"', '"\\x"', '"end\\"']
    )
    def test_load_rejects(self, text):
        with pytest.raises(JsonFormatError):
            JsonString().load(text)

    def test_concatenation(self):
        a = JsonString("ab")
        b = a + JsonString("cd")
        assert b == "abcd"
        assert a == "ab"
        a += "xy"
        assert a == JsonString("abxy")

    def test_from_number(self):
        assert JsonString(5) == "5"
        value = JsonNumber()
        value.load(str(JsonString(2.5)))
        assert float(value) == 2.5

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            JsonString([1])