from chbaselib.counter import Counter, Cumulative


def test_counter_add_sub_reset():
    counter = Counter()
    assert counter.count == 0
    counter.add()
    counter.add()
    counter.sub()
    assert counter.count == 1
    counter.reset()
    assert counter.count == 0


def test_counter_goes_negative():
    counter = Counter()
    counter.sub()
    assert counter.count == -1


def test_cumulative_tracks_nesting():
    cumulative = Cumulative("{", "}")
    results = [cumulative.update(ch) for ch in "{{x}"]
    assert results == [1, 2, 2, 1]
    assert cumulative.update("}") == 0


def test_cumulative_ignores_other_values():
    cumulative = Cumulative("[", "]")
    assert cumulative.update("a") == 0


def test_cumulative_same_chars_rejected():
    cumulative = Cumulative("a", "a")
    assert cumulative.add_char == "a"
    assert cumulative.sub_char is None


def test_cumulative_setters_refuse_other_value():
    cumulative = Cumulative("(", ")")
    cumulative.add_char = ")"
    assert cumulative.add_char == "("
    cumulative.sub_char = "("
    assert cumulative.sub_char == ")"
    cumulative.sub_char = "]"
    assert cumulative.sub_char == "]"


def test_cumulative_reset():
    cumulative = Cumulative("(", ")")
    cumulative.update("(")
    cumulative.reset()
    assert cumulative.count == 0