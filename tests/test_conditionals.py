from rustdrill.lessons.conditionals import bigger, foo_if_fizz, is_even


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_foo_for_fizz():
    assert foo_if_fizz("fizz") == "foo"


def test_bar_for_fuzz():
    assert foo_if_fizz("fuzz") == "bar"


def test_default_to_baz():
    assert foo_if_fizz("literally anything") == "baz"


def test_is_true_when_even():
    assert is_even(10) is True


def test_is_false_when_odd():
    assert is_even(11) is False