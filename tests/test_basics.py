import pytest

from fixlings.exercises.basics import (
    Rectangle,
    animal_habitat,
    bigger,
    foo_if_fizz,
    is_even,
    sale_price,
    square,
)


def test_sale_price_odd_and_even():
    assert sale_price(51) == 48
    assert sale_price(50) == 40


def test_square():
    assert square(3) == 9


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_equal_numbers():
    assert bigger(42, 42) == 42


def test_foo_for_fizz():
    assert foo_if_fizz("fizz") == "foo"


def test_bar_for_fuzz():
    assert foo_if_fizz("fuzz") == "bar"


def test_default_to_baz():
    assert foo_if_fizz("literally anything") == "baz"


@pytest.mark.parametrize(
    ("animal", "habitat"),
    [
        ("gopher", "Burrow"),
        ("snake", "Desert"),
        ("crab", "Beach"),
        ("dinosaur", "Unknown"),
    ],
)
def test_animal_habitat(animal, habitat):
    assert animal_habitat(animal) == habitat


def test_is_true_when_even():
    assert is_even(2) is True


def test_is_false_when_odd():
    assert is_even(5) is False


def test_correct_width_and_height():
    rect = Rectangle(10, 20)
    assert rect.width == 10
    assert rect.height == 20


def test_negative_width():
    with pytest.raises(ValueError, match="cannot be negative"):
        Rectangle(-10, 10)


def test_negative_height():
    with pytest.raises(ValueError, match="cannot be negative"):
        Rectangle(10, -10)