import string

import pytest

from ardrivo.arduino import (
    Level,
    PinMode,
    bit,
    bit_clear,
    bit_read,
    bit_set,
    bit_write,
    high_byte,
    is_alpha,
    is_alpha_numeric,
    is_ascii,
    is_control,
    is_digit,
    is_graph,
    is_hexadecimal_digit,
    is_lower_case,
    is_printable,
    is_punct,
    is_space,
    is_upper_case,
    is_whitespace,
    low_byte,
    map_value,
    random_range,
    random_seed,
    sq,
)


def test_levels_and_modes():
    assert Level.LOW == 0
    assert Level.HIGH == 1
    assert Level(1) is Level.HIGH
    assert Level(0) is Level.LOW
    assert PinMode.INPUT_PULLUP is PinMode.INPUT
    assert PinMode.OUTPUT != PinMode.INPUT


def test_map_value_endpoints():
    assert map_value(0, 0, 1023, 0, 255) == 0
    assert map_value(1023, 0, 1023, 0, 255) == 255
    assert map_value(10, 10, 20, 50, 100) == 50


def test_map_value_truncates_toward_zero():
    assert map_value(-1, 0, 3, 0, 1) == 0


def test_map_value_empty_range():
    with pytest.raises(ZeroDivisionError):
        map_value(5, 3, 3, 0, 10)


def test_sq():
    assert sq(12) == 144
    assert sq(-5) == sq(5)


def test_digit_classes():
    assert all(is_digit(c) for c in string.digits)
    assert not is_digit("a")
    assert all(is_hexadecimal_digit(c) for c in string.hexdigits)
    assert not is_hexadecimal_digit("g")


def test_letter_classes():
    assert all(is_alpha(c) for c in string.ascii_letters)
    assert not is_alpha("1")
    assert is_alpha_numeric("1") and is_alpha_numeric("z")
    assert not is_alpha_numeric("!")
    assert is_lower_case("q") and not is_lower_case("Q")
    assert is_upper_case("Q") and not is_upper_case("q")
    assert not is_alpha("\u00e9")


def test_space_classes():
    assert is_whitespace(" ") and is_whitespace("\t")
    assert not is_whitespace("\n")
    assert all(is_space(c) for c in " \t\n\v\f\r")
    assert not is_space("x")


def test_print_classes():
    assert is_printable(" ")
    assert not is_graph(" ")
    assert is_graph("~")
    assert is_control("\x7f") and is_control("\n")
    assert not is_control("a")
    assert all(is_punct(c) for c in string.punctuation)
    assert not is_punct("a")


def test_is_ascii():
    assert is_ascii("a")
    assert not is_ascii("\u00c8")


def test_character_argument_checked():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(TypeError):
        is_digit(5)


def test_random_reproducible_and_bounded():
    random_seed(1234)
    first = [random_range(3, 9) for _ in range(50)]
    random_seed(1234)
    second = [random_range(3, 9) for _ in range(50)]
    assert first == second
    assert all(3 <= v < 9 for v in first)
    assert all(0 <= random_range(5) < 5 for _ in range(50))


def test_random_empty_range():
    with pytest.raises(ValueError):
        random_range(3, 3)


@pytest.mark.parametrize("n", [0, 3, 7, 15])
def test_bit_operations(n):
    assert bit_read(bit(n), n) == 1
    assert bit_set(0, n) == bit(n)
    assert bit_clear(bit(n), n) == 0
    x = 0b1010_0101_1100
    assert bit_read(bit_write(x, n, True), n) == 1
    assert bit_read(bit_write(x, n, False), n) == 0
    assert bit_clear(bit_write(x, n, True), n) == bit_clear(x, n)


@pytest.mark.parametrize("x", [0, 0x1234, 0xFFFF, 0x00AB])
def test_byte_split(x):
    assert (high_byte(x) << 8) | low_byte(x) == x
    assert low_byte(x) <= 0xFF