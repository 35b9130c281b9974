import pytest

from solong.printf import printf, render


def test_plain_text_passes_through():
    assert render("Step: done\n") == "Step: done\n"


def test_percent_escape():
    assert render("100%%") == "100%"


def test_signed_number():
    assert render("Step: %d\n", 42) == "Step: 42\n"
    assert render("%i", -7) == "-7"


def test_int_min():
    assert render("%d", -2147483648) == "-2147483648"


def test_signed_wraps_to_32_bits():
    assert render("%d", 2**31) == render("%d", -(2**31))


def test_zero_values():
    assert render("%d%u%x", 0, 0, 0) == "000"


def test_unsigned_wraps_negative():
    assert int(render("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("value", [1, 9, 10, 15, 16, 255, 4096, 123456789])
def test_hex_round_trip(value):
    lower = render("%x", value)
    upper = render("%X", value)
    assert int(lower, 16) == value
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_pointer_prefix_and_value():
    text = render("%p", 3054)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 3054


def test_null_pointer():
    assert render("%p", None) == "0x0"


def test_null_string():
    assert render("%s", None) == "(null)"


def test_string_and_char():
    assert render("%s-%c", "wall", "P") == "wall-P"
    assert render("%c", ord("C")) == "C"


def test_unknown_conversion_is_dropped():
    assert render("a%qb") == "ab"


def test_trailing_percent_stops():
    assert render("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        render("%d")


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        render("%d", "x")
    with pytest.raises(TypeError):
        render("%s", 5)


def test_printf_writes_and_counts(capsys):
    count = printf("Step: %d %s\n", 3, "ok")
    captured = capsys.readouterr()
    assert captured.out == "Step: 3 ok\n"
    assert count == len(captured.out)


def test_printf_count_matches_render(capsys):
    fmt, args = "%p|%x|%%|%c", (255, 255, "E")
    count = printf(fmt, *args)
    assert capsys.readouterr().out == render(fmt, *args)
    assert count == len(render(fmt, *args))