import pytest

from jsonvalue.strconv import format_real, parse_real


@pytest.mark.parametrize("text", ["1.5", "-0.25", "3e10", "2.5E-3", "0.0"])
def test_parse_real_matches_float(text):
    assert parse_real(text) == float(text)


def test_parse_real_accepts_bytes():
    assert parse_real(b"6.75") == 6.75


def test_parse_real_overflow():
    with pytest.raises(OverflowError):
        parse_real("1e400")


def test_parse_real_underflow_is_not_an_error():
    assert parse_real("1e-400") == 0.0


@pytest.mark.parametrize("text", ["abc", "", "nan", "inf"])
def test_parse_real_invalid(text):
    with pytest.raises(ValueError):
        parse_real(text)


def test_format_integral_value_gets_fraction():
    assert format_real(1.0, 0, False) == "1.0"


def test_format_exponent_has_no_plus_or_leading_zero():
    assert format_real(1e100, 0, False) == "1e100"


def test_format_fractional_digits():
    assert format_real(2.5, 3, True) == "2.500"


@pytest.mark.parametrize(
    "value", [0.1, 1.0, -3.75, 1e-5, 1.2345e-300, 6.02e23, 1e22, 123456789.0, 5e-324]
)
def test_format_round_trip(value):
    text = format_real(value, 0, False)
    assert parse_real(text) == value
    assert "." in text or "e" in text
    assert "e+" not in text
    assert "e-0" not in text


def test_format_negative_exponent_keeps_sign():
    text = format_real(1e-5, 0, False)
    assert "e-" in text
    assert parse_real(text) == 1e-5


def test_format_low_precision_still_reads_as_real():
    text = format_real(100.0, 1, False)
    assert "e" in text or "." in text
    assert parse_real(text) == 100.0