import pytest
from pydantic import ValidationError

from gtinmini.errors import GtinError, InvalidDigit, InvalidLength
from gtinmini.gtin import Gtin, GtinKind, classify_type, normalize, to_string


@pytest.mark.parametrize(
    "s, kind",
    [
        ("12345670", GtinKind.GTIN8),
        ("614141000012", GtinKind.GTIN12),
        ("8719076050360", GtinKind.GTIN13),
        ("50614141000994", GtinKind.GTIN14),
    ],
)
def test_classify_type(s, kind):
    assert classify_type(s) is kind


def test_classify_type_ignores_content():
    assert classify_type("abcdefgh") is GtinKind.GTIN8


@pytest.mark.parametrize("s", ["", "1234567", "123456789", "12345678901", "123456789012345"])
def test_invalid_length(s):
    with pytest.raises(InvalidLength):
        classify_type(s)
    with pytest.raises(InvalidLength):
        normalize(s)


def test_normalize_examples():
    g = normalize("614141000012")
    assert str(g) == "00614141000012"
    assert g.kind is GtinKind.GTIN12

    g = normalize("00614141000029")
    assert to_string(g) == "00614141000029"
    assert g.kind is GtinKind.GTIN14

    g = normalize("50614141000994")
    assert to_string(g) == "50614141000994"
    assert g.kind is GtinKind.GTIN14

    assert to_string(normalize("614141000777")) == "00614141000777"


def test_normalize_right_aligns():
    g = normalize("12345670")
    assert g.digits == (0, 0, 0, 0, 0, 0, 1, 2, 3, 4, 5, 6, 7, 0)
    assert g.kind is GtinKind.GTIN8


@pytest.mark.parametrize("s", ["12345670", "036000291452", "4006381333931", "10614141000415"])
def test_round_trip_pads_to_14(s):
    assert to_string(normalize(s)) == s.zfill(14)


def test_normalize_is_idempotent_on_canonical_form():
    for s in ["12345670", "614141000012", "8719076050360", "50614141000994"]:
        g = normalize(s)
        again = normalize(to_string(g))
        assert again.digits == g.digits
        assert again.kind is GtinKind.GTIN14
    g = normalize("50614141000994")
    assert normalize(to_string(g)) == g


def test_isbn_x_maps_to_ten():
    g = normalize("978030640615X")
    assert g.digits[13] == 10
    assert to_string(g) == "0978030640615X"


def test_x_accepted_at_any_position():
    assert normalize("X2345670").digits[6] == 10


@pytest.mark.parametrize("s", ["40063813339A1", "1234567x", "1234 670", "12345-70"])
def test_invalid_digit(s):
    with pytest.raises(InvalidDigit):
        normalize(s)


def test_invalid_digit_reports_position():
    with pytest.raises(InvalidDigit) as exc:
        normalize("40063813339A1")
    assert exc.value.char == "A"
    assert exc.value.position == 11


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        normalize("bad")
    assert issubclass(InvalidDigit, GtinError)


def test_gtin_is_frozen():
    g = normalize("12345670")
    with pytest.raises(ValidationError):
        g.kind = GtinKind.GTIN13


def test_gtin_digits_checked():
    with pytest.raises(ValidationError):
        Gtin(kind=GtinKind.GTIN13, digits=[0] * 13)
    with pytest.raises(ValidationError):
        Gtin(kind=GtinKind.GTIN13, digits=[0] * 13 + [11])
    g = Gtin(kind="GTIN-13", digits=[0, 9, 7, 8, 0, 6, 7, 0, 0, 2, 2, 1, 5, 1])
    assert g.kind is GtinKind.GTIN13
    assert g.digits[0] == 0
