import pytest
from qsolve.types import Err, Ok, PrecisionError
from qsolve.validator import MAX_MAGNITUDE, validate

@pytest.mark.parametrize("text, value", [
    ("1", 1.0),
    ("0", 0.0),
    ("-1", -1.0),
    ("1.5", 1.5),
    ("-2.75", -2.75),
    (" 3 ", 3.0),
    (".5", 0.5),
    ("2.", 2.0),
    ("1" + "0" * 150, 1e150),
])
def test_accepts_plain_decimals(text, value):
    out = validate(text)
    assert isinstance(out, Ok)
    assert out.value == value

@pytest.mark.parametrize("text", ["1e2", "1E2", "2.5e-3", "1e1000", "-1e1000"])
def test_rejects_scientific_notation(text):
    out = validate(text)
    assert isinstance(out, Err)
    assert out.error.kind == "scientific_notation"

@pytest.mark.parametrize("text", ["abc", "", "   ", "inf", "nan", "Infinity", "+1", "1_000", "1.2.3", "--1", "0x10", "1,5",
                                  "\u0661\u0662", "\uff11\uff12", "\u30001", "1\u00a0"])
def test_rejects_non_decimal_text(text):
    out = validate(text)
    assert isinstance(out, Err)
    assert out.error.kind == "not_a_number"
    assert "The value you entered is not allowed" in out.error.message

@pytest.mark.parametrize("text", ["1" + "0" * 400, "-" + "9" * 400, "1" + "0" * 200])
def test_rejects_overflowing_magnitudes(text):
    out = validate(text)
    assert isinstance(out, Err)
    assert out.error.kind == "overflow"

def test_bound_keeps_discriminant_finite():
    m = MAX_MAGNITUDE
    assert m * m + 4 * m * m < float("inf")

def test_unwrap_raises_precision_error():
    with pytest.raises(PrecisionError) as exc:
        validate("1e2").unwrap()
    assert exc.value.kind == "scientific_notation"
    assert validate("1.5").unwrap() == 1.5
