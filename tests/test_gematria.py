import pytest

from arithmos.services.gematria import (
    SINGLE_METHODS,
    CalculationMethod,
    InvalidMethodError,
    Script,
    characters,
    compute_value,
    list_available_methods,
)


def test_compute_value_reference_examples():
    assert compute_value("A", CalculationMethod.Gematria) == 1
    assert compute_value("K", CalculationMethod.Gematria) == 20
    assert compute_value("AB", CalculationMethod.Gematria) == 3
    assert compute_value("א", CalculationMethod.MisparShemi) == 111
    assert compute_value("Α", CalculationMethod.Primes) == 2
    assert compute_value("Ω", CalculationMethod.Primes) == 101


def test_compute_value_words():
    assert compute_value("CAT", CalculationMethod.Gematria) == 204
    assert compute_value("CAT", CalculationMethod.Ordinal) == 24
    assert compute_value("CAT", CalculationMethod.Sumerian) == 144
    assert compute_value("CAT", CalculationMethod.Squared) == 40010
    assert compute_value("ΛΟΓΟΣ", CalculationMethod.Gematria) == 373
    assert compute_value("ΛΟΓΟΣ", CalculationMethod.Ordinal) == 67
    assert compute_value("שלום", CalculationMethod.Gematria) == 376
    assert compute_value("שלום", CalculationMethod.MisparGadol) == 936
    assert compute_value("שלום", CalculationMethod.MisparShemi) == 516


def test_sumerian_is_latin_only():
    assert compute_value("Α", CalculationMethod.Sumerian) == 0
    assert compute_value("א", CalculationMethod.Sumerian) == 0


def test_hebrew_only_methods_ignore_other_scripts():
    assert compute_value("ABC", CalculationMethod.MisparGadol) == 0
    assert compute_value("ΑΒΓ", CalculationMethod.MisparShemi) == 0


@pytest.mark.parametrize("method", SINGLE_METHODS)
def test_compute_value_empty_string(method):
    assert compute_value("", method) == 0


@pytest.mark.parametrize("method", SINGLE_METHODS)
@pytest.mark.parametrize("character", [" ", "-", "!", "7", "a", "α", "ß", "Я", "\n", "ς"])
def test_unsupported_characters_contribute_zero(character, method):
    assert compute_value(character, method) == 0


def test_unsupported_characters_are_skipped_inside_text():
    assert compute_value("C4T -A%", CalculationMethod.Gematria) == 204
    assert compute_value("ש ל-ו,ם", CalculationMethod.Gematria) == 376


def test_compute_value_accepts_character_sequences():
    assert compute_value(["A", "B"], CalculationMethod.Gematria) == 3
    assert compute_value(iter("AB"), CalculationMethod.Ordinal) == 3


@pytest.mark.parametrize(
    "method",
    [
        CalculationMethod.NONE,
        CalculationMethod.Gematria | CalculationMethod.Ordinal,
        CalculationMethod.Sumerian | CalculationMethod.MisparShemi,
        CalculationMethod.ALL,
        256,
        1 << 9,
        CalculationMethod(512),
    ],
)
def test_compute_value_requires_single_method(method):
    with pytest.raises(InvalidMethodError, match="exactly one calculation method"):
        compute_value("AB", method)


def test_invalid_method_is_value_error():
    with pytest.raises(ValueError):
        compute_value("", 0)


@pytest.mark.parametrize(
    "script, expected",
    [
        (Script.LATIN, [4095, 351, 126, 2106, 1161, 2068785, 0, 0]),
        (Script.GREEK, [4995, 378, 135, 0, 1264, 2878785, 0, 0]),
        (Script.HEBREW, [1775, 378, 128, 0, 1264, 347785, 4995, 4700]),
    ],
)
def test_alphabet_totals(script, expected):
    alphabet = "".join(characters(script))
    assert [compute_value(alphabet, method) for method in SINGLE_METHODS] == expected


def test_squared_totals_exceed_32_bits():
    assert compute_value("Ϡ" * 10000, CalculationMethod.Squared) == 8_100_000_000


def test_list_available_methods_contains_metadata():
    methods = list_available_methods(CalculationMethod.Primes)
    assert [entry["key"] for entry in methods] == [method.name for method in SINGLE_METHODS]
    assert all("label" in entry and "description" in entry for entry in methods)
    assert [entry["key"] for entry in methods if entry["selected"]] == ["Primes"]
