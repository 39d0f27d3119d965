"""
Tests for measurement text parsing.
"""

from fractions import Fraction

import pytest

from constants import (
    CUP, HALF_TEASPOON, LITER, MILLILITER, OUNCE, POUND, QUART, TABLESPOON, TEASPOON,
)
from models import Kind, Quantity
from services import (
    MalformedInputError, NonNumericMagnitudeError, PrecisionLossError,
    UnrecognizedUnitError, parse, parse_magnitude,
)


def volume(magnitude):
    return Quantity(Kind.VOLUME, magnitude)


def weight(magnitude):
    return Quantity(Kind.WEIGHT, magnitude)


@pytest.mark.parametrize('text, expected', [
    ('1/2', Fraction(1, 2)),
    ('1 1/2', Fraction(3, 2)),
    ('2.5', Fraction(5, 2)),
    ('.5', Fraction(1, 2)),
    ('3', Fraction(3)),
])
def test_parse_magnitude(text, expected):
    assert parse_magnitude(text) == expected


@pytest.mark.parametrize('text', ['abc', '1/0', '1.2.3', '-1', '1e3', ''])
def test_parse_magnitude_rejects(text):
    with pytest.raises(NonNumericMagnitudeError):
        parse_magnitude(text)


def test_parse_known_cases():
    assert parse('1/2 tsp') == volume(HALF_TEASPOON)
    assert parse('1 1/2 tsp') == volume(TEASPOON + HALF_TEASPOON)
    assert parse('3/4 gallons') == volume(QUART * 3)
    assert parse('16 oz') == weight(POUND)
    assert parse('1/2 lb') == weight(OUNCE * 8)


def test_parse_decimal_and_metric():
    assert parse('2.5 cups') == volume(CUP * 5 // 2)
    assert parse('451 ml') == volume(MILLILITER * 451)
    assert parse('1.451 l') == volume(MILLILITER * 1451)
    assert parse('1 L') == volume(LITER)
    assert parse('2 dl') == volume(MILLILITER * 200)


def test_parse_multi_word_and_punctuated_units():
    assert parse('2 fl oz') == volume(TABLESPOON * 4)
    assert parse('1 fluid ounce') == volume(TABLESPOON * 2)
    assert parse('1 tsp.') == volume(TEASPOON)
    assert parse('3 tbsp.') == volume(TABLESPOON * 3)
    assert parse('2 #') == weight(POUND * 2)


def test_parse_tolerates_surrounding_whitespace():
    assert parse('  1  1/2   cups ') == volume(CUP * 3 // 2)
    assert parse('1 cup') == volume(CUP)


def test_parse_third_of_a_cup_is_exact():
    assert parse('1/3 cup').magnitude * 3 == CUP
    assert parse('2/3 tsp').magnitude * 3 == TEASPOON * 2


@pytest.mark.parametrize('text', ['', 'tsp', '3', '3tsp', '1 1/2', 'tsp 3', '3 tsp2'])
def test_parse_malformed(text):
    with pytest.raises(MalformedInputError):
        parse(text)


def test_parse_rejects_non_text():
    with pytest.raises(MalformedInputError):
        parse(3)


def test_parse_has_no_length_limit():
    assert parse('0' * 120 + '1 ml') == volume(MILLILITER)
    with pytest.raises(UnrecognizedUnitError):
        parse('1 ' + 'c' * 200)


def test_parse_unrecognized_unit():
    with pytest.raises(UnrecognizedUnitError):
        parse('3 zorp')


def test_parse_unit_case_matters():
    with pytest.raises(UnrecognizedUnitError):
        parse('1 TSP')


def test_parse_non_numeric_magnitude():
    with pytest.raises(NonNumericMagnitudeError):
        parse('abc tsp')


def test_parse_precision_guard():
    """An amount finer than the base unit is rejected rather than rounded."""
    with pytest.raises(PrecisionLossError):
        parse('1/7 tsp')
    with pytest.raises(PrecisionLossError):
        parse('0.0001 ml')
