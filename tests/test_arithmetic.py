"""
Tests for exact addition and scaling of quantities.
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from constants import CUP, OUNCE, TABLESPOON, TEASPOON
from models import Kind, Quantity
from services import KindMismatchError, PrecisionLossError, add, scale, total


def volume(magnitude):
    return Quantity(Kind.VOLUME, magnitude)


def weight(magnitude):
    return Quantity(Kind.WEIGHT, magnitude)


def test_quantity_requires_int_magnitude():
    with pytest.raises(TypeError):
        Quantity(Kind.VOLUME, 1.5)
    with pytest.raises(TypeError):
        Quantity(Kind.VOLUME, Fraction(1, 2))
    with pytest.raises(TypeError):
        Quantity(Kind.VOLUME, True)
    with pytest.raises(TypeError):
        Quantity('volume', 1)


def test_quantity_is_immutable():
    q = volume(TEASPOON)
    with pytest.raises(AttributeError):
        q.magnitude = 1  # type: ignore


def test_add_same_kind():
    assert add(volume(CUP), volume(TEASPOON)) == volume(CUP + TEASPOON)


def test_add_is_commutative_and_associative():
    a, b, c = volume(CUP), volume(TABLESPOON), volume(TEASPOON * 3 // 8)
    assert add(a, b) == add(b, a)
    assert add(add(a, b), c) == add(a, add(b, c))


def test_add_across_kinds_fails():
    with pytest.raises(KindMismatchError):
        add(volume(TEASPOON), weight(OUNCE))
    with pytest.raises(KindMismatchError):
        add(weight(OUNCE), volume(TEASPOON))


def test_total():
    assert total([volume(1), volume(2), volume(3)]) == volume(6)
    with pytest.raises(ValueError):
        total([])
    with pytest.raises(KindMismatchError):
        total([volume(1), weight(1)])


def test_scale_by_integer_and_fraction():
    assert scale(volume(CUP), 3) == volume(CUP * 3)
    assert scale(volume(20), Fraction(3, 4)) == volume(15)
    assert scale(weight(OUNCE), Decimal('0.5')) == weight(OUNCE // 2)
    assert scale(volume(CUP), '1 1/2') == volume(CUP * 3 // 2)


def test_scale_leaves_original_unchanged():
    q = volume(CUP)
    scale(q, 2)
    assert q == volume(CUP)


def test_scale_precision_guard():
    with pytest.raises(PrecisionLossError):
        scale(volume(1), Fraction(1, 7))
    with pytest.raises(PrecisionLossError):
        scale(volume(20), Fraction(1, 7))


def test_scale_refuses_float():
    with pytest.raises(TypeError):
        scale(volume(CUP), 0.5)
