import math
from fractions import Fraction

import pytest

from quickstats.errors import InputTypeError
from quickstats.services.guard import numeric_values, throw_unless_int, throw_unless_num


@pytest.mark.parametrize("value", [0, -7, 2.5, 1e300, Fraction(1, 3)])
def test_throw_unless_num_passes_value_through(value):
    assert throw_unless_num(value) is value


@pytest.mark.parametrize("value", ["1", None, math.nan, math.inf, -math.inf, True, [1], 10**400])
def test_throw_unless_num_rejects(value):
    with pytest.raises(InputTypeError):
        throw_unless_num(value)


def test_error_names_the_argument():
    with pytest.raises(InputTypeError, match="threshold"):
        throw_unless_num("high", "threshold")


def test_input_type_error_is_a_type_error():
    with pytest.raises(TypeError):
        throw_unless_num(None)


def test_throw_unless_int():
    assert throw_unless_int(3.0) == 3
    with pytest.raises(InputTypeError, match="integer"):
        throw_unless_int(0.5, "digits")


def test_numeric_values_materializes_iterables():
    assert numeric_values(x for x in (1, 2)) == [1, 2]
    assert numeric_values(()) == []


@pytest.mark.parametrize("values", ["123", b"12", {"a": 1}, 5])
def test_numeric_values_rejects_non_sequences(values):
    with pytest.raises(InputTypeError, match="sequence of numbers"):
        numeric_values(values)
