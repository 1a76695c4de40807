from decimal import Decimal

import pytest

from insurance_advisor.utils.formatting import (
    format_currency,
    format_multiplier,
    round_amount,
    to_decimal,
)
from insurance_advisor.utils.text import normalize_keyword


@pytest.mark.unit
@pytest.mark.parametrize("value,expected", [(2.5, 3), (3.5, 4), (2.49, 2), (0.0, 0), (97_333.33, 97_333)])
def test_round_amount_halves_up(value, expected):
    assert round_amount(value) == expected


@pytest.mark.unit
def test_format_currency():
    assert format_currency(1234567.891) == "R$ 1,234,567.89"
    assert format_currency(-50, "$") == "-$ 50.00"


@pytest.mark.unit
def test_format_multiplier():
    assert format_multiplier(2.1296) == "2.13x"


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw,expected",
    [
        ("Médico", "medico"),
        ("MÉDICO", "medico"),
        ("Construção Civil", "construcaocivil"),
        ("Business-Owner 2", "businessowner"),
        ("", ""),
    ],
)
def test_normalize_keyword(raw, expected):
    assert normalize_keyword(raw) == expected


@pytest.mark.unit
def test_round_amount_decimal_halves_away_from_zero():
    assert round_amount(Decimal('2156639.5')) == 2_156_640
    assert round_amount(Decimal('0.49999')) == 0
    assert round_amount(Decimal('-2.5')) == -3


@pytest.mark.unit
def test_to_decimal_uses_shortest_repr():
    assert to_decimal(0.1) == Decimal('0.1')
    assert to_decimal(10_000) == Decimal('10000')
    value = Decimal('1.23')
    assert to_decimal(value) is value


@pytest.mark.unit
def test_format_currency_rounds_half_up():
    assert format_currency(Decimal('266.665')) == "R$ 266.67"
