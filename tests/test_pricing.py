from datetime import date

import pytest
from rest_framework.exceptions import ValidationError

from api.fields import format_minor_units, to_minor_units
from bookings.pricing import quote_total, rental_days


def test_rental_days_counts_both_ends():
    assert rental_days(date(2024, 1, 1), date(2024, 1, 3)) == 3


def test_same_day_rental_is_one_day():
    assert rental_days(date(2024, 1, 1), date(2024, 1, 1)) == 1


def test_rental_days_across_month_end():
    assert rental_days(date(2024, 2, 28), date(2024, 3, 1)) == 3


def test_end_before_start_is_rejected():
    with pytest.raises(ValidationError):
        rental_days(date(2024, 1, 3), date(2024, 1, 1))


def test_quote_total_multiplies_daily_rate():
    assert quote_total(500000, date(2024, 1, 1), date(2024, 1, 3)) == 1500000


@pytest.mark.parametrize('raw, minor', [
    ('5000', 500000),
    ('5000.5', 500050),
    (49.99, 4999),
    ('0.005', 1),
])
def test_to_minor_units(raw, minor):
    assert to_minor_units(raw) == minor


def test_format_minor_units():
    assert format_minor_units(1500000) == '15000.00'
    assert format_minor_units(5) == '0.05'


def test_quote_total_beyond_storage_range_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        quote_total(900000000000000000, date(2024, 1, 1), date(2024, 1, 20))

    assert 'end_date' in excinfo.value.detail
