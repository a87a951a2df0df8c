from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from django.utils.dateparse import parse_datetime
from rest_framework import serializers

MINOR_UNITS = 100
TWO_PLACES = Decimal('0.01')
# PositiveBigIntegerField upper bound
MAX_MINOR_UNITS = 2 ** 63 - 1


def to_minor_units(value):
    """Convert a major-unit amount (``"5000"``, ``5000.5``) to integer minor units."""
    amount = Decimal(str(value)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    return int(amount * MINOR_UNITS)


def format_minor_units(value):
    return str((Decimal(value) / MINOR_UNITS).quantize(TWO_PLACES))


class MoneyField(serializers.Field):
    """Integer minor units in the model, two-place decimal string on the wire."""

    default_error_messages = {
        'invalid': 'A valid amount is required.',
        'negative': 'Amount cannot be negative.',
        'max_value': 'Amount is too large.',
    }

    def to_internal_value(self, data):
        if isinstance(data, bool):
            self.fail('invalid')
        try:
            minor = to_minor_units(data)
        except (InvalidOperation, ValueError, TypeError):
            self.fail('invalid')
        if minor < 0:
            self.fail('negative')
        if minor > MAX_MINOR_UNITS:
            self.fail('max_value')
        return minor

    def to_representation(self, value):
        return format_minor_units(value)


class CalendarDateField(serializers.DateField):
    """Accepts ``YYYY-MM-DD`` or a full ISO-8601 timestamp; keeps the date part."""

    def to_internal_value(self, value):
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and 'T' in value:
            try:
                parsed = parse_datetime(value.replace('Z', '+00:00'))
            except ValueError:
                self.fail('invalid', format='YYYY-MM-DD')
            if parsed is not None:
                return parsed.date()
        return super().to_internal_value(value)
