"""Rental duration and price for a booking.

Both dates are inclusive calendar boundaries: a rental runs from the start
of ``start_date`` to the end of ``end_date``, and every started day is
charged. Amounts are integer minor units.
"""
from rest_framework.exceptions import ValidationError

from api.fields import MAX_MINOR_UNITS


def rental_days(start_date, end_date):
    if end_date < start_date:
        raise ValidationError({"end_date": "End date cannot be before start date."})
    return (end_date - start_date).days + 1


def quote_total(price_per_day, start_date, end_date):
    total = price_per_day * rental_days(start_date, end_date)
    if total > MAX_MINOR_UNITS:
        raise ValidationError({"end_date": "Booking total is too large; shorten the rental."})
    return total
