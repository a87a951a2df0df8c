import pytest

from bookings.models import Booking, BookingStatusChange
from bookings.state import InvalidTransition, can_transition, transition


@pytest.fixture
def booking(customer, vehicle):
    return Booking.objects.create(customer=customer, vehicle=vehicle,
                                  start_date='2024-01-01', end_date='2024-01-03',
                                  total_price=1500000)


@pytest.mark.parametrize('from_status, to_status, allowed', [
    ('pending', 'approved', True),
    ('pending', 'active', True),
    ('approved', 'active', True),
    ('active', 'completed', True),
    ('active', 'pending', False),
    ('completed', 'active', False),
    ('cancelled', 'active', False),
    ('pending', 'bogus', False),
])
def test_can_transition(from_status, to_status, allowed):
    assert can_transition(from_status, to_status) is allowed


def test_transition_saves_status_and_history(booking, owner):
    transition(booking, 'approved', actor=owner, note='looks good')

    booking.refresh_from_db()
    assert booking.status == 'approved'
    change = BookingStatusChange.objects.get(booking=booking)
    assert (change.from_status, change.to_status) == ('pending', 'approved')
    assert change.changed_by == owner
    assert change.note == 'looks good'


def test_disallowed_transition_leaves_booking_untouched(booking):
    transition(booking, 'cancelled')

    with pytest.raises(InvalidTransition) as excinfo:
        transition(booking, 'active')

    booking.refresh_from_db()
    assert booking.status == 'cancelled'
    assert "'cancelled' to 'active'" in excinfo.value.message
    assert BookingStatusChange.objects.filter(booking=booking).count() == 1


def test_unknown_status_is_rejected(booking):
    with pytest.raises(InvalidTransition) as excinfo:
        transition(booking, 'lost')
    assert 'Unknown booking status' in excinfo.value.message
