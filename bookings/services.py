import logging

from django.conf import settings
from django.db import transaction
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from users.services import ensure_profile, is_admin
from vehicles.models import Vehicle
from .models import Booking, BookingStatusChange
from .pricing import quote_total
from .state import CANCELLED, transition

logger = logging.getLogger(__name__)

# statuses that hold the vehicle for the booked dates
HOLDING_STATUSES = ('pending', 'approved', 'active')


def overlapping_bookings(vehicle, start_date, end_date):
    return Booking.objects.filter(
        vehicle=vehicle,
        status__in=HOLDING_STATUSES,
        start_date__lte=end_date,
        end_date__gte=start_date,
    )


@transaction.atomic
def create_booking(customer, vehicle_id, start_date, end_date):
    """Price and store a booking for ``customer``; it starts pending/pending."""
    try:
        vehicle = Vehicle.objects.get(id=vehicle_id)
    except Vehicle.DoesNotExist:
        logger.warning("Booking rejected: vehicle %s not found", vehicle_id)
        raise NotFound("Vehicle not found")

    total_price = quote_total(vehicle.price_per_day, start_date, end_date)

    if getattr(settings, 'CARHIRE_REJECT_OVERLAPPING_BOOKINGS', False):
        if overlapping_bookings(vehicle, start_date, end_date).exists():
            raise ValidationError({"vehicle_id": "Vehicle is already booked for the selected dates."})

    booking = Booking.objects.create(
        customer=customer,
        vehicle=vehicle,
        start_date=start_date,
        end_date=end_date,
        total_price=total_price,
    )
    BookingStatusChange.objects.create(booking=booking, to_status=booking.status,
                                       changed_by=customer, note='created')
    logger.info("Booking %s created by user %s for vehicle %s (%s to %s, total %s)",
                booking.pk, customer.pk, vehicle.pk, start_date, end_date, total_price)
    return booking


def bookings_for(user):
    """Bookings visible in the caller's list, scoped by profile role."""
    profile = ensure_profile(user)
    bookings = Booking.objects.select_related('vehicle', 'customer')
    if is_admin(user):
        return bookings
    if profile.role == 'owner':
        return bookings.filter(vehicle__owner=user)
    return bookings.filter(customer=user)


def get_booking(booking_id):
    try:
        return Booking.objects.select_related('vehicle', 'customer').get(id=booking_id)
    except Booking.DoesNotExist:
        raise NotFound("Booking not found")


def get_visible_booking(user, booking_id):
    booking = get_booking(booking_id)
    if user.id not in (booking.customer_id, booking.vehicle.owner_id) and not is_admin(user):
        raise PermissionDenied("Forbidden")
    return booking


@transaction.atomic
def change_status(user, booking_id, to_status, note=''):
    """Owner or admin may request any allowed move; the customer may only cancel."""
    booking = get_booking(booking_id)
    manages = booking.vehicle.owner_id == user.id or is_admin(user)
    if not manages:
        if booking.customer_id != user.id or to_status != CANCELLED:
            logger.warning("User %s may not set booking %s to %s", user.pk, booking.pk, to_status)
            raise PermissionDenied("Forbidden")
    return transition(booking, to_status, actor=user, note=note)
