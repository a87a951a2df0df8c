import pytest

from bookings.models import Booking
from payments.models import Payment


@pytest.fixture
def booking(client_for, customer, vehicle):
    response = client_for(customer).post(
        '/api/bookings',
        {'vehicle_id': vehicle.id, 'start_date': '2024-01-01', 'end_date': '2024-01-03'},
        format='json',
    )
    return Booking.objects.get(id=response.data['id'])


def pay(client, booking_id, phone='254712345678'):
    return client.post('/api/payments', {'booking_id': booking_id, 'phone_number': phone}, format='json')


def test_payment_completes_and_activates_booking(client_for, customer, booking):
    response = pay(client_for(customer), booking.id)

    assert response.status_code == 201
    assert response.data['amount'] == '15000.00'
    assert response.data['method'] == 'mpesa'
    assert response.data['status'] == 'completed'
    assert response.data['transaction_id'].startswith('MPS')
    assert len(response.data['transaction_id']) == 9

    booking.refresh_from_db()
    assert booking.status == 'active'
    payment = Payment.objects.get(booking=booking)
    assert payment.status == 'completed'
    assert payment.amount == booking.total_price


def test_payment_leaves_payment_status_unchanged_by_default(client_for, customer, booking):
    pay(client_for(customer), booking.id)

    booking.refresh_from_db()
    assert booking.payment_status == 'pending'


def test_payment_can_mark_booking_paid(settings, client_for, customer, booking):
    settings.CARHIRE_MARK_BOOKING_PAID = True

    pay(client_for(customer), booking.id)

    booking.refresh_from_db()
    assert booking.payment_status == 'paid'


def test_payment_records_status_history(client_for, customer, booking):
    response = pay(client_for(customer), booking.id)

    change = booking.status_history.last()
    assert (change.from_status, change.to_status) == ('pending', 'active')
    assert response.data['transaction_id'] in change.note


def test_payment_for_missing_booking_is_not_found(client_for, customer):
    response = pay(client_for(customer), 9999)

    assert response.status_code == 404
    assert response.data == {'message': 'Booking not found'}
    assert Payment.objects.count() == 0


def test_paying_twice_is_rejected(client_for, customer, booking):
    assert pay(client_for(customer), booking.id).status_code == 201

    response = pay(client_for(customer), booking.id)

    assert response.status_code == 400
    assert Payment.objects.filter(booking=booking).count() == 1


def test_cancelled_booking_cannot_be_paid(client_for, customer, booking):
    client_for(customer).patch(f'/api/bookings/{booking.id}/status', {'status': 'cancelled'}, format='json')

    response = pay(client_for(customer), booking.id)

    assert response.status_code == 400
    assert Payment.objects.count() == 0


def test_only_the_customer_pays(client_for, make_user, booking):
    stranger = make_user('stranger', role='customer')

    response = pay(client_for(stranger), booking.id)

    assert response.status_code == 403
    assert Payment.objects.count() == 0


def test_phone_number_is_required(client_for, customer, booking):
    response = pay(client_for(customer), booking.id, phone='')

    assert response.status_code == 400
    assert response.data['field'] == 'phone_number'


def test_failed_status_write_rolls_back_payment(monkeypatch, client_for, customer, booking):
    def broken_transition(*args, **kwargs):
        raise RuntimeError('database went away')

    monkeypatch.setattr('payments.services.transition', broken_transition)

    response = pay(client_for(customer), booking.id)

    assert response.status_code == 500
    assert response.data == {'message': 'Internal server error'}
    assert Payment.objects.count() == 0
    booking.refresh_from_db()
    assert booking.status == 'pending'


def test_process_payment_updates_status(client_for, customer, booking):
    payment_id = pay(client_for(customer), booking.id).data['id']

    response = client_for(customer).post('/api/payments/process',
                                         {'payment_id': payment_id, 'status': 'failed'}, format='json')

    assert response.status_code == 200
    assert response.data == {'success': True}
    assert Payment.objects.get(id=payment_id).status == 'failed'


def test_process_unknown_payment(client_for, customer):
    response = client_for(customer).post('/api/payments/process',
                                         {'payment_id': 9999, 'status': 'completed'}, format='json')
    assert response.status_code == 404
