import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from users.models import Profile
from vehicles.models import Vehicle

User = get_user_model()


@pytest.fixture
def make_user(db):
    def _make_user(username, role=None, **extra):
        user = User.objects.create_user(username=username, password='pass1234!', **extra)
        if role is not None:
            Profile.objects.create(user=user, role=role)
        return user
    return _make_user


@pytest.fixture
def owner(make_user):
    return make_user('owner', role='owner', first_name='Wanjiru', last_name='Kamau')


@pytest.fixture
def customer(make_user):
    return make_user('customer', role='customer')


@pytest.fixture
def admin_user(make_user):
    return make_user('admin', role='admin')


@pytest.fixture
def make_vehicle(db):
    def _make_vehicle(owner, **overrides):
        fields = {
            'make': 'Toyota',
            'model': 'Prado',
            'year': 2020,
            'license_plate': 'KDA 123A',
            'price_per_day': 500000,
            'location': 'Nairobi',
            'image_url': 'https://example.com/prado.jpg',
            'features': ['4WD', 'Bluetooth'],
        }
        fields.update(overrides)
        return Vehicle.objects.create(owner=owner, **fields)
    return _make_vehicle


@pytest.fixture
def vehicle(owner, make_vehicle):
    return make_vehicle(owner)


@pytest.fixture
def client_for():
    def _client_for(user=None):
        client = APIClient()
        if user is not None:
            client.force_authenticate(user=user)
        return client
    return _client_for
