from users.models import Profile


def test_profile_is_created_on_first_read(client_for, make_user):
    newcomer = make_user('newcomer')

    response = client_for(newcomer).get('/api/profile')

    assert response.status_code == 200
    assert response.data['role'] == 'customer'
    assert response.data['username'] == 'newcomer'
    assert Profile.objects.filter(user=newcomer).count() == 1

    client_for(newcomer).get('/api/profile')
    assert Profile.objects.filter(user=newcomer).count() == 1


def test_update_profile_fields(client_for, customer):
    response = client_for(customer).put('/api/profile',
                                        {'phone_number': '254700000001', 'bio': 'Weekend driver'},
                                        format='json')

    assert response.status_code == 200
    assert response.data['phone_number'] == '254700000001'
    profile = Profile.objects.get(user=customer)
    assert profile.bio == 'Weekend driver'
    assert profile.role == 'customer'


def test_customer_can_become_owner(client_for, customer):
    response = client_for(customer).put('/api/profile', {'role': 'owner'}, format='json')

    assert response.status_code == 200
    assert response.data['role'] == 'owner'


def test_cannot_self_grant_admin(client_for, customer):
    response = client_for(customer).put('/api/profile', {'role': 'admin'}, format='json')

    assert response.status_code == 400
    assert response.data['field'] == 'role'
    assert Profile.objects.get(user=customer).role == 'customer'


def test_profile_requires_authentication(client_for, db):
    response = client_for().get('/api/profile')

    assert response.status_code == 401
    assert 'message' in response.data
