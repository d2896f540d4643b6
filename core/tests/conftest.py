import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from core.models import Hospital, Role, User, Ward, WardType


@pytest.fixture(autouse=True)
def _clear_cache():
    # throttle counters live in the cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(username='admin1', password='P@ssw0rd1', role=Role.ADMIN)


@pytest.fixture
def plain_user(db):
    return User.objects.create_user(username='user1', password='P@ssw0rd1', role=Role.USER)


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def user_client(plain_user):
    client = APIClient()
    client.force_authenticate(user=plain_user)
    return client


@pytest.fixture
def cardiology(db):
    return Ward.objects.create(type=WardType.CARDIOLOGY, max_capacity=30)


@pytest.fixture
def neurology(db):
    return Ward.objects.create(type=WardType.NEUROLOGY, max_capacity=25)


@pytest.fixture
def rigshospitalet(cardiology):
    h = Hospital.objects.create(name='Rigshospitalet', address='Blegdamsvej 9', city='København')
    h.wards.add(cardiology)
    return h


@pytest.fixture
def aarhus(neurology):
    h = Hospital.objects.create(name='Aarhus Universitetshospital', address='Palle Juul-Jensens Boulevard 99',
                                city='Aarhus')
    h.wards.add(neurology)
    return h
