import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Keep stored uploads out of the real MEDIA_ROOT."""
    settings.MEDIA_ROOT = tmp_path / "media"
    return settings.MEDIA_ROOT


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(username="alice", password="not-a-real-password")


@pytest.fixture
def other_user(db):
    return get_user_model().objects.create_user(username="bob", password="not-a-real-password")


@pytest.fixture
def staff_user(db):
    return get_user_model().objects.create_user(username="carol", password="not-a-real-password", is_staff=True)


@pytest.fixture
def api_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client
