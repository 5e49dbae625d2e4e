import pytest
from rest_framework.test import APIClient

from users.repositories import UserRepository


@pytest.fixture()
def api_client():
    """Django REST Framework API test client."""
    return APIClient()


@pytest.fixture()
def user_repository():
    """Repository used to persist users in tests."""
    return UserRepository()
