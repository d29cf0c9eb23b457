import pytest

from tests.fixtures.data_providers import base_group_service, base_user_service


@pytest.fixture
def mock_users():
    return base_user_service()


@pytest.fixture
def mock_groups():
    return base_group_service()
