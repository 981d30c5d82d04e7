import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.groups.models import Group, GroupMembership, GroupRole, generate_invite_code


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def member(db):
    return User.objects.create_user(
        email='ana@example.com',
        password='TestPass123!',
        display_name='Ana',
    )


@pytest.fixture
def outsider(db):
    return User.objects.create_user(
        email='outsider@example.com',
        password='TestPass123!',
        display_name='Outsider',
    )


@pytest.fixture
def group(member):
    """A colmeia with a single admin member."""
    group = Group.objects.create(name='Casa Azul', invite_code=generate_invite_code(), created_by=member)
    GroupMembership.objects.create(group=group, user=member, role=GroupRole.ADMIN)
    return group


@pytest.fixture
def member_client(api_client, member):
    refresh = RefreshToken.for_user(member)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def outsider_client(api_client, outsider):
    refresh = RefreshToken.for_user(outsider)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
