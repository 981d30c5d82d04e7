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
def group_admin(db):
    """Create and return the user who created the colmeia."""
    return User.objects.create_user(
        email='admin@example.com',
        password='TestPass123!',
        display_name='Group Admin',
    )


@pytest.fixture
def member_user(db):
    return User.objects.create_user(
        email='member@example.com',
        password='TestPass123!',
        display_name='Group Member',
    )


@pytest.fixture
def third_user(db):
    return User.objects.create_user(
        email='third@example.com',
        password='TestPass123!',
        display_name='Third Member',
    )


@pytest.fixture
def group_other_user(db):
    """Create and return a user not in any group."""
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
        display_name='Other User',
    )


@pytest.fixture
def group(group_admin):
    """A colmeia whose only member is its admin."""
    group = Group.objects.create(
        name='Casa Verde',
        invite_code=generate_invite_code(),
        created_by=group_admin,
    )
    GroupMembership.objects.create(group=group, user=group_admin, role=GroupRole.ADMIN)
    return group


@pytest.fixture
def group_with_member(group, member_user):
    GroupMembership.objects.create(group=group, user=member_user, role=GroupRole.MEMBER)
    return group


@pytest.fixture
def group_of_three(group_with_member, third_user):
    GroupMembership.objects.create(group=group_with_member, user=third_user, role=GroupRole.MEMBER)
    return group_with_member


@pytest.fixture
def authenticated_client(api_client, group_admin):
    """Return API client authenticated as the group admin."""
    refresh = RefreshToken.for_user(group_admin)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def other_client(api_client, group_other_user):
    """Return API client authenticated as a non-member."""
    refresh = RefreshToken.for_user(group_other_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
