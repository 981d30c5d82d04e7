import pytest
from datetime import date
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.groups.models import Group, GroupMembership, GroupRole, generate_invite_code
from apps.household.models import Task, Routine, Expense


MEMBER_NAMES = ['Ana', 'Bruno', 'Carla', 'Diego', 'Elisa']


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def users(db):
    """Five users; the first one creates every test group."""
    return [
        User.objects.create_user(
            email=f'{name.lower()}@example.com',
            password='TestPass123!',
            display_name=name,
        )
        for name in MEMBER_NAMES
    ]


@pytest.fixture
def outsider(db):
    return User.objects.create_user(
        email='outsider@example.com',
        password='TestPass123!',
        display_name='Outsider',
    )


@pytest.fixture
def make_group(users):
    """Factory: colmeia whose members are the first `size` users."""
    def _make(size, name='Casa'):
        group = Group.objects.create(name=name, invite_code=generate_invite_code(), created_by=users[0])
        for index, user in enumerate(users[:size]):
            GroupMembership.objects.create(
                group=group,
                user=user,
                role=GroupRole.ADMIN if index == 0 else GroupRole.MEMBER,
            )
        return group
    return _make


@pytest.fixture
def group_of_two(make_group):
    return make_group(2)


@pytest.fixture
def group_of_three(make_group):
    return make_group(3)


@pytest.fixture
def group_of_four(make_group):
    return make_group(4)


@pytest.fixture
def make_task(users):
    def _make(group, title='Lavar a louça'):
        return Task.objects.create(group=group, title=title, created_by=users[0])
    return _make


@pytest.fixture
def make_routine(users):
    def _make(group, title='Tirar o lixo'):
        return Routine.objects.create(group=group, title=title, created_by=users[0])
    return _make


@pytest.fixture
def make_expense(users):
    def _make(group, description='Mercado'):
        return Expense.objects.create(
            group=group,
            description=description,
            amount=Decimal('50.00'),
            date=date(2026, 3, 1),
            created_by=users[0],
        )
    return _make


@pytest.fixture
def client_for(api_client):
    """Factory: API client authenticated as the given user."""
    def _client(user):
        refresh = RefreshToken.for_user(user)
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
        return api_client
    return _client
