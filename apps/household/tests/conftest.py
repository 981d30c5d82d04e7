import pytest
from datetime import date
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.groups.models import Group, GroupMembership, GroupRole, generate_invite_code
from apps.household.models import Task, Routine, Expense, Note, ExpenseCategory, NoteColor


def _user(email, name):
    return User.objects.create_user(email=email, password='TestPass123!', display_name=name)


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def ana(db):
    return _user('ana@example.com', 'Ana')


@pytest.fixture
def bruno(db):
    return _user('bruno@example.com', 'Bruno')


@pytest.fixture
def carla(db):
    return _user('carla@example.com', 'Carla')


@pytest.fixture
def outsider(db):
    return _user('outsider@example.com', 'Outsider')


@pytest.fixture
def group(ana, bruno):
    """Two-member colmeia: destructive actions happen directly."""
    group = Group.objects.create(name='Casa', invite_code=generate_invite_code(), created_by=ana)
    GroupMembership.objects.create(group=group, user=ana, role=GroupRole.ADMIN)
    GroupMembership.objects.create(group=group, user=bruno, role=GroupRole.MEMBER)
    return group


@pytest.fixture
def voting_group(group, carla):
    """Same colmeia with a third member: destructive actions need a vote."""
    GroupMembership.objects.create(group=group, user=carla, role=GroupRole.MEMBER)
    return group


@pytest.fixture
def task(group, ana):
    return Task.objects.create(group=group, title='Lavar a louça', created_by=ana)


@pytest.fixture
def routine(group, ana):
    return Routine.objects.create(group=group, title='Tirar o lixo', created_by=ana)


@pytest.fixture
def expense(group, ana):
    return Expense.objects.create(
        group=group,
        description='Mercado',
        amount=Decimal('123.45'),
        category=ExpenseCategory.FOOD,
        date=date(2026, 3, 1),
        created_by=ana,
    )


@pytest.fixture
def note(group, bruno):
    return Note.objects.create(
        group=group,
        content='Conta de luz vence sexta',
        color=NoteColor.BLUE,
        created_by=bruno,
        author_name='Bruno',
    )


@pytest.fixture
def ana_client(api_client, ana):
    refresh = RefreshToken.for_user(ana)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def outsider_client(api_client, outsider):
    refresh = RefreshToken.for_user(outsider)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def bruno_client(api_client, bruno):
    refresh = RefreshToken.for_user(bruno)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
