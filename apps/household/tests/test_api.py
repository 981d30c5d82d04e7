import pytest
from django.urls import reverse
from rest_framework import status

from apps.activity.models import Activity, ActivityType
from apps.groups.services import create_group
from apps.household.models import Task, Routine, Expense, Note
from apps.voting.models import Vote, VoteStatus, VoteType


# =============================================================================
# Task Endpoint Tests
# =============================================================================

@pytest.mark.django_db
class TestTaskEndpoints:
    """Tests for /api/household/tasks/"""

    def test_create_task(self, ana_client, group):
        response = ana_client.post(
            reverse('household:task-list'),
            {'group': str(group.id), 'title': 'Varrer a sala'}
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['title'] == 'Varrer a sala'
        assert response.data['is_completed'] is False
        assert response.data['created_by']['display_name'] == 'Ana'

    def test_non_member_cannot_create(self, outsider_client, group):
        response = outsider_client.post(
            reverse('household:task-list'),
            {'group': str(group.id), 'title': 'Intruso'}
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_list_filtered_by_group(self, ana_client, group, task, ana):
        other = create_group(name='Outra casa', creator=ana)
        Task.objects.create(group=other, title='Elsewhere', created_by=ana)

        response = ana_client.get(reverse('household:task-list'), {'group': str(group.id)})

        assert response.status_code == status.HTTP_200_OK
        assert [t['title'] for t in response.data] == ['Lavar a louça']

    def test_outsider_sees_nothing(self, outsider_client, task):
        response = outsider_client.get(reverse('household:task-list'))

        assert response.data == []

    def test_patch_title(self, ana_client, task):
        response = ana_client.patch(
            reverse('household:task-detail', args=[task.id]),
            {'title': 'Lavar a louça do jantar'}
        )

        assert response.status_code == status.HTTP_200_OK
        task.refresh_from_db()
        assert task.title == 'Lavar a louça do jantar'

    def test_toggle(self, ana_client, task):
        url = reverse('household:task-toggle', args=[task.id])

        response = ana_client.post(url)
        assert response.status_code == status.HTTP_200_OK
        assert response.data['is_completed'] is True

        response = ana_client.post(url)
        assert response.data['is_completed'] is False

    def test_delete_in_small_group_is_immediate(self, ana_client, task):
        response = ana_client.delete(reverse('household:task-detail', args=[task.id]))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Task.objects.filter(id=task.id).exists()
        activity = Activity.objects.get(type=ActivityType.TASK_DELETED)
        assert activity.metadata == {'taskTitle': 'Lavar a louça'}

    def test_delete_in_voting_group_opens_vote(self, ana_client, voting_group, task, ana):
        response = ana_client.delete(reverse('household:task-detail', args=[task.id]))

        assert response.status_code == status.HTTP_202_ACCEPTED
        assert response.data['type'] == VoteType.DELETE_TASK
        assert response.data['target_name'] == 'Lavar a louça'
        assert response.data['votes'] == [str(ana.id)]
        assert response.data['required_votes'] == 2
        assert response.data['status'] == VoteStatus.PENDING
        assert Task.objects.filter(id=task.id).exists()

    def test_delete_twice_while_vote_pending(self, ana_client, voting_group, task):
        url = reverse('household:task-detail', args=[task.id])
        ana_client.delete(url)

        response = ana_client.delete(url)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert Vote.objects.count() == 1


# =============================================================================
# Routine and Expense Endpoint Tests
# =============================================================================

@pytest.mark.django_db
class TestRoutineEndpoints:

    def test_create_routine(self, ana_client, group, bruno):
        response = ana_client.post(
            reverse('household:routine-list'),
            {'group': str(group.id), 'title': 'Feira', 'frequency': 'weekly', 'assigned_to': str(bruno.id)}
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['assigned_to'] == bruno.id

    def test_delete_routine_logs_task_deleted(self, ana_client, routine):
        response = ana_client.delete(reverse('household:routine-detail', args=[routine.id]))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Routine.objects.exists()
        assert Activity.objects.get(type=ActivityType.TASK_DELETED).metadata == {'taskTitle': 'Tirar o lixo'}


@pytest.mark.django_db
class TestExpenseEndpoints:

    def test_create_expense(self, ana_client, group):
        response = ana_client.post(
            reverse('household:expense-list'),
            {'group': str(group.id), 'description': 'Luz', 'amount': '210.00', 'category': 'housing'}
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['amount'] == '210.00'

    def test_negative_amount_rejected(self, ana_client, group):
        response = ana_client.post(
            reverse('household:expense-list'),
            {'group': str(group.id), 'description': 'Luz', 'amount': '-1.00'}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_expense_in_voting_group(self, ana_client, voting_group, expense):
        response = ana_client.delete(reverse('household:expense-detail', args=[expense.id]))

        assert response.status_code == status.HTTP_202_ACCEPTED
        assert response.data['type'] == VoteType.DELETE_EXPENSE
        assert response.data['target_name'] == 'Mercado'
        assert Expense.objects.filter(id=expense.id).exists()


# =============================================================================
# Notice Board Endpoint Tests
# =============================================================================

@pytest.mark.django_db
class TestNoteEndpoints:
    """Tests for /api/household/notes/"""

    def test_post_note(self, ana_client, group):
        response = ana_client.post(
            reverse('household:note-list'),
            {'group': str(group.id), 'content': 'Faxina no sábado', 'color': '#FFB3BA'}
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['content'] == 'Faxina no sábado'
        assert response.data['color'] == '#FFB3BA'
        assert response.data['author_name'] == 'Ana'

    def test_unknown_color_rejected(self, ana_client, group):
        response = ana_client.post(
            reverse('household:note-list'),
            {'group': str(group.id), 'content': 'Oi', 'color': '#000000'}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_list_board(self, ana_client, group, note):
        response = ana_client.get(reverse('household:note-list'), {'group': str(group.id)})

        assert response.status_code == status.HTTP_200_OK
        assert [n['content'] for n in response.data] == ['Conta de luz vence sexta']

    def test_outsider_sees_nothing(self, outsider_client, note):
        response = outsider_client.get(reverse('household:note-list'))

        assert response.data == []

    def test_author_deletes_in_voting_group(self, bruno_client, voting_group, note):
        response = bruno_client.delete(reverse('household:note-detail', args=[note.id]))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Note.objects.exists()
        assert not Vote.objects.exists()

    def test_other_member_cannot_delete(self, ana_client, note):
        response = ana_client.delete(reverse('household:note-detail', args=[note.id]))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Note.objects.filter(id=note.id).exists()

    def test_notes_cannot_be_edited(self, bruno_client, note):
        response = bruno_client.patch(
            reverse('household:note-detail', args=[note.id]),
            {'content': 'Editada'}
        )

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
