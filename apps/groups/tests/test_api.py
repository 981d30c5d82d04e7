import pytest
from uuid import uuid4
from django.urls import reverse
from rest_framework import status

from apps.groups.models import Group, GroupMembership
from apps.household.models import Task
from apps.voting.models import Vote, VoteType


# =============================================================================
# Group CRUD Tests
# =============================================================================

@pytest.mark.django_db
class TestGroupCRUD:
    """Tests for /api/groups/"""

    def test_create_group(self, authenticated_client, group_admin):
        response = authenticated_client.post(reverse('groups:group-list'), {'name': 'Nova Casa'})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['name'] == 'Nova Casa'
        assert len(response.data['invite_code']) == 6
        assert response.data['user_role'] == 'admin'
        assert response.data['member_count'] == 1

    def test_create_group_requires_name(self, authenticated_client):
        response = authenticated_client.post(reverse('groups:group-list'), {})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_list_only_my_groups(self, authenticated_client, group, group_other_user):
        Group.objects.create(name='Not mine', invite_code='OTHER1', created_by=group_other_user)

        response = authenticated_client.get(reverse('groups:group-list'))

        assert response.status_code == status.HTTP_200_OK
        names = [g['name'] for g in response.data['results']]
        assert names == ['Casa Verde']

    def test_retrieve_group(self, authenticated_client, group):
        response = authenticated_client.get(reverse('groups:group-detail', args=[group.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['invite_code'] == group.invite_code

    def test_non_member_cannot_retrieve(self, other_client, group):
        response = other_client.get(reverse('groups:group-detail', args=[group.id]))

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('groups:group-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Group Deletion Tests
# =============================================================================

@pytest.mark.django_db
class TestGroupDeletion:
    """DELETE /api/groups/{id}/ deletes directly or opens a vote."""

    def test_small_group_is_deleted_directly(self, authenticated_client, group_with_member, group_admin):
        Task.objects.create(group=group_with_member, title='Lixo', created_by=group_admin)

        response = authenticated_client.delete(reverse('groups:group-detail', args=[group_with_member.id]))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Group.objects.filter(id=group_with_member.id).exists()
        assert not Task.objects.exists()
        assert not GroupMembership.objects.exists()

    def test_three_members_open_a_vote(self, authenticated_client, group_of_three):
        response = authenticated_client.delete(reverse('groups:group-detail', args=[group_of_three.id]))

        assert response.status_code == status.HTTP_202_ACCEPTED
        assert response.data['type'] == VoteType.DELETE_GROUP
        assert response.data['required_votes'] == 3
        assert response.data['vote_count'] == 1
        assert Group.objects.filter(id=group_of_three.id).exists()

    def test_second_delete_request_conflicts(self, authenticated_client, group_of_three):
        url = reverse('groups:group-detail', args=[group_of_three.id])
        authenticated_client.delete(url)

        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert Vote.objects.filter(group=group_of_three).count() == 1


# =============================================================================
# Membership Endpoint Tests
# =============================================================================

@pytest.mark.django_db
class TestMembershipEndpoints:

    def test_join(self, other_client, group, group_other_user):
        response = other_client.post(reverse('groups:group-join'), {'invite_code': group.invite_code.lower()})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['role'] == 'member'
        assert group.has_member(group_other_user)

    def test_join_invalid_code(self, other_client, group):
        response = other_client.post(reverse('groups:group-join'), {'invite_code': '??????'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_join_twice_conflicts(self, authenticated_client, group):
        response = authenticated_client.post(reverse('groups:group-join'), {'invite_code': group.invite_code})

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_members(self, authenticated_client, group_with_member):
        response = authenticated_client.get(reverse('groups:group-members', args=[group_with_member.id]))

        assert response.status_code == status.HTTP_200_OK
        assert [m['role'] for m in response.data] == ['admin', 'member']

    def test_remove_member_directly_in_small_group(self, authenticated_client, group_with_member, member_user):
        membership = GroupMembership.objects.get(group=group_with_member, user=member_user)
        url = reverse('groups:group-remove-member', args=[group_with_member.id, membership.id])

        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not group_with_member.has_member(member_user)

    def test_remove_member_opens_vote(self, authenticated_client, group_of_three, member_user):
        membership = GroupMembership.objects.get(group=group_of_three, user=member_user)
        url = reverse('groups:group-remove-member', args=[group_of_three.id, membership.id])

        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_202_ACCEPTED
        assert response.data['type'] == VoteType.REMOVE_MEMBER
        assert response.data['target_id'] == str(membership.id)
        assert response.data['target_name'] == 'Group Member'
        assert group_of_three.has_member(member_user)

    def test_remove_unknown_member(self, authenticated_client, group):
        url = reverse('groups:group-remove-member', args=[group.id, uuid4()])

        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_needs_voting(self, authenticated_client, group_of_three):
        url = reverse('groups:group-needs-voting', args=[group_of_three.id])

        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'needs_voting': True, 'member_count': 3}

    def test_small_group_needs_no_voting(self, authenticated_client, group_with_member):
        url = reverse('groups:group-needs-voting', args=[group_with_member.id])

        response = authenticated_client.get(url)

        assert response.data == {'needs_voting': False, 'member_count': 2}
