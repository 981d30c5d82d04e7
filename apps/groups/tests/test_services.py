"""
Service layer unit tests for groups app.

Tests cover:
- Group creation and invite codes
- Joining by invite code
- Membership lookups
- Error handling
"""

import pytest
from uuid import uuid4
from unittest.mock import patch
from django.utils import timezone

from apps.activity.models import Activity, ActivityType
from apps.groups.models import Group, GroupMembership, GroupRole, INVITE_CODE_ALPHABET
from apps.groups.services import (
    create_group,
    get_group_by_id,
    get_member_count,
    join_group,
    get_group_members,
    get_membership,
    require_membership,
)
from apps.groups.services.exceptions import (
    GroupNotFoundError,
    InvalidInviteCodeError,
    AlreadyMemberError,
    NotMemberError,
    MembershipNotFoundError,
    GroupDeletionInProgressError,
)


# =============================================================================
# Group Management Service Tests
# =============================================================================

@pytest.mark.django_db
class TestGroupManagement:
    """Tests for group_management.py service functions."""

    def test_create_group_success(self, group_admin):
        """Creating a group also creates the admin membership."""
        group = create_group(name="  Casa Amarela ", creator=group_admin)

        assert group.name == "Casa Amarela"
        assert group.created_by == group_admin
        assert len(group.invite_code) == 6
        assert all(ch in INVITE_CODE_ALPHABET for ch in group.invite_code)

        membership = GroupMembership.objects.get(group=group, user=group_admin)
        assert membership.role == GroupRole.ADMIN

    def test_create_group_logs_member_joined(self, group_admin):
        group = create_group(name="Casa", creator=group_admin)

        assert Activity.objects.filter(group=group, type=ActivityType.MEMBER_JOINED).count() == 1

    def test_create_group_generates_unique_invite_codes(self, group_admin):
        group1 = create_group(name="Group 1", creator=group_admin)
        group2 = create_group(name="Group 2", creator=group_admin)

        assert group1.invite_code != group2.invite_code

    def test_create_group_gives_up_after_repeated_collisions(self, group, group_admin):
        """Service retries on invite code collision, then fails."""
        with patch(
            'apps.groups.services.group_management.generate_invite_code',
            return_value=group.invite_code
        ):
            with pytest.raises(RuntimeError, match="Failed to generate unique invite code"):
                create_group(name="Clash", creator=group_admin, max_retries=3)

        assert not Group.objects.filter(name="Clash").exists()

    def test_get_group_by_id_success(self, group):
        retrieved = get_group_by_id(group_id=group.id)

        assert retrieved.id == group.id

    def test_get_group_by_id_not_found(self):
        with pytest.raises(GroupNotFoundError):
            get_group_by_id(group_id=uuid4())

    def test_get_member_count(self, group_of_three):
        assert get_member_count(group_id=group_of_three.id) == 3


# =============================================================================
# Membership Service Tests
# =============================================================================

@pytest.mark.django_db
class TestJoinGroup:
    """Tests for join_group."""

    def test_join_success(self, group, member_user):
        membership = join_group(user=member_user, invite_code=group.invite_code)

        assert membership.group == group
        assert membership.role == GroupRole.MEMBER
        assert membership.id != member_user.id
        assert Activity.objects.filter(
            group=group, type=ActivityType.MEMBER_JOINED, user=member_user
        ).exists()

    def test_join_code_is_case_insensitive(self, group, member_user):
        join_group(user=member_user, invite_code=f" {group.invite_code.lower()} ")

        assert group.has_member(member_user)

    def test_join_invalid_code(self, group, member_user):
        with pytest.raises(InvalidInviteCodeError):
            join_group(user=member_user, invite_code='??????')

    def test_join_twice(self, group_with_member, member_user):
        with pytest.raises(AlreadyMemberError):
            join_group(user=member_user, invite_code=group_with_member.invite_code)

        assert GroupMembership.objects.filter(group=group_with_member, user=member_user).count() == 1

    def test_join_group_being_deleted(self, group, member_user):
        group.deletion_started_at = timezone.now()
        group.save()

        with pytest.raises(GroupDeletionInProgressError):
            join_group(user=member_user, invite_code=group.invite_code)


@pytest.mark.django_db
class TestMembershipLookups:

    def test_get_group_members_in_join_order(self, group_of_three, group_admin, member_user, third_user):
        members = list(get_group_members(group_id=group_of_three.id))

        assert [m.user for m in members] == [group_admin, member_user, third_user]

    def test_get_group_members_unknown_group(self):
        with pytest.raises(GroupNotFoundError):
            get_group_members(group_id=uuid4())

    def test_get_membership(self, group_with_member, member_user):
        membership = GroupMembership.objects.get(group=group_with_member, user=member_user)

        assert get_membership(group_id=group_with_member.id, membership_id=membership.id) == membership

    def test_get_membership_of_another_group(self, group_with_member, member_user, group_other_user):
        other = create_group(name="Other", creator=group_other_user)
        membership = GroupMembership.objects.get(group=other, user=group_other_user)

        with pytest.raises(MembershipNotFoundError):
            get_membership(group_id=group_with_member.id, membership_id=membership.id)

    def test_require_membership(self, group, group_admin, group_other_user):
        assert require_membership(group_id=group.id, user=group_admin).role == GroupRole.ADMIN

        with pytest.raises(NotMemberError):
            require_membership(group_id=group.id, user=group_other_user)
