"""
Membership management service.

Handles joining colmeias and membership lookups with concurrency protection.
"""

from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.activity.models import ActivityType
from apps.activity.services import log_activity
from apps.groups.models import Group, GroupMembership, GroupRole

from .exceptions import (
    GroupNotFoundError,
    InvalidInviteCodeError,
    AlreadyMemberError,
    NotMemberError,
    MembershipNotFoundError,
    GroupDeletionInProgressError,
)


def join_group(*, user: User, invite_code: str) -> GroupMembership:
    """
    Join a colmeia using its invite code.

    The lookup is case-insensitive. The group row is locked while the
    membership is checked and created, and the (group, user) unique
    constraint backs up the pre-check against near-simultaneous joins.

    Args:
        user: User joining the group
        invite_code: 6-character invite code

    Returns:
        Created GroupMembership instance

    Raises:
        InvalidInviteCodeError: If no group has this invite code
        AlreadyMemberError: If user is already a member
        GroupDeletionInProgressError: If the group is being deleted
    """
    code = (invite_code or '').strip().upper()

    try:
        with transaction.atomic():
            try:
                group = (
                    Group.objects
                    .select_for_update()
                    .get(invite_code=code)
                )
            except Group.DoesNotExist:
                raise InvalidInviteCodeError("Invalid invite code")

            if group.is_being_deleted:
                raise GroupDeletionInProgressError(f"{group.name} is being deleted")

            if group.has_member(user):
                raise AlreadyMemberError(f"User is already a member of {group.name}")

            membership = GroupMembership.objects.create(
                user=user,
                group=group,
                role=GroupRole.MEMBER
            )
    except IntegrityError:
        # Database constraint caught duplicate membership
        raise AlreadyMemberError("User is already a member of this group")

    log_activity(group_id=group.id, type=ActivityType.MEMBER_JOINED, user=user)
    return membership


def get_group_members(*, group_id: UUID) -> QuerySet[GroupMembership]:
    """
    Get all members of a group.

    Raises:
        GroupNotFoundError: If group doesn't exist
    """
    if not Group.objects.filter(id=group_id).exists():
        raise GroupNotFoundError(f"Group with ID {group_id} not found")

    return (
        GroupMembership.objects
        .filter(group_id=group_id)
        .select_related('user')
        .order_by('joined_at')
    )


def get_membership(*, group_id: UUID, membership_id: UUID) -> GroupMembership:
    """
    Get one membership record of a group.

    Raises:
        MembershipNotFoundError: If the record doesn't exist in this group
    """
    try:
        return (
            GroupMembership.objects
            .select_related('user')
            .get(id=membership_id, group_id=group_id)
        )
    except (GroupMembership.DoesNotExist, ValueError, ValidationError):
        raise MembershipNotFoundError("Member not found in this group")


def require_membership(*, group_id: UUID, user: User) -> GroupMembership:
    """
    Return the user's membership in the group.

    Raises:
        NotMemberError: If the user is not a member
    """
    try:
        return GroupMembership.objects.get(group_id=group_id, user=user)
    except (GroupMembership.DoesNotExist, ValueError, ValidationError):
        raise NotMemberError("You must be a member of this group")
