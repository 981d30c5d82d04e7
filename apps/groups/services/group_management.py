"""
Group management service.

Handles colmeia creation and lookups with proper transaction safety.
"""

from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction, IntegrityError

from apps.accounts.models import User
from apps.activity.models import ActivityType
from apps.activity.services import log_activity
from apps.groups.models import Group, GroupMembership, GroupRole, generate_invite_code

from .exceptions import GroupNotFoundError


def create_group(
    *,
    name: str,
    creator: User,
    max_retries: int = 5
) -> Group:
    """
    Create a new colmeia and add the creator as its admin.

    This is a multi-step operation wrapped in a transaction:
    1. Generate a 6-character invite code
    2. Create the group
    3. Create the creator's admin membership

    Args:
        name: Group name
        creator: User creating the group
        max_retries: Maximum attempts to generate a unique invite code

    Returns:
        Created Group instance

    Raises:
        RuntimeError: If cannot generate unique invite code after retries
    """
    # Retry logic outside transaction to handle invite code collisions
    for attempt in range(max_retries):
        invite_code = generate_invite_code()

        try:
            with transaction.atomic():
                group = Group.objects.create(
                    name=name.strip(),
                    created_by=creator,
                    invite_code=invite_code
                )

                GroupMembership.objects.create(
                    user=creator,
                    group=group,
                    role=GroupRole.ADMIN
                )

        except IntegrityError:
            # Invite code collision
            if attempt == max_retries - 1:
                raise RuntimeError(
                    f"Failed to generate unique invite code after {max_retries} attempts"
                )
            continue

        log_activity(group_id=group.id, type=ActivityType.MEMBER_JOINED, user=creator)
        return group

    raise RuntimeError("Unexpected error in group creation")


def get_group_by_id(*, group_id: UUID) -> Group:
    """
    Get a group by ID.

    Raises:
        GroupNotFoundError: If group doesn't exist
    """
    try:
        return Group.objects.select_related('created_by').get(id=group_id)
    except (Group.DoesNotExist, ValueError, ValidationError):
        raise GroupNotFoundError(f"Group with ID {group_id} not found")


def get_member_count(*, group_id: UUID) -> int:
    """Live membership count, the sole input to quorum sizing."""
    return GroupMembership.objects.filter(group_id=group_id).count()
