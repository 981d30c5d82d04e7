"""Entry point for every destructive action in a colmeia."""

from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.groups.models import Group
from apps.groups.services import (
    require_membership,
    GroupNotFoundError,
    GroupDeletionInProgressError,
)
from apps.voting.models import Vote

from .execution import DeletionKind, DIRECT_ACTIONS
from .ledger import create_vote
from .quorum import needs_voting


def request_deletion(
    *,
    kind: DeletionKind,
    group_id: UUID,
    target_id,
    target_name: str,
    user: User
) -> Optional[Vote]:
    """
    Delete right away in small groups, otherwise open a vote.

    The group row stays locked from the member count until the vote is
    opened or the record is deleted, so a concurrent join cannot slip a
    third member in between. A direct group delete only claims the group
    under the lock; the cascade runs after it is released because each of
    its steps commits on its own.

    Returns:
        The opened Vote, or None if the deletion already happened

    Raises:
        GroupNotFoundError: If the group doesn't exist
        GroupDeletionInProgressError: If the group is being deleted
        NotMemberError: If user is not a member of the group
        plus whatever create_vote or the deletion raise
    """
    kind = DeletionKind(kind)

    with transaction.atomic():
        try:
            group = Group.objects.select_for_update().get(id=group_id)
        except (Group.DoesNotExist, ValueError, ValidationError):
            raise GroupNotFoundError(f"Group with ID {group_id} not found")

        if group.is_being_deleted:
            raise GroupDeletionInProgressError(f"{group.name} is being deleted")

        require_membership(group_id=group.id, user=user)

        if needs_voting(group_id=group.id):
            return create_vote(
                group_id=group.id,
                vote_type=kind.vote_type,
                target_id=target_id,
                target_name=target_name,
                user=user
            )

        if kind is not DeletionKind.GROUP:
            DIRECT_ACTIONS[kind](
                group_id=group.id,
                target_id=target_id,
                target_name=target_name,
                user=user
            )
            return None

        # Joins are refused from here on
        Group.objects.filter(id=group.id).update(deletion_started_at=timezone.now())

    DIRECT_ACTIONS[kind](
        group_id=group.id,
        target_id=target_id,
        target_name=target_name,
        user=user
    )
    return None
