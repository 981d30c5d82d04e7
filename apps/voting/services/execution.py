"""
Action executor and direct-action fallback.

`perform_deletion` is the one routine that mutates the store for a
destructive action. It runs either directly (groups below the voting
threshold) or when a vote reaches quorum.
"""

import logging
from enum import Enum
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.activity.models import ActivityType
from apps.activity.services import log_activity
from apps.groups.models import GroupMembership
from apps.household.models import Task, Routine, Expense
from apps.voting.models import Vote, VoteType, VoteStatus

from .cascade import delete_group_cascade
from .exceptions import VoteNotFoundError, TargetNotFoundError

logger = logging.getLogger(__name__)


class DeletionKind(str, Enum):
    """What a destructive action removes. Values match the vote types."""

    TASK = VoteType.DELETE_TASK.value
    ROUTINE = VoteType.DELETE_ROUTINE.value
    EXPENSE = VoteType.DELETE_EXPENSE.value
    MEMBER = VoteType.REMOVE_MEMBER.value
    GROUP = VoteType.DELETE_GROUP.value

    @property
    def vote_type(self):
        return VoteType(self.value)


def _delete_record(model, *, group_id, target_id):
    try:
        deleted, _ = model.objects.filter(id=target_id, group_id=group_id).delete()
    except (ValueError, ValidationError):
        deleted = 0

    if not deleted:
        raise TargetNotFoundError(f"{model._meta.verbose_name.capitalize()} not found in this group")


def _delete_task(*, group_id, target_id, target_name, user):
    _delete_record(Task, group_id=group_id, target_id=target_id)
    log_activity(
        group_id=group_id,
        type=ActivityType.TASK_DELETED,
        user=user,
        metadata={'taskTitle': target_name}
    )


def _delete_routine(*, group_id, target_id, target_name, user):
    # Routines show up in the feed as tasks
    _delete_record(Routine, group_id=group_id, target_id=target_id)
    log_activity(
        group_id=group_id,
        type=ActivityType.TASK_DELETED,
        user=user,
        metadata={'taskTitle': target_name}
    )


def _delete_expense(*, group_id, target_id, target_name, user):
    _delete_record(Expense, group_id=group_id, target_id=target_id)
    log_activity(
        group_id=group_id,
        type=ActivityType.EXPENSE_DELETED,
        user=user,
        metadata={'description': target_name}
    )


def _remove_member(*, group_id, target_id, target_name, user):
    _delete_record(GroupMembership, group_id=group_id, target_id=target_id)
    log_activity(
        group_id=group_id,
        type=ActivityType.MEMBER_LEFT,
        user=user,
        metadata={'memberName': target_name}
    )


def _delete_group(*, group_id, target_id, target_name, user):
    # No feed entry: the feed goes away with the group.
    delete_group_cascade(group_id=group_id)


DELETION_HANDLERS = {
    DeletionKind.TASK: _delete_task,
    DeletionKind.ROUTINE: _delete_routine,
    DeletionKind.EXPENSE: _delete_expense,
    DeletionKind.MEMBER: _remove_member,
    DeletionKind.GROUP: _delete_group,
}


def perform_deletion(
    *,
    kind: DeletionKind,
    group_id: UUID,
    target_id,
    target_name: str,
    user: User
) -> None:
    """
    Carry out a destructive action and record it in the activity feed.

    Raises:
        TargetNotFoundError: If the targeted record is already gone
        GroupNotFoundError: If the group itself is gone (group deletion)
    """
    handler = DELETION_HANDLERS[DeletionKind(kind)]
    handler(group_id=group_id, target_id=target_id, target_name=target_name, user=user)


@transaction.atomic
def delete_task_direct(*, group_id: UUID, target_id, target_name: str, user: User) -> None:
    perform_deletion(kind=DeletionKind.TASK, group_id=group_id,
                     target_id=target_id, target_name=target_name, user=user)


@transaction.atomic
def delete_routine_direct(*, group_id: UUID, target_id, target_name: str, user: User) -> None:
    perform_deletion(kind=DeletionKind.ROUTINE, group_id=group_id,
                     target_id=target_id, target_name=target_name, user=user)


@transaction.atomic
def delete_expense_direct(*, group_id: UUID, target_id, target_name: str, user: User) -> None:
    perform_deletion(kind=DeletionKind.EXPENSE, group_id=group_id,
                     target_id=target_id, target_name=target_name, user=user)


@transaction.atomic
def remove_member_direct(*, group_id: UUID, target_id, target_name: str, user: User) -> None:
    perform_deletion(kind=DeletionKind.MEMBER, group_id=group_id,
                     target_id=target_id, target_name=target_name, user=user)


def delete_group_direct(*, group_id: UUID, target_id, target_name: str, user: User) -> None:
    """Not wrapped in a transaction: each cascade step commits on its own."""
    perform_deletion(kind=DeletionKind.GROUP, group_id=group_id,
                     target_id=target_id, target_name=target_name, user=user)


DIRECT_ACTIONS = {
    DeletionKind.TASK: delete_task_direct,
    DeletionKind.ROUTINE: delete_routine_direct,
    DeletionKind.EXPENSE: delete_expense_direct,
    DeletionKind.MEMBER: remove_member_direct,
    DeletionKind.GROUP: delete_group_direct,
}


def execute_locked_vote(*, vote: Vote, user: User) -> Vote:
    """
    Run the action of a vote that reached quorum.

    The caller must hold the row lock on `vote` (select_for_update inside
    an open transaction). A vote that is no longer pending is returned
    untouched, so the action runs at most once.

    A failing action is rolled back to its savepoint and the vote is
    closed as rejected with the cause in `execution_error`.
    """
    if not vote.is_pending:
        return vote

    try:
        with transaction.atomic():
            perform_deletion(
                kind=DeletionKind(vote.type),
                group_id=vote.group_id,
                target_id=vote.target_id,
                target_name=vote.target_name,
                user=user
            )
    except Exception as exc:
        logger.exception("Vote %s (%s) failed to execute", vote.id, vote.type)
        vote.status = VoteStatus.REJECTED
        vote.execution_error = str(exc) or type(exc).__name__
        vote.resolved_at = timezone.now()
        vote.save(update_fields=['status', 'execution_error', 'resolved_at'])
        log_activity(
            group_id=vote.group_id,
            type=ActivityType.VOTE_COMPLETED,
            user=user,
            metadata={'voteType': vote.type, 'targetName': vote.target_name, 'result': 'failed'}
        )
        return vote

    vote.status = VoteStatus.APPROVED
    vote.resolved_at = timezone.now()

    if vote.type == VoteType.DELETE_GROUP:
        # The vote row went away with the group.
        logger.info("Group %s deleted by vote %s", vote.group_id, vote.id)
        return vote

    vote.save(update_fields=['status', 'resolved_at'])
    logger.info("Vote %s approved and executed", vote.id)
    log_activity(
        group_id=vote.group_id,
        type=ActivityType.VOTE_COMPLETED,
        user=user,
        metadata={'voteType': vote.type, 'targetName': vote.target_name, 'result': 'approved'}
    )
    return vote


def execute_vote(*, vote_id: UUID, user: User) -> Vote:
    """
    Lock a vote and run its action if it is still pending.

    Raises:
        VoteNotFoundError: If the vote doesn't exist
    """
    with transaction.atomic():
        try:
            vote = Vote.objects.select_for_update().get(id=vote_id)
        except (Vote.DoesNotExist, ValueError, ValidationError):
            raise VoteNotFoundError(f"Vote with ID {vote_id} not found")

        return execute_locked_vote(vote=vote, user=user)
