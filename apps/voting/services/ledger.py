"""
Vote ledger.

Opening, approving, withdrawing, cancelling and rejecting votes. Every
read-check-write runs in a transaction holding the row lock on the vote,
so concurrent approvals of the same vote are applied one after another
and the action runs once.
"""

import logging
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction, IntegrityError
from django.db.models import QuerySet
from django.utils import timezone

from apps.accounts.models import User
from apps.activity.models import ActivityType
from apps.activity.services import log_activity
from apps.groups.models import Group
from apps.groups.services import (
    require_membership,
    GroupNotFoundError,
    GroupDeletionInProgressError,
)
from apps.voting.models import Vote, VoteType, VoteStatus

from .exceptions import (
    VoteNotFoundError,
    VoteAlreadyResolvedError,
    DuplicateVoteError,
    NotVotedError,
    NotCreatorError,
    CreatorCannotRemoveVoteError,
    DuplicatePendingVoteError,
    InvalidVoteTypeError,
)
from .execution import execute_locked_vote
from .quorum import calculate_required_votes

logger = logging.getLogger(__name__)


def _lock_vote(*, group_id: UUID, vote_id: UUID) -> Vote:
    try:
        return (
            Vote.objects
            .select_for_update()
            .get(id=vote_id, group_id=group_id)
        )
    except (Vote.DoesNotExist, ValueError, ValidationError):
        raise VoteNotFoundError(f"Vote with ID {vote_id} not found")


def create_vote(
    *,
    group_id: UUID,
    vote_type: str,
    target_id,
    target_name: str,
    user: User
) -> Vote:
    """
    Open a vote on a destructive action, counting the creator's approval.

    The quorum is sized from the current member count and frozen on the
    vote. If the creator's approval alone reaches it the action runs
    right away.

    Args:
        group_id: Group the action applies to
        vote_type: One of VoteType
        target_id: Id of the record to delete (the group id for delete_group)
        target_name: Label shown to voters, frozen at creation
        user: Member opening the vote

    Returns:
        The created Vote

    Raises:
        InvalidVoteTypeError: If vote_type is unknown
        GroupNotFoundError: If the group doesn't exist
        GroupDeletionInProgressError: If the group is being deleted
        NotMemberError: If user is not a member of the group
        DuplicatePendingVoteError: If the target already has a pending vote
    """
    if vote_type not in VoteType.values:
        raise InvalidVoteTypeError(f"Unknown vote type: {vote_type}")

    target_id = str(target_id)

    with transaction.atomic():
        try:
            group = Group.objects.select_for_update().get(id=group_id)
        except (Group.DoesNotExist, ValueError, ValidationError):
            raise GroupNotFoundError(f"Group with ID {group_id} not found")

        if group.is_being_deleted:
            raise GroupDeletionInProgressError(f"{group.name} is being deleted")

        require_membership(group_id=group.id, user=user)

        if Vote.objects.filter(
            group=group, target_id=target_id, status=VoteStatus.PENDING
        ).exists():
            raise DuplicatePendingVoteError("There is already a pending vote for this item")

        quorum = calculate_required_votes(group_id=group.id, vote_type=vote_type)

        try:
            with transaction.atomic():
                vote = Vote.objects.create(
                    group=group,
                    type=vote_type,
                    target_id=target_id,
                    target_name=target_name,
                    created_by=user,
                    voter_ids=[str(user.id)],
                    required_votes=max(quorum.required, 1),
                    total_members=quorum.total,
                )
        except IntegrityError:
            # Partial unique constraint on pending votes per target
            raise DuplicatePendingVoteError("There is already a pending vote for this item")

        logger.info(
            "Vote %s opened: %s '%s' needs %s of %s",
            vote.id, vote_type, target_name, vote.required_votes, vote.total_members
        )
        log_activity(
            group_id=group.id,
            type=ActivityType.VOTE_CREATED,
            user=user,
            metadata={'voteType': vote_type, 'targetName': target_name, 'voteId': str(vote.id)}
        )

        if vote.has_quorum:
            execute_locked_vote(vote=vote, user=user)

    return vote


def add_vote(*, group_id: UUID, vote_id: UUID, user: User) -> Vote:
    """
    Approve a pending vote. Runs the action when the approval completes the quorum.

    Raises:
        VoteNotFoundError: If the vote doesn't exist in the group
        VoteAlreadyResolvedError: If the vote is no longer pending
        NotMemberError: If user is not a member of the group
        DuplicateVoteError: If user already approved
    """
    with transaction.atomic():
        vote = _lock_vote(group_id=group_id, vote_id=vote_id)

        if not vote.is_pending:
            raise VoteAlreadyResolvedError("This vote has already been resolved")

        require_membership(group_id=vote.group_id, user=user)

        if vote.has_voted(user.id):
            raise DuplicateVoteError("You have already voted")

        vote.voter_ids = [*vote.voter_ids, str(user.id)]
        vote.save(update_fields=['voter_ids'])

        if vote.has_quorum:
            execute_locked_vote(vote=vote, user=user)

    return vote


def remove_vote(*, group_id: UUID, vote_id: UUID, user: User) -> Vote:
    """
    Withdraw an approval from a pending vote.

    The creator's approval cannot be withdrawn; the creator cancels instead.

    Raises:
        VoteNotFoundError: If the vote doesn't exist in the group
        VoteAlreadyResolvedError: If the vote is no longer pending
        CreatorCannotRemoveVoteError: If user created the vote
        NotMemberError: If user is not a member of the group
        NotVotedError: If user has not approved
    """
    with transaction.atomic():
        vote = _lock_vote(group_id=group_id, vote_id=vote_id)

        if not vote.is_pending:
            raise VoteAlreadyResolvedError("This vote has already been resolved")

        if vote.is_creator(user.id):
            raise CreatorCannotRemoveVoteError(
                "The creator cannot withdraw their vote, cancel it instead"
            )

        require_membership(group_id=vote.group_id, user=user)

        voter = str(user.id)
        if voter not in vote.voter_ids:
            raise NotVotedError("You have not voted")

        vote.voter_ids = [v for v in vote.voter_ids if v != voter]
        vote.save(update_fields=['voter_ids'])

    return vote


def cancel_vote(*, group_id: UUID, vote_id: UUID, user: User) -> Vote:
    """
    Close a pending vote without running its action. Creator only.

    Raises:
        VoteNotFoundError: If the vote doesn't exist in the group
        NotCreatorError: If user did not create the vote
        NotMemberError: If the creator is no longer a member of the group
        VoteAlreadyResolvedError: If the vote is no longer pending
    """
    with transaction.atomic():
        vote = _lock_vote(group_id=group_id, vote_id=vote_id)

        if not vote.is_creator(user.id):
            raise NotCreatorError("Only the creator can cancel this vote")

        require_membership(group_id=vote.group_id, user=user)

        if not vote.is_pending:
            raise VoteAlreadyResolvedError("This vote has already been resolved")

        vote.status = VoteStatus.REJECTED
        vote.resolved_at = timezone.now()
        vote.save(update_fields=['status', 'resolved_at'])

    logger.info("Vote %s cancelled by its creator", vote.id)
    return vote


def reject_vote(*, group_id: UUID, vote_id: UUID, user: User) -> None:
    """
    Discard a pending vote outright. Any member may do it.

    Resolved votes are kept as history and cannot be rejected.

    Raises:
        VoteNotFoundError: If the vote doesn't exist in the group
        NotMemberError: If user is not a member of the group
        VoteAlreadyResolvedError: If the vote is no longer pending
    """
    with transaction.atomic():
        vote = _lock_vote(group_id=group_id, vote_id=vote_id)

        require_membership(group_id=vote.group_id, user=user)

        if not vote.is_pending:
            raise VoteAlreadyResolvedError("This vote has already been resolved")

        vote.delete()

    logger.info("Vote %s rejected and discarded by %s", vote_id, user.id)


def get_pending_votes(*, group_id: UUID, vote_type: Optional[str] = None) -> QuerySet[Vote]:
    """Pending votes of a group, newest first, optionally of one type."""
    votes = (
        Vote.objects
        .filter(group_id=group_id, status=VoteStatus.PENDING)
        .select_related('created_by')
        .order_by('-created_at')
    )
    if vote_type:
        votes = votes.filter(type=vote_type)
    return votes


def get_vote(*, group_id: UUID, vote_id: UUID) -> Vote:
    """
    Raises:
        VoteNotFoundError: If the vote doesn't exist in the group
    """
    try:
        return (
            Vote.objects
            .select_related('created_by')
            .get(id=vote_id, group_id=group_id)
        )
    except (Vote.DoesNotExist, ValueError, ValidationError):
        raise VoteNotFoundError(f"Vote with ID {vote_id} not found")
