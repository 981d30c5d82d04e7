"""
Quorum calculator.

Groups of one or two members act directly. From three members on, every
destructive action needs a vote:

    members   delete_group   anything else
    1-2       1              1
    3         3              2
    n >= 4    n - 1          ceil(n / 2)
"""

from typing import NamedTuple
from uuid import UUID

from apps.groups.services import get_member_count
from apps.voting.models import VoteType

VOTING_THRESHOLD = 3


class QuorumRequirement(NamedTuple):
    required: int
    total: int


def member_needs_voting(member_count: int) -> bool:
    return member_count >= VOTING_THRESHOLD


def required_votes_for(member_count: int, vote_type: str) -> int:
    """Approvals needed to carry out `vote_type` in a group of `member_count`."""
    if member_count < VOTING_THRESHOLD:
        return 1

    if member_count == VOTING_THRESHOLD:
        return 3 if vote_type == VoteType.DELETE_GROUP else 2

    if vote_type == VoteType.DELETE_GROUP:
        return member_count - 1
    return (member_count + 1) // 2


def needs_voting(*, group_id: UUID) -> bool:
    """Whether destructive actions in this group must go through a vote."""
    return member_needs_voting(get_member_count(group_id=group_id))


def calculate_required_votes(*, group_id: UUID, vote_type: str) -> QuorumRequirement:
    """Quorum for a new vote, from the live membership count."""
    total = get_member_count(group_id=group_id)
    return QuorumRequirement(required=required_votes_for(total, vote_type), total=total)
