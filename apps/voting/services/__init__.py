"""
Voting app services layer.

Destructive actions in a colmeia (deleting tasks, routines, expenses,
removing members, deleting the group) go through request_deletion, which
either acts directly or opens a vote.
"""

from .exceptions import (
    VotingServiceError,
    VoteNotFoundError,
    VoteAlreadyResolvedError,
    DuplicateVoteError,
    NotVotedError,
    NotCreatorError,
    CreatorCannotRemoveVoteError,
    DuplicatePendingVoteError,
    InvalidVoteTypeError,
    TargetNotFoundError,
)

from .quorum import (
    QuorumRequirement,
    required_votes_for,
    member_needs_voting,
    needs_voting,
    calculate_required_votes,
)

from .cascade import (
    delete_group_cascade,
    resume_group_deletions,
)

from .execution import (
    DeletionKind,
    perform_deletion,
    execute_vote,
    delete_task_direct,
    delete_routine_direct,
    delete_expense_direct,
    remove_member_direct,
    delete_group_direct,
)

from .ledger import (
    create_vote,
    add_vote,
    remove_vote,
    cancel_vote,
    reject_vote,
    get_pending_votes,
    get_vote,
)

from .gate import request_deletion


__all__ = [
    # Exceptions
    'VotingServiceError',
    'VoteNotFoundError',
    'VoteAlreadyResolvedError',
    'DuplicateVoteError',
    'NotVotedError',
    'NotCreatorError',
    'CreatorCannotRemoveVoteError',
    'DuplicatePendingVoteError',
    'InvalidVoteTypeError',
    'TargetNotFoundError',

    # Quorum
    'QuorumRequirement',
    'required_votes_for',
    'member_needs_voting',
    'needs_voting',
    'calculate_required_votes',

    # Cascade
    'delete_group_cascade',
    'resume_group_deletions',

    # Execution
    'DeletionKind',
    'perform_deletion',
    'execute_vote',
    'delete_task_direct',
    'delete_routine_direct',
    'delete_expense_direct',
    'remove_member_direct',
    'delete_group_direct',

    # Ledger
    'create_vote',
    'add_vote',
    'remove_vote',
    'cancel_vote',
    'reject_vote',
    'get_pending_votes',
    'get_vote',

    # Gate
    'request_deletion',
]
