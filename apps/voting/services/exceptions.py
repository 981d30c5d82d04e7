"""Domain exceptions for voting on destructive group actions."""


class VotingServiceError(Exception):
    """Base exception for voting service errors."""
    pass


class VoteNotFoundError(VotingServiceError):
    """Raised when a vote doesn't exist in the given group."""
    pass


class VoteAlreadyResolvedError(VotingServiceError):
    """Raised when mutating a vote that is no longer pending."""
    pass


class DuplicateVoteError(VotingServiceError):
    """Raised when a user approves a vote they already approved."""
    pass


class NotVotedError(VotingServiceError):
    """Raised when a user withdraws a vote they never cast."""
    pass


class NotCreatorError(VotingServiceError):
    """Raised when someone other than the creator cancels a vote."""
    pass


class CreatorCannotRemoveVoteError(VotingServiceError):
    """Raised when the creator tries to withdraw their own approval."""
    pass


class DuplicatePendingVoteError(VotingServiceError):
    """Raised when the target already has a pending vote."""
    pass


class InvalidVoteTypeError(VotingServiceError):
    """Raised for an unknown vote type."""
    pass


class TargetNotFoundError(VotingServiceError):
    """Raised when the record a deletion targets no longer exists."""
    pass
