"""Translation of service errors into API responses."""

from rest_framework import status
from rest_framework.response import Response

from apps.groups.services import (
    GroupsServiceError,
    GroupNotFoundError,
    MembershipNotFoundError,
    NotMemberError,
    AlreadyMemberError,
    GroupDeletionInProgressError,
)
from apps.household.services import (
    HouseholdServiceError,
    NoteNotFoundError,
    NotNoteAuthorError,
)
from .services import (
    VotingServiceError,
    VoteNotFoundError,
    TargetNotFoundError,
    NotCreatorError,
    VoteAlreadyResolvedError,
    DuplicatePendingVoteError,
)
from .serializers import VoteSerializer


ERROR_STATUS = (
    ((GroupNotFoundError, MembershipNotFoundError, VoteNotFoundError, TargetNotFoundError,
      NoteNotFoundError),
     status.HTTP_404_NOT_FOUND),
    ((NotMemberError, NotCreatorError, NotNoteAuthorError), status.HTTP_403_FORBIDDEN),
    ((AlreadyMemberError, GroupDeletionInProgressError, VoteAlreadyResolvedError,
      DuplicatePendingVoteError), status.HTTP_409_CONFLICT),
    ((GroupsServiceError, VotingServiceError, HouseholdServiceError), status.HTTP_400_BAD_REQUEST),
)


def error_response(exc):
    """{'error': message} with the status code matching the service error."""
    for exc_types, code in ERROR_STATUS:
        if isinstance(exc, exc_types):
            return Response({'error': str(exc)}, status=code)
    raise exc


def deletion_response(vote, request):
    """204 when the deletion already happened, 202 with the vote when one was opened."""
    if vote is None:
        return Response(status=status.HTTP_204_NO_CONTENT)
    serializer = VoteSerializer(vote, context={'request': request})
    return Response(serializer.data, status=status.HTTP_202_ACCEPTED)
