from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.groups.services import GroupsServiceError, require_membership
from .models import Vote
from .responses import error_response
from .serializers import VoteSerializer, VoteFilterSerializer
from .services import (
    add_vote,
    remove_vote,
    cancel_vote,
    reject_vote,
    get_pending_votes,
    VotingServiceError,
)


class VoteViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """
    Votes on destructive group actions.

    Views are thin HTTP handlers; the vote ledger does the work.

    list: Pending votes of a group (?group=<id>[&type=...])
    retrieve: One vote, any status
    approve: Add the current user's approval
    unvote: Withdraw the current user's approval
    cancel: Close the vote (creator only)
    reject: Discard the pending vote
    """

    serializer_class = VoteSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None

    def get_queryset(self):
        """Only votes of groups the user belongs to."""
        return Vote.objects.filter(
            group__memberships__user=self.request.user
        ).select_related('created_by')

    @extend_schema(
        parameters=[
            OpenApiParameter('group', str, required=True, description='Group UUID'),
            OpenApiParameter('type', str, required=False, description='Vote type'),
        ],
        responses={200: VoteSerializer(many=True)},
        description="Pending votes of a colmeia (members only).",
        tags=['votes'],
    )
    def list(self, request, *args, **kwargs):
        params = VoteFilterSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        group_id = params.validated_data['group']

        try:
            require_membership(group_id=group_id, user=request.user)
        except GroupsServiceError as e:
            return error_response(e)

        votes = get_pending_votes(group_id=group_id, vote_type=params.validated_data.get('type'))
        serializer = self.get_serializer(votes, many=True)
        return Response(serializer.data)

    def _apply(self, service, request):
        vote = self.get_object()
        try:
            vote = service(group_id=vote.group_id, vote_id=vote.id, user=request.user)
        except (VotingServiceError, GroupsServiceError) as e:
            return error_response(e)
        return Response(self.get_serializer(vote).data)

    @extend_schema(request=None, responses={200: VoteSerializer}, tags=['votes'])
    @action(detail=True, methods=['post'])
    def approve(self, request, pk=None):
        """Approve the vote. Runs the action once quorum is reached."""
        return self._apply(add_vote, request)

    @extend_schema(request=None, responses={200: VoteSerializer}, tags=['votes'])
    @action(detail=True, methods=['post'])
    def unvote(self, request, pk=None):
        """Withdraw your approval."""
        return self._apply(remove_vote, request)

    @extend_schema(request=None, responses={200: VoteSerializer}, tags=['votes'])
    @action(detail=True, methods=['post'])
    def cancel(self, request, pk=None):
        """Cancel the vote (creator only)."""
        return self._apply(cancel_vote, request)

    @extend_schema(request=None, responses={204: None}, tags=['votes'])
    @action(detail=True, methods=['post'])
    def reject(self, request, pk=None):
        """Discard a pending vote."""
        vote = self.get_object()
        try:
            reject_vote(group_id=vote.group_id, vote_id=vote.id, user=request.user)
        except (VotingServiceError, GroupsServiceError) as e:
            return error_response(e)
        return Response(status=status.HTTP_204_NO_CONTENT)
