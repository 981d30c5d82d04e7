from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from .models import Group
from .serializers import (
    GroupSerializer,
    GroupCreateSerializer,
    GroupListSerializer,
    GroupMemberSerializer,
    JoinGroupSerializer,
    NeedsVotingSerializer,
)

from apps.groups.services import (
    create_group,
    join_group,
    get_group_members,
    get_membership,
    get_member_count,
    GroupsServiceError,
)
from apps.voting.responses import error_response, deletion_response
from apps.voting.serializers import VoteSerializer
from apps.voting.services import (
    request_deletion,
    member_needs_voting,
    DeletionKind,
    VotingServiceError,
)


class GroupPagination(PageNumberPagination):
    """Custom pagination for groups."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class GroupViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet
):
    """
    ViewSet for colmeias.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Get all groups (user is member of)
    create: Create a new group
    retrieve: Get a specific group
    destroy: Delete the group, or open a vote to delete it
    """

    serializer_class = GroupSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = GroupPagination

    def get_queryset(self):
        """Return only groups where user is a member."""
        user = self.request.user
        return Group.objects.filter(
            memberships__user=user
        ).select_related('created_by').prefetch_related('memberships')

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action == 'list':
            return GroupListSerializer
        elif self.action == 'create':
            return GroupCreateSerializer
        return GroupSerializer

    def create(self, request, *args, **kwargs):
        """Create a new group."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        group = create_group(
            name=serializer.validated_data['name'],
            creator=request.user
        )

        output_serializer = GroupSerializer(group, context={'request': request})
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={202: VoteSerializer, 204: None})
    def destroy(self, request, *args, **kwargs):
        """Delete the group now, or open a delete_group vote."""
        group = self.get_object()

        try:
            vote = request_deletion(
                kind=DeletionKind.GROUP,
                group_id=group.id,
                target_id=group.id,
                target_name=group.name,
                user=request.user
            )
        except (VotingServiceError, GroupsServiceError) as e:
            return error_response(e)

        return deletion_response(vote, request)

    @extend_schema(request=JoinGroupSerializer, responses={201: GroupMemberSerializer})
    @action(detail=False, methods=['post'])
    def join(self, request):
        """Join a group using invite code."""
        serializer = JoinGroupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            membership = join_group(
                user=request.user,
                invite_code=serializer.validated_data['invite_code']
            )
        except GroupsServiceError as e:
            return error_response(e)

        output_serializer = GroupMemberSerializer(membership)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['get'])
    def members(self, request, pk=None):
        """Get all members of the group."""
        group = self.get_object()
        memberships = get_group_members(group_id=group.id)
        serializer = GroupMemberSerializer(memberships, many=True)
        return Response(serializer.data)

    @extend_schema(request=None, responses={202: VoteSerializer, 204: None})
    @action(detail=True, methods=['delete'], url_path=r'members/(?P<membership_id>[^/.]+)')
    def remove_member(self, request, pk=None, membership_id=None):
        """Remove a member now, or open a remove_member vote."""
        group = self.get_object()

        try:
            membership = get_membership(group_id=group.id, membership_id=membership_id)
            vote = request_deletion(
                kind=DeletionKind.MEMBER,
                group_id=group.id,
                target_id=membership.id,
                target_name=membership.user.get_display_name(),
                user=request.user
            )
        except (VotingServiceError, GroupsServiceError) as e:
            return error_response(e)

        return deletion_response(vote, request)

    @extend_schema(responses={200: NeedsVotingSerializer})
    @action(detail=True, methods=['get'])
    def needs_voting(self, request, pk=None):
        """Whether destructive actions in this group go through a vote."""
        group = self.get_object()
        count = get_member_count(group_id=group.id)
        return Response({
            'needs_voting': member_needs_voting(count),
            'member_count': count,
        })
