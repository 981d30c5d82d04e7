from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.groups.services import require_membership, NotMemberError
from .serializers import ActivitySerializer, ActivityFilterSerializer
from .services import get_group_feed


@extend_schema(
    parameters=[
        OpenApiParameter('group', str, required=True, description='Group UUID'),
        OpenApiParameter('limit', int, required=False),
    ],
    responses={200: ActivitySerializer(many=True)},
    description="Recent activity feed of a colmeia (members only).",
    tags=['activity'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def group_feed(request):
    """Get a group's activity feed."""
    params = ActivityFilterSerializer(data=request.query_params)
    params.is_valid(raise_exception=True)
    group_id = params.validated_data['group']

    try:
        require_membership(group_id=group_id, user=request.user)
    except NotMemberError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    feed = get_group_feed(group_id=group_id, limit=params.validated_data['limit'])
    return Response(ActivitySerializer(feed, many=True).data)
