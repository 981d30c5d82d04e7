from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter

from apps.groups.services import GroupsServiceError
from apps.voting.responses import error_response, deletion_response
from apps.voting.serializers import VoteSerializer
from apps.voting.services import request_deletion, DeletionKind, VotingServiceError

from .models import Task, Routine, Expense, Note
from .serializers import (
    TaskSerializer,
    TaskCreateSerializer,
    RoutineSerializer,
    RoutineCreateSerializer,
    ExpenseSerializer,
    ExpenseCreateSerializer,
    NoteSerializer,
    NoteCreateSerializer,
    GroupFilterSerializer,
)
from .services import (
    create_task,
    set_task_completed,
    create_routine,
    create_expense,
    create_note,
    delete_note,
    HouseholdServiceError,
)


LIST_SCHEMA = extend_schema(
    parameters=[OpenApiParameter('group', str, required=False, description='Group UUID')],
    tags=['household'],
)


class GroupRecordViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet
):
    """
    Base ViewSet for records owned by a colmeia.

    Records are visible to members of their group only. Creation goes
    through the household services; deletion goes through the voting
    gate and answers 204 (deleted) or 202 (vote opened).
    """

    permission_classes = [IsAuthenticated]
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']
    create_serializer_class = None
    deletion_kind = None

    def get_queryset(self):
        return self.queryset.filter(
            group__memberships__user=self.request.user
        ).select_related('created_by')

    def filter_queryset(self, queryset):
        queryset = super().filter_queryset(queryset)
        if self.action == 'list':
            params = GroupFilterSerializer(data=self.request.query_params)
            params.is_valid(raise_exception=True)
            group_id = params.validated_data.get('group')
            if group_id:
                queryset = queryset.filter(group_id=group_id)
        return queryset

    def create_record(self, data):
        raise NotImplementedError

    def create(self, request, *args, **kwargs):
        serializer = self.create_serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            record = self.create_record(serializer.validated_data)
        except (GroupsServiceError, HouseholdServiceError) as e:
            return error_response(e)

        output_serializer = self.get_serializer(record)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={202: VoteSerializer, 204: None})
    def destroy(self, request, *args, **kwargs):
        """Delete now, or open a vote when the group is large enough to need one."""
        record = self.get_object()

        try:
            vote = request_deletion(
                kind=self.deletion_kind,
                group_id=record.group_id,
                target_id=record.id,
                target_name=record.display_label,
                user=request.user
            )
        except (VotingServiceError, GroupsServiceError) as e:
            return error_response(e)

        return deletion_response(vote, request)


@extend_schema_view(list=LIST_SCHEMA)
class TaskViewSet(GroupRecordViewSet):
    queryset = Task.objects.all()
    serializer_class = TaskSerializer
    create_serializer_class = TaskCreateSerializer
    deletion_kind = DeletionKind.TASK

    def create_record(self, data):
        return create_task(
            group_id=data['group'],
            user=self.request.user,
            title=data['title'],
            description=data.get('description', '')
        )

    @extend_schema(request=None, responses={200: TaskSerializer})
    @action(detail=True, methods=['post'])
    def toggle(self, request, pk=None):
        """Flip the task between done and open."""
        task = self.get_object()
        try:
            task = set_task_completed(task=task, user=request.user, completed=not task.is_completed)
        except GroupsServiceError as e:
            return error_response(e)
        return Response(self.get_serializer(task).data)


@extend_schema_view(list=LIST_SCHEMA)
class RoutineViewSet(GroupRecordViewSet):
    queryset = Routine.objects.select_related('assigned_to')
    serializer_class = RoutineSerializer
    create_serializer_class = RoutineCreateSerializer
    deletion_kind = DeletionKind.ROUTINE

    def create_record(self, data):
        return create_routine(
            group_id=data['group'],
            user=self.request.user,
            title=data['title'],
            frequency=data['frequency'],
            assigned_to=data.get('assigned_to')
        )


@extend_schema_view(list=LIST_SCHEMA)
class ExpenseViewSet(GroupRecordViewSet):
    queryset = Expense.objects.all()
    serializer_class = ExpenseSerializer
    create_serializer_class = ExpenseCreateSerializer
    deletion_kind = DeletionKind.EXPENSE

    def create_record(self, data):
        return create_expense(
            group_id=data['group'],
            user=self.request.user,
            description=data['description'],
            amount=data['amount'],
            category=data['category'],
            date=data.get('date')
        )


@extend_schema_view(list=LIST_SCHEMA)
class NoteViewSet(GroupRecordViewSet):
    """Notice board. Notes cannot be edited and are removed by their author without a vote."""

    queryset = Note.objects.all()
    serializer_class = NoteSerializer
    create_serializer_class = NoteCreateSerializer
    http_method_names = ['get', 'post', 'delete', 'head', 'options']

    def create_record(self, data):
        return create_note(
            group_id=data['group'],
            user=self.request.user,
            content=data['content'],
            color=data['color']
        )

    @extend_schema(responses={204: None})
    def destroy(self, request, *args, **kwargs):
        note = self.get_object()

        try:
            delete_note(note_id=note.id, user=request.user)
        except HouseholdServiceError as e:
            return error_response(e)

        return Response(status=status.HTTP_204_NO_CONTENT)
