from rest_framework import serializers
from apps.accounts.models import User
from apps.accounts.serializers import UserMinimalSerializer
from .models import Task, Routine, Expense, Note, RoutineFrequency, ExpenseCategory, NoteColor
from decimal import Decimal


class TaskSerializer(serializers.ModelSerializer):
    """Task details. Completion changes go through the toggle action."""

    created_by = UserMinimalSerializer(read_only=True)

    class Meta:
        model = Task
        fields = [
            'id',
            'group',
            'title',
            'description',
            'is_completed',
            'completed_at',
            'created_by',
            'created_at',
        ]
        read_only_fields = ['id', 'group', 'is_completed', 'completed_at', 'created_by', 'created_at']


class TaskCreateSerializer(serializers.Serializer):
    group = serializers.UUIDField(required=True)
    title = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default='')


class RoutineSerializer(serializers.ModelSerializer):
    """Recurring chore with its assignee."""

    created_by = UserMinimalSerializer(read_only=True)
    assigned_to = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.all(),
        required=False,
        allow_null=True
    )

    class Meta:
        model = Routine
        fields = [
            'id',
            'group',
            'title',
            'frequency',
            'assigned_to',
            'created_by',
            'created_at',
        ]
        read_only_fields = ['id', 'group', 'created_by', 'created_at']

    def validate_assigned_to(self, value):
        if value is not None and self.instance is not None:
            if not self.instance.group.has_member(value):
                raise serializers.ValidationError("Routines can only be assigned to group members")
        return value


class RoutineCreateSerializer(serializers.Serializer):
    group = serializers.UUIDField(required=True)
    title = serializers.CharField(max_length=200)
    frequency = serializers.ChoiceField(choices=RoutineFrequency.choices, default=RoutineFrequency.WEEKLY)
    assigned_to = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.all(),
        required=False,
        allow_null=True,
        default=None
    )


class ExpenseSerializer(serializers.ModelSerializer):
    created_by = UserMinimalSerializer(read_only=True)
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0.01'))

    class Meta:
        model = Expense
        fields = [
            'id',
            'group',
            'description',
            'amount',
            'category',
            'date',
            'created_by',
            'created_at',
        ]
        read_only_fields = ['id', 'group', 'created_by', 'created_at']


class ExpenseCreateSerializer(serializers.Serializer):
    group = serializers.UUIDField(required=True)
    description = serializers.CharField(max_length=200)
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0.01'))
    category = serializers.ChoiceField(choices=ExpenseCategory.choices, default=ExpenseCategory.OTHER)
    date = serializers.DateField(required=False, allow_null=True, default=None)


class NoteSerializer(serializers.ModelSerializer):
    """Board note. Notes are written once and never edited."""

    created_by = UserMinimalSerializer(read_only=True)

    class Meta:
        model = Note
        fields = [
            'id',
            'group',
            'content',
            'color',
            'author_name',
            'created_by',
            'created_at',
        ]
        read_only_fields = fields


class NoteCreateSerializer(serializers.Serializer):
    group = serializers.UUIDField(required=True)
    content = serializers.CharField(max_length=200)
    color = serializers.ChoiceField(choices=NoteColor.choices, default=NoteColor.YELLOW)


class GroupFilterSerializer(serializers.Serializer):
    """Query parameters for household lists."""

    group = serializers.UUIDField(required=False)
