# ==========================================
# apps/activity/models.py
# ==========================================

from django.db import models
import uuid


class ActivityType(models.TextChoices):
    TASK_CREATED = 'task_created', 'Task created'
    TASK_COMPLETED = 'task_completed', 'Task completed'
    TASK_UNCOMPLETED = 'task_uncompleted', 'Task reopened'
    TASK_DELETED = 'task_deleted', 'Task deleted'
    MEMBER_JOINED = 'member_joined', 'Member joined'
    MEMBER_LEFT = 'member_left', 'Member left'
    VOTE_CREATED = 'vote_created', 'Vote created'
    VOTE_COMPLETED = 'vote_completed', 'Vote completed'
    EXPENSE_ADDED = 'expense_added', 'Expense added'
    EXPENSE_DELETED = 'expense_deleted', 'Expense deleted'


class Activity(models.Model):
    """Append-only entry of a colmeia's activity feed."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group = models.ForeignKey('groups.Group', on_delete=models.CASCADE, related_name='activities')
    type = models.CharField(max_length=32, choices=ActivityType.choices)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='activities'
    )
    # Captured at write time so the feed survives user renames and deletions
    user_name = models.CharField(max_length=100, blank=True)
    metadata = models.JSONField(default=dict, blank=True)
    timestamp = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'activities'
        indexes = [
            models.Index(fields=['group', 'timestamp'], name='activity_group_ts_idx'),
        ]
        ordering = ['-timestamp']

    def __str__(self):
        return f"{self.group_id} {self.type} by {self.user_name or 'system'}"

    def describe(self):
        """Human readable feed line."""
        name = self.user_name or 'Someone'
        meta = self.metadata or {}

        if self.type == ActivityType.TASK_CREATED:
            return f'{name} created the task "{meta.get("taskTitle")}"'
        if self.type == ActivityType.TASK_COMPLETED:
            return f'{name} completed the task "{meta.get("taskTitle")}"'
        if self.type == ActivityType.TASK_UNCOMPLETED:
            return f'{name} reopened the task "{meta.get("taskTitle")}"'
        if self.type == ActivityType.TASK_DELETED:
            return f'{name} deleted the task "{meta.get("taskTitle")}"'
        if self.type == ActivityType.MEMBER_JOINED:
            return f'{name} joined the colmeia'
        if self.type == ActivityType.MEMBER_LEFT:
            member = meta.get('memberName')
            return f'{member} left the colmeia' if member else f'{name} left the colmeia'
        if self.type == ActivityType.VOTE_CREATED:
            return f'{name} started a vote'
        if self.type == ActivityType.VOTE_COMPLETED:
            result = meta.get('result')
            if result == 'failed':
                return f'The vote on "{meta.get("targetName")}" failed to execute'
            if result == 'approved':
                return f'The vote on "{meta.get("targetName")}" was approved'
            return 'A vote was concluded'
        if self.type == ActivityType.EXPENSE_ADDED:
            return f'{name} added an expense of {meta.get("amount")}'
        if self.type == ActivityType.EXPENSE_DELETED:
            return f'{name} deleted the expense "{meta.get("description")}"'
        return f'{name} did something'
