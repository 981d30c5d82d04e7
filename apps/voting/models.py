# ==========================================
# apps/voting/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator
import uuid


class VoteType(models.TextChoices):
    DELETE_TASK = 'delete_task', 'Delete task'
    DELETE_EXPENSE = 'delete_expense', 'Delete expense'
    DELETE_ROUTINE = 'delete_routine', 'Delete routine'
    REMOVE_MEMBER = 'remove_member', 'Remove member'
    DELETE_GROUP = 'delete_group', 'Delete group'


class VoteStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    APPROVED = 'approved', 'Approved'
    REJECTED = 'rejected', 'Rejected'


class Vote(models.Model):
    """
    Pending decision of a colmeia about one destructive action.

    `voter_ids` is the set of user ids that approved, kept as a JSON list.
    The creator's id is always in it. `required_votes` and `total_members`
    are frozen when the vote is opened.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group = models.ForeignKey('groups.Group', on_delete=models.CASCADE, related_name='votes')
    type = models.CharField(max_length=20, choices=VoteType.choices)
    target_id = models.CharField(max_length=64)
    target_name = models.CharField(max_length=255)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        related_name='created_votes'
    )
    voter_ids = models.JSONField(default=list)
    required_votes = models.PositiveSmallIntegerField(validators=[MinValueValidator(1)])
    total_members = models.PositiveSmallIntegerField()
    status = models.CharField(
        max_length=10,
        choices=VoteStatus.choices,
        default=VoteStatus.PENDING
    )
    execution_error = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    resolved_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'votes'
        constraints = [
            models.UniqueConstraint(
                fields=['group', 'target_id'],
                condition=models.Q(status='pending'),
                name='unique_pending_vote_per_target'
            ),
        ]
        indexes = [
            models.Index(fields=['group', 'status'], name='vote_group_status_idx'),
            models.Index(fields=['group', 'type', 'status'], name='vote_group_type_status_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.type} '{self.target_name}' ({self.status})"

    @property
    def vote_count(self):
        return len(self.voter_ids)

    @property
    def is_pending(self):
        return self.status == VoteStatus.PENDING

    @property
    def has_quorum(self):
        return self.vote_count >= self.required_votes

    def has_voted(self, user_id):
        return str(user_id) in self.voter_ids

    def is_creator(self, user_id):
        return self.created_by_id is not None and str(self.created_by_id) == str(user_id)
