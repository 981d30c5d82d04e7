# ==========================================
# apps/groups/models.py
# ==========================================

from django.db import models
import secrets
import string
import uuid


INVITE_CODE_ALPHABET = string.ascii_uppercase + string.digits
INVITE_CODE_LENGTH = 6


def generate_invite_code():
    """Random 6-character invite code, e.g. 'K7Q2ZD'."""
    return ''.join(secrets.choice(INVITE_CODE_ALPHABET) for _ in range(INVITE_CODE_LENGTH))


class GroupRole(models.TextChoices):
    ADMIN = 'admin', 'Admin'
    MEMBER = 'member', 'Member'


class Group(models.Model):
    """A colmeia: the shared household whose members coordinate chores and expenses."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=120)
    invite_code = models.CharField(max_length=INVITE_CODE_LENGTH, unique=True, editable=False)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        related_name='created_colmeias'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    # Set when a cascading delete starts; a group carrying it is being torn down.
    deletion_started_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'groups'
        indexes = [
            models.Index(fields=['created_by', 'created_at'], name='groups_creator_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    @property
    def is_being_deleted(self):
        return self.deletion_started_at is not None

    def has_member(self, user):
        return self.memberships.filter(user=user).exists()

    def get_user_role(self, user):
        try:
            return self.memberships.get(user=user).role
        except GroupMembership.DoesNotExist:
            return None

    def is_admin(self, user):
        return self.get_user_role(user) == GroupRole.ADMIN


class GroupMembership(models.Model):
    """Association of a user with a colmeia. Its id is distinct from the user id."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='colmeia_memberships')
    group = models.ForeignKey(Group, on_delete=models.CASCADE, related_name='memberships')
    role = models.CharField(max_length=20, choices=GroupRole.choices, default=GroupRole.MEMBER)
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'group_memberships'
        constraints = [
            models.UniqueConstraint(fields=['group', 'user'], name='unique_membership_per_group'),
        ]
        indexes = [
            models.Index(fields=['group', 'role'], name='membership_group_role_idx'),
            models.Index(fields=['user', 'joined_at'], name='membership_user_joined_idx'),
        ]
        ordering = ['joined_at']

    def __str__(self):
        return f"{self.user.get_display_name()} in {self.group.name} ({self.role})"
