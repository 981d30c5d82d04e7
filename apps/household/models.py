# ==========================================
# apps/household/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class RoutineFrequency(models.TextChoices):
    DAILY = 'daily', 'Daily'
    WEEKLY = 'weekly', 'Weekly'
    MONTHLY = 'monthly', 'Monthly'


class ExpenseCategory(models.TextChoices):
    FOOD = 'food', 'Food'
    HOUSING = 'housing', 'Housing'
    TRANSPORT = 'transport', 'Transport'
    LEISURE = 'leisure', 'Leisure'
    HEALTH = 'health', 'Health'
    OTHER = 'other', 'Other'


class Task(models.Model):
    """One-off shared task of a colmeia."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group = models.ForeignKey('groups.Group', on_delete=models.CASCADE, related_name='tasks')
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    is_completed = models.BooleanField(default=False)
    completed_at = models.DateTimeField(null=True, blank=True)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        related_name='created_tasks'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'household_tasks'
        indexes = [
            models.Index(fields=['group', 'is_completed'], name='task_group_done_idx'),
        ]
        ordering = ['is_completed', '-created_at']

    def __str__(self):
        return self.title

    @property
    def display_label(self):
        return self.title


class Routine(models.Model):
    """Recurring chore."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group = models.ForeignKey('groups.Group', on_delete=models.CASCADE, related_name='routines')
    title = models.CharField(max_length=200)
    frequency = models.CharField(
        max_length=20,
        choices=RoutineFrequency.choices,
        default=RoutineFrequency.WEEKLY
    )
    assigned_to = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assigned_routines'
    )
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        related_name='created_routines'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'household_routines'
        indexes = [
            models.Index(fields=['group', 'frequency'], name='routine_group_freq_idx'),
        ]
        ordering = ['frequency', 'title']

    def __str__(self):
        return f"{self.title} ({self.frequency})"

    @property
    def display_label(self):
        return self.title


class Expense(models.Model):
    """Shared household expense."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group = models.ForeignKey('groups.Group', on_delete=models.CASCADE, related_name='expenses')
    description = models.CharField(max_length=200)
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    category = models.CharField(
        max_length=20,
        choices=ExpenseCategory.choices,
        default=ExpenseCategory.OTHER
    )
    date = models.DateField()
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        related_name='created_expenses'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'household_expenses'
        indexes = [
            models.Index(fields=['group', 'date'], name='expense_group_date_idx'),
            models.Index(fields=['group', 'category'], name='expense_group_category_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.description} - {self.amount}"

    @property
    def display_label(self):
        return self.description


class NoteColor(models.TextChoices):
    YELLOW = '#FFE066', 'Yellow'
    PINK = '#FFB3BA', 'Pink'
    BLUE = '#BAE1FF', 'Blue'
    GREEN = '#BAFFC9', 'Green'
    ORANGE = '#FFD9BA', 'Orange'
    PURPLE = '#E0BBE4', 'Purple'


class Note(models.Model):
    """Notice pinned to a colmeia's board. Only its author may remove it."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group = models.ForeignKey('groups.Group', on_delete=models.CASCADE, related_name='notes')
    content = models.CharField(max_length=200)
    color = models.CharField(max_length=7, choices=NoteColor.choices, default=NoteColor.YELLOW)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        related_name='notes'
    )
    author_name = models.CharField(max_length=100, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'household_notes'
        indexes = [
            models.Index(fields=['group', 'created_at'], name='note_group_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.content[:30]} - {self.author_name}"

    @property
    def display_label(self):
        return self.content
