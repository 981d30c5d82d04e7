"""Creation and state changes of group-owned household records."""

from datetime import date as date_type
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.activity.models import ActivityType
from apps.activity.services import log_activity
from apps.groups.models import GroupMembership
from apps.groups.services import require_membership
from apps.household.models import Task, Routine, Expense, RoutineFrequency, ExpenseCategory

from .exceptions import InvalidExpenseAmountError, InvalidAssigneeError


@transaction.atomic
def create_task(
    *,
    group_id: UUID,
    user: User,
    title: str,
    description: str = ''
) -> Task:
    """
    Create a task in a colmeia.

    Raises:
        NotMemberError: If user is not a member of the group
    """
    require_membership(group_id=group_id, user=user)

    task = Task.objects.create(
        group_id=group_id,
        title=title.strip(),
        description=description,
        created_by=user
    )

    log_activity(
        group_id=group_id,
        type=ActivityType.TASK_CREATED,
        user=user,
        metadata={'taskTitle': task.title}
    )
    return task


@transaction.atomic
def set_task_completed(*, task: Task, user: User, completed: bool) -> Task:
    """
    Mark a task as completed or reopen it.

    Raises:
        NotMemberError: If user is not a member of the task's group
    """
    require_membership(group_id=task.group_id, user=user)

    task = Task.objects.select_for_update().get(id=task.id)
    if task.is_completed == completed:
        return task

    task.is_completed = completed
    task.completed_at = timezone.now() if completed else None
    task.save(update_fields=['is_completed', 'completed_at'])

    log_activity(
        group_id=task.group_id,
        type=ActivityType.TASK_COMPLETED if completed else ActivityType.TASK_UNCOMPLETED,
        user=user,
        metadata={'taskTitle': task.title}
    )
    return task


@transaction.atomic
def create_routine(
    *,
    group_id: UUID,
    user: User,
    title: str,
    frequency: str = RoutineFrequency.WEEKLY,
    assigned_to: Optional[User] = None
) -> Routine:
    """
    Create a recurring chore.

    Raises:
        NotMemberError: If user is not a member of the group
        InvalidAssigneeError: If assigned_to is not a member of the group
    """
    require_membership(group_id=group_id, user=user)

    if assigned_to is not None and not GroupMembership.objects.filter(
        group_id=group_id, user=assigned_to
    ).exists():
        raise InvalidAssigneeError("Routines can only be assigned to group members")

    return Routine.objects.create(
        group_id=group_id,
        title=title.strip(),
        frequency=frequency,
        assigned_to=assigned_to,
        created_by=user
    )


@transaction.atomic
def create_expense(
    *,
    group_id: UUID,
    user: User,
    description: str,
    amount: Decimal,
    category: str = ExpenseCategory.OTHER,
    date: Optional[date_type] = None
) -> Expense:
    """
    Record a shared expense.

    Raises:
        NotMemberError: If user is not a member of the group
        InvalidExpenseAmountError: If amount is not positive
    """
    require_membership(group_id=group_id, user=user)

    if amount is None or amount <= Decimal('0'):
        raise InvalidExpenseAmountError("Expense amount must be positive")

    expense = Expense.objects.create(
        group_id=group_id,
        description=description.strip(),
        amount=amount,
        category=category,
        date=date or timezone.localdate(),
        created_by=user
    )

    log_activity(
        group_id=group_id,
        type=ActivityType.EXPENSE_ADDED,
        user=user,
        metadata={'amount': str(expense.amount), 'description': expense.description}
    )
    return expense
