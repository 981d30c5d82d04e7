"""
Household services.

Record creation and updates. Deleting a task, routine or expense is a
destructive group action routed through apps.voting.services.request_deletion
by the views. Notes are removed by their author directly.
"""

from .exceptions import (
    HouseholdServiceError,
    InvalidExpenseAmountError,
    InvalidAssigneeError,
    EmptyNoteError,
    NotNoteAuthorError,
    NoteNotFoundError,
)
from .record_management import (
    create_task,
    set_task_completed,
    create_routine,
    create_expense,
)
from .notice_board import (
    create_note,
    delete_note,
)

__all__ = [
    # Exceptions
    'HouseholdServiceError',
    'InvalidExpenseAmountError',
    'InvalidAssigneeError',
    'EmptyNoteError',
    'NotNoteAuthorError',
    'NoteNotFoundError',
    # Services
    'create_task',
    'set_task_completed',
    'create_routine',
    'create_expense',
    'create_note',
    'delete_note',
]
