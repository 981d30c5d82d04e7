"""
Notice board of a colmeia.

Notes are short messages pinned by members. Removing one is not a group
decision: the author deletes it directly, no vote involved.
"""

import logging
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction

from apps.accounts.models import User
from apps.groups.services import require_membership
from apps.household.models import Note, NoteColor

from .exceptions import EmptyNoteError, NotNoteAuthorError, NoteNotFoundError

logger = logging.getLogger(__name__)


def create_note(
    *,
    group_id: UUID,
    user: User,
    content: str,
    color: str = NoteColor.YELLOW
) -> Note:
    """
    Pin a note to the group's board.

    Raises:
        NotMemberError: If user is not a member of the group
        EmptyNoteError: If content is blank
    """
    require_membership(group_id=group_id, user=user)

    content = (content or '').strip()
    if not content:
        raise EmptyNoteError("Note content cannot be empty")

    return Note.objects.create(
        group_id=group_id,
        content=content,
        color=color,
        created_by=user,
        author_name=user.get_display_name()
    )


@transaction.atomic
def delete_note(*, note_id: UUID, user: User) -> None:
    """
    Remove a note. Author only.

    Raises:
        NoteNotFoundError: If the note doesn't exist
        NotNoteAuthorError: If user did not write the note
    """
    try:
        note = Note.objects.select_for_update().get(id=note_id)
    except (Note.DoesNotExist, ValueError, ValidationError):
        raise NoteNotFoundError(f"Note with ID {note_id} not found")

    if note.created_by_id != user.id:
        raise NotNoteAuthorError("You can only delete your own notes")

    note.delete()
    logger.info("Note %s removed from group %s", note_id, note.group_id)
