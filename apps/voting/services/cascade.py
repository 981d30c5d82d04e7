"""
Cascading group delete.

Deleting a colmeia removes its votes, activities, expenses, routines, tasks,
notes and memberships one table at a time before the group row itself. The
group is stamped with `deletion_started_at` first; a deletion interrupted
halfway leaves the stamp behind and `resume_group_deletions` finishes it.
"""

import logging
from typing import List
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.activity.models import Activity
from apps.groups.models import Group, GroupMembership
from apps.groups.services import GroupNotFoundError
from apps.household.models import Task, Routine, Expense, Note
from apps.voting.models import Vote

logger = logging.getLogger(__name__)

DELETION_ORDER = (Vote, Activity, Expense, Routine, Task, Note, GroupMembership)


def delete_group_cascade(*, group_id: UUID) -> None:
    """
    Delete a group and everything under it.

    Each step runs in its own atomic block (a savepoint when the caller
    already holds a transaction). Calling it again for a half-deleted
    group picks up the remaining steps.

    Raises:
        GroupNotFoundError: If the group doesn't exist
    """
    with transaction.atomic():
        stamped = (
            Group.objects
            .filter(id=group_id, deletion_started_at__isnull=True)
            .update(deletion_started_at=timezone.now())
        )
        if not stamped and not Group.objects.filter(id=group_id).exists():
            raise GroupNotFoundError(f"Group with ID {group_id} not found")

    logger.info("Deleting group %s", group_id)

    for model in DELETION_ORDER:
        with transaction.atomic():
            deleted, _ = model.objects.filter(group_id=group_id).delete()
        logger.debug("Deleted %s %s rows of group %s", deleted, model._meta.db_table, group_id)

    with transaction.atomic():
        Group.objects.filter(id=group_id).delete()

    logger.info("Group %s deleted", group_id)


def resume_group_deletions() -> List[UUID]:
    """Finish every group deletion that was interrupted. Returns the group ids."""
    group_ids = list(
        Group.objects
        .filter(deletion_started_at__isnull=False)
        .values_list('id', flat=True)
    )

    for group_id in group_ids:
        logger.warning("Resuming interrupted deletion of group %s", group_id)
        delete_group_cascade(group_id=group_id)

    return group_ids
