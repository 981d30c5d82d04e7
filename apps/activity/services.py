"""
Activity log sink.

Writes are best-effort: a failure to record an activity is logged and
swallowed so it never aborts the operation that triggered it.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from .models import Activity

logger = logging.getLogger(__name__)


def log_activity(
    *,
    group_id: UUID,
    type: str,
    user: Optional[User] = None,
    metadata: Optional[dict] = None
) -> Optional[Activity]:
    """
    Append an entry to a group's activity feed.

    Runs in its own savepoint so a failed insert leaves the caller's
    transaction usable.

    Returns:
        The created Activity, or None if recording failed
    """
    try:
        with transaction.atomic():
            return Activity.objects.create(
                group_id=group_id,
                type=type,
                user=user,
                user_name=user.get_display_name() if user else '',
                metadata=metadata or {},
            )
    except Exception:
        logger.exception("Failed to record %s activity for group %s", type, group_id)
        return None


def get_group_feed(*, group_id: UUID, limit: int = 50):
    """Most recent activities of a group, newest first."""
    return (
        Activity.objects
        .filter(group_id=group_id)
        .order_by('-timestamp')[:limit]
    )
