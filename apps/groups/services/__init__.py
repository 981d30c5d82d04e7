"""
Groups app services layer.

Services contain business logic and orchestrate operations across models.
Deleting groups and removing members is not done here: those are
destructive group actions and go through apps.voting.
"""

from .exceptions import (
    GroupsServiceError,
    GroupNotFoundError,
    InvalidInviteCodeError,
    AlreadyMemberError,
    NotMemberError,
    MembershipNotFoundError,
    GroupDeletionInProgressError,
)

from .group_management import (
    create_group,
    get_group_by_id,
    get_member_count,
)

from .membership_management import (
    join_group,
    get_group_members,
    get_membership,
    require_membership,
)


__all__ = [
    # Exceptions
    'GroupsServiceError',
    'GroupNotFoundError',
    'InvalidInviteCodeError',
    'AlreadyMemberError',
    'NotMemberError',
    'MembershipNotFoundError',
    'GroupDeletionInProgressError',

    # Group Management
    'create_group',
    'get_group_by_id',
    'get_member_count',

    # Membership Management
    'join_group',
    'get_group_members',
    'get_membership',
    'require_membership',
]
