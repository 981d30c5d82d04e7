"""Domain exceptions for household records."""


class HouseholdServiceError(Exception):
    """Base exception for household service errors."""
    pass


class InvalidExpenseAmountError(HouseholdServiceError):
    """Raised when an expense amount is not positive."""
    pass


class InvalidAssigneeError(HouseholdServiceError):
    """Raised when a routine is assigned to someone outside the group."""
    pass


class EmptyNoteError(HouseholdServiceError):
    """Raised when a note has no content."""
    pass


class NotNoteAuthorError(HouseholdServiceError):
    """Raised when someone other than the author removes a note."""
    pass


class NoteNotFoundError(HouseholdServiceError):
    """Raised when a note doesn't exist."""
    pass
