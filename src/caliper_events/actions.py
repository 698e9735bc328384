"""Caliper action verbs.

Only the verbs this model actually emits are listed; the full Caliper
action vocabulary is not reproduced here.
"""

from enum import Enum

from .exceptions import UnknownActionError


class Action(Enum):
    """Verb describing what an actor did to an object.

    The member value is the serialized form, e.g. ``"Modified"``.
    """

    ARCHIVED = "Archived"
    COPIED = "Copied"
    CREATED = "Created"
    DELETED = "Deleted"
    LOGGED_IN = "LoggedIn"
    LOGGED_OUT = "LoggedOut"
    MODIFIED = "Modified"
    NAVIGATED_TO = "NavigatedTo"
    PUBLISHED = "Published"
    RESTORED = "Restored"
    RETRIEVED = "Retrieved"
    SAVED = "Saved"
    SHARED = "Shared"
    SUBMITTED = "Submitted"
    UNPUBLISHED = "Unpublished"
    VIEWED = "Viewed"

    @classmethod
    def from_value(cls, value: str) -> "Action":
        """Look up an action by its serialized verb."""
        try:
            return cls(value)
        except ValueError:
            raise UnknownActionError(value) from None
