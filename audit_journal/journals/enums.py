"""Enums for the journal domain."""

from enum import Enum

from audit_journal.journals.errors import UnknownJournalableKindError


class JournalableKind(str, Enum):
    """Category of entity a journal belongs to.

    The enum value is the snake_case wire name. ``storage_name`` is the
    identifier persisted in the ``journable_type`` column.
    """

    TASK = "task"
    PROJECT = "project"
    USER = "user"
    WIKI_PAGE = "wiki_page"
    MEETING = "meeting"
    BUDGET = "budget"
    DOCUMENT = "document"
    TIME_ENTRY = "time_entry"
    NEWS = "news"
    MESSAGE = "message"

    @property
    def storage_name(self) -> str:
        """Identifier used at the storage boundary."""
        return _STORAGE_NAMES[self]

    @property
    def snapshot_type(self) -> str:
        """Type tag carried by snapshots of this kind."""
        return f"{self.storage_name}Journal"

    @classmethod
    def from_storage_name(cls, name: str) -> "JournalableKind":
        """Resolve a storage identifier back to its kind.

        Raises:
            UnknownJournalableKindError: If the name is not a known identifier
        """
        kind = _KINDS_BY_STORAGE_NAME.get(name)
        if kind is None:
            raise UnknownJournalableKindError(name)
        return kind


_STORAGE_NAMES: dict[JournalableKind, str] = {
    JournalableKind.TASK: "WorkPackage",
    JournalableKind.PROJECT: "Project",
    JournalableKind.USER: "User",
    JournalableKind.WIKI_PAGE: "WikiContent",
    JournalableKind.MEETING: "Meeting",
    JournalableKind.BUDGET: "Budget",
    JournalableKind.DOCUMENT: "Document",
    JournalableKind.TIME_ENTRY: "TimeEntry",
    JournalableKind.NEWS: "News",
    JournalableKind.MESSAGE: "Message",
}

_KINDS_BY_STORAGE_NAME: dict[str, JournalableKind] = {
    name: kind for kind, name in _STORAGE_NAMES.items()
}
# Legacy identifier written by older wiki journals
_KINDS_BY_STORAGE_NAME["Wiki"] = JournalableKind.WIKI_PAGE


class CauseType(str, Enum):
    """What triggered a recorded change."""

    USER_ACTION = "user_action"
    SYSTEM_CHANGE = "system_change"
    WORKFLOW = "workflow"
    IMPORT = "import"
    API = "api"
    BULK_UPDATE = "bulk_update"


class ChangeType(str, Enum):
    """Kind of difference reported for one property."""

    CHANGED = "changed"
    ADDED = "added"
    REMOVED = "removed"
