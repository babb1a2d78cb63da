"""Journal domain.

Every accepted mutation of a journalable entity produces one immutable
JournalEntry (who, when, why, which version) referencing a Snapshot of the
entity's state. Diffing two snapshots yields the field-level changes shown
in activity feeds.

Usage:
    from audit_journal.journals import EntryBuilder, Snapshot, compute_diff

    snapshot = Snapshot.task().subject("Fix login").status_id(1).build()
    entry = EntryBuilder.task(42, 1, user_id=10).notes("created").build()
"""

from audit_journal.journals.builders import (
    EntryBuilder,
    ProjectSnapshotBuilder,
    SnapshotBuilder,
    TaskSnapshotBuilder,
    UserSnapshotBuilder,
    WikiPageSnapshotBuilder,
)
from audit_journal.journals.enums import CauseType, ChangeType, JournalableKind
from audit_journal.journals.errors import (
    FieldNotFoundError,
    FieldTypeMismatchError,
    InvalidJournalDataError,
    JournalError,
    JournalNotFoundError,
    SnapshotValueError,
    UnknownJournalableKindError,
    VersionConflictError,
)
from audit_journal.journals.fields import ProjectField, TaskField, UserField, WikiPageField
from audit_journal.journals.models import (
    Cause,
    JournalDetails,
    JournalDiff,
    JournalEntry,
    JournalVersion,
    Snapshot,
    compute_diff,
)
from audit_journal.journals.service import JournalEvent, JournalService
from audit_journal.journals.store import JournalStore
from audit_journal.journals.stores import InMemoryJournalStore

__all__ = [
    "Cause",
    "CauseType",
    "ChangeType",
    "EntryBuilder",
    "FieldNotFoundError",
    "FieldTypeMismatchError",
    "InMemoryJournalStore",
    "InvalidJournalDataError",
    "JournalDetails",
    "JournalDiff",
    "JournalEntry",
    "JournalError",
    "JournalEvent",
    "JournalNotFoundError",
    "JournalService",
    "JournalStore",
    "JournalVersion",
    "JournalableKind",
    "ProjectField",
    "ProjectSnapshotBuilder",
    "Snapshot",
    "SnapshotBuilder",
    "SnapshotValueError",
    "TaskField",
    "TaskSnapshotBuilder",
    "UnknownJournalableKindError",
    "UserField",
    "UserSnapshotBuilder",
    "VersionConflictError",
    "WikiPageField",
    "WikiPageSnapshotBuilder",
    "compute_diff",
]
