"""Journal domain models.

Contains all Pydantic models for journal records:
- JournalVersion, Cause and JournalEntry for the audit metadata
- Snapshot for the recorded entity state
- JournalDetails and JournalDiff for field-level differences
"""

from audit_journal.journals.models.cause import Cause
from audit_journal.journals.models.diff import JournalDetails, JournalDiff, compute_diff
from audit_journal.journals.models.entry import JournalEntry
from audit_journal.journals.models.snapshot import Snapshot
from audit_journal.journals.models.version import JournalVersion

__all__ = [
    "Cause",
    "JournalDetails",
    "JournalDiff",
    "JournalEntry",
    "JournalVersion",
    "Snapshot",
    "compute_diff",
]
