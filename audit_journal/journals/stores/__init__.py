"""Journal stores."""

from audit_journal.journals.store import JournalStore
from audit_journal.journals.stores.inmemory import InMemoryJournalStore

__all__ = [
    "JournalStore",
    "InMemoryJournalStore",
]
