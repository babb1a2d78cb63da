"""In-memory implementation of JournalStore."""

import asyncio

from audit_journal.journals.enums import JournalableKind
from audit_journal.journals.errors import VersionConflictError
from audit_journal.journals.models import JournalEntry, JournalVersion, Snapshot
from audit_journal.journals.store import JournalStore

EntityKey = tuple[JournalableKind, int]


class InMemoryJournalStore(JournalStore):
    """In-memory implementation of JournalStore for testing and development.

    Journals are indexed per entity and by version; inserts run under a
    lock and reject versions that are already taken. Not suitable for
    production use.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._entries: dict[int, JournalEntry] = {}
        self._snapshots: dict[int, Snapshot] = {}
        self._versions: dict[EntityKey, dict[int, int]] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    # Version operations
    async def current_version(
        self, kind: JournalableKind, journalable_id: int
    ) -> JournalVersion | None:
        versions = self._versions.get((kind, journalable_id))
        if not versions:
            return None
        return JournalVersion(max(versions))

    # Write operations
    async def insert(self, entry: JournalEntry, snapshot: Snapshot) -> JournalEntry:
        """Save an entry and its snapshot under fresh ids."""
        key = (entry.journalable_type, entry.journalable_id)
        async with self._lock:
            versions = self._versions.setdefault(key, {})
            expected = (max(versions) if versions else 0) + 1
            if entry.version.value != expected:
                raise VersionConflictError(expected=expected, actual=entry.version.value)
            journal_id = self._next_id
            self._next_id += 1
            stored = entry.with_ids(journal_id, journal_id)
            self._entries[journal_id] = stored
            self._snapshots[journal_id] = snapshot.model_copy(deep=True)
            versions[entry.version.value] = journal_id
        return stored

    async def update_notes(
        self, journal_id: int, notes: str | None
    ) -> JournalEntry | None:
        entry = self._entries.get(journal_id)
        if entry is None:
            return None
        updated = entry.edit_notes(notes)
        self._entries[journal_id] = updated
        return updated

    async def delete_for_entity(
        self, kind: JournalableKind, journalable_id: int
    ) -> int:
        async with self._lock:
            versions = self._versions.pop((kind, journalable_id), {})
            for journal_id in versions.values():
                entry = self._entries.pop(journal_id)
                if entry.data_id is not None:
                    self._snapshots.pop(entry.data_id, None)
        return len(versions)

    # Read operations
    async def get(self, journal_id: int) -> tuple[JournalEntry, Snapshot] | None:
        entry = self._entries.get(journal_id)
        if entry is None or entry.data_id is None:
            return None
        return entry, self._snapshots[entry.data_id].model_copy(deep=True)

    async def get_snapshot(self, data_id: int) -> Snapshot | None:
        snapshot = self._snapshots.get(data_id)
        return snapshot.model_copy(deep=True) if snapshot is not None else None

    async def list_for_entity(
        self, kind: JournalableKind, journalable_id: int
    ) -> list[JournalEntry]:
        versions = self._versions.get((kind, journalable_id), {})
        return [self._entries[versions[v]] for v in sorted(versions)]

    async def list_by_user(
        self, user_id: int, *, limit: int = 100
    ) -> list[JournalEntry]:
        results = [
            entry for entry in self._entries.values() if entry.user_id == user_id
        ]
        # Most recent first
        results.sort(key=lambda e: (e.created_at, e.id or 0), reverse=True)
        return results[:limit]

    async def get_latest(
        self, kind: JournalableKind, journalable_id: int
    ) -> tuple[JournalEntry, Snapshot] | None:
        versions = self._versions.get((kind, journalable_id))
        if not versions:
            return None
        return await self.get(versions[max(versions)])

    async def entry_by_version(
        self,
        kind: JournalableKind,
        journalable_id: int,
        version: JournalVersion,
    ) -> JournalEntry | None:
        versions = self._versions.get((kind, journalable_id), {})
        journal_id = versions.get(version.value)
        return self._entries[journal_id] if journal_id is not None else None

    async def find_predecessor(
        self,
        kind: JournalableKind,
        journalable_id: int,
        version: JournalVersion,
    ) -> JournalEntry | None:
        versions = self._versions.get((kind, journalable_id), {})
        lower = [v for v in versions if v < version.value]
        if not lower:
            return None
        return self._entries[versions[max(lower)]]

    async def find_successor(
        self,
        kind: JournalableKind,
        journalable_id: int,
        version: JournalVersion,
    ) -> JournalEntry | None:
        versions = self._versions.get((kind, journalable_id), {})
        higher = [v for v in versions if v > version.value]
        if not higher:
            return None
        return self._entries[versions[min(higher)]]
