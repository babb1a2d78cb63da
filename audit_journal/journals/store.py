"""JournalStore abstract interface."""

from abc import ABC, abstractmethod

from audit_journal.journals.enums import JournalableKind
from audit_journal.journals.models import JournalEntry, JournalVersion, Snapshot


class JournalStore(ABC):
    """Abstract interface for journal persistence.

    Stores journal entries together with their snapshots. Implementations
    must keep (journalable_type, journalable_id, version) unique: ``insert``
    raises VersionConflictError when the version is already taken, either
    by locking the entity's latest journal while inserting or through a
    uniqueness constraint.
    """

    # Version operations
    @abstractmethod
    async def current_version(
        self, kind: JournalableKind, journalable_id: int
    ) -> JournalVersion | None:
        """Get the highest recorded version, or None if never journaled."""
        pass

    async def next_version(
        self, kind: JournalableKind, journalable_id: int
    ) -> JournalVersion:
        """Get the version the next journal of an entity would receive."""
        current = await self.current_version(kind, journalable_id)
        if current is None:
            return JournalVersion.initial()
        return current.next()

    # Write operations
    @abstractmethod
    async def insert(self, entry: JournalEntry, snapshot: Snapshot) -> JournalEntry:
        """Persist an entry and its snapshot.

        The entry's version must directly follow the entity's current
        version (1 for an entity without journals).

        Returns:
            The entry carrying its assigned ``id`` and ``data_id``

        Raises:
            VersionConflictError: If the version is taken or skips ahead
        """
        pass

    @abstractmethod
    async def update_notes(
        self, journal_id: int, notes: str | None
    ) -> JournalEntry | None:
        """Replace the notes of a journal, returning None if it doesn't exist."""
        pass

    @abstractmethod
    async def delete_for_entity(
        self, kind: JournalableKind, journalable_id: int
    ) -> int:
        """Delete all journals of an entity, returning how many were removed."""
        pass

    # Read operations
    @abstractmethod
    async def get(self, journal_id: int) -> tuple[JournalEntry, Snapshot] | None:
        """Get a journal and its snapshot by journal id."""
        pass

    @abstractmethod
    async def get_snapshot(self, data_id: int) -> Snapshot | None:
        """Get a snapshot by its data id."""
        pass

    @abstractmethod
    async def list_for_entity(
        self, kind: JournalableKind, journalable_id: int
    ) -> list[JournalEntry]:
        """List an entity's journals in version order."""
        pass

    @abstractmethod
    async def list_by_user(
        self, user_id: int, *, limit: int = 100
    ) -> list[JournalEntry]:
        """List journals written by a user, most recent first."""
        pass

    @abstractmethod
    async def get_latest(
        self, kind: JournalableKind, journalable_id: int
    ) -> tuple[JournalEntry, Snapshot] | None:
        """Get the highest-versioned journal of an entity with its snapshot."""
        pass

    async def latest_snapshot(
        self, kind: JournalableKind, journalable_id: int
    ) -> Snapshot | None:
        latest = await self.get_latest(kind, journalable_id)
        return latest[1] if latest is not None else None

    @abstractmethod
    async def entry_by_version(
        self,
        kind: JournalableKind,
        journalable_id: int,
        version: JournalVersion,
    ) -> JournalEntry | None:
        """Get the journal of an entity at an exact version."""
        pass

    @abstractmethod
    async def find_predecessor(
        self,
        kind: JournalableKind,
        journalable_id: int,
        version: JournalVersion,
    ) -> JournalEntry | None:
        """Get the closest journal below ``version``."""
        pass

    @abstractmethod
    async def find_successor(
        self,
        kind: JournalableKind,
        journalable_id: int,
        version: JournalVersion,
    ) -> JournalEntry | None:
        """Get the closest journal above ``version``."""
        pass
