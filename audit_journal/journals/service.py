"""Journal service: records, queries and diffs journals through a store."""

from collections.abc import Callable
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from audit_journal.config.models.journal import JournalConfig
from audit_journal.journals.builders import EntryBuilder
from audit_journal.journals.enums import JournalableKind
from audit_journal.journals.errors import (
    InvalidJournalDataError,
    JournalNotFoundError,
    VersionConflictError,
)
from audit_journal.journals.models import (
    Cause,
    JournalDiff,
    JournalEntry,
    JournalVersion,
    Snapshot,
    compute_diff,
)
from audit_journal.journals.models.entry import utc_now
from audit_journal.journals.store import JournalStore
from audit_journal.observability.logging import get_logger

logger = get_logger(__name__)


class JournalEvent(BaseModel):
    """Emitted after a journal has been recorded."""

    model_config = ConfigDict(frozen=True)

    entry: JournalEntry = Field(..., description="The recorded journal")
    snapshot: Snapshot = Field(..., description="Entity state at this version")
    diff: JournalDiff | None = Field(
        default=None, description="Changes since the previous version, None on creation"
    )
    timestamp: datetime = Field(default_factory=utc_now, description="Event time")


JournalEventHandler = Callable[[JournalEvent], None]


class JournalService:
    """Records journals for journalable entities.

    Versions are derived from the latest stored journal. When a concurrent
    writer claims the same version first, the store raises
    VersionConflictError and the update is recomputed against the new
    latest journal, up to ``max_version_retries`` times.
    """

    def __init__(
        self,
        store: JournalStore,
        config: JournalConfig | None = None,
    ) -> None:
        if config is None:
            from audit_journal.config import get_settings

            config = get_settings().journal
        self._store = store
        self._config = config
        self._handlers: list[JournalEventHandler] = []

    def on_journal_created(self, handler: JournalEventHandler) -> None:
        """Register a callback invoked for every recorded journal."""
        self._handlers.append(handler)

    async def record_creation(
        self,
        kind: JournalableKind,
        journalable_id: int,
        user_id: int,
        snapshot: Snapshot,
        notes: str | None = None,
        cause: Cause | None = None,
        activity_id: int | None = None,
    ) -> JournalEntry:
        """Record the initial journal of an entity.

        Raises:
            VersionConflictError: If the entity already has a journal
        """
        entry = self._build_entry(
            kind,
            journalable_id,
            JournalVersion.initial(),
            user_id,
            notes=notes,
            cause=cause,
            activity_id=activity_id,
        )
        stored = await self._store.insert(entry, snapshot)
        logger.info(
            "journal_recorded",
            journalable_type=kind.value,
            journalable_id=journalable_id,
            version=stored.version.value,
            journal_id=stored.id,
            fields=len(snapshot),
        )
        self._emit(
            JournalEvent(entry=stored, snapshot=snapshot.model_copy(deep=True))
        )
        return stored

    async def record_update(
        self,
        kind: JournalableKind,
        journalable_id: int,
        user_id: int,
        snapshot: Snapshot,
        notes: str | None = None,
        cause: Cause | None = None,
        activity_id: int | None = None,
    ) -> JournalEntry | None:
        """Record a journal for an entity's new state.

        An entity without journals gets its initial journal. Otherwise the
        snapshot is diffed against the latest one; when nothing changed and
        no notes are given, nothing is recorded and None is returned.

        Raises:
            VersionConflictError: If the version stays contested after all retries
        """
        has_notes = notes is not None and bool(notes.strip())
        attempt = 0
        while True:
            try:
                latest = await self._store.get_latest(kind, journalable_id)
                if latest is None:
                    return await self.record_creation(
                        kind,
                        journalable_id,
                        user_id,
                        snapshot,
                        notes=notes,
                        cause=cause,
                        activity_id=activity_id,
                    )

                previous, previous_snapshot = latest
                diff = compute_diff(previous_snapshot, snapshot)
                if diff.is_empty() and not has_notes and self._config.skip_empty_updates:
                    logger.debug(
                        "journal_update_skipped",
                        journalable_type=kind.value,
                        journalable_id=journalable_id,
                        version=previous.version.value,
                    )
                    return None

                entry = self._build_entry(
                    kind,
                    journalable_id,
                    previous.version.next(),
                    user_id,
                    notes=notes,
                    cause=cause,
                    activity_id=activity_id,
                )
                stored = await self._store.insert(entry, snapshot)
            except VersionConflictError as exc:
                if attempt >= self._config.max_version_retries:
                    logger.error(
                        "journal_version_conflict_exhausted",
                        journalable_type=kind.value,
                        journalable_id=journalable_id,
                        attempts=attempt + 1,
                    )
                    raise
                attempt += 1
                logger.warning(
                    "journal_version_conflict",
                    journalable_type=kind.value,
                    journalable_id=journalable_id,
                    version=exc.actual,
                    attempt=attempt,
                )
                continue

            logger.info(
                "journal_recorded",
                journalable_type=kind.value,
                journalable_id=journalable_id,
                version=stored.version.value,
                journal_id=stored.id,
                changes=len(diff),
            )
            event = JournalEvent(
                entry=stored, snapshot=snapshot.model_copy(deep=True), diff=diff
            )
            self._emit(event)
            return stored

    async def get_history(
        self, kind: JournalableKind, journalable_id: int
    ) -> list[JournalEntry]:
        """Get all journals of an entity in version order."""
        return await self._store.list_for_entity(kind, journalable_id)

    async def get_journal(
        self, journal_id: int
    ) -> tuple[JournalEntry, Snapshot] | None:
        return await self._store.get(journal_id)

    async def get_diff(
        self,
        kind: JournalableKind,
        journalable_id: int,
        from_version: JournalVersion,
        to_version: JournalVersion,
    ) -> JournalDiff:
        """Get the changes between two recorded versions of an entity.

        Raises:
            JournalNotFoundError: If either version was never recorded
            InvalidJournalDataError: If a version's snapshot is missing
        """
        from_snapshot = await self._snapshot_at(kind, journalable_id, from_version)
        to_snapshot = await self._snapshot_at(kind, journalable_id, to_version)
        return compute_diff(from_snapshot, to_snapshot)

    async def get_details(
        self,
        kind: JournalableKind,
        journalable_id: int,
        version: JournalVersion,
    ) -> JournalDiff:
        """Get the changes a single journal introduced.

        The initial journal reports every recorded field as added.
        """
        snapshot = await self._snapshot_at(kind, journalable_id, version)
        predecessor = await self._store.find_predecessor(kind, journalable_id, version)
        if predecessor is None:
            return JournalDiff.from_initial(snapshot)
        previous = await self._snapshot_of(predecessor)
        return compute_diff(previous, snapshot)

    async def update_notes(self, journal_id: int, notes: str | None) -> JournalEntry:
        """Replace the notes of a recorded journal.

        Raises:
            JournalNotFoundError: If the journal doesn't exist
        """
        updated = await self._store.update_notes(journal_id, notes)
        if updated is None:
            raise JournalNotFoundError(f"Journal not found: {journal_id}")
        logger.info("journal_notes_updated", journal_id=journal_id)
        return updated

    async def delete_history(self, kind: JournalableKind, journalable_id: int) -> int:
        """Delete all journals of an entity."""
        deleted = await self._store.delete_for_entity(kind, journalable_id)
        logger.info(
            "journal_history_deleted",
            journalable_type=kind.value,
            journalable_id=journalable_id,
            deleted=deleted,
        )
        return deleted

    def _build_entry(
        self,
        kind: JournalableKind,
        journalable_id: int,
        version: JournalVersion,
        user_id: int,
        *,
        notes: str | None,
        cause: Cause | None,
        activity_id: int | None,
    ) -> JournalEntry:
        builder = EntryBuilder.for_kind(kind, journalable_id, version, user_id)
        if notes is not None:
            builder.notes(notes)
        if activity_id is not None:
            builder.activity(activity_id)
        if cause is not None:
            builder.cause(cause.cause_type)
            if cause.context is not None:
                builder.cause_context(cause.context)
        return builder.build()

    async def _snapshot_at(
        self,
        kind: JournalableKind,
        journalable_id: int,
        version: JournalVersion,
    ) -> Snapshot:
        entry = await self._store.entry_by_version(kind, journalable_id, version)
        if entry is None:
            raise JournalNotFoundError(
                f"Journal not found: {kind.storage_name} #{journalable_id} version {version}"
            )
        return await self._snapshot_of(entry)

    async def _snapshot_of(self, entry: JournalEntry) -> Snapshot:
        snapshot = None
        if entry.data_id is not None:
            snapshot = await self._store.get_snapshot(entry.data_id)
        if snapshot is None:
            raise InvalidJournalDataError(f"Missing journal data for journal {entry.id}")
        return snapshot

    def _emit(self, event: JournalEvent) -> None:
        for handler in self._handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "journal_event_handler_failed",
                    journal_id=event.entry.id,
                )
