"""Tests for journal entry, version, cause and kind models."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from audit_journal.journals import (
    Cause,
    CauseType,
    EntryBuilder,
    JournalableKind,
    JournalEntry,
    JournalVersion,
    UnknownJournalableKindError,
)


class TestJournalableKind:
    """Tests for JournalableKind storage mapping."""

    def test_storage_name(self) -> None:
        """Should expose the persisted type identifier."""
        assert JournalableKind.TASK.storage_name == "WorkPackage"
        assert JournalableKind.WIKI_PAGE.storage_name == "WikiContent"

    def test_round_trip_for_every_kind(self) -> None:
        """Every kind should map back from its storage name."""
        for kind in JournalableKind:
            assert JournalableKind.from_storage_name(kind.storage_name) is kind

    def test_storage_names_are_unique(self) -> None:
        """No two kinds should share a storage name."""
        names = [kind.storage_name for kind in JournalableKind]
        assert len(names) == len(set(names))

    def test_legacy_wiki_alias(self) -> None:
        """Should accept the legacy wiki identifier."""
        assert JournalableKind.from_storage_name("Wiki") is JournalableKind.WIKI_PAGE

    def test_unknown_storage_name_raises(self) -> None:
        """Should raise for unknown identifiers."""
        with pytest.raises(UnknownJournalableKindError):
            JournalableKind.from_storage_name("Unknown")

    def test_unknown_storage_name_is_value_error(self) -> None:
        """Should be catchable as ValueError."""
        with pytest.raises(ValueError):
            JournalableKind.from_storage_name("")

    def test_snapshot_type(self) -> None:
        """Snapshot type tag derives from the storage name."""
        assert JournalableKind.TASK.snapshot_type == "WorkPackageJournal"
        assert JournalableKind.PROJECT.snapshot_type == "ProjectJournal"


class TestJournalVersion:
    """Tests for JournalVersion."""

    def test_initial_is_one(self) -> None:
        assert JournalVersion.initial().value == 1
        assert JournalVersion.initial().is_initial()

    def test_next_increments_by_one(self) -> None:
        """next() should return value + 1 without touching the original."""
        for value in (1, 2, 7, 1000):
            version = JournalVersion(value)
            assert version.next().value == value + 1
            assert version.value == value

    def test_only_version_one_is_initial(self) -> None:
        assert not JournalVersion(2).is_initial()

    def test_ordering(self) -> None:
        """Versions should order by their integer value."""
        versions = [JournalVersion(3), JournalVersion(1), JournalVersion(2)]
        assert sorted(versions) == [JournalVersion(1), JournalVersion(2), JournalVersion(3)]
        assert JournalVersion(1) < JournalVersion(2)
        assert JournalVersion(3) >= JournalVersion(3)

    def test_hashable(self) -> None:
        assert len({JournalVersion(1), JournalVersion(1), JournalVersion(2)}) == 2

    def test_rejects_non_positive(self) -> None:
        """Should reject zero and negative versions."""
        with pytest.raises(ValidationError):
            JournalVersion(0)
        with pytest.raises(ValidationError):
            JournalVersion(-1)

    def test_anchor(self) -> None:
        assert JournalVersion(1).anchor == 0
        assert JournalVersion(5).anchor == 4

    def test_serializes_as_integer(self) -> None:
        assert JournalVersion(4).model_dump() == 4


class TestCause:
    """Tests for Cause."""

    def test_defaults_to_user_action(self) -> None:
        cause = Cause()
        assert cause.cause_type == CauseType.USER_ACTION
        assert cause.context is None
        assert not cause.has_context()

    def test_with_context(self) -> None:
        cause = Cause(cause_type=CauseType.IMPORT, context="jira-export-2024")
        assert cause.has_context()
        assert cause.context == "jira-export-2024"

    def test_wire_keys(self) -> None:
        """Should dump with the wire key names."""
        cause = Cause(cause_type=CauseType.API)
        assert cause.model_dump(mode="json", by_alias=True) == {
            "type": "api",
            "context": None,
        }

    def test_is_immutable(self) -> None:
        cause = Cause()
        with pytest.raises(ValidationError):
            cause.context = "changed"  # type: ignore


class TestJournalEntry:
    """Tests for JournalEntry."""

    def test_initial_entry(self) -> None:
        """Should create an initial journal."""
        entry = JournalEntry.initial(JournalableKind.TASK, 1, 10)
        assert entry.is_initial()
        assert entry.journalable_id == 1
        assert entry.user_id == 10
        assert entry.version.value == 1
        assert entry.created_at == entry.updated_at
        assert entry.id is None

    def test_with_notes(self) -> None:
        entry = JournalEntry.initial(JournalableKind.TASK, 1, 10).with_notes(
            "Initial creation"
        )
        assert entry.has_notes()
        assert entry.notes == "Initial creation"

    def test_with_cause(self) -> None:
        entry = JournalEntry.initial(JournalableKind.PROJECT, 3, 10).with_cause(
            CauseType.WORKFLOW, "nightly-sync"
        )
        assert entry.cause.cause_type == CauseType.WORKFLOW
        assert entry.cause.context == "nightly-sync"

    @pytest.mark.parametrize(
        ("notes", "expected"),
        [(None, False), ("", False), ("   ", False), ("fixed typo", True)],
    )
    def test_has_notes(self, notes: str | None, expected: bool) -> None:
        """Blank notes should not count as notes."""
        entry = JournalEntry.new(JournalableKind.TASK, 1, 2, 10)
        if notes is not None:
            entry = entry.with_notes(notes)
        assert entry.has_notes() is expected

    def test_is_immutable(self) -> None:
        entry = JournalEntry.initial(JournalableKind.TASK, 1, 10)
        with pytest.raises(ValidationError):
            entry.user_id = 11  # type: ignore

    def test_edit_notes_refreshes_updated_at(self) -> None:
        """Editing notes should only touch notes and updated_at."""
        entry = JournalEntry.initial(JournalableKind.TASK, 1, 10)
        entry = entry.model_copy(
            update={"updated_at": entry.updated_at - timedelta(minutes=5)}
        )
        edited = entry.edit_notes("clarified")
        assert edited.notes == "clarified"
        assert edited.updated_at > entry.updated_at
        assert edited.created_at == entry.created_at
        assert edited.version == entry.version

    def test_to_wire(self) -> None:
        """Should expose camelCase wire attributes."""
        entry = (
            EntryBuilder.task(5, 2, 10)
            .notes("reopened")
            .activity(77)
            .cause(CauseType.BULK_UPDATE)
            .cause_context("batch-9")
            .build()
        )
        wire = entry.to_wire()
        assert wire["_type"] == "Journal"
        assert wire["journalableType"] == "WorkPackage"
        assert wire["journalableId"] == 5
        assert wire["version"] == 2
        assert wire["userId"] == 10
        assert wire["notes"] == "reopened"
        assert wire["activityId"] == 77
        assert wire["causeType"] == "bulk_update"
        assert wire["causeContext"] == "batch-9"
        assert wire["createdAt"] == wire["updatedAt"]

    def test_json_round_trip(self) -> None:
        entry = EntryBuilder.project(9, 3, 4).notes("renamed").build()
        restored = JournalEntry.model_validate_json(entry.model_dump_json())
        assert restored == entry
