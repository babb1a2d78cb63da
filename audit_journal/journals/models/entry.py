"""JournalEntry model for journal domain."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from audit_journal.journals.enums import CauseType, JournalableKind
from audit_journal.journals.models.cause import Cause
from audit_journal.journals.models.version import JournalVersion


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class JournalEntry(BaseModel):
    """Immutable audit record of one accepted mutation.

    Identity is (journalable_type, journalable_id, version). Only ``notes``
    and ``updated_at`` may change after creation, through ``edit_notes``
    which returns an updated copy.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = Field(default=None, description="Journal id, assigned on insert")
    journalable_type: JournalableKind = Field(..., description="Kind of journaled entity")
    journalable_id: int = Field(..., description="Journaled entity")
    version: JournalVersion = Field(..., description="Per-entity version")
    user_id: int = Field(..., description="Acting user")
    notes: str | None = Field(default=None, description="Comment on the change")
    activity_id: int | None = Field(default=None, description="Grouping id")
    restricted: bool = Field(default=False, description="Internal note")
    created_at: datetime = Field(default_factory=utc_now, description="Creation time")
    updated_at: datetime = Field(default_factory=utc_now, description="Last notes edit")
    data_id: int | None = Field(
        default=None, description="Snapshot reference, assigned on insert"
    )
    cause: Cause = Field(default_factory=Cause, description="Change trigger")

    @classmethod
    def new(
        cls,
        journalable_type: JournalableKind,
        journalable_id: int,
        version: JournalVersion | int,
        user_id: int,
    ) -> "JournalEntry":
        """Create an entry stamped with the current time."""
        now = utc_now()
        return cls(
            journalable_type=journalable_type,
            journalable_id=journalable_id,
            version=version,
            user_id=user_id,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def initial(
        cls,
        journalable_type: JournalableKind,
        journalable_id: int,
        user_id: int,
    ) -> "JournalEntry":
        """Create the entry recording an entity's creation."""
        return cls.new(
            journalable_type, journalable_id, JournalVersion.initial(), user_id
        )

    def with_notes(self, notes: str) -> "JournalEntry":
        return self.model_copy(update={"notes": notes})

    def with_cause(
        self, cause_type: CauseType, context: str | None = None
    ) -> "JournalEntry":
        return self.model_copy(
            update={"cause": Cause(cause_type=cause_type, context=context)}
        )

    def with_ids(self, journal_id: int, data_id: int) -> "JournalEntry":
        """Return a copy carrying the ids assigned by persistence."""
        return self.model_copy(update={"id": journal_id, "data_id": data_id})

    def edit_notes(self, notes: str | None) -> "JournalEntry":
        """Return a copy with replaced notes and a fresh ``updated_at``."""
        return self.model_copy(update={"notes": notes, "updated_at": utc_now()})

    def is_initial(self) -> bool:
        return self.version.is_initial()

    def has_notes(self) -> bool:
        return self.notes is not None and bool(self.notes.strip())

    def is_internal(self) -> bool:
        return self.restricted

    @property
    def anchor(self) -> int:
        return self.version.anchor

    def to_wire(self) -> dict[str, Any]:
        """HAL-style representation with camelCase attribute names."""
        return {
            "_type": "Journal",
            "id": self.id,
            "journalableType": self.journalable_type.storage_name,
            "journalableId": self.journalable_id,
            "version": self.version.value,
            "userId": self.user_id,
            "notes": self.notes,
            "activityId": self.activity_id,
            "internal": self.restricted,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
            "causeType": self.cause.cause_type.value,
            "causeContext": self.cause.context,
        }
