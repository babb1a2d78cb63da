"""Diff models and the snapshot diff engine."""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, JsonValue
from pydantic.alias_generators import to_camel

from audit_journal.journals.enums import ChangeType
from audit_journal.journals.models.snapshot import Snapshot
from audit_journal.journals.values import display_value, json_equal


class JournalDetails(BaseModel):
    """Difference of a single property between two snapshots."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    property: str = Field(..., description="Field that differs")
    change_type: ChangeType = Field(..., description="Kind of difference")
    old_value: JsonValue = Field(default=None, description="Value before")
    new_value: JsonValue = Field(default=None, description="Value after")

    @classmethod
    def changed(
        cls, property: str, old: JsonValue, new: JsonValue
    ) -> "JournalDetails":
        return cls(
            property=property,
            change_type=ChangeType.CHANGED,
            old_value=old,
            new_value=new,
        )

    @classmethod
    def added(cls, property: str, value: JsonValue) -> "JournalDetails":
        return cls(property=property, change_type=ChangeType.ADDED, new_value=value)

    @classmethod
    def removed(cls, property: str, value: JsonValue) -> "JournalDetails":
        return cls(property=property, change_type=ChangeType.REMOVED, old_value=value)

    def format_for_display(self) -> str:
        """Render one human readable line for activity feeds."""
        if self.change_type == ChangeType.CHANGED:
            return (
                f"{self.property}: {display_value(self.old_value)}"
                f" → {display_value(self.new_value)}"
            )
        if self.change_type == ChangeType.ADDED:
            return f"{self.property} set to {display_value(self.new_value)}"
        return f"{self.property} removed (was {display_value(self.old_value)})"

    def to_wire(self) -> dict[str, JsonValue]:
        return self.model_dump(mode="json", by_alias=True)


class JournalDiff(BaseModel):
    """Ordered field-level differences between two snapshots.

    Changes are ordered by property name so repeated computations and
    rendered activity entries are stable.
    """

    changes: list[JournalDetails] = Field(default_factory=list)

    @classmethod
    def compute(cls, old: Snapshot, new: Snapshot) -> "JournalDiff":
        return compute_diff(old, new)

    @classmethod
    def from_initial(cls, snapshot: Snapshot) -> "JournalDiff":
        """Diff of a creation snapshot, reporting every field as added."""
        return compute_diff(Snapshot.new(snapshot.data_type), snapshot)

    def add(self, detail: JournalDetails) -> None:
        self.changes.append(detail)

    def is_empty(self) -> bool:
        return not self.changes

    def properties(self) -> list[str]:
        return [detail.property for detail in self.changes]

    def get(self, property: str) -> JournalDetails | None:
        """Return the change recorded for a property, if any."""
        for detail in self.changes:
            if detail.property == property:
                return detail
        return None

    def format_for_display(self) -> list[str]:
        return [detail.format_for_display() for detail in self.changes]

    def __len__(self) -> int:
        return len(self.changes)

    def __iter__(self) -> Iterator[JournalDetails]:  # type: ignore[override]
        return iter(self.changes)


def compute_diff(old: Snapshot, new: Snapshot) -> JournalDiff:
    """Compute the differences from ``old`` to ``new``.

    Every property that differs, exists only in ``new`` or exists only in
    ``old`` yields exactly one entry. Equal properties yield nothing.
    """
    diff = JournalDiff()
    for key in sorted(old.data.keys() | new.data.keys()):
        in_old = key in old.data
        in_new = key in new.data
        if in_old and in_new:
            old_value = old.data[key]
            new_value = new.data[key]
            if not json_equal(old_value, new_value):
                diff.add(JournalDetails.changed(key, old_value, new_value))
        elif in_new:
            diff.add(JournalDetails.added(key, new.data[key]))
        else:
            diff.add(JournalDetails.removed(key, old.data[key]))
    return diff
