"""Snapshot model for journal domain."""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, JsonValue, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json, to_jsonable_python

from audit_journal.journals.enums import JournalableKind
from audit_journal.journals.errors import (
    FieldNotFoundError,
    FieldTypeMismatchError,
    SnapshotValueError,
)
from audit_journal.journals.fields import field_name
from audit_journal.observability.logging import get_logger

if TYPE_CHECKING:
    from audit_journal.journals.builders import (
        ProjectSnapshotBuilder,
        TaskSnapshotBuilder,
        UserSnapshotBuilder,
        WikiPageSnapshotBuilder,
    )

logger = get_logger(__name__)

T = TypeVar("T")

TYPE_KEY = "_type"


@lru_cache(maxsize=128)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _is_finite(value: Any) -> bool:
    """Whether every number inside a JSON value is finite."""
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, list):
        return all(_is_finite(item) for item in value)
    if isinstance(value, dict):
        return all(_is_finite(item) for item in value.values())
    return True


class Snapshot(BaseModel):
    """Complete recorded state of a journalable entity at one version.

    A type-tagged map of field name to JSON value, stored apart from the
    journal metadata. The container imposes no schema; the kind-specific
    builders keep the field names consistent across versions.
    """

    model_config = ConfigDict(populate_by_name=True)

    data_type: str = Field(..., alias=TYPE_KEY, description="Type discriminator")
    data: dict[str, JsonValue] = Field(
        default_factory=dict, description="Field name to value"
    )

    @classmethod
    def new(cls, data_type: str) -> Snapshot:
        """Create an empty snapshot with the given type tag."""
        return cls(data_type=data_type)

    @classmethod
    def for_kind(cls, kind: JournalableKind) -> Snapshot:
        """Create an empty snapshot tagged for a journalable kind."""
        return cls(data_type=kind.snapshot_type)

    @classmethod
    def task(cls) -> TaskSnapshotBuilder:
        from audit_journal.journals.builders import TaskSnapshotBuilder

        return TaskSnapshotBuilder()

    @classmethod
    def project(cls) -> ProjectSnapshotBuilder:
        from audit_journal.journals.builders import ProjectSnapshotBuilder

        return ProjectSnapshotBuilder()

    @classmethod
    def user(cls) -> UserSnapshotBuilder:
        from audit_journal.journals.builders import UserSnapshotBuilder

        return UserSnapshotBuilder()

    @classmethod
    def wiki_page(cls) -> WikiPageSnapshotBuilder:
        from audit_journal.journals.builders import WikiPageSnapshotBuilder

        return WikiPageSnapshotBuilder()

    @property
    def fields(self) -> Mapping[str, JsonValue]:
        """Read-only view of the stored fields."""
        return MappingProxyType(self.data)

    def set(self, field: str | Enum, value: Any) -> None:
        """Insert or overwrite a field.

        The value is converted to its JSON form, so dates, UUIDs, enums and
        pydantic models are accepted.

        Raises:
            SnapshotValueError: If the field name is reserved for the type tag,
                or the value has no JSON representation (NaN and infinities
                included)
        """
        key = field_name(field)
        if key == TYPE_KEY:
            raise SnapshotValueError(
                key, value, f"Field name {TYPE_KEY!r} is reserved for the type tag"
            )
        try:
            converted = to_jsonable_python(value)
        except PydanticSerializationError as exc:
            raise SnapshotValueError(key, value) from exc
        if not _is_finite(converted):
            raise SnapshotValueError(
                key, value, f"Value for field {key!r} contains a non-finite number"
            )
        self.data[key] = converted

    def get(self, field: str | Enum) -> JsonValue | None:
        """Return the raw stored value, or None if the field is absent."""
        return self.data.get(field_name(field))

    def has(self, field: str | Enum) -> bool:
        return field_name(field) in self.data

    def get_as(self, field: str | Enum, target: type[T] | Any) -> T | None:
        """Return the field coerced to ``target``.

        Absent fields and values that do not fit ``target`` both yield None.
        Use ``require_as`` to tell the two apart.
        """
        key = field_name(field)
        if key not in self.data:
            return None
        try:
            return self._coerce(key, target)
        except FieldTypeMismatchError:
            logger.debug(
                "snapshot_field_coercion_failed",
                data_type=self.data_type,
                field=key,
                target=getattr(target, "__name__", repr(target)),
            )
            return None

    def require_as(self, field: str | Enum, target: type[T] | Any) -> T:
        """Return the field coerced to ``target``.

        Raises:
            FieldNotFoundError: If the field is absent
            FieldTypeMismatchError: If the stored value does not fit ``target``
        """
        key = field_name(field)
        if key not in self.data:
            raise FieldNotFoundError(key)
        return self._coerce(key, target)

    def _coerce(self, key: str, target: Any) -> Any:
        value = self.data[key]
        # Validate the JSON form so strings parse into dates and UUIDs
        # while strict mode still rejects e.g. numbers posing as strings.
        try:
            return _adapter(target).validate_json(to_json(value), strict=True)
        except ValidationError as exc:
            raise FieldTypeMismatchError(key, target, value) from exc

    def to_wire(self) -> dict[str, JsonValue]:
        """Flat JSON object with the type tag under ``_type``."""
        return {TYPE_KEY: self.data_type, **self.data}

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> Snapshot:
        """Rebuild a snapshot from its flat JSON object."""
        fields = dict(payload)
        data_type = fields.pop(TYPE_KEY)
        return cls(data_type=data_type, data=fields)

    def __contains__(self, field: object) -> bool:
        if isinstance(field, (str, Enum)):
            return self.has(field)
        return False

    def __len__(self) -> int:
        return len(self.data)
