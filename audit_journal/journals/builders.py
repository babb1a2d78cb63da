"""Fluent builders for journal entries and kind-specific snapshots."""

from datetime import date
from enum import Enum
from typing import Any, Self

from audit_journal.journals.enums import CauseType, JournalableKind
from audit_journal.journals.fields import (
    ProjectField,
    TaskField,
    UserField,
    WikiPageField,
)
from audit_journal.journals.models.cause import Cause
from audit_journal.journals.models.entry import JournalEntry, utc_now
from audit_journal.journals.models.snapshot import Snapshot
from audit_journal.journals.models.version import JournalVersion


class EntryBuilder:
    """Assembles a JournalEntry for one journalable kind.

    Identity and acting user are required up front; everything else is
    optional. Inputs are taken as given.

    Usage:
        entry = (
            EntryBuilder.task(1, JournalVersion(2), 10)
            .notes("reopened")
            .cause(CauseType.API)
            .build()
        )
    """

    def __init__(
        self,
        kind: JournalableKind,
        journalable_id: int,
        version: JournalVersion | int,
        user_id: int,
    ) -> None:
        self._kind = kind
        self._journalable_id = journalable_id
        self._version = (
            version if isinstance(version, JournalVersion) else JournalVersion(version)
        )
        self._user_id = user_id
        self._notes: str | None = None
        self._activity_id: int | None = None
        self._restricted = False
        self._cause_type = CauseType.USER_ACTION
        self._cause_context: str | None = None

    @classmethod
    def for_kind(
        cls,
        kind: JournalableKind,
        journalable_id: int,
        version: JournalVersion | int,
        user_id: int,
    ) -> "EntryBuilder":
        return cls(kind, journalable_id, version, user_id)

    @classmethod
    def task(
        cls, journalable_id: int, version: JournalVersion | int, user_id: int
    ) -> "EntryBuilder":
        return cls(JournalableKind.TASK, journalable_id, version, user_id)

    @classmethod
    def project(
        cls, journalable_id: int, version: JournalVersion | int, user_id: int
    ) -> "EntryBuilder":
        return cls(JournalableKind.PROJECT, journalable_id, version, user_id)

    @classmethod
    def user(
        cls, journalable_id: int, version: JournalVersion | int, user_id: int
    ) -> "EntryBuilder":
        return cls(JournalableKind.USER, journalable_id, version, user_id)

    @classmethod
    def wiki_page(
        cls, journalable_id: int, version: JournalVersion | int, user_id: int
    ) -> "EntryBuilder":
        return cls(JournalableKind.WIKI_PAGE, journalable_id, version, user_id)

    def notes(self, notes: str) -> Self:
        self._notes = notes
        return self

    def activity(self, activity_id: int) -> Self:
        self._activity_id = activity_id
        return self

    def restricted(self, restricted: bool = True) -> Self:
        self._restricted = restricted
        return self

    def cause(self, cause_type: CauseType) -> Self:
        self._cause_type = cause_type
        return self

    def cause_context(self, context: str) -> Self:
        self._cause_context = context
        return self

    def build(self) -> JournalEntry:
        """Finalize the entry; created_at and updated_at are set to now."""
        now = utc_now()
        return JournalEntry(
            journalable_type=self._kind,
            journalable_id=self._journalable_id,
            version=self._version,
            user_id=self._user_id,
            notes=self._notes,
            activity_id=self._activity_id,
            restricted=self._restricted,
            created_at=now,
            updated_at=now,
            cause=Cause(cause_type=self._cause_type, context=self._cause_context),
        )


class SnapshotBuilder:
    """Base for builders exposing named setters for one kind's fields."""

    kind: JournalableKind

    def __init__(self) -> None:
        self._snapshot = Snapshot.for_kind(self.kind)

    def set(self, field: str | Enum, value: Any) -> Self:
        """Set a field outside the named setters."""
        self._snapshot.set(field, value)
        return self

    def build(self) -> Snapshot:
        return self._snapshot.model_copy(deep=True)


class TaskSnapshotBuilder(SnapshotBuilder):
    """Snapshot builder for tasks (work packages)."""

    kind = JournalableKind.TASK

    def subject(self, subject: str) -> Self:
        return self.set(TaskField.SUBJECT, subject)

    def description(self, description: str | None) -> Self:
        return self.set(TaskField.DESCRIPTION, description)

    def type_id(self, type_id: int) -> Self:
        return self.set(TaskField.TYPE_ID, type_id)

    def project_id(self, project_id: int) -> Self:
        return self.set(TaskField.PROJECT_ID, project_id)

    def status_id(self, status_id: int) -> Self:
        return self.set(TaskField.STATUS_ID, status_id)

    def priority_id(self, priority_id: int) -> Self:
        return self.set(TaskField.PRIORITY_ID, priority_id)

    def assigned_to_id(self, assigned_to_id: int | None) -> Self:
        return self.set(TaskField.ASSIGNED_TO_ID, assigned_to_id)

    def responsible_id(self, responsible_id: int | None) -> Self:
        return self.set(TaskField.RESPONSIBLE_ID, responsible_id)

    def author_id(self, author_id: int) -> Self:
        return self.set(TaskField.AUTHOR_ID, author_id)

    def parent_id(self, parent_id: int | None) -> Self:
        return self.set(TaskField.PARENT_ID, parent_id)

    def category_id(self, category_id: int | None) -> Self:
        return self.set(TaskField.CATEGORY_ID, category_id)

    def version_id(self, version_id: int | None) -> Self:
        return self.set(TaskField.VERSION_ID, version_id)

    def done_ratio(self, done_ratio: int | None) -> Self:
        return self.set(TaskField.DONE_RATIO, done_ratio)

    def estimated_hours(self, hours: float | None) -> Self:
        return self.set(TaskField.ESTIMATED_HOURS, hours)

    def start_date(self, start_date: date | None) -> Self:
        return self.set(TaskField.START_DATE, start_date)

    def due_date(self, due_date: date | None) -> Self:
        return self.set(TaskField.DUE_DATE, due_date)

    def schedule_manually(self, schedule_manually: bool) -> Self:
        return self.set(TaskField.SCHEDULE_MANUALLY, schedule_manually)


class ProjectSnapshotBuilder(SnapshotBuilder):
    kind = JournalableKind.PROJECT

    def name(self, name: str) -> Self:
        return self.set(ProjectField.NAME, name)

    def identifier(self, identifier: str) -> Self:
        return self.set(ProjectField.IDENTIFIER, identifier)

    def description(self, description: str | None) -> Self:
        return self.set(ProjectField.DESCRIPTION, description)

    def public(self, public: bool) -> Self:
        return self.set(ProjectField.PUBLIC, public)

    def active(self, active: bool) -> Self:
        return self.set(ProjectField.ACTIVE, active)

    def parent_id(self, parent_id: int | None) -> Self:
        return self.set(ProjectField.PARENT_ID, parent_id)


class UserSnapshotBuilder(SnapshotBuilder):
    kind = JournalableKind.USER

    def login(self, login: str) -> Self:
        return self.set(UserField.LOGIN, login)

    def firstname(self, firstname: str) -> Self:
        return self.set(UserField.FIRSTNAME, firstname)

    def lastname(self, lastname: str) -> Self:
        return self.set(UserField.LASTNAME, lastname)

    def mail(self, mail: str) -> Self:
        return self.set(UserField.MAIL, mail)

    def admin(self, admin: bool) -> Self:
        return self.set(UserField.ADMIN, admin)

    def status(self, status: int) -> Self:
        return self.set(UserField.STATUS, status)

    def language(self, language: str | None) -> Self:
        return self.set(UserField.LANGUAGE, language)


class WikiPageSnapshotBuilder(SnapshotBuilder):
    kind = JournalableKind.WIKI_PAGE

    def page_id(self, page_id: int) -> Self:
        return self.set(WikiPageField.PAGE_ID, page_id)

    def title(self, title: str) -> Self:
        return self.set(WikiPageField.TITLE, title)

    def text(self, text: str) -> Self:
        return self.set(WikiPageField.TEXT, text)

    def author_id(self, author_id: int) -> Self:
        return self.set(WikiPageField.AUTHOR_ID, author_id)
