"""Known snapshot field identifiers per journalable kind.

Snapshots store plain string keys. These enums pin the names used by the
snapshot builders so that every version of a kind is recorded with the
same keys.
"""

from enum import Enum


class TaskField(str, Enum):
    SUBJECT = "subject"
    DESCRIPTION = "description"
    TYPE_ID = "type_id"
    PROJECT_ID = "project_id"
    STATUS_ID = "status_id"
    PRIORITY_ID = "priority_id"
    ASSIGNED_TO_ID = "assigned_to_id"
    RESPONSIBLE_ID = "responsible_id"
    AUTHOR_ID = "author_id"
    PARENT_ID = "parent_id"
    CATEGORY_ID = "category_id"
    VERSION_ID = "version_id"
    DONE_RATIO = "done_ratio"
    ESTIMATED_HOURS = "estimated_hours"
    START_DATE = "start_date"
    DUE_DATE = "due_date"
    SCHEDULE_MANUALLY = "schedule_manually"


class ProjectField(str, Enum):
    NAME = "name"
    IDENTIFIER = "identifier"
    DESCRIPTION = "description"
    PUBLIC = "public"
    ACTIVE = "active"
    PARENT_ID = "parent_id"


class UserField(str, Enum):
    LOGIN = "login"
    FIRSTNAME = "firstname"
    LASTNAME = "lastname"
    MAIL = "mail"
    ADMIN = "admin"
    STATUS = "status"
    LANGUAGE = "language"


class WikiPageField(str, Enum):
    PAGE_ID = "page_id"
    TITLE = "title"
    TEXT = "text"
    AUTHOR_ID = "author_id"


def field_name(field: str | Enum) -> str:
    """Normalize a field identifier to its string key."""
    if isinstance(field, Enum):
        return str(field.value)
    return field
