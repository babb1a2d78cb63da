"""JournalVersion model for journal domain."""

from functools import total_ordering

from pydantic import ConfigDict, PositiveInt, RootModel


@total_ordering
class JournalVersion(RootModel[PositiveInt]):
    """Per-entity journal version.

    Version 1 marks the creation of an entity. Successive journals of the
    same entity form the gap-free sequence 1, 2, 3, ... Uniqueness is not
    checked here; version assignment is serialized by the journal store.
    Serializes as a bare integer.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def initial(cls) -> "JournalVersion":
        """Return the creation version."""
        return cls(1)

    @property
    def value(self) -> int:
        return self.root

    def is_initial(self) -> bool:
        return self.root == 1

    @property
    def anchor(self) -> int:
        """Zero-based anchor number used by activity feeds."""
        return self.root - 1

    def next(self) -> "JournalVersion":
        """Return the version following this one."""
        return JournalVersion(self.root + 1)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, JournalVersion):
            return NotImplemented
        return self.root < other.root

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JournalVersion):
            return NotImplemented
        return self.root == other.root

    def __hash__(self) -> int:
        return hash(self.root)

    def __int__(self) -> int:
        return self.root

    def __str__(self) -> str:
        return str(self.root)
