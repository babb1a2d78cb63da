"""Tests for the snapshot diff engine."""

import pytest

from audit_journal.journals import (
    ChangeType,
    JournalDetails,
    JournalDiff,
    Snapshot,
    compute_diff,
)
from audit_journal.journals.values import display_value, json_equal


def make_snapshot(**fields: object) -> Snapshot:
    snapshot = Snapshot.new("WorkPackageJournal")
    for key, value in fields.items():
        snapshot.set(key, value)
    return snapshot


class TestComputeDiff:
    """Tests for compute_diff."""

    def test_identical_snapshots_yield_empty_diff(self) -> None:
        snapshot = make_snapshot(subject="Same", status_id=1, tags=["a"])
        diff = compute_diff(snapshot, snapshot.model_copy(deep=True))
        assert diff.is_empty()
        assert len(diff) == 0

    def test_diff_against_itself_is_empty(self) -> None:
        snapshot = make_snapshot(hours=1.5, ratio=0.1, meta={"weights": [0.5, 2.25]})
        assert compute_diff(snapshot, snapshot).is_empty()

    def test_changed_and_added(self) -> None:
        """Unchanged fields produce no entry."""
        old = make_snapshot(subject="A", status=1)
        new = make_snapshot(subject="B", status=1, priority=5)

        diff = compute_diff(old, new)

        assert diff.changes == [
            JournalDetails.added("priority", 5),
            JournalDetails.changed("subject", "A", "B"),
        ]
        assert diff.get("status") is None

    def test_removed(self) -> None:
        diff = compute_diff(make_snapshot(a=1, b=2), make_snapshot(a=1))
        assert diff.changes == [JournalDetails.removed("b", 2)]

    def test_ordered_by_property_name(self) -> None:
        """Output order should not depend on insertion order."""
        old = make_snapshot(zeta=1, alpha=1, mid=1)
        new = make_snapshot(mid=2, beta=1, zeta=2)
        assert compute_diff(old, new).properties() == ["alpha", "beta", "mid", "zeta"]

    def test_classmethod_matches_function(self) -> None:
        old = make_snapshot(a=1)
        new = make_snapshot(a=2)
        assert JournalDiff.compute(old, new) == compute_diff(old, new)

    def test_null_to_value_is_a_change(self) -> None:
        diff = compute_diff(make_snapshot(assigned_to_id=None), make_snapshot(assigned_to_id=4))
        detail = diff.get("assigned_to_id")
        assert detail is not None
        assert detail.change_type == ChangeType.CHANGED
        assert detail.old_value is None
        assert detail.new_value == 4

    def test_bool_and_int_differ(self) -> None:
        diff = compute_diff(make_snapshot(flag=1), make_snapshot(flag=True))
        assert diff.properties() == ["flag"]

    def test_int_and_float_compare_numerically(self) -> None:
        diff = compute_diff(make_snapshot(hours=2), make_snapshot(hours=2.0))
        assert diff.is_empty()

    def test_nested_values_compare_structurally(self) -> None:
        old = make_snapshot(meta={"a": [1, {"b": True}]})
        same = make_snapshot(meta={"a": [1, {"b": True}]})
        changed = make_snapshot(meta={"a": [1, {"b": 1}]})
        assert compute_diff(old, same).is_empty()
        assert compute_diff(old, changed).properties() == ["meta"]

    def test_from_initial_reports_all_fields_added(self) -> None:
        snapshot = make_snapshot(subject="New", status_id=1)
        diff = JournalDiff.from_initial(snapshot)
        assert [d.change_type for d in diff] == [ChangeType.ADDED, ChangeType.ADDED]
        assert diff.properties() == ["status_id", "subject"]


class TestJournalDetails:
    """Tests for JournalDetails rendering and wire form."""

    def test_changed_display(self) -> None:
        detail = JournalDetails.changed("status_id", 1, 2)
        assert detail.format_for_display() == "status_id: 1 → 2"

    def test_changed_string_display(self) -> None:
        detail = JournalDetails.changed("subject", "A", "B")
        assert detail.format_for_display() == "subject: A → B"

    def test_added_display(self) -> None:
        assert JournalDetails.added("priority", 5).format_for_display() == "priority set to 5"

    def test_removed_display(self) -> None:
        assert JournalDetails.removed("b", 2).format_for_display() == "b removed (was 2)"

    def test_null_rendered_as_empty(self) -> None:
        assert (
            JournalDetails.changed("assigned_to_id", None, 4).format_for_display()
            == "assigned_to_id: (empty) → 4"
        )
        assert (
            JournalDetails.added("description", None).format_for_display()
            == "description set to (empty)"
        )

    def test_diff_display_lines(self) -> None:
        diff = compute_diff(make_snapshot(a=1, b=True), make_snapshot(a=2, c="x"))
        assert diff.format_for_display() == [
            "a: 1 → 2",
            "b removed (was true)",
            "c set to x",
        ]

    def test_to_wire(self) -> None:
        assert JournalDetails.changed("subject", "A", "B").to_wire() == {
            "property": "subject",
            "changeType": "changed",
            "oldValue": "A",
            "newValue": "B",
        }

    def test_diff_json_round_trip(self) -> None:
        diff = compute_diff(make_snapshot(a=1, b=2), make_snapshot(a=3, c=[1]))
        assert JournalDiff.model_validate_json(diff.model_dump_json()) == diff


class TestValueHelpers:
    """Tests for JSON value comparison and rendering."""

    @pytest.mark.parametrize(
        ("left", "right", "expected"),
        [
            (None, None, True),
            (None, 0, False),
            (True, True, True),
            (True, 1, False),
            (0, False, False),
            (1, 1.0, True),
            ("1", 1, False),
            ([1, 2], [1, 2], True),
            ([1, 2], [2, 1], False),
            ({"a": 1}, {"a": 1}, True),
            ({"a": 1}, {"a": 1, "b": 2}, False),
        ],
    )
    def test_json_equal(self, left: object, right: object, expected: bool) -> None:
        assert json_equal(left, right) is expected

    def test_display_value(self) -> None:
        assert display_value(None) == "(empty)"
        assert display_value("text") == "text"
        assert display_value(False) == "false"
        assert display_value(2.5) == "2.5"
        assert display_value({"a": [1]}) == '{"a":[1]}'
