"""Tests for the merge controller."""

from models.compare import LastDiff
from models.diff import DiffRow, RowType
from services.diff_generator import diff_snapshots
from services.merge import (
    MergeSelection,
    copy_right_to_left,
    is_selectable,
    key_file,
    merge_key,
    merge_selected,
    reset_to_previous,
)

from .conftest import make_snapshot

LEFT_FORM = {"role": "builder", "tools": "x", "memory": "Session-only", "name": "left"}
RIGHT_FORM = {"role": "reviewer", "tools": "x, y", "memory": "Persistent", "name": "right"}


def _last_diff(left_form=LEFT_FORM, right_form=RIGHT_FORM):
    left = make_snapshot(
        form_data=left_form,
        files={"TOOLS.md": "Tools\nx", "USER.md": "same"},
        name="left",
    )
    right = make_snapshot(
        form_data=right_form,
        files={"TOOLS.md": "Tools\nx, y", "USER.md": "same"},
        name="right",
    )
    return LastDiff(left=left, right=right, diff_result=diff_snapshots(left, right), changelog="")


def test_selection_toggle():
    selection = MergeSelection()
    selection.toggle("TOOLS.md:1", True)
    selection.toggle("TOOLS.md:2", True)
    selection.toggle("TOOLS.md:2", False)

    assert selection.has("TOOLS.md:1")
    assert not selection.has("TOOLS.md:2")
    assert selection.keys() == ["TOOLS.md:1"]

    selection.clear()
    assert len(selection) == 0


def test_only_modified_and_added_rows_are_selectable():
    def row(kind):
        return DiffRow(type=kind, left="", right="", index=0)

    assert is_selectable(row(RowType.MODIFIED))
    assert is_selectable(row(RowType.ADDED))
    assert not is_selectable(row(RowType.REMOVED))
    assert not is_selectable(row(RowType.SAME))


def test_merge_key_round_trip_with_colon_in_filename():
    key = merge_key("notes:v2.md", 3)
    assert key == "notes:v2.md:3"
    assert key_file(key) == "notes:v2.md"


def test_merge_without_selection_keeps_left():
    last = _last_diff()
    assert merge_selected(last, MergeSelection()) == LEFT_FORM


def test_merge_is_coarse_grained():
    last = _last_diff()
    selection = MergeSelection()
    selection.toggle(merge_key("TOOLS.md", 1), True)

    merged = merge_selected(last, selection)

    # Every string field comes from the right side, not just tools
    assert merged == RIGHT_FORM


def test_merge_ignores_selection_in_unchanged_file():
    last = _last_diff()
    selection = MergeSelection()
    selection.toggle(merge_key("USER.md", 0), True)

    assert merge_selected(last, selection) == LEFT_FORM


def test_merge_skips_non_string_values_and_keeps_left_only_fields():
    last = _last_diff(
        left_form={"role": "builder", "extra": "kept"},
        right_form={"role": "reviewer", "count": 3},
    )
    selection = MergeSelection()
    selection.toggle(merge_key("TOOLS.md", 1), True)

    merged = merge_selected(last, selection)

    assert merged == {"role": "reviewer", "extra": "kept"}


def test_merge_does_not_alias_snapshot_data():
    last = _last_diff()
    merged = merge_selected(last, MergeSelection())
    merged["role"] = "changed"
    assert last.left.form_data["role"] == "builder"


def test_copy_right_to_left_returns_copy():
    right = make_snapshot(form_data={"role": "reviewer"})
    copied = copy_right_to_left(right)
    copied["role"] = "changed"
    assert right.form_data == {"role": "reviewer"}


def test_reset_to_previous():
    newest = make_snapshot(form_data={"role": "new"}, name="new")
    previous = make_snapshot(form_data={"role": "old"}, name="old")

    assert reset_to_previous([newest, previous]) == {"role": "old"}
    assert reset_to_previous([newest]) is None
    assert reset_to_previous([]) is None
