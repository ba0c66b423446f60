"""
Merge Controller - Line selection and selection-driven merging

Selection is tracked per line but applied per field: selecting any line of a
changed file pulls every string field of the right snapshot into the result.
"""

from __future__ import annotations

import copy
from typing import Any

from models.compare import LastDiff
from models.diff import DiffRow, RowType
from models.version import Snapshot

SELECTABLE_TYPES = (RowType.MODIFIED, RowType.ADDED)


def merge_key(file: str, index: int) -> str:
    return f"{file}:{index}"


def key_file(key: str) -> str:
    """Filename component of a merge key (filenames may contain ':')"""
    file, _, _ = key.rpartition(":")
    return file


def is_selectable(row: DiffRow) -> bool:
    """Only rows with something on the right side can be pulled in"""
    return row.type in SELECTABLE_TYPES


class MergeSelection:
    """Set of "file:index" keys the user has checked"""

    def __init__(self):
        self._keys: dict[str, bool] = {}

    def toggle(self, key: str, checked: bool) -> None:
        if checked:
            self._keys[key] = True
        else:
            self._keys.pop(key, None)

    def has(self, key: str) -> bool:
        return key in self._keys

    def clear(self) -> None:
        self._keys.clear()

    def keys(self) -> list[str]:
        return list(self._keys)

    def __len__(self) -> int:
        return len(self._keys)


def merge_selected(last_diff: LastDiff, selection: MergeSelection) -> dict[str, Any]:
    """Left form data, overwritten by the right side's string fields when any
    selected line belongs to a changed file"""
    merged = copy.deepcopy(dict(last_diff.left.form_data or {}))

    changed_files = {f.file for f in last_diff.diff_result.full if f.changed}
    has_selected = any(
        key_file(key) and key_file(key) in changed_files for key in selection.keys()
    )
    if not has_selected:
        return merged

    for field, value in (last_diff.right.form_data or {}).items():
        if isinstance(value, str):
            merged[field] = value
    return merged


def copy_right_to_left(right: Snapshot) -> dict[str, Any]:
    """Whole form data of the right snapshot, ignoring the selection"""
    return copy.deepcopy(dict(right.form_data or {}))


def reset_to_previous(history: list[Snapshot]) -> dict[str, Any] | None:
    """Form data of the second most recent version, if there is one"""
    if len(history) < 2:
        return None
    return copy.deepcopy(dict(history[1].form_data or {}))
