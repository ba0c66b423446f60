"""
Changelog Generator - Field-level change summary between two snapshots
"""

from __future__ import annotations

from models.diff import DiffResult
from models.version import Snapshot
from services.generator import split_tools

EMPTY_VALUE = "∅"

# (form field, label) pairs summarized as "Modified <label>: a → b"
SCALAR_FIELDS: tuple[tuple[str, str], ...] = (
    ("role", "role"),
    ("memory", "memory mode"),
    ("hierarchy", "hierarchy"),
)


def _text(value) -> str:
    return value if isinstance(value, str) else ("" if value is None else str(value))


def generate_changelog(left: Snapshot, right: Snapshot, diff_result: DiffResult) -> str:
    """Markdown summary of tool, scalar field and file changes"""
    left_data = left.form_data or {}
    right_data = right.form_data or {}

    header = [
        "# Changelog",
        "",
        f"- From: **{left.name or 'left'}**",
        f"- To: **{right.name or 'right'}**",
        "",
    ]
    lines = []

    # Ordered sets
    left_tools = dict.fromkeys(split_tools(left_data.get("tools")))
    right_tools = dict.fromkeys(split_tools(right_data.get("tools")))
    added_tools = [t for t in right_tools if t not in left_tools]
    removed_tools = [t for t in left_tools if t not in right_tools]

    if added_tools:
        lines.append(f"- Added tools: {', '.join(added_tools)}")
    if removed_tools:
        lines.append(f"- Removed tools: {', '.join(removed_tools)}")

    for field, label in SCALAR_FIELDS:
        before = _text(left_data.get(field))
        after = _text(right_data.get(field))
        if before != after:
            lines.append(f"- Modified {label}: {before or EMPTY_VALUE} → {after or EMPTY_VALUE}")

    changed_files = [f.file for f in diff_result.full if f.changed]
    if changed_files:
        lines.append(f"- Changed files: {', '.join(changed_files)}")

    if not lines:
        lines.append("- No significant changes detected.")
    return "\n".join(header + lines)
