"""
Compare Session - Picks two snapshots, diffs them and drives merge/patch

Both sides are stored as references and re-resolved on every comparison, so
"__current" always reflects the latest live form data.
"""

from __future__ import annotations

import html
from datetime import datetime
from typing import Any, Callable

from models.compare import (
    CompareOptions,
    LastDiff,
    RenderedFile,
    RenderedRow,
    SelectorOption,
)
from models.diff import DiffResult, RowType, TokenType, WordToken
from models.version import Snapshot, SnapshotSource
from services.changelog import generate_changelog
from services.diff_generator import diff_snapshots, generate_patch
from services.merge import (
    MergeSelection,
    copy_right_to_left,
    is_selectable,
    merge_key,
    merge_selected,
    reset_to_previous,
)
from services.version_store import VersionStore

CURRENT = "__current"
TEMPLATE = "__template"
IMPORTED = "__imported"

EMPTY_DIFF_MESSAGE = "No differences found."

_ROW_CLASSES = {
    RowType.ADDED: "diff-row diff-added",
    RowType.REMOVED: "diff-row diff-removed",
    RowType.MODIFIED: "diff-row diff-modified",
}


def format_timestamp(value: str) -> str:
    """Local, human readable form of an ISO timestamp"""
    try:
        return datetime.fromisoformat(value).astimezone().strftime("%Y-%m-%d %H:%M:%S")
    except ValueError:
        return value


def highlight_word_diff(tokens: list[WordToken]) -> str:
    parts = []
    for token in tokens:
        value = html.escape(token.value, quote=False)
        if token.type == TokenType.ADD:
            parts.append(f'<mark class="wd-add">{value}</mark>')
        elif token.type == TokenType.DEL:
            parts.append(f'<mark class="wd-del">{value}</mark>')
        else:
            parts.append(value)
    return "".join(parts)


class CompareSession:
    """Stateful orchestrator of the compare panel"""

    def __init__(
        self,
        versions: VersionStore,
        live_form_data: Callable[[], dict[str, Any]],
        load_template_baseline: Callable[[dict[str, Any]], dict[str, Any] | None],
        apply_form_data: Callable[[dict[str, Any]], Any] | None = None,
        options: CompareOptions | None = None,
    ):
        self.versions = versions
        self.live_form_data = live_form_data
        self.load_template_baseline = load_template_baseline
        self.apply_form_data = apply_form_data

        self.enabled = False
        self.left_id: str | None = None
        self.right_id: str | None = None
        self.options = options or CompareOptions()
        self.imported_baseline: Snapshot | None = None
        self.selection = MergeSelection()
        self.last_diff: LastDiff | None = None

    # ========== Reference Resolution ==========

    def template_baseline(self) -> Snapshot | None:
        form = self.load_template_baseline(self.live_form_data())
        if form is None:
            return None
        return self.versions.create_snapshot(
            form,
            name=f"template:{form.get('templateId') or ''}",
            source=SnapshotSource.TEMPLATE,
        )

    def resolve_reference(self, ref: str | None) -> Snapshot | None:
        """Resolve a symbolic reference or history id to a snapshot"""
        if ref == CURRENT:
            return self.versions.create_snapshot(
                self.live_form_data(), name="current", source=SnapshotSource.LIVE
            )
        if ref == TEMPLATE:
            return self.template_baseline()
        if ref == IMPORTED:
            return self.imported_baseline
        if not ref:
            return None
        return self.versions.find(ref)

    def selector_options(self) -> list[SelectorOption]:
        """Entries for the left/right pickers"""
        options = [
            SelectorOption(id=CURRENT, label="Current form (live)"),
            SelectorOption(id=TEMPLATE, label="Template baseline"),
        ]
        if self.imported_baseline is not None:
            options.append(SelectorOption(id=IMPORTED, label="Imported JSON baseline"))
        for item in self.versions.get_history():
            options.append(
                SelectorOption(id=item.id, label=f"{item.name} · {format_timestamp(item.timestamp)}")
            )
        return options

    def ensure_defaults(self):
        """Fill unset sides: template baseline on the left, live form on the right"""
        options = self.selector_options()
        if not self.left_id:
            self.left_id = options[1].id if len(options) > 1 else options[0].id
        if not self.right_id:
            self.right_id = options[0].id

    # ========== State Transitions ==========

    def toggle_compare_mode(self) -> bool:
        self.enabled = not self.enabled
        if self.enabled:
            self.perform_compare()
        return self.enabled

    def select(
        self,
        left_id: str | None = None,
        right_id: str | None = None,
        ignore_whitespace: bool | None = None,
        only_changed: bool | None = None,
    ) -> LastDiff | None:
        """Change either side or the options, then re-run"""
        if left_id is not None:
            self.left_id = left_id
        if right_id is not None:
            self.right_id = right_id
        if ignore_whitespace is not None:
            self.options.ignore_whitespace = ignore_whitespace
        if only_changed is not None:
            self.options.only_changed = only_changed
        return self.perform_compare()

    def perform_compare(self) -> LastDiff | None:
        """Resolve both sides, diff them and keep the result"""
        self.ensure_defaults()
        left = self.resolve_reference(self.left_id)
        right = self.resolve_reference(self.right_id)
        if left is None or right is None:
            print(f"[CompareSession] Unresolved reference: left={self.left_id} right={self.right_id}")
            return None

        diff_result = diff_snapshots(
            left,
            right,
            ignore_whitespace=self.options.ignore_whitespace,
            only_changed=self.options.only_changed,
        )
        self.last_diff = LastDiff(
            left=left,
            right=right,
            diff_result=diff_result,
            changelog=generate_changelog(left, right, diff_result),
        )
        return self.last_diff

    def swap(self) -> LastDiff | None:
        self.ensure_defaults()
        self.left_id, self.right_id = self.right_id, self.left_id
        return self.perform_compare()

    def compare_template(self) -> LastDiff | None:
        self.left_id = TEMPLATE
        self.right_id = CURRENT
        return self.perform_compare()

    def compare_imported(self) -> LastDiff | None:
        self.left_id = IMPORTED
        self.right_id = CURRENT
        return self.perform_compare()

    def set_imported_baseline(self, form_data: dict[str, Any]) -> Snapshot:
        self.imported_baseline = self.versions.create_snapshot(
            form_data, name="imported", source=SnapshotSource.IMPORT
        )
        return self.imported_baseline

    # ========== Merge ==========

    def toggle_line(self, file: str, index: int, checked: bool = True) -> bool:
        """Check/uncheck a line of the last diff; False if it is not selectable"""
        if self.last_diff is None:
            return False
        for file_diff in self.last_diff.diff_result.full:
            if file_diff.file != file:
                continue
            for row in file_diff.rows:
                if row.index == index and is_selectable(row):
                    self.selection.toggle(merge_key(file, index), checked)
                    return True
        return False

    def _apply(self, form_data: dict[str, Any]) -> dict[str, Any]:
        if self.apply_form_data is not None:
            self.apply_form_data(form_data)
        return form_data

    def merge_selected(self) -> dict[str, Any] | None:
        if self.last_diff is None:
            return None
        return self._apply(merge_selected(self.last_diff, self.selection))

    def copy_right_to_left(self) -> dict[str, Any] | None:
        self.ensure_defaults()
        right = self.resolve_reference(self.right_id)
        if right is None:
            return None
        return self._apply(copy_right_to_left(right))

    def reset_to_previous(self) -> dict[str, Any] | None:
        form_data = reset_to_previous(self.versions.get_history())
        if form_data is None:
            return None
        return self._apply(form_data)

    # ========== Output ==========

    def generate_patch(self) -> str | None:
        if self.last_diff is None:
            return None
        return generate_patch(self.last_diff.left, self.last_diff.right, self.last_diff.diff_result)

    def render_diff(self, diff_result: DiffResult | None = None) -> list[RenderedFile]:
        """Display-ready view of the visible files"""
        if diff_result is None:
            if self.last_diff is None:
                return []
            diff_result = self.last_diff.diff_result

        rendered = []
        for file_diff in diff_result.files:
            rows = []
            for row in file_diff.rows:
                key = merge_key(file_diff.file, row.index)
                if row.type == RowType.MODIFIED:
                    tokens = row.word_diff or []
                    left_html = highlight_word_diff([t for t in tokens if t.type != TokenType.ADD])
                    right_html = highlight_word_diff([t for t in tokens if t.type != TokenType.DEL])
                else:
                    left_html = html.escape(row.left, quote=False)
                    right_html = html.escape(row.right, quote=False)
                rows.append(
                    RenderedRow(
                        type=row.type,
                        index=row.index,
                        merge_key=key,
                        selectable=is_selectable(row),
                        checked=self.selection.has(key),
                        css_class=_ROW_CLASSES.get(row.type, "diff-row"),
                        left_html=left_html,
                        right_html=right_html,
                    )
                )
            rendered.append(
                RenderedFile(
                    file=file_diff.file,
                    changed=file_diff.changed,
                    status="modified" if file_diff.changed else "unchanged",
                    rows=rows,
                )
            )
        return rendered
