"""Compare mode data models"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from .diff import DiffResult, RowType
from .version import Snapshot


class CompareOptions(BaseModel):
    """Options applied to every comparison of a session"""

    ignore_whitespace: bool = False
    only_changed: bool = False


class LastDiff(BaseModel):
    """Result of the most recent comparison, kept for merge and patch export"""

    left: Snapshot
    right: Snapshot
    diff_result: DiffResult
    changelog: str


class SelectorOption(BaseModel):
    """An entry of the left/right snapshot pickers"""

    id: str
    label: str


class RenderedRow(BaseModel):
    """Display-ready diff row"""

    type: RowType
    index: int
    merge_key: str
    selectable: bool
    checked: bool
    css_class: str
    left_html: str
    right_html: str


class RenderedFile(BaseModel):
    """Display-ready section for one file"""

    file: str
    changed: bool
    status: str  # "modified" or "unchanged"
    rows: list[RenderedRow]


class CompareSelectRequest(BaseModel):
    """Pick both sides of the comparison and the options"""

    left_id: str | None = None
    right_id: str | None = None
    ignore_whitespace: bool | None = None
    only_changed: bool | None = None


class SelectionToggleRequest(BaseModel):
    """Check or uncheck a changed line for merging"""

    file: str
    index: int
    checked: bool = True


class CompareStateResponse(BaseModel):
    """Current state of the compare session"""

    enabled: bool
    left_id: str | None
    right_id: str | None
    options: CompareOptions
    selection: list[str]
    has_imported_baseline: bool


class CompareResponse(BaseModel):
    """Outcome of running a comparison"""

    resolved: bool
    left_id: str | None = None
    right_id: str | None = None
    diff: DiffResult | None = None
    changelog: str | None = None
    view: list[RenderedFile] = []
    empty_message: str | None = None


class FormDataResponse(BaseModel):
    """Form data handed back to the form layer after merge/copy/reset"""

    applied: bool
    form_data: dict[str, Any] = {}
