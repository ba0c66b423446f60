"""Version history data models"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SnapshotSource(str, Enum):
    """Where a snapshot came from"""

    MANUAL = "manual"
    AUTO = "auto"
    TEMPLATE = "template"
    IMPORT = "import"
    LIVE = "live"


class Snapshot(BaseModel):
    """Capture of form data plus its rendered files

    Frozen against field reassignment only; the mappings themselves are
    plain dicts. Producers copy form data in and consumers copy it out,
    so a stored snapshot is never edited in place.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str = "autosave"
    source: SnapshotSource = SnapshotSource.MANUAL
    timestamp: str  # ISO-8601
    form_data: dict[str, Any] = Field(default_factory=dict, alias="formData")
    files: dict[str, str] = {}


class SaveVersionRequest(BaseModel):
    """Request to save the current form as a named version"""

    name: str | None = None
    source: SnapshotSource = SnapshotSource.MANUAL


class HistoryResponse(BaseModel):
    """Version history, newest first"""

    versions: list[Snapshot]
    max_versions: int
