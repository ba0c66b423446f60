"""Models module - Pydantic data models"""

from .diff import DiffResult, DiffRow, FileDiff, RowType, TokenType, WordToken
from .version import HistoryResponse, SaveVersionRequest, Snapshot, SnapshotSource
from .profile import (
    PROFILE_FIELDS,
    FormResponse,
    FormUpdateRequest,
    ImportRequest,
    ProfileTemplate,
    ValidationResult,
    WizardStep,
)
from .compare import (
    CompareOptions,
    CompareResponse,
    CompareSelectRequest,
    CompareStateResponse,
    FormDataResponse,
    LastDiff,
    RenderedFile,
    RenderedRow,
    SelectionToggleRequest,
    SelectorOption,
)
from .settings import CompareSettings, HistorySettings, StorageSettings

__all__ = [
    # Diff models
    "DiffResult",
    "DiffRow",
    "FileDiff",
    "RowType",
    "TokenType",
    "WordToken",
    # Version models
    "HistoryResponse",
    "SaveVersionRequest",
    "Snapshot",
    "SnapshotSource",
    # Profile models
    "PROFILE_FIELDS",
    "FormResponse",
    "FormUpdateRequest",
    "ImportRequest",
    "ProfileTemplate",
    "ValidationResult",
    "WizardStep",
    # Compare models
    "CompareOptions",
    "CompareResponse",
    "CompareSelectRequest",
    "CompareStateResponse",
    "FormDataResponse",
    "LastDiff",
    "RenderedFile",
    "RenderedRow",
    "SelectionToggleRequest",
    "SelectorOption",
    # Settings models
    "CompareSettings",
    "HistorySettings",
    "StorageSettings",
]
