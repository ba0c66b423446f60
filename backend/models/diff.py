"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class RowType(str, Enum):
    """Classification of a line-level comparison row"""

    SAME = "same"
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


class TokenType(str, Enum):
    """Classification of a word-level token"""

    SAME = "same"
    ADD = "add"
    DEL = "del"


class WordToken(BaseModel):
    """A single token of a word-level diff"""

    type: TokenType
    value: str


class DiffRow(BaseModel):
    """One row of a line-by-line comparison"""

    model_config = ConfigDict(populate_by_name=True)

    type: RowType
    left: str
    right: str
    index: int  # 0-indexed line number
    word_diff: list[WordToken] | None = Field(default=None, alias="wordDiff")

    @model_serializer(mode="wrap")
    def _omit_missing_word_diff(self, handler):
        # Only modified rows carry a word diff
        data = handler(self)
        if self.word_diff is None:
            data.pop("wordDiff", None)
            data.pop("word_diff", None)
        return data


class FileDiff(BaseModel):
    """Line diff of a single generated file"""

    file: str
    rows: list[DiffRow]
    changed: bool


class DiffResult(BaseModel):
    """Diff across every generated file of two snapshots"""

    files: list[FileDiff]  # View, optionally only changed files
    full: list[FileDiff]  # Always every file
