"""Backend settings models, one per config section"""

from __future__ import annotations

from pydantic import BaseModel, Field, NonNegativeFloat, PositiveInt


class StorageSettings(BaseModel):
    """Where the key-value store lives"""

    namespace: str = "apb:"
    file: str = Field(default="storage.json", min_length=1)


class HistorySettings(BaseModel):
    """Version history limits"""

    maxVersions: PositiveInt = 5
    autosaveCooldownSeconds: NonNegativeFloat = 25


class CompareSettings(BaseModel):
    """Default compare options"""

    ignoreWhitespace: bool = False
    onlyChanged: bool = False
