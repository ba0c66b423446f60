"""Agent profile data models"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

# Every field the wizard collects, in form order
PROFILE_FIELDS: tuple[str, ...] = (
    "templateId",
    "name",
    "role",
    "soul",
    "identity",
    "tools",
    "hierarchy",
    "memory",
    "memoryNotes",
    "userGuidelines",
    "agents",
)


class ProfileTemplate(BaseModel):
    """Starter template for an agent profile"""

    id: str
    name: str = ""
    description: str = ""
    role: str = ""
    soul: str = ""
    identity: str = ""
    tools: list[str] = []
    hierarchy: str = ""
    memory: str = ""
    userGuidelines: str = ""
    agents: list[str] = []


class WizardStep(BaseModel):
    """A single wizard step"""

    id: str
    label: str


class FormUpdateRequest(BaseModel):
    """Partial update of the live form"""

    values: dict[str, Any]


class FormResponse(BaseModel):
    """Live form state"""

    form_data: dict[str, Any]
    current_step: int
    steps: list[WizardStep]


class ValidationResult(BaseModel):
    """Outcome of validating the whole form"""

    valid: bool
    errors_by_step: dict[int, list[str]] = {}


class ImportRequest(BaseModel):
    """Import of an existing agent configuration (raw JSON text or object)"""

    content: str | dict[str, Any]
