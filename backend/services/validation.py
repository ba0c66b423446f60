"""
Validation - Field and step rules for the agent profile form
"""

from __future__ import annotations

import re
from typing import Any

from services.generator import split_tools

NAME_MIN_LENGTH = 3
ROLE_MIN_LENGTH = 20
NAME_PATTERN = re.compile(r"^[a-z0-9]+$", re.IGNORECASE)

# Fields checked on each step
STEP_FIELDS: dict[int, tuple[str, ...]] = {
    0: ("name", "role"),
    2: ("tools",),
}


def validate_field(field: str, value: Any) -> tuple[bool, str]:
    """Validate a single field: (valid, error message)"""
    raw = value if isinstance(value, str) else str(value if value is not None else "")
    trimmed = raw.strip()

    if field == "name":
        if not trimmed:
            return False, "Agent name is required."
        if len(trimmed) < NAME_MIN_LENGTH:
            return False, "Agent name must be at least 3 characters."
        if not NAME_PATTERN.match(trimmed):
            return False, "Agent name can only include letters and numbers (no spaces/symbols)."
        return True, ""

    if field == "role":
        if not trimmed:
            return False, "Role description is required."
        if len(trimmed) < ROLE_MIN_LENGTH:
            return False, "Role description must be at least 20 characters."
        return True, ""

    if field == "tools":
        if not split_tools(raw):
            return False, "Add at least one tool (comma-separated)."
        return True, ""

    return True, ""


def validate_step(step: int, form_data: dict[str, Any]) -> list[str]:
    """Errors for one wizard step"""
    errors = []
    for field in STEP_FIELDS.get(step, ()):
        valid, error = validate_field(field, form_data.get(field) or "")
        if not valid:
            errors.append(error)
    return errors


def validate_form(form_data: dict[str, Any]) -> dict[int, list[str]]:
    """Errors grouped by step; empty when the form is valid"""
    errors_by_step = {}
    for step in (0, 1, 2, 3):
        errors = validate_step(step, form_data)
        if errors:
            errors_by_step[step] = errors
    return errors_by_step
