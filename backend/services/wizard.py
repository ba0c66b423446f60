"""
Wizard State - Live form data and step navigation
"""

from __future__ import annotations

import copy
from typing import Any, Callable

from models.profile import PROFILE_FIELDS, WizardStep

STEPS: list[WizardStep] = [
    WizardStep(id="role", label="Role & Persona"),
    WizardStep(id="constraints", label="Constraints & Policies"),
    WizardStep(id="tools", label="Tools & Permissions"),
    WizardStep(id="output", label="Output Preferences"),
    WizardStep(id="review", label="Review & Generate"),
]


def empty_form() -> dict[str, str]:
    return {field: "" for field in PROFILE_FIELDS}


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    return str(value)


class WizardState:
    """Holds the form being edited and notifies a listener on every change"""

    def __init__(self, on_change: Callable[[dict[str, str]], Any] | None = None):
        self.steps = STEPS
        self.current_index = 0
        self._form_data = empty_form()
        self._on_change = on_change

    def set_listener(self, on_change: Callable[[dict[str, str]], Any] | None):
        self._on_change = on_change

    @property
    def form_data(self) -> dict[str, str]:
        """Copy of the live form data"""
        return copy.deepcopy(self._form_data)

    def set_form_values(self, values: dict[str, Any]) -> dict[str, str]:
        """Merge values into the form and notify the listener"""
        for key, value in (values or {}).items():
            self._form_data[key] = _as_text(value)
        snapshot = self.form_data
        if self._on_change is not None:
            self._on_change(snapshot)
        return snapshot

    def replace_form(self, values: dict[str, Any]) -> dict[str, str]:
        """Reset the form to exactly these values (missing fields blank)"""
        self._form_data = empty_form()
        return self.set_form_values(values)

    def set_current_step(self, index: int) -> int:
        self.current_index = max(0, min(index, len(self.steps) - 1))
        return self.current_index

    def next(self) -> int:
        return self.set_current_step(self.current_index + 1)

    def prev(self) -> int:
        return self.set_current_step(self.current_index - 1)
