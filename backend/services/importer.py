"""
Importer - Parse and normalize existing agent configurations
"""

from __future__ import annotations

import json
from typing import Any

from services.templates import DEFAULT_HIERARCHY, DEFAULT_MEMORY
from services.validation import validate_field


class InvalidImportError(ValueError):
    """Raised when imported content cannot be used"""


def parse_agent_json(content: str | dict[str, Any]) -> Any:
    """Extract form data from an exported config, a snapshot, or a bare object"""
    if isinstance(content, str):
        try:
            parsed = json.loads(content)
        except json.JSONDecodeError as e:
            raise InvalidImportError(f"Invalid JSON: {e}")
    else:
        parsed = content

    if isinstance(parsed, dict):
        wizard_state = parsed.get("wizardState")
        if isinstance(wizard_state, dict) and isinstance(wizard_state.get("formData"), dict):
            return wizard_state["formData"]
        if isinstance(parsed.get("formData"), dict):
            return parsed["formData"]
    return parsed


def _agent_name(agent: Any) -> str:
    if isinstance(agent, str):
        return agent
    if isinstance(agent, dict):
        return str(agent.get("name") or "")
    return ""


def normalize_imported_data(data: dict[str, Any]) -> dict[str, str]:
    """Map imported fields onto the form, filling every field"""
    tools = data.get("tools")
    if isinstance(tools, list):
        tools = ", ".join(str(tool) for tool in tools)

    agents = data.get("agents")
    if isinstance(agents, list):
        agents = "\n".join(name for name in (_agent_name(a) for a in agents) if name)

    return {
        "templateId": str(data.get("templateId") or ""),
        "name": str(data.get("name") or ""),
        "role": str(data.get("role") or ""),
        "soul": str(data.get("soul") or data.get("principle") or ""),
        "identity": str(data.get("identity") or ""),
        "tools": str(tools or ""),
        "hierarchy": str(data.get("hierarchy") or DEFAULT_HIERARCHY),
        "memory": str(data.get("memory") or DEFAULT_MEMORY),
        "memoryNotes": str(data.get("memoryNotes") or data.get("notes") or ""),
        "userGuidelines": str(data.get("userGuidelines") or data.get("guidelines") or ""),
        "agents": str(agents or ""),
    }


def validate_imported_data(data: Any) -> tuple[dict[str, str], list[str]]:
    """Normalize imported data and collect validation errors"""
    if not isinstance(data, dict):
        raise InvalidImportError("Imported content is not a valid JSON object.")

    normalized = normalize_imported_data(data)
    errors = []
    for field in ("name", "role", "tools"):
        valid, error = validate_field(field, normalized[field])
        if not valid:
            errors.append(error)
    return normalized, errors
