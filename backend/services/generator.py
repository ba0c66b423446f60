"""
File Generator - Render agent profile form data into generated files
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

APP_NAME = "agent-profile-builder"
APP_VERSION = "0.3.0"


def split_tools(value: Any) -> list[str]:
    """Split a comma-separated tool list, dropping blanks"""
    return [item.strip() for item in str(value or "").split(",") if item.strip()]


def split_agents(value: Any) -> list[str]:
    """Split a newline-separated agent list, dropping blanks"""
    return [line.strip() for line in str(value or "").split("\n") if line.strip()]


def generate_artifacts(form_data: dict[str, Any]) -> dict[str, dict[str, Any]]:
    """Build the structured content of every generated file"""
    return {
        "SOUL.md": {
            "role": form_data.get("role") or "",
            "principle": form_data.get("soul") or "",
        },
        "IDENTITY.md": {
            "name": form_data.get("name") or "",
            "hierarchy": form_data.get("hierarchy") or "",
            "identity": form_data.get("identity") or "",
        },
        "TOOLS.md": {
            "enabled": split_tools(form_data.get("tools")),
        },
        "MEMORY.md": {
            "mode": form_data.get("memory") or "",
            "notes": form_data.get("memoryNotes") or "",
        },
        "USER.md": {
            "guidelines": form_data.get("userGuidelines") or "",
        },
        "AGENTS.json": {
            "agents": [{"name": name} for name in split_agents(form_data.get("agents"))],
        },
    }


def generate_file_map(form_data: dict[str, Any]) -> dict[str, str]:
    """Render every generated file to text (filename -> content)"""
    return {
        file: json.dumps(content, indent=2, ensure_ascii=False)
        for file, content in generate_artifacts(form_data or {}).items()
    }


def generate_config(form_data: dict[str, Any], current_step: int = 0) -> dict[str, Any]:
    """Build the exportable configuration payload"""
    return {
        "app": APP_NAME,
        "version": APP_VERSION,
        "generatedAt": datetime.now(timezone.utc).isoformat(),
        "templateId": form_data.get("templateId") or None,
        "wizardState": {
            "currentIndex": current_step,
            "formData": dict(form_data),
        },
        "files": generate_artifacts(form_data),
    }
