"""
Starter Templates - Built-in agent profile baselines
"""

from __future__ import annotations

from typing import Any

from models.profile import ProfileTemplate

DEFAULT_HIERARCHY = "Standalone"
DEFAULT_MEMORY = "Session-only"

STARTER_TEMPLATES: list[ProfileTemplate] = [
    ProfileTemplate(
        id="hephaistos-foundation",
        name="Hephaistos Foundation",
        description="Infra-oriented baseline for setup and deployment tasks.",
        role="Infrastructure engineer and builder for setup and deployment tasks",
        soul="Build things that last. Prefer simple, auditable steps.",
        identity="You are Hephaistos, infrastructure engineer and builder.",
        tools=["shell", "git", "docker"],
        hierarchy="Standalone",
        memory="Persistent",
        userGuidelines="Explain every command before running it.",
    ),
    ProfileTemplate(
        id="general-assistant",
        name="General Assistant",
        description="Balanced default template for general task handling.",
        role="Helpful general-purpose assistant for everyday tasks",
        soul="Be clear, accurate and kind.",
        identity="You are a helpful assistant.",
        tools=["web-search", "calculator"],
        hierarchy="Standalone",
        memory="Session-only",
        userGuidelines="",
    ),
]


def list_templates() -> list[ProfileTemplate]:
    return list(STARTER_TEMPLATES)


def get_template(template_id: str | None) -> ProfileTemplate | None:
    """Find a template by id, or the first template when no id matches"""
    if not STARTER_TEMPLATES:
        return None
    for template in STARTER_TEMPLATES:
        if template.id == template_id:
            return template
    return STARTER_TEMPLATES[0]


def template_form_data(template: ProfileTemplate) -> dict[str, str]:
    """Turn a template into a complete form data mapping"""
    return {
        "templateId": template.id,
        "name": template.name or "",
        "role": template.role or "",
        "soul": template.soul or "",
        "identity": template.identity or "",
        "tools": ", ".join(template.tools or []),
        "hierarchy": template.hierarchy or DEFAULT_HIERARCHY,
        "memory": template.memory or DEFAULT_MEMORY,
        "memoryNotes": "",
        "userGuidelines": template.userGuidelines or "",
        "agents": "\n".join(template.agents or []),
    }


def load_template_baseline(form_data: dict[str, Any]) -> dict[str, str] | None:
    """Form data of the template currently selected in the form"""
    template = get_template(form_data.get("templateId"))
    if template is None:
        return None
    return template_form_data(template)
