"""Agent profile API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from models.profile import (
    FormResponse,
    FormUpdateRequest,
    ImportRequest,
    ProfileTemplate,
    ValidationResult,
)
from services.generator import generate_config
from services.importer import InvalidImportError, parse_agent_json, validate_imported_data
from services.templates import list_templates
from services.validation import validate_form
from services.workspace import Workspace, get_workspace

router = APIRouter()


def form_response(workspace: Workspace) -> FormResponse:
    return FormResponse(
        form_data=workspace.wizard.form_data,
        current_step=workspace.wizard.current_index,
        steps=workspace.wizard.steps,
    )


@router.get("", response_model=FormResponse)
async def get_form(workspace: Workspace = Depends(get_workspace)) -> FormResponse:
    """Get the live form"""
    return form_response(workspace)


@router.put("", response_model=FormResponse)
async def update_form(
    request: FormUpdateRequest,
    workspace: Workspace = Depends(get_workspace),
) -> FormResponse:
    """Update form fields (triggers autosave)"""
    workspace.wizard.set_form_values(request.values)
    return form_response(workspace)


@router.post("/next", response_model=FormResponse)
async def next_step(workspace: Workspace = Depends(get_workspace)) -> FormResponse:
    workspace.wizard.next()
    return form_response(workspace)


@router.post("/prev", response_model=FormResponse)
async def prev_step(workspace: Workspace = Depends(get_workspace)) -> FormResponse:
    workspace.wizard.prev()
    return form_response(workspace)


@router.get("/validate", response_model=ValidationResult)
async def validate(workspace: Workspace = Depends(get_workspace)) -> ValidationResult:
    """Validate the live form"""
    errors = validate_form(workspace.wizard.form_data)
    return ValidationResult(valid=not errors, errors_by_step=errors)


@router.post("/generate")
async def generate(workspace: Workspace = Depends(get_workspace)) -> dict[str, Any]:
    """Build the exportable configuration"""
    config = generate_config(workspace.wizard.form_data, workspace.wizard.current_index)
    workspace.store.set("lastGeneratedConfig", config)
    return config


@router.get("/templates", response_model=list[ProfileTemplate])
async def get_templates() -> list[ProfileTemplate]:
    """List starter templates"""
    return list_templates()


@router.post("/import", response_model=FormResponse)
async def import_profile(
    request: ImportRequest,
    workspace: Workspace = Depends(get_workspace),
) -> FormResponse:
    """Import an existing configuration into the form"""
    try:
        normalized, errors = validate_imported_data(parse_agent_json(request.content))
    except InvalidImportError as e:
        raise HTTPException(status_code=400, detail=f"Import failed: {e}")

    if errors:
        raise HTTPException(status_code=400, detail=f"Import failed: {' '.join(errors)}")

    workspace.wizard.replace_form(normalized)
    workspace.wizard.set_current_step(0)
    workspace.compare.set_imported_baseline(normalized)
    return form_response(workspace)
