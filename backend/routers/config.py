"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ValidationError

from models.settings import CompareSettings, HistorySettings, StorageSettings
from services.config_manager import ConfigManager
from services.workspace import reset_workspace

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    storage: dict | None = None
    history: dict | None = None
    compare: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    storage: dict
    history: dict
    compare: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()
    return ConfigResponse(
        storage=config.get("storage", {}),
        history=config.get("history", {}),
        compare=config.get("compare", {}),
    )


# Validated model per config section
SECTION_MODELS: dict[str, type[BaseModel]] = {
    "storage": StorageSettings,
    "history": HistorySettings,
    "compare": CompareSettings,
}


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration; the workspace is rebuilt on next use"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided sections
    for section, model in SECTION_MODELS.items():
        update = getattr(request, section)
        if not update:
            continue
        try:
            settings = model.model_validate({**current_config.get(section, {}), **update})
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=f"Invalid {section} settings: {e}")
        current_config[section] = settings.model_dump()

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    reset_workspace()
    return {"status": "success", "message": "Configuration updated"}
