"""Version history API endpoints"""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Response

from models.version import HistoryResponse, SaveVersionRequest, Snapshot
from services.workspace import Workspace, get_workspace

router = APIRouter()


@router.get("", response_model=HistoryResponse)
async def get_history(workspace: Workspace = Depends(get_workspace)) -> HistoryResponse:
    """Saved versions, newest first"""
    return HistoryResponse(
        versions=workspace.versions.get_history(),
        max_versions=workspace.versions.max_versions,
    )


@router.post("", response_model=Snapshot)
async def save_version(
    request: SaveVersionRequest,
    workspace: Workspace = Depends(get_workspace),
) -> Snapshot:
    """Snapshot the live form into history"""
    name = request.name or f"v{len(workspace.versions.get_history()) + 1}"
    item = workspace.versions.save_version(name, request.source)
    workspace.compare.perform_compare()
    return item


@router.get("/export")
async def export_history(workspace: Workspace = Depends(get_workspace)) -> Response:
    """Download the history as JSON"""
    filename = f"apb-version-history-{date.today().isoformat()}.json"
    return Response(
        content=workspace.versions.export_history_json(),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
