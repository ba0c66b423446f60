"""Compare mode API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Response

from models.compare import (
    CompareResponse,
    CompareSelectRequest,
    CompareStateResponse,
    FormDataResponse,
    LastDiff,
    SelectionToggleRequest,
    SelectorOption,
)
from services.compare_session import EMPTY_DIFF_MESSAGE, CompareSession
from services.workspace import Workspace, get_workspace

router = APIRouter()


def get_session(workspace: Workspace = Depends(get_workspace)) -> CompareSession:
    return workspace.compare


def compare_response(session: CompareSession, result: LastDiff | None) -> CompareResponse:
    """Build the response for a (possibly unresolved) comparison"""
    if result is None:
        return CompareResponse(resolved=False, left_id=session.left_id, right_id=session.right_id)

    view = session.render_diff(result.diff_result)
    return CompareResponse(
        resolved=True,
        left_id=session.left_id,
        right_id=session.right_id,
        diff=result.diff_result,
        changelog=result.changelog,
        view=view,
        empty_message=None if view else EMPTY_DIFF_MESSAGE,
    )


def form_data_response(form_data: dict[str, Any] | None) -> FormDataResponse:
    if form_data is None:
        return FormDataResponse(applied=False)
    return FormDataResponse(applied=True, form_data=form_data)


def attachment(content: str, filename: str, media_type: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("", response_model=CompareStateResponse)
async def get_state(session: CompareSession = Depends(get_session)) -> CompareStateResponse:
    """Current compare session state"""
    return CompareStateResponse(
        enabled=session.enabled,
        left_id=session.left_id,
        right_id=session.right_id,
        options=session.options,
        selection=session.selection.keys(),
        has_imported_baseline=session.imported_baseline is not None,
    )


@router.get("/options", response_model=list[SelectorOption])
async def get_options(session: CompareSession = Depends(get_session)) -> list[SelectorOption]:
    """Entries for the left/right pickers"""
    return session.selector_options()


@router.post("/toggle", response_model=CompareResponse)
async def toggle(session: CompareSession = Depends(get_session)) -> CompareResponse:
    """Enable or disable compare mode"""
    if session.toggle_compare_mode():
        return compare_response(session, session.last_diff)
    return CompareResponse(resolved=False, left_id=session.left_id, right_id=session.right_id)


@router.post("/select", response_model=CompareResponse)
async def select(
    request: CompareSelectRequest,
    session: CompareSession = Depends(get_session),
) -> CompareResponse:
    """Pick both sides and options, then compare"""
    result = session.select(
        left_id=request.left_id,
        right_id=request.right_id,
        ignore_whitespace=request.ignore_whitespace,
        only_changed=request.only_changed,
    )
    return compare_response(session, result)


@router.post("/run", response_model=CompareResponse)
async def run(session: CompareSession = Depends(get_session)) -> CompareResponse:
    """Re-run the comparison with the current references"""
    return compare_response(session, session.perform_compare())


@router.post("/swap", response_model=CompareResponse)
async def swap(session: CompareSession = Depends(get_session)) -> CompareResponse:
    return compare_response(session, session.swap())


@router.post("/template", response_model=CompareResponse)
async def compare_template(session: CompareSession = Depends(get_session)) -> CompareResponse:
    """Template baseline vs current form"""
    return compare_response(session, session.compare_template())


@router.post("/imported", response_model=CompareResponse)
async def compare_imported(session: CompareSession = Depends(get_session)) -> CompareResponse:
    """Imported baseline vs current form"""
    return compare_response(session, session.compare_imported())


@router.post("/selection", response_model=list[str])
async def toggle_selection(
    request: SelectionToggleRequest,
    session: CompareSession = Depends(get_session),
) -> list[str]:
    """Check or uncheck a changed line for merging"""
    if not session.toggle_line(request.file, request.index, request.checked):
        raise HTTPException(
            status_code=400,
            detail=f"Line {request.file}:{request.index} is not selectable",
        )
    return session.selection.keys()


@router.delete("/selection", response_model=list[str])
async def clear_selection(session: CompareSession = Depends(get_session)) -> list[str]:
    session.selection.clear()
    return []


@router.post("/merge", response_model=FormDataResponse)
async def merge(session: CompareSession = Depends(get_session)) -> FormDataResponse:
    """Merge the selected changes into the form"""
    return form_data_response(session.merge_selected())


@router.post("/copy-right", response_model=FormDataResponse)
async def copy_right(session: CompareSession = Depends(get_session)) -> FormDataResponse:
    """Replace the form with the right-hand snapshot"""
    return form_data_response(session.copy_right_to_left())


@router.post("/reset-previous", response_model=FormDataResponse)
async def reset_previous(session: CompareSession = Depends(get_session)) -> FormDataResponse:
    """Restore the second most recent version"""
    return form_data_response(session.reset_to_previous())


@router.get("/patch")
async def export_patch(session: CompareSession = Depends(get_session)) -> Response:
    """Download the last comparison as a patch"""
    patch = session.generate_patch()
    if patch is None:
        raise HTTPException(status_code=404, detail="No comparison has been run yet")
    return attachment(patch, "changes.patch", "text/x-diff")


@router.get("/changelog")
async def export_changelog(session: CompareSession = Depends(get_session)) -> Response:
    """Download the last changelog as Markdown"""
    if session.last_diff is None:
        raise HTTPException(status_code=404, detail="No comparison has been run yet")
    return attachment(session.last_diff.changelog, "changelog.md", "text/markdown")
