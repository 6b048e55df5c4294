"""Launch version history router."""

from fastapi import APIRouter, Depends, HTTPException, Path, status

from handover.schemas import VersionHistory, VersionSnapshot
from handover.tracker import Tracker

from ..dependencies import get_tracker

router = APIRouter(prefix="/projects/{project_id}/versions", tags=["versions"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")


@router.get("", response_model=VersionHistory)
async def get_version_history(
    project_id: str, tracker: Tracker = Depends(get_tracker)
) -> VersionHistory:
    """Known versions; a missing stored history is rebuilt and saved."""
    history = await tracker.version_history(project_id)
    if history is None:
        raise _not_found()
    return history


@router.post("", response_model=VersionHistory, status_code=status.HTTP_201_CREATED)
async def start_next_version(
    project_id: str, tracker: Tracker = Depends(get_tracker)
) -> VersionHistory:
    history = await tracker.start_next_version(project_id)
    if history is None:
        raise _not_found()
    return history


@router.get("/{version}", response_model=VersionSnapshot)
async def get_version_snapshot(
    project_id: str,
    version: int = Path(..., ge=1),
    tracker: Tracker = Depends(get_tracker),
) -> VersionSnapshot:
    snapshot = await tracker.version_snapshot(project_id, version)
    if snapshot is None:
        raise _not_found()
    return snapshot


@router.delete("/{version}", response_model=VersionHistory)
async def remove_version(
    project_id: str,
    version: int = Path(..., ge=1),
    tracker: Tracker = Depends(get_tracker),
) -> VersionHistory:
    """Hide a version from the history. Items tagged with it are kept."""
    history = await tracker.remove_version(project_id, version)
    if history is None:
        raise _not_found()
    return history
