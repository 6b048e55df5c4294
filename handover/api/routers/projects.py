"""Projects router."""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.responses import PlainTextResponse
import structlog

from handover.schemas import (
    ChecklistKind,
    ChecklistSave,
    ChecklistView,
    GeneratedEmail,
    Project,
    ProjectCreate,
    ProjectStatus,
    ProjectSummary,
    ProjectUpdate,
)
from handover.tracker import Tracker

from ..dependencies import get_tracker

logger = structlog.get_logger()

router = APIRouter(prefix="/projects", tags=["projects"])


def _not_found(project_id: str) -> HTTPException:
    logger.warning("project_not_found", project_id=project_id)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")


@router.get("", response_model=list[Project])
async def list_projects(
    completion: Literal["all", "active", "completed"] = "all",
    status_filter: ProjectStatus | None = Query(None, alias="status"),
    tracker: Tracker = Depends(get_tracker),
) -> list[Project]:
    """List projects with freshly computed progress, newest first."""
    return await tracker.list_projects(completion=completion, status=status_filter)


@router.get("/summary", response_model=ProjectSummary)
async def projects_summary(tracker: Tracker = Depends(get_tracker)) -> ProjectSummary:
    """Dashboard counters."""
    return await tracker.summary()


@router.post("", response_model=Project, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_in: ProjectCreate,
    tracker: Tracker = Depends(get_tracker),
) -> Project:
    """Create a new project."""
    return await tracker.create_project(project_in)


@router.get("/{project_id}", response_model=Project)
async def get_project(project_id: str, tracker: Tracker = Depends(get_tracker)) -> Project:
    """Get project by ID."""
    project = await tracker.get_project(project_id)
    if project is None:
        raise _not_found(project_id)
    return project


@router.patch("/{project_id}", response_model=Project)
async def patch_project(
    project_id: str,
    project_in: ProjectUpdate,
    tracker: Tracker = Depends(get_tracker),
) -> Project:
    """Partial update of project metadata."""
    project = await tracker.update_project(project_id, project_in)
    if project is None:
        raise _not_found(project_id)
    return project


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(project_id: str, tracker: Tracker = Depends(get_tracker)) -> Response:
    if not await tracker.delete_project(project_id):
        raise _not_found(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{project_id}/checklists/{kind}", response_model=ChecklistView)
async def get_checklist(
    project_id: str,
    kind: ChecklistKind,
    tracker: Tracker = Depends(get_tracker),
) -> ChecklistView:
    """Answers, fields and per-field status of one checklist."""
    view = await tracker.checklist_view(project_id, kind)
    if view is None:
        raise _not_found(project_id)
    return view


@router.put("/{project_id}/checklists/{kind}", response_model=Project)
async def save_checklist(
    project_id: str,
    kind: ChecklistKind,
    payload: ChecklistSave,
    tracker: Tracker = Depends(get_tracker),
) -> Project:
    """Replace the answers of one checklist and refresh progress."""
    project = await tracker.save_checklist(project_id, kind, payload.answers)
    if project is None:
        raise _not_found(project_id)
    return project


@router.get("/{project_id}/email", response_model=GeneratedEmail)
async def missing_info_email(
    project_id: str,
    user_name: str | None = Query(None, alias="userName"),
    tracker: Tracker = Depends(get_tracker),
) -> GeneratedEmail:
    """Draft a follow-up email listing missing information."""
    email = await tracker.missing_info_email(project_id, user_name=user_name)
    if email is None:
        raise _not_found(project_id)
    return email


@router.get("/{project_id}/report", response_class=PlainTextResponse)
async def handover_report(
    project_id: str, tracker: Tracker = Depends(get_tracker)
) -> PlainTextResponse:
    """Markdown handover report."""
    report = await tracker.handover_report(project_id)
    if report is None:
        raise _not_found(project_id)
    return PlainTextResponse(report, media_type="text/markdown")
