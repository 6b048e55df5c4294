"""Dashboard filters and counters over loaded projects."""

from collections.abc import Sequence
import math
from typing import Literal

from handover.schemas.project import Project, ProjectStatus, ProjectSummary

CompletionFilter = Literal["all", "active", "completed"]

FULL_PROGRESS = 100


def is_completed(project: Project) -> bool:
    return (
        project.status == ProjectStatus.COMPLETED
        or project.progress.overall == FULL_PROGRESS
    )


def filter_projects(
    projects: Sequence[Project],
    completion: CompletionFilter = "all",
    status: ProjectStatus | None = None,
) -> list[Project]:
    selected = []
    for project in projects:
        if completion == "completed" and not is_completed(project):
            continue
        if completion == "active" and is_completed(project):
            continue
        if status is not None and project.status != status:
            continue
        selected.append(project)
    return selected


def summarize_projects(projects: Sequence[Project]) -> ProjectSummary:
    total = len(projects)
    average = 0
    if total:
        average = math.floor(sum(p.progress.overall for p in projects) / total + 0.5)
    return ProjectSummary(
        total=total,
        active=sum(1 for p in projects if p.progress.overall < FULL_PROGRESS),
        completed=sum(1 for p in projects if is_completed(p)),
        average_progress=average,
    )
