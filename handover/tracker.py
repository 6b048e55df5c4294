"""Project tracking operations over the document store.

Each public coroutine corresponds to one user action. Progress is always
recomputed from the stored answers and the current checklist configuration;
the progress stored on a document is only a cache for list displays.
"""

import asyncio
from datetime import date
from typing import Any

from pydantic import ValidationError
import structlog

from handover.checklists import (
    carry_forward_integrations,
    checklist_status,
    compute_progress,
    filter_projects,
    generate_missing_info_email,
    next_version,
    overall_progress,
    reconcile_version_history,
    remove_version,
    render_markdown_report,
    summarize_projects,
    version_snapshot,
)
from handover.checklists.dashboard import CompletionFilter
from handover.schemas import (
    INTAKE_FIELD_IDS,
    ChecklistConfig,
    ChecklistKind,
    ChecklistView,
    GeneratedEmail,
    IntakeFields,
    Progress,
    Project,
    ProjectCreate,
    ProjectStatus,
    ProjectSummary,
    ProjectUpdate,
    VersionHistory,
    VersionSnapshot,
)
from handover.store import ChecklistStore, StoreError

logger = structlog.get_logger(__name__)


def compute_project_progress(project: Project, config: ChecklistConfig) -> Progress:
    sales = compute_progress(project.checklists.sales, config.sales, require_checks=False)
    launch = compute_progress(project.checklists.launch, config.launch, require_checks=True)
    return Progress(
        sales_completion=sales,
        launch_completion=launch,
        overall=overall_progress(sales, launch),
    )


def _intake_updates(answers: dict[str, Any]) -> dict[str, Any]:
    """Top-level intake attributes mirrored from sales answers, coerced to their types."""
    present: dict[str, Any] = {}
    for field_id in INTAKE_FIELD_IDS:
        value = answers.get(field_id)
        if field_id == "paymentConfirmation":
            if value is None:
                continue
        elif not value:
            continue
        present[field_id] = value
    if not present:
        return {}
    intake = IntakeFields.model_validate(present)
    return intake.to_document(include={INTAKE_FIELD_IDS[field_id] for field_id in present})


def _parse_project(document: dict[str, Any]) -> Project | None:
    try:
        return Project.model_validate(document)
    except ValidationError as e:
        logger.error(
            "project_document_invalid",
            project_id=document.get("id"),
            errors=e.error_count(),
        )
        return None


class Tracker:
    """Coordinates the store and the checklist engine."""

    def __init__(self, store: ChecklistStore):
        self.store = store
        self._background: set[asyncio.Task] = set()

    # === Loading ===

    async def _load(
        self, project_id: str, config: ChecklistConfig | None = None
    ) -> tuple[Project, ChecklistConfig] | None:
        document = await self.store.get_project(project_id)
        if document is None:
            return None
        project = _parse_project(document)
        if project is None:
            raise StoreError(f"Corrupt project document {project_id}")
        config = config or await self.store.get_checklist_config()
        project.progress = compute_project_progress(project, config)
        return project, config

    async def get_project(self, project_id: str) -> Project | None:
        loaded = await self._load(project_id)
        return loaded[0] if loaded else None

    async def list_projects(
        self,
        completion: CompletionFilter = "all",
        status: ProjectStatus | None = None,
    ) -> list[Project]:
        config = await self.store.get_checklist_config()
        projects = []
        for document in await self.store.list_projects():
            project = _parse_project(document)
            if project is None:
                continue
            project.progress = compute_project_progress(project, config)
            projects.append(project)
        return filter_projects(projects, completion=completion, status=status)

    async def summary(self) -> ProjectSummary:
        return summarize_projects(await self.list_projects())

    # === Project lifecycle ===

    async def create_project(self, payload: ProjectCreate) -> Project:
        document = payload.to_document()
        document["checklists"] = {"sales": {"brandName": payload.brand_name}, "launch": {}}
        project_id = await self.store.create_project(document)
        logger.info("project_created", project_id=project_id, brand_name=payload.brand_name)
        project = await self.get_project(project_id)
        if project is None:
            raise LookupError(f"Project {project_id} vanished after creation")
        return project

    async def update_project(self, project_id: str, payload: ProjectUpdate) -> Project | None:
        loaded = await self._load(project_id)
        if loaded is None:
            return None
        project, _config = loaded

        updates = payload.model_dump(by_alias=True, mode="json", exclude_unset=True)
        if payload.status == ProjectStatus.LIVE and not project.completion_date:
            updates.setdefault("completionDate", date.today().isoformat())

        await self.store.update_project(project_id, updates)
        logger.info("project_updated", project_id=project_id, keys=sorted(updates))
        return await self.get_project(project_id)

    async def delete_project(self, project_id: str) -> bool:
        if await self.store.get_project(project_id) is None:
            return False
        await self.store.delete_project(project_id)
        logger.info("project_deleted", project_id=project_id)
        return True

    # === Checklists ===

    async def checklist_view(self, project_id: str, kind: ChecklistKind) -> ChecklistView | None:
        loaded = await self._load(project_id)
        if loaded is None:
            return None
        project, config = loaded

        fields = config.fields_for(kind)
        history: list[int] = []
        if kind == "launch":
            answers = carry_forward_integrations(
                project.checklists.sales, project.checklists.launch
            )
            history = self._reconcile(project)
            completion = project.progress.launch_completion
        else:
            answers = dict(project.checklists.sales)
            completion = project.progress.sales_completion

        return ChecklistView(
            project_id=project_id,
            kind=kind,
            fields=fields,
            answers=answers,
            status=checklist_status(answers, fields),
            completion=completion,
            version=project.version,
            version_history=history,
        )

    async def save_checklist(
        self, project_id: str, kind: ChecklistKind, answers: dict[str, Any]
    ) -> Project | None:
        loaded = await self._load(project_id)
        if loaded is None:
            return None
        project, config = loaded

        checklists = project.checklists.model_copy(update={kind: answers})
        progress = compute_project_progress(
            project.model_copy(update={"checklists": checklists}), config
        )

        updates: dict[str, Any] = {
            "checklists": checklists.to_document(),
            "progress": progress.to_document(),
        }
        if kind == "sales":
            updates.update(_intake_updates(answers))

        await self.store.update_project(project_id, updates)
        logger.info(
            "checklist_saved",
            project_id=project_id,
            kind=kind,
            sales_completion=progress.sales_completion,
            launch_completion=progress.launch_completion,
        )
        return await self.get_project(project_id)

    # === Versions ===

    def _reconcile(self, project: Project) -> list[int]:
        result = reconcile_version_history(
            project.version, project.checklists.launch, project.version_history
        )
        if result.needs_repair:
            self._schedule_history_repair(project.id, result.history)
        return result.history

    def _schedule_history_repair(self, project_id: str, history: list[int]) -> None:
        task = asyncio.create_task(self._repair_history(project_id, history))
        self._background.add(task)
        task.add_done_callback(self._background.discard)

    async def _repair_history(self, project_id: str, history: list[int]) -> None:
        try:
            await self.store.update_project(project_id, {"versionHistory": history})
            logger.info("version_history_repaired", project_id=project_id, history=history)
        except Exception as e:
            logger.error(
                "version_history_repair_failed",
                project_id=project_id,
                error=str(e),
                error_type=type(e).__name__,
            )

    async def drain(self) -> None:
        """Wait for scheduled background writes to finish."""
        if self._background:
            await asyncio.gather(*self._background, return_exceptions=True)

    async def version_history(self, project_id: str) -> VersionHistory | None:
        project = await self.get_project(project_id)
        if project is None:
            return None
        return VersionHistory(
            project_id=project_id,
            version=project.version,
            version_history=self._reconcile(project),
        )

    async def start_next_version(self, project_id: str) -> VersionHistory | None:
        """Bump the project to a new version; only allowed once it is live."""
        project = await self.get_project(project_id)
        if project is None:
            return None
        history = reconcile_version_history(
            project.version, project.checklists.launch, project.version_history
        ).history
        new_version = next_version(history, project.version, project.publishing_status.value)
        history = sorted({*history, new_version})

        await self.store.update_project(
            project_id, {"version": new_version, "versionHistory": history}
        )
        logger.info("version_started", project_id=project_id, version=new_version)
        return VersionHistory(project_id=project_id, version=new_version, version_history=history)

    async def remove_version(self, project_id: str, version: int) -> VersionHistory | None:
        """Hide a version from the history; items tagged with it are kept."""
        project = await self.get_project(project_id)
        if project is None:
            return None
        current_history = reconcile_version_history(
            project.version, project.checklists.launch, project.version_history
        ).history
        history = remove_version(current_history, version, project.version)

        await self.store.update_project(project_id, {"versionHistory": history})
        logger.info("version_removed", project_id=project_id, version=version)
        return VersionHistory(
            project_id=project_id, version=project.version, version_history=history
        )

    async def version_snapshot(self, project_id: str, version: int) -> VersionSnapshot | None:
        project = await self.get_project(project_id)
        if project is None:
            return None
        return VersionSnapshot(
            project_id=project_id,
            version=version,
            items=version_snapshot(project.checklists.launch, version),
        )

    # === Drafts ===

    async def missing_info_email(
        self, project_id: str, user_name: str | None = None
    ) -> GeneratedEmail | None:
        loaded = await self._load(project_id)
        if loaded is None:
            return None
        project, config = loaded
        return generate_missing_info_email(project, config, user_name=user_name)

    async def handover_report(self, project_id: str) -> str | None:
        loaded = await self._load(project_id)
        if loaded is None:
            return None
        project, config = loaded
        return render_markdown_report(project, config)
