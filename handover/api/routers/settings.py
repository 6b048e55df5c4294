"""Settings router: checklist schema and integrations catalogue."""

from fastapi import APIRouter, Depends

from handover.schemas import ChecklistConfig, Integration
from handover.tracker import Tracker

from ..dependencies import get_tracker

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/checklist", response_model=ChecklistConfig)
async def get_checklist_config(tracker: Tracker = Depends(get_tracker)) -> ChecklistConfig:
    """Current field schema, or the built-in default."""
    return await tracker.store.get_checklist_config()


@router.put("/checklist", response_model=ChecklistConfig)
async def update_checklist_config(
    config: ChecklistConfig, tracker: Tracker = Depends(get_tracker)
) -> ChecklistConfig:
    """Replace the field schema. Existing answers are re-scored on next read."""
    await tracker.store.update_checklist_config(config)
    return await tracker.store.get_checklist_config()


@router.get("/integrations", response_model=list[Integration])
async def get_integrations(tracker: Tracker = Depends(get_tracker)) -> list[Integration]:
    """Integrations catalogue, or the built-in default."""
    return await tracker.store.get_integrations()


@router.put("/integrations", response_model=list[Integration])
async def update_integrations(
    integrations: list[Integration], tracker: Tracker = Depends(get_tracker)
) -> list[Integration]:
    await tracker.store.update_integrations(integrations)
    return await tracker.store.get_integrations()
