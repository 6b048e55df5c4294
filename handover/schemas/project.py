"""Project documents and API payloads.

Stored documents may predate the current schema, so the document models
coerce wrong-typed values to their defaults instead of rejecting them.
"""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic.alias_generators import to_camel

from .base import DocumentModel


def _as_text(value: Any) -> Any:
    """Scalars as strings; anything else reads as empty."""
    if value is None or value is False:
        return ""
    if value is True:
        return "true"
    if isinstance(value, int | float):
        return str(value)
    return value if isinstance(value, str) else ""


class ProjectStatus(str, Enum):
    """Development status."""

    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    ON_HOLD = "On HOLD"
    COMPLETED = "Completed"
    LIVE = "Live"


class PublishingStatus(str, Enum):
    """App store publishing status."""

    PENDING = "Pending"
    SUBSCRIBED = "Subscribed"
    UNDER_REVIEW = "Under Review"
    LIVE = "Live"


class POC(DocumentModel):
    """Merchant point of contact."""

    name: str = ""
    email: str = ""
    phone: str = ""

    @field_validator("name", "email", "phone", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        return _as_text(v)


class Progress(DocumentModel):
    sales_completion: int = Field(default=0, ge=0, le=100)
    launch_completion: int = Field(default=0, ge=0, le=100)
    overall: int = Field(default=0, ge=0, le=100)

    @field_validator("sales_completion", "launch_completion", "overall", mode="before")
    @classmethod
    def clamp_percent(cls, v: Any) -> Any:
        # Only a display cache; recomputed on every read
        if isinstance(v, bool) or not isinstance(v, int | float):
            return 0
        return min(100, max(0, round(v)))


class Checklists(DocumentModel):
    sales: dict[str, Any] = Field(default_factory=dict)
    launch: dict[str, Any] = Field(default_factory=dict)

    @field_validator("sales", "launch", mode="before")
    @classmethod
    def default_answers(cls, v: Any) -> Any:
        return dict(v) if isinstance(v, Mapping) else {}


class IntakeFields(DocumentModel):
    """Sales intake metadata kept at the top level of a project."""

    brand_name: str = ""
    store_url_my_shopify: str = ""
    store_public_url: str = ""
    collab_code: str = ""
    scope_of_work: str = ""
    design_refs: list[Any] = Field(default_factory=list)
    additional_docs: list[Any] = Field(default_factory=list)
    payment_confirmation: bool = False
    plan_details: str = ""
    revenue_share: str | float | None = None
    gmv_info: str = ""
    release_type: str | None = None
    duns_status: str = ""
    poc: POC = Field(default_factory=POC)

    @field_validator(
        "brand_name",
        "store_url_my_shopify",
        "store_public_url",
        "collab_code",
        "scope_of_work",
        "plan_details",
        "gmv_info",
        "duns_status",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        return _as_text(v)

    @field_validator("design_refs", "additional_docs", mode="before")
    @classmethod
    def coerce_list(cls, v: Any) -> Any:
        return list(v) if isinstance(v, list | tuple) else []

    @field_validator("payment_confirmation", mode="before")
    @classmethod
    def coerce_flag(cls, v: Any) -> bool:
        return v is True

    @field_validator("revenue_share", mode="before")
    @classmethod
    def coerce_share(cls, v: Any) -> Any:
        if isinstance(v, bool) or not isinstance(v, str | int | float):
            return None
        return v

    @field_validator("release_type", mode="before")
    @classmethod
    def coerce_release_type(cls, v: Any) -> Any:
        return _as_text(v) or None

    @field_validator("poc", mode="before")
    @classmethod
    def coerce_poc(cls, v: Any) -> Any:
        return v if isinstance(v, Mapping | POC) else {}


# Sales answer ids that mirror a top-level intake attribute, e.g. brandName
INTAKE_FIELD_IDS: dict[str, str] = {to_camel(name): name for name in IntakeFields.model_fields}


class Project(IntakeFields):
    """A merchant onboarding project as stored and served."""

    id: str
    status: ProjectStatus = ProjectStatus.NOT_STARTED
    publishing_status: PublishingStatus = PublishingStatus.PENDING
    version: int = Field(default=1, ge=1)
    version_history: list[int] = Field(default_factory=list)
    handover_date: str | None = None
    completion_date: str | None = None
    checklists: Checklists = Field(default_factory=Checklists)
    progress: Progress = Field(default_factory=Progress)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("status", mode="before")
    @classmethod
    def known_status(cls, v: Any) -> Any:
        try:
            return ProjectStatus(v)
        except (TypeError, ValueError):
            return ProjectStatus.NOT_STARTED

    @field_validator("publishing_status", mode="before")
    @classmethod
    def known_publishing_status(cls, v: Any) -> Any:
        try:
            return PublishingStatus(v)
        except (TypeError, ValueError):
            return PublishingStatus.PENDING

    @field_validator("version", mode="before")
    @classmethod
    def positive_version(cls, v: Any) -> Any:
        return v if isinstance(v, int) and not isinstance(v, bool) and v >= 1 else 1

    @field_validator("version_history", mode="before")
    @classmethod
    def integer_versions(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return []
        return [item for item in v if isinstance(item, int) and not isinstance(item, bool)]

    @field_validator("handover_date", "completion_date", mode="before")
    @classmethod
    def optional_text(cls, v: Any) -> Any:
        return _as_text(v) or None

    @field_validator("checklists", "progress", mode="before")
    @classmethod
    def default_section(cls, v: Any) -> Any:
        return v if isinstance(v, Mapping | DocumentModel) else {}


class ProjectCreate(IntakeFields):
    """Payload for creating a project."""

    brand_name: str = Field(..., min_length=1, max_length=200)
    status: ProjectStatus = ProjectStatus.NOT_STARTED
    handover_date: str | None = None


class ProjectUpdate(DocumentModel):
    """Partial update of project metadata. Checklists are saved separately."""

    brand_name: str | None = Field(default=None, min_length=1, max_length=200)
    status: ProjectStatus | None = None
    publishing_status: PublishingStatus | None = None
    handover_date: str | None = None
    completion_date: str | None = None
    collab_code: str | None = None
    release_type: str | None = None
    duns_status: str | None = None
    poc: POC | None = None


class ProjectSummary(DocumentModel):
    """Dashboard counters."""

    total: int
    active: int
    completed: int
    average_progress: int
