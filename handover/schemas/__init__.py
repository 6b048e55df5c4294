"""Pydantic schemas for handover documents and API payloads."""

from .checklist import (
    ChecklistConfig,
    ChecklistKind,
    ChecklistSave,
    ChecklistView,
    VersionHistory,
    VersionSnapshot,
    default_checklist_config,
)
from .email import EmailSection, GeneratedEmail
from .fields import (
    FieldConfig,
    FieldStatus,
    FlattenedField,
    GroupField,
    LeafField,
    parse_fields,
)
from .integrations import Integration, default_integrations
from .project import (
    INTAKE_FIELD_IDS,
    POC,
    Checklists,
    IntakeFields,
    Progress,
    Project,
    ProjectCreate,
    ProjectStatus,
    ProjectSummary,
    ProjectUpdate,
    PublishingStatus,
)

__all__ = [
    "ChecklistConfig",
    "ChecklistKind",
    "ChecklistSave",
    "ChecklistView",
    "VersionHistory",
    "VersionSnapshot",
    "default_checklist_config",
    "EmailSection",
    "GeneratedEmail",
    "FieldConfig",
    "FieldStatus",
    "FlattenedField",
    "GroupField",
    "LeafField",
    "parse_fields",
    "Integration",
    "default_integrations",
    "INTAKE_FIELD_IDS",
    "POC",
    "Checklists",
    "IntakeFields",
    "Progress",
    "Project",
    "ProjectCreate",
    "ProjectStatus",
    "ProjectSummary",
    "ProjectUpdate",
    "PublishingStatus",
]
