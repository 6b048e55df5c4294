"""Checklist engine: progress scoring, flattening, versions and drafts."""

from .carry_forward import carry_forward_integrations
from .dashboard import filter_projects, summarize_projects
from .email import generate_missing_info_email
from .flatten import checklist_status, flatten_fields
from .progress import compute_progress, overall_progress
from .report import render_markdown_report
from .versions import (
    VersionError,
    VersionReconciliation,
    next_version,
    reconcile_version_history,
    remove_version,
    version_snapshot,
)

__all__ = [
    "carry_forward_integrations",
    "filter_projects",
    "summarize_projects",
    "generate_missing_info_email",
    "checklist_status",
    "flatten_fields",
    "compute_progress",
    "overall_progress",
    "render_markdown_report",
    "VersionError",
    "VersionReconciliation",
    "next_version",
    "reconcile_version_history",
    "remove_version",
    "version_snapshot",
]
