"""Markdown handover report."""

from collections.abc import Mapping
from datetime import date
from typing import Any

from handover.schemas.checklist import ChecklistConfig, ChecklistKind
from handover.schemas.fields import GroupField, LeafField
from handover.schemas.project import Project

from .email import field_value

NOT_PROVIDED = "Not provided"


def format_field_value(value: Any, field: LeafField | GroupField) -> str:
    """Human-readable rendering of a stored answer."""
    if value is None or value == "":
        return NOT_PROVIDED

    if field.type == "checkbox":
        return "Yes" if value else "No"
    if field.type in ("multi_input", "multi_select"):
        if isinstance(value, list) and value:
            return "\n".join(f"• {_item_text(item)}" for item in value)
        return "None"
    if isinstance(field, GroupField):
        if not isinstance(value, Mapping):
            return NOT_PROVIDED
        return "\n".join(f"{sub.label}: {value.get(sub.id) or 'N/A'}" for sub in field.fields)
    return str(value)


def _item_text(item: Any) -> str:
    # Versioned entries are stored as {"value": ..., "version": n}
    if isinstance(item, Mapping) and "value" in item:
        return f"{item['value']} (v{item.get('version', 1)})"
    return str(item)


def _table_cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", "<br>")


def _checklist_table(project: Project, config: ChecklistConfig, kind: ChecklistKind) -> str:
    lines = ["| Field | Value |", "|-------|-------|"]
    for field in config.fields_for(kind):
        value = field_value(project, field.id, kind, config)
        cell = _table_cell(format_field_value(value, field))
        lines.append(f"| {_table_cell(field.label)} | {cell} |")
    return "\n".join(lines) + "\n"


def render_markdown_report(
    project: Project, config: ChecklistConfig, generated_on: date | None = None
) -> str:
    generated_on = generated_on or date.today()
    progress = project.progress
    return (
        "# Handover Report\n\n"
        f"**Project:** {project.brand_name}\n"
        f"**Generated:** {generated_on.strftime('%B')} {generated_on.day}, {generated_on.year}\n\n"
        "---\n\n"
        "## Progress Summary\n\n"
        "| Metric | Completion |\n"
        "|--------|------------|\n"
        f"| Sales Progress | {progress.sales_completion}% |\n"
        f"| Launch Progress | {progress.launch_completion}% |\n"
        f"| Overall Progress | {progress.overall}% |\n\n"
        "## Sales Handover Information\n\n"
        f"{_checklist_table(project, config, 'sales')}"
        "\n## Launch Checklist\n\n"
        f"{_checklist_table(project, config, 'launch')}"
    )
