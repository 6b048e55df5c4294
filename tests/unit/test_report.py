"""Tests for the Markdown handover report."""

from datetime import date

from handover.checklists import render_markdown_report
from handover.checklists.report import format_field_value
from handover.schemas import GroupField, LeafField, Project, default_checklist_config


def test_format_field_value_by_type():
    checkbox = LeafField(id="c", type="checkbox")
    multi = LeafField(id="m", type="multi_input")
    group = GroupField(
        id="poc",
        type="group",
        fields=[
            LeafField(id="name", label="Name", type="text"),
            LeafField(id="email", label="Email", type="text"),
        ],
    )

    assert format_field_value(True, checkbox) == "Yes"
    assert format_field_value(False, checkbox) == "No"
    assert format_field_value(None, checkbox) == "Not provided"
    assert format_field_value(["a", {"value": "b", "version": 2}], multi) == "• a\n• b (v2)"
    assert format_field_value([], multi) == "None"
    assert format_field_value({"name": "Ada"}, group) == "Name: Ada\nEmail: N/A"
    assert format_field_value("x", group) == "Not provided"


def test_report_contains_progress_and_escaped_tables():
    project = Project.model_validate(
        {
            "id": "p1",
            "brandName": "Acme",
            "progress": {"salesCompletion": 40, "launchCompletion": 10, "overall": 25},
            "checklists": {
                "sales": {"scopeOfWork": "Line one\nA | B"},
                "launch": {"androidDeveloperAccount": True},
            },
        }
    )

    report = render_markdown_report(project, default_checklist_config(), date(2024, 3, 5))

    assert report.startswith("# Handover Report\n\n**Project:** Acme\n**Generated:** March 5, 2024")
    assert "| Overall Progress | 25% |" in report
    assert "| Scope of work | Line one<br>A \\| B |" in report
    assert "| Android Developer Account | Yes |" in report
    assert "| POC Details | Name: N/A<br>Email: N/A<br>Phone: N/A |" in report
    assert "| Keystore Files | Not provided |" in report


def test_labels_are_escaped():
    config = default_checklist_config()
    config.sales[0] = LeafField(id="brandName", label="Brand | Store\nname", type="text")
    project = Project.model_validate({"id": "p1", "brandName": "Acme"})

    report = render_markdown_report(project, config, date(2024, 3, 5))

    assert "| Brand \\| Store<br>name | Acme |" in report
