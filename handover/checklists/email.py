"""Draft a "missing information" follow-up email for a project."""

from collections.abc import Mapping
from typing import Any

from handover.schemas.checklist import ChecklistConfig, ChecklistKind
from handover.schemas.email import EmailSection, GeneratedEmail
from handover.schemas.fields import GroupField, LeafField
from handover.schemas.project import INTAKE_FIELD_IDS, Project

from .answers import as_mapping, coerce_answer
from .progress import is_answer_complete

DEFAULT_SENDER = "Appmaker Team"

COMPLETED_DUNS_STATES = {"completed", "not required"}


def field_value(
    project: Project, field_id: str, kind: ChecklistKind, config: ChecklistConfig
) -> Any:
    """Value of ``field_id`` from the checklist, its groups or project intake."""
    answers = project.checklists.sales if kind == "sales" else project.checklists.launch
    if field_id in answers:
        return answers[field_id]

    for field in config.fields_for(kind):
        if isinstance(field, GroupField) and any(sub.id == field_id for sub in field.fields):
            group_value = answers.get(field.id)
            if isinstance(group_value, Mapping):
                return group_value.get(field_id)

    if kind == "sales" and field_id in INTAKE_FIELD_IDS:
        value = getattr(project, INTAKE_FIELD_IDS[field_id])
        return value.to_document() if field_id == "poc" else value
    return None


def _is_missing(value: Any, field_type: str) -> bool:
    stand_in = LeafField(id="value", type=field_type)
    return not is_answer_complete(stand_in, coerce_answer(value))


def _bullets(lines: list[str]) -> str:
    return "".join(f"• {line}\n" for line in lines)


def generate_missing_info_email(
    project: Project, config: ChecklistConfig, user_name: str | None = None
) -> GeneratedEmail:
    """Build the email sections for every missing piece of information.

    The greeting and closing are always present; every other section only
    appears when something it covers is still missing.
    """

    def sales(field_id: str) -> Any:
        return field_value(project, field_id, "sales", config)

    def launch(field_id: str) -> Any:
        return field_value(project, field_id, "launch", config)

    poc = as_mapping(sales("poc"))
    poc_name = poc.get("name") or project.poc.name or "there"
    brand_name = project.brand_name or "your app"
    sender = user_name or DEFAULT_SENDER

    sections = [
        EmailSection(
            id="greeting",
            body=(
                f"Hi {poc_name},\n\nHope you're doing well. We're currently preparing the "
                f"mobile app setup for **{brand_name}**, and we need a few additional details "
                "to proceed smoothly.\n"
            ),
        )
    ]

    release_type = str(sales("releaseType") or project.release_type or "").lower()
    if release_type == "migration":
        sections.append(
            EmailSection(
                id="migration",
                title="Migration-Specific Requirements",
                body=(
                    "Since this is a migration from your existing app, we'll need:\n"
                    + _bullets(
                        [
                            "Existing app store links (Google Play & App Store)",
                            "Details of your current keystore (whether you own it or "
                            "your previous partner does)",
                            "Any constraints around signing / release management",
                        ]
                    )
                    + "\n"
                ),
            )
        )
    elif release_type == "fresh" and _is_missing(launch("keystoreFiles"), "url"):
        sections.append(
            EmailSection(
                id="fresh-keystore",
                title="New App Store Assets",
                body=(
                    "For this fresh app release, we'll need:\n"
                    + _bullets(
                        [
                            "New Play Store & App Store assets",
                            "Confirmation of Developer Account setup",
                        ]
                    )
                    + "\n"
                ),
            )
        )

    android_missing = launch("androidDeveloperAccount") is not True
    duns_status = str(sales("dunsStatus") or project.duns_status or "").lower()
    ios_missing = launch("iosDeveloperAccount") is not True or (
        duns_status != "" and duns_status not in COMPLETED_DUNS_STATES
    )
    if android_missing or ios_missing:
        body = "We need to confirm the status of your developer accounts:\n"
        if android_missing:
            body += (
                "• **Android Developer Account**: Please confirm status & share access "
                "invitation email or Play Console organization details.\n"
            )
        if ios_missing:
            body += "• **iOS Developer Account**: Please provide:\n"
            body += "  - Your Apple Developer account email\n"
            body += "  - Company legal name as registered with Apple\n"
            body += "  - Status of DUNS/Enrollment\n"
        sections.append(
            EmailSection(
                id="developer-accounts", title="Developer Account Status", body=body + "\n"
            )
        )

    firebase_missing = launch("firebaseAccess") is not True
    meta_missing = launch("metaDeveloperAccess") is not True
    has_credentials = not _is_missing(launch("integrationsCredentials"), "multi_input")
    if firebase_missing or meta_missing or not has_credentials:
        lines = []
        if firebase_missing:
            lines.append("Firebase Admin access")
        if meta_missing:
            lines.append("Meta Developer Access (Admin/Developer access required)")
        if has_credentials:
            lines.append("Additional integration credentials as needed")
        else:
            lines.append(
                "Integration credentials and API keys (e.g., Razorpay, payment gateways, etc.)"
            )
        sections.append(
            EmailSection(
                id="integrations",
                title="Integrations & Credentials",
                body="We still need access and credentials for the following:\n"
                + _bullets(lines)
                + "\n",
            )
        )

    missing_sales = []
    if _is_missing(sales("collabCode"), "text"):
        missing_sales.append("Collab request code")
    if _is_missing(sales("designRefs"), "multi_input"):
        missing_sales.append("Design references")
    if _is_missing(sales("additionalDocs"), "multi_input"):
        missing_sales.append("Additional PRD/Reference documents")
    if sales("paymentConfirmation") is not True and sales("planDetails"):
        missing_sales.append("Payment confirmation")
    if missing_sales:
        sections.append(
            EmailSection(
                id="sales-fields",
                title="Missing Sales Information",
                body="We're missing some information from the sales handover:\n"
                + _bullets(missing_sales)
                + "\n",
            )
        )

    missing_launch = []
    if launch("dataClarityProvided") is not True:
        missing_launch.append("Data Clarity documentation")
    if _is_missing(launch("storeListingDetails"), "textarea"):
        missing_launch.append("Store Listing Details")
    if missing_launch:
        sections.append(
            EmailSection(
                id="launch-items",
                title="Additional Launch Requirements",
                body="We also need:\n" + _bullets(missing_launch) + "\n",
            )
        )

    sections.append(
        EmailSection(
            id="closing",
            body=(
                "Once we have these details, we'll be able to proceed with development "
                "without delays.\n\nIf you have any questions, feel free to reply to this "
                "email or reach out to your Appmaker POC directly.\n\n"
                f"Best,\n{sender}\nAppmaker Team"
            ),
        )
    )

    return GeneratedEmail(
        to=str(poc.get("email") or project.poc.email or ""),
        subject=f"[Action Required] Missing Info for Your App Launch – {brand_name}",
        sections=sections,
        full_body=render_body(sections),
    )


def render_body(sections: list[EmailSection]) -> str:
    parts = []
    for section in sections:
        text = ""
        if section.title:
            text += f"{section.title}\n{'=' * len(section.title)}\n\n"
        parts.append(text + section.body)
    return "\n\n".join(parts)
