"""Tests for the missing-information email draft."""

from handover.checklists import generate_missing_info_email
from handover.schemas import Project, default_checklist_config

COMPLETE_LAUNCH = {
    "androidDeveloperAccount": True,
    "iosDeveloperAccount": True,
    "firebaseAccess": True,
    "metaDeveloperAccess": True,
    "dataClarityProvided": True,
    "integrationsCredentials": ["razorpay key"],
    "storeListingDetails": "Listing copy",
    "keystoreFiles": "https://drive.example.com/keystore",
}

COMPLETE_SALES = {
    "brandName": "Acme",
    "collabCode": "COLLAB-1",
    "designRefs": ["https://figma.example.com"],
    "additionalDocs": ["https://docs.example.com/prd"],
    "paymentConfirmation": True,
    "planDetails": "Pro",
    "releaseType": "Migration",
    "dunsStatus": "Completed",
    "poc": {"name": "Ada", "email": "ada@acme.example", "phone": "123"},
}


def make_project(sales=None, launch=None, **kwargs) -> Project:
    return Project.model_validate(
        {
            "id": "p1",
            "brandName": "Acme",
            "checklists": {"sales": sales or {}, "launch": launch or {}},
            **kwargs,
        }
    )


def section_ids(email) -> list[str]:
    return [section.id for section in email.sections]


def test_everything_provided_only_mentions_migration():
    email = generate_missing_info_email(
        make_project(COMPLETE_SALES, COMPLETE_LAUNCH), default_checklist_config()
    )

    assert section_ids(email) == ["greeting", "migration", "closing"]
    assert email.to == "ada@acme.example"
    assert email.subject == "[Action Required] Missing Info for Your App Launch – Acme"
    assert email.sections[0].body.startswith("Hi Ada,")


def test_empty_project_lists_every_missing_section():
    email = generate_missing_info_email(make_project(), default_checklist_config())

    assert section_ids(email) == [
        "greeting",
        "developer-accounts",
        "integrations",
        "sales-fields",
        "launch-items",
        "closing",
    ]
    assert email.to == ""
    assert email.sections[0].body.startswith("Hi there,")
    assert "Integration credentials and API keys" in email.full_body


def test_fresh_release_without_keystore_asks_for_store_assets():
    sales = {**COMPLETE_SALES, "releaseType": "Fresh"}
    launch = {**COMPLETE_LAUNCH, "keystoreFiles": ""}

    email = generate_missing_info_email(make_project(sales, launch), default_checklist_config())

    assert section_ids(email) == ["greeting", "fresh-keystore", "closing"]


def test_pending_duns_flags_ios_account():
    sales = {**COMPLETE_SALES, "dunsStatus": "Pending"}

    email = generate_missing_info_email(
        make_project(sales, COMPLETE_LAUNCH), default_checklist_config()
    )
    accounts = next(s for s in email.sections if s.id == "developer-accounts")

    assert "iOS Developer Account" in accounts.body
    assert "Android Developer Account" not in accounts.body


def test_payment_confirmation_only_requested_with_plan_details():
    sales = {**COMPLETE_SALES, "paymentConfirmation": False}
    email = generate_missing_info_email(
        make_project(sales, COMPLETE_LAUNCH), default_checklist_config()
    )
    assert "• Payment confirmation" in email.full_body

    sales = {**sales, "planDetails": ""}
    email = generate_missing_info_email(
        make_project(sales, COMPLETE_LAUNCH), default_checklist_config()
    )
    assert "sales-fields" not in section_ids(email)


def test_falls_back_to_project_intake_fields():
    project = make_project(
        {},
        COMPLETE_LAUNCH,
        collabCode="COLLAB-9",
        designRefs=["ref"],
        additionalDocs=["doc"],
        releaseType="migration",
        poc={"name": "Grace", "email": "grace@example.com"},
    )

    email = generate_missing_info_email(project, default_checklist_config())

    assert "sales-fields" not in section_ids(email)
    assert email.to == "grace@example.com"
    assert email.sections[0].body.startswith("Hi Grace,")


def test_titled_sections_are_underlined_and_signed():
    email = generate_missing_info_email(
        make_project(), default_checklist_config(), user_name="Sam"
    )

    assert "Developer Account Status\n========================\n\n" in email.full_body
    assert email.full_body.endswith("Best,\nSam\nAppmaker Team")
