"""Checklist configuration document and its shipped default."""

from typing import Any, Literal

from pydantic import Field

from .base import DocumentModel
from .fields import FieldConfig, FieldStatus, GroupField, LeafField

ChecklistKind = Literal["sales", "launch"]


class ChecklistConfig(DocumentModel):
    """Field schemas for both checklists."""

    version: str = "1.0.0"
    sales: list[FieldConfig] = Field(default_factory=list)
    launch: list[FieldConfig] = Field(default_factory=list)

    def fields_for(self, kind: ChecklistKind) -> list[LeafField | GroupField]:
        return self.sales if kind == "sales" else self.launch


def default_checklist_config() -> ChecklistConfig:
    """Schema used whenever no configuration has been stored."""
    return ChecklistConfig.model_validate(
        {
            "version": "1.0.0",
            "sales": [
                {"id": "brandName", "label": "Brand name", "type": "text"},
                {
                    "id": "storeUrlMyShopify",
                    "label": "Shopify store URL (myshopify)",
                    "type": "text",
                },
                {"id": "storePublicUrl", "label": "Shopify store URL (public)", "type": "text"},
                {"id": "collabCode", "label": "Collab request code", "type": "text"},
                {"id": "scopeOfWork", "label": "Scope of work", "type": "textarea"},
                {"id": "designRefs", "label": "Design references", "type": "multi_input"},
                {
                    "id": "additionalDocs",
                    "label": "Additional PRD/References",
                    "type": "multi_input",
                },
                {
                    "id": "paymentConfirmation",
                    "label": "One-time payment confirmation",
                    "type": "checkbox",
                },
                {"id": "planDetails", "label": "Plan + Revenue Share %", "type": "text"},
                {"id": "revenueShare", "label": "Revenue Share", "type": "text"},
                {"id": "gmvInfo", "label": "GMV details", "type": "textarea"},
                {
                    "id": "releaseType",
                    "label": "Fresh release or migration",
                    "type": "select",
                    "options": ["Fresh", "Migration"],
                },
                {
                    "id": "dunsStatus",
                    "label": "DUNS / Developer Account Status",
                    "type": "select",
                    "options": ["Pending", "In Progress", "Completed", "Not Required"],
                },
                {
                    "id": "themeType",
                    "label": "Theme Type",
                    "type": "select",
                    "options": ["P1", "mWeb Parity", "Custom"],
                },
                {
                    "id": "poc",
                    "label": "POC Details",
                    "type": "group",
                    "fields": [
                        {"id": "name", "label": "Name", "type": "text"},
                        {"id": "email", "label": "Email", "type": "text"},
                        {"id": "phone", "label": "Phone", "type": "text"},
                    ],
                },
            ],
            "launch": [
                {
                    "id": "androidDeveloperAccount",
                    "label": "Android Developer Account",
                    "type": "checkbox",
                },
                {"id": "iosDeveloperAccount", "label": "iOS Developer Account", "type": "checkbox"},
                {"id": "firebaseAccess", "label": "Firebase Access (Admin)", "type": "checkbox"},
                {"id": "metaDeveloperAccess", "label": "Meta Developer Access", "type": "checkbox"},
                {"id": "dataClarityProvided", "label": "Data Clarity Provided", "type": "checkbox"},
                {
                    "id": "integrationsCredentials",
                    "label": "Integrations – Credentials & Keys",
                    "type": "multi_input",
                },
                {
                    "id": "storeListingDetails",
                    "label": "Store Listing Details",
                    "type": "textarea",
                },
                {"id": "keystoreFiles", "label": "Keystore Files", "type": "url"},
                {
                    "id": "otpTestCredentials",
                    "label": "OTP Test Credentials",
                    "type": "text",
                    "optional": True,
                },
                {"id": "customFeatures", "label": "Custom Features", "type": "multi_input"},
                {"id": "changeRequests", "label": "Change Requests", "type": "multi_input"},
                {"id": "bugReports", "label": "Bug Reports (link / notes)", "type": "textarea"},
                {"id": "testCases", "label": "Test Cases (Google Sheet link)", "type": "url"},
            ],
        }
    )


class ChecklistView(DocumentModel):
    """Everything a client needs to render one checklist of a project."""

    project_id: str
    kind: ChecklistKind
    fields: list[FieldConfig]
    answers: dict[str, Any]
    status: list[FieldStatus]
    completion: int
    version: int
    version_history: list[int] = Field(default_factory=list)


class VersionHistory(DocumentModel):
    project_id: str
    version: int
    version_history: list[int]


class VersionSnapshot(DocumentModel):
    """Versioned launch items belonging to one version."""

    project_id: str
    version: int
    items: dict[str, list[Any]]


class ChecklistSave(DocumentModel):
    answers: dict[str, Any]
