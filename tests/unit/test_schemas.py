"""Tests for checklist and project document models."""

from pydantic import ValidationError
import pytest

from handover.schemas import (
    GroupField,
    LeafField,
    Project,
    ProjectCreate,
    default_checklist_config,
    parse_fields,
)
from handover.schemas.project import INTAKE_FIELD_IDS


class TestFieldConfig:
    def test_discriminates_on_type(self):
        fields = parse_fields(
            [
                {"id": "a", "type": "text"},
                {"id": "g", "type": "group", "fields": [{"id": "b", "type": "checkbox"}]},
            ]
        )

        assert isinstance(fields[0], LeafField)
        assert isinstance(fields[1], GroupField)
        assert fields[1].fields[0].id == "b"

    def test_groups_cannot_nest(self):
        with pytest.raises(ValidationError):
            parse_fields(
                [
                    {
                        "id": "outer",
                        "type": "group",
                        "fields": [
                            {
                                "id": "inner",
                                "type": "group",
                                "fields": [{"id": "x", "type": "text"}],
                            }
                        ],
                    }
                ]
            )

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            parse_fields([{"id": "a", "type": "slider"}])

    def test_required_overrides_optional(self):
        assert LeafField(id="a", type="text").is_required
        assert not LeafField(id="a", type="text", optional=True).is_required
        assert LeafField(id="a", type="text", optional=True, required=True).is_required

    def test_camel_case_documents(self):
        field = LeafField.model_validate({"id": "a", "type": "multi_input", "hasVersion": True})

        assert field.has_version
        assert field.to_document()["hasVersion"] is True


class TestDefaultConfig:
    def test_shape(self):
        config = default_checklist_config()

        assert len(config.sales) == 15  # noqa: PLR2004
        assert len(config.launch) == 13  # noqa: PLR2004
        assert config.sales[0].id == "brandName"

    def test_poc_group_and_optional_otp(self):
        config = default_checklist_config()
        poc = next(f for f in config.sales if f.id == "poc")
        otp = next(f for f in config.launch if f.id == "otpTestCredentials")

        assert isinstance(poc, GroupField)
        assert [sub.id for sub in poc.fields] == ["name", "email", "phone"]
        assert otp.optional

    def test_fields_for(self):
        config = default_checklist_config()

        assert config.fields_for("sales") is config.sales
        assert config.fields_for("launch") is config.launch


class TestProject:
    def test_defaults(self):
        project = Project.model_validate({"id": "p1"})

        assert project.version == 1
        assert project.status.value == "Not Started"
        assert project.publishing_status.value == "Pending"
        assert project.progress.overall == 0
        assert project.checklists.sales == {}

    def test_create_requires_brand_name(self):
        with pytest.raises(ValidationError):
            ProjectCreate.model_validate({"brandName": ""})

    def test_intake_ids_are_camel_case(self):
        assert INTAKE_FIELD_IDS["brandName"] == "brand_name"
        assert INTAKE_FIELD_IDS["storeUrlMyShopify"] == "store_url_my_shopify"
        assert INTAKE_FIELD_IDS["poc"] == "poc"


class TestLenientDocuments:
    def test_checklists_default_to_empty_maps(self):
        project = Project.model_validate({"id": "p1", "checklists": {"sales": None, "launch": []}})

        assert project.checklists.sales == {}
        assert project.checklists.launch == {}

    def test_scalars_become_text(self):
        project = Project.model_validate(
            {"id": "p1", "collabCode": 12345, "planDetails": True, "poc": {"phone": 5550100}}
        )

        assert project.collab_code == "12345"
        assert project.plan_details == "true"
        assert project.poc.phone == "5550100"

    def test_unknown_enums_and_bad_progress_fall_back(self):
        project = Project.model_validate(
            {
                "id": "p1",
                "status": "Archived",
                "publishingStatus": None,
                "version": "3",
                "progress": {"overall": 140, "salesCompletion": "half"},
            }
        )

        assert project.status.value == "Not Started"
        assert project.publishing_status.value == "Pending"
        assert project.version == 1
        assert project.progress.overall == 100  # noqa: PLR2004
        assert project.progress.sales_completion == 0
