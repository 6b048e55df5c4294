"""Checklist field schema.

A checklist schema is an ordered list of ``FieldConfig`` nodes. Leaves are
form inputs; a ``GroupField`` bundles leaves under one answer sub-map. Only
one nesting level exists: a group can hold leaves, never another group.
"""

from typing import Annotated, Any, Literal

from pydantic import Field, TypeAdapter

from .base import DocumentModel

LeafType = Literal[
    "text",
    "textarea",
    "url",
    "checkbox",
    "select",
    "multi_input",
    "multi_select",
]

# Field types whose answer is a list of entries
LIST_TYPES = frozenset({"multi_input", "multi_select"})


class BaseField(DocumentModel):
    id: str = Field(..., min_length=1, description="Answer key, unique within its level")
    label: str = ""
    optional: bool = False
    required: bool | None = Field(
        default=None,
        description="Explicit True takes precedence over optional",
    )
    placeholder: str | None = None
    subtext: str | None = None

    @property
    def is_required(self) -> bool:
        """Whether the field counts towards progress."""
        if self.required is True:
            return True
        return not self.optional


class LeafField(BaseField):
    """A single form input."""

    type: LeafType
    options: list[str] = Field(default_factory=list)
    options_source: Literal["integrations", "static"] | None = Field(
        default=None,
        description="Where a multi_select takes its options from",
    )
    requirements_field_id: str | None = Field(
        default=None,
        description="Field filled with the requirements of selected integrations",
    )
    has_version: bool = False
    has_status: bool = False


class GroupField(BaseField):
    """Named bundle of leaf fields stored as ``answers[group.id][leaf.id]``."""

    type: Literal["group"]
    fields: list[LeafField] = Field(..., min_length=1)


FieldConfig = Annotated[LeafField | GroupField, Field(discriminator="type")]

_fields_adapter = TypeAdapter(list[FieldConfig])


def parse_fields(raw: list) -> list[LeafField | GroupField]:
    """Validate a list of field definitions, passing through parsed models."""
    if all(isinstance(item, LeafField | GroupField) for item in raw):
        return list(raw)
    return _fields_adapter.validate_python(
        [item.to_document() if isinstance(item, DocumentModel) else item for item in raw]
    )


class FlattenedField(LeafField):
    """A leaf field as listed in status views, tagged with its parent group."""

    group_id: str | None = None
    group_label: str | None = None
    is_sub_field: bool = False


class FieldStatus(DocumentModel):
    """A flattened field with its stored answer."""

    field: FlattenedField
    value: Any = None
    completed: bool
    not_relevant: bool = False
