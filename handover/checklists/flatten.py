"""Expand grouped fields into a flat list for status views."""

from collections.abc import Mapping, Sequence
from typing import Any

from handover.schemas.fields import (
    FieldStatus,
    FlattenedField,
    GroupField,
    LeafField,
    parse_fields,
)

from .answers import answer_for, as_mapping, is_marked_not_relevant
from .progress import is_answer_complete


def flatten_fields(
    fields: Sequence[LeafField | GroupField | Mapping[str, Any]],
) -> list[FlattenedField]:
    """One entry per leaf, in schema order; sub-fields carry their group."""
    flattened: list[FlattenedField] = []
    for field in parse_fields(list(fields)):
        if isinstance(field, GroupField):
            for sub_field in field.fields:
                flattened.append(
                    FlattenedField(
                        **sub_field.model_dump(),
                        group_id=field.id,
                        group_label=field.label,
                        is_sub_field=True,
                    )
                )
        else:
            flattened.append(FlattenedField(**field.model_dump()))
    return flattened


def checklist_status(
    answers: Mapping[str, Any] | None,
    fields: Sequence[LeafField | GroupField | Mapping[str, Any]],
) -> list[FieldStatus]:
    """Pair every flattened field with its stored value and completion."""
    answers = as_mapping(answers)
    rows: list[FieldStatus] = []
    for field in flatten_fields(fields):
        container = as_mapping(answers.get(field.group_id)) if field.is_sub_field else answers
        answer = answer_for(answers, field.id, group_id=field.group_id)
        rows.append(
            FieldStatus(
                field=field,
                value=container.get(field.id),
                completed=is_answer_complete(field, answer),
                not_relevant=is_marked_not_relevant(container, field.id)
                or (field.is_sub_field and is_marked_not_relevant(answers, field.group_id)),
            )
        )
    return rows
