"""Checklist completion scoring."""

from collections.abc import Iterable, Mapping, Sequence
import math
from typing import Any

from handover.schemas.fields import LIST_TYPES, GroupField, LeafField, parse_fields

from .answers import Answer, answer_for, as_mapping, is_marked_not_relevant


def is_answer_complete(field: LeafField, answer: Answer) -> bool:
    """Completion rule for a single leaf field."""
    if field.type == "checkbox":
        return answer.is_true
    if field.type in LIST_TYPES:
        return answer.has_items
    return answer.has_text


def round_percent(completed: int, total: int) -> int:
    """Percentage rounded half up; 0 for an empty denominator."""
    if total <= 0:
        return 0
    return math.floor(100 * completed / total + 0.5)


def _scored_units(
    answers: Mapping[str, Any], fields: Iterable[LeafField | GroupField]
) -> Iterable[tuple[LeafField, Answer]]:
    for field in fields:
        if is_marked_not_relevant(answers, field.id):
            continue
        if isinstance(field, GroupField):
            group_answers = as_mapping(answers.get(field.id))
            for sub_field in field.fields:
                if not sub_field.is_required:
                    continue
                if is_marked_not_relevant(group_answers, sub_field.id):
                    continue
                yield sub_field, answer_for(answers, sub_field.id, group_id=field.id)
        elif field.is_required:
            yield field, answer_for(answers, field.id)


def compute_progress(
    answers: Mapping[str, Any] | None,
    fields: Sequence[LeafField | GroupField | Mapping[str, Any]],
    require_checks: bool = False,
) -> int:
    """Percentage (0-100) of required fields with a complete answer.

    Group fields contribute one unit per required sub-field, each read from
    the group's own sub-map. Optional fields, and fields the answer map marks
    ``<id>_notRelevant``, count towards neither side. ``require_checks`` is
    passed as True for the launch checklist; scoring does not depend on it.
    """
    answers = as_mapping(answers)
    completed = 0
    total = 0
    for field, answer in _scored_units(answers, parse_fields(list(fields))):
        total += 1
        if is_answer_complete(field, answer):
            completed += 1
    return round_percent(completed, total)


def overall_progress(sales_completion: int, launch_completion: int) -> int:
    return math.floor((sales_completion + launch_completion) / 2 + 0.5)
