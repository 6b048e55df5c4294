"""Coercion of raw stored answers into tagged values.

Answer maps come straight from the document store and follow whatever
schema was active when they were written. Everything that reads them goes
through ``coerce_answer`` so scoring code only ever sees one of the
``AnswerKind`` variants.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

NOT_RELEVANT_SUFFIX = "_notRelevant"


class AnswerKind(str, Enum):
    ABSENT = "absent"
    FLAG = "flag"
    TEXT = "text"
    ITEMS = "items"
    SECTION = "section"


@dataclass(frozen=True)
class Answer:
    kind: AnswerKind
    value: Any = None

    @property
    def is_true(self) -> bool:
        return self.kind is AnswerKind.FLAG and self.value is True

    @property
    def has_items(self) -> bool:
        return self.kind is AnswerKind.ITEMS and len(self.value) > 0

    @property
    def text(self) -> str:
        """String form used by text-like fields; False and None read as empty."""
        if self.kind is AnswerKind.TEXT:
            return self.value
        if self.kind is AnswerKind.FLAG:
            return "true" if self.value else ""
        if self.kind is AnswerKind.ITEMS:
            return ",".join("" if item is None else str(item) for item in self.value)
        if self.kind is AnswerKind.SECTION:
            return str(dict(self.value)) if self.value else ""
        return ""

    @property
    def has_text(self) -> bool:
        return self.text.strip() != ""


ABSENT = Answer(AnswerKind.ABSENT)


def coerce_answer(raw: Any) -> Answer:
    """Map a raw JSON-like value to an ``Answer``. Never raises."""
    if raw is None:
        return ABSENT
    if isinstance(raw, bool):
        return Answer(AnswerKind.FLAG, raw)
    if isinstance(raw, str):
        return Answer(AnswerKind.TEXT, raw)
    if isinstance(raw, Mapping):
        return Answer(AnswerKind.SECTION, raw)
    if isinstance(raw, list | tuple):
        return Answer(AnswerKind.ITEMS, list(raw))
    try:
        return Answer(AnswerKind.TEXT, str(raw))
    except Exception:
        return ABSENT


def as_mapping(raw: Any) -> Mapping[str, Any]:
    """Return ``raw`` when it is a mapping, else an empty one."""
    return raw if isinstance(raw, Mapping) else {}


def answer_for(answers: Any, field_id: str, group_id: str | None = None) -> Answer:
    """Look up ``answers[field_id]`` or ``answers[group_id][field_id]``."""
    container = as_mapping(answers)
    if group_id is not None:
        container = as_mapping(container.get(group_id))
    return coerce_answer(container.get(field_id))


def is_marked_not_relevant(container: Any, field_id: str) -> bool:
    return as_mapping(container).get(f"{field_id}{NOT_RELEVANT_SUFFIX}") is True
