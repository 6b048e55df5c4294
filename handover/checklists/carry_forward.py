"""Read-time defaults copied from the sales checklist into the launch one."""

from collections.abc import Mapping
import copy
from typing import Any

from .answers import as_mapping

INTEGRATIONS_FIELD = "integrations"


def _integrations_list(answers: Mapping[str, Any]) -> tuple[list | None, bool]:
    """Return (integrations, nested) for either the top-level or group form."""
    raw = answers.get(INTEGRATIONS_FIELD)
    if isinstance(raw, list):
        return raw, False
    if isinstance(raw, Mapping) and isinstance(raw.get(INTEGRATIONS_FIELD), list):
        return raw[INTEGRATIONS_FIELD], True
    return None, isinstance(raw, Mapping)


def carry_forward_integrations(
    sales_answers: Mapping[str, Any] | None,
    launch_answers: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """Launch answers with the sales integrations filled in when launch has none.

    Sales stores integrations either as ``integrations: [...]`` or inside the
    ``integrations`` group as ``integrations: {integrations: [...]}``; the
    copy lands at the same location in the launch map. Neither input is
    modified and nothing recorded on the launch side is overwritten.
    """
    launch = copy.deepcopy(dict(as_mapping(launch_answers)))
    sales_items, sales_nested = _integrations_list(as_mapping(sales_answers))
    if not sales_items:
        return launch

    launch_items, launch_nested = _integrations_list(launch)
    if launch_items:
        return launch

    items = copy.deepcopy(sales_items)
    if sales_nested or launch_nested:
        group = dict(as_mapping(launch.get(INTEGRATIONS_FIELD)))
        group[INTEGRATIONS_FIELD] = items
        launch[INTEGRATIONS_FIELD] = group
    else:
        launch[INTEGRATIONS_FIELD] = items
    return launch
