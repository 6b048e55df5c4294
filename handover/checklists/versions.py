"""Version history of iterative launch deliverables.

Launch items (custom features, change requests, integration credentials...)
are tagged with the project version they belong to. Projects created before
version tracking have no ``versionHistory``; it is rebuilt from the version
markers embedded in the launch answers.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .answers import as_mapping

# Top-level launch fields holding lists of versioned records
VERSIONED_FIELDS: tuple[str, ...] = (
    "integrationsCredentials",
    "customFeatures",
    "changeRequests",
)

# (group id, field id) pairs holding lists of versioned records
VERSIONED_GROUP_FIELDS: tuple[tuple[str, str], ...] = (
    ("developmentItems", "customFeatures"),
    ("developmentItems", "changeRequests"),
    ("integrations", "integrations"),
    ("additionalInformation", "devComments"),
    ("additionalInformation", "externalCommunications"),
    ("additionalInformation", "remarks"),
)

# Per-integration version overrides: integrations.integrations_versions
VERSION_MAP_GROUP = "integrations"
VERSION_MAP_FIELD = "integrations_versions"

DEFAULT_VERSION = 1


class VersionError(ValueError):
    """A version operation that the current project state does not allow."""


@dataclass(frozen=True)
class VersionReconciliation:
    history: list[int]
    needs_repair: bool


def _as_version(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= DEFAULT_VERSION else None


def _record_versions(items: Any) -> Iterable[int]:
    if not isinstance(items, list):
        return
    for item in items:
        if isinstance(item, Mapping):
            version = _as_version(item.get("version"))
            if version is not None:
                yield version


def _versioned_lists(launch_answers: Mapping[str, Any]) -> Iterable[tuple[str, Any]]:
    for field_id in VERSIONED_FIELDS:
        yield field_id, launch_answers.get(field_id)
    for group_id, field_id in VERSIONED_GROUP_FIELDS:
        yield f"{group_id}.{field_id}", as_mapping(launch_answers.get(group_id)).get(field_id)


def embedded_versions(launch_answers: Mapping[str, Any] | None) -> set[int]:
    """Every version number recorded inside the launch answers."""
    launch_answers = as_mapping(launch_answers)
    found: set[int] = set()
    for _path, items in _versioned_lists(launch_answers):
        found.update(_record_versions(items))

    overrides = as_mapping(as_mapping(launch_answers.get(VERSION_MAP_GROUP)).get(VERSION_MAP_FIELD))
    for value in overrides.values():
        version = _as_version(value)
        if version is not None:
            found.add(version)
    return found


def reconcile_version_history(
    version: int,
    launch_answers: Mapping[str, Any] | None,
    history: Sequence[int] | None = None,
) -> VersionReconciliation:
    """Authoritative, ascending version history for a project.

    Contains every known version, 1, the current version, and every integer
    from 1 to the current version. ``needs_repair`` is set when the stored
    history was missing or empty and the result should be written back.
    """
    current = _as_version(version) or DEFAULT_VERSION
    stored = [v for v in (history or []) if _as_version(v) is not None]
    needs_repair = not history

    versions = set(stored)
    versions.update(embedded_versions(launch_answers))
    versions.update({DEFAULT_VERSION, current})
    # Dense up to the current version even where no data was ever tagged
    versions.update(range(DEFAULT_VERSION, current + 1))
    return VersionReconciliation(history=sorted(versions), needs_repair=needs_repair)


def item_version(item: Any) -> int:
    """Version of a list entry; plain strings predate versioning."""
    if isinstance(item, Mapping):
        return _as_version(item.get("version")) or DEFAULT_VERSION
    return DEFAULT_VERSION


def filter_items_by_version(items: Any, version: int) -> list[Any]:
    if not isinstance(items, list):
        return []
    return [item for item in items if item_version(item) == version]


def filter_keys_by_version(
    keys: Any, versions_map: Mapping[str, Any] | None, version: int
) -> list[Any]:
    """Integration ids whose mapped version (default 1) equals ``version``."""
    if not isinstance(keys, list):
        return []
    versions_map = as_mapping(versions_map)
    return [
        key
        for key in keys
        if (_as_version(versions_map.get(key)) or DEFAULT_VERSION) == version
    ]


def version_snapshot(launch_answers: Mapping[str, Any] | None, version: int) -> dict[str, list]:
    """Versioned launch lists restricted to a single version, keyed by path.

    ``integrations.integrations`` may hold plain integration ids whose version
    lives in the ``integrations_versions`` map; both forms are handled.
    """
    launch_answers = as_mapping(launch_answers)
    snapshot: dict[str, list] = {}
    for path, items in _versioned_lists(launch_answers):
        if not isinstance(items, list):
            continue
        if path == f"{VERSION_MAP_GROUP}.integrations":
            overrides = as_mapping(launch_answers.get(VERSION_MAP_GROUP)).get(VERSION_MAP_FIELD)
            keys = [item for item in items if not isinstance(item, Mapping)]
            records = [item for item in items if isinstance(item, Mapping)]
            snapshot[path] = filter_keys_by_version(keys, overrides, version)
            snapshot[path] += filter_items_by_version(records, version)
        else:
            snapshot[path] = filter_items_by_version(items, version)
    return snapshot


def remove_version(history: Sequence[int], version: int, current: int) -> list[int]:
    """Drop ``version`` from the history. Data tagged with it is kept."""
    if version == current:
        raise VersionError(f"Cannot remove the current version {current}")
    remaining = sorted({v for v in history if v != version})
    return remaining or [DEFAULT_VERSION]


def next_version(history: Sequence[int], current: int, publishing_status: str) -> int:
    """Number of the next iteration; only a live app can start one."""
    if publishing_status != "Live":
        raise VersionError("A new version can only be started once the app is Live")
    return max([*history, current]) + 1
