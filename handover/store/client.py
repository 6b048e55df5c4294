"""Redis-backed document store for projects and settings.

Every document is a JSON string under its own key:

    {prefix}:project:{id}           project document (camelCase keys)
    {prefix}:projects               sorted set of project ids by creation time
    {prefix}:settings:checklist     checklist configuration
    {prefix}:settings:integrations  integrations catalogue

Writes are last-write-wins shallow merges of top-level keys.
"""

from datetime import UTC, datetime
import json
from typing import Any
import uuid

from pydantic import TypeAdapter, ValidationError
import redis.asyncio as redis
import structlog

from handover.schemas.checklist import ChecklistConfig, default_checklist_config
from handover.schemas.integrations import Integration, default_integrations
from handover.schemas.project import ProjectStatus

logger = structlog.get_logger(__name__)

_integrations_adapter = TypeAdapter(list[Integration])


class StoreError(RuntimeError):
    """The document store could not complete an operation."""


class ProjectNotFoundError(LookupError):
    """Update of a project that does not exist."""

    def __init__(self, project_id: str):
        super().__init__(f"Project {project_id} not found")
        self.project_id = project_id


def _now() -> str:
    return datetime.now(UTC).isoformat()


class ChecklistStore:
    """Async document store over a Redis connection."""

    def __init__(self, client: redis.Redis, key_prefix: str = "handover"):
        self._redis = client
        self.key_prefix = key_prefix

    @classmethod
    def from_url(
        cls, redis_url: str, key_prefix: str = "handover", timeout: float | None = None
    ) -> "ChecklistStore":
        """Create a store with its own connection pool."""
        client = redis.from_url(
            redis_url,
            decode_responses=True,
            socket_timeout=timeout,
            socket_connect_timeout=timeout,
        )
        logger.info("store_connected", redis_url=redis_url, key_prefix=key_prefix)
        return cls(client, key_prefix=key_prefix)

    async def close(self) -> None:
        await self._redis.aclose()
        logger.info("store_connection_closed")

    # === Keys ===

    def _project_key(self, project_id: str) -> str:
        return f"{self.key_prefix}:project:{project_id}"

    @property
    def _index_key(self) -> str:
        return f"{self.key_prefix}:projects"

    @property
    def _checklist_key(self) -> str:
        return f"{self.key_prefix}:settings:checklist"

    @property
    def _integrations_key(self) -> str:
        return f"{self.key_prefix}:settings:integrations"

    # === Raw document access ===

    async def _read(self, key: str) -> dict[str, Any] | None:
        try:
            raw = await self._redis.get(key)
        except redis.RedisError as e:
            logger.error("store_read_failed", key=key, error=str(e))
            raise StoreError(f"Failed to read {key}: {e}") from e
        if raw is None:
            return None
        try:
            document = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("store_document_corrupt", key=key, error=str(e))
            raise StoreError(f"Corrupt document at {key}") from e
        return document if isinstance(document, dict) else None

    async def _write(self, key: str, document: dict[str, Any]) -> None:
        try:
            await self._redis.set(key, json.dumps(document))
        except redis.RedisError as e:
            logger.error("store_write_failed", key=key, error=str(e))
            raise StoreError(f"Failed to write {key}: {e}") from e

    # === Projects ===

    async def get_project(self, project_id: str) -> dict[str, Any] | None:
        document = await self._read(self._project_key(project_id))
        if document is None:
            return None
        return {**document, "id": project_id}

    async def list_projects(self) -> list[dict[str, Any]]:
        """All projects, newest first."""
        try:
            project_ids = await self._redis.zrevrange(self._index_key, 0, -1)
        except redis.RedisError as e:
            logger.error("store_list_failed", error=str(e))
            raise StoreError(f"Failed to list projects: {e}") from e

        projects = []
        for project_id in project_ids:
            project = await self.get_project(project_id)
            if project is None:
                logger.warning("store_index_stale", project_id=project_id)
                continue
            projects.append(project)
        return projects

    async def create_project(self, fields: dict[str, Any]) -> str:
        project_id = uuid.uuid4().hex
        now = datetime.now(UTC)
        document = {
            **fields,
            "status": fields.get("status") or ProjectStatus.NOT_STARTED.value,
            "version": fields.get("version") or 1,
            "progress": {"salesCompletion": 0, "launchCompletion": 0, "overall": 0},
            "createdAt": now.isoformat(),
            "updatedAt": now.isoformat(),
        }
        document.pop("id", None)
        await self._write(self._project_key(project_id), document)
        try:
            await self._redis.zadd(self._index_key, {project_id: now.timestamp()})
        except redis.RedisError as e:
            logger.error("store_index_failed", project_id=project_id, error=str(e))
            raise StoreError(f"Failed to index project {project_id}: {e}") from e

        logger.info("project_document_created", project_id=project_id)
        return project_id

    async def update_project(self, project_id: str, updates: dict[str, Any]) -> None:
        key = self._project_key(project_id)
        document = await self._read(key)
        if document is None:
            raise ProjectNotFoundError(project_id)

        document.update({k: v for k, v in updates.items() if k != "id"})
        document["updatedAt"] = _now()
        await self._write(key, document)
        logger.debug("project_document_updated", project_id=project_id, keys=sorted(updates))

    async def delete_project(self, project_id: str) -> None:
        try:
            await self._redis.delete(self._project_key(project_id))
            await self._redis.zrem(self._index_key, project_id)
        except redis.RedisError as e:
            logger.error("store_delete_failed", project_id=project_id, error=str(e))
            raise StoreError(f"Failed to delete project {project_id}: {e}") from e
        logger.info("project_document_deleted", project_id=project_id)

    # === Settings ===

    async def get_checklist_config(self) -> ChecklistConfig:
        """Stored checklist configuration, or the shipped default."""
        document = await self._read(self._checklist_key)
        if document is None:
            return default_checklist_config()
        try:
            return ChecklistConfig.model_validate(document)
        except ValidationError as e:
            logger.error("checklist_config_invalid", errors=e.error_count())
            return default_checklist_config()

    async def update_checklist_config(self, config: ChecklistConfig) -> None:
        document = await self._read(self._checklist_key) or {}
        document.update(config.to_document(exclude_none=True))
        await self._write(self._checklist_key, document)
        logger.info(
            "checklist_config_updated",
            version=config.version,
            sales_fields=len(config.sales),
            launch_fields=len(config.launch),
        )

    async def get_integrations(self) -> list[Integration]:
        """Stored integrations catalogue, or the shipped default when none is saved."""
        document = await self._read(self._integrations_key) or {}
        raw = document.get("integrations")
        if not isinstance(raw, list) or not raw:
            return default_integrations()
        try:
            return _integrations_adapter.validate_python(raw)
        except ValidationError as e:
            logger.error("integrations_invalid", errors=e.error_count())
            return default_integrations()

    async def update_integrations(self, integrations: list[Integration]) -> None:
        document = await self._read(self._integrations_key) or {}
        document["integrations"] = [integration.to_document() for integration in integrations]
        await self._write(self._integrations_key, document)
        logger.info("integrations_updated", count=len(integrations))
