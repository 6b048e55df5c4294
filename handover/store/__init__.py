from .client import ChecklistStore, ProjectNotFoundError, StoreError

__all__ = ["ChecklistStore", "ProjectNotFoundError", "StoreError"]
