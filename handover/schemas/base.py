"""Base model for documents stored and served with camelCase keys."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DocumentModel(BaseModel):
    """Snake_case attributes, camelCase on the wire and in the store."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_document(self, **kwargs) -> dict:
        """Dump with camelCase keys in JSON-compatible form."""
        return self.model_dump(by_alias=True, mode="json", **kwargs)
