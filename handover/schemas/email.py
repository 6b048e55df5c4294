"""Generated email drafts."""

from .base import DocumentModel


class EmailSection(DocumentModel):
    id: str
    title: str | None = None
    body: str


class GeneratedEmail(DocumentModel):
    to: str
    subject: str
    sections: list[EmailSection]
    full_body: str
