"""Pydantic models for documents returned by the vault API."""

from pydantic import BaseModel, field_validator


class DocumentRecord(BaseModel):
    """
    A stored document with its metadata, as returned by a search.

    Read-only on the client side. file_path is the URL used for preview and
    download.
    """

    document_id: str
    document_name: str | None = None
    major_head: str | None = None
    minor_head: str | None = None
    document_date: str | None = None
    document_remarks: str | None = None
    tags: list[str] = []
    file_path: str

    @field_validator("document_id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        # some backends send numeric ids
        return str(value) if isinstance(value, int) else value

    @field_validator("tags", mode="before")
    @classmethod
    def _flatten_tags(cls, value):
        if value is None:
            return []
        if not isinstance(value, list):
            return value
        flattened = []
        for tag in value:
            if isinstance(tag, dict):
                flattened.append(tag.get("tag_name"))
            else:
                flattened.append(tag)
        return flattened

    def is_pdf(self) -> bool:
        """Whether the file should be previewed as a PDF rather than an image."""
        return self.file_path.lower().split("?", 1)[0].endswith(".pdf")


class SearchOutcome(BaseModel):
    """
    Result of a document search.

    no_matches is set when the server answered successfully but returned no
    usable documents, which is distinct from a failed search.
    """

    documents: list[DocumentRecord] = []
    no_matches: bool = False
