"""Upload form state and the metadata block sent alongside the file."""

import mimetypes
from datetime import date
from pathlib import Path

from pydantic import BaseModel

from docvault.models.errors import ValidationError
from docvault.models.tags import TagRecord, TagSet
from docvault.models.taxonomy import CategorySelection

ALLOWED_MIME_TYPES: tuple[str, ...] = ("application/pdf", "image/png", "image/jpeg")

# browsers occasionally report JPEGs as image/jpg
_MIME_ALIASES = {"image/jpg": "image/jpeg"}


def normalize_mime_type(mime_type: str | None) -> str:
    value = (mime_type or "").strip().lower()
    return _MIME_ALIASES.get(value, value)


def check_mime_type(mime_type: str | None) -> str:
    """
    Returns the normalized MIME type if it may be uploaded.

    Raises:
        ValidationError: If the type is not PDF, PNG or JPEG.
    """
    normalized = normalize_mime_type(mime_type)
    if normalized not in ALLOWED_MIME_TYPES:
        raise ValidationError(
            f"Invalid file type '{mime_type or 'unknown'}'. Only PDF and image files (PNG, JPG, JPEG) are allowed."
        )
    return normalized


class UploadFile(BaseModel):
    """A file selected for upload."""

    file_name: str
    content: bytes
    mime_type: str

    @classmethod
    def from_path(cls, path: str | Path, mime_type: str | None = None) -> "UploadFile":
        """
        Reads a file from disk, guessing its MIME type from the extension when not given.
        """
        path = Path(path)
        if mime_type is None:
            mime_type, _ = mimetypes.guess_type(path.name)
        return cls(file_name=path.name, content=path.read_bytes(), mime_type=mime_type or "application/octet-stream")


class UploadCandidate:
    """
    Upload form state. Survives a failed submission so the user can retry.
    """

    def __init__(self) -> None:
        self.file: UploadFile | None = None
        self.document_date: date | None = None
        self.category = CategorySelection()
        self.tags = TagSet()
        self.remarks: str = ""

    def select_file(self, file: UploadFile) -> None:
        """
        Attaches a file, rejecting disallowed types before anything else is filled in.

        Raises:
            ValidationError: If the file type is not allowed. The previous file is kept.
        """
        mime_type = check_mime_type(file.mime_type)
        self.file = file.model_copy(update={"mime_type": mime_type})

    def reset(self) -> None:
        self.file = None
        self.document_date = None
        self.category.clear()
        self.tags.clear()
        self.remarks = ""


class UploadMetadata(BaseModel):
    """JSON block sent in the "data" part of the multipart upload."""

    major_head: str
    minor_head: str
    document_date: str
    document_remarks: str = ""
    tags: list[TagRecord] = []
    user_id: str


class UploadResult(BaseModel):
    success: bool
    message: str | None = None
