"""Search form state and the wire query built from it."""

from datetime import date

from pydantic import BaseModel

from docvault.models.tags import TagRecord, TagSet
from docvault.models.taxonomy import CategorySelection

WIRE_DATE_FORMAT = "%d-%m-%Y"


def format_wire_date(value: date) -> str:
    """Formats a date as dd-MM-yyyy, the only date format the API accepts."""
    return value.strftime(WIRE_DATE_FORMAT)


class SearchFilters:
    """Editable search filters. Every field is optional."""

    def __init__(self) -> None:
        self.category = CategorySelection()
        self.from_date: date | None = None
        self.to_date: date | None = None
        self.tags = TagSet()

    def clear(self) -> None:
        self.category.clear()
        self.from_date = None
        self.to_date = None
        self.tags.clear()


class SearchQuery(BaseModel):
    """
    Search request as sent to the API.

    Fields left as None are "not specified" and are omitted from the payload.
    """

    major_head: str | None = None
    minor_head: str | None = None
    from_date: str | None = None
    to_date: str | None = None
    tags: list[TagRecord] | None = None
    user_id: str

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)
