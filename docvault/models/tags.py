"""Ordered, duplicate-free tag collection shared by the upload and search forms."""

from typing import Iterator

from pydantic import BaseModel


class TagRecord(BaseModel):
    """Wire representation of a single tag."""

    tag_name: str


class TagSet:
    """
    Free-text labels with set semantics and insertion order.

    Tags are compared by exact, case-sensitive string equality after trimming.
    Neither add() nor remove() ever raises.
    """

    def __init__(self, tags: list[str] | None = None) -> None:
        self._tags: list[str] = []
        for tag in tags or []:
            self.add(tag)

    def add(self, tag: str | None) -> bool:
        """
        Appends a trimmed tag unless it is empty or already present.

        Returns:
            bool: True if the tag was added.
        """
        value = (tag or "").strip()
        if not value or value in self._tags:
            return False
        self._tags.append(value)
        return True

    def remove(self, tag: str) -> bool:
        """
        Removes the exact match of a tag if present.

        Returns:
            bool: True if a tag was removed.
        """
        if tag not in self._tags:
            return False
        self._tags.remove(tag)
        return True

    def clear(self) -> None:
        self._tags.clear()

    def to_list(self) -> list[str]:
        return list(self._tags)

    def to_wire(self) -> list[TagRecord]:
        return [TagRecord(tag_name=tag) for tag in self._tags]

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tags))

    def __len__(self) -> int:
        return len(self._tags)

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagSet):
            return NotImplemented
        return self._tags == other._tags

    def __repr__(self) -> str:
        return f"TagSet({self._tags!r})"
