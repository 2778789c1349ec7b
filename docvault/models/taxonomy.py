"""Two-level document taxonomy: MajorHead (category) and MinorHead (sub-category)."""

from enum import Enum

from docvault.models.errors import ValidationError


class MajorHead(str, Enum):
    PERSONAL = "Personal"
    PROFESSIONAL = "Professional"


_MINOR_HEADS: dict[MajorHead, tuple[str, ...]] = {
    MajorHead.PERSONAL: ("John", "Tom", "Emily", "Sarah", "Michael", "Jessica"),
    MajorHead.PROFESSIONAL: ("Accounts", "HR", "IT", "Finance", "Marketing", "Sales"),
}


def parse_major_head(category: str | MajorHead) -> MajorHead:
    """
    Resolves a raw category value into a MajorHead.

    Raises:
        ValidationError: If the value is not a known category.
    """
    try:
        return MajorHead(category)
    except ValueError:
        allowed = ", ".join(m.value for m in MajorHead)
        raise ValidationError(f"Unknown category '{category}'. Allowed: {allowed}.")


def sub_categories_for(category: str | MajorHead) -> list[str]:
    """
    Returns the ordered sub-categories valid for the given category.

    Args:
        category (str | MajorHead): "Personal" or "Professional".

    Returns:
        list[str]: The sub-categories, in display order.

    Raises:
        ValidationError: If the category is not recognized.
    """
    return list(_MINOR_HEADS[parse_major_head(category)])


class CategorySelection:
    """
    The MajorHead/MinorHead pair currently selected in a form.

    The minor head is always drawn from the set of the selected major head;
    changing the major head clears it.
    """

    def __init__(self) -> None:
        self._major_head: MajorHead | None = None
        self._minor_head: str | None = None

    @property
    def major_head(self) -> MajorHead | None:
        return self._major_head

    @property
    def minor_head(self) -> str | None:
        return self._minor_head

    def select_major_head(self, category: str | MajorHead | None) -> None:
        """Selects a category (None to unset) and clears the sub-category."""
        self._major_head = parse_major_head(category) if category else None
        self._minor_head = None

    def select_minor_head(self, sub_category: str | None) -> None:
        """
        Selects a sub-category of the current category (None to unset).

        Raises:
            ValidationError: If no category is selected or the value does not belong to it.
        """
        if sub_category is None:
            self._minor_head = None
            return
        if self._major_head is None:
            raise ValidationError("Select a category before choosing a sub-category.")
        if sub_category not in _MINOR_HEADS[self._major_head]:
            raise ValidationError(
                f"'{sub_category}' is not a sub-category of '{self._major_head.value}'."
            )
        self._minor_head = sub_category

    def options(self) -> list[str]:
        """Sub-categories offered for the current category, empty when none is selected."""
        if self._major_head is None:
            return []
        return sub_categories_for(self._major_head)

    def clear(self) -> None:
        self._major_head = None
        self._minor_head = None
