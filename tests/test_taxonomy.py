import pytest

from docvault.models.errors import ValidationError
from docvault.models.taxonomy import CategorySelection, MajorHead, sub_categories_for


def test_personal_sub_categories_in_order():
    assert sub_categories_for("Personal") == ["John", "Tom", "Emily", "Sarah", "Michael", "Jessica"]


def test_professional_sub_categories_in_order():
    assert sub_categories_for(MajorHead.PROFESSIONAL) == ["Accounts", "HR", "IT", "Finance", "Marketing", "Sales"]


def test_unknown_category_is_rejected():
    with pytest.raises(ValidationError):
        sub_categories_for("Hobby")


def test_returned_list_is_a_copy():
    sub_categories_for("Personal").append("Mallory")
    assert "Mallory" not in sub_categories_for("Personal")


def test_changing_category_clears_sub_category():
    selection = CategorySelection()
    selection.select_major_head("Professional")
    selection.select_minor_head("HR")

    selection.select_major_head("Personal")

    assert selection.major_head == MajorHead.PERSONAL
    assert selection.minor_head is None


def test_cross_category_sub_category_is_rejected():
    selection = CategorySelection()
    selection.select_major_head("Personal")

    with pytest.raises(ValidationError):
        selection.select_minor_head("HR")
    assert selection.minor_head is None


def test_sub_category_requires_category():
    selection = CategorySelection()
    with pytest.raises(ValidationError):
        selection.select_minor_head("Tom")
    assert selection.options() == []


def test_options_follow_selected_category():
    selection = CategorySelection()
    selection.select_major_head("Personal")
    assert selection.options() == sub_categories_for("Personal")
