from docvault.models.tags import TagSet


def test_add_trims_and_appends_in_order():
    tags = TagSet()
    tags.add("  invoice ")
    tags.add("2024")
    assert tags.to_list() == ["invoice", "2024"]


def test_add_ignores_empty_and_duplicates():
    tags = TagSet(["invoice"])
    assert not tags.add("   ")
    assert not tags.add("")
    assert not tags.add(" invoice")
    assert tags.to_list() == ["invoice"]


def test_add_twice_equals_add_once():
    once = TagSet(["a"])
    once.add("b")
    twice = TagSet(["a"])
    twice.add("b")
    twice.add("b")
    assert once == twice


def test_add_then_remove_restores_original():
    tags = TagSet(["a", "b"])
    tags.add("c")
    tags.remove("c")
    assert tags == TagSet(["a", "b"])


def test_matching_is_case_sensitive():
    tags = TagSet(["Invoice"])
    tags.add("invoice")
    assert tags.to_list() == ["Invoice", "invoice"]
    tags.remove("INVOICE")
    assert len(tags) == 2


def test_remove_absent_tag_is_a_no_op():
    tags = TagSet(["a"])
    assert not tags.remove("z")
    assert tags.to_list() == ["a"]


def test_to_wire_keeps_order():
    tags = TagSet(["b", "a"])
    assert [t.model_dump() for t in tags.to_wire()] == [{"tag_name": "b"}, {"tag_name": "a"}]
