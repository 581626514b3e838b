import pytest

from citydir.domain.relations import RelationLink, extract_relations, normalize_links
from citydir.errors import ValidationError


def test_bare_ids_become_plain_links():
    assert normalize_links(["a", "b"]) == [RelationLink("a"), RelationLink("b")]


def test_link_objects_keep_flags():
    links = normalize_links([{"id": "a", "is_highlight": True}, {"id": "b", "is_premium": "true"}])
    assert links == [
        RelationLink("a", is_highlight=True, is_premium=False),
        RelationLink("b", is_highlight=False, is_premium=True),
    ]


def test_duplicate_ids_last_occurrence_wins():
    links = normalize_links(["a", {"id": "a", "is_premium": True}])
    assert links == [RelationLink("a", is_premium=True)]


@pytest.mark.parametrize("payload", ["a", [True], [{"is_highlight": True}], [None]])
def test_invalid_payloads(payload):
    with pytest.raises(ValidationError):
        normalize_links(payload)


def test_extract_relations_distinguishes_absent_from_empty():
    relations = extract_relations(
        {"category_ids": [], "types": ["t1"]},
        ["category_ids", "type_ids", "section_ids"],
    )
    assert relations["category_ids"] == []
    assert relations["type_ids"] == [RelationLink("t1")]
    assert relations["section_ids"] is None
