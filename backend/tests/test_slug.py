import pytest

from citydir.domain.slug import slugify


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Café Central!", "cafe-central"),
        ("  Old   Town  ", "old-town"),
        ("Baščaršija", "bascarsija"),
        ("Đulbašić Đaci", "dulbasic-daci"),
        ("Straße", "strasse"),
        ("snake_case name", "snake-case-name"),
        ("already-a-slug", "already-a-slug"),
        ("--dashes -- everywhere--", "dashes-everywhere"),
        ("!!!", ""),
    ],
)
def test_slugify(text, expected):
    assert slugify(text) == expected


@pytest.mark.parametrize("text", ["Café Central!", "Žuta Tabija", "Đulbašić Đaci", "Hotel  Europe 4*"])
def test_slugify_is_idempotent(text):
    once = slugify(text)
    assert slugify(once) == once
