import pytest

from domain.tags import TagEntry, validate_tag_table


@pytest.mark.parametrize(
    "data",
    [
        None,
        [],
        "tags",
        {},
        {"a": "A"},
        {"a": ["A", "甲"]},
        {"a": {"en": "A"}},
        {"a": {"en": "A", "zh": 1}},
        {"a": {"en": "A", "zh": "甲"}, "b": {"zh": "乙"}},
    ],
)
def test_rejects_bad_shapes(data) -> None:
    assert validate_tag_table(data) is None


def test_accepts_table_and_keeps_order() -> None:
    raw = {
        "z": {"en": "Z", "zh": "Z"},
        "a": {"en": "A", "zh": "甲", "aliases": [1, "alpha"], "note": "extra"},
    }
    table = validate_tag_table(raw)

    assert table is not None
    assert list(table) == ["z", "a"]
    assert isinstance(table["a"], TagEntry)
    assert table["a"].aliases == [1, "alpha"]


def test_empty_labels_are_still_strings() -> None:
    table = validate_tag_table({"a": {"en": "", "zh": ""}})
    assert table is not None
    assert table["a"].label("zh") == ""
