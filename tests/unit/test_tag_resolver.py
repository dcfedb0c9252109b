from typing import Any

import pytest

from domain.tags import TagLabel, TagResolver

EXAMPLE = {"cat-a": {"en": "Cat A", "zh": "猫A", "aliases": ["CAT_A", " cat a "]}}


class StaticSource:
    """Installs a fixed raw table on every request."""

    def __init__(self, data: Any) -> None:
        self.data = data
        self.calls = 0

    def request(self, install) -> None:
        self.calls += 1
        install(self.data)


@pytest.fixture
def resolver() -> TagResolver:
    return TagResolver(StaticSource(EXAMPLE))


def test_example_table(resolver: TagResolver) -> None:
    assert resolver.normalize_tag("CAT_A") == "cat-a"
    assert resolver.normalize_tag(" Cat A ") == "cat-a"
    assert resolver.translate_tag("cat-a", "zh") == "猫A"
    assert resolver.translate_tag("unknown-tag") == "unknown-tag"
    assert resolver.get_all_tags("en") == [TagLabel(key="cat-a", label="Cat A")]


def test_canonical_keys_match_any_casing(resolver: TagResolver) -> None:
    for variant in ("cat-a", "CAT-A", "  Cat-A\n", "\tcAt-a"):
        assert resolver.normalize_tag(variant) == "cat-a"


def test_unknown_tags_come_back_unchanged(resolver: TagResolver) -> None:
    assert resolver.normalize_tag("  Dog B ") == "  Dog B "
    assert resolver.translate_tag("  Dog B ", "zh") == "  Dog B "


def test_invalid_input_returns_empty(resolver: TagResolver) -> None:
    for value in (None, 3, "", ["cat-a"]):
        assert resolver.normalize_tag(value) == ""
        assert resolver.translate_tag(value, "zh") == ""


def test_whitespace_only_tag_folds_to_empty_once_loaded(resolver: TagResolver) -> None:
    assert resolver.normalize_tag("   ") == ""


def test_translate_resolves_aliases_and_defaults_to_english(resolver: TagResolver) -> None:
    assert resolver.translate_tag(" cat a ") == "Cat A"
    assert resolver.translate_tag("CAT_A", "fr") == "Cat A"
    assert resolver.translate_tag("CAT_A", "zh") == "猫A"


def test_translate_falls_back_when_label_is_empty() -> None:
    r = TagResolver(StaticSource({"a": {"en": "A", "zh": ""}}))
    assert r.translate_tag("A", "zh") == "A"
    assert r.translate_tag("A", "en") == "A"
    assert r.get_all_tags("zh") == [TagLabel(key="a", label="")]


def test_get_all_tags_preserves_table_order() -> None:
    r = TagResolver(
        StaticSource(
            {
                "b": {"en": "Bee", "zh": "蜂"},
                "a": {"en": "Ant", "zh": "蚁"},
                "c": {"en": "Cat", "zh": "猫"},
            }
        )
    )
    assert [t.key for t in r.get_all_tags()] == ["b", "a", "c"]
    assert [t.label for t in r.get_all_tags("zh")] == ["蜂", "蚁", "猫"]


def test_table_is_loaded_once_and_queries_are_stable(resolver: TagResolver) -> None:
    source = resolver._source
    first = [resolver.normalize_tag("CAT_A"), resolver.translate_tag("cat-a", "zh")]
    second = [resolver.normalize_tag("CAT_A"), resolver.translate_tag("cat-a", "zh")]

    assert first == second
    assert source.calls == 1
    assert resolver.set_tag_table({"other": {"en": "O", "zh": "O"}}) is False
    assert resolver.normalize_tag("other") == "other"


def test_unloaded_resolver_falls_back_and_retries() -> None:
    source = StaticSource({})  # rejected by shape check
    r = TagResolver(source)

    assert r.translate_tag("cat-a") == "cat-a"
    assert r.normalize_tag("   ") == "   "
    assert r.get_all_tags() == []
    assert not r.is_loaded
    assert source.calls == 3

    source.data = EXAMPLE
    assert r.normalize_tag("CAT_A") == "cat-a"
    assert r.is_loaded


def test_resolver_without_source_never_loads() -> None:
    r = TagResolver()
    assert r.normalize_tag("CAT_A") == "CAT_A"
    assert r.get_all_tags("zh") == []


def test_get_all_tags_dumps_to_plain_dicts(resolver: TagResolver) -> None:
    tags = resolver.get_all_tags("zh")
    assert [t.model_dump() for t in tags] == [{"key": "cat-a", "label": "猫A"}]
