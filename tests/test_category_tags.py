import json

from servicedir.core.category_tags import DEFAULT_CATEGORY_TAGS, get_category_tags, load_category_tags, tags_for
from servicedir.core.config import Settings


def test_builtin_table_is_the_default():
    vocab = load_category_tags(Settings())
    assert vocab == DEFAULT_CATEGORY_TAGS
    assert "Student visas" in vocab["visas-and-immigration"]


def test_builtin_table_is_not_shared():
    vocab = load_category_tags(Settings())
    vocab["visas-and-immigration"].append("Mutated")
    assert "Mutated" not in DEFAULT_CATEGORY_TAGS["visas-and-immigration"]


def test_inline_setting_wins(tmp_path):
    path = tmp_path / "tags.json"
    path.write_text(json.dumps({"from-file": ["A"]}), encoding="utf-8")
    settings = Settings(category_tags={"inline": ["B"]}, CATEGORY_TAGS_FILE=str(path))
    assert load_category_tags(settings) == {"inline": ["B"]}


def test_json_file_replaces_builtin(tmp_path):
    path = tmp_path / "tags.json"
    path.write_text(json.dumps({"pets": ["Dog licences", "Vets"]}), encoding="utf-8")
    vocab = load_category_tags(Settings(CATEGORY_TAGS_FILE=str(path)))
    assert vocab == {"pets": ["Dog licences", "Vets"]}


def test_tags_for_unknown_category_is_empty():
    assert tags_for({"a": ["x"]}, "b") == []
    assert tags_for({"a": ["x"]}, "a") == ["x"]


def test_dependency_loads_vocabulary_once():
    get_category_tags.cache_clear()
    try:
        assert get_category_tags() is get_category_tags()
    finally:
        get_category_tags.cache_clear()
