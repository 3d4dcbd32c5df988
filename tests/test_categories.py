"""Tests for the radius category table and its JSON files."""

import json
from types import MappingProxyType

import pytest

from cornerwise.categories import (
    DEFAULT_CATEGORIES,
    load_categories,
    make_categories,
    save_categories,
)
from cornerwise.errors import InvalidRadius
from cornerwise.model import Deferred, Dimension


class TestDefaultCategories:
    def test_known_names(self):
        assert set(DEFAULT_CATEGORIES) == {"small", "medium", "large"}

    def test_small_is_four_pixels(self):
        assert DEFAULT_CATEGORIES["small"] == 4

    def test_large_is_square(self):
        assert DEFAULT_CATEGORIES["large"] == 0

    def test_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_CATEGORIES["small"] = 8  # type: ignore[index]


class TestMakeCategories:
    def test_returns_mapping_proxy(self):
        table = make_categories({"small": 2})
        assert isinstance(table, MappingProxyType)

    def test_values_are_parsed(self):
        table = make_categories({"medium": "8px", "pill": "50%"})
        assert table["medium"] == 8
        assert table["pill"] == Dimension(50, "%")

    def test_list_value_becomes_tuple(self):
        table = make_categories({"large": [16, "16px", 0, 0]})
        assert table["large"] == (16, 16, 0, 0)

    def test_shorthand_string_value(self):
        table = make_categories({"large": "16px 0"})
        assert table["large"] == (16, 0)

    def test_deferred_value(self):
        table = make_categories({"themed": "var(--corner)"})
        assert table["themed"] == Deferred("var(--corner)")

    def test_source_mapping_not_shared(self):
        source = {"small": 2}
        table = make_categories(source)
        source["small"] = 10
        assert table["small"] == 2

    def test_too_many_values_raises(self):
        with pytest.raises(InvalidRadius, match="1 to 4"):
            make_categories({"odd": [1, 2, 3, 4, 5]})

    def test_category_reference_raises(self):
        with pytest.raises(InvalidRadius):
            make_categories({"tiny": "small"})

    def test_non_string_name_raises(self):
        with pytest.raises(TypeError, match="must be a string"):
            make_categories({4: 4})

    def test_name_with_space_raises(self):
        with pytest.raises(ValueError, match="single token"):
            make_categories({"extra large": 24})

    def test_literal_name_raises(self):
        with pytest.raises(ValueError, match="shadow"):
            make_categories({"4px": 8})


class TestCategoryFiles:
    def test_load_fixture(self, categories_path):
        table = load_categories(categories_path)
        assert table["small"] == 2
        assert table["medium"] == 8
        assert table["large"] == (16, 16, 0, 0)
        assert table["pill"] == Dimension(50, "%")
        assert table["themed"] == Deferred("var(--shape-corner)")

    def test_save_then_load(self, tmp_path):
        table = make_categories({
            "small": 2,
            "large": [16, 16, 0, 0],
            "pill": "50%",
        })
        path = tmp_path / "categories.json"
        save_categories(path, table)
        assert dict(load_categories(path)) == dict(table)

    def test_saved_file_is_readable_json(self, tmp_path):
        path = tmp_path / "categories.json"
        save_categories(path, make_categories({"pill": "50%", "small": 4}))
        data = json.loads(path.read_text())
        assert data == {"categories": {"pill": "50%", "small": 4}}

    def test_unknown_section_raises(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"categories": {}, "colours": {}}))
        with pytest.raises(ValueError, match="unknown top-level keys"):
            load_categories(path)

    def test_missing_section_raises(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("{}")
        with pytest.raises(ValueError, match="'categories' object"):
            load_categories(path)

    def test_non_object_raises(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError, match="JSON object"):
            load_categories(path)

    def test_invalid_value_raises(self, tmp_path):
        path = tmp_path / "bad_value.json"
        path.write_text(json.dumps({"categories": {"small": "tiny"}}))
        with pytest.raises(InvalidRadius):
            load_categories(path)
