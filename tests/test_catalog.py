"""Tests for element_quiz.catalog."""

from pathlib import Path

from element_quiz.catalog import ELEMENTS, get_all_items, get_item_by_name, image_path
from element_quiz.models import Item


class TestCatalog:
    def test_fixed_order(self):
        assert [i.name for i in get_all_items()] == ["Carbon", "Gold", "Chlorine", "Sodium"]

    def test_get_all_items_returns_copy(self):
        items = get_all_items()
        items.pop()
        assert len(get_all_items()) == len(ELEMENTS) == 4

    def test_lookup_is_case_insensitive(self):
        assert get_item_by_name("gOLD") == Item(name="Gold", image_key="Gold")

    def test_lookup_missing(self):
        assert get_item_by_name("Helium") is None

    def test_lookup_in_custom_items(self):
        items = [Item(name="Helium", image_key="he")]
        assert get_item_by_name("helium", items).image_key == "he"


class TestImagePath:
    def test_from_item(self):
        item = Item(name="Carbon", image_key="Carbon")
        assert image_path(item, "images") == Path("images") / "Carbon.png"

    def test_from_key_with_bare_extension(self):
        assert image_path("Gold", Path("/assets"), "jpg") == Path("/assets/Gold.jpg")


class TestItem:
    def test_matches_ignores_case(self):
        item = Item(name="Carbon", image_key="Carbon")
        assert item.matches("CARBON")
        assert item.matches("carbon")

    def test_matches_requires_exact_text(self):
        item = Item(name="Carbon", image_key="Carbon")
        assert not item.matches("carbo")
        assert not item.matches(" carbon")
        assert not item.matches("")
