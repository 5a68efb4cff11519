"""
Tests for servings/timing extraction, category guessing and auto-tags.
"""
import pytest

from recipe_import.models import Category
from recipe_import.services.metadata import (
    MAX_TAGS,
    extract_cook_time,
    extract_prep_time,
    extract_servings,
    extract_total_time,
    generate_tags,
    guess_category,
)


class TestServings:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Serves: 4", 4),
            ("Servings 8", 8),
            ("Makes 24 cookies", 24),
            ("Yield: 2 loaves", 2),
            ("", 12),
            ("Servings: 0", 12),
            ("Feeds a crowd", 12),
        ],
    )
    def test_servings(self, text, expected):
        assert extract_servings(text) == expected


class TestTimes:
    """Test prep, cook and total time extraction."""

    def test_prep_time(self):
        assert extract_prep_time("Prep Time: 20 mins") == 20
        assert extract_prep_time("Preparation 5 min") == 5
        assert extract_prep_time("prep: 10m") == 10
        assert extract_prep_time("Nothing here") == 15

    def test_cook_time(self):
        assert extract_cook_time("Cook Time: 35 minutes") == 35
        assert extract_cook_time("Baking time 12 min") == 12
        assert extract_cook_time("Bake: 25 mins") == 25

    def test_cook_time_default(self):
        assert extract_cook_time("Preheat oven to 350F. Bake for 10 minutes.") == 20

    def test_total_time_fallback(self):
        assert extract_cook_time("Total Time: 1 hour 15 mins") == 75
        assert extract_cook_time("Total: 45 min") == 45

    def test_explicit_cook_time_wins_over_total(self):
        text = "Cook Time: 10 mins\nTotal Time: 1 hour 30 mins"
        assert extract_cook_time(text) == 10

    def test_total_time(self):
        assert extract_total_time("Total Time 2 hours 5 mins") == 125
        assert extract_total_time("no times") is None

    def test_oversized_numbers_use_defaults(self):
        digits = "9" * 5000
        assert extract_servings("Serves " + digits) == 12
        assert extract_prep_time(f"Prep Time: {digits} mins") == 15
        assert extract_cook_time(f"Cook Time: {digits} mins") == 20
        assert extract_total_time(f"Total Time: {digits} mins") is None
        assert extract_cook_time(f"Total Time: {digits} mins") == 20


class TestGuessCategory:
    """Test keyword-based category guessing."""

    @pytest.mark.parametrize(
        "name,ingredients,expected",
        [
            ("Chocolate Chip Cookies", ["flour"], Category.COOKIES),
            ("Cookie Bars", [], Category.COOKIES),
            ("Red Velvet Cupcakes", [], Category.CAKES),
            ("Sourdough", [], Category.BREAD),
            ("Weeknight Dinner", ["active dry yeast"], Category.BREAD),
            ("Fudgy Brownies", [], Category.BROWNIES_AND_BARS),
            ("Apple Pie", [], Category.PIES_AND_TARTS),
            ("Chocolate Eclairs", [], Category.PASTRIES),
            ("Blueberry Muffins", [], Category.BREAKFAST),
            ("Grilled Salmon", ["lemon"], Category.OTHER),
        ],
    )
    def test_categories(self, name, ingredients, expected):
        assert guess_category(name, ingredients) is expected

    def test_first_match_wins(self):
        """Cake is checked before bread, so a cake with yeast is still a cake."""
        assert guess_category("Yeasted Coffee Cake", []) is Category.CAKES


class TestGenerateTags:
    """Test auto-tagging."""

    def test_category_slug_first(self):
        assert generate_tags("Fudgy Brownies", [], Category.BROWNIES_AND_BARS) == ["brownies-bars"]
        assert generate_tags("Tarte", [], Category.PIES_AND_TARTS) == ["pies-tarts"]

    def test_keywords_from_ingredients(self):
        tags = generate_tags("Morning Loaf", ["mashed banana", "ground cinnamon"], Category.BREAD)
        assert tags == ["bread", "banana", "cinnamon"]

    def test_multi_word_keywords(self):
        tags = generate_tags("Swirl Bars", ["peanut butter", "cream cheese"], Category.BROWNIES_AND_BARS)
        assert tags == ["brownies-bars", "peanut butter", "cream cheese"]

    def test_cap_keeps_discovery_order(self):
        name = "Chocolate Vanilla Lemon Blueberry Strawberry Apple Cake"
        tags = generate_tags(name, ["cinnamon", "honey"], Category.CAKES)
        assert len(tags) == MAX_TAGS
        assert tags == ["cakes", "chocolate", "vanilla", "lemon", "blueberry", "strawberry"]

    def test_keywords_do_not_span_name_and_ingredients(self):
        tags = generate_tags("Honey Roasted Peanut", ["butter"], Category.OTHER)
        assert tags == ["other", "honey"]

    def test_keywords_do_not_span_two_ingredients(self):
        tags = generate_tags("Snack Mix", ["cream", "cheese"], Category.OTHER)
        assert tags == ["other"]

    def test_tags_are_unique_and_lowercase(self):
        tags = generate_tags("CHOCOLATE chocolate", ["Chocolate chips"], Category.OTHER)
        assert tags == ["other", "chocolate"]
