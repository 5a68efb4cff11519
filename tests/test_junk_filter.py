"""
Tests for junk-line classification.
"""
import pytest

from recipe_import.services.junk_filter import is_junk_line


class TestIsJunkLine:
    """Lines that are page furniture or metadata, and lines that are not."""

    @pytest.mark.parametrize(
        "line",
        [
            "Prep Time: 15 mins",
            "Cook Time",
            "Total Time 45 minutes",
            "Course Cuisine",
            "Servings Calories",
            "Prep Cook Total",
            "Servings: 24",
            "Calories 210kcal",
            "Yield: 2 loaves",
            "Author: Jane Baker",
            "Jump to Recipe",
            "Skip to content",
            "Print Recipe",
            "Pin",
            "Advertisement",
            "Nutrition Facts",
            "Nutritional info",
            "Keywords: easy, quick",
            "Equipment",
            "Tools needed",
        ],
    )
    def test_metadata_lines(self, line):
        assert is_junk_line(line) is True

    @pytest.mark.parametrize("line", ["5 mins 15 mins 20 mins", "1 hr 20 mins", "10 minutes", "2 hours 30 m"])
    def test_time_only_lines(self, line):
        assert is_junk_line(line) is True

    @pytest.mark.parametrize(
        "line",
        ["For the glaze:", "For the filling", "Toppings", "Frosting:", "Ganache", "Dough", "Macaron Shells:"],
    )
    def test_sub_recipe_labels(self, line):
        assert is_junk_line(line) is True

    def test_all_caps_labels(self):
        """Short upper-case labels count only when they contain a metadata word."""
        assert is_junk_line("TIME") is True
        assert is_junk_line("ACTIVE TIME") is True
        assert is_junk_line("CHOCOLATE CHIPS") is False

    @pytest.mark.parametrize(
        "line",
        [
            "2 cups flour",
            "1 tsp baking soda",
            "Chocolate Sauce",
            "Cooked rice",
            "Pinto beans",
            "Chocolate Chip Cookies",
            "Preheat oven to 350F.",
        ],
    )
    def test_content_lines(self, line):
        assert is_junk_line(line) is False
