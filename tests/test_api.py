"""
Integration tests for the import endpoints.
Network access is replaced by monkeypatching the router's URL importer.
"""
import pytest
from fastapi.testclient import TestClient

from recipe_import.main import app
from recipe_import.routers import imports
from recipe_import.services.structured import parse_structured_recipe
from recipe_import.services.web_import import FetchFailedError, NoRecipeFoundError

COOKIE_TEXT = """Chocolate Chip Cookies
Makes 24 cookies
Ingredients
2 cups flour
1 cup chocolate chips
Instructions
Mix everything.
Bake for 10 minutes.
"""


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:
    def test_health_check(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": "0.1.0"}


class TestTextImport:
    """Test POST /import/text."""

    def test_parses_text(self, client):
        response = client.post("/import/text", json={"text": COOKIE_TEXT})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Chocolate Chip Cookies"
        assert data["category"] == "Cookies"
        assert data["servings"] == 24
        assert data["prepTime"] == 15
        assert data["cookTime"] == 20
        assert data["ingredients"][0] == {"amount": 2.0, "unit": "cups", "name": "flour"}
        assert data["instructions"] == "1. Mix everything.\n2. Bake for 10 minutes."
        assert data["tags"] == ["cookies", "chocolate"]
        assert data["favorite"] is False
        assert data["lastMade"] is None

    def test_empty_body_returns_defaults(self, client):
        response = client.post("/import/text", json={})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Imported Recipe"
        assert data["ingredients"] == [{"amount": 1.0, "unit": "cups", "name": ""}]


class TestStructuredImport:
    """Test POST /import/structured."""

    def test_maps_recipe_object(self, client):
        payload = {
            "@type": "Recipe",
            "name": "Cinnamon Rolls",
            "recipeYield": "9 rolls",
            "prepTime": "PT1H",
            "recipeIngredient": ["3 cups flour", "2 tsp cinnamon"],
            "recipeInstructions": [{"@type": "HowToStep", "text": "Roll and bake."}],
        }
        response = client.post("/import/structured", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Cinnamon Rolls"
        assert data["category"] == "Bread"
        assert data["servings"] == 9
        assert data["prepTime"] == 60
        assert data["tags"] == ["bread", "cinnamon"]

    def test_rejects_non_object(self, client):
        response = client.post("/import/structured", json=["not", "a", "recipe"])
        assert response.status_code == 422


class TestHtmlImport:
    """Test POST /import/html."""

    def test_json_ld_page(self, client):
        html = (
            '<script type="application/ld+json">'
            '{"@type": "Recipe", "name": "Banana Bread", "recipeIngredient": ["3 bananas"]}'
            "</script>"
        )
        response = client.post("/import/html", json={"html": html})

        assert response.status_code == 200
        assert response.json()["name"] == "Banana Bread"

    def test_page_without_recipe(self, client):
        response = client.post("/import/html", json={"html": "<p>Nothing here</p>"})

        assert response.status_code == 422
        assert response.json()["detail"] == "No recipe found"

    def test_missing_html_field(self, client):
        response = client.post("/import/html", json={})
        assert response.status_code == 422


class TestUrlImport:
    """Test POST /import/url with the fetcher replaced."""

    @pytest.mark.parametrize("url", ["ftp://example.com/recipe", "not a url", "https://"])
    def test_rejects_unsupported_urls(self, client, url):
        response = client.post("/import/url", json={"url": url})
        assert response.status_code == 400

    def test_success(self, client, monkeypatch):
        async def fake_import(url):
            return parse_structured_recipe({"name": "Lemon Tart", "recipeIngredient": ["2 lemons"]})

        monkeypatch.setattr(imports, "import_recipe_from_url", fake_import)
        response = client.post("/import/url", json={"url": "https://example.com/tart"})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Lemon Tart"
        assert data["category"] == "Pies & Tarts"

    def test_fetch_failure_is_bad_gateway(self, client, monkeypatch):
        async def fake_import(url):
            raise FetchFailedError(f"Could not fetch {url}")

        monkeypatch.setattr(imports, "import_recipe_from_url", fake_import)
        response = client.post("/import/url", json={"url": "https://example.com/down"})

        assert response.status_code == 502

    def test_no_recipe_is_unprocessable(self, client, monkeypatch):
        async def fake_import(url):
            raise NoRecipeFoundError("Page contains no recipe data")

        monkeypatch.setattr(imports, "import_recipe_from_url", fake_import)
        response = client.post("/import/url", json={"url": "https://example.com/about"})

        assert response.status_code == 422
        assert response.json()["detail"] == "No recipe found"


class TestUnexpectedErrors:
    def test_unhandled_error_returns_500(self, monkeypatch):
        def explode(text):
            raise RuntimeError("boom")

        monkeypatch.setattr(imports, "parse_recipe_text", explode)
        client = TestClient(app, raise_server_exceptions=False)
        response = client.post("/import/text", json={"text": "anything"})

        assert response.status_code == 500
        assert response.json() == {"detail": "An unexpected error occurred"}
