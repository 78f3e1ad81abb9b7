"""
CookHub Backend — Recipe Endpoint Tests
=========================================

What we test:
    ✅ Create then list returns the recipe once, ingredients in order
    ✅ Search by a description-only substring returns exactly that recipe
    ✅ Empty / missing search query → 400
    ✅ Shopping list passthrough, 400 on missing id, 404 on unknown id
    ✅ JSON bodies accepted whatever the Content-Type; null ingredients stored as []
    ✅ Malformed or empty body → 400, wrong verb → 405
    ✅ Rows with undecodable ingredients are skipped, not fatal
"""

import pytest

from cookhub.models import Recipe
from cookhub.services.recipe_service import decode_ingredients


class TestIngredientCodec:
    def test_decode_null_is_empty(self):
        assert decode_ingredients(None) == []
        assert decode_ingredients("null") == []

    def test_decode_keeps_order(self):
        assert decode_ingredients('["b", "a", "c"]') == ["b", "a", "c"]

    def test_decode_rejects_non_list(self):
        with pytest.raises(ValueError):
            decode_ingredients('{"a": 1}')

    def test_decode_rejects_broken_json(self):
        with pytest.raises(ValueError):
            decode_ingredients("[broken")


class TestRecipeEndpoints:
    @pytest.mark.asyncio
    async def test_list_seeded_recipes(self, test_client):
        response = await test_client.get("/api/recipes")

        assert response.status_code == 200
        recipes = response.json()
        assert len(recipes) == 4
        assert recipes[0]["chef_name"] == "Гордон Рамзи"
        assert recipes[1]["ingredients"] == ["свекла", "капуста", "морковь", "лук", "мясо"]

    @pytest.mark.asyncio
    async def test_create_then_list_contains_recipe_once(self, test_client):
        body = {
            "title": "Omelette",
            "description": "Breakfast classic",
            "ingredients": ["eggs", "butter", "salt"],
            "chef_id": 1,
            "video_url": "",
        }
        created = await test_client.post("/api/recipes", json=body)

        assert created.status_code == 200
        recipe = created.json()
        assert recipe["id"] > 0
        assert recipe["ingredients"] == ["eggs", "butter", "salt"]
        assert recipe["chef_name"] == "Гордон Рамзи"
        assert recipe["created_at"]

        listed = (await test_client.get("/api/recipes")).json()
        matches = [r for r in listed if r["id"] == recipe["id"]]
        assert len(matches) == 1
        assert matches[0]["ingredients"] == ["eggs", "butter", "salt"]

    @pytest.mark.asyncio
    async def test_create_with_missing_fields_uses_zero_values(self, test_client):
        response = await test_client.post("/api/recipes", json={"title": "Bare"})

        assert response.status_code == 200
        recipe = response.json()
        assert recipe["ingredients"] == []
        assert recipe["chef_id"] == 0
        assert recipe["chef_name"] is None

    @pytest.mark.asyncio
    async def test_create_rejects_malformed_json(self, test_client):
        response = await test_client.post(
            "/api/recipes",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "headers",
        [{}, {"Content-Type": "application/x-www-form-urlencoded"}, {"Content-Type": "text/plain"}],
    )
    async def test_create_accepts_json_under_any_content_type(self, test_client, headers):
        response = await test_client.post(
            "/api/recipes", content=b'{"title":"y"}', headers=headers
        )

        assert response.status_code == 200
        assert response.json()["title"] == "y"

    @pytest.mark.asyncio
    async def test_create_rejects_empty_body(self, test_client):
        response = await test_client.post("/api/recipes", content=b"")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid JSON"

    @pytest.mark.asyncio
    async def test_create_accepts_null_ingredients(self, test_client):
        created = await test_client.post(
            "/api/recipes", json={"title": "Toast", "ingredients": None, "chef_id": 1}
        )

        assert created.status_code == 200
        assert created.json()["ingredients"] == []

        listed = (await test_client.get("/api/recipes")).json()
        toast = [r for r in listed if r["id"] == created.json()["id"]]
        assert toast[0]["ingredients"] == []

    @pytest.mark.asyncio
    async def test_create_rejects_wrong_field_type(self, test_client):
        response = await test_client.post("/api/recipes", json={"chef_id": "one"})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_wrong_method_is_405(self, test_client):
        response = await test_client.put("/api/recipes", json={})

        assert response.status_code == 405
        assert response.json()["error"] == "method_not_allowed"

    @pytest.mark.asyncio
    async def test_malformed_row_is_skipped(self, test_client, store):
        async with store.session() as session:
            broken = Recipe(title="Broken", ingredients="[not json", chef_id=1)
            session.add(broken)
            await session.flush()
            broken_id = broken.id

        listed = (await test_client.get("/api/recipes")).json()
        assert len(listed) == 4
        assert broken_id not in [r["id"] for r in listed]

        shopping = await test_client.get("/api/shopping-list", params={"recipe_id": broken_id})
        assert shopping.status_code == 200
        assert shopping.json()["shopping_list"] == []


class TestSearch:
    @pytest.mark.asyncio
    async def test_description_substring_matches_one_recipe(self, test_client):
        response = await test_client.get("/api/search", params={"q": "Римская"})

        assert response.status_code == 200
        results = response.json()
        assert len(results) == 1
        assert results[0]["title"] == "Паста Карбонара"

    @pytest.mark.asyncio
    async def test_ingredient_substring_matches(self, test_client):
        results = (await test_client.get("/api/search", params={"q": "пармезан"})).json()
        assert sorted(r["title"] for r in results) == ["Паста Карбонара", "Ризотто с грибами"]

    @pytest.mark.asyncio
    async def test_no_match_is_empty_list(self, test_client):
        response = await test_client.get("/api/search", params={"q": "zzz-nothing"})

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("url", ["/api/search", "/api/search?q="])
    async def test_empty_query_is_400(self, test_client, url):
        response = await test_client.get(url)

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"


class TestShoppingList:
    @pytest.mark.asyncio
    async def test_passthrough_of_ingredients(self, test_client):
        response = await test_client.get("/api/shopping-list", params={"recipe_id": "3"})

        assert response.status_code == 200
        assert response.json() == {
            "recipe_id": "3",
            "shopping_list": ["спагетти", "бекон", "яйца", "пармезан", "черный перец"],
        }

    @pytest.mark.asyncio
    async def test_missing_recipe_id_is_400(self, test_client):
        response = await test_client.get("/api/shopping-list")
        assert response.status_code == 400

    @pytest.mark.asyncio
    @pytest.mark.parametrize("recipe_id", ["9999", "abc"])
    async def test_unknown_recipe_is_404(self, test_client, recipe_id):
        response = await test_client.get("/api/shopping-list", params={"recipe_id": recipe_id})

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"
