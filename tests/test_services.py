import json
from types import SimpleNamespace

import httpx
import openai
import pytest

from freshcook import services
from freshcook.services import RecipeGenerationError, analyze_image, generate_recipes, validate_recipe


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _patch_client(monkeypatch, completions):
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    monkeypatch.setattr(services, "_client", lambda: client)


def _status_error(status):
    request = httpx.Request("POST", "https://openrouter.ai/api/v1/chat/completions")
    response = httpx.Response(status, request=request)
    return openai.APIStatusError("upstream error", response=response, body=None)


def test_analyze_image_runs_pipeline(monkeypatch):
    monkeypatch.setattr(
        services,
        "annotate_image",
        lambda image_b64: {
            "labelAnnotations": [
                {"description": "Vegetable", "score": 0.8},
                {"description": "Car", "score": 0.95},
            ],
            "textAnnotations": [
                {"description": "recipe calls for 2 eggs and fresh basil leaves"}
            ],
        },
    )
    assert analyze_image("aGVsbG8=") == ["Vegetable", "Egg", "Basil"]


def test_analyze_image_degrades_on_malformed_response(monkeypatch):
    monkeypatch.setattr(
        services,
        "annotate_image",
        lambda image_b64: {"labelAnnotations": [{"score": 0.99}]},
    )
    assert analyze_image("aGVsbG8=") == []


def test_generate_recipes_sends_prompt_and_validates(monkeypatch):
    recipes = [
        {
            "title": "Garlic Soup",
            "description": "Warm and simple.",
            "ingredients": ["4 cloves garlic", "1 l stock"],
            "instructions": ["Simmer", "Blend"],
            "cooking_time": 25,
            "servings": 2,
            "difficulty": "Easy",
        },
        {"title": "Mystery", "cooking_time": "long", "servings": None, "difficulty": "Expert"},
    ]
    completions = FakeCompletions(content="Sure!\n" + json.dumps(recipes) + "\nEnjoy.")
    _patch_client(monkeypatch, completions)

    result = generate_recipes(["Garlic", "Onion"])

    call = completions.calls[0]
    assert call["model"] == services.RECIPE_MODEL
    assert call["temperature"] == 0.7
    assert call["max_tokens"] == 2000
    assert "Garlic, Onion" in call["messages"][0]["content"]

    assert [r["title"] for r in result] == ["Garlic Soup", "Mystery"]
    assert result[0]["cookingTime"] == 25
    assert result[0]["difficulty"] == "Easy"
    assert result[1]["cookingTime"] == 30
    assert result[1]["servings"] == 4
    assert result[1]["difficulty"] == "Medium"
    assert result[1]["ingredients"] == []
    assert result[0]["id"].startswith("recipe-") and result[0]["id"].endswith("-0")
    assert result[1]["id"].endswith("-1")


def test_generate_recipes_requires_ingredients():
    with pytest.raises(ValueError):
        generate_recipes([])


def test_reply_that_is_not_an_array(monkeypatch):
    _patch_client(monkeypatch, FakeCompletions(content='{"title": "Soup"}'))
    with pytest.raises(RecipeGenerationError, match="expected array"):
        generate_recipes(["Garlic"])


def test_unparsable_reply(monkeypatch):
    _patch_client(monkeypatch, FakeCompletions(content="I cannot help with that."))
    with pytest.raises(RecipeGenerationError) as exc:
        generate_recipes(["Garlic"])
    assert exc.value.message == "Failed to parse recipe data"


@pytest.mark.parametrize(
    "status, message",
    [
        (401, "OpenRouter API authentication failed"),
        (402, "OpenRouter API payment required"),
        (429, "OpenRouter API rate limit exceeded"),
        (503, "Failed to generate recipes"),
    ],
)
def test_upstream_status_errors(monkeypatch, status, message):
    _patch_client(monkeypatch, FakeCompletions(error=_status_error(status)))
    with pytest.raises(RecipeGenerationError) as exc:
        generate_recipes(["Garlic"])
    assert exc.value.status == status
    assert exc.value.message == message


def test_validate_recipe_on_non_object():
    recipe = validate_recipe("not a recipe", 2, 1700000000000)
    assert recipe == {
        "id": "recipe-1700000000000-2",
        "title": "Untitled Recipe",
        "description": "A delicious recipe",
        "ingredients": [],
        "instructions": [],
        "cookingTime": 30,
        "servings": 4,
        "difficulty": "Medium",
    }


def test_boolean_is_not_a_number():
    recipe = validate_recipe({"cooking_time": True, "servings": 2.5}, 0, 1)
    assert recipe["cookingTime"] == 30
    assert recipe["servings"] == 2.5
