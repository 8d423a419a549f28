import asyncio
import json

import httpx
import pytest

from app.core.errors import UpstreamError
from app.generator import (
    PerplexityRecipeGenerator,
    RecipeGenerator,
    TemplateRecipeGenerator,
    build_template_recipes,
    generate_with_fallback,
    parse_generated_recipes,
)
from app.models import SourceType

MODEL_OUTPUT = """Here you go:
```json
{
  "dishes": [
    {"name": "Jollof Rice", "ingredients": ["2 cups rice", "4 tomatoes"],
     "instructions": "1. Fry the base.\\n2. Add rice.", "cultural_note": "Party staple."},
    {"name": "Suya", "ingredients": "Beef\\nSuya spice", "instructions": "Grill it."}
  ],
  "city": "Lagos",
  "country": "Nigeria"
}
```"""


def _perplexity_reply(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def _generator_with(handler, api_key="test-key"):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return PerplexityRecipeGenerator(api_key=api_key, http_client=client)


class SlowGenerator(RecipeGenerator):
    name = "slow"

    async def generate(self, region, lat, lng):
        await asyncio.sleep(5)
        return []


class BrokenGenerator(RecipeGenerator):
    name = "broken"

    async def generate(self, region, lat, lng):
        raise RuntimeError("boom")


def test_template_recipes_are_deterministic():
    recipes = build_template_recipes("African", 0, 0)
    assert [recipe.name for recipe in recipes] == [
        "African Special Dish 1", "African Special Dish 2", "African Special Dish 3",
    ]
    assert all(recipe.source_type == SourceType.API for recipe in recipes)
    assert all((recipe.location_lat, recipe.location_lng) == (0, 0) for recipe in recipes)
    assert recipes == build_template_recipes("African", 0, 0)


def test_template_generator():
    recipes = asyncio.run(TemplateRecipeGenerator().generate("Local", 1.0, 2.0))
    assert len(recipes) == 3


def test_parse_generated_recipes():
    recipes = parse_generated_recipes(MODEL_OUTPUT, "African", 6.5, 3.4)

    assert [recipe.name for recipe in recipes] == ["Jollof Rice", "Suya"]
    assert recipes[0].ingredients == "2 cups rice\n4 tomatoes"
    assert recipes[0].cultural_note == "Party staple."
    assert recipes[1].cultural_note is None
    assert recipes[0].city == "Lagos"
    assert recipes[0].location_name == "Lagos, Nigeria"
    assert (recipes[0].location_lat, recipes[0].location_lng) == (6.5, 3.4)


@pytest.mark.parametrize("text", [
    "",
    "no json here",
    '{"dishes": []}',
    '{"dishes": [{"name": "Soup"}]}',
    '{"dishes": [{"name": "Soup", "ingredients": "x", "instructions": "y"}',
])
def test_parse_rejects_malformed_output(text):
    with pytest.raises(UpstreamError):
        parse_generated_recipes(text, "Local", 0, 0)


def test_perplexity_request_and_response():
    seen = {}

    def handler(request: httpx.Request):
        seen["auth"] = request.headers["authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_perplexity_reply(MODEL_OUTPUT))

    generator = _generator_with(handler)
    recipes = asyncio.run(generator.generate("African", 6.5, 3.4))

    assert len(recipes) == 2
    assert seen["auth"] == "Bearer test-key"
    assert seen["body"]["messages"][0]["role"] == "system"
    assert "African" in seen["body"]["messages"][1]["content"]


def test_perplexity_without_key_is_upstream_error():
    generator = _generator_with(lambda request: httpx.Response(200), api_key=None)
    with pytest.raises(UpstreamError):
        asyncio.run(generator.generate("Local", 0, 0))


@pytest.mark.parametrize("response", [
    httpx.Response(500, text="server error"),
    httpx.Response(200, json={"unexpected": True}),
    httpx.Response(200, json=_perplexity_reply("I cannot help with that.")),
])
def test_perplexity_failures_are_upstream_errors(response):
    generator = _generator_with(lambda request: response)
    with pytest.raises(UpstreamError):
        asyncio.run(generator.generate("Local", 0, 0))


def test_fallback_without_generator():
    recipes = asyncio.run(generate_with_fallback(None, "Local", 0, 0))
    assert [recipe.name for recipe in recipes][0] == "Local Special Dish 1"


def test_fallback_on_timeout():
    recipes = asyncio.run(generate_with_fallback(SlowGenerator(), "Europe", 48.0, 2.0, timeout=0.05))
    assert len(recipes) == 3
    assert recipes[0].name == "Europe Special Dish 1"


def test_fallback_on_unexpected_error():
    recipes = asyncio.run(generate_with_fallback(BrokenGenerator(), "Local", 0, 0))
    assert len(recipes) == 3


def test_fallback_on_upstream_error():
    generator = _generator_with(lambda request: httpx.Response(503))
    recipes = asyncio.run(generate_with_fallback(generator, "Local", 0, 0))
    assert recipes[0].source_type == SourceType.API
    assert recipes[0].name == "Local Special Dish 1"


def test_generated_recipes_pass_through():
    generator = _generator_with(lambda request: httpx.Response(200, json=_perplexity_reply(MODEL_OUTPUT)))
    recipes = asyncio.run(generate_with_fallback(generator, "African", 6.5, 3.4))
    assert recipes[0].name == "Jollof Rice"


def test_incomplete_generator_cannot_be_built():
    class NoGenerate(RecipeGenerator):
        name = "incomplete"

    with pytest.raises(TypeError):
        NoGenerate()
