# generator.py
# Synthesizes recipes for places the curated data does not cover.

import asyncio
import logging
import re
from abc import ABC, abstractmethod
from typing import List, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app import schemas
from app.core.config import settings
from app.core.errors import UpstreamError
from app.models import SourceType

logger = logging.getLogger(__name__)

TEMPLATE_DISH_COUNT = 3

SYSTEM_PROMPT = (
    "You are a culinary expert specializing in traditional recipes from around the world. "
    "Provide accurate, authentic recipes in JSON format only."
)

USER_PROMPT = """List {count} traditional dishes from {region} cuisine, as eaten near coordinates {lat}, {lng}.
Format your response as JSON with the following structure:
{{
  "dishes": [
    {{
      "name": "Dish Name",
      "ingredients": "Detailed list of ingredients with quantities, each on a new line",
      "instructions": "Step-by-step cooking instructions, with each step numbered and on a new line",
      "cultural_note": "A brief note about the cultural significance or history of this dish"
    }}
  ],
  "city": "The nearest city name",
  "country": "The country name"
}}

Don't include any explanations or additional text outside the JSON structure."""

# Models often wrap the JSON in prose or code fences; take the outermost object
_JSON_OBJECT = re.compile(r"({[\s\S]*})")


class GeneratedDish(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    ingredients: str = Field(..., min_length=1)
    instructions: str = Field(..., min_length=1)
    cultural_note: Optional[str] = None

    @field_validator("ingredients", "instructions", mode="before")
    @classmethod
    def join_lines(cls, value):
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return "\n".join(value)
        return value


class GeneratedMenu(BaseModel):
    model_config = ConfigDict(extra="ignore")

    dishes: List[GeneratedDish] = Field(..., min_length=1)
    city: Optional[str] = None
    country: Optional[str] = None


class RecipeGenerator(ABC):
    """
    Produces recipe drafts for a region. Implementations raise UpstreamError
    when they cannot.
    """

    name = "generator"

    @abstractmethod
    async def generate(self, region: str, lat: float, lng: float) -> List[schemas.RecipeDraft]:
        ...


def build_template_recipes(
    region: str, lat: float, lng: float, count: int = TEMPLATE_DISH_COUNT
) -> List[schemas.RecipeDraft]:
    """
    Placeholder dishes named after the region. Deterministic and never empty.
    """
    return [
        schemas.RecipeDraft(
            name=f"{region} Special Dish {number}",
            ingredients=f"Ingredient 1, Ingredient 2, Ingredient 3, Local {region} spices",
            instructions=(
                f"1. Step one for {region} recipe.\n"
                f"2. Step two for {region} recipe.\n"
                f"3. Step three for {region} recipe.\n"
                "4. Serve hot and enjoy!"
            ),
            location_lat=lat,
            location_lng=lng,
            location_name=region,
            city=None,
            country=None,
            source_type=SourceType.API,
            cultural_note=f"A traditional {region} dish.",
        )
        for number in range(1, count + 1)
    ]


class TemplateRecipeGenerator(RecipeGenerator):
    name = "template"

    async def generate(self, region: str, lat: float, lng: float) -> List[schemas.RecipeDraft]:
        return build_template_recipes(region, lat, lng)


def parse_generated_recipes(text: str, region: str, lat: float, lng: float) -> List[schemas.RecipeDraft]:
    """
    Turn free-form model output into recipe drafts.

    Raises UpstreamError when the text holds no JSON object or the object does
    not match GeneratedMenu.
    """
    match = _JSON_OBJECT.search(text or "")
    if not match:
        raise UpstreamError("Perplexity", "no JSON object in response")

    try:
        menu = GeneratedMenu.model_validate_json(match.group(1))
    except ValidationError as e:
        raise UpstreamError("Perplexity", f"response failed validation: {e.error_count()} errors") from e

    city = menu.city or region
    country = menu.country or ""
    location_name = ", ".join(part for part in (city, country) if part)

    return [
        schemas.RecipeDraft(
            name=dish.name,
            ingredients=dish.ingredients,
            instructions=dish.instructions,
            location_lat=lat,
            location_lng=lng,
            location_name=location_name,
            city=city,
            country=country or None,
            source_type=SourceType.API,
            cultural_note=dish.cultural_note or None,
        )
        for dish in menu.dishes
    ]


class PerplexityRecipeGenerator(RecipeGenerator):
    """
    Asks the Perplexity chat completions API for traditional dishes of a region.
    """

    name = "perplexity"

    def __init__(
        self,
        api_key: Optional[str],
        model: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model or settings.PERPLEXITY_MODEL
        self.api_url = api_url or settings.PERPLEXITY_API_URL
        self.timeout = timeout if timeout is not None else settings.GENERATOR_TIMEOUT_SECONDS
        self._http_client = http_client

    def _build_payload(self, region: str, lat: float, lng: float) -> dict:
        prompt = USER_PROMPT.format(count=TEMPLATE_DISH_COUNT, region=region, lat=lat, lng=lng)
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": 2048,
        }

    async def _post(self, payload: dict) -> httpx.Response:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        if self._http_client is not None:
            return await self._http_client.post(self.api_url, json=payload, headers=headers)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.post(self.api_url, json=payload, headers=headers)

    async def generate(self, region: str, lat: float, lng: float) -> List[schemas.RecipeDraft]:
        if not self.api_key:
            raise UpstreamError("Perplexity", "PERPLEXITY_API_KEY is not configured")

        logger.info(f"Generating recipes for {region} near ({lat}, {lng})")
        try:
            response = await self._post(self._build_payload(region, lat, lng))
            response.raise_for_status()
            content = response.json()["choices"][0]["message"]["content"]
        except httpx.HTTPError as e:
            raise UpstreamError("Perplexity", f"request failed: {e}") from e
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise UpstreamError("Perplexity", f"unexpected response shape: {e}") from e

        return parse_generated_recipes(content, region, lat, lng)


async def generate_with_fallback(
    generator: Optional[RecipeGenerator],
    region: str,
    lat: float,
    lng: float,
    timeout: Optional[float] = None,
) -> List[schemas.RecipeDraft]:
    """
    Run `generator` under a timeout; any failure yields the template recipes instead.
    """
    if timeout is None:
        timeout = settings.GENERATOR_TIMEOUT_SECONDS

    if generator is not None:
        try:
            drafts = await asyncio.wait_for(generator.generate(region, lat, lng), timeout=timeout)
            if drafts:
                return drafts
            logger.warning(f"Recipe generator '{generator.name}' returned no recipes for {region}")
        except asyncio.TimeoutError:
            logger.warning(f"Recipe generator '{generator.name}' timed out after {timeout}s")
        except UpstreamError as e:
            logger.warning(f"Recipe generator '{generator.name}' failed: {e}")
        except Exception:
            logger.exception(f"Recipe generator '{generator.name}' raised unexpectedly")

    logger.info(f"Using template recipes for {region}")
    return build_template_recipes(region, lat, lng)


def get_recipe_generator() -> Optional[RecipeGenerator]:
    """
    FastAPI dependency returning the configured generator, or None when
    generation is disabled (template recipes only).
    """
    if not settings.GENERATOR_ENABLED:
        return None
    return PerplexityRecipeGenerator(api_key=settings.PERPLEXITY_API_KEY)
