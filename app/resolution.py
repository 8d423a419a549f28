# resolution.py
# Answers "which recipes are near this point?" by trying each recipe source in
# turn until one of them has something to offer.
#
#   1. approved recipes in the database within the radius
#   2. cached recipes for the nearest known city
#   3. curated recipes for the nearest known city
#   4. cached recipes for the (rounded) coordinates
#   5. generated recipes for the coordinates' region
#
# If every source fails, a handful of curated recipes are served so the caller
# never gets an empty list.
#
# Database work is synchronous; it runs in the threadpool so a slow database
# does not block the event loop while other requests wait.

import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from app import cities, crud, geo, models, recipe_cache, schemas
from app.core.config import settings
from app.core.errors import PersistenceError
from app.curated_recipes import get_curated_recipes_for_city, sample_curated_recipes
from app.generator import RecipeGenerator, generate_with_fallback

logger = logging.getLogger(__name__)

FAILSAFE_RECIPE_COUNT = 3


def recipe_to_resolved(recipe: models.Recipe, distance: float) -> schemas.ResolvedRecipe:
    return schemas.ResolvedRecipe(
        id=recipe.id,
        name=recipe.name,
        ingredients=recipe.ingredients,
        instructions=recipe.instructions,
        location_lat=recipe.location_lat,
        location_lng=recipe.location_lng,
        location_name=recipe.location_name,
        city=recipe.city,
        country=recipe.country,
        photo_url=recipe.photo_url,
        source_type=recipe.source_type,
        distance=distance,
    )


class ResolutionContext:
    """
    The query being resolved plus lookups shared between strategies.
    """

    def __init__(
        self,
        db: Session,
        lat: float,
        lng: float,
        radius_km: float,
        generator: Optional[RecipeGenerator] = None,
    ):
        self.db = db
        self.lat = lat
        self.lng = lng
        self.radius_km = radius_km
        self.generator = generator
        self._city_looked_up = False
        self._nearest_city = None

    @property
    def nearest_city(self) -> Optional[cities.City]:
        if not self._city_looked_up:
            self._nearest_city = cities.find_nearest_city(self.lat, self.lng)
            self._city_looked_up = True
        return self._nearest_city

    @property
    def coordinate_key(self) -> str:
        return recipe_cache.coordinate_cache_key(self.lat, self.lng, self.radius_km)

    def stamp(self, recipes: Iterable[schemas.RecipeDraft]) -> List[schemas.ResolvedRecipe]:
        """
        Attach the distance from the query point to each recipe, closest first.
        """
        stamped = []
        for recipe in recipes:
            data = recipe.model_dump(exclude={"distance"})
            distance = geo.haversine_km(self.lat, self.lng, recipe.location_lat, recipe.location_lng)
            stamped.append(schemas.ResolvedRecipe(**data, distance=distance))
        stamped.sort(key=lambda item: item.distance)
        return stamped

    async def read_cache(self, key: str) -> Optional[List[schemas.ResolvedRecipe]]:
        return await run_in_threadpool(recipe_cache.get_cached_recipes, self.db, key)

    async def store_in_cache(
        self, key: str, lat: float, lng: float, recipes: List[schemas.ResolvedRecipe]
    ) -> None:
        try:
            await run_in_threadpool(recipe_cache.cache_recipes, self.db, key, lat, lng, recipes)
        except (PersistenceError, SQLAlchemyError) as e:
            # The recipes are still good to return; the next request regenerates them
            logger.warning(f"Could not cache recipes under '{key}': {e}")
            await run_in_threadpool(_reset_session, self.db)


class ResolutionStrategy(ABC):
    name = "strategy"

    @abstractmethod
    async def resolve(self, ctx: ResolutionContext) -> Optional[List[schemas.ResolvedRecipe]]:
        """Recipes for the query, or None/[] to let the next strategy try."""


class StoreStrategy(ResolutionStrategy):
    name = "store"

    async def resolve(self, ctx):
        rows = await run_in_threadpool(
            crud.get_approved_recipes_near, ctx.db, ctx.lat, ctx.lng, ctx.radius_km
        )
        return [recipe_to_resolved(recipe, distance) for recipe, distance in rows]


class CityCacheStrategy(ResolutionStrategy):
    name = "city_cache"

    async def resolve(self, ctx):
        city = ctx.nearest_city
        if city is None:
            return None
        cached = await ctx.read_cache(recipe_cache.city_cache_key(city.name))
        return ctx.stamp(cached) if cached else None


class CuratedCityStrategy(ResolutionStrategy):
    name = "curated_city"

    async def resolve(self, ctx):
        city = ctx.nearest_city
        if city is None:
            return None
        curated = get_curated_recipes_for_city(city.name)
        if not curated:
            logger.debug(f"No curated recipes for {city.name}")
            return None
        recipes = ctx.stamp(curated)
        await ctx.store_in_cache(recipe_cache.city_cache_key(city.name), city.lat, city.lng, recipes)
        return recipes


class CoordinateCacheStrategy(ResolutionStrategy):
    name = "coordinate_cache"

    async def resolve(self, ctx):
        cached = await ctx.read_cache(ctx.coordinate_key)
        return ctx.stamp(cached) if cached else None


class GeneratedStrategy(ResolutionStrategy):
    name = "generated"

    async def resolve(self, ctx):
        region = geo.region_label(ctx.lat, ctx.lng)
        drafts = await generate_with_fallback(ctx.generator, region, ctx.lat, ctx.lng)
        recipes = ctx.stamp(drafts)
        await ctx.store_in_cache(ctx.coordinate_key, ctx.lat, ctx.lng, recipes)
        return recipes


def _reset_session(db: Session) -> None:
    # Leave the session usable for the remaining strategies
    try:
        db.rollback()
    except SQLAlchemyError as e:
        logger.warning(f"Rollback after failed recipe source also failed: {e}")


def default_strategies() -> List[ResolutionStrategy]:
    return [
        StoreStrategy(),
        CityCacheStrategy(),
        CuratedCityStrategy(),
        CoordinateCacheStrategy(),
        GeneratedStrategy(),
    ]


class RecipeResolver:
    """
    Runs the strategies in order and returns the first non-empty result.
    """

    def __init__(self, strategies: Optional[List[ResolutionStrategy]] = None):
        self.strategies = strategies if strategies is not None else default_strategies()

    async def resolve(
        self,
        db: Session,
        lat: float,
        lng: float,
        radius_km: Optional[float] = None,
        generator: Optional[RecipeGenerator] = None,
    ) -> List[schemas.ResolvedRecipe]:
        _, recipes = await self.resolve_with_source(db, lat, lng, radius_km, generator)
        return recipes

    async def resolve_with_source(
        self,
        db: Session,
        lat: float,
        lng: float,
        radius_km: Optional[float] = None,
        generator: Optional[RecipeGenerator] = None,
    ) -> Tuple[str, List[schemas.ResolvedRecipe]]:
        """
        Like resolve, but also names the strategy that answered ("failsafe" if none did).
        """
        if radius_km is None:
            radius_km = settings.SEARCH_RADIUS_KM
        ctx = ResolutionContext(db, lat, lng, radius_km, generator=generator)

        for strategy in self.strategies:
            try:
                recipes = await strategy.resolve(ctx)
            except Exception:
                logger.exception(f"Recipe source '{strategy.name}' failed for ({lat}, {lng})")
                await run_in_threadpool(_reset_session, db)
                continue

            if recipes:
                logger.info(
                    f"Resolved {len(recipes)} recipes near ({lat}, {lng}) from '{strategy.name}'"
                )
                return strategy.name, recipes

        logger.error(f"All recipe sources failed for ({lat}, {lng}); serving curated failsafe")
        return "failsafe", ctx.stamp(sample_curated_recipes(FAILSAFE_RECIPE_COUNT))


def get_recipe_resolver() -> RecipeResolver:
    """FastAPI dependency; override in tests to swap strategies."""
    return RecipeResolver()
