import asyncio
import threading

import pytest
from sqlalchemy.exc import OperationalError

from app import crud, models, recipe_cache, schemas
from app.generator import RecipeGenerator, build_template_recipes
from app.models import SourceType
from app.resolution import (
    RecipeResolver,
    ResolutionStrategy,
    StoreStrategy,
    default_strategies,
)
from tests.helpers import make_recipe_data


class CountingGenerator(RecipeGenerator):
    name = "counting"

    def __init__(self):
        self.calls = 0

    async def generate(self, region, lat, lng):
        self.calls += 1
        return build_template_recipes(f"Generated {self.calls}", lat, lng)


class FailingStrategy(ResolutionStrategy):
    name = "failing"

    async def resolve(self, ctx):
        raise RuntimeError("source unavailable")


def resolve(db, lat, lng, radius_km=50, generator=None, strategies=None):
    resolver = RecipeResolver(strategies)
    return asyncio.run(resolver.resolve_with_source(db, lat, lng, radius_km, generator))


def test_naples_served_from_curated_data(db):
    source, recipes = resolve(db, 40.8358, 14.2488)

    assert source == "curated_city"
    assert {recipe.name for recipe in recipes} == {
        "Pizza Margherita", "Pasta alla Genovese", "Sfogliatella",
    }
    assert all(0 <= recipe.distance <= 50 for recipe in recipes)
    assert all(recipe.source_type == SourceType.CURATED for recipe in recipes)


def test_curated_result_is_cached_under_city_name(db):
    resolve(db, 40.8358, 14.2488)
    assert recipe_cache.get_cached_recipes(db, "Naples") is not None

    source, recipes = resolve(db, 40.85, 14.26)
    assert source == "city_cache"
    assert len(recipes) == 3


def test_mid_ocean_falls_back_to_template_recipes(db):
    source, recipes = resolve(db, 0, 0)

    assert source == "generated"
    assert [recipe.name for recipe in recipes] == [
        "African Special Dish 1", "African Special Dish 2", "African Special Dish 3",
    ]
    assert all(recipe.source_type == SourceType.API for recipe in recipes)
    assert all(recipe.distance == 0 for recipe in recipes)


def test_city_without_curated_data_is_generated(db):
    # Rome is a known city with no curated recipes
    generator = CountingGenerator()
    source, recipes = resolve(db, 41.9028, 12.4964, generator=generator)
    assert source == "generated"
    assert generator.calls == 1
    assert recipes[0].name == "Generated 1 Special Dish 1"


def test_stored_recipes_win(db, users):
    crud.create_recipe(
        db,
        schemas.RecipeSubmission(**make_recipe_data(name="Nonna's Ragu")),
        user_id=users["default"].id,
        is_approved=True,
    )
    source, recipes = resolve(db, 40.8358, 14.2488)
    assert source == "store"
    assert [recipe.name for recipe in recipes] == ["Nonna's Ragu"]
    assert recipes[0].id is not None


def test_unapproved_recipes_are_not_served(db, users):
    crud.create_recipe(
        db,
        schemas.RecipeSubmission(**make_recipe_data(name="Pending Ragu")),
        user_id=users["default"].id,
        is_approved=False,
    )
    _, recipes = resolve(db, 40.8358, 14.2488)
    assert "Pending Ragu" not in {recipe.name for recipe in recipes}


def test_second_lookup_reuses_cache_without_generating(db):
    generator = CountingGenerator()

    _, first = resolve(db, 0.001, 0.002, generator=generator)
    source, second = resolve(db, 0.001, 0.002, generator=generator)

    assert generator.calls == 1
    assert source == "coordinate_cache"
    assert [r.name for r in second] == [r.name for r in first]


def test_nearby_points_share_a_coordinate_entry(db):
    generator = CountingGenerator()
    resolve(db, 0.001, 0.001, generator=generator)
    resolve(db, 0.004, -0.002, generator=generator)
    assert generator.calls == 1


def test_never_empty_when_every_source_fails(db):
    source, recipes = resolve(db, 0, 0, strategies=[FailingStrategy(), FailingStrategy()])
    assert source == "failsafe"
    assert len(recipes) == 3
    assert all(recipe.source_type == SourceType.CURATED for recipe in recipes)
    distances = [recipe.distance for recipe in recipes]
    assert distances == sorted(distances)


def test_failing_store_falls_through_to_next_source(db, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("database down")

    monkeypatch.setattr(crud, "get_approved_recipes_near", broken)
    source, recipes = resolve(db, 40.8358, 14.2488)
    assert source == "curated_city"
    assert len(recipes) == 3


def test_cache_write_failure_still_returns_recipes(db, monkeypatch):
    from app.core.errors import PersistenceError

    def broken(*args, **kwargs):
        raise PersistenceError("cache_recipes", "disk full")

    monkeypatch.setattr(recipe_cache, "cache_recipes", broken)
    source, recipes = resolve(db, 0, 0)
    assert source == "generated"
    assert len(recipes) == 3
    assert db.query(models.RecipeCache).count() == 0


def _unreachable_database(db, monkeypatch):
    def unreachable(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("unable to open database file"))

    monkeypatch.setattr(db, "query", unreachable)


def test_unreachable_database_still_serves_curated_city(db, monkeypatch):
    _unreachable_database(db, monkeypatch)

    source, recipes = resolve(db, 40.8358, 14.2488)

    assert source == "curated_city"
    assert {recipe.name for recipe in recipes} == {
        "Pizza Margherita", "Pasta alla Genovese", "Sfogliatella",
    }


def test_unreachable_database_still_serves_generated_recipes(db, monkeypatch):
    _unreachable_database(db, monkeypatch)

    source, recipes = resolve(db, 0, 0)

    assert source == "generated"
    assert [recipe.name for recipe in recipes][0] == "African Special Dish 1"


def test_incomplete_strategy_cannot_be_built():
    class NoResolve(ResolutionStrategy):
        name = "incomplete"

    with pytest.raises(TypeError):
        NoResolve()


def test_resolve_returns_list(db):
    recipes = asyncio.run(RecipeResolver().resolve(db, 0, 0))
    assert len(recipes) == 3


def test_default_strategy_order():
    assert [s.name for s in default_strategies()] == [
        "store", "city_cache", "curated_city", "coordinate_cache", "generated",
    ]
    assert isinstance(default_strategies()[0], StoreStrategy)


@pytest.mark.parametrize("lat,lng", [(89.99, 0), (-89.99, 179.99), (0, -180), (45, 180)])
def test_extreme_coordinates_still_resolve(db, lat, lng):
    _, recipes = resolve(db, lat, lng)
    assert recipes


def test_database_work_runs_off_the_event_loop(db, monkeypatch):
    seen = {}
    real_query = crud.get_approved_recipes_near

    def recording(*args, **kwargs):
        seen["store"] = threading.get_ident()
        return real_query(*args, **kwargs)

    monkeypatch.setattr(crud, "get_approved_recipes_near", recording)

    async def run():
        seen["loop"] = threading.get_ident()
        return await RecipeResolver().resolve(db, 40.8358, 14.2488)

    assert asyncio.run(run())
    assert seen["store"] != seen["loop"]
