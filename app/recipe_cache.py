# recipe_cache.py
# Location-keyed cache of resolved recipe sets, stored in the recipe_cache table.

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from pydantic import TypeAdapter
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app import models
from app import schemas
from app.core.config import settings
from app.core.errors import PersistenceError
from app.crud import commit_or_raise

logger = logging.getLogger(__name__)

_cached_recipes = TypeAdapter(List[schemas.ResolvedRecipe])

# Two decimal places is roughly 1km, so nearby clicks share an entry
COORDINATE_PRECISION = 2


def city_cache_key(city: str) -> str:
    return city.strip()


def coordinate_cache_key(lat: float, lng: float, radius_km: float) -> str:
    """
    Cache key for an arbitrary point, e.g. "0.00,0.00@50km".
    """
    # Adding 0.0 turns -0.0 into 0.0 so both round to the same key
    lat = round(lat, COORDINATE_PRECISION) + 0.0
    lng = round(lng, COORDINATE_PRECISION) + 0.0
    return f"{lat:.{COORDINATE_PRECISION}f},{lng:.{COORDINATE_PRECISION}f}@{radius_km:g}km"


def _is_expired(entry: models.RecipeCache) -> bool:
    if settings.RECIPE_CACHE_TTL_HOURS is None or entry.created_at is None:
        return False
    created_at = entry.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return datetime.now(timezone.utc) - created_at > timedelta(hours=settings.RECIPE_CACHE_TTL_HOURS)


def get_cached_recipes(db: Session, key: str) -> Optional[List[schemas.ResolvedRecipe]]:
    """
    Recipes cached under `key`, or None on a miss.

    Expired and unreadable entries count as misses.
    """
    entry = db.query(models.RecipeCache).filter(models.RecipeCache.location_name == key).first()
    if entry is None:
        logger.debug(f"Recipe cache miss for '{key}'")
        return None

    if _is_expired(entry):
        logger.info(f"Recipe cache entry for '{key}' expired")
        return None

    try:
        recipes = _cached_recipes.validate_python(entry.recipe_data)
    except ValueError as e:
        logger.warning(f"Discarding unreadable recipe cache entry for '{key}': {e}")
        return None

    logger.debug(f"Recipe cache hit for '{key}' ({len(recipes)} recipes)")
    return recipes


def cache_recipes(
    db: Session, key: str, lat: float, lng: float, recipes: List[schemas.ResolvedRecipe]
) -> models.RecipeCache:
    """
    Store `recipes` under `key`, replacing any previous entry and refreshing its timestamp.
    """
    payload = _cached_recipes.dump_python(recipes, mode="json")
    now = datetime.now(timezone.utc)

    try:
        entry = db.query(models.RecipeCache).filter(models.RecipeCache.location_name == key).first()
        if entry is None:
            entry = models.RecipeCache(location_name=key)
            db.add(entry)

        entry.location_lat = lat
        entry.location_lng = lng
        entry.recipe_data = payload
        entry.created_at = now
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error during cache_recipes: {e}")
        raise PersistenceError("cache_recipes", str(e)) from e

    logger.debug(f"Cached {len(recipes)} recipes under '{key}'")
    return entry


def clear_recipe_cache(db: Session) -> int:
    deleted = db.query(models.RecipeCache).delete(synchronize_session=False)
    commit_or_raise(db, "clear_recipe_cache")
    logger.info(f"Cleared {deleted} recipe cache entries")
    return deleted
