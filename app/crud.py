# crud.py
# Contains the functions for Create, Read, Update, Delete (CRUD) operations.

import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from app import geo
from app import models
from app import schemas
from app.core.errors import ConflictError, NotFoundError, PersistenceError, ValidationError

# Get a logger instance
logger = logging.getLogger(__name__)


def commit_or_raise(db: Session, operation: str) -> None:
    """Commit the session, rolling back and raising PersistenceError on failure."""
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error during {operation}: {e}")
        raise PersistenceError(operation, str(e)) from e


# --- User CRUD Functions ---
def get_user(db: Session, user_id: UUID):
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_user_by_username(db: Session, username: str):
    return db.query(models.User).filter(models.User.username == username).first()


def create_user(db: Session, username: str, email: Optional[str] = None, is_admin: bool = False):
    db_user = models.User(username=username, email=email, is_admin=is_admin, is_active=True)
    db.add(db_user)
    commit_or_raise(db, "create_user")
    db.refresh(db_user)
    return db_user


# --- Recipe Store ---
def get_recipe(db: Session, recipe_id: UUID):
    """
    Retrieve a single recipe regardless of its approval state.
    """
    return db.query(models.Recipe).filter(models.Recipe.id == recipe_id).first()


def get_approved_recipe(db: Session, recipe_id: UUID):
    """
    Retrieve a single recipe, but only if it has been approved.
    Unapproved submissions are invisible to everything except moderation.
    """
    logger.debug(f"Retrieving approved recipe with id {recipe_id}")
    return (
        db.query(models.Recipe)
        .filter(models.Recipe.id == recipe_id, models.Recipe.is_approved.is_(True))
        .first()
    )


def get_approved_recipes_near(
    db: Session, lat: float, lng: float, radius_km: float
) -> List[Tuple[models.Recipe, float]]:
    """
    Approved recipes within `radius_km` of (lat, lng) as (recipe, distance) pairs,
    closest first.

    The bounding box only narrows the candidate rows; the Haversine distance
    decides membership.
    """
    box = geo.bounding_box(lat, lng, radius_km)
    logger.debug(f"Searching recipes near ({lat}, {lng}) within {radius_km}km, box={box}")

    candidates = (
        db.query(models.Recipe)
        .filter(
            models.Recipe.is_approved.is_(True),
            models.Recipe.location_lat.between(box.min_lat, box.max_lat),
            models.Recipe.location_lng.between(box.min_lng, box.max_lng),
        )
        .all()
    )

    results = []
    for recipe in candidates:
        distance = geo.haversine_km(lat, lng, recipe.location_lat, recipe.location_lng)
        if distance <= radius_km:
            results.append((recipe, distance))

    results.sort(key=lambda item: item[1])
    return results


def get_recipes_by_city(db: Session, city: str):
    """
    Approved recipes whose city equals `city`, ignoring case.
    """
    return (
        db.query(models.Recipe)
        .filter(
            func.lower(models.Recipe.city) == city.strip().lower(),
            models.Recipe.is_approved.is_(True),
        )
        .order_by(models.Recipe.name)
        .all()
    )


def build_recipe(
    recipe: schemas.RecipeBase,
    user_id: Optional[UUID],
    source_type: models.SourceType = models.SourceType.USER,
    is_approved: bool = False,
) -> models.Recipe:
    """
    Build (but do not persist) a Recipe row from validated input.
    """
    db_recipe = models.Recipe(
        **recipe.model_dump(include=set(schemas.RecipeBase.model_fields)),
        source_type=source_type,
        is_approved=is_approved,
        user_id=user_id,
        created_at=datetime.now(timezone.utc),
    )
    if is_approved:
        db_recipe.approval_date = datetime.now(timezone.utc)
    return db_recipe


def create_recipe(
    db: Session,
    recipe: schemas.RecipeBase,
    user_id: Optional[UUID],
    source_type: models.SourceType = models.SourceType.USER,
    is_approved: bool = False,
):
    """
    Insert a recipe and return the stored row with its assigned id.
    """
    logger.debug(f"Creating {source_type.value} recipe: {recipe.name}")
    db_recipe = build_recipe(recipe, user_id, source_type=source_type, is_approved=is_approved)
    db.add(db_recipe)
    commit_or_raise(db, "create_recipe")
    db.refresh(db_recipe)
    return db_recipe


def set_recipe_approval(db: Session, recipe_id: UUID, approved: bool, timestamp: datetime) -> int:
    """
    Set the approval flag and approval date of a recipe.

    Does not commit: the caller owns the transaction. Returns the number of rows updated.
    """
    return (
        db.query(models.Recipe)
        .filter(models.Recipe.id == recipe_id)
        .update(
            {models.Recipe.is_approved: approved, models.Recipe.approval_date: timestamp},
            synchronize_session=False,
        )
    )


def update_recipe(db: Session, recipe_id: UUID, recipe_update: schemas.RecipeUpdate):
    """
    Update an approved recipe. Returns None when no approved recipe has this id.
    """
    logger.debug(f"Updating recipe {recipe_id} with: {recipe_update}")
    db_recipe = get_approved_recipe(db, recipe_id)
    if not db_recipe:
        return None

    for key, value in recipe_update.model_dump().items():
        setattr(db_recipe, key, value)

    commit_or_raise(db, "update_recipe")
    db.refresh(db_recipe)
    return db_recipe


def delete_recipe(db: Session, recipe_id: UUID):
    """
    Delete a recipe from the database.
    The cascade option in the model will handle deleting favorites, ratings
    and the moderation entry.
    """
    db_recipe = get_recipe(db, recipe_id)
    if db_recipe:
        logger.debug(f"Deleting recipe {recipe_id}")
        db.delete(db_recipe)
        commit_or_raise(db, "delete_recipe")
    else:
        logger.debug(f"Recipe {recipe_id} not found - nothing to delete")
    return db_recipe


# --- Favorite CRUD Functions ---
def get_favorites(db: Session, user_id: UUID):
    return (
        db.query(models.Favorite)
        .options(joinedload(models.Favorite.recipe))
        .filter(models.Favorite.user_id == user_id)
        .order_by(models.Favorite.created_at.desc())
        .all()
    )


def get_favorite_for_recipe(db: Session, user_id: UUID, recipe_id: UUID):
    return (
        db.query(models.Favorite)
        .filter(models.Favorite.user_id == user_id, models.Favorite.recipe_id == recipe_id)
        .first()
    )


def add_favorite(db: Session, user_id: UUID, recipe_id: UUID):
    """
    Add an approved recipe to a user's favorites. A second add for the same pair is a conflict.
    """
    if not get_approved_recipe(db, recipe_id):
        raise NotFoundError("Recipe", recipe_id)

    if get_favorite_for_recipe(db, user_id, recipe_id):
        raise ConflictError("Recipe already in favorites")

    db_favorite = models.Favorite(
        user_id=user_id, recipe_id=recipe_id, created_at=datetime.now(timezone.utc)
    )
    db.add(db_favorite)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent add for the same pair
        db.rollback()
        raise ConflictError("Recipe already in favorites") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error during add_favorite: {e}")
        raise PersistenceError("add_favorite", str(e)) from e
    db.refresh(db_favorite)
    return db_favorite


def remove_favorite(db: Session, user_id: UUID, favorite_id: UUID) -> None:
    """
    Remove one of the user's favorites. Favorites owned by other users are never touched.
    """
    deleted = (
        db.query(models.Favorite)
        .filter(models.Favorite.id == favorite_id, models.Favorite.user_id == user_id)
        .delete(synchronize_session=False)
    )
    commit_or_raise(db, "remove_favorite")
    if deleted == 0:
        raise NotFoundError("Favorite", favorite_id)


# --- Rating CRUD Functions ---
def get_user_rating(db: Session, user_id: UUID, recipe_id: UUID):
    return (
        db.query(models.Rating)
        .filter(models.Rating.user_id == user_id, models.Rating.recipe_id == recipe_id)
        .first()
    )


def get_user_ratings(db: Session, user_id: UUID):
    return (
        db.query(models.Rating)
        .filter(models.Rating.user_id == user_id)
        .order_by(models.Rating.updated_at.desc())
        .all()
    )


def rate_recipe(db: Session, user_id: UUID, recipe_id: UUID, rating: int) -> Tuple[models.Rating, bool]:
    """
    Record a user's rating for an approved recipe.

    The first rating inserts a row; later ratings overwrite it. Returns the row and
    whether it was newly created.
    """
    if not 1 <= rating <= 5:
        raise ValidationError("Rating must be a number between 1 and 5")

    if not get_approved_recipe(db, recipe_id):
        raise NotFoundError("Recipe", recipe_id)

    db_rating = get_user_rating(db, user_id, recipe_id)
    if db_rating:
        db_rating.rating = rating
        commit_or_raise(db, "rate_recipe")
        db.refresh(db_rating)
        return db_rating, False

    db_rating = models.Rating(user_id=user_id, recipe_id=recipe_id, rating=rating)
    db.add(db_rating)
    try:
        db.commit()
    except IntegrityError:
        # A concurrent request inserted the row first; fall back to updating it
        db.rollback()
        db_rating = get_user_rating(db, user_id, recipe_id)
        if db_rating is None:
            raise PersistenceError("rate_recipe", "rating row vanished after conflict")
        db_rating.rating = rating
        commit_or_raise(db, "rate_recipe")
        db.refresh(db_rating)
        return db_rating, False
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error during rate_recipe: {e}")
        raise PersistenceError("rate_recipe", str(e)) from e

    db.refresh(db_rating)
    return db_rating, True


def get_recipe_rating(db: Session, recipe_id: UUID) -> Tuple[float, int]:
    """
    Average and number of ratings for a recipe; (0, 0) when it has none.
    """
    average, count = (
        db.query(func.avg(models.Rating.rating), func.count(models.Rating.id))
        .filter(models.Rating.recipe_id == recipe_id)
        .one()
    )
    return float(average or 0), int(count or 0)
