# api/ratings.py
# Endpoints for rating recipes.

import logging
from uuid import UUID
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from app import crud
from app import models
from app import schemas
from app.api.identity import get_current_user
from app.db.session import get_db

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("/", response_model=List[schemas.Rating])
def read_my_ratings(
        db: Session = Depends(get_db),
        current_user: models.User = Depends(get_current_user)
):
    return crud.get_user_ratings(db, user_id=current_user.id)


@router.post("/", response_model=schemas.Rating, status_code=status.HTTP_201_CREATED)
def rate_recipe(
        rating: schemas.RatingCreate,
        response: Response,
        db: Session = Depends(get_db),
        current_user: models.User = Depends(get_current_user)
):
    """
    Rate a recipe from 1 to 5. Rating it again replaces the earlier rating
    (200 instead of 201).
    """
    db_rating, created = crud.rate_recipe(
        db, user_id=current_user.id, recipe_id=rating.recipe_id, rating=rating.rating
    )
    if not created:
        response.status_code = status.HTTP_200_OK
    logger.debug(
        f"User {current_user.username} {'added' if created else 'updated'} rating for recipe {rating.recipe_id}"
    )
    return db_rating


@router.get("/recipe/{recipe_id}", response_model=schemas.RecipeRatingSummary)
def read_recipe_rating(
        recipe_id: UUID,
        db: Session = Depends(get_db)
):
    """
    Average rating and number of ratings for a recipe.
    """
    average, count = crud.get_recipe_rating(db, recipe_id=recipe_id)
    return schemas.RecipeRatingSummary(recipe_id=recipe_id, average_rating=average, rating_count=count)


@router.get("/user/recipe/{recipe_id}", response_model=schemas.UserRating)
def read_user_rating(
        recipe_id: UUID,
        db: Session = Depends(get_db),
        current_user: models.User = Depends(get_current_user)
):
    """
    The current user's rating for a recipe, if any.
    """
    db_rating = crud.get_user_rating(db, user_id=current_user.id, recipe_id=recipe_id)
    return schemas.UserRating(
        recipe_id=recipe_id,
        user_id=current_user.id,
        rating=db_rating.rating if db_rating else None,
        has_rated=db_rating is not None,
    )
