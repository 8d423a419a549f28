# api/favorites.py
# Endpoints for the current user's favorite recipes.

import logging
from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app import crud
from app import models
from app import schemas
from app.api.identity import get_current_user
from app.db.session import get_db

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("/", response_model=List[schemas.FavoriteRecipe])
def read_favorites(
        db: Session = Depends(get_db),
        current_user: models.User = Depends(get_current_user)
):
    """
    The current user's favorite recipes, most recently added first.
    """
    favorites = crud.get_favorites(db, user_id=current_user.id)
    return [
        schemas.FavoriteRecipe(
            **schemas.Recipe.model_validate(favorite.recipe).model_dump(),
            favorite_id=favorite.id,
        )
        for favorite in favorites
    ]


@router.post("/", response_model=schemas.Favorite, status_code=status.HTTP_201_CREATED)
def add_favorite(
        favorite: schemas.FavoriteCreate,
        db: Session = Depends(get_db),
        current_user: models.User = Depends(get_current_user)
):
    """
    Add a recipe to the current user's favorites. Adding it twice is a conflict.
    """
    logger.debug(f"User {current_user.username} is adding recipe {favorite.recipe_id} to favorites")
    return crud.add_favorite(db, user_id=current_user.id, recipe_id=favorite.recipe_id)


@router.delete("/{favorite_id}", response_model=schemas.Message)
def remove_favorite(
        favorite_id: UUID,
        db: Session = Depends(get_db),
        current_user: models.User = Depends(get_current_user)
):
    logger.debug(f"User {current_user.username} is removing favorite {favorite_id}")
    crud.remove_favorite(db, user_id=current_user.id, favorite_id=favorite_id)
    return {"message": "Recipe removed from favorites"}
