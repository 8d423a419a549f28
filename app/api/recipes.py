# api/recipes.py
# Handles all API endpoints related to recipes and their moderation.

import logging
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session
from typing import List, Optional

# Import local modules
from app import crud
from app import models
from app import moderation
from app import recipe_cache
from app import schemas
from app.api.identity import get_current_admin_user, get_current_user
from app.core.errors import NotFoundError
from app.db.session import get_db
from app.generator import RecipeGenerator, get_recipe_generator
from app.resolution import RecipeResolver, get_recipe_resolver

# Create an API router
router = APIRouter()

# Get a logger instance
logger = logging.getLogger(__name__)


@router.get("/", response_model=List[schemas.ResolvedRecipe])
async def read_recipes_near(
        request: Request,
        lat: float = Query(..., ge=-90, le=90, description="Latitude of the selected point"),
        lng: float = Query(..., ge=-180, le=180, description="Longitude of the selected point"),
        radius: Optional[float] = Query(
            default=None, gt=0, le=20038, description="Search radius in km (default 50)"
        ),
        db: Session = Depends(get_db),
        resolver: RecipeResolver = Depends(get_recipe_resolver),
        generator: Optional[RecipeGenerator] = Depends(get_recipe_generator),
):
    """
    Recipes near a point, closest first. Falls back to cached, curated and
    generated recipes when nothing is stored nearby, so the list is never empty.
    """
    logger.debug(f"Fetching recipes near ({lat}, {lng}) radius={radius}")
    source, recipes = await resolver.resolve_with_source(
        db, lat, lng, radius_km=radius, generator=generator
    )
    request.state.recipe_source = source
    request.state.recipe_count = len(recipes)
    return recipes


@router.post("/", response_model=schemas.SubmissionResult, status_code=status.HTTP_201_CREATED)
def submit_recipe(
        recipe: schemas.RecipeSubmission,
        db: Session = Depends(get_db),
        current_user: models.User = Depends(get_current_user)
):
    """
    Submit a recipe. It stays hidden until a moderator approves it.
    """
    logger.debug(f"User {current_user.username} is submitting a new recipe.")
    db_recipe, entry = moderation.submit_recipe(db, recipe, user_id=current_user.id)
    return schemas.SubmissionResult(
        id=db_recipe.id,
        moderation_id=entry.id,
        message="Recipe submitted successfully and awaiting moderation",
    )


# --- Admin Endpoints ---
# Declared before "/{recipe_id}" so "admin" is never parsed as an id.

@router.get("/admin/moderation-queue", response_model=List[schemas.ModerationQueueItem])
def read_moderation_queue(
        db: Session = Depends(get_db),
        current_user: models.User = Depends(get_current_admin_user)
):
    """
    Pending submissions, newest first.
    """
    return moderation.get_moderation_queue(db)


@router.post("/admin/moderate/{moderation_id}", response_model=schemas.ModerationResult)
def moderate_recipe(
        moderation_id: UUID,
        decision: schemas.ModerationRequest,
        db: Session = Depends(get_db),
        current_user: models.User = Depends(get_current_admin_user)
):
    """
    Approve or reject a pending submission.
    """
    logger.debug(f"User {current_user.username} is moderating entry {moderation_id}: {decision.status}")
    entry = moderation.moderate(
        db, moderation_id, decision.status, reviewer_id=current_user.id, notes=decision.notes
    )
    return schemas.ModerationResult(
        message=f"Recipe {entry.status.value}",
        moderation_id=entry.id,
        recipe_id=entry.recipe_id,
        status=entry.status,
    )


@router.delete("/admin/cache", response_model=schemas.Message)
def clear_cache(
        db: Session = Depends(get_db),
        current_user: models.User = Depends(get_current_admin_user)
):
    """
    Drop every cached recipe set; they are rebuilt on the next lookups.
    """
    deleted = recipe_cache.clear_recipe_cache(db)
    return {"message": f"Cleared {deleted} cached locations"}


@router.delete("/admin/{recipe_id}", response_model=schemas.Message)
def delete_recipe(
        recipe_id: UUID,
        db: Session = Depends(get_db),
        current_user: models.User = Depends(get_current_admin_user)
):
    """
    Delete a recipe along with its favorites, ratings and moderation entry.
    """
    logger.debug(f"User {current_user.username} is deleting recipe with ID: {recipe_id}")
    if crud.delete_recipe(db, recipe_id=recipe_id) is None:
        logger.warning(f"Recipe with ID: {recipe_id} not found for deletion.")
        raise NotFoundError("Recipe", recipe_id)
    return {"message": "Recipe deleted successfully"}


@router.get("/city/{city}", response_model=List[schemas.Recipe])
def read_recipes_by_city(
        city: str,
        db: Session = Depends(get_db)
):
    """
    Approved recipes stored for a city, by name.
    """
    return crud.get_recipes_by_city(db, city=city)


# --- Single Recipe Endpoints ---

@router.get("/{recipe_id}", response_model=schemas.Recipe)
def read_recipe(
        recipe_id: UUID,
        db: Session = Depends(get_db)
):
    """
    Retrieve a single approved recipe by its ID.
    """
    logger.debug(f"Fetching recipe with ID: {recipe_id}")
    db_recipe = crud.get_approved_recipe(db, recipe_id=recipe_id)
    if db_recipe is None:
        logger.warning(f"Recipe with ID {recipe_id} not found.")
        raise NotFoundError("Recipe", recipe_id)
    return db_recipe


@router.put("/{recipe_id}", response_model=schemas.Recipe)
def update_recipe(
        recipe_id: UUID,
        recipe: schemas.RecipeUpdate,
        db: Session = Depends(get_db),
        current_user: models.User = Depends(get_current_user)
):
    """
    Update an approved recipe. Only the owner of the recipe or an admin can do this.
    """
    logger.debug(f"User {current_user.username} is updating recipe with ID: {recipe_id}")
    db_recipe = crud.get_approved_recipe(db, recipe_id=recipe_id)
    if db_recipe is None:
        logger.warning(f"Recipe with ID {recipe_id} not found for update.")
        raise NotFoundError("Recipe", recipe_id)
    if db_recipe.user_id != current_user.id and not current_user.is_admin:
        logger.error(f"User {current_user.username} is not authorized to update recipe with ID: {recipe_id}")
        raise HTTPException(status_code=403, detail="Not authorized to update this recipe")

    return crud.update_recipe(db=db, recipe_id=recipe_id, recipe_update=recipe)
