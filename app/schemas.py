# schemas.py
# Defines the Pydantic models (schemas) for data validation and serialization.

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from uuid import UUID
from datetime import datetime
from app.models import ModerationStatus, SourceType

# --- User Schemas ---
class User(BaseModel):
    id: UUID
    username: str
    is_admin: bool
    model_config = ConfigDict(from_attributes=True)

# --- Recipe Schemas ---
class RecipeBase(BaseModel):
    name: str = Field(..., min_length=1)
    ingredients: str = Field(..., min_length=1)
    instructions: str = Field(..., min_length=1)
    location_lat: float = Field(..., ge=-90, le=90)
    location_lng: float = Field(..., ge=-180, le=180)
    location_name: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    photo_url: Optional[str] = None

class RecipeSubmission(RecipeBase):
    pass

class RecipeUpdate(RecipeBase):
    pass

class Recipe(RecipeBase):
    id: UUID
    source_type: SourceType
    is_approved: bool
    approval_date: Optional[datetime] = None
    user_id: Optional[UUID] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class RecipeDraft(BaseModel):
    """A recipe that exists only in memory or in the cache (curated seed, generated)."""
    name: str
    ingredients: str
    instructions: str
    location_lat: float
    location_lng: float
    location_name: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    photo_url: Optional[str] = None
    source_type: SourceType = SourceType.API
    cultural_note: Optional[str] = None

class ResolvedRecipe(RecipeDraft):
    """A recipe returned by a location query, stamped with its distance from the query point."""
    # Only recipes read from the store have an id
    id: Optional[UUID] = None
    distance: float

    model_config = ConfigDict(from_attributes=True)

# --- Moderation Schemas ---
class SubmissionResult(BaseModel):
    id: UUID
    moderation_id: UUID
    message: str

class ModerationQueueItem(BaseModel):
    moderation_id: UUID
    status: ModerationStatus
    submission_date: Optional[datetime] = None
    recipe_id: UUID
    name: str
    location_name: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    user_id: Optional[UUID] = None

class ModerationRequest(BaseModel):
    # Checked by the moderation workflow so that non-HTTP callers get the same rule
    status: str
    notes: Optional[str] = None

class ModerationResult(BaseModel):
    message: str
    moderation_id: UUID
    recipe_id: UUID
    status: ModerationStatus

# --- Favorite Schemas ---
class FavoriteCreate(BaseModel):
    recipe_id: UUID

class Favorite(BaseModel):
    id: UUID
    user_id: UUID
    recipe_id: UUID
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

class FavoriteRecipe(Recipe):
    favorite_id: UUID

# --- Rating Schemas ---
class RatingCreate(BaseModel):
    recipe_id: UUID
    rating: int = Field(..., ge=1, le=5)

class Rating(BaseModel):
    id: UUID
    user_id: UUID
    recipe_id: UUID
    rating: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

class RecipeRatingSummary(BaseModel):
    recipe_id: UUID
    average_rating: float
    rating_count: int

class UserRating(BaseModel):
    recipe_id: UUID
    user_id: UUID
    rating: Optional[int] = None
    has_rated: bool

# --- Generic ---
class Message(BaseModel):
    message: str

