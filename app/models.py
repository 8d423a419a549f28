# models.py
# Defines the SQLAlchemy ORM models for the database tables.

import uuid
from sqlalchemy import (
    Boolean, CheckConstraint, Column, ForeignKey, Integer, String, Text, Enum, DateTime, Float,
    JSON, UniqueConstraint, func
)
from sqlalchemy.orm import relationship
from sqlalchemy.types import Uuid
from app.db.session import Base
import enum


class SourceType(str, enum.Enum):
    CURATED = "curated"
    API = "api"
    USER = "user"


class ModerationStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class User(Base):
    """
    User model for the 'users' table.
    """
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=True)
    is_active = Column(Boolean, default=True)
    is_admin = Column(Boolean, default=False)
    created_at = Column(DateTime, default=func.now())

    recipes = relationship("Recipe", back_populates="owner")
    favorites = relationship("Favorite", back_populates="user", cascade="all, delete-orphan")
    ratings = relationship("Rating", back_populates="user", cascade="all, delete-orphan")


class Recipe(Base):
    """
    Recipe model for the 'recipes' table.
    """
    __tablename__ = "recipes"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    # Core fields
    name = Column(String, index=True, nullable=False)
    ingredients = Column(Text, nullable=False)
    instructions = Column(Text, nullable=False)
    photo_url = Column(String, nullable=True)

    # Location
    location_lat = Column(Float, nullable=False, index=True)
    location_lng = Column(Float, nullable=False, index=True)
    location_name = Column(String, nullable=True)
    city = Column(String, nullable=True, index=True)
    country = Column(String, nullable=True)

    source_type = Column(Enum(SourceType), nullable=False, default=SourceType.USER)
    is_approved = Column(Boolean, nullable=False, default=False, index=True)
    approval_date = Column(DateTime, nullable=True)

    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, default=func.now())

    # Relationships
    owner = relationship("User", back_populates="recipes")
    favorites = relationship("Favorite", back_populates="recipe", cascade="all, delete-orphan")
    ratings = relationship("Rating", back_populates="recipe", cascade="all, delete-orphan")
    moderation_entry = relationship(
        "ModerationEntry",
        back_populates="recipe",
        uselist=False,
        cascade="all, delete-orphan",
    )

    def __str__(self):
        return f"{self.id}: {self.name} ({self.city or self.location_name})"


class ModerationEntry(Base):
    """
    A user submission awaiting (or having received) a moderation decision.
    """
    __tablename__ = "moderation_queue"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    recipe_id = Column(Uuid(as_uuid=True), ForeignKey("recipes.id"), unique=True, nullable=False)
    status = Column(Enum(ModerationStatus), nullable=False, default=ModerationStatus.PENDING, index=True)
    reviewer_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=True)
    review_notes = Column(Text, nullable=True)
    review_date = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=func.now(), index=True)

    recipe = relationship("Recipe", back_populates="moderation_entry")
    reviewer = relationship("User")


class Favorite(Base):
    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint("user_id", "recipe_id", name="uq_favorites_user_recipe"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True)
    recipe_id = Column(Uuid(as_uuid=True), ForeignKey("recipes.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=func.now())

    user = relationship("User", back_populates="favorites")
    recipe = relationship("Recipe", back_populates="favorites")


class Rating(Base):
    __tablename__ = "ratings"
    __table_args__ = (
        UniqueConstraint("user_id", "recipe_id", name="uq_ratings_user_recipe"),
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_ratings_range"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True)
    recipe_id = Column(Uuid(as_uuid=True), ForeignKey("recipes.id"), nullable=False, index=True)
    rating = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="ratings")
    recipe = relationship("Recipe", back_populates="ratings")


class RecipeCache(Base):
    """
    Previously resolved recipe sets, keyed by city name or rounded coordinates.
    Rows can be dropped at any time; the resolver rebuilds them.
    """
    __tablename__ = "recipe_cache"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    location_name = Column(String, unique=True, index=True, nullable=False)
    location_lat = Column(Float, nullable=False)
    location_lng = Column(Float, nullable=False)
    recipe_data = Column(JSON, nullable=False)
    created_at = Column(DateTime, default=func.now())
