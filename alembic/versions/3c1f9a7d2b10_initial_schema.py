"""initial_schema

Revision ID: 3c1f9a7d2b10
Revises:
Create Date: 2026-10-18 09:12:41.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f9a7d2b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


source_type = sa.Enum('CURATED', 'API', 'USER', name='sourcetype')
moderation_status = sa.Enum('PENDING', 'APPROVED', 'REJECTED', name='moderationstatus')


def upgrade() -> None:
    """Users, recipes, moderation queue, favorites, ratings and the recipe cache."""
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=True),
        sa.Column('is_admin', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table(
        'recipes',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('ingredients', sa.Text(), nullable=False),
        sa.Column('instructions', sa.Text(), nullable=False),
        sa.Column('photo_url', sa.String(), nullable=True),
        sa.Column('location_lat', sa.Float(), nullable=False),
        sa.Column('location_lng', sa.Float(), nullable=False),
        sa.Column('location_name', sa.String(), nullable=True),
        sa.Column('city', sa.String(), nullable=True),
        sa.Column('country', sa.String(), nullable=True),
        sa.Column('source_type', source_type, nullable=False),
        sa.Column('is_approved', sa.Boolean(), nullable=False),
        sa.Column('approval_date', sa.DateTime(), nullable=True),
        sa.Column('user_id', sa.Uuid(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_recipes_id'), 'recipes', ['id'], unique=False)
    op.create_index(op.f('ix_recipes_name'), 'recipes', ['name'], unique=False)
    op.create_index(op.f('ix_recipes_location_lat'), 'recipes', ['location_lat'], unique=False)
    op.create_index(op.f('ix_recipes_location_lng'), 'recipes', ['location_lng'], unique=False)
    op.create_index(op.f('ix_recipes_city'), 'recipes', ['city'], unique=False)
    op.create_index(op.f('ix_recipes_is_approved'), 'recipes', ['is_approved'], unique=False)

    op.create_table(
        'moderation_queue',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('recipe_id', sa.Uuid(), nullable=False),
        sa.Column('status', moderation_status, nullable=False),
        sa.Column('reviewer_id', sa.Uuid(), nullable=True),
        sa.Column('review_notes', sa.Text(), nullable=True),
        sa.Column('review_date', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipes.id']),
        sa.ForeignKeyConstraint(['reviewer_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('recipe_id'),
    )
    op.create_index(op.f('ix_moderation_queue_id'), 'moderation_queue', ['id'], unique=False)
    op.create_index(op.f('ix_moderation_queue_status'), 'moderation_queue', ['status'], unique=False)
    op.create_index(op.f('ix_moderation_queue_created_at'), 'moderation_queue', ['created_at'], unique=False)

    op.create_table(
        'favorites',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('recipe_id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipes.id']),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'recipe_id', name='uq_favorites_user_recipe'),
    )
    op.create_index(op.f('ix_favorites_id'), 'favorites', ['id'], unique=False)
    op.create_index(op.f('ix_favorites_user_id'), 'favorites', ['user_id'], unique=False)
    op.create_index(op.f('ix_favorites_recipe_id'), 'favorites', ['recipe_id'], unique=False)

    op.create_table(
        'ratings',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('recipe_id', sa.Uuid(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint('rating >= 1 AND rating <= 5', name='ck_ratings_range'),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipes.id']),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'recipe_id', name='uq_ratings_user_recipe'),
    )
    op.create_index(op.f('ix_ratings_id'), 'ratings', ['id'], unique=False)
    op.create_index(op.f('ix_ratings_user_id'), 'ratings', ['user_id'], unique=False)
    op.create_index(op.f('ix_ratings_recipe_id'), 'ratings', ['recipe_id'], unique=False)

    op.create_table(
        'recipe_cache',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('location_name', sa.String(), nullable=False),
        sa.Column('location_lat', sa.Float(), nullable=False),
        sa.Column('location_lng', sa.Float(), nullable=False),
        sa.Column('recipe_data', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_recipe_cache_id'), 'recipe_cache', ['id'], unique=False)
    op.create_index(op.f('ix_recipe_cache_location_name'), 'recipe_cache', ['location_name'], unique=True)


def downgrade() -> None:
    """Drop everything in reverse dependency order."""
    op.drop_index(op.f('ix_recipe_cache_location_name'), table_name='recipe_cache')
    op.drop_index(op.f('ix_recipe_cache_id'), table_name='recipe_cache')
    op.drop_table('recipe_cache')

    op.drop_index(op.f('ix_ratings_recipe_id'), table_name='ratings')
    op.drop_index(op.f('ix_ratings_user_id'), table_name='ratings')
    op.drop_index(op.f('ix_ratings_id'), table_name='ratings')
    op.drop_table('ratings')

    op.drop_index(op.f('ix_favorites_recipe_id'), table_name='favorites')
    op.drop_index(op.f('ix_favorites_user_id'), table_name='favorites')
    op.drop_index(op.f('ix_favorites_id'), table_name='favorites')
    op.drop_table('favorites')

    op.drop_index(op.f('ix_moderation_queue_created_at'), table_name='moderation_queue')
    op.drop_index(op.f('ix_moderation_queue_status'), table_name='moderation_queue')
    op.drop_index(op.f('ix_moderation_queue_id'), table_name='moderation_queue')
    op.drop_table('moderation_queue')

    op.drop_index(op.f('ix_recipes_is_approved'), table_name='recipes')
    op.drop_index(op.f('ix_recipes_city'), table_name='recipes')
    op.drop_index(op.f('ix_recipes_location_lng'), table_name='recipes')
    op.drop_index(op.f('ix_recipes_location_lat'), table_name='recipes')
    op.drop_index(op.f('ix_recipes_name'), table_name='recipes')
    op.drop_index(op.f('ix_recipes_id'), table_name='recipes')
    op.drop_table('recipes')

    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_index(op.f('ix_users_username'), table_name='users')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')

    source_type.drop(op.get_bind(), checkfirst=True)
    moderation_status.drop(op.get_bind(), checkfirst=True)
