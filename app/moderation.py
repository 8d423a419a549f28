# moderation.py
# Lifecycle of user-submitted recipes: pending -> approved | rejected.

import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from app import crud, models, schemas
from app.core.errors import ConflictError, NotFoundError, PersistenceError, ValidationError
from app.models import ModerationStatus

logger = logging.getLogger(__name__)

# Only pending entries can move, and only to a terminal state
VALID_STATUS_TRANSITIONS = {
    ModerationStatus.PENDING: {ModerationStatus.APPROVED, ModerationStatus.REJECTED},
}

INVALID_DECISION_MESSAGE = 'Status must be either "approved" or "rejected"'


def parse_decision(status) -> ModerationStatus:
    """
    Validate a requested moderation decision.
    """
    try:
        target = ModerationStatus(status)
    except ValueError:
        raise ValidationError(INVALID_DECISION_MESSAGE)
    if target not in VALID_STATUS_TRANSITIONS[ModerationStatus.PENDING]:
        raise ValidationError(INVALID_DECISION_MESSAGE)
    return target


def submit_recipe(
    db: Session, recipe_in: schemas.RecipeSubmission, user_id: UUID
) -> Tuple[models.Recipe, models.ModerationEntry]:
    """
    Store a user's recipe as unapproved and queue it for moderation.

    The recipe and its moderation entry are committed together or not at all.
    """
    logger.debug(f"User {user_id} submitting recipe '{recipe_in.name}' for moderation")
    try:
        db_recipe = crud.build_recipe(
            recipe_in, user_id, source_type=models.SourceType.USER, is_approved=False
        )
        db.add(db_recipe)
        # Assigns the recipe id inside the open transaction
        db.flush()

        entry = models.ModerationEntry(
            recipe_id=db_recipe.id,
            status=ModerationStatus.PENDING,
            created_at=datetime.now(timezone.utc),
        )
        db.add(entry)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error submitting recipe '{recipe_in.name}': {e}")
        raise PersistenceError("submit_recipe", str(e)) from e

    db.refresh(db_recipe)
    db.refresh(entry)
    logger.info(f"Recipe {db_recipe.id} queued for moderation as entry {entry.id}")
    return db_recipe, entry


def get_moderation_entry(db: Session, moderation_id: UUID) -> Optional[models.ModerationEntry]:
    return (
        db.query(models.ModerationEntry)
        .filter(models.ModerationEntry.id == moderation_id)
        .first()
    )


def get_moderation_queue(db: Session) -> List[schemas.ModerationQueueItem]:
    """
    Pending submissions, newest first.
    """
    entries = (
        db.query(models.ModerationEntry)
        .options(joinedload(models.ModerationEntry.recipe))
        .filter(models.ModerationEntry.status == ModerationStatus.PENDING)
        .order_by(models.ModerationEntry.created_at.desc())
        .all()
    )
    return [
        schemas.ModerationQueueItem(
            moderation_id=entry.id,
            status=entry.status,
            submission_date=entry.created_at,
            recipe_id=entry.recipe.id,
            name=entry.recipe.name,
            location_name=entry.recipe.location_name,
            city=entry.recipe.city,
            country=entry.recipe.country,
            user_id=entry.recipe.user_id,
        )
        for entry in entries
    ]


def moderate(
    db: Session,
    moderation_id: UUID,
    status,
    reviewer_id: Optional[UUID],
    notes: Optional[str] = None,
) -> models.ModerationEntry:
    """
    Approve or reject a pending submission.

    The entry is claimed with a single conditional UPDATE (only while it is still
    pending), so two reviewers racing on the same entry cannot both succeed. The
    entry and the recipe's approval flag are committed in one transaction.

    Raises ValidationError for an unknown decision, NotFoundError for an unknown
    entry, ConflictError when the entry was already decided and PersistenceError
    when the write fails.
    """
    target = parse_decision(status)
    now = datetime.now(timezone.utc)

    try:
        claimed = (
            db.query(models.ModerationEntry)
            .filter(
                models.ModerationEntry.id == moderation_id,
                models.ModerationEntry.status == ModerationStatus.PENDING,
            )
            .update(
                {
                    models.ModerationEntry.status: target,
                    models.ModerationEntry.reviewer_id: reviewer_id,
                    models.ModerationEntry.review_notes: notes or None,
                    models.ModerationEntry.review_date: now,
                },
                synchronize_session=False,
            )
        )

        if claimed == 0:
            db.rollback()
            entry = get_moderation_entry(db, moderation_id)
            if entry is None:
                logger.warning(f"Moderation entry {moderation_id} not found")
                raise NotFoundError("Moderation entry", moderation_id)
            logger.warning(
                f"Moderation entry {moderation_id} already {entry.status.value}; refusing to set {target.value}"
            )
            raise ConflictError(f"Recipe has already been {entry.status.value}")

        recipe_id = (
            db.query(models.ModerationEntry.recipe_id)
            .filter(models.ModerationEntry.id == moderation_id)
            .scalar()
        )
        updated = crud.set_recipe_approval(
            db, recipe_id, approved=(target == ModerationStatus.APPROVED), timestamp=now
        )
        if updated == 0:
            db.rollback()
            logger.error(f"Recipe {recipe_id} for moderation entry {moderation_id} is missing")
            raise PersistenceError("moderate", f"recipe {recipe_id} missing")

        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error moderating entry {moderation_id}: {e}")
        raise PersistenceError("moderate", str(e)) from e

    logger.info(f"Moderation entry {moderation_id} {target.value} by reviewer {reviewer_id}")
    return get_moderation_entry(db, moderation_id)
