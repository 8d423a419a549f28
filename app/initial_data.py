import logging
from sqlalchemy.orm import Session

from app import crud, models
from app.curated_recipes import get_curated_recipes
from app.db.session import SessionLocal
from app.core.config import settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def init_users(db: Session) -> models.User:
    admin = crud.get_user_by_username(db, settings.DEFAULT_ADMIN_USERNAME)
    if admin:
        logger.info(f"Admin user {settings.DEFAULT_ADMIN_USERNAME} already exists.")
    else:
        logger.info(f"Creating admin user {settings.DEFAULT_ADMIN_USERNAME}...")
        admin = crud.create_user(db, settings.DEFAULT_ADMIN_USERNAME, is_admin=True)

    if crud.get_user_by_username(db, settings.DEFAULT_USERNAME) is None:
        logger.info(f"Creating default user {settings.DEFAULT_USERNAME}...")
        crud.create_user(db, settings.DEFAULT_USERNAME)
    return admin


def init_recipes(db: Session, owner: models.User) -> int:
    # Only seed an empty store so restarts do not duplicate the curated set
    if db.query(models.Recipe).first() is not None:
        logger.info("Recipes already present, skipping curated seed.")
        return 0

    count = 0
    for recipe in get_curated_recipes():
        db.add(crud.build_recipe(
            recipe,
            user_id=owner.id,
            source_type=models.SourceType.CURATED,
            is_approved=True,
        ))
        count += 1
    crud.commit_or_raise(db, "seed_curated_recipes")
    logger.info(f"Seeded {count} curated recipes.")
    return count


def init_db(db: Session) -> None:
    admin = init_users(db)
    init_recipes(db, admin)


def main() -> None:
    db = SessionLocal()
    try:
        init_db(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
