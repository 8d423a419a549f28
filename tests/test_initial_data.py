from app import crud, models
from app.curated_recipes import CURATED_RECIPES
from app.initial_data import init_db


def test_init_db_seeds_users_and_curated_recipes(db):
    init_db(db)

    admin = crud.get_user_by_username(db, "admin_user")
    assert admin.is_admin is True
    assert crud.get_user_by_username(db, "default_user").is_admin is False

    recipes = db.query(models.Recipe).all()
    assert len(recipes) == len(CURATED_RECIPES)
    assert all(recipe.is_approved for recipe in recipes)
    assert all(recipe.source_type == models.SourceType.CURATED for recipe in recipes)
    assert all(recipe.user_id == admin.id for recipe in recipes)


def test_init_db_is_idempotent(db):
    init_db(db)
    init_db(db)
    assert db.query(models.User).count() == 2
    assert db.query(models.Recipe).count() == len(CURATED_RECIPES)


def test_seeded_recipes_are_found_by_location(db):
    init_db(db)
    naples = crud.get_approved_recipes_near(db, 40.8358, 14.2488, 50)
    assert {recipe.name for recipe, _ in naples} == {
        "Pizza Margherita", "Pasta alla Genovese", "Sfogliatella",
    }
