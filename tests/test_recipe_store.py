import pytest

from app import crud, schemas
from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.models import SourceType
from tests.helpers import make_recipe_data


def _store(db, user, approved=True, **overrides):
    return crud.create_recipe(
        db,
        schemas.RecipeSubmission(**make_recipe_data(**overrides)),
        user_id=user.id,
        is_approved=approved,
    )


def test_create_recipe_defaults(db, users):
    recipe = _store(db, users["default"], approved=False)
    assert recipe.id is not None
    assert recipe.source_type == SourceType.USER
    assert recipe.is_approved is False
    assert recipe.approval_date is None


def test_approved_recipe_gets_approval_date(db, users):
    recipe = _store(db, users["default"])
    assert recipe.is_approved is True
    assert recipe.approval_date is not None


def test_get_approved_recipe_hides_unapproved(db, users):
    recipe = _store(db, users["default"], approved=False)
    assert crud.get_recipe(db, recipe.id) is not None
    assert crud.get_approved_recipe(db, recipe.id) is None


def test_recipes_near_filters_by_true_distance(db, users):
    near = _store(db, users["default"], name="Near", location_lat=40.84, location_lng=14.25)
    farther = _store(db, users["default"], name="Farther", location_lat=41.07, location_lng=14.33)
    _store(db, users["default"], name="Milan", location_lat=45.4642, location_lng=9.19)
    _store(db, users["default"], name="Hidden", approved=False, location_lat=40.84, location_lng=14.25)

    results = crud.get_approved_recipes_near(db, 40.8358, 14.2488, 50)

    assert [recipe.name for recipe, _ in results] == ["Near", "Farther"]
    assert results[0][0].id == near.id
    assert results[1][0].id == farther.id
    distances = [distance for _, distance in results]
    assert distances == sorted(distances)
    assert all(0 <= distance <= 50 for distance in distances)


def test_recipes_near_excludes_box_corners(db, users):
    # Inside the bounding box, but more than 50km away diagonally
    _store(db, users["default"], name="Corner", location_lat=40.8358 + 0.44, location_lng=14.2488 + 0.58)
    assert crud.get_approved_recipes_near(db, 40.8358, 14.2488, 50) == []


def test_recipes_by_city_ignores_case(db, users):
    _store(db, users["default"], name="B dish", city="Naples")
    _store(db, users["default"], name="A dish", city="NAPLES")
    _store(db, users["default"], name="Pending", city="Naples", approved=False)
    names = [recipe.name for recipe in crud.get_recipes_by_city(db, "naples")]
    assert names == ["A dish", "B dish"]


def test_add_favorite_twice_conflicts(db, users, approved_recipe):
    crud.add_favorite(db, users["default"].id, approved_recipe.id)
    with pytest.raises(ConflictError):
        crud.add_favorite(db, users["default"].id, approved_recipe.id)
    assert len(crud.get_favorites(db, users["default"].id)) == 1


def test_add_favorite_unknown_recipe(db, users):
    import uuid
    with pytest.raises(NotFoundError):
        crud.add_favorite(db, users["default"].id, uuid.uuid4())


def test_remove_favorite_of_other_user_is_not_found(db, users, approved_recipe):
    favorite = crud.add_favorite(db, users["default"].id, approved_recipe.id)
    with pytest.raises(NotFoundError):
        crud.remove_favorite(db, users["other"].id, favorite.id)
    assert crud.get_favorite_for_recipe(db, users["default"].id, approved_recipe.id) is not None


def test_rate_recipe_upserts(db, users, approved_recipe):
    _, created = crud.rate_recipe(db, users["default"].id, approved_recipe.id, 3)
    assert created is True
    rating, created = crud.rate_recipe(db, users["default"].id, approved_recipe.id, 5)
    assert created is False
    assert rating.rating == 5
    assert crud.get_recipe_rating(db, approved_recipe.id) == (5.0, 1)


@pytest.mark.parametrize("value", [0, 6, -1])
def test_rate_recipe_out_of_range(db, users, approved_recipe, value):
    with pytest.raises(ValidationError):
        crud.rate_recipe(db, users["default"].id, approved_recipe.id, value)


def test_recipe_rating_without_ratings(db, approved_recipe):
    assert crud.get_recipe_rating(db, approved_recipe.id) == (0.0, 0)


def test_delete_recipe_cascades(db, users, approved_recipe):
    crud.add_favorite(db, users["default"].id, approved_recipe.id)
    crud.rate_recipe(db, users["other"].id, approved_recipe.id, 4)

    crud.delete_recipe(db, approved_recipe.id)

    assert crud.get_recipe(db, approved_recipe.id) is None
    assert crud.get_favorites(db, users["default"].id) == []
    assert crud.get_user_ratings(db, users["other"].id) == []


def test_unapproved_recipe_cannot_be_favorited_or_rated(db, users):
    pending = _store(db, users["default"], approved=False)
    with pytest.raises(NotFoundError):
        crud.add_favorite(db, users["default"].id, pending.id)
    with pytest.raises(NotFoundError):
        crud.rate_recipe(db, users["default"].id, pending.id, 4)
