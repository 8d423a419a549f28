import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# It is important to set environment variables before importing app modules
import os
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

from app import crud, schemas
from app.db.session import Base, get_db
from app.generator import get_recipe_generator
from app.main import app
from app.models import SourceType
from tests.helpers import make_recipe_data

# Create a test database
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db
# No network calls from tests: searches fall back to template recipes
app.dependency_overrides[get_recipe_generator] = lambda: None


@pytest.fixture(scope="session", autouse=True)
def db_engine():
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if os.path.exists("./test.db"):
        os.remove("./test.db")


@pytest.fixture(autouse=True)
def clean_tables(db_engine):
    # Every test starts from empty tables
    Base.metadata.drop_all(bind=db_engine)
    Base.metadata.create_all(bind=db_engine)
    yield


@pytest.fixture(scope="function")
def db(db_engine) -> Generator:
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="module")
def client() -> Generator:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def users(db):
    """The two built-in identities plus a second regular user."""
    return {
        "admin": crud.create_user(db, "admin_user", is_admin=True),
        "default": crud.create_user(db, "default_user"),
        "other": crud.create_user(db, "other_user"),
    }


@pytest.fixture
def approved_recipe(db, users):
    return crud.create_recipe(
        db,
        schemas.RecipeSubmission(**make_recipe_data()),
        user_id=users["default"].id,
        source_type=SourceType.USER,
        is_approved=True,
    )
