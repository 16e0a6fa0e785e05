import jwt
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from meme_ideas.auth import CallerContext, UserIdentity, jwt_algorithm, jwt_secret
from meme_ideas.database import get_session
from meme_ideas.main import app

TEST_DATABASE_URL = "sqlite:///:memory:"

# ============================================================================
# Test Database Setup with StaticPool
# ============================================================================
# 1. sqlite:///:memory: with StaticPool so ALL sessions share same DB
# 2. check_same_thread=False required for TestClient/threaded access
# 3. All models imported before create_all() (see session_fixture)
# 4. App dependency overridden to use test_engine (see client_fixture)
# 5. Tables created before and dropped after every test
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


def override_get_session():
    """Override session to use test engine"""
    with Session(test_engine) as session:
        yield session


def make_token(user_id: str, email: str = None) -> str:
    payload = {"sub": user_id}
    if email:
        payload["email"] = email
    return jwt.encode(payload, jwt_secret(), algorithm=jwt_algorithm())


def auth_headers(user_id: str) -> dict:
    return {"Authorization": f"Bearer {make_token(user_id)}"}


def caller(user_id: str) -> CallerContext:
    return CallerContext(user=UserIdentity(id=user_id))


@pytest.fixture(name="session", scope="function")
def session_fixture():
    """Provide a test database session on a fresh schema"""
    from meme_ideas.models.meme_caption import MemeCaption  # noqa: F401
    from meme_ideas.models.meme_idea import MemeIdea  # noqa: F401
    from meme_ideas.models.meme_template import MemeTemplate  # noqa: F401

    SQLModel.metadata.create_all(test_engine)

    with Session(test_engine) as session:
        yield session

    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Provide a test client with overridden database session

    Override MUST be set BEFORE TestClient() and stay in place
    for the entire duration so the app never uses its own engine.
    """
    app.dependency_overrides[get_session] = override_get_session

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def alice_headers():
    return auth_headers("alice")


@pytest.fixture
def bob_headers():
    return auth_headers("bob")
