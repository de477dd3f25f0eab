"""
Test configuration and shared fixtures for the scheduling test suite.

Uses a temporary SQLite database file migrated once per session with
Alembic. Each test gets a session, and every table is emptied after the
test so the next one starts from a clean state.
"""

import os
import tempfile
from pathlib import Path
from typing import Generator, Optional

import pytest

# Point the application at a throwaway database before any app module is imported
_TEST_DB_FILE = tempfile.NamedTemporaryFile(suffix='.db', delete=False)
_TEST_DB_FILE.close()
TEST_DATABASE_URL = f"sqlite:///{_TEST_DB_FILE.name}"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL

from alembic import command  # noqa: E402
from alembic.config import Config  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from core.database import Base, SessionLocal, engine, drop_tables  # noqa: E402
from core.database import get_db  # noqa: E402
from models import File, User  # noqa: E402

BACKEND_DIR = Path(__file__).resolve().parent.parent


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """
    Create the test schema by running all Alembic migrations (base → head).

    This also verifies the migrations match what the models expect.
    """
    alembic_cfg = Config(str(BACKEND_DIR / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(BACKEND_DIR / "alembic"))
    alembic_cfg.set_main_option("sqlalchemy.url", TEST_DATABASE_URL)
    alembic_cfg.attributes["configure_logger"] = False

    command.upgrade(alembic_cfg, "head")

    yield

    drop_tables()
    engine.dispose()
    try:
        os.unlink(_TEST_DB_FILE.name)
    except OSError:
        pass  # Ignore cleanup errors


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Provide a database session and wipe every table after the test.

    Application code commits for real, so isolation comes from deleting
    rows afterwards instead of rolling back a wrapping transaction.
    """
    session = SessionLocal()

    yield session

    session.rollback()
    session.close()
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture
def client(db_session):
    """Create test client with database override."""
    from main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.pop(get_db, None)


def create_user(
    db_session: Session,
    name: str,
    email: str,
    is_provider: bool = False,
    avatar: Optional[File] = None,
) -> User:
    """Create and commit a user account."""
    user = User(
        name=name,
        email=email,
        password_hash="not-a-real-hash",
        is_provider=is_provider,
        avatar_id=avatar.id if avatar else None,
    )
    db_session.add(user)
    db_session.commit()
    return user


def create_avatar(db_session: Session, path: str) -> File:
    """Create and commit an avatar file record."""
    file = File(name=f"{path}.png", path=path)
    db_session.add(file)
    db_session.commit()
    return file


@pytest.fixture
def requester(db_session) -> User:
    return create_user(db_session, "Alice Requester", "alice@example.com")


@pytest.fixture
def provider(db_session) -> User:
    avatar = create_avatar(db_session, "barber-avatar")
    return create_user(db_session, "Bob Provider", "bob@example.com", is_provider=True, avatar=avatar)


@pytest.fixture
def other_provider(db_session) -> User:
    return create_user(db_session, "Carol Provider", "carol@example.com", is_provider=True)
