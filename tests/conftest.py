"""Pytest configuration and fixtures."""

import os

# Use test database - PostgreSQL when TEST_DATABASE_URL is set, SQLite locally
SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from studyhub import models  # noqa: E402, F401
from studyhub.api.dependencies import get_static_site  # noqa: E402
from studyhub.database import Base, get_db  # noqa: E402
from studyhub.main import app  # noqa: E402
from studyhub.services.static_site import StaticSite  # noqa: E402

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def site_dirs(tmp_path):
    """Build and public directories with a few assets."""
    build = tmp_path / "build"
    public = tmp_path / "public"
    (build / "static").mkdir(parents=True)
    (public / "maths12-guide").mkdir(parents=True)
    (public / "science12-guide").mkdir(parents=True)

    (build / "index.html").write_text("<html>app shell</html>")
    (build / "static" / "app.js").write_text("console.log('app');")
    (public / "maths12-guide" / "chapter1.pdf").write_bytes(b"%PDF-1.4 maths")
    (public / "science12-guide" / "index.json").write_text('{"chapters": 3}')
    (public / "robots.txt").write_text("User-agent: *")
    (tmp_path / "secret.txt").write_text("outside")

    return StaticSite(
        build_dir=build,
        public_dir=public,
        subject_guides=["maths12-guide", "science12-guide"],
    )


@pytest.fixture(scope="function")
def client(db, site_dirs):
    """Create a test client with database and static site overrides."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_static_site] = lambda: site_dirs
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def signed_up_user(client):
    """Register Ann and return the signup payload with her user_id."""
    payload = {"name": "Ann", "mobileNo": "555", "emailID": "ann@x.com", "password": "pw1"}
    response = client.post("/api/signup", json=payload)
    assert response.status_code == 200
    return {**payload, "user_id": response.json()["user"]["user_id"]}
