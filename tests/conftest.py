import os
import tempfile

os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DB_URL_STRING"] = "sqlite://"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="attendance-uploads-")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import attendance_api.models  # noqa: F401
from attendance_api.database.session import Base, enable_sqlite_foreign_keys, get_db
from attendance_api.main import app
from attendance_api.services import auth as auth_service

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def alice(db):
    return auth_service.register(
        db,
        username="alice",
        password="s3cret",
        employee_id="E1",
        full_name="Alice Doe",
        department="Engineering",
    )


@pytest.fixture
def token(alice, db):
    return auth_service.login(db, "alice", "s3cret")["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": token}
