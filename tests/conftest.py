import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_MAX_CALLS"] = "100000"
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.main import app as fastapi_app  # noqa: E402
from app.auth.deps import get_db  # noqa: E402
from app.db.session import Base, build_engine, init_db, make_session_factory  # noqa: E402
from app.models.user import User  # noqa: E402
from app.uploads.storage import LocalStorage, get_storage  # noqa: E402
from app.utils.security import hash_password  # noqa: E402

PASSWORD = "password123"


@pytest.fixture
def db_session():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    testing_session_local = make_session_factory(engine)
    init_db(engine)

    db = testing_session_local()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(str(tmp_path))


@pytest.fixture
def client(db_session, storage):
    def override_get_db():
        yield db_session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_storage] = lambda: storage
    try:
        yield TestClient(fastapi_app)
    finally:
        fastapi_app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    def _make(email: str, role: str = "user", name: str = "Test User") -> User:
        row = User(name=name, email=email, password_hash=hash_password(PASSWORD), role=role)
        db_session.add(row)
        db_session.commit()
        db_session.refresh(row)
        return row
    return _make


@pytest.fixture
def login(client):
    def _login(email: str) -> dict:
        resp = client.post("/login", json={"email": email, "password": PASSWORD})
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['token']}"}
    return _login
