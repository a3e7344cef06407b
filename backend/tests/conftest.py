import pytest
from fastapi.testclient import TestClient

from gireach.config import settings
from gireach.main import app
from gireach.schemas.user import UserCreate
from gireach.services.auth_service import hash_password
from gireach.storage import get_storage
from gireach.storage.database_storage import DatabaseStorage
from gireach.storage.file_storage import FileStorage

TEST_PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    monkeypatch.setattr(settings, "PASSWORD_HASH_ROUNDS", 4)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def storage(tmp_path):
    return FileStorage(tmp_path / "data")


@pytest.fixture(params=["file", "sqlite"])
def any_storage(request, tmp_path):
    if request.param == "file":
        yield FileStorage(tmp_path / "data")
        return
    db_storage = DatabaseStorage(f"sqlite:///{tmp_path / 'test.db'}")
    db_storage.create_tables()
    yield db_storage
    db_storage.engine.dispose()


@pytest.fixture
def client(storage):
    app.dependency_overrides[get_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.pop(get_storage, None)


@pytest.fixture
def seed_users(storage):
    specs = {
        "admin": ("admin@gireach.pk", "Ayesha", "Khan", "admin"),
        "mentor": ("mentor@gireach.pk", "Bilal", "Ahmed", "mentor"),
        "mentee": ("mentee@gireach.pk", "Sana", "Malik", "mentee"),
    }
    users = {}
    for name, (email, first, last, role) in specs.items():
        users[name] = storage.create_user(
            UserCreate(
                email=email,
                password=hash_password(TEST_PASSWORD),
                first_name=first,
                last_name=last,
                role=role,
            )
        )
    return users


def get_token(client, email: str, password: str = TEST_PASSWORD) -> str:
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["token"]


def auth_headers(client, email: str, password: str = TEST_PASSWORD) -> dict:
    return {"Authorization": f"Bearer {get_token(client, email, password)}"}
