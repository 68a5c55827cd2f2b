import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pagekit.infrastructure.db import models  # noqa: F401
from pagekit.infrastructure.db.session import Base, get_db
from pagekit.main import app
from tests.helpers.factories import create_cat, create_owner


@pytest.fixture(scope="session")
def engine():
    engine = create_engine(
        "sqlite://",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(autouse=True)
def clean_database(engine):
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture
def db_session(engine):
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = testing_session_local()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def five_cats(db_session):
    return [create_cat(db_session, name=f"Cat {index}") for index in range(1, 6)]


@pytest.fixture
def owned_cats(db_session):
    zoe = create_owner(db_session, "Zoe")
    adam = create_owner(db_session, "Adam")
    mia = create_owner(db_session, "Mia")
    return {
        "whiskers": create_cat(db_session, name="Whiskers", owner_id=zoe.id),
        "tom": create_cat(db_session, name="Tom", owner_id=adam.id),
        "luna": create_cat(db_session, name="Luna", owner_id=mia.id),
        "stray": create_cat(db_session, name="Stray"),
    }
