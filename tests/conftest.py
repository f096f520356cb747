"""
pytest fixtures: a fresh database per test seeded with two identification types
"""

import pytest
from fastapi.testclient import TestClient

from gestion_transporte.core.config import Settings
from gestion_transporte.core.database import Base, build_engine, build_session_factory
from gestion_transporte.main import create_app
from gestion_transporte.models.identification_type import IdentificationType

SEED_ROWS = {1: "Cédula", 2: "Pasaporte"}


def seed(session_factory):
    db = session_factory()
    try:
        db.add_all([IdentificationType(id=id_, name=name) for id_, name in SEED_ROWS.items()])
        db.commit()
    finally:
        db.close()


@pytest.fixture
def settings():
    return Settings(DATABASE_URL="sqlite://", CREATE_TABLES=True, LOG_LEVEL="debug")


@pytest.fixture
def session_factory(settings):
    """In-memory database shared through a single connection"""
    engine = build_engine(settings)
    Base.metadata.create_all(bind=engine)
    factory = build_session_factory(engine)
    seed(factory)
    yield factory
    engine.dispose()


@pytest.fixture
def file_session_factory(tmp_path):
    """File database, so two sessions get independent connections"""
    engine = build_engine(Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'transporte.db'}"))
    Base.metadata.create_all(bind=engine)
    factory = build_session_factory(engine)
    seed(factory)
    yield factory
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def app(settings):
    application = create_app(settings)
    Base.metadata.create_all(bind=application.state.engine)
    seed(application.state.session_factory)
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
