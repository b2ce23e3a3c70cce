"""
Shared pytest fixtures.

Provides fakes for the application ports and a TestClient whose FastAPI
dependencies are overridden with them.

Usage:
    def test_something(client, fake_store):
        fake_store.seed([...])
        response = client.get("/overview/exercises/bench_press/weeks")
        assert response.status_code == 200
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from api import deps
from application.use_cases import DraftSession
from backend.core.catalog import CatalogLoader, ExerciseCatalogIndex
from backend.main import create_app
from backend.settings import Settings
from domain.calendar import AppCalendar

from tests.fakes import FakeExerciseCatalogSource, FakeWorkoutStore, SAMPLE_CATALOG


@pytest.fixture
def calendar() -> AppCalendar:
    return AppCalendar(timezone="UTC", first_weekday=0)


@pytest.fixture
def fake_store() -> FakeWorkoutStore:
    return FakeWorkoutStore()


@pytest.fixture
def catalog_index() -> ExerciseCatalogIndex:
    return ExerciseCatalogIndex.from_entries(SAMPLE_CATALOG)


@pytest.fixture
def catalog_loader() -> CatalogLoader:
    loader = CatalogLoader(FakeExerciseCatalogSource())
    loader.load_sync()
    return loader


@pytest.fixture
def session(calendar, catalog_index) -> DraftSession:
    return DraftSession(calendar, names=catalog_index, initial_date=date(2024, 1, 1))


@pytest.fixture
def test_settings() -> Settings:
    return Settings(environment="test", database_path=":memory:", _env_file=None)


@pytest.fixture
def app(test_settings, fake_store, catalog_loader, calendar):
    """
    App with every port overridden by a fake.

    Overrides are scoped to this app instance, so tests never share state.
    """
    application = create_app(settings=test_settings)
    draft_session = DraftSession(calendar, names=catalog_loader, initial_date=date(2024, 1, 1))
    application.dependency_overrides[deps.get_settings] = lambda: test_settings
    application.dependency_overrides[deps.get_workout_store] = lambda: fake_store
    application.dependency_overrides[deps.get_catalog_loader] = lambda: catalog_loader
    application.dependency_overrides[deps.get_draft_session] = lambda: draft_session
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
