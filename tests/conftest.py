"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from monstermaker.api.deps import get_dex_service
from monstermaker.core.species import SpeciesRegistry
from monstermaker.core.type_chart import TypeRegistry, load_standard_chart
from monstermaker.main import app
from monstermaker.services.dex_service import DexService


@pytest.fixture()
def dex_service() -> DexService:
    """Empty dex: no types, bestiary enabled."""
    return DexService(TypeRegistry(), SpeciesRegistry(bestiary_enabled=True))


@pytest.fixture()
def seeded_dex_service() -> DexService:
    """Dex preloaded with the standard 18-type chart."""
    types = TypeRegistry()
    load_standard_chart(types)
    return DexService(types, SpeciesRegistry(bestiary_enabled=True))


@pytest.fixture()
def client(seeded_dex_service: DexService) -> TestClient:
    """FastAPI TestClient wired to a fresh seeded dex."""
    app.dependency_overrides[get_dex_service] = lambda: seeded_dex_service
    yield TestClient(app)
    app.dependency_overrides.clear()
