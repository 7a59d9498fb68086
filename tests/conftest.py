"""
Shared pytest fixtures for trackit tests.
"""
import dataclasses
import os
from typing import List
from unittest.mock import MagicMock, patch

# Settings are read when trackit.main is imported; set them first
TEST_DEVICE_KEY = "test_device_key_for_testing_only"
os.environ.setdefault("MONGO_URL", "mongodb://localhost:27017")
os.environ.setdefault("MONGO_DB_NAME", "test_trackit")
os.environ.setdefault("DEVICE_KEY", TEST_DEVICE_KEY)
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from fastapi.testclient import TestClient

from trackit.application.use_cases.location.get_device_history import GetDeviceHistoryUseCase
from trackit.application.use_cases.location.submit_location_beacon import SubmitLocationBeaconUseCase
from trackit.core.security import DeviceIdHasher
from trackit.di.base_container import BaseContainer
from trackit.domain.models.feature import Feature
from trackit.domain.repositories.feature_repository import FeatureRepository
from trackit.domain.schemas import FeatureDocumentSchema


class InMemoryFeatureRepository(FeatureRepository):
    """FeatureRepository double that keeps features in a list"""

    def __init__(self) -> None:
        self.features: List[Feature] = []

    async def insert(self, feature: Feature) -> Feature:
        saved = dataclasses.replace(feature, id=f"{len(self.features) + 1:024x}")
        self.features.append(saved)
        return saved

    async def find_by_device(self, hashed_device_id: str) -> List[Feature]:
        return [f for f in self.features if f.device_id == hashed_device_id]


@pytest.fixture
def device_key():
    return os.environ["DEVICE_KEY"]


@pytest.fixture
def hasher(device_key):
    return DeviceIdHasher(device_key)


@pytest.fixture
def feature_schema():
    return FeatureDocumentSchema()


@pytest.fixture
def feature_repository():
    return InMemoryFeatureRepository()


@pytest.fixture
def container(feature_repository, hasher, feature_schema):
    """Container wiring the real use cases to the in-memory repository."""
    c = BaseContainer()
    c.register_singleton(FeatureRepository, feature_repository)
    c.register_factory(
        SubmitLocationBeaconUseCase,
        lambda: SubmitLocationBeaconUseCase(
            feature_repository=feature_repository,
            hash_device_id=hasher,
        ),
    )
    c.register_factory(
        GetDeviceHistoryUseCase,
        lambda: GetDeviceHistoryUseCase(
            feature_repository=feature_repository,
            hash_device_id=hasher,
            schema=feature_schema,
        ),
    )
    return c


@pytest.fixture
def client(container):
    """Create test client with a container that never touches MongoDB."""
    from trackit.main import app

    with patch("trackit.api.v1.location_controller.get_container", return_value=container), patch(
        "trackit.main.get_container", return_value=container
    ):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_url = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_trackit"
    mock.feature_collection_name = "trackit"
    mock.device_key = TEST_DEVICE_KEY
    mock.max_body_bytes = 1000
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("trackit.core.config.get_settings", return_value=mock), patch(
        "trackit.infrastructure.db.mongo_connection.get_settings", return_value=mock
    ), patch("trackit.di.providers.database_provider.get_settings", return_value=mock), patch(
        "trackit.di.providers.location_provider.get_settings", return_value=mock
    ):
        yield mock
