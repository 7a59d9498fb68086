"""
Unit tests for the process-wide MongoDB client lifecycle.
"""
from unittest.mock import MagicMock, patch

import pytest
from trackit.core.exceptions import ConfigurationError
from trackit.infrastructure.db import mongo_connection


@pytest.fixture(autouse=True)
def _reset_connection():
    mongo_connection.close_mongo_connection()
    yield
    mongo_connection.close_mongo_connection()


class TestMongoConnection:
    """Tests for connect_to_mongo / close_mongo_connection"""

    def test_client_created_once(self, mock_settings):
        with patch.object(mongo_connection, "AsyncIOMotorClient") as client_cls:
            first = mongo_connection.connect_to_mongo()
            second = mongo_connection.get_database()

        assert first is second
        client_cls.assert_called_once_with("mongodb://localhost:27017", tz_aware=True)
        client_cls.return_value.__getitem__.assert_called_once_with("test_trackit")

    def test_close_releases_client(self, mock_settings):
        with patch.object(mongo_connection, "AsyncIOMotorClient") as client_cls:
            mongo_connection.connect_to_mongo()
            mongo_connection.close_mongo_connection()
            mongo_connection.connect_to_mongo()

        client_cls.return_value.close.assert_called_once()
        assert client_cls.call_count == 2

    def test_feature_collection_uses_configured_name(self, mock_settings):
        mock_settings.feature_collection_name = "checkins"
        with patch.object(mongo_connection, "AsyncIOMotorClient") as client_cls:
            database = MagicMock()
            client_cls.return_value.__getitem__.return_value = database
            mongo_connection.get_feature_collection()

        database.__getitem__.assert_called_once_with("checkins")

    def test_missing_url_raises(self, mock_settings):
        mock_settings.mongo_url = ""
        with pytest.raises(ConfigurationError, match="MONGO_URL"):
            mongo_connection.connect_to_mongo()
