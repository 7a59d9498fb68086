"""
Integration tests for application startup and last-resort error handling.
"""
import os
from unittest.mock import AsyncMock, patch

import pytest

pytestmark = pytest.mark.integration

from fastapi.testclient import TestClient

from trackit.api.middleware import SECURITY_HEADERS
from trackit.application.use_cases.location.get_device_history import GetDeviceHistoryUseCase
from trackit.core.config import Settings
from trackit.core.exceptions import ConfigurationError


def _settings_with(**overrides) -> Settings:
    env = {"MONGO_URL": "mongodb://localhost:27017", "DEVICE_KEY": "k", **overrides}
    with patch.dict(os.environ, env, clear=True):
        return Settings()


class TestStartup:
    """The lifespan refuses to start without required configuration"""

    @pytest.mark.parametrize("variable", ["DEVICE_KEY", "MONGO_URL"])
    def test_missing_required_setting_refuses_start(self, variable, container):
        from trackit.main import app

        settings = _settings_with(**{variable: ""})
        with patch("trackit.main.get_settings", return_value=settings), patch(
            "trackit.main.get_container", return_value=container
        ) as get_container:
            with pytest.raises(ConfigurationError, match=variable):
                with TestClient(app):
                    pass

        get_container.assert_not_called()

    def test_complete_settings_build_container(self, container):
        from trackit.main import app

        with patch("trackit.main.get_settings", return_value=_settings_with()), patch(
            "trackit.main.get_container", return_value=container
        ) as get_container, patch("trackit.main.close_mongo_connection") as close_connection:
            with TestClient(app):
                get_container.assert_called_once()

        close_connection.assert_called_once()


class TestUnhandledErrors:
    """Unexpected exceptions still produce the error envelope"""

    def test_unexpected_exception_returns_500_envelope(self, container, feature_schema):
        from trackit.main import app

        failing = AsyncMock()
        failing.find_by_device.side_effect = RuntimeError("boom")
        container.register_factory(
            GetDeviceHistoryUseCase,
            lambda: GetDeviceHistoryUseCase(
                feature_repository=failing, hash_device_id=lambda d: d, schema=feature_schema
            ),
        )

        with patch("trackit.api.v1.location_controller.get_container", return_value=container), patch(
            "trackit.main.get_container", return_value=container
        ):
            with TestClient(app, raise_server_exceptions=False) as client:
                response = client.get("/devices/abc123/history")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}
        for name, value in SECURITY_HEADERS.items():
            assert response.headers[name] == value
        assert "boom" not in response.text
