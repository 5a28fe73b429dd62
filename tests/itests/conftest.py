from configparser import ConfigParser

import pytest
from fastapi.testclient import TestClient

from vite_assets.application import create_fastapi_app
from vite_assets.dependency_injection.container import Container


@pytest.fixture
def config(roots) -> ConfigParser:
    config = ConfigParser()
    config.read_dict(
        {
            "app": {"loglevel": "debug", "debug": "true", "environment": "test"},
            "roots": {"index": roots.index, "base": roots.base, "config": roots.config},
            "vite": {"main_entry": "src/main.js"},
        }
    )
    return config


@pytest.fixture
def create_client(config):
    def _create_client() -> TestClient:
        return TestClient(
            create_fastapi_app(config, Container()), raise_server_exceptions=False
        )

    return _create_client
