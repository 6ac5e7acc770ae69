import pytest

from config import AppConfig
from web.main import create_app


@pytest.fixture
def app_config():
    return AppConfig(_env_file=None, ai_gateway_api_key="test-key", llm_provider="cloud")


@pytest.fixture
def client(app_config):
    app = create_app(app_config)
    app.testing = True
    return app.test_client()
