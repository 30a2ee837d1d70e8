# frontend/test_config.py
# Unit tests for environment-aware API URL resolution

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import frontend.config as config_module
from frontend.config import LOCAL_DEFAULT_URL, get_api_base_url, validate_api_url


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("BACKEND_URL", raising=False)
    monkeypatch.delenv("API_BASE_URL", raising=False)
    return monkeypatch


def test_validate_rejects_http_in_production():
    with pytest.raises(ValueError, match="HTTPS"):
        validate_api_url("http://api.example.com", "production")


def test_validate_rejects_localhost_in_staging():
    with pytest.raises(ValueError, match="localhost"):
        validate_api_url("https://localhost:3000", "staging")


def test_validate_allows_anything_non_empty_locally():
    validate_api_url("http://127.0.0.1:3000", "local")
    with pytest.raises(ValueError):
        validate_api_url("", "local")


def test_backend_url_has_priority(clean_env):
    clean_env.setenv("BACKEND_URL", "https://projects.example.com/")
    clean_env.setenv("API_BASE_URL", "https://legacy.example.com")
    with patch.object(config_module, "ENV", "production"):
        assert get_api_base_url() == "https://projects.example.com"


def test_legacy_api_base_url(clean_env):
    clean_env.setenv("API_BASE_URL", "https://legacy.example.com")
    with patch.object(config_module, "ENV", "production"):
        assert get_api_base_url() == "https://legacy.example.com"


def test_local_default(clean_env):
    with patch.object(config_module, "ENV", "local"):
        assert get_api_base_url() == LOCAL_DEFAULT_URL


def test_production_without_url_raises(clean_env):
    with patch.object(config_module, "ENV", "production"):
        with pytest.raises(RuntimeError, match="not configured"):
            get_api_base_url()


def test_projects_path_is_normalized():
    assert config_module.PROJECTS_API_PATH.startswith("/")
    assert not config_module.PROJECTS_API_PATH.endswith("/")
