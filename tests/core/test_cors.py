"""Tests for motortech/core/cors.py and CORS settings parsing."""

from unittest.mock import MagicMock

from motortech.core.cors import add_cors_middleware
from motortech.core.settings import Settings, get_settings


def test_add_cors_middleware():
    """Test add_cors_middleware() allows the configured origins only."""
    mock_app = MagicMock()

    add_cors_middleware(mock_app)

    call_kwargs = mock_app.add_middleware.call_args[1]
    assert call_kwargs["allow_origins"] == get_settings().cors_origins_list
    assert call_kwargs["allow_credentials"] is True
    assert "Authorization" in call_kwargs["allow_headers"]
    assert "PATCH" in call_kwargs["allow_methods"]


def test_cors_origins_list_parsing(settings: Settings):
    settings.cors_origins = " https://a.example , ,https://b.example "

    assert settings.cors_origins_list == ["https://a.example", "https://b.example"]
