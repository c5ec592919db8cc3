"""Shared pytest fixtures for helperkit."""

import json

import pytest
import requests

from helperkit.config import reset_settings

API_KEY_VARS = ["EXCHANGE_RATE_API_KEY", "EXCHANGERATES_ACCESS_KEY", "OPENCAGE_API_KEY"]


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Start every test without cached settings or API keys from the environment."""
    for var in API_KEY_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()


def build_response(status_code=200, json_body=None, content=b"", url="https://example.test/"):
    """Build a real requests.Response with an already-read body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response._content = json.dumps(json_body).encode("utf-8") if json_body is not None else content
    response._content_consumed = True
    return response


@pytest.fixture
def make_response():
    return build_response
