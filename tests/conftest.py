"""
pytest configuration and fixtures for quotegen tests
"""

import random

import pytest
import requests

from quotegen.config import AppConfig
from quotegen.dispatch import UIDispatcher
from quotegen.quote_store import QuoteStore
from quotegen.saul_client import SaulClient


SAUL_URL = "https://bcs-quotes.vercel.app/api/quotes"


def make_response(body: bytes, status: int = 200) -> requests.Response:
    """Build a real requests.Response carrying the given body"""
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    resp.url = SAUL_URL
    resp.reason = "OK" if status < 400 else "Error"
    return resp


@pytest.fixture
def store():
    """Fresh store with the five seed quotes"""
    return QuoteStore()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def config(tmp_path):
    return AppConfig(settings_path=str(tmp_path / "settings.json"))


@pytest.fixture
def dispatcher():
    return UIDispatcher()


@pytest.fixture
def saul_client(config):
    client = SaulClient(config)
    yield client
    client.close()
