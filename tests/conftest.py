"""Shared fixtures"""
import pytest
from fastapi.testclient import TestClient

from landing_synth.main import app


@pytest.fixture
def client():
    """FastAPI test client for the generator API"""
    with TestClient(app) as test_client:
        yield test_client
