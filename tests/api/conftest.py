"""Pytest fixtures for in-process API tests."""

import pytest
from fastapi.testclient import TestClient

from statsapi import config
from statsapi.main import create_app


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    """Point UPLOAD_DIR at an empty temporary directory."""
    path = tmp_path / "uploads"
    monkeypatch.setattr(config, "UPLOAD_DIR", path)
    return path


@pytest.fixture
def client(upload_dir):
    """TestClient with the lifespan running, so /ready reports ready."""
    with TestClient(create_app()) as c:
        yield c
