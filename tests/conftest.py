"""Shared fixtures: an app whose stores and uploads live under tmp_path."""
import itertools
import os

import pytest
from fastapi.testclient import TestClient

from estate_api import uploads
from estate_api.config import Settings
from estate_api.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        properties_file=tmp_path / "properties.json",
        projects_file=tmp_path / "projects.json",
        uploads_dir=tmp_path / "uploads",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def distinct_timestamps(monkeypatch):
    """Make every generated upload name unique, one millisecond apart."""
    ticks = itertools.count(1_700_000_000_000)
    monkeypatch.setattr(
        uploads,
        "generate_filename",
        lambda original: f"{next(ticks)}{os.path.splitext(original)[1]}",
    )
