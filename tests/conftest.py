"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from chip8_web.config import Settings
from chip8_web.core.app_factory import create_app

INDEX_TEMPLATE = """<!DOCTYPE html>
<html>
<head><title>{{ title }}</title></head>
<body><h1>{{ title }}</h1></body>
</html>
"""

SECRET = b"top secret, outside the asset root"


@pytest.fixture(autouse=True)
def reset_settings_singleton(monkeypatch):
    """Make every test start without cached settings."""
    monkeypatch.setattr("chip8_web.config._settings_instance", None)


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Site layout on disk: templates/, assets/ and a file outside the asset root."""
    templates_dir = tmp_path / "templates"
    templates_dir.mkdir()
    (templates_dir / "index.html").write_text(INDEX_TEMPLATE, encoding="utf-8")

    assets_dir = tmp_path / "assets"
    (assets_dir / "js").mkdir(parents=True)
    (assets_dir / "present.txt").write_bytes(b"hello")
    (assets_dir / "js" / "app.js").write_text("console.log('chip-8');\n", encoding="utf-8")
    (assets_dir / "rom.bin").write_bytes(bytes(range(256)))

    (tmp_path / "secret.txt").write_bytes(SECRET)
    return tmp_path


@pytest.fixture
def test_settings(site_dir: Path) -> Settings:
    """Settings pointing at the temporary site."""
    return Settings(
        _env_file=None,
        templates_dir=site_dir / "templates",
        assets_dir=site_dir / "assets",
    )


@pytest.fixture
def app(test_settings: Settings):
    """Application built from the temporary site."""
    return create_app(test_settings)


@pytest.fixture
def test_client(app):
    """FastAPI test client with lifespan context."""
    with TestClient(app) as client:
        yield client
