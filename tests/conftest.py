"""Test configuration and fixtures for the YAML environment config loader."""

import pytest
import tempfile
import shutil
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from yaml_env_config.config.resolver import DEFAULT_ENV_NAME


DEFAULT_YAML = """\
app:
  name: demo
  debug: true
database:
  host: localhost
  port: 5432
features:
  - search
  - export
"""

PRODUCTION_YAML = """\
app:
  name: demo
  debug: false
database:
  host: db.internal
  port: 6432
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure the config environment variable is unset for every test."""
    monkeypatch.delenv(DEFAULT_ENV_NAME, raising=False)
    monkeypatch.delenv("CUSTOM_CONFIG", raising=False)
    yield monkeypatch


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def config_dir(temp_dir):
    """Directory with a default.yml and a production.yml."""
    (temp_dir / "default.yml").write_text(DEFAULT_YAML, encoding="utf-8")
    (temp_dir / "production.yml").write_text(PRODUCTION_YAML, encoding="utf-8")
    return temp_dir
