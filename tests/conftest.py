"""
Shared pytest fixtures and configuration for all tests.

This module provides fixtures for:
- Temporary configuration files
- Mock credentials in the environment
- Mock requests sessions and a Dispatcher wired to them
"""

import tempfile
import shutil
from pathlib import Path
from typing import Dict, Any, Generator
from unittest.mock import Mock
import pytest
import yaml

from upguard_cli.upguardapi.dispatcher import Dispatcher
from upguard_cli.utils.models import Credential


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory that is cleaned up after the test."""
    temp_path = Path(tempfile.mkdtemp(prefix="upguard_test_"))
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def temp_config_dir(temp_dir: Path) -> Path:
    """Create a temporary config directory."""
    config_dir = temp_dir / "config"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


@pytest.fixture
def minimal_config_data() -> Dict[str, Any]:
    """Minimal configuration data for testing: credentials only."""
    return {
        "upguard_credentials": {
            "url": "https://appliance.test.example.com",
            "api_key": "config_api_key",
            "secret_key": "config_secret_key"
        }
    }


@pytest.fixture
def maximal_config_data(temp_dir: Path) -> Dict[str, Any]:
    """Configuration data with every section specified."""
    return {
        "upguard_credentials": {
            "url": "appliance.test.example.com/",
            "api_key": "config_api_key",
            "secret_key": "config_secret_key",
            "prefix": "TEST_UG_"
        },
        "tls": {
            "verify_certificates": False,
            "minimum_version": "TLSv1_3"
        },
        "logging": {
            "file": str(temp_dir / "logs" / "test.log"),
            "level": "DEBUG"
        }
    }


def write_config_file(config_dir: Path, config_data: Dict[str, Any], filename: str = "config.yaml") -> Path:
    """Helper function to write configuration data to a YAML file.

    Args:
        config_dir: Directory to write the config file
        config_data: Configuration dictionary
        filename: Name of the config file (default: config.yaml)

    Returns:
        Path to the written config file
    """
    config_path = config_dir / filename
    with open(config_path, 'w') as f:
        yaml.dump(config_data, f, default_flow_style=False, sort_keys=False)
    return config_path


@pytest.fixture
def minimal_config_file(temp_config_dir: Path, minimal_config_data: Dict[str, Any]) -> Path:
    """Create a minimal config file in a temporary directory."""
    return write_config_file(temp_config_dir, minimal_config_data)


@pytest.fixture
def maximal_config_file(temp_config_dir: Path, maximal_config_data: Dict[str, Any]) -> Path:
    """Create a maximal config file in a temporary directory."""
    return write_config_file(temp_config_dir, maximal_config_data)


@pytest.fixture
def mock_env_credentials(monkeypatch) -> Dict[str, str]:
    """Set up mock environment variables for API credentials.

    Returns:
        Dictionary of credential values set
    """
    credentials = {
        "UPGUARD_URL": "https://env.test.example.com",
        "UPGUARD_API_KEY": "env_api_key",
        "UPGUARD_SECRET_KEY": "env_secret_key"
    }

    for key, value in credentials.items():
        monkeypatch.setenv(key, value)

    return credentials


@pytest.fixture
def clean_env(monkeypatch):
    """Remove credential environment variables and stop .env loading."""
    for key in ("UPGUARD_URL", "UPGUARD_API_KEY", "UPGUARD_SECRET_KEY"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("upguard_cli.cli.cli_setup.load_dotenv", lambda *a, **kw: False)


@pytest.fixture
def credential() -> Credential:
    """Credential pointing at a test appliance."""
    return Credential(base_url="https://appliance.test.example.com", api_key="apikey", secret_key="secretkey")


@pytest.fixture
def mock_session() -> Mock:
    """Mock requests.Session; set .request.return_value or .side_effect per test."""
    return Mock()


@pytest.fixture
def dispatcher(credential, mock_session) -> Dispatcher:
    """Dispatcher wired to the mock session."""
    return Dispatcher(credential, session=mock_session)
