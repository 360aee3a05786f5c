"""Root pytest configuration.

Test Structure:
    tests/
    └── unit/
        ├── config/        # Settings loading
        ├── domain/        # Pure analytics services and value objects
        └── application/   # Queries against a mocked FinanceReadPort
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from fintrend_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Ensure settings are loaded fresh for the test session."""
    clear_settings_cache()
    yield
    clear_settings_cache()
