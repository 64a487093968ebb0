import pytest

from symbolic_calculus.config import reset_config
from symbolic_calculus.logging_system import configure_logging


@pytest.fixture(autouse=True)
def default_settings():
    """Every test starts and ends with the default configuration"""
    reset_config()
    configure_logging()
    yield
    reset_config()
    configure_logging()
