import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from task_manager.config import Config
from task_manager.context import ServerContext


@pytest.fixture
def config():
    """Default configuration that ignores any local .env file."""
    return Config(_env_file=None)


@pytest.fixture
def context(config):
    """Fresh server context with an empty registry."""
    return ServerContext(config=config)
