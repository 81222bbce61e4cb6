import pytest

from tetris_config import CONFIG


@pytest.fixture(autouse=True)
def restore_config():
    """Overlay tests edit CONFIG in place; put it back after each test."""
    saved = dict(CONFIG)
    yield
    CONFIG.clear()
    CONFIG.update(saved)
