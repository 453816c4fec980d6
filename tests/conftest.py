"""Shared pytest configuration and fixtures for the camparams test suite."""

import logging
import sys
from pathlib import Path

import pytest

# Ensure the project root is in the path for imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def restore_root_logging():
    """Put the root logger's handlers and level back after a test reconfigures them."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def preview_params():
    """A driver-style parameter map with size, range and area values."""
    from camparams.params.parameter_map import ParameterMap

    return ParameterMap.from_flattened(
        "preview-size=640x480;"
        "preview-size-values=800x600,640x480,480x320;"
        "preview-format=yuv420sp;"
        "preview-format-values=yuv420sp,yuv422i-yuyv;"
        "preview-frame-rate=15;"
        "preview-frame-rate-values=24,15,10;"
        "preview-fps-range=15000,30000;"
        "preview-fps-range-values=(10500,26623),(15000,26623),(30000,30000);"
        "focus-areas=(-10,-10,0,0,300),(0,0,10,10,700);"
        "max-num-focus-areas=2;"
        "zoom=3;"
        "zoom-supported=true"
    )
