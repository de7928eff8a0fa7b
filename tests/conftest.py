"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from core.config import LauncherConfig
from core.elevation import ElevationError, Elevator


class FakeElevator(Elevator):
    """Records elevation requests instead of showing a UAC prompt."""

    def __init__(self, fail_code=None):
        self.calls = []
        self.fail_code = fail_code

    def request_elevated_run(self, program, args, verb="runas"):
        self.calls.append((program, args, verb))
        if self.fail_code is not None:
            raise ElevationError("elevation declined", code=self.fail_code)


@pytest.fixture
def fake_elevator():
    return FakeElevator()


@pytest.fixture
def write_script(tmp_path):
    """Create a file under tmp_path and return its path."""
    def _write(name, content="", encoding="utf-8"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding=encoding)
        return path
    return _write


@pytest.fixture
def python_config():
    """Runs scripts with the current Python instead of PowerShell."""
    return LauncherConfig(interpreter=sys.executable, policy_args=(), file_flag="")
