import shlex
import time

import pytest

from core.config import LauncherConfig
from core.elevation import ElevationError, LaunchError
from core.launcher import Launcher
from core.scanner import ScriptInfo

SLEEPER = "import time\ntime.sleep(10)\n"


def test_default_command_line():
    launcher = Launcher()
    assert launcher.build_command(r"C:\scripts\a.ps1") == [
        "powershell", "-ExecutionPolicy", "Bypass", "-File", r"C:\scripts\a.ps1",
    ]


def test_elevated_args_quote_the_path():
    args = Launcher().build_elevated_args(r"C:\My Scripts\fix it.ps1")
    assert args == r'-ExecutionPolicy Bypass -File "C:\My Scripts\fix it.ps1"'


def test_elevated_args_keep_spaced_path_as_one_argument(tmp_path):
    path = str(tmp_path / "my scripts" / "clean up.ps1")
    args = Launcher().build_elevated_args(path)
    assert shlex.split(args) == ["-ExecutionPolicy", "Bypass", "-File", path]


def test_unelevated_launch_does_not_block(write_script, python_config, fake_elevator):
    path = write_script("sleeper.py", SLEEPER)
    launcher = Launcher(python_config, fake_elevator)

    start = time.monotonic()
    handle = launcher.launch(ScriptInfo("sleeper", str(path), needs_admin=False))
    elapsed = time.monotonic() - start

    try:
        assert handle.ok
        assert elapsed < 5
        assert handle.pid is not None
        assert handle.is_running()
        assert fake_elevator.calls == []
    finally:
        handle.terminate()
        handle.wait(timeout=10)
    assert not handle.is_running()


def test_elevated_launch_goes_through_elevator(write_script, fake_elevator):
    path = write_script("needs admin.ps1", "Stop-Service Spooler\n")
    launcher = Launcher(LauncherConfig(), fake_elevator)

    start = time.monotonic()
    handle = launcher.launch(ScriptInfo("needs admin", str(path), needs_admin=True))

    assert time.monotonic() - start < 5
    assert handle.ok
    assert handle.elevated
    assert handle.pid is None
    assert not handle.is_running()
    assert handle.wait(timeout=0.1) is None
    assert fake_elevator.calls == [
        ("powershell", f'-ExecutionPolicy Bypass -File "{path}"', "runas"),
    ]


def test_declined_elevation_is_reported_not_raised(fake_elevator):
    fake_elevator.fail_code = 5
    launcher = Launcher(LauncherConfig(), fake_elevator)

    handle = launcher.launch(ScriptInfo("x", "x.ps1", needs_admin=True))

    assert not handle.ok
    assert isinstance(handle.error, ElevationError)
    assert handle.error.code == 5


def test_missing_interpreter_is_reported_not_raised(fake_elevator):
    config = LauncherConfig(interpreter="no-such-interpreter-ps-script-manager")
    handle = Launcher(config, fake_elevator).launch(ScriptInfo("x", "x.ps1"))

    assert not handle.ok
    assert isinstance(handle.error, LaunchError)
    assert "no-such-interpreter-ps-script-manager" in str(handle.error)


def test_elevator_os_error_is_wrapped():
    class BrokenElevator:
        def request_elevated_run(self, program, args, verb="runas"):
            raise OSError("boom")

    handle = Launcher(LauncherConfig(), BrokenElevator()).launch(
        ScriptInfo("x", "x.ps1", needs_admin=True)
    )
    assert isinstance(handle.error, ElevationError)


def test_repeated_launches_are_independent(write_script, python_config, fake_elevator):
    path = write_script("sleeper.py", SLEEPER)
    launcher = Launcher(python_config, fake_elevator)
    script = ScriptInfo("sleeper", str(path))

    handles = [launcher.launch(script) for _ in range(3)]
    try:
        assert all(h.ok for h in handles)
        assert len({h.pid for h in handles}) == 3
    finally:
        for h in handles:
            h.terminate()
            h.wait(timeout=10)


@pytest.mark.parametrize("policy_args,file_flag,expected", [
    ((), "", ["py", "s.py"]),
    (("-NoProfile",), "-File", ["py", "-NoProfile", "-File", "s.py"]),
])
def test_empty_flags_are_dropped(policy_args, file_flag, expected):
    config = LauncherConfig(interpreter="py", policy_args=policy_args, file_flag=file_flag)
    assert Launcher(config).build_command("s.py") == expected
