"""
Run a scanned script, hidden and detached, or elevated through UAC.

Both paths are fire-and-forget: launch() returns as soon as the child has
been created (or the OS has accepted the elevation request) and never
raises. Failures are logged and reported on the returned handle.
"""

import logging
import os
import subprocess

import psutil

from core.config import DEFAULT_CONFIG
from core.elevation import ElevationError, LaunchError, ShellElevator

log = logging.getLogger(__name__)

__all__ = ["Launcher", "LaunchHandle", "LaunchError", "ElevationError"]

_IS_WINDOWS = os.name == "nt"
_CREATE_NO_WINDOW = getattr(subprocess, "CREATE_NO_WINDOW", 0x08000000)


class LaunchHandle:
    """
    Outcome of a single launch. Callers may ignore it entirely.
    Elevated runs are owned by the OS, so they have no pid to observe.
    """
    __slots__ = ("script", "elevated", "pid", "error")

    def __init__(self, script, elevated, pid=None, error=None):
        self.script = script
        self.elevated = elevated
        self.pid = pid
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def _process(self):
        if self.pid is None:
            return None
        try:
            return psutil.Process(self.pid)
        except psutil.NoSuchProcess:
            return None

    def is_running(self):
        proc = self._process()
        if proc is None:
            return False
        try:
            return proc.is_running() and proc.status() != psutil.STATUS_ZOMBIE
        except psutil.NoSuchProcess:
            return False

    def wait(self, timeout=None):
        """Wait for an unelevated child to exit; returns its exit code or None."""
        proc = self._process()
        if proc is None:
            return None
        try:
            return proc.wait(timeout=timeout)
        except psutil.NoSuchProcess:
            return None

    def terminate(self):
        proc = self._process()
        if proc is None:
            return
        try:
            proc.terminate()
        except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
            log.debug(f"Could not terminate pid {self.pid}: {e}")

    def __repr__(self):
        state = "ok" if self.ok else f"error={self.error}"
        return f"LaunchHandle({self.script.name!r}, elevated={self.elevated}, {state})"


class Launcher:
    """
    Starts scripts with the configured interpreter.

    Parameters
    ----------
    config : LauncherConfig
        Interpreter, flags and elevation verb.
    elevator : Elevator
        Used for scripts that need admin rights. Defaults to ShellElevator.
    """

    def __init__(self, config=DEFAULT_CONFIG, elevator=None):
        self._config = config
        self._elevator = elevator if elevator is not None else ShellElevator()

    def build_command(self, path):
        cfg = self._config
        return [a for a in (cfg.interpreter, *cfg.policy_args, cfg.file_flag) if a] + [path]

    def build_elevated_args(self, path):
        """Argument string for ShellExecuteW; the path is always quoted."""
        cfg = self._config
        return " ".join([a for a in (*cfg.policy_args, cfg.file_flag) if a] + [f'"{path}"'])

    def launch(self, script):
        if script.needs_admin:
            return self._launch_elevated(script)
        return self._launch_hidden(script)

    def _launch_hidden(self, script):
        cmd = self.build_command(script.path)
        kwargs = dict(
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            close_fds=True,
        )
        if _IS_WINDOWS:
            si = subprocess.STARTUPINFO()
            si.dwFlags |= subprocess.STARTF_USESHOWWINDOW
            si.wShowWindow = subprocess.SW_HIDE
            kwargs["startupinfo"] = si
            kwargs["creationflags"] = _CREATE_NO_WINDOW
        else:
            kwargs["start_new_session"] = True

        try:
            proc = subprocess.Popen(cmd, **kwargs)
        except (OSError, ValueError) as e:
            err = LaunchError(f"Could not start {self._config.interpreter} for {script.name}: {e}")
            log.error(str(err))
            return LaunchHandle(script, elevated=False, error=err)

        log.info(f"Started {script.name} (pid {proc.pid})")
        return LaunchHandle(script, elevated=False, pid=proc.pid)

    def _launch_elevated(self, script):
        cfg = self._config
        args = self.build_elevated_args(script.path)
        try:
            self._elevator.request_elevated_run(cfg.interpreter, args, verb=cfg.verb)
        except LaunchError as e:
            log.error(f"Elevated launch of {script.name} failed: {e}")
            return LaunchHandle(script, elevated=True, error=e)
        except OSError as e:
            err = ElevationError(f"Elevated launch of {script.name} failed: {e}")
            log.error(str(err))
            return LaunchHandle(script, elevated=True, error=err)

        log.info(f"Requested elevated run of {script.name}")
        return LaunchHandle(script, elevated=True)
