"""
UAC elevation through the Windows shell.
ShellExecuteW with the "runas" verb shows the native consent prompt and,
if the user agrees, starts the program with administrator rights.
"""

import ctypes
import logging

log = logging.getLogger(__name__)

SW_SHOWNORMAL = 1

# ShellExecuteW returns a value <= 32 on failure
_SHELL_ERRORS = {
    0: "out of memory or resources",
    2: "file not found",
    3: "path not found",
    5: "access denied or elevation declined",
    8: "out of memory",
    11: "invalid executable",
    26: "sharing violation",
    27: "incomplete file association",
    28: "DDE timeout",
    29: "DDE failure",
    30: "DDE busy",
    31: "no application associated",
    32: "DLL not found",
}


class LaunchError(Exception):
    """A script could not be started."""


class ElevationError(LaunchError):
    """The OS rejected an elevated run request."""

    def __init__(self, message, code=None):
        super().__init__(message)
        self.code = code


def is_admin():
    try:
        return bool(ctypes.windll.shell32.IsUserAnAdmin())
    except Exception:
        return False


class Elevator:
    """
    Capability for running a program with elevated rights.
    Implementations raise ElevationError when the request is refused.
    """

    def request_elevated_run(self, program, args, verb="runas"):
        raise NotImplementedError


class ShellElevator(Elevator):
    """Elevator backed by shell32.ShellExecuteW."""

    def request_elevated_run(self, program, args, verb="runas"):
        try:
            shell32 = ctypes.windll.shell32
        except AttributeError:
            raise ElevationError("Elevation is only available on Windows")

        ret = int(shell32.ShellExecuteW(
            None, verb, program, args, None, SW_SHOWNORMAL
        ))
        if ret <= 32:
            reason = _SHELL_ERRORS.get(ret, "unknown error")
            raise ElevationError(
                f"ShellExecuteW({verb}) failed for {program}: {reason} (code {ret})",
                code=ret,
            )
        log.debug(f"Elevation request accepted: {program} {args}")
