"""
Launcher configuration and application location.
The keyword list and interpreter command line are fixed at startup and
passed into the classifier and launcher, never read from globals.
"""

import json
import logging
import os
import sys
from dataclasses import dataclass

log = logging.getLogger(__name__)

# Substrings (lowercase) that mark a script as needing administrator rights.
# Registry hives, service control, ownership/ACL changes, power and boot
# configuration, image servicing and system file repair.
ADMIN_KEYWORDS = (
    "hklm:", "hkey_local_machine",
    "hkcr:", "hkey_classes_root",
    "registry::hkey_classes_root", "registry::hkey_local_machine",
    "set-service", "stop-service", "start-service",
    "new-psdrive -name hkcr",
    "takeown", "icacls",
    "powercfg",
    "net start", "net stop",
    "bcdedit", "dism", "sfc /scannow",
)

SCRIPT_EXTENSION = ".ps1"


@dataclass(frozen=True)
class LauncherConfig:
    """
    Immutable settings shared by the scanner, classifier and launcher.

    Parameters
    ----------
    extension : str
        Script file extension, matched case-insensitively.
    interpreter : str
        Program that runs the scripts.
    policy_args : tuple[str, ...]
        Arguments that lift the local execution policy for the child.
    file_flag : str
        Flag that precedes the script path.
    verb : str
        ShellExecute verb used for elevated launches.
    keywords : tuple[str, ...]
        Classifier keyword set.
    """

    extension: str = SCRIPT_EXTENSION
    interpreter: str = "powershell"
    policy_args: tuple = ("-ExecutionPolicy", "Bypass")
    file_flag: str = "-File"
    verb: str = "runas"
    keywords: tuple = ADMIN_KEYWORDS


DEFAULT_CONFIG = LauncherConfig()


def get_app_dir():
    """
    Return the directory the application lives in.
    A PyInstaller bundle reports the exe via sys.executable; a source
    checkout uses the directory of the entry script.
    """
    if getattr(sys, "frozen", False):
        return os.path.dirname(os.path.abspath(sys.executable))
    main = sys.modules.get("__main__")
    main_file = getattr(main, "__file__", None)
    if main_file:
        return os.path.dirname(os.path.abspath(main_file))
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def load_ui_state(path):
    """
    Read saved window preferences. A missing, unreadable or malformed
    file gives an empty dict.
    """
    if not os.path.isfile(path):
        return {}
    try:
        with open(path, "r") as f:
            state = json.load(f)
        if not isinstance(state, dict):
            raise ValueError(f"expected a JSON object, got {type(state).__name__}")
    except (OSError, ValueError) as e:
        log.warning(f"Failed to load UI state from {path}: {e}")
        return {}
    return state


def save_ui_state(path, state):
    try:
        with open(path, "w") as f:
            json.dump(state, f, indent=2)
    except (OSError, TypeError) as e:
        log.warning(f"Failed to save UI state to {path}: {e}")
