"""
Find runnable scripts next to the application and describe each one.
Only the immediate directory is listed; subfolders are ignored.
"""

import logging
import os
from dataclasses import dataclass

from core.classifier import Classifier
from core.config import SCRIPT_EXTENSION

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScriptInfo:
    """A script found at scan time."""
    name: str
    path: str
    needs_admin: bool = False


def scan_scripts(directory, classifier=None, extension=SCRIPT_EXTENSION):
    """
    Return a list of ScriptInfo for every script file in `directory`,
    sorted by name (case-insensitive).
    An unreadable or missing directory yields an empty list.
    """
    if classifier is None:
        classifier = Classifier()
    ext = extension.lower()

    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except (OSError, ValueError) as e:
        log.warning(f"Cannot list script folder {directory}: {e}")
        return []

    scripts = []
    for entry in entries:
        try:
            if entry.is_dir():
                continue
        except OSError:
            continue
        if not entry.name.lower().endswith(ext):
            continue

        path = os.path.abspath(entry.path)
        name = entry.name[:-len(ext)] if ext else entry.name
        scripts.append(ScriptInfo(name, path, classifier.classify(path)))

    scripts.sort(key=lambda s: s.name.lower())
    log.info(f"Found {len(scripts)} script(s) in {directory} "
             f"({sum(s.needs_admin for s in scripts)} need admin)")
    return scripts
