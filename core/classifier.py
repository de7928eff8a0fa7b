"""
Admin-rights heuristic: flags a script whose text mentions a privileged
operation (registry hives, service control, ACLs, boot config, ...).
False positives and false negatives are both accepted.
"""

import logging

from core.config import ADMIN_KEYWORDS

log = logging.getLogger(__name__)


class Classifier:
    """Line-by-line, case-insensitive keyword matcher."""

    def __init__(self, keywords=ADMIN_KEYWORDS):
        self._keywords = tuple(k.lower() for k in keywords if k)

    @property
    def keywords(self):
        return self._keywords

    def classify(self, path):
        """
        Return True if any line of the file contains one of the keywords.
        Unreadable or missing files count as not privileged.
        """
        try:
            with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
                for line in f:
                    if self.matches(line):
                        return True
        except (OSError, ValueError) as e:
            log.debug(f"Could not read {path}: {e}")
        return False

    def matches(self, line):
        line = line.lower()
        return any(kw in line for kw in self._keywords)


_default = Classifier()


def classify(path):
    """Classify using the built-in keyword set."""
    return _default.classify(path)
