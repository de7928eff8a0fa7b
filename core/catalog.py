"""
The list of actions shown to the user, one per scanned script.
The window renders entries() and calls select(i) when row i is clicked.
"""

from collections import namedtuple

ADMIN_SUFFIX = " (requires administrator)"

ActionEntry = namedtuple("ActionEntry", ["label", "elevated"])


class ScriptCatalog:
    """Fixed set of scripts from a single scan, bound to a launcher."""

    def __init__(self, scripts, launcher):
        self._scripts = tuple(scripts)
        self._launcher = launcher

    def __len__(self):
        return len(self._scripts)

    def __getitem__(self, index):
        return self._scripts[index]

    @property
    def scripts(self):
        return self._scripts

    @property
    def elevated_count(self):
        return sum(1 for s in self._scripts if s.needs_admin)

    def entries(self):
        return [
            ActionEntry(s.name + ADMIN_SUFFIX if s.needs_admin else s.name, s.needs_admin)
            for s in self._scripts
        ]

    def select(self, index):
        """Launch the script behind entry `index` and return its LaunchHandle."""
        if index < 0:
            raise IndexError(index)
        return self._launcher.launch(self._scripts[index])
