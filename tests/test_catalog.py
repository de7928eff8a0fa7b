import pytest

from core.catalog import ADMIN_SUFFIX, ActionEntry, ScriptCatalog
from core.scanner import ScriptInfo


class RecordingLauncher:
    def __init__(self):
        self.launched = []

    def launch(self, script):
        self.launched.append(script)
        return script.name


@pytest.fixture
def scripts():
    return [
        ScriptInfo("cleanup", "/s/cleanup.ps1", False),
        ScriptInfo("fix-spooler", "/s/fix-spooler.ps1", True),
    ]


def test_entries_mark_elevated_scripts(scripts):
    catalog = ScriptCatalog(scripts, RecordingLauncher())
    assert catalog.entries() == [
        ActionEntry("cleanup", False),
        ActionEntry("fix-spooler" + ADMIN_SUFFIX, True),
    ]
    assert len(catalog) == 2
    assert catalog.elevated_count == 1


def test_select_dispatches_to_launcher(scripts):
    launcher = RecordingLauncher()
    catalog = ScriptCatalog(scripts, launcher)

    assert catalog.select(1) == "fix-spooler"
    assert catalog.select(0) == "cleanup"
    assert launcher.launched == [scripts[1], scripts[0]]


@pytest.mark.parametrize("index", [-1, 2])
def test_select_out_of_range(scripts, index):
    catalog = ScriptCatalog(scripts, RecordingLauncher())
    with pytest.raises(IndexError):
        catalog.select(index)


def test_empty_catalog():
    catalog = ScriptCatalog([], RecordingLauncher())
    assert catalog.entries() == []
    assert catalog.elevated_count == 0
