import dataclasses
import os

import pytest

from core.classifier import Classifier
from core.scanner import ScriptInfo, scan_scripts


def test_only_script_files_are_returned(tmp_path, write_script):
    write_script("a.ps1", "Write-Host a\n")
    write_script("b.PS1", "Write-Host b\n")
    write_script("readme.txt", "Stop-Service foo\n")
    (tmp_path / "sub").mkdir()
    write_script("sub/nested.ps1", "Write-Host nested\n")

    scripts = scan_scripts(tmp_path)

    assert [s.name for s in scripts] == ["a", "b"]


def test_directory_named_like_a_script_is_skipped(tmp_path, write_script):
    (tmp_path / "folder.ps1").mkdir()
    write_script("real.ps1")
    assert [s.name for s in scan_scripts(tmp_path)] == ["real"]


def test_descriptor_fields(tmp_path, write_script):
    write_script("Fix Spooler.ps1", "Restart-Service Spooler\nnet stop spooler\n")
    write_script("hello.ps1", "Write-Host hi\n")

    by_name = {s.name: s for s in scan_scripts(tmp_path)}

    fix = by_name["Fix Spooler"]
    assert os.path.isabs(fix.path)
    assert fix.path == os.path.abspath(tmp_path / "Fix Spooler.ps1")
    assert fix.needs_admin is True
    assert by_name["hello"].needs_admin is False


def test_results_sorted_by_name(tmp_path, write_script):
    for name in ("zeta.ps1", "Alpha.ps1", "beta.ps1"):
        write_script(name)
    assert [s.name for s in scan_scripts(tmp_path)] == ["Alpha", "beta", "zeta"]


def test_missing_directory_returns_empty(tmp_path):
    assert scan_scripts(tmp_path / "does-not-exist") == []


def test_file_instead_of_directory_returns_empty(write_script):
    path = write_script("x.ps1")
    assert scan_scripts(path) == []


def test_injected_classifier_is_used(tmp_path, write_script):
    write_script("one.ps1", "totally harmless\n")
    scripts = scan_scripts(tmp_path, classifier=Classifier(["harmless"]))
    assert scripts == [ScriptInfo("one", os.path.abspath(tmp_path / "one.ps1"), True)]


def test_other_extension(tmp_path, write_script):
    write_script("run.BAT", "bcdedit\n")
    write_script("run.ps1")
    scripts = scan_scripts(tmp_path, extension=".bat")
    assert [(s.name, s.needs_admin) for s in scripts] == [("run", True)]


def test_descriptors_are_immutable(tmp_path, write_script):
    write_script("a.ps1")
    script = scan_scripts(tmp_path)[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        script.needs_admin = True


def test_nul_byte_in_directory_returns_empty():
    assert scan_scripts("bad\0dir") == []


@pytest.mark.skipif(
    os.name == "nt" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="permission bits are not enforced here",
)
def test_unreadable_directory_returns_empty(tmp_path, write_script):
    write_script("locked/a.ps1", "Write-Host a\n")
    locked = tmp_path / "locked"
    locked.chmod(0)
    try:
        assert scan_scripts(locked) == []
    finally:
        locked.chmod(0o755)
