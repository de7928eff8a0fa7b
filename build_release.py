"""
Build script for PS Script Manager.

Usage:
    python build_release.py          # build only
    python build_release.py --zip    # build + create zip for distribution

The exe lists the .ps1 files in its own folder, so sample scripts from
./scripts are copied next to it.
"""

import argparse
import shutil
import subprocess
import sys
import zipfile
from pathlib import Path

ROOT = Path(__file__).parent
BUILD_DIR = ROOT / "build"
DIST_ROOT = ROOT / "dist"
EXE_NAME = "PSScriptManager"
VERSION = "1.0.0"


def clean():
    """Remove previous build artifacts."""
    print("[1/3] Cleaning old build artifacts ...")
    for path in (BUILD_DIR, DIST_ROOT):
        if path.exists():
            shutil.rmtree(path)


def build():
    """Run PyInstaller as a windowed one-file build."""
    print("[2/3] Building with PyInstaller ...")
    result = subprocess.run(
        [
            sys.executable, "-m", "PyInstaller", str(ROOT / "main.py"),
            "--name", EXE_NAME,
            "--onefile", "--windowed", "--noconfirm",
            "--collect-data", "customtkinter",
            "--distpath", str(DIST_ROOT),
            "--workpath", str(BUILD_DIR),
            "--specpath", str(BUILD_DIR),
        ],
        cwd=str(ROOT),
    )
    if result.returncode != 0:
        print("\n*** BUILD FAILED ***")
        sys.exit(1)

    if BUILD_DIR.exists():
        shutil.rmtree(BUILD_DIR)

    samples = ROOT / "scripts"
    if samples.is_dir():
        for script in samples.glob("*.ps1"):
            shutil.copy2(script, DIST_ROOT / script.name)

    print(f"\nBuild complete -> {DIST_ROOT}")


def make_zip():
    """Zip the dist folder for distribution."""
    zip_name = f"{EXE_NAME}-v{VERSION}-win64.zip"
    zip_path = ROOT / zip_name
    print(f"[3/3] Packaging -> {zip_name} ...")

    if zip_path.exists():
        zip_path.unlink()

    with zipfile.ZipFile(zip_path, "w", zipfile.ZIP_DEFLATED) as zf:
        for file in DIST_ROOT.rglob("*"):
            if file.is_file():
                zf.write(file, Path(EXE_NAME) / file.relative_to(DIST_ROOT))

    size_mb = zip_path.stat().st_size / (1024 * 1024)
    print(f"Done! {zip_name} ({size_mb:.1f} MB)")


def main():
    parser = argparse.ArgumentParser(description="Build PS Script Manager release")
    parser.add_argument("--zip", action="store_true", help="Create distributable zip")
    args = parser.parse_args()

    clean()
    build()

    if args.zip:
        make_zip()
    else:
        print("[3/3] Skipping zip (use --zip to create one)")

    print("\nAll done!")


if __name__ == "__main__":
    main()
