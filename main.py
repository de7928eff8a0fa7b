"""
PS Script Manager: entry point.
Lists the .ps1 scripts in the program's own folder and runs them,
asking for administrator rights only for scripts that need them.
"""

import os

from core.config import get_app_dir


def main():
    # Relative paths (and the scripts folder) resolve next to the program
    os.chdir(get_app_dir())

    from app import ScriptManagerApp
    app = ScriptManagerApp()
    app.run()


if __name__ == "__main__":
    main()
