"""
PS Script Manager: application controller.
Scans the scripts next to the program once, shows them, and launches
the one the user picks. Persists a couple of window preferences.
"""

import logging
import os
import threading

from core.catalog import ScriptCatalog
from core.classifier import Classifier
from core.config import DEFAULT_CONFIG, get_app_dir, load_ui_state, save_ui_state
from core.elevation import is_admin
from core.launcher import Launcher
from core.scanner import scan_scripts
from ui.main_window import MainWindow

log = logging.getLogger(__name__)

UI_STATE_FILE = "ui_state.json"


class ScriptManagerApp:
    """Main application controller."""

    def __init__(self, scripts_dir=None, config=DEFAULT_CONFIG, elevator=None):
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        )

        self._dir = scripts_dir or get_app_dir()
        self._state_path = os.path.join(self._dir, UI_STATE_FILE)

        self._window = MainWindow(
            self._dir,
            on_select=self._on_select,
            on_close=self._on_close,
        )
        logging.getLogger().addHandler(self._window.log_panel.create_handler())

        scripts = scan_scripts(
            self._dir, Classifier(config.keywords), extension=config.extension,
        )
        self._catalog = ScriptCatalog(scripts, Launcher(config, elevator))

        self._window.script_list.set_entries(
            self._catalog.entries(),
            [s.path for s in self._catalog.scripts],
            empty_text=f"No {config.extension} scripts found.",
        )
        self._window.status_bar.set_counts(len(self._catalog), self._catalog.elevated_count)
        self._window.status_bar.set_admin(is_admin())

        self._load_ui_state()

    def run(self):
        """Start the application main loop."""
        self._window.mainloop()

    # ------------------------------------------------------------------
    # Launching
    # ------------------------------------------------------------------

    def _on_select(self, index):
        """Row `index` was clicked."""
        script = self._catalog[index]

        # ShellExecuteW blocks until the UAC prompt is answered
        def _do_launch():
            handle = self._catalog.select(index)
            self._window.after(0, self._on_launched, handle)

        log.info(f"Launching {script.name}{' as administrator' if script.needs_admin else ''}")
        threading.Thread(target=_do_launch, daemon=True).start()

    def _on_launched(self, handle):
        self._window.status_bar.set_last_launch(handle.script.name, handle.ok)
        if not handle.ok:
            self._show_error(f"Could not run {handle.script.name}:\n\n{handle.error}")

    # ------------------------------------------------------------------
    # UI state persistence
    # ------------------------------------------------------------------

    def _load_ui_state(self):
        state = load_ui_state(self._state_path)
        self._window.set_always_on_top(bool(state.get("always_on_top", False)))
        if state.get("log_visible", False):
            self._window.status_bar.set_log_visible(self._window.toggle_log())

    def _save_ui_state(self):
        save_ui_state(self._state_path, {
            "always_on_top": self._window.always_on_top,
            "log_visible": self._window.log_panel.visible,
        })

    # ------------------------------------------------------------------
    # Shutdown / helpers
    # ------------------------------------------------------------------

    def _on_close(self):
        self._save_ui_state()
        self._window.destroy()

    def _show_error(self, message):
        try:
            self._window.show_error("PS Script Manager: Error", message)
        except Exception:
            log.error(f"Error dialog: {message}")
