"""
Log panel: collapsible viewer fed by the root logger.
Launch results and scan messages show up here as they happen.
"""

import logging
import customtkinter as ctk

MAX_LOG_LINES = 500

_LEVEL_COLORS = {
    "WARNING": "#ffaa00",
    "ERROR": "#ff5555",
    "CRITICAL": "#ff5555",
}


class _PanelHandler(logging.Handler):
    """Forwards formatted records to the panel on the Tk thread."""

    def __init__(self, log_panel):
        super().__init__()
        self._panel = log_panel

    def emit(self, record):
        try:
            msg = self.format(record)
            self._panel.after(0, self._panel.append_line, msg, record.levelname)
        except Exception:
            self.handleError(record)


class LogPanel(ctk.CTkFrame):
    """Collapsible log textbox placed between the script list and status bar."""

    def __init__(self, master, **kwargs):
        super().__init__(master, **kwargs)
        self._visible = False
        self._line_count = 0

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self._textbox = ctk.CTkTextbox(
            self, font=("Consolas", 12),
            fg_color="#1a1a1a", text_color="#cccccc",
            height=160, state="disabled", wrap="word",
        )
        self._textbox.grid(row=0, column=0, sticky="nsew", padx=5, pady=(5, 0))
        for level, color in _LEVEL_COLORS.items():
            self._textbox.tag_config(level, foreground=color)

        ctk.CTkButton(
            self, text="Clear", width=60, height=24, font=("", 11),
            fg_color="#333333", hover_color="#444444",
            command=self.clear,
        ).grid(row=1, column=0, sticky="e", padx=5, pady=5)

        self.grid_remove()

    @property
    def visible(self):
        return self._visible

    def toggle(self):
        """Show or hide the panel; returns the new visibility."""
        self.set_visible(not self._visible)
        return self._visible

    def set_visible(self, visible):
        if visible:
            self.grid()
        else:
            self.grid_remove()
        self._visible = visible

    def append_line(self, text, level="INFO"):
        """Must be called on the Tk thread."""
        self._textbox.configure(state="normal")
        if self._line_count > 0:
            self._textbox.insert("end", "\n")
        tags = (level,) if level in _LEVEL_COLORS else ()
        self._textbox.insert("end", text, tags)
        self._line_count += 1

        if self._line_count > MAX_LOG_LINES:
            excess = self._line_count - MAX_LOG_LINES
            self._textbox.delete("1.0", f"{excess + 1}.0")
            self._line_count = MAX_LOG_LINES

        self._textbox.configure(state="disabled")
        self._textbox.see("end")

    def clear(self):
        self._textbox.configure(state="normal")
        self._textbox.delete("1.0", "end")
        self._textbox.configure(state="disabled")
        self._line_count = 0

    def create_handler(self, level=logging.INFO):
        handler = _PanelHandler(self)
        handler.setLevel(level)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s: %(message)s", datefmt="%H:%M:%S")
        )
        return handler
