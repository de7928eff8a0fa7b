"""
Script row widget: one clickable entry with name, path, admin badge and Run button.
"""

import os
import subprocess

import customtkinter as ctk

from ui.popup_menu import PopupMenu

_MAX_PATH_CHARS = 60
_HOVER_COLOR = "#2a2d2e"
_NORMAL_COLOR = "transparent"
_ADMIN_COLOR = "#ffb81c"


def _truncate_path(path, max_len=_MAX_PATH_CHARS):
    if len(path) <= max_len:
        return path
    return "..." + path[-(max_len - 3):]


class ScriptRow(ctk.CTkFrame):
    """
    Single row in the script list:
    [badge] [name + path] [Run]

    Clicking the Run button (or double-clicking the row) calls
    on_select(index).
    """

    def __init__(self, master, index, name, path, elevated=False,
                 badge_image=None, on_select=None, **kwargs):
        super().__init__(master, height=50, fg_color=_NORMAL_COLOR, **kwargs)

        self.index = index
        self.path = path
        self.elevated = elevated
        self._label = name
        self._on_select = on_select

        self.grid_columnconfigure(1, weight=1)

        if elevated and badge_image is not None:
            self._badge = ctk.CTkLabel(self, image=badge_image, text="", width=28)
        else:
            self._badge = ctk.CTkLabel(self, text="", width=28)
        self._badge.grid(row=0, column=0, rowspan=2, padx=(10, 5), pady=5)

        self._name_label = ctk.CTkLabel(self, text=name, font=("", 14, "bold"), anchor="w")
        self._name_label.grid(row=0, column=1, padx=5, pady=(5, 0), sticky="sw")

        self._path_label = ctk.CTkLabel(
            self, text=_truncate_path(path), font=("", 10), anchor="w",
            text_color=_ADMIN_COLOR if elevated else "gray",
        )
        self._path_label.grid(row=1, column=1, padx=5, pady=(0, 5), sticky="nw")

        self._run_btn = ctk.CTkButton(
            self, text="Run as admin" if elevated else "Run",
            width=110, command=self._handle_select,
        )
        self._run_btn.grid(row=0, column=2, rowspan=2, padx=10, pady=5)

        for widget in (self, self._badge, self._name_label, self._path_label):
            widget.bind("<Enter>", self._on_enter)
            widget.bind("<Leave>", self._on_leave)
            widget.bind("<Double-Button-1>", self._handle_select)
            widget.bind("<Button-3>", self._show_context_menu)

    @property
    def name(self):
        return self._label

    def matches_filter(self, text):
        text = text.lower()
        return text in self._label.lower() or text in self.path.lower()

    def _handle_select(self, event=None):
        if self._on_select:
            self._on_select(self.index)

    def _on_enter(self, event=None):
        self.configure(fg_color=_HOVER_COLOR)

    def _on_leave(self, event=None):
        self.configure(fg_color=_NORMAL_COLOR)

    def _show_context_menu(self, event):
        run_label = "Run as Administrator" if self.elevated else "Run"
        menu = PopupMenu(self.winfo_toplevel(), [
            {"label": run_label, "command": self._handle_select},
            None,
            {"label": "Open File Location", "command": self._open_file_location},
            {"label": "Copy Path", "command": self._copy_path},
        ])
        menu.show(event.x_root, event.y_root)

    def _open_file_location(self):
        if os.path.isfile(self.path):
            subprocess.Popen(["explorer", "/select,", self.path])

    def _copy_path(self):
        self.clipboard_clear()
        self.clipboard_append(self.path)
