"""
Main window: top-level layout assembling the UI frames.
"""

import os
import subprocess
import tkinter as tk

import customtkinter as ctk
from PIL import ImageTk

from ui.icons import render_app_icon, render_shield_badge
from ui.log_panel import LogPanel
from ui.popup_menu import PopupMenu
from ui.script_list_frame import ScriptListFrame
from ui.status_bar import StatusBar

APP_NAME = "PS Script Manager"
VERSION = "1.0.0"


class MainWindow(ctk.CTk):
    """
    Top-level application window.

    Layout:
        [Menu Bar]         File, View, Help
        [Header]           scripts folder
        [ScriptListFrame]  search + one row per script
        [LogPanel]         collapsible log viewer
        [StatusBar]        counts, privilege, log toggle
    """

    def __init__(self, scripts_dir, on_select=None, on_close=None):
        super().__init__()

        self._scripts_dir = scripts_dir
        self._on_close = on_close

        self.title(APP_NAME)
        self.geometry("500x520")
        self.minsize(420, 360)
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self._icon_photo = ImageTk.PhotoImage(render_app_icon(64))
        self.iconphoto(True, self._icon_photo)
        badge = render_shield_badge(20)
        self._badge_image = ctk.CTkImage(light_image=badge, dark_image=badge, size=(20, 20))

        self._always_on_top_var = tk.BooleanVar(value=False)
        self._build_menu_bar()

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        ctk.CTkLabel(
            self, text=scripts_dir, font=("", 11), text_color="gray", anchor="w",
        ).grid(row=1, column=0, sticky="ew", padx=15, pady=(8, 0))

        self.script_list = ScriptListFrame(
            self, badge_image=self._badge_image, on_select=on_select,
        )
        self.script_list.grid(row=2, column=0, sticky="nsew", padx=10, pady=5)

        self.log_panel = LogPanel(self)
        self.log_panel.grid(row=3, column=0, sticky="nsew", padx=10)
        self.log_panel.grid_remove()

        self.status_bar = StatusBar(self, on_log_toggle=self.toggle_log)
        self.status_bar.grid(row=4, column=0, sticky="ew", padx=10, pady=(5, 10))

        self.protocol("WM_DELETE_WINDOW", self._handle_close)

    # ------------------------------------------------------------------
    # Menu bar
    # ------------------------------------------------------------------

    def _build_menu_bar(self):
        bar = ctk.CTkFrame(self, height=30, fg_color="#2b2b2b", corner_radius=0)
        bar.grid(row=0, column=0, sticky="ew")

        btn_cfg = dict(
            width=50, height=28, corner_radius=4,
            fg_color="transparent", hover_color="#3d3d3d",
            text_color="#e0e0e0", font=("", 12),
        )
        menus = (
            ("File", self._file_items),
            ("View", self._view_items),
            ("Help", self._help_items),
        )
        for col, (text, items) in enumerate(menus):
            btn = ctk.CTkButton(bar, text=text, **btn_cfg)
            btn.configure(command=lambda b=btn, f=items: self._show_dropdown(b, f()))
            btn.grid(row=0, column=col, padx=(4 if col == 0 else 0, 0), pady=1)

    def _file_items(self):
        return [
            {"label": "Open Scripts Folder", "command": self._open_scripts_folder},
            None,
            {"label": "Exit", "command": self._handle_close},
        ]

    def _view_items(self):
        return [
            {"label": "Always on Top", "command": self._apply_always_on_top,
             "checkvar": self._always_on_top_var},
            {"label": "Toggle Log Panel", "command": self._toggle_log_from_menu},
        ]

    def _help_items(self):
        return [{"label": "About", "command": self._show_about}]

    def _show_dropdown(self, btn, items):
        x = btn.winfo_rootx()
        y = btn.winfo_rooty() + btn.winfo_height() + 2
        PopupMenu(self, items).show(x, y)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _open_scripts_folder(self):
        if os.path.isdir(self._scripts_dir):
            subprocess.Popen(["explorer", self._scripts_dir])

    @property
    def always_on_top(self):
        return self._always_on_top_var.get()

    def set_always_on_top(self, value):
        self._always_on_top_var.set(value)
        self._apply_always_on_top()

    def _apply_always_on_top(self):
        self.attributes("-topmost", self._always_on_top_var.get())

    def toggle_log(self):
        """Toggle the log panel; returns the new visibility."""
        visible = self.log_panel.toggle()
        self.grid_rowconfigure(3, weight=0, minsize=180 if visible else 0)
        return visible

    def _toggle_log_from_menu(self):
        self.status_bar.set_log_visible(self.toggle_log())

    def show_error(self, title, message):
        from tkinter import messagebox
        messagebox.showerror(title, message, parent=self)

    def _show_about(self):
        dlg = ctk.CTkToplevel(self)
        dlg.title(f"About {APP_NAME}")
        dlg.geometry("360x220")
        dlg.resizable(False, False)
        dlg.attributes("-topmost", True)
        dlg.grab_set()

        frame = ctk.CTkFrame(dlg, fg_color="transparent")
        frame.pack(fill="both", expand=True, padx=20, pady=15)

        ctk.CTkLabel(frame, text=APP_NAME, font=("", 22, "bold")).pack(pady=(5, 0))
        ctk.CTkLabel(frame, text=f"v{VERSION}", font=("", 12), text_color="gray").pack(pady=(2, 10))
        ctk.CTkLabel(
            frame,
            text="Runs the PowerShell scripts next to this program.\n"
                 "Scripts that touch the registry, services or\n"
                 "system files are started through UAC.",
            font=("", 12), justify="center",
        ).pack(pady=(0, 10))
        ctk.CTkButton(frame, text="Close", width=100, command=dlg.destroy).pack()

    def _handle_close(self):
        if self._on_close:
            self._on_close()
        else:
            self.destroy()
