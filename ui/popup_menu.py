"""
Dark dropdown used for the menu bar and the script right-click menu.
"""

import tkinter as tk
import customtkinter as ctk

_ACCENT = "#4285f4"
_ACCENT_HOVER = "#3367d6"


class PopupMenu(tk.Toplevel):
    """
    Borderless popup built from CTk widgets.

    items: list of dicts or None (separator)
        {"label": str, "command": callable}
        {"label": str, "command": callable, "checkvar": tk.BooleanVar}
    """

    def __init__(self, parent, items, width=200):
        super().__init__(parent)
        self.withdraw()
        self.overrideredirect(True)
        self.attributes("-topmost", True)
        self._parent = parent
        self._bound = False
        self._dismissed = False

        frame = ctk.CTkFrame(
            self, fg_color="#252526", corner_radius=6,
            border_width=1, border_color="#4a4a4a",
        )
        frame.pack(fill="both", expand=True)

        for item in items:
            if item is None:
                ctk.CTkFrame(frame, height=1, fg_color="#3c3c3c").pack(fill="x", padx=8, pady=3)
            elif "checkvar" in item:
                ctk.CTkCheckBox(
                    frame, text=item["label"], variable=item["checkvar"],
                    command=lambda cmd=item["command"]: self._run(cmd),
                    font=("", 13), height=30,
                    fg_color=_ACCENT, hover_color=_ACCENT_HOVER,
                    checkbox_width=16, checkbox_height=16,
                ).pack(anchor="w", fill="x", padx=10, pady=2)
            else:
                ctk.CTkButton(
                    frame, text="  " + item["label"], width=width, height=30,
                    command=lambda cmd=item["command"]: self._run(cmd),
                    corner_radius=4, anchor="w", font=("", 13),
                    fg_color="transparent", hover_color=_ACCENT,
                    text_color="#e0e0e0",
                ).pack(fill="x", padx=5, pady=1)

    def show(self, x, y):
        self.geometry(f"+{x}+{y}")
        self.deiconify()
        self.lift()
        self.focus_force()
        # Delay so the click that opened the menu does not close it
        self.after(50, self._bind_dismiss)

    def _bind_dismiss(self):
        if self._dismissed:
            return
        self._parent.bind_all("<Button-1>", self._on_global_click, add="+")
        self._bound = True
        self.bind("<Escape>", lambda e: self.dismiss())
        self.bind("<FocusOut>", lambda e: self.after(100, self._check_focus))

    def _check_focus(self):
        if self._dismissed:
            return
        try:
            focused = self.focus_get()
        except (KeyError, tk.TclError):
            focused = None
        if focused is None or not str(focused).startswith(str(self)):
            self.dismiss()

    def _contains(self, x, y):
        left, top = self.winfo_rootx(), self.winfo_rooty()
        return left <= x <= left + self.winfo_width() and top <= y <= top + self.winfo_height()

    def _on_global_click(self, event):
        if self._dismissed:
            return
        try:
            inside = self._contains(event.x_root, event.y_root)
        except tk.TclError:
            inside = False
        if not inside:
            self.dismiss()

    def _run(self, command):
        self.dismiss()
        command()

    def dismiss(self):
        if self._dismissed:
            return
        self._dismissed = True
        try:
            if self._bound:
                self._parent.unbind_all("<Button-1>")
            self.withdraw()
            self.after(200, self.destroy)
        except tk.TclError:
            pass
