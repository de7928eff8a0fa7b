"""
Status bar: script counts, privilege of the manager itself, log toggle.
"""

import customtkinter as ctk


class StatusBar(ctk.CTkFrame):
    """Bottom bar of the window."""

    def __init__(self, master, on_log_toggle=None, **kwargs):
        super().__init__(master, height=40, **kwargs)

        self._on_log_toggle = on_log_toggle

        self.grid_columnconfigure(1, weight=1)

        self._log_btn = ctk.CTkButton(
            self, text="Log ▼", width=60, height=28, font=("", 12),
            fg_color="#333333", hover_color="#444444",
            command=self._handle_log_toggle,
        )
        self._log_btn.grid(row=0, column=0, padx=(10, 5), pady=5, sticky="w")

        self._count_label = ctk.CTkLabel(
            self, text="Scripts: —", font=("", 12), text_color="gray"
        )
        self._count_label.grid(row=0, column=1, padx=10, pady=5, sticky="w")

        self._last_label = ctk.CTkLabel(self, text="", font=("", 12), text_color="gray")
        self._last_label.grid(row=0, column=2, padx=10, pady=5)

        self._priv_label = ctk.CTkLabel(
            self, text="Standard user", font=("", 12), text_color="gray"
        )
        self._priv_label.grid(row=0, column=3, padx=(10, 10), pady=5, sticky="e")

    def set_counts(self, total, elevated):
        self._count_label.configure(text=f"Scripts: {total}  •  Need admin: {elevated}")

    def set_admin(self, is_admin):
        if is_admin:
            self._priv_label.configure(text="Running as administrator", text_color="#ffb81c")
        else:
            self._priv_label.configure(text="Standard user", text_color="gray")

    def set_last_launch(self, name, ok=True):
        if ok:
            self._last_label.configure(text=f"Launched: {name}", text_color="gray")
        else:
            self._last_label.configure(text=f"Failed: {name}", text_color="#ff5555")

    def set_log_visible(self, visible):
        self._log_btn.configure(text="Log ▲" if visible else "Log ▼")

    def _handle_log_toggle(self):
        if self._on_log_toggle:
            self.set_log_visible(self._on_log_toggle())
