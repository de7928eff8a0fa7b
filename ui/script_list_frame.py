"""
Script list frame: search bar over a scrollable list of script rows.
"""

import customtkinter as ctk

from ui.script_row import ScriptRow


class ScriptListFrame(ctk.CTkFrame):
    """
    Middle section of the window.

    Layout:
        [Search...                     ] [Admin only]
        +--------------------------------------------+
        | [badge] name            [Run]              |
        | ...                                        |
        +--------------------------------------------+
    """

    def __init__(self, master, badge_image=None, on_select=None, **kwargs):
        super().__init__(master, **kwargs)

        self._badge_image = badge_image
        self._on_select = on_select
        self._rows = []

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        top_bar = ctk.CTkFrame(self, fg_color="transparent")
        top_bar.grid(row=0, column=0, sticky="ew", padx=5, pady=(5, 0))
        top_bar.grid_columnconfigure(0, weight=1)

        self._search_var = ctk.StringVar()
        self._search_var.trace_add("write", self._on_filter_changed)
        ctk.CTkEntry(
            top_bar, placeholder_text="Search scripts...",
            textvariable=self._search_var,
        ).grid(row=0, column=0, sticky="ew", padx=(0, 5))

        self._admin_only_var = ctk.BooleanVar(value=False)
        ctk.CTkSwitch(
            top_bar, text="Admin only", variable=self._admin_only_var,
            command=self._apply_filter, width=50,
        ).grid(row=0, column=1)

        self._scroll = ctk.CTkScrollableFrame(self)
        self._scroll.grid(row=1, column=0, sticky="nsew", padx=5, pady=5)
        self._scroll.grid_columnconfigure(0, weight=1)

        self._empty_label = ctk.CTkLabel(
            self._scroll, text="No .ps1 scripts found.", text_color="gray",
        )
        self._empty_label.grid(row=0, column=0, pady=20)

    def set_entries(self, entries, paths, empty_text=None):
        """
        Build one row per (label, elevated) entry. Rows keep their index
        so a click is reported back as "entry i selected".
        """
        for row in self._rows:
            row.destroy()
        self._rows.clear()

        if empty_text:
            self._empty_label.configure(text=empty_text)

        if not entries:
            self._empty_label.grid(row=0, column=0, pady=20)
            return
        self._empty_label.grid_forget()

        for i, (entry, path) in enumerate(zip(entries, paths)):
            row = ScriptRow(
                self._scroll, index=i, name=entry.label, path=path,
                elevated=entry.elevated, badge_image=self._badge_image,
                on_select=self._on_select,
            )
            row.grid(row=i, column=0, sticky="ew", pady=1)
            self._rows.append(row)

        self._apply_filter()

    def _on_filter_changed(self, *args):
        self._apply_filter()

    def _apply_filter(self):
        text = self._search_var.get().strip()
        admin_only = self._admin_only_var.get()
        for row in self._rows:
            visible = (not text or row.matches_filter(text)) and (row.elevated or not admin_only)
            if visible:
                row.grid()
            else:
                row.grid_remove()
