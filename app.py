from __future__ import annotations

import logging
import tkinter as tk

import config
from canvas_view import CanvasView, theme_color
from model import Document

log = logging.getLogger(__name__)


class EditorApp:
    def __init__(self) -> None:
        self.root = tk.Tk()
        self.root.title(config.WINDOW_TITLE)
        self.root.configure(bg=theme_color("bg"))
        self.root.resizable(False, False)

        self.document = Document(config.DEFAULT_FONT, config.DEFAULT_FONT_SIZE)
        self._suppress_control_update = False

        self._build_layout()
        self._bind_shortcuts()

        self.document.add_listener(self._on_document_changed)
        self.canvas_view.draw()
        self._update_status()

    def run(self) -> None:
        self.root.mainloop()

    def _build_layout(self) -> None:
        self.main_frame = tk.Frame(self.root, bg=theme_color("bg"), padx=16, pady=16)
        self.main_frame.pack(fill=tk.BOTH, expand=True)

        header = tk.Label(self.main_frame, text=config.WINDOW_TITLE, bg=theme_color("bg"), fg=theme_color("label"), font=("Arial", 18, "bold"))
        header.pack(pady=(0, 10))

        self.canvas_view = CanvasView(self.main_frame, self.document)
        self.canvas_view.canvas.pack()

        self._build_font_controls()
        self._build_style_buttons()
        self._build_status_bar()

    def _build_font_controls(self) -> None:
        row = tk.Frame(self.main_frame, bg=theme_color("bg"))
        row.pack(fill=tk.X, pady=(6, 0))

        self.font_var = tk.StringVar(value=self.document.active_font)
        self.font_size_var = tk.StringVar(value=str(self.document.active_font_size))
        self.new_text_var = tk.StringVar()

        font_frame = tk.Frame(row, bg=theme_color("bg"))
        font_frame.pack(side=tk.LEFT)
        tk.Label(font_frame, text="Font:", bg=theme_color("bg"), fg=theme_color("label"), font=("Arial", 12, "bold")).pack(side=tk.LEFT, padx=(0, 6))
        menu = tk.OptionMenu(font_frame, self.font_var, *config.FONTS)
        menu.configure(bg=theme_color("panel"), relief=tk.FLAT, highlightthickness=1, activebackground=theme_color("panel"))
        menu.pack(side=tk.LEFT)

        size_frame = tk.Frame(row, bg=theme_color("bg"))
        size_frame.pack(side=tk.RIGHT)
        tk.Label(size_frame, text="Font Size:", bg=theme_color("bg"), fg=theme_color("label"), font=("Arial", 12, "bold")).pack(side=tk.LEFT, padx=(0, 6))
        self.size_menu = tk.OptionMenu(size_frame, self.font_size_var, *[str(size) for size in config.FONT_SIZES])
        self.size_menu.configure(bg=theme_color("panel"), relief=tk.FLAT, highlightthickness=1, activebackground=theme_color("panel"))
        self.size_menu.pack(side=tk.LEFT)

        entry_frame = tk.Frame(row, bg=theme_color("bg"))
        entry_frame.pack(side=tk.LEFT, expand=True)
        self.text_entry = tk.Entry(entry_frame, textvariable=self.new_text_var, relief=tk.SOLID, width=24)
        self.text_entry.pack(side=tk.LEFT, padx=(0, 4), ipady=4)
        self.text_entry.bind("<Return>", lambda _e: self.add_text())
        self._make_button(entry_frame, "Add Text", self.add_text).pack(side=tk.LEFT)

        self.font_var.trace_add("write", lambda *_: self._apply_font())
        self.font_size_var.trace_add("write", lambda *_: self._apply_font_size())

    def _build_style_buttons(self) -> None:
        row = tk.Frame(self.main_frame, bg=theme_color("bg"))
        row.pack(pady=(10, 0))
        for label, flag in (
            ("Bold", "bold"),
            ("Italic", "italic"),
            ("Underline", "underline"),
            ("Strikethrough", "strikethrough"),
        ):
            button = self._make_button(row, label, lambda f=flag: self.document.toggle_style(f))
            button.pack(side=tk.LEFT, padx=10)

    def _build_status_bar(self) -> None:
        self.status_var = tk.StringVar(value="")
        status = tk.Label(self.root, textvariable=self.status_var, bg=theme_color("panel"), fg=theme_color("label"), anchor="w")
        status.pack(fill=tk.X, side=tk.BOTTOM)

    def _make_button(self, parent: tk.Widget, text: str, command) -> tk.Button:
        return tk.Button(
            parent,
            text=text,
            command=command,
            bg=theme_color("accent"),
            fg=theme_color("button_text"),
            activebackground=theme_color("accent_active"),
            activeforeground=theme_color("button_text"),
            font=("Arial", 10, "bold"),
            relief=tk.FLAT,
            padx=14,
            pady=6,
        )

    def _bind_shortcuts(self) -> None:
        self.root.bind("<Control-b>", lambda _e: self._on_style_shortcut("bold"))
        self.root.bind("<Control-i>", lambda _e: self._on_style_shortcut("italic"))
        self.root.bind("<Control-u>", lambda _e: self._on_style_shortcut("underline"))

    def _text_input_focused(self) -> bool:
        widget = self.root.focus_get()
        if widget is None:
            return False
        return isinstance(widget, tk.Entry)

    def _on_style_shortcut(self, flag: str) -> None:
        if self._text_input_focused():
            return
        self.document.toggle_style(flag)

    def add_text(self) -> None:
        if self.document.add_text(self.new_text_var.get()) is not None:
            self.new_text_var.set("")

    def _apply_font(self) -> None:
        if self._suppress_control_update:
            return
        self.document.set_font(self.font_var.get())

    def _apply_font_size(self) -> None:
        if self._suppress_control_update:
            return
        if not self.document.set_font_size(self.font_size_var.get()):
            self._sync_controls()

    def _on_document_changed(self) -> None:
        self._sync_controls()
        self._update_status()

    def _sync_controls(self) -> None:
        self._suppress_control_update = True
        try:
            if self.font_var.get() != self.document.active_font:
                self.font_var.set(self.document.active_font)
            size = str(self.document.active_font_size)
            if self.font_size_var.get() != size:
                self.font_size_var.set(size)
        finally:
            self._suppress_control_update = False

    def _update_status(self) -> None:
        selected = self.document.selected
        selection = f"Selected: {selected.content!r}" if selected else "No selection"
        self.status_var.set(
            f"{len(self.document)} text objects  |  {selection}  |  "
            f"{self.document.active_font} {self.document.active_font_size}px"
        )


def run_app() -> None:
    log.info("Starting %s", config.WINDOW_TITLE)
    app = EditorApp()
    app.run()
