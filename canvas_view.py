from __future__ import annotations

from typing import List, Optional
import logging

import tkinter as tk
from matplotlib import colors

import config
from canvas_controller import CanvasController
from fonts import FontDescriptor, Measure, TkTextMeasurer
from model import Document, TextObject

log = logging.getLogger(__name__)


def theme_color(name: str) -> str:
    """Description: Theme color
    Inputs: name: str (key into config.THEME)
    """
    return colors.to_hex(config.THEME[name])


def render(document: Document, surface, measure: Measure) -> List[int]:
    """Description: Render
    Inputs: document: Document, surface (tk.Canvas drawing API), measure: Measure

    Clears the surface and paints every object in storage order, so later
    objects land on top. Returns the created item ids.
    """
    surface.delete("all")
    item_ids: List[int] = []
    for obj in document.objects:
        item_ids.extend(_draw_text_object(surface, obj, measure))
    return item_ids


def _draw_text_object(surface, obj: TextObject, measure: Measure) -> List[int]:
    descriptor = FontDescriptor.for_object(obj)
    width = measure(obj.content, descriptor)
    x, y = obj.position
    size = obj.font_size
    item_ids = [
        surface.create_text(
            x, y,
            text=obj.content,
            anchor="nw",
            font=descriptor.to_tk(),
            fill=theme_color("text"),
            tags="text",
        )
    ]
    if obj.is_selected:
        pad = config.SELECTION_PADDING
        item_ids.append(
            surface.create_rectangle(
                x - pad, y - pad, x + width + pad, y + size + pad,
                outline=theme_color("selection"),
                width=config.SELECTION_WIDTH,
                tags="selection",
            )
        )
    if obj.is_underline:
        line_y = y + size + config.UNDERLINE_GAP
        item_ids.append(
            surface.create_line(
                x, line_y, x + width, line_y,
                fill=theme_color("decoration"),
                width=config.DECORATION_WIDTH,
                tags="decoration",
            )
        )
    if obj.is_strikethrough:
        line_y = y + size / 2
        item_ids.append(
            surface.create_line(
                x, line_y, x + width, line_y,
                fill=theme_color("decoration"),
                width=config.DECORATION_WIDTH,
                tags="decoration",
            )
        )
    return item_ids


class CanvasView:
    def __init__(
        self,
        master: tk.Widget,
        document: Document,
        measure: Optional[Measure] = None,
        canvas: Optional[tk.Canvas] = None,
    ) -> None:
        """Description: Init
        Inputs: master: tk.Widget, document: Document, measure: Optional[Measure], canvas: Optional[tk.Canvas]
        """
        self.document = document
        if canvas is None:
            canvas = tk.Canvas(
                master,
                width=config.CANVAS_WIDTH,
                height=config.CANVAS_HEIGHT,
                bg=theme_color("canvas"),
                highlightthickness=2,
                highlightbackground=theme_color("canvas_border"),
            )
        self.canvas = canvas
        self.measure = measure or TkTextMeasurer(self.canvas)
        self.controller = CanvasController(document, self.measure)

        self._redraw_pending: Optional[str] = None

        self.canvas.bind("<ButtonPress-1>", self._on_left_press)
        self.canvas.bind("<B1-Motion>", self._on_left_drag)
        self.canvas.bind("<ButtonRelease-1>", self._on_left_release)
        document.add_listener(self.schedule_draw)

    def schedule_draw(self) -> None:
        """Description: Schedule draw
        Inputs: None
        Coalesces a batch of document changes into one repaint.
        """
        if self._redraw_pending is None:
            self._redraw_pending = self.canvas.after_idle(self.draw)

    def draw(self) -> None:
        """Description: Draw
        Inputs: None
        """
        self._redraw_pending = None
        item_ids = render(self.document, self.canvas, self.measure)
        log.debug("Drew %d objects (%d canvas items)", len(self.document), len(item_ids))

    def _on_left_press(self, event: tk.Event) -> None:
        self.canvas.focus_set()
        self.controller.pointer_down(event.x, event.y)

    def _on_left_drag(self, event: tk.Event) -> None:
        self.controller.pointer_move(event.x, event.y)

    def _on_left_release(self, _event: tk.Event) -> None:
        self.controller.pointer_up()
