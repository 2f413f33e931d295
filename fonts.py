# Font descriptors and text measurement shared by hit-testing and rendering.

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Tuple

import tkinter as tk
import tkinter.font as tkfont

import config
from model import TextObject


@dataclass(frozen=True)
class FontDescriptor:
    family: str
    size: int
    bold: bool = False
    italic: bool = False

    @classmethod
    def for_object(cls, obj: TextObject) -> "FontDescriptor":
        """Description: For object
        Inputs: cls, obj: TextObject
        """
        return cls(family=obj.font_family, size=obj.font_size, bold=obj.is_bold, italic=obj.is_italic)

    @property
    def weight(self) -> str:
        return "bold" if self.bold else "normal"

    @property
    def slant(self) -> str:
        return "italic" if self.italic else "roman"

    def to_tk(self) -> Tuple:
        """Description: To tk
        Inputs: None
        """
        # Negative sizes are pixels in Tk.
        styles = [name for name, on in (("bold", self.bold), ("italic", self.italic)) if on]
        return (self.family, -self.size, " ".join(styles)) if styles else (self.family, -self.size)


Measure = Callable[[str, FontDescriptor], float]


class TkTextMeasurer:
    """Measures text width with the fonts Tk will actually render."""

    def __init__(self, master: tk.Misc, max_fonts: int = config.FONT_CACHE_SIZE) -> None:
        self._master = master
        self._max_fonts = max(1, max_fonts)
        self._fonts: OrderedDict[FontDescriptor, tkfont.Font] = OrderedDict()

    def __call__(self, text: str, descriptor: FontDescriptor) -> float:
        return float(self._font_for(descriptor).measure(text))

    def _font_for(self, descriptor: FontDescriptor) -> tkfont.Font:
        font = self._fonts.get(descriptor)
        if font is not None:
            self._fonts.move_to_end(descriptor)
            return font
        font = self._make_font(descriptor)
        self._fonts[descriptor] = font
        # Least recently used fonts go first.
        while len(self._fonts) > self._max_fonts:
            self._fonts.popitem(last=False)
        return font

    def _make_font(self, descriptor: FontDescriptor) -> tkfont.Font:
        return tkfont.Font(
            root=self._master,
            family=descriptor.family,
            size=-descriptor.size,
            weight=descriptor.weight,
            slant=descriptor.slant,
        )
