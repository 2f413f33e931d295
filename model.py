from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Tuple
import logging
import uuid

import config

Point = Tuple[float, float]
Listener = Callable[[], None]

STYLE_FLAGS = {
    "bold": "is_bold",
    "italic": "is_italic",
    "underline": "is_underline",
    "strikethrough": "is_strikethrough",
}

log = logging.getLogger(__name__)


class InvalidInput(ValueError):
    """Raised when user input cannot be applied to the document."""


def parse_font_size(value: object) -> int:
    """Description: Parse font size
    Inputs: value: object (int or numeric string)
    """
    if isinstance(value, bool):
        raise InvalidInput(f"font size must be a number, got {value!r}")
    if isinstance(value, int):
        size = value
    else:
        try:
            size = int(str(value).strip())
        except ValueError:
            raise InvalidInput(f"font size must be a number, got {value!r}") from None
    if size <= 0:
        raise InvalidInput(f"font size must be positive, got {size}")
    return size


def _check_content(content: object) -> str:
    if not isinstance(content, str) or not content.strip():
        raise InvalidInput("text content is blank")
    return content


def _check_font(font_family: object) -> str:
    if not isinstance(font_family, str) or not font_family.strip():
        raise InvalidInput("font family is blank")
    return font_family


@dataclass
class TextObject:
    content: str
    position: Point
    font_family: str
    font_size: int
    is_bold: bool = False
    is_italic: bool = False
    is_underline: bool = False
    is_strikethrough: bool = False
    is_selected: bool = False
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


class Document:
    """Ordered text objects plus the single selection and the active font/size.

    Every mutation goes through the methods below. A method that changes state
    notifies the registered listeners once and returns a truthy value; rejected
    input and no-op calls leave state untouched and return a falsy value.
    """

    def __init__(self, font: str = config.DEFAULT_FONT, font_size: int = config.DEFAULT_FONT_SIZE) -> None:
        self.objects: List[TextObject] = []
        self.selected_index: Optional[int] = None
        self.active_font = _check_font(font)
        self.active_font_size = parse_font_size(font_size)
        self._listeners: List[Listener] = []

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[TextObject]:
        return iter(self.objects)

    @property
    def selected(self) -> Optional[TextObject]:
        """Description: Selected
        Inputs: None
        """
        if self.selected_index is None:
            return None
        return self.objects[self.selected_index]

    def find(self, object_id: str) -> Optional[TextObject]:
        """Description: Find
        Inputs: object_id: str
        """
        for obj in self.objects:
            if obj.id == object_id:
                return obj
        return None

    def index_of(self, object_id: str) -> Optional[int]:
        """Description: Index of
        Inputs: object_id: str
        """
        for index, obj in enumerate(self.objects):
            if obj.id == object_id:
                return index
        return None

    def add_listener(self, callback: Listener) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def add_text(self, content: str, font: Optional[str] = None, size: object = None) -> Optional[str]:
        """Description: Add text
        Inputs: content: str, font: Optional[str], size: int or numeric string
        Returns the new object's id, or None when the input is rejected.
        """
        try:
            content = _check_content(content)
            font_family = _check_font(self.active_font if font is None else font)
            font_size = parse_font_size(self.active_font_size if size is None else size)
        except InvalidInput as exc:
            log.info("Rejected add_text: %s", exc)
            return None
        obj = TextObject(
            content=content,
            position=config.DEFAULT_POSITION,
            font_family=font_family,
            font_size=font_size,
        )
        self.objects.append(obj)
        log.debug("Added text %s %r (%s, %d)", obj.id, content, font_family, font_size)
        self._notify()
        return obj.id

    def select_at(self, index: Optional[int]) -> bool:
        """Description: Select at
        Inputs: index: Optional[int] (None clears the selection)
        """
        if index is not None and not 0 <= index < len(self.objects):
            return False
        if index == self.selected_index:
            return False
        previous = self.selected
        if previous is not None:
            previous.is_selected = False
        self.selected_index = index
        current = self.selected
        if current is not None:
            current.is_selected = True
            self.active_font = current.font_family
            self.active_font_size = current.font_size
        log.debug("Selection -> %s", index)
        self._notify()
        return True

    def move_selected(self, position: Point) -> bool:
        """Description: Move selected
        Inputs: position: Point
        """
        obj = self.selected
        if obj is None:
            return False
        new_position = (float(position[0]), float(position[1]))
        if obj.position == new_position:
            return False
        obj.position = new_position
        self._notify()
        return True

    def toggle_style(self, flag: str) -> bool:
        """Description: Toggle style
        Inputs: flag: str (bold, italic, underline or strikethrough)
        """
        attr = STYLE_FLAGS.get(flag)
        if attr is None:
            log.info("Rejected toggle_style: unknown flag %r", flag)
            return False
        obj = self.selected
        if obj is None:
            return False
        setattr(obj, attr, not getattr(obj, attr))
        log.debug("Toggled %s on %s -> %s", flag, obj.id, getattr(obj, attr))
        self._notify()
        return True

    def set_font(self, font_family: str) -> bool:
        """Description: Set font
        Inputs: font_family: str
        """
        try:
            font_family = _check_font(font_family)
        except InvalidInput as exc:
            log.info("Rejected set_font: %s", exc)
            return False
        obj = self.selected
        if font_family == self.active_font and (obj is None or obj.font_family == font_family):
            return False
        self.active_font = font_family
        if obj is not None:
            obj.font_family = font_family
        self._notify()
        return True

    def set_font_size(self, size: object) -> bool:
        """Description: Set font size
        Inputs: size: int or numeric string
        """
        try:
            font_size = parse_font_size(size)
        except InvalidInput as exc:
            log.info("Rejected set_font_size: %s", exc)
            return False
        obj = self.selected
        if font_size == self.active_font_size and (obj is None or obj.font_size == font_size):
            return False
        self.active_font_size = font_size
        if obj is not None:
            obj.font_size = font_size
        self._notify()
        return True

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback()
