# Pointer interaction: hit-testing and drag tracking.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
import logging

from fonts import FontDescriptor, Measure
from model import Document, TextObject

Point = Tuple[float, float]

log = logging.getLogger(__name__)


def text_bounds(obj: TextObject, measure: Measure) -> Tuple[Point, Point]:
    """Description: Text bounds
    Inputs: obj: TextObject, measure: Measure
    Returns the top-left and bottom-right corners of the rendered text.
    """
    width = measure(obj.content, FontDescriptor.for_object(obj))
    x, y = obj.position
    return (x, y), (x + width, y + obj.font_size)


def hit_test(objects: Sequence[TextObject], point: Point, measure: Measure) -> Optional[int]:
    """Description: Hit test
    Inputs: objects: Sequence[TextObject], point: Point, measure: Measure

    Returns the index of the first object, in storage order, whose box contains
    the point (bounds inclusive). Later objects paint on top of earlier ones,
    so under overlap this picks the one underneath.
    """
    px, py = point
    for index, obj in enumerate(objects):
        (left, top), (right, bottom) = text_bounds(obj, measure)
        if left <= px <= right and top <= py <= bottom:
            return index
    return None


@dataclass(frozen=True)
class DragSession:
    target_index: int
    grab_offset: Point


class CanvasController:
    def __init__(self, document: Document, measure: Measure) -> None:
        """Description: Init
        Inputs: document: Document, measure: Measure
        """
        self._document = document
        self._measure = measure
        self._session: Optional[DragSession] = None

    @property
    def session(self) -> Optional[DragSession]:
        return self._session

    @property
    def is_dragging(self) -> bool:
        return self._session is not None

    def pointer_down(self, x: float, y: float) -> Optional[int]:
        """Description: Pointer down
        Inputs: x: float, y: float
        Returns the hit index, or None when the pointer missed every object.
        """
        hit = hit_test(self._document.objects, (x, y), self._measure)
        if hit is None:
            self._session = None
            self._document.select_at(None)
            return None
        self._document.select_at(hit)
        anchor = self._document.objects[hit].position
        self._session = DragSession(target_index=hit, grab_offset=(x - anchor[0], y - anchor[1]))
        log.debug("Drag start on %d, grab offset %s", hit, self._session.grab_offset)
        return hit

    def pointer_move(self, x: float, y: float) -> bool:
        """Description: Pointer move
        Inputs: x: float, y: float
        """
        if self._session is None:
            return False
        dx, dy = self._session.grab_offset
        return self._document.move_selected((x - dx, y - dy))

    def pointer_up(self) -> None:
        """Description: Pointer up
        Inputs: None
        """
        if self._session is None:
            return
        log.debug("Drag end on %d", self._session.target_index)
        self._session = None
