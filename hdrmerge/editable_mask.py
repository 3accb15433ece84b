"""A layer mask that records brush edits so they can be undone and redone."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from hdrmerge.array2d import Array2D


@dataclass(frozen=True)
class Rect:
    """An axis aligned rectangle; empty when either side is not positive."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def from_point(cls, x: int, y: int) -> Rect:
        return cls(x, y, 1, 1)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def united(self, other: Rect) -> Rect:
        """The smallest rectangle holding both rectangles."""
        if self.is_empty:
            return other
        if other.is_empty:
            return self
        left = min(self.x, other.x)
        top = min(self.y, other.y)
        right = max(self.x + self.width, other.x + other.width)
        bottom = max(self.y + self.height, other.y + other.height)
        return Rect(left, top, right - left, bottom - top)


@dataclass
class _EditAction:
    old_layer: int
    new_layer: int
    points: list[tuple[int, int]] = field(default_factory=list)


class EditableMask(Array2D, ABC):
    """Per-pixel layer indices with an undoable history of brush strokes."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        super().__init__(width, height, 0)
        self._actions: list[_EditAction] = []
        self._next_action = 0

    def reset(self) -> None:
        """Forget the edit history."""
        self._actions.clear()
        self._next_action = 0

    def start_action(self, add: bool, layer: int) -> None:
        """Begin a stroke that moves pixels between ``layer`` and ``layer + 1``."""
        del self._actions[self._next_action :]
        if add:
            action = _EditAction(old_layer=layer + 1, new_layer=layer)
        else:
            action = _EditAction(old_layer=layer, new_layer=layer + 1)
        self._actions.append(action)
        self._next_action = len(self._actions)

    def edit_pixels(self, x: int, y: int, radius: int) -> None:
        """Apply the current stroke to a disc around ``(x, y)``."""
        if not self._actions:
            raise RuntimeError("no edit action has been started")
        action = self._actions[-1]
        for col, row in self.trace_circle(x, y, radius):
            if self[col, row] == action.old_layer and self.is_layer_valid_at(
                action.new_layer, col, row
            ):
                action.points.append((col, row))
                self[col, row] = action.new_layer

    def can_undo(self) -> bool:
        return self._next_action > 0

    def can_redo(self) -> bool:
        return self._next_action < len(self._actions)

    def undo(self) -> Rect:
        """Revert the last applied stroke and return the area it touched."""
        if not self.can_undo():
            return Rect()
        self._next_action -= 1
        action = self._actions[self._next_action]
        return self._modify_layer(action.points, action.old_layer)

    def redo(self) -> Rect:
        """Reapply the next undone stroke and return the area it touched."""
        if not self.can_redo():
            return Rect()
        action = self._actions[self._next_action]
        self._next_action += 1
        return self._modify_layer(action.points, action.new_layer)

    def _modify_layer(self, points: list[tuple[int, int]], layer: int) -> Rect:
        area = Rect()
        for x, y in points:
            self[x, y] = layer
            area = area.united(Rect.from_point(x, y))
        return area

    @abstractmethod
    def is_layer_valid_at(self, layer: int, x: int, y: int) -> bool:
        """Whether ``layer`` may be shown at ``(x, y)``."""