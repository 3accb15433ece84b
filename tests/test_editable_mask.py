import pytest

from hdrmerge.editable_mask import EditableMask, Rect


class FreeMask(EditableMask):
    def is_layer_valid_at(self, layer, x, y):
        return True


class BlockedColumnMask(EditableMask):
    def __init__(self, width, height, blocked_x):
        super().__init__(width, height)
        self.blocked_x = blocked_x

    def is_layer_valid_at(self, layer, x, y):
        return x != self.blocked_x


def _changed(mask, layer):
    return {(x, y) for y in range(mask.height) for x in range(mask.width) if mask[x, y] == layer}


def _bounding_rect(points):
    points = sorted(points)
    rect = Rect.from_point(*points[0])
    for point in points[1:]:
        rect = rect.united(Rect.from_point(*point))
    return rect


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        EditableMask(2, 2)


def test_rect_united_bounds_both():
    a = Rect.from_point(1, 2)
    b = Rect.from_point(3, 0)
    u = a.united(b)
    assert (u.x, u.y) == (1, 0)
    assert (u.x + u.width - 1, u.y + u.height - 1) == (3, 2)


def test_rect_united_with_empty_returns_other():
    a = Rect.from_point(4, 4)
    assert Rect().united(a) == a
    assert a.united(Rect()) == a
    assert Rect().is_empty


def test_edit_moves_disc_to_new_layer():
    mask = FreeMask(5, 5)
    EditableMask.start_action(mask, False, 0)
    EditableMask.edit_pixels(mask, 2, 2, 1)
    assert _changed(mask, 1) == {(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)}


def test_edit_without_action_raises():
    mask = FreeMask(3, 3)
    with pytest.raises(RuntimeError):
        EditableMask.edit_pixels(mask, 1, 1, 1)


def test_undo_and_redo_restore_layers():
    mask = FreeMask(5, 5)
    assert not EditableMask.can_undo(mask) and not EditableMask.can_redo(mask)
    EditableMask.start_action(mask, False, 0)
    EditableMask.edit_pixels(mask, 2, 2, 1)
    edited = _changed(mask, 1)

    area = EditableMask.undo(mask)
    assert _changed(mask, 1) == set()
    assert area == _bounding_rect(edited)
    assert (area.x, area.y, area.width, area.height) == (1, 1, 3, 3)
    assert EditableMask.can_redo(mask) and not EditableMask.can_undo(mask)

    assert EditableMask.redo(mask) == area
    assert _changed(mask, 1) == edited
    assert EditableMask.can_undo(mask) and not EditableMask.can_redo(mask)


def test_undo_with_nothing_returns_empty_rect():
    mask = FreeMask(3, 3)
    assert EditableMask.undo(mask).is_empty
    assert EditableMask.redo(mask).is_empty


def test_add_action_moves_back_to_lower_layer():
    mask = FreeMask(4, 4)
    EditableMask.start_action(mask, False, 0)
    EditableMask.edit_pixels(mask, 1, 1, 2)
    raised = _changed(mask, 1)
    assert raised
    EditableMask.start_action(mask, True, 0)
    EditableMask.edit_pixels(mask, 1, 1, 2)
    assert _changed(mask, 1) == set()
    EditableMask.undo(mask)
    assert _changed(mask, 1) == raised


def test_invalid_layer_positions_are_skipped():
    mask = BlockedColumnMask(5, 5, blocked_x=2)
    EditableMask.start_action(mask, False, 0)
    EditableMask.edit_pixels(mask, 2, 2, 1)
    assert _changed(mask, 1) == {(1, 2), (3, 2)}


def test_new_action_discards_redo_history():
    mask = FreeMask(5, 5)
    EditableMask.start_action(mask, False, 0)
    EditableMask.edit_pixels(mask, 1, 1, 0)
    EditableMask.undo(mask)
    assert EditableMask.can_redo(mask)
    EditableMask.start_action(mask, False, 0)
    assert not EditableMask.can_redo(mask)
    EditableMask.undo(mask)
    assert not EditableMask.can_undo(mask)


def test_reset_forgets_history_but_keeps_pixels():
    mask = FreeMask(3, 3)
    EditableMask.start_action(mask, False, 0)
    EditableMask.edit_pixels(mask, 0, 0, 0)
    EditableMask.reset(mask)
    assert not EditableMask.can_undo(mask) and not EditableMask.can_redo(mask)
    assert _changed(mask, 1) == {(0, 0)}