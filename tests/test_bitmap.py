import pytest

from hdrmerge.bitmap import Bitmap


def test_set_and_get_round_trip():
    bm = Bitmap(4, 3)
    bm.set(2, 1)
    assert bm.get(2, 1) is True
    assert bm.get(1, 2) is False
    bm.set(2, 1, False)
    assert bm.get(2, 1) is False


def test_get_out_of_range_raises():
    bm = Bitmap(2, 2)
    with pytest.raises(IndexError):
        bm.get(2, 0)


def test_mtb_marks_pixels_above_threshold():
    bm = Bitmap(2, 2)
    bm.mtb([0, 5, 10, 15], 5)
    assert [bm.get(0, 0), bm.get(1, 0), bm.get(0, 1), bm.get(1, 1)] == [
        False,
        False,
        True,
        True,
    ]


def test_mtb_wrong_length_raises():
    bm = Bitmap(2, 2)
    with pytest.raises(ValueError):
        bm.mtb([1, 2, 3], 1)


def test_exclusion_marks_pixels_outside_tolerance():
    bm = Bitmap(4, 1)
    bm.exclusion([90, 91, 110, 111], 100, 10)
    assert [bm.get(x, 0) for x in range(4)] == [True, False, False, True]


def test_exclusion_bounds_wrap_as_uint16():
    bm = Bitmap(1, 1)
    bm.exclusion([10], 5, 10)
    assert bm.get(0, 0) is True


def test_xor_with_itself_clears_and_and_keeps():
    bm = Bitmap(3, 3)
    bm.set(0, 0)
    bm.set(2, 2)
    other = Bitmap(3, 3)
    other.shift(bm, 0, 0)
    bm.bitwise_and(other)
    assert bm.dump_info() == other.dump_info()
    bm.bitwise_xor(other)
    assert bm.count() == 0


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        Bitmap(2, 2).bitwise_xor(Bitmap(3, 2))


def test_shift_moves_bit_right_and_down():
    src = Bitmap(4, 3)
    src.set(1, 1)
    dst = Bitmap(4, 3)
    dst.shift(src, 1, 0)
    assert dst.get(2, 1) and dst.count() == src.count()
    dst.shift(src, 0, 1)
    assert dst.get(1, 2) and dst.count() == src.count()
    dst.shift(src, -1, -1)
    assert dst.get(0, 0) and dst.count() == src.count()


def test_shift_drops_bits_wrapping_between_rows():
    src = Bitmap(4, 3)
    src.set(3, 0)
    dst = Bitmap(4, 3)
    dst.shift(src, 1, 0)
    assert dst.count() == 0
    src.reset()
    src.set(0, 1)
    dst.shift(src, -1, 0)
    assert dst.count() == 0


def test_shift_drops_bits_moved_outside():
    src = Bitmap(3, 3)
    src.set(1, 2)
    dst = Bitmap(3, 3)
    dst.shift(src, 0, 1)
    assert dst.count() == 0


def test_reset_clears_every_bit():
    bm = Bitmap(5, 5)
    bm.mtb(range(25), -1)
    assert bm.count() == 25
    bm.reset()
    assert bm.count() == 0


def test_dump_info_layout():
    bm = Bitmap(2, 2)
    bm.set(1, 0)
    assert bm.dump_info() == "01\n00\n"


def test_dump_file_writes_pbm(tmp_path):
    bm = Bitmap(2, 2)
    bm.set(0, 0)
    target = tmp_path / "mask"
    bm.dump_file(str(target))
    text = (tmp_path / "mask.pbm").read_text()
    assert text == "P1\n# Foo\n2 2\n 1 0 0 0\n"
    assert bm.count() == 1
    assert bm.dump_info() == "10\n00\n"


def test_resize_clears_and_changes_size():
    bm = Bitmap(2, 2)
    bm.set(1, 1)
    bm.resize(3, 4)
    assert (bm.width, bm.height, bm.count()) == (3, 4, 0)
    with pytest.raises(ValueError):
        bm.resize(-1, 2)