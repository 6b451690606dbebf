"""Tests for default slot generation and photo assignment."""

import pytest

from framebooth.errors import UnsupportedLayoutError
from framebooth.models.frame import FramePreset, LayoutKind, PhotoSlot, SlotSize
from framebooth.services.layout import (
    LAYOUT_GENERATORS,
    SAFE_ZONE,
    generate_default_slots,
    photo_sequence,
    scale_slots,
)
from framebooth.services.presets import get_all_presets, get_preset

EPS = 1e-9


@pytest.mark.parametrize("preset", get_all_presets(), ids=lambda p: p.name)
def test_every_preset_fits_the_safe_zone(preset: FramePreset) -> None:
    slots = generate_default_slots(preset)

    assert len(slots) == preset.total_slots
    assert len({slot.id for slot in slots}) == len(slots)
    for slot in slots:
        assert slot.x >= 0
        assert slot.y >= 0
        assert slot.right <= 100 + EPS
        assert slot.bottom <= SAFE_ZONE + EPS


def test_every_layout_kind_has_a_generator() -> None:
    assert set(LAYOUT_GENERATORS) == set(LayoutKind)


def test_generation_is_deterministic() -> None:
    preset = get_preset(5)

    assert generate_default_slots(preset) == generate_default_slots(preset)


def test_single_slot_is_centered() -> None:
    preset = get_preset(1)
    (slot,) = generate_default_slots(preset)

    assert slot.x == pytest.approx(100 - slot.right)
    assert slot.y == pytest.approx(SAFE_ZONE - slot.bottom)
    assert (slot.width, slot.height) == (84, 80)


def test_vertical_slots_use_five_percent_gap() -> None:
    top, bottom = generate_default_slots(get_preset(2))

    assert bottom.y - top.bottom == pytest.approx(5)
    assert top.y == pytest.approx(SAFE_ZONE - bottom.bottom)
    assert top.x == bottom.x == pytest.approx(5)


@pytest.mark.parametrize("key", [3, 4])
def test_strip_block_is_centered_in_safe_zone(key: int) -> None:
    preset = get_preset(key)
    slots = generate_default_slots(preset)
    count = preset.photo_count
    slot_height = preset.default_slot_size.height

    block_height = count * slot_height + (count - 1) * 3
    assert slots[-1].bottom - slots[0].y == pytest.approx(block_height)
    assert slots[0].y == pytest.approx((SAFE_ZONE - block_height) / 2)
    assert SAFE_ZONE - slots[-1].bottom == pytest.approx(slots[0].y)
    for upper, lower in zip(slots, slots[1:]):
        assert lower.y - upper.bottom == pytest.approx(3)
    assert [slot.id for slot in slots] == list(range(1, count + 1))


def test_double_strip_is_two_columns_by_four_rows() -> None:
    preset = get_preset(5)
    slots = generate_default_slots(preset)
    size = preset.default_slot_size

    for slot in slots:
        row, col = divmod(slot.id - 1, 2)
        assert slots[slot.id - 1] is slot
        assert slot.width == size.width
        assert slot.height == size.height
        assert slot.x == pytest.approx(slots[col].x)
        assert slot.y == pytest.approx(slots[row * 2].y)
    assert slots[1].x - slots[0].right == pytest.approx(4)
    assert slots[2].y - slots[0].bottom == pytest.approx(2)
    assert slots[0].x == pytest.approx(100 - slots[1].right)
    assert slots[0].y == pytest.approx(SAFE_ZONE - slots[-1].bottom)


def test_double_strip_landscape_is_four_columns_by_two_rows() -> None:
    slots = generate_default_slots(get_preset(6))

    first_row = slots[:4]
    second_row = slots[4:]
    assert len({slot.y for slot in first_row}) == 1
    assert len({slot.y for slot in second_row}) == 1
    for left, right in zip(first_row, first_row[1:]):
        assert right.x - left.right == pytest.approx(2)
    assert second_row[0].y - first_row[0].bottom == pytest.approx(4)
    assert [slot.x for slot in first_row] == pytest.approx([slot.x for slot in second_row])
    assert slots[0].x == pytest.approx(100 - slots[3].right)
    assert [slot.id for slot in slots] == list(range(1, 9))


def test_legacy_grid_is_top_left_anchored_squares() -> None:
    preset = FramePreset(
        id=0,
        photo_count=4,
        layout=LayoutKind.grid,
        aspect_ratio=1,
        default_slot_size=SlotSize(width=40, height=40),
    )

    slots = generate_default_slots(preset)

    assert [s.x for s in slots] == pytest.approx([4, 52, 4, 52])
    assert [s.y for s in slots] == pytest.approx([3, 3, 51, 51])
    assert max(s.bottom for s in slots) <= SAFE_ZONE + EPS
    assert all(s.width == s.height == 44 for s in slots)


def test_pixel_space_matches_percent_space() -> None:
    preset = get_preset(3)
    percent = generate_default_slots(preset)

    pixels = generate_default_slots(preset, 600, 1800)

    for p, px in zip(percent, pixels):
        assert px.id == p.id
        assert px.x == pytest.approx(p.x * 6)
        assert px.y == pytest.approx(p.y * 18)
        assert px.width == pytest.approx(p.width * 6)
        assert px.height == pytest.approx(p.height * 18)


def test_scale_slots_leaves_input_untouched() -> None:
    slots = [PhotoSlot(id=1, x=10, y=20, width=30, height=40, radius=8)]

    scaled = scale_slots(slots, 200, 50)

    assert slots[0] == PhotoSlot(id=1, x=10, y=20, width=30, height=40, radius=8)
    assert (scaled[0].x, scaled[0].y, scaled[0].width, scaled[0].height) == (20, 10, 60, 20)
    assert scaled[0].radius == 8


def test_double_strip_sequence_duplicates_each_photo() -> None:
    assert photo_sequence(LayoutKind.double_strip, 4) == [0, 0, 1, 1, 2, 2, 3, 3]


def test_double_strip_landscape_sequence_repeats_the_set() -> None:
    assert photo_sequence(LayoutKind.double_strip_landscape, 4) == [0, 1, 2, 3, 0, 1, 2, 3]


@pytest.mark.parametrize("layout", [LayoutKind.single, LayoutKind.strip, LayoutKind.vertical])
def test_regular_sequence_is_one_to_one(layout: LayoutKind) -> None:
    assert photo_sequence(layout, 3) == [0, 1, 2]


@pytest.mark.parametrize("layout", [LayoutKind.double_strip, LayoutKind.double_strip_landscape])
@pytest.mark.parametrize("photo_total", [1, 3, 5])
def test_double_strip_rejects_other_photo_counts(layout: LayoutKind, photo_total: int) -> None:
    with pytest.raises(UnsupportedLayoutError):
        photo_sequence(layout, photo_total)
