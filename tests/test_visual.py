import pytest

from cubray.visual import good_color, rgb_shifts


def test_rgb_shifts_for_888_visual():
    assert rgb_shifts(0xFF0000, 0xFF00, 0xFF) == (16, 8, 8, 8, 0, 8)


def test_rgb_shifts_for_565_visual():
    assert rgb_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


@pytest.mark.parametrize("masks", [(0, 0xFF00, 0xFF), (0xFF0000, 0, 0xFF), (0xFF0000, 0xFF00, -1)])
def test_rgb_shifts_rejects_empty_mask(masks):
    with pytest.raises(ValueError):
        rgb_shifts(*masks)


@pytest.mark.parametrize("depth", [24, 32])
def test_deep_visual_keeps_colour(depth):
    shifts = rgb_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(0x123456, depth, shifts) == 0x123456


def test_shallow_visual_with_full_channels_round_trips():
    shifts = rgb_shifts(0xFF0000, 0xFF00, 0xFF)
    assert good_color(0x123456, 16, shifts) == 0x123456


@pytest.mark.parametrize(
    "color, mask",
    [(0xFF0000, 0xF800), (0x00FF00, 0x07E0), (0x0000FF, 0x001F)],
)
def test_pure_channels_fill_their_mask(color, mask):
    shifts = rgb_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(color, 16, shifts) == mask


def test_white_and_black_on_565():
    shifts = rgb_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(0xFFFFFF, 16, shifts) == 0xF800 | 0x07E0 | 0x001F
    assert good_color(0, 16, shifts) == 0


def test_result_stays_inside_masks():
    masks = (0xF800, 0x07E0, 0x001F)
    shifts = rgb_shifts(*masks)
    allowed = masks[0] | masks[1] | masks[2]
    for color in (0x102030, 0xABCDEF, 0x7F7F7F, 0xFEDCBA):
        assert good_color(color, 16, shifts) & ~allowed == 0