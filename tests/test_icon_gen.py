"""Tests for the window icon image."""

from __future__ import annotations

from datetime import date

from icon_gen import ICON_SIZE, create_icon_image


def _ink_pixels(img, background: tuple[int, int, int, int]) -> int:
    return sum(1 for px in img.getdata() if px != background)


class TestCreateIconImage:
    def test_size_and_mode(self) -> None:
        img = create_icon_image(date(2024, 2, 29))
        assert img.size == (ICON_SIZE, ICON_SIZE)
        assert img.mode == "RGBA"

    def test_week_number_is_drawn(self) -> None:
        img = create_icon_image(date(2024, 2, 29))
        assert _ink_pixels(img, (255, 255, 255, 255)) > 0

    def test_dark_background(self) -> None:
        img = create_icon_image(date(2024, 2, 29), dark=True)
        assert img.getpixel((0, 0)) == (0x20, 0x20, 0x20, 255)

    def test_different_weeks_render_differently(self) -> None:
        week_1 = create_icon_image(date(2024, 1, 1))
        week_52 = create_icon_image(date(2023, 12, 31))
        assert week_1.tobytes() != week_52.tobytes()
