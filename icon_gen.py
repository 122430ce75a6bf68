"""Generate the window icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

from calendar_logic import iso_week_number

ICON_SIZE = 64
_FONT_CANDIDATES = ("DejaVuSans-Bold.ttf", "segoeuib.ttf", "Arial Bold.ttf")


def _load_font(size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont | None:
    for name in _FONT_CANDIDATES:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return None


def create_icon_image(day: date, dark: bool = False) -> Image.Image:
    """Return a 64×64 RGBA image showing *day*'s ISO week number."""
    size = ICON_SIZE
    bg, fg = ("#202020", "white") if dark else ("white", "black")
    img = Image.new("RGBA", (size, size), bg)
    draw = ImageDraw.Draw(img)

    label = str(iso_week_number(day))

    # Largest font size that fits; bitmap default if no TrueType font exists
    font = None
    font_size = 120
    while font_size > 10:
        font = _load_font(font_size)
        if font is None:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), label, font=font)
        if bbox[2] - bbox[0] <= size and bbox[3] - bbox[1] <= size:
            break
        font_size -= 2

    # Centre the visible pixels, not the font metrics box
    bbox = draw.textbbox((0, 0), label, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = (size - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), label, fill=fg, font=font)

    return img
