from datetime import date

from PIL import ImageColor

from icon_gen import ACCENT, create_icon_image


def test_icon_size_and_mode():
    img = create_icon_image(date(2023, 9, 7))
    assert img.size == (64, 64)
    assert img.mode == "RGBA"


def test_icon_has_accent_header_and_dark_digits():
    img = create_icon_image(date(2023, 9, 27), size=128)
    accent = ImageColor.getcolor(ACCENT, "RGBA")
    assert img.getpixel((64, 10)) == accent

    body = img.crop((4, 40, 124, 124)).convert("L")
    assert min(body.getdata()) < 100  # digits were drawn
