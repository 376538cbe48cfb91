"""Generate the app / tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

ACCENT = "#0078D4"


def create_icon_image(today: date, size: int = 64) -> Image.Image:
    """Return a calendar-page icon: accent header strip, day of month below."""
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)

    header = size // 4
    draw.rectangle((0, 0, size - 1, header), fill=ACCENT)
    draw.rectangle((0, 0, size - 1, size - 1), outline=ACCENT, width=2)

    text = str(today.day)
    box_h = size - header

    # Find the largest font size that fits below the header
    font_size = 120
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        tw = bbox[2] - bbox[0]
        th = bbox[3] - bbox[1]
        if tw <= size - 8 and th <= box_h - 8:
            break
        font_size -= 1

    # Centre the actual visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = header + (box_h - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
