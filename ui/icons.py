"""
Small images drawn with Pillow at startup: the window icon and the
shield badge shown next to scripts that need administrator rights.
"""

from PIL import Image, ImageDraw, ImageFilter, ImageFont

_TRANSPARENT = (0, 0, 0, 0)
_ACCENT = (66, 133, 244)              # #4285f4
_SHIELD_FILL = (255, 184, 28, 255)     # UAC yellow
_SHIELD_DARK = (40, 88, 180, 255)      # UAC blue
_WHITE = (255, 255, 255, 255)


def _load_mono_bold(size):
    for name in ("consolab.ttf", "consola.ttf", "courbd.ttf", "DejaVuSansMono-Bold.ttf"):
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default()


def _shield_outline(size):
    """Polygon points for a shield filling a size x size box."""
    w = h = size
    top = h * 0.08
    return [
        (w * 0.50, top),
        (w * 0.88, h * 0.20),
        (w * 0.84, h * 0.58),
        (w * 0.50, h * 0.94),
        (w * 0.16, h * 0.58),
        (w * 0.12, h * 0.20),
    ]


def render_shield_badge(size=20):
    """
    Quartered blue/yellow shield, the usual Windows hint that a
    command will ask for administrator consent.
    """
    scale = 4
    big = size * scale
    img = Image.new("RGBA", (big, big), _TRANSPARENT)
    outline = _shield_outline(big)

    mask = Image.new("L", (big, big), 0)
    ImageDraw.Draw(mask).polygon(outline, fill=255)

    quarters = Image.new("RGBA", (big, big), _SHIELD_DARK)
    d = ImageDraw.Draw(quarters)
    half = big // 2
    d.rectangle([half, 0, big, half], fill=_SHIELD_FILL)
    d.rectangle([0, half, half, big], fill=_SHIELD_FILL)

    img.paste(quarters, (0, 0), mask)
    ImageDraw.Draw(img).line(outline + [outline[0]], fill=_WHITE, width=scale)

    return img.resize((size, size), Image.Resampling.LANCZOS)


def render_app_icon(size=64):
    """Blue '>_' prompt glyph with a soft glow, for the title bar."""
    img = Image.new("RGBA", (size, size), _TRANSPARENT)

    bg = Image.new("RGBA", (size, size), _TRANSPARENT)
    ImageDraw.Draw(bg).rounded_rectangle(
        [1, 1, size - 2, size - 2], radius=max(2, size // 6),
        fill=(30, 30, 30, 255), outline=(*_ACCENT, 255), width=max(1, size // 24),
    )
    img = Image.alpha_composite(img, bg)

    font = _load_mono_bold(int(size * 0.5))
    cx, cy = size // 2, size // 2

    glow = Image.new("RGBA", (size, size), _TRANSPARENT)
    ImageDraw.Draw(glow).text((cx, cy), ">_", font=font, fill=(*_ACCENT, 200), anchor="mm")
    glow = glow.filter(ImageFilter.GaussianBlur(max(1, size // 20)))
    img = Image.alpha_composite(img, glow)

    core = Image.new("RGBA", (size, size), _TRANSPARENT)
    ImageDraw.Draw(core).text((cx, cy), ">_", font=font, fill=_WHITE, anchor="mm")
    return Image.alpha_composite(img, core)
