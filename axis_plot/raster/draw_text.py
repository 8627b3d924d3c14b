from __future__ import annotations

from functools import lru_cache
import logging
from pathlib import Path
from typing import Iterator

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from axis_plot.raster.canvas import RGBA

LOGGER = logging.getLogger(__name__)

DEFAULT_FONT_FAMILY = "DejaVu Sans Mono"
DEFAULT_FONT_SIZE_PX = 10.0
MONO_FONT_FALLBACKS = ("DejaVu Sans Mono", "Menlo", "Monaco", "Courier New", "Courier")
FONT_SUFFIXES = (".ttf", ".otf", ".ttc")
FONT_DIRS = (
    Path.home() / "Library" / "Fonts",
    Path("/Library/Fonts"),
    Path("/System/Library/Fonts"),
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
)


def draw_text(
    dst: np.ndarray,
    x: int,
    y: int,
    text: str,
    color: RGBA,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
) -> None:
    """Blend ``text`` onto ``dst`` with its top-left corner at ``(x, y)``."""
    if not text:
        return
    font = _load_font(font_family=font_family, font_size_px=font_size_px)
    _blend_mask(dst, x, y, _render_mask(text=text, font=font), color)


def text_size(
    text: str,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
) -> tuple[int, int]:
    font = _load_font(font_family=font_family, font_size_px=font_size_px)
    if not text:
        return (0, 1)
    left, top, right, bottom = font.getbbox(text)
    return (max(0, int(right - left)), max(1, int(bottom - top)))


def _blend_mask(dst: np.ndarray, x: int, y: int, mask: np.ndarray, color: RGBA) -> None:
    h, w = mask.shape
    x0, y0 = max(0, x), max(0, y)
    x1, y1 = min(dst.shape[1], x + w), min(dst.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return

    # Glyph coverage scaled by the text color's alpha, composited "over" dst.
    src_a = mask[y0 - y : y1 - y, x0 - x : x1 - x, None].astype(np.float32) * (color[3] / 65025.0)
    if not src_a.any():
        return
    patch = dst[y0:y1, x0:x1]
    dst_a = patch[:, :, 3:4].astype(np.float32) / 255.0
    out_a = src_a + dst_a * (1.0 - src_a)
    src_rgb = np.asarray(color[:3], dtype=np.float32)
    out_rgb = (src_rgb * src_a + patch[:, :, :3] * dst_a * (1.0 - src_a)) / np.maximum(out_a, 1e-6)
    patch[:, :, :3] = np.clip(out_rgb, 0, 255).astype(np.uint8)
    patch[:, :, 3] = np.clip(out_a[:, :, 0] * 255.0, 0, 255).astype(np.uint8)


@lru_cache(maxsize=128)
def _render_mask(text: str, font: ImageFont.FreeTypeFont | ImageFont.ImageFont) -> np.ndarray:
    left, top, right, bottom = font.getbbox(text)
    width = max(1, int(right - left))
    height = max(1, int(bottom - top))
    image = Image.new("L", (width, height), 0)
    ImageDraw.Draw(image).text((-left, -top), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)


@lru_cache(maxsize=64)
def _load_font(font_family: str, font_size_px: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    size = max(1, int(round(font_size_px)))
    font_path = _resolve_font_path(font_family)
    if font_path is not None:
        try:
            return ImageFont.truetype(str(font_path), size=size)
        except OSError as exc:
            LOGGER.warning("could not load font %s (%s); using Pillow default", font_path, exc)
            return ImageFont.load_default()
    LOGGER.warning("no font matching %r found; using Pillow default", font_family)
    return ImageFont.load_default()


def _resolve_font_path(font_family: str) -> Path | None:
    fonts = list(_font_files())
    for family in (font_family, *MONO_FONT_FALLBACKS):
        key = _font_key(family)
        if not key:
            continue
        for path in fonts:
            if key in _font_key(path.name):
                return path
    return None


def _font_files() -> Iterator[Path]:
    for base in FONT_DIRS:
        if not base.is_dir():
            continue
        for path in base.rglob("*"):
            if path.suffix.lower() in FONT_SUFFIXES:
                yield path


def _font_key(name: str) -> str:
    return name.lower().replace(" ", "").replace("-", "")
