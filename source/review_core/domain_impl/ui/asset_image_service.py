"""Pillow-drawn tree markers and the preview resize grip."""

from typing import Any

from PIL import Image, ImageDraw, ImageTk

from review_core.domain_impl.ui import theme_service

_SCALE = 4


def _finish(canvas: Any, width: int, height: int) -> Any:
    return canvas.resize((width, height), Image.Resampling.LANCZOS)


def draw_marker_image(expanded: bool, color: Any, size: int = 12) -> Any:
    """Filled triangle: pointing down when expanded, right when collapsed."""
    w = h = int(size) * _SCALE
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    pad = 2 * _SCALE
    if expanded:
        points = [(pad, pad * 2), (w - pad, pad * 2), (w // 2, h - pad * 2)]
    else:
        points = [(pad * 2, pad), (w - pad * 2, h // 2), (pad * 2, h - pad)]
    draw.polygon(points, fill=theme_service.hex_to_rgba(color))
    return _finish(canvas, int(size), int(size))


def draw_resize_grip_image(color: Any, size: int = 16) -> Any:
    """Bottom-right corner bracket matching the overlay grip affordance."""
    w = h = int(size) * _SCALE
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    stroke = 2 * _SCALE
    rgba = theme_service.hex_to_rgba(color)
    draw.rounded_rectangle(
        (w - stroke - 1, 0, w - 1, h - 1),
        radius=stroke // 2,
        fill=rgba,
    )
    draw.rounded_rectangle(
        (0, h - stroke - 1, w - 1, h - 1),
        radius=stroke // 2,
        fill=rgba,
    )
    return _finish(canvas, int(size), int(size))


def _bounded_cache_put(cache: dict, key: Any, value: Any, max_items: int = 16) -> None:
    if key not in cache and len(cache) >= max(1, int(max_items)):
        cache.pop(next(iter(cache)))
    cache[key] = value


def cached_photo(owner: Any, key: Any, build_image_fn: Any, master: Any = None) -> Any:
    """Build a PhotoImage once per key; Tk drops images with no Python reference."""
    cache = getattr(owner, "_asset_photo_cache", None)
    if not isinstance(cache, dict):
        cache = {}
        owner._asset_photo_cache = cache
    cached = cache.get(key)
    if cached is not None:
        return cached
    photo = ImageTk.PhotoImage(build_image_fn(), master=master)
    _bounded_cache_put(cache, key, photo)
    return photo


def marker_photo(owner: Any, expanded: bool, color: Any, size: int = 12, master: Any = None) -> Any:
    key = ("marker", bool(expanded), str(color), int(size))
    return cached_photo(owner, key, lambda: draw_marker_image(expanded, color, size), master=master)


def grip_photo(owner: Any, color: Any, size: int = 16, master: Any = None) -> Any:
    key = ("grip", str(color), int(size))
    return cached_photo(owner, key, lambda: draw_resize_grip_image(color, size), master=master)
