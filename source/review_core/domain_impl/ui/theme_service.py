from typing import Any


def theme_palette_for_variant(variant: Any) -> Any:
    use_variant = str(variant).upper()
    match use_variant:
        case "LIGHT":
            return {
                "bg": "#ffffff",
                "fg": "#222222",
                "panel": "#ffffff",
                "name_fg": "#58a4f6",
                "value_fg": "#666666",
                "link_fg": "#1a73e8",
                "marker_fg": "#444444",
                "select_bg": "#e8f0fe",
                "select_fg": "#222222",
                "overlay_bg": "#ffffff",
                "overlay_fg": "#222222",
                "overlay_border": "#cccccc",
                "close_fg": "#888888",
                "grip_fg": "#bbbbbb",
                "error_bg": "#fdecea",
                "error_fg": "#8a1c12",
                "error_border": "#e0837a",
            }
        case _:
            return {
                "bg": "#0f131a",
                "fg": "#e6e6e6",
                "panel": "#161b24",
                "name_fg": "#58a4f6",
                "value_fg": "#9aa7b4",
                "link_fg": "#6aa9ff",
                "marker_fg": "#d7f2ff",
                "select_bg": "#2f3a4d",
                "select_fg": "#ffffff",
                "overlay_bg": "#11161f",
                "overlay_fg": "#e6e6e6",
                "overlay_border": "#264b64",
                "close_fg": "#888888",
                "grip_fg": "#6c7a89",
                "error_bg": "#2a1215",
                "error_fg": "#ffd7d7",
                "error_border": "#c24b55",
            }


def hex_to_rgba(color: Any, alpha: int = 255) -> tuple[int, int, int, int]:
    text = str(color or "").strip().lstrip("#")
    if len(text) == 3:
        text = "".join(ch * 2 for ch in text)
    if len(text) != 6:
        return (0, 0, 0, int(alpha))
    return (int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16), int(alpha))
