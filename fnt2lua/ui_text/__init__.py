"""
UI text lookup for fnt2lua.

Usage:
    from .ui_text import tr

    label = tr("button.convert")               # "⚡ Convert"
    message = tr("status.saved", path="a.lua")  # "✅ Saved to a.lua"
"""

from .strings import STRINGS


def tr(key: str, **kwargs) -> str:
    """
    Get the UI string for a key.

    Args:
        key: Key using dot notation (e.g., "status.saved")
        **kwargs: Format arguments for string interpolation

    Returns:
        The string, or the key itself if not found
    """
    value = STRINGS
    for k in key.split("."):
        if isinstance(value, dict):
            value = value.get(k)
        else:
            value = None
            break

    if not isinstance(value, str):
        return key

    if kwargs:
        try:
            return value.format(**kwargs)
        except (KeyError, ValueError, IndexError):
            return value

    return value
